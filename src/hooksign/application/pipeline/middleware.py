"""Application pipeline – Middleware base and the two handler shapes.

A handler is called either directly, ``handler(request) -> response``, or in
continuation-passing style, ``handler(request, respond, raise_)``, where the
response is handed to ``respond`` and errors to ``raise_``. Middleware built
on :class:`Middleware` accepts both and runs the same :meth:`Middleware.process`
for each.
"""
from __future__ import annotations

import abc
from collections.abc import Callable
from typing import Any

from hooksign.application.pipeline.request import Request, Response

Handler = Callable[..., Any]
Respond = Callable[[Any], Any]
Raise = Callable[[BaseException], Any]


def invoke(handler: Handler, request: Request, respond: Respond | None, raise_: Raise | None) -> Any:
    """Call *handler* in the same shape the caller used."""
    if respond is None:
        return handler(request)
    return handler(request, respond, raise_)


def reply(response: Response, respond: Respond | None) -> Any:
    """Return *response* directly, or pass it to the success continuation."""
    if respond is None:
        return response
    respond(response)
    return None


class Middleware(abc.ABC):
    """Single node in the middleware chain: ``middleware(handler) -> handler``."""

    @abc.abstractmethod
    def process(
        self,
        handler: Handler,
        request: Request,
        respond: Respond | None,
        raise_: Raise | None,
    ) -> Any: ...

    def wrap(self, handler: Handler) -> Handler:
        def wrapped(request: Request, respond: Respond | None = None, raise_: Raise | None = None) -> Any:
            if (respond is None) != (raise_ is None):
                raise TypeError("respond and raise_ must be given together")
            return self.process(handler, request, respond, raise_)

        wrapped.__wrapped__ = handler  # type: ignore[attr-defined]
        return wrapped

    def __call__(self, handler: Handler) -> Handler:
        return self.wrap(handler)


__all__ = ["Handler", "Middleware", "Raise", "Respond", "invoke", "reply"]
