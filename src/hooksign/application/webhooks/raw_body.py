"""Application webhooks – RawBodyCapture middleware.

Webhook signatures cover the exact bytes the sender transmitted. This
middleware drains the body stream of selected requests into
``Request.raw_body`` and puts a fresh stream over the same bytes in place,
so handlers further down can still parse the body. Add it early in the
chain, before anything that reads the body.
"""
from __future__ import annotations

import contextlib
from collections.abc import Callable, Collection
from typing import Any, BinaryIO, Union

from hooksign.application.pipeline import Handler, Middleware, Raise, Request, Respond, invoke
from hooksign.observability.logging import get_logger

logger = get_logger(__name__)

Selector = Union[Callable[[str], bool], Collection[str]]


def selector_predicate(selector: Selector) -> Callable[[str], bool]:
    """Turn a URI predicate or a collection of URIs into a predicate."""
    if callable(selector):
        return selector
    if isinstance(selector, str):
        return frozenset({selector}).__contains__
    return frozenset(selector).__contains__


def _declared_length(request: Request) -> int | None:
    if request.content_length is not None:
        return request.content_length if request.content_length >= 0 else None
    raw = request.header("content-length")
    if raw is None:
        return None
    try:
        length = int(raw)
    except ValueError:
        return None
    return length if length >= 0 else None


def _read_exactly(stream: BinaryIO, length: int) -> bytes:
    chunks: list[bytes] = []
    remaining = length
    while remaining > 0:
        chunk = stream.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


class RawBodyCapture(Middleware):
    """Capture the raw body of requests whose URI matches *selector*.

    *selector* is a predicate over the request URI or a collection of URIs.
    """

    def __init__(self, selector: Selector) -> None:
        self._matches = selector_predicate(selector)

    @classmethod
    def from_settings(cls, settings: Any) -> RawBodyCapture:
        """Capture ``settings.paths``, or every URI when no paths are configured."""
        paths = list(getattr(settings, "paths", None) or [])
        if not paths:
            return cls(lambda uri: True)
        return cls(paths)

    def capture(self, request: Request) -> Request:
        """Return *request* with ``raw_body`` set, or unchanged if not selected."""
        if request.raw_body is not None or not self._matches(request.uri):
            return request
        if request.body is None:
            raw = b""
        else:
            length = _declared_length(request)
            with contextlib.closing(request.body) as stream:
                raw = stream.read() if length is None else _read_exactly(stream, length)
        logger.debug("webhook.raw_body.captured", uri=request.uri, size=len(raw))
        return request.with_raw_body(raw)

    def process(
        self,
        handler: Handler,
        request: Request,
        respond: Respond | None,
        raise_: Raise | None,
    ) -> Any:
        return invoke(handler, self.capture(request), respond, raise_)


__all__ = ["RawBodyCapture", "Selector", "selector_predicate"]
