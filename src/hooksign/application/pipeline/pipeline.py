"""Application pipeline – Pipeline class."""
from __future__ import annotations

from collections.abc import Callable

from hooksign.application.pipeline.middleware import Handler

MiddlewareFn = Callable[[Handler], Handler]


class Pipeline:
    """Builds an ordered chain of middleware around a handler.

    The first middleware added sees the request first, so raw-body capture
    must be added before signature verification::

        app = (
            Pipeline()
            .add(RawBodyCapture({"/webhooks/github"}))
            .add(WebhookSignatureVerifier(secret=..., signature_header="x-hub-signature-256"))
            .wrap(handler)
        )
    """

    def __init__(self) -> None:
        self._middlewares: list[MiddlewareFn] = []

    def add(self, middleware: MiddlewareFn) -> "Pipeline":
        """Append a middleware (fluent API)."""
        self._middlewares.append(middleware)
        return self

    def wrap(self, handler: Handler) -> Handler:
        """Return *handler* wrapped by every middleware, outermost first."""
        chain = handler
        for mw in reversed(self._middlewares):
            chain = mw(chain)
        return chain


__all__ = ["MiddlewareFn", "Pipeline"]
