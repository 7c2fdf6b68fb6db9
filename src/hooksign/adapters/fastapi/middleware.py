"""FastAPI adapter – ASGI middleware implementations.

FastAPIWebhookSignatureMiddleware  raw-body capture + HMAC verification
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from hooksign.application.pipeline import Request, Response
from hooksign.application.webhooks import (
    WRONG_SIGNATURE_RESPONSE,
    Selector,
    WebhookSignatureVerifier,
    selector_predicate,
)
from hooksign.observability.logging import get_logger

if TYPE_CHECKING:
    from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = get_logger(__name__)


def _require_fastapi() -> None:
    try:
        import fastapi  # noqa: F401
    except ImportError as exc:
        raise ImportError(
            "Install 'hooksign[fastapi]' to use the FastAPI adapter"
        ) from exc


async def _drain(receive: "Receive") -> bytes:
    chunks: list[bytes] = []
    while True:
        message = await receive()
        if message["type"] != "http.request":
            break
        chunks.append(message.get("body", b""))
        if not message.get("more_body", False):
            break
    return b"".join(chunks)


async def _send_response(send: "Send", response: Response) -> None:
    body = response.body.encode("utf-8") if isinstance(response.body, str) else bytes(response.body)
    headers = [
        (name.lower().encode("latin-1"), value.encode("latin-1"))
        for name, value in response.headers.items()
    ]
    headers.append((b"content-length", str(len(body)).encode()))
    await send({"type": "http.response.start", "status": response.status, "headers": headers})
    await send({"type": "http.response.body", "body": body})


class FastAPIWebhookSignatureMiddleware:
    """Verify webhook body signatures before the request reaches a route.

    The request body is buffered in full, checked with *verifier*, and then
    replayed to the inner app, so route handlers can still call
    ``await request.body()`` or parse JSON.

    Parameters
    ----------
    app:
        The inner ASGI application.
    verifier:
        A configured :class:`WebhookSignatureVerifier`.
    selector:
        URI predicate or collection of paths to protect. ``None`` protects
        every HTTP request.
    """

    def __init__(
        self,
        app: "ASGIApp",
        verifier: WebhookSignatureVerifier,
        selector: Selector | None = None,
    ) -> None:
        _require_fastapi()
        self.app = app
        self._verifier = verifier
        self._matches = selector_predicate(selector) if selector is not None else None

    def _selected(self, path: str) -> bool:
        return self._matches is None or self._matches(path)

    async def __call__(self, scope: "Scope", receive: "Receive", send: "Send") -> None:
        if scope["type"] != "http" or not self._selected(scope.get("path", "")):
            await self.app(scope, receive, send)
            return

        body = await _drain(receive)
        headers = {
            name.decode("latin-1"): value.decode("latin-1")
            for name, value in scope.get("headers", [])
        }
        request = Request(
            uri=scope.get("path", ""),
            headers=headers,
            method=scope.get("method", "POST"),
            content_length=len(body),
        ).with_raw_body(body)

        if not self._verifier.verify(request):
            await _send_response(send, WRONG_SIGNATURE_RESPONSE)
            return

        replayed = False

        async def replay() -> "Message":
            nonlocal replayed
            if not replayed:
                replayed = True
                return {"type": "http.request", "body": body, "more_body": False}
            return await receive()

        logger.debug("webhook.signature.accepted", uri=request.uri, size=len(body))
        await self.app(scope, replay, send)


__all__ = ["FastAPIWebhookSignatureMiddleware"]
