"""Application – request pipeline and webhook middleware (framework-agnostic)."""

from hooksign.application.pipeline import Middleware, Pipeline, Request, Response
from hooksign.application.webhooks import (
    WRONG_SIGNATURE_RESPONSE,
    RawBodyCapture,
    WebhookSettings,
    WebhookSignatureVerifier,
    WebhookSigner,
)

__all__ = [
    "Middleware",
    "Pipeline",
    "RawBodyCapture",
    "Request",
    "Response",
    "WRONG_SIGNATURE_RESPONSE",
    "WebhookSettings",
    "WebhookSignatureVerifier",
    "WebhookSigner",
]
