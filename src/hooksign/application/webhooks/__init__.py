"""Application webhooks – raw-body capture, signature verification and signing."""
from hooksign.application.webhooks.raw_body import RawBodyCapture, Selector, selector_predicate
from hooksign.application.webhooks.settings import WebhookSettings
from hooksign.application.webhooks.signature import (
    WebhookSigner,
    constant_time_equals,
    identity,
    lower_hex,
    strip_prefix,
    upper_hex,
)
from hooksign.application.webhooks.verification import (
    WRONG_SIGNATURE_RESPONSE,
    WebhookSignatureVerifier,
)

__all__ = [
    "RawBodyCapture",
    "Selector",
    "WRONG_SIGNATURE_RESPONSE",
    "WebhookSettings",
    "WebhookSignatureVerifier",
    "WebhookSigner",
    "constant_time_equals",
    "identity",
    "lower_hex",
    "selector_predicate",
    "strip_prefix",
    "upper_hex",
]
