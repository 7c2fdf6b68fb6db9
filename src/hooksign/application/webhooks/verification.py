"""Application webhooks – WebhookSignatureVerifier middleware.

Recomputes the HMAC of ``Request.raw_body`` and compares its hex form with
the signature the sender put in a header. Requests that fail never reach the
wrapped handler; they get :data:`WRONG_SIGNATURE_RESPONSE` whether the
signature was missing or wrong. Must run after
:class:`~hooksign.application.webhooks.RawBodyCapture`.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Any

from hooksign.application.pipeline import (
    Handler,
    Middleware,
    Raise,
    Request,
    Respond,
    Response,
    invoke,
    reply,
)
from hooksign.application.webhooks.signature import (
    HexFormat,
    SignatureEquals,
    SignatureTransform,
    constant_time_equals,
    identity,
    lower_hex,
    strip_prefix,
)
from hooksign.config.validation import MissingRequiredSettingError
from hooksign.observability.logging import get_logger
from hooksign.security.hmac import KeyedSigner, SecretLike

logger = get_logger(__name__)

WRONG_SIGNATURE_RESPONSE = Response(
    status=403,
    body="Signature either wrong, or missing!",
    headers=MappingProxyType({"Content-Type": "text/plain"}),
)


class WebhookSignatureVerifier(Middleware):
    """Reject requests whose body signature does not match.

    Parameters
    ----------
    secret:
        HMAC key: ``str``, bytes-like, or a sequence of byte values. Mandatory.
    signature_header:
        Name of the header carrying the sender's signature. Mandatory.
    mac_algorithm:
        ``"HmacSHA256"`` (default), ``"HmacSHA384"``, ``"HmacSHA512"``, ...
    signature_transform:
        Applied to the header value before comparing, e.g.
        ``strip_prefix("sha256=")``. Returning ``None`` fails verification.
    signature_equals:
        ``(provided, expected) -> bool``; defaults to constant-time equality.
    hex_format:
        Renders the computed digest; defaults to lowercase hex.
    """

    def __init__(
        self,
        *,
        secret: SecretLike | None = None,
        signature_header: str | None = None,
        mac_algorithm: str = "HmacSHA256",
        signature_transform: SignatureTransform = identity,
        signature_equals: SignatureEquals = constant_time_equals,
        hex_format: HexFormat = lower_hex,
    ) -> None:
        if secret is None:
            raise MissingRequiredSettingError("secret")
        if not signature_header:
            raise MissingRequiredSettingError("signature_header")
        self._signer = KeyedSigner(mac_algorithm, secret)
        self._header = signature_header
        self._transform = signature_transform
        self._equals = signature_equals
        self._hex_format = hex_format

    @classmethod
    def from_settings(cls, settings: Any) -> WebhookSignatureVerifier:
        prefix = getattr(settings, "signature_prefix", "")
        return cls(
            secret=settings.secret,
            signature_header=settings.signature_header,
            mac_algorithm=settings.mac_algorithm,
            signature_transform=strip_prefix(prefix) if prefix else identity,
        )

    @property
    def signature_header(self) -> str:
        return self._header

    def _failure_reason(self, request: Request) -> str | None:
        if request.raw_body is None:
            return "missing_raw_body"
        provided = request.header(self._header)
        if provided is None:
            return "missing_signature"
        provided = self._transform(provided)
        if provided is None:
            return "missing_signature"
        expected = self._hex_format(self._signer.sign(request.raw_body))
        if not self._equals(provided, expected):
            return "signature_mismatch"
        return None

    def verify(self, request: Request) -> bool:
        """Return ``True`` when *request* carries a valid body signature."""
        reason = self._failure_reason(request)
        if reason is not None:
            logger.warning("webhook.signature.rejected", uri=request.uri, reason=reason)
            return False
        return True

    def process(
        self,
        handler: Handler,
        request: Request,
        respond: Respond | None,
        raise_: Raise | None,
    ) -> Any:
        if not self.verify(request):
            return reply(WRONG_SIGNATURE_RESPONSE, respond)
        return invoke(handler, request, respond, raise_)


__all__ = ["WRONG_SIGNATURE_RESPONSE", "WebhookSignatureVerifier"]
