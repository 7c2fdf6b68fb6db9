"""Application webhooks – signing and the pluggable comparison strategies."""
from __future__ import annotations

import hmac
from collections.abc import Callable

from hooksign.security.hmac import KeyedSigner, SecretLike

SignatureTransform = Callable[[str], "str | None"]
SignatureEquals = Callable[[str, str], bool]
HexFormat = Callable[[bytes], str]


def identity(value: str) -> str:
    return value


def lower_hex(digest: bytes) -> str:
    return digest.hex()


def upper_hex(digest: bytes) -> str:
    return digest.hex().upper()


def constant_time_equals(provided: str | bytes, expected: str | bytes) -> bool:
    """Exact equality that does not leak the position of the first mismatch."""
    if isinstance(provided, str):
        provided = provided.encode("utf-8")
    if isinstance(expected, str):
        expected = expected.encode("utf-8")
    return hmac.compare_digest(provided, expected)


def strip_prefix(prefix: str) -> SignatureTransform:
    """Build a transform dropping *prefix* (e.g. ``"sha256="``) from a header value.

    Values without the prefix map to ``None``, which verification treats as a
    missing signature.
    """

    def _strip(value: str) -> str | None:
        if not value.startswith(prefix):
            return None
        return value[len(prefix):]

    return _strip


class WebhookSigner:
    """Produces the signature header value a sender attaches to a payload.

    ``sign`` returns ``<prefix><hex digest>``, e.g. ``sha256=a9d1ef...``, which
    is what :class:`WebhookSignatureVerifier` configured with
    ``strip_prefix("sha256=")`` expects.
    """

    def __init__(
        self,
        secret: SecretLike,
        mac_algorithm: str = "HmacSHA256",
        prefix: str = "sha256=",
    ) -> None:
        self._signer = KeyedSigner(mac_algorithm, secret)
        self._prefix = prefix

    @property
    def prefix(self) -> str:
        return self._prefix

    def sign(self, payload: bytes) -> str:
        return f"{self._prefix}{self._signer.sign(payload).hex()}"

    def verify(self, payload: bytes, signature: str) -> bool:
        """Verify *signature* using constant-time comparison."""
        return constant_time_equals(self.sign(payload), signature)


__all__ = [
    "HexFormat",
    "SignatureEquals",
    "SignatureTransform",
    "WebhookSigner",
    "constant_time_equals",
    "identity",
    "lower_hex",
    "strip_prefix",
    "upper_hex",
]
