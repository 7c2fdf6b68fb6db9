"""Base64url without padding (RFC 7515 §2)."""
from __future__ import annotations

import base64
import binascii
import re

from hooksign.kernel.errors import TokenParseError

_B64URL_RE = re.compile(r"[A-Za-z0-9_-]*")


def b64url_encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def b64url_decode(segment: str) -> bytes:
    """Decode an unpadded base64url segment.

    Raises :class:`TokenParseError` for characters outside the base64url
    alphabet or an impossible length.
    """
    if not _B64URL_RE.fullmatch(segment):
        raise TokenParseError("Segment is not base64url encoded")
    try:
        return base64.urlsafe_b64decode(segment + "=" * (-len(segment) % 4))
    except (binascii.Error, ValueError) as exc:
        raise TokenParseError("Segment is not base64url encoded", cause=exc) from exc


__all__ = ["b64url_decode", "b64url_encode"]
