"""JwsReader – parse compact JWS tokens without trusting them."""
from __future__ import annotations

from collections.abc import Callable
from typing import Any

from hooksign.kernel.errors import TokenParseError
from hooksign.security.jws.encoding import b64url_decode
from hooksign.security.jws.token import SignedToken

Decoder = Callable[[bytes], Any]


class JwsReader:
    """Reads ``header64.claims64.signature64`` strings into :class:`SignedToken`.

    Reading does not verify anything; call :meth:`SignedToken.verify` with
    the expected secret. Malformed input raises :class:`TokenParseError`.
    """

    def __init__(self, decoder: Decoder) -> None:
        self._decoder = decoder

    def _decode(self, segment: str, name: str) -> Any:
        raw = b64url_decode(segment)
        try:
            return self._decoder(raw)
        except Exception as exc:
            raise TokenParseError(
                f"Could not decode token {name}", segment=name, cause=exc
            ) from exc

    def read(self, token: str) -> SignedToken:
        if not isinstance(token, str):
            raise TokenParseError(f"Token must be a string, got {type(token).__name__}")
        parts = token.split(".", 2)
        if len(parts) < 3:
            raise TokenParseError(
                f"Token must have 3 dot-separated segments, got {len(parts)}",
                detail={"segments": len(parts)},
            )
        encoded_header, encoded_claims, signature = parts
        return SignedToken(
            header=self._decode(encoded_header, "header"),
            claims=self._decode(encoded_claims, "claims"),
            signature=signature,
            token=token,
        )

    __call__ = read


__all__ = ["Decoder", "JwsReader"]
