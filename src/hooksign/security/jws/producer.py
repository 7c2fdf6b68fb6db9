"""JwsProducer – sign arbitrary claims into a compact JWS token."""
from __future__ import annotations

from collections.abc import Callable
from typing import Any

from hooksign.config.validation import UnsupportedAlgorithmError
from hooksign.security.hmac import KeyedSigner, SecretLike
from hooksign.security.jws.algorithms import JWS_ALGORITHMS
from hooksign.security.jws.encoding import b64url_encode
from hooksign.security.jws.token import SignedToken

Encoder = Callable[[Any], bytes]


class JwsProducer:
    """Turns claims into a :class:`SignedToken`.

    Parameters
    ----------
    encoder:
        Converts the header and the claims to bytes (typically JSON).
    algorithm:
        ``"HS256"``, ``"HS384"`` or ``"HS512"`` (case-insensitive).
    secret:
        Signing key; should be at least as long as the digest (32/48/64 bytes).

    Usage::

        to_json = lambda obj: json.dumps(obj, separators=(",", ":")).encode()
        produce = JwsProducer(to_json, "HS256", "Key-Must-Be-at-least-32-bytes-in-length!")
        produce({"admin": True}).token
    """

    def __init__(self, encoder: Encoder, algorithm: str, secret: SecretLike) -> None:
        alg = algorithm.upper() if isinstance(algorithm, str) else None
        if alg not in JWS_ALGORITHMS:
            raise UnsupportedAlgorithmError(algorithm, JWS_ALGORITHMS)
        self._encoder = encoder
        self._alg = alg
        self._signer = KeyedSigner(JWS_ALGORITHMS[alg], secret)

    @property
    def algorithm(self) -> str:
        return self._alg

    def _encode(self, value: Any) -> str:
        raw = self._encoder(value)
        if isinstance(raw, str):
            raw = raw.encode("utf-8")
        return b64url_encode(raw)

    def produce(self, claims: Any) -> SignedToken:
        header = {"typ": "JWT", "alg": self._alg}
        signing_input = f"{self._encode(header)}.{self._encode(claims)}"
        signature = b64url_encode(self._signer.sign(signing_input.encode("utf-8")))
        return SignedToken(
            header=header,
            claims=claims,
            signature=signature,
            token=f"{signing_input}.{signature}",
        )

    __call__ = produce


__all__ = ["Encoder", "JwsProducer"]
