"""SignedToken – a JWS structure plus its compact serialisation."""
from __future__ import annotations

import hmac
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from hooksign.observability.logging import get_logger
from hooksign.security.hmac import KeyedSigner, SecretLike
from hooksign.security.jws.algorithms import mac_algorithm_for
from hooksign.security.jws.encoding import b64url_decode, b64url_encode

logger = get_logger(__name__)


@dataclass(frozen=True)
class SignedToken:
    """Decoded header and claims, the signature segment and the full token.

    ``token`` lives next to ``claims`` rather than inside it, so no claim key
    can shadow it. The signature always covers ``signing_input`` (the first two
    encoded segments joined by ``.``), never the decoded values.
    """

    header: Any
    claims: Any
    signature: str
    token: str

    @property
    def algorithm(self) -> Any:
        if isinstance(self.header, Mapping):
            return self.header.get("alg")
        return None

    @property
    def signing_input(self) -> str:
        return ".".join(self.token.split(".", 2)[:2])

    @property
    def signature_bytes(self) -> bytes:
        return b64url_decode(self.signature)

    def verify(self, secret: SecretLike) -> bool:
        """Return ``True`` when the signature was made with *secret*.

        An unknown or missing ``alg`` cannot be verified and yields ``False``.
        """
        mac_algorithm = mac_algorithm_for(self.algorithm)
        if mac_algorithm is None:
            logger.warning("jws.verify.unknown_algorithm", alg=repr(self.algorithm))
            return False
        signer = KeyedSigner(mac_algorithm, secret)
        expected = b64url_encode(signer.sign(self.signing_input.encode("utf-8")))
        return hmac.compare_digest(expected.encode("ascii"), self.signature.encode("utf-8"))

    def __str__(self) -> str:
        return self.token


__all__ = ["SignedToken"]
