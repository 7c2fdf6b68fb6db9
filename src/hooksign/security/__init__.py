"""Security: keyed MAC signing and compact signed tokens."""
from hooksign.security.hmac import MAC_ALGORITHMS, KeyedSigner, Secret
from hooksign.security.jws import JWS_ALGORITHMS, JwsProducer, JwsReader, SignedToken

__all__ = [
    "JWS_ALGORITHMS",
    "JwsProducer",
    "JwsReader",
    "KeyedSigner",
    "MAC_ALGORITHMS",
    "Secret",
    "SignedToken",
]
