"""Security – compact JWS tokens signed with HMAC (HS256/HS384/HS512)."""
from hooksign.security.jws.algorithms import JWS_ALGORITHMS, mac_algorithm_for
from hooksign.security.jws.encoding import b64url_decode, b64url_encode
from hooksign.security.jws.producer import JwsProducer
from hooksign.security.jws.reader import JwsReader
from hooksign.security.jws.token import SignedToken

__all__ = [
    "JWS_ALGORITHMS",
    "JwsProducer",
    "JwsReader",
    "SignedToken",
    "b64url_decode",
    "b64url_encode",
    "mac_algorithm_for",
]
