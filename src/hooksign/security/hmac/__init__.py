"""Security – HMAC secrets and concurrency-safe keyed signers."""
from hooksign.security.hmac.signer import MAC_ALGORITHMS, KeyedSigner, Secret, SecretLike

__all__ = ["MAC_ALGORITHMS", "KeyedSigner", "Secret", "SecretLike"]
