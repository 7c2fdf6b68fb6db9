"""Security – Secret and KeyedSigner.

A :class:`KeyedSigner` keys one HMAC context when it is built and keeps it as
a read-only template. Every :meth:`KeyedSigner.sign` call works on its own
``copy()`` of that template, so a signer can be shared freely between
threads and requests.
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Union

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives import hmac as crypto_hmac

from hooksign.config.validation import InvalidSecretError, UnsupportedAlgorithmError

__all__ = ["MAC_ALGORITHMS", "KeyedSigner", "Secret", "SecretLike"]

MAC_ALGORITHMS: dict[str, type[hashes.HashAlgorithm]] = {
    "HmacSHA1": hashes.SHA1,
    "HmacSHA224": hashes.SHA224,
    "HmacSHA256": hashes.SHA256,
    "HmacSHA384": hashes.SHA384,
    "HmacSHA512": hashes.SHA512,
}

SecretLike = Union["Secret", str, bytes, bytearray, memoryview, Sequence[int]]


@dataclass(frozen=True)
class Secret:
    """Opaque MAC key material, normalised to bytes once at construction."""

    value: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.value, bytes):
            raise InvalidSecretError(
                f"Secret value must be bytes, got {type(self.value).__name__}"
            )
        if not self.value:
            raise InvalidSecretError("Secret must not be empty")

    def __repr__(self) -> str:
        return f"Secret(<{len(self.value)} bytes>)"

    def __len__(self) -> int:
        return len(self.value)

    @classmethod
    def of(cls, secret: SecretLike) -> Secret:
        """Resolve a str, bytes-like or integer sequence into a :class:`Secret`.

        Strings are UTF-8 encoded. Integer sequences may hold unsigned
        (``0..255``) or signed (``-128..-1``) byte values.
        """
        if isinstance(secret, Secret):
            return secret
        if isinstance(secret, str):
            return cls(secret.encode("utf-8"))
        if isinstance(secret, (bytes, bytearray, memoryview)):
            return cls(bytes(secret))
        if isinstance(secret, (list, tuple)):
            return cls(_bytes_from_ints(secret))
        raise InvalidSecretError(
            f"Invalid secret: expected str, bytes or a sequence of ints, "
            f"got {type(secret).__name__}",
            detail={"type": type(secret).__name__},
        )


def _bytes_from_ints(values: Sequence[object]) -> bytes:
    out = bytearray()
    for v in values:
        if isinstance(v, bool) or not isinstance(v, int) or not -128 <= v <= 255:
            raise InvalidSecretError("Secret sequences may only hold byte values (-128..255)")
        out.append(v & 0xFF)
    return bytes(out)


class KeyedSigner:
    """Computes HMACs for one algorithm and one secret.

    ``sign`` is deterministic and needs no external locking::

        signer = KeyedSigner("HmacSHA256", "super-secret")
        signer.sign(b'{"foo":"some-message"}').hex()
    """

    def __init__(self, algorithm: str, secret: SecretLike) -> None:
        hash_cls = MAC_ALGORITHMS.get(algorithm)
        if hash_cls is None:
            raise UnsupportedAlgorithmError(algorithm, MAC_ALGORITHMS)
        self._algorithm = algorithm
        self._secret = Secret.of(secret)
        # keyed once, only ever copied afterwards
        self._template = crypto_hmac.HMAC(self._secret.value, hash_cls())

    @property
    def algorithm(self) -> str:
        return self._algorithm

    @property
    def digest_size(self) -> int:
        return self._template.algorithm.digest_size

    def sign(self, data: bytes | bytearray | memoryview) -> bytes:
        """Return the MAC of *data*."""
        ctx = self._template.copy()
        ctx.update(bytes(data))
        return ctx.finalize()

    __call__ = sign

    def __repr__(self) -> str:
        return f"KeyedSigner(algorithm={self._algorithm!r})"
