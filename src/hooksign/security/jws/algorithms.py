"""JWS ``alg`` header values and the MAC algorithms they stand for."""
from __future__ import annotations

from typing import Any

JWS_ALGORITHMS: dict[str, str] = {
    "HS256": "HmacSHA256",
    "HS384": "HmacSHA384",
    "HS512": "HmacSHA512",
}


def mac_algorithm_for(alg: Any) -> str | None:
    """Return the MAC name for a JWS ``alg`` value, or ``None`` if unknown."""
    if not isinstance(alg, str):
        return None
    return JWS_ALGORITHMS.get(alg)


__all__ = ["JWS_ALGORITHMS", "mac_algorithm_for"]
