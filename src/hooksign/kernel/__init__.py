"""Kernel – 100% framework-agnostic building blocks."""

from hooksign.kernel.errors import ApplicationError, BaseError, TokenParseError

__all__ = [
    "ApplicationError",
    "BaseError",
    "TokenParseError",
]
