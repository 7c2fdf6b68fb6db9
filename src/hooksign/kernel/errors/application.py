"""Application-layer errors: raised at request time by library operations."""

from __future__ import annotations

from typing import Any

from hooksign.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class TokenParseError(ApplicationError):
    """A compact token could not be split, base64url-decoded or decoded.

    Distinct from a failed verification: a malformed token is either a caller
    bug or tampering, so it is raised rather than reported as ``False``.
    """

    default_code = "token_parse_error"

    def __init__(
        self,
        message: str = "Malformed token",
        *,
        segment: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.segment = segment


__all__ = ["ApplicationError", "TokenParseError"]
