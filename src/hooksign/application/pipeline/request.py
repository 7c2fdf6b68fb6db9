"""Application pipeline – Request and Response value objects."""
from __future__ import annotations

import io
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any, BinaryIO


@dataclass(frozen=True)
class Request:
    """An inbound HTTP request as seen by the middleware chain.

    ``raw_body`` stays ``None`` until :class:`~hooksign.application.webhooks.RawBodyCapture`
    has drained ``body`` for this request.
    """

    uri: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: BinaryIO | None = None
    method: str = "POST"
    content_length: int | None = None
    raw_body: bytes | None = None

    def header(self, name: str, default: str | None = None) -> str | None:
        """Case-insensitive header lookup."""
        if name in self.headers:
            return self.headers[name]
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return default

    def with_raw_body(self, raw: bytes) -> Request:
        """Return a copy carrying *raw* and a fresh, unread body stream over it."""
        return replace(self, raw_body=raw, body=io.BytesIO(raw))


@dataclass(frozen=True)
class Response:
    status: int
    body: Any = ""
    headers: Mapping[str, str] = field(default_factory=dict)


__all__ = ["Request", "Response"]
