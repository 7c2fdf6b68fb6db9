"""Application pipeline – requests, responses and the handler middleware chain."""
from hooksign.application.pipeline.middleware import (
    Handler,
    Middleware,
    Raise,
    Respond,
    invoke,
    reply,
)
from hooksign.application.pipeline.pipeline import Pipeline
from hooksign.application.pipeline.request import Request, Response

__all__ = [
    "Handler",
    "Middleware",
    "Pipeline",
    "Raise",
    "Request",
    "Respond",
    "Response",
    "invoke",
    "reply",
]
