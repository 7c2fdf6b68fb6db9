"""FastAPI adapter – ASGI webhook signature middleware."""
from hooksign.adapters.fastapi.middleware import FastAPIWebhookSignatureMiddleware

__all__ = ["FastAPIWebhookSignatureMiddleware"]
