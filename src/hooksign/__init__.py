"""
hooksign – webhook signature verification and compact signed tokens.

Import path convention::

    from hooksign.security.hmac import KeyedSigner
    from hooksign.security.jws import JwsProducer, JwsReader
    from hooksign.application.webhooks import RawBodyCapture, WebhookSignatureVerifier
    from hooksign.adapters.fastapi import FastAPIWebhookSignatureMiddleware
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
