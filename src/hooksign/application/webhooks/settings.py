"""Application webhooks – environment-driven configuration."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from hooksign.config.settings import Settings, SettingsValidator
from hooksign.config.validation import InvalidSettingValueError, MissingRequiredSettingError
from hooksign.security.hmac import MAC_ALGORITHMS


@dataclasses.dataclass
class WebhookSettings(Settings):
    """Settings for one signed webhook endpoint group.

    Loaded from ``WEBHOOK_SECRET``, ``WEBHOOK_SIGNATURE_HEADER``,
    ``WEBHOOK_MAC_ALGORITHM``, ``WEBHOOK_SIGNATURE_PREFIX`` and
    ``WEBHOOK_PATHS`` (comma-separated) by ``EnvSettingsLoader``.
    """

    _prefix: ClassVar[str] = "WEBHOOK"

    secret: str = dataclasses.field(repr=False)
    signature_header: str
    mac_algorithm: str = "HmacSHA256"
    signature_prefix: str = ""
    paths: list[str] = dataclasses.field(default_factory=list)

    def _validate(self) -> None:
        missing = SettingsValidator().missing(self)
        if missing:
            raise MissingRequiredSettingError(missing[0])
        if self.mac_algorithm not in MAC_ALGORITHMS:
            raise InvalidSettingValueError(
                "mac_algorithm", self.mac_algorithm, f"expected one of {', '.join(MAC_ALGORITHMS)}"
            )


__all__ = ["WebhookSettings"]
