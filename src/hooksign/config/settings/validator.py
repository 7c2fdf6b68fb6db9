"""Config settings – SettingsValidator."""
from __future__ import annotations

import dataclasses

from hooksign.config.settings.base import Settings


class SettingsValidator:
    """Check that every field without a default holds a non-empty value."""

    def missing(self, settings: Settings) -> list[str]:
        """Return the names of required fields that are ``None`` or empty, in declaration order."""
        return [
            field.name
            for field in dataclasses.fields(settings)
            if field.default is dataclasses.MISSING
            and field.default_factory is dataclasses.MISSING
            and getattr(settings, field.name) in (None, "")
        ]

    def validate(self, settings: Settings) -> list[str]:
        """Return a list of validation error messages."""
        return [f"{name} is required but empty" for name in self.missing(settings)]


__all__ = ["SettingsValidator"]
