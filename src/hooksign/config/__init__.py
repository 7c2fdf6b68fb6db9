"""Config – 12-factor settings, loaders, and validation errors."""

from hooksign.config.settings import EnvSettingsLoader, Settings, SettingsLoader
from hooksign.config.validation import (
    ConfigError,
    InvalidSecretError,
    MissingRequiredSettingError,
    UnsupportedAlgorithmError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSecretError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "UnsupportedAlgorithmError",
]
