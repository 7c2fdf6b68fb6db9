"""Config validation errors."""
from hooksign.config.validation.errors import (
    ConfigError,
    InvalidSecretError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    UnsupportedAlgorithmError,
)

__all__ = [
    "ConfigError",
    "InvalidSecretError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "UnsupportedAlgorithmError",
]
