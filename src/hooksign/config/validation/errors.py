"""Config validation errors.

Everything here is raised while building signers, verifiers and token
producers, never while handling a request.
"""
from collections.abc import Iterable

from hooksign.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Raised when configuration is invalid or loading failed."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A required environment variable / setting / option is absent."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Required setting '{setting_name}' is missing")
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting's value is present but semantically invalid."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}"
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


class InvalidSecretError(ConfigError):
    """A signing secret is empty or of an unsupported shape.

    The offending value is never included in the message.
    """
    default_code = "invalid_secret"


class UnsupportedAlgorithmError(ConfigError):
    """A MAC or JWS algorithm identifier is not recognised."""
    default_code = "unsupported_algorithm"

    def __init__(self, algorithm: object, supported: Iterable[str]) -> None:
        self.algorithm = algorithm
        self.supported = tuple(supported)
        super().__init__(
            f"Unsupported algorithm {algorithm!r}; expected one of {', '.join(self.supported)}",
            detail={"algorithm": str(algorithm), "supported": list(self.supported)},
        )


__all__ = [
    "ConfigError",
    "InvalidSecretError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "UnsupportedAlgorithmError",
]
