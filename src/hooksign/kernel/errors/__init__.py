"""Kernel error hierarchy: public re-export surface.

Hierarchy::

    BaseError
    └── ApplicationError     (application.py)
        ├── TokenParseError
        └── ConfigError      (hooksign.config.validation)
            ├── MissingRequiredSettingError
            ├── InvalidSettingValueError
            ├── InvalidSecretError
            └── UnsupportedAlgorithmError

Signature mismatches are not errors: they surface as a fixed 403 response
or as a ``False`` verification result.
"""

from hooksign.kernel.errors.application import ApplicationError, TokenParseError
from hooksign.kernel.errors.base import BaseError

__all__ = [
    "ApplicationError",
    "BaseError",
    "TokenParseError",
]
