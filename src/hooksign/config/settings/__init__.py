"""Config settings – 12-factor env-based configuration."""
from hooksign.config.settings.base import Settings
from hooksign.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from hooksign.config.settings.validator import SettingsValidator

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader", "SettingsValidator"]
