"""Config – 12-factor settings and loaders."""

from bootstrap_core.config.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from bootstrap_core.config.loaders import EnvSettingsLoader, SettingsFactory, SettingsLoader
from bootstrap_core.config.settings import DispatchSettings, Settings

__all__ = [
    "ConfigError",
    "DispatchSettings",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
