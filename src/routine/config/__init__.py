"""Config – 12-factor settings and loaders."""

from routine.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    PagingSettings,
    Settings,
    SettingsLoader,
)
from routine.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "PagingSettings",
    "Settings",
    "SettingsLoader",
]
