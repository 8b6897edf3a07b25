"""Config settings – 12-factor env-based configuration."""
from routine.config.settings.base import Settings
from routine.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from routine.config.settings.paging import PagingSettings

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "PagingSettings", "Settings", "SettingsLoader"]
