"""Config settings – env-based configuration."""
from session_timing.config.settings.base import DemoSettings, Settings
from session_timing.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["DemoSettings", "EnvSettingsLoader", "Settings", "SettingsLoader"]
