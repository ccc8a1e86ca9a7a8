"""Config – env-driven settings and their errors."""

from session_timing.config.settings import DemoSettings, EnvSettingsLoader, Settings, SettingsLoader
from session_timing.config.validation import ConfigError, InvalidSettingValueError

__all__ = [
    "ConfigError",
    "DemoSettings",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "Settings",
    "SettingsLoader",
]
