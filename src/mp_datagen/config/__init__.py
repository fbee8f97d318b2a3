"""Config – settings and their validation errors."""

from mp_datagen.config.settings import DatagenSettings, EnvSettingsLoader, Settings, get_settings
from mp_datagen.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DatagenSettings",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "get_settings",
]
