"""Config settings – env-based configuration."""
from mp_datagen.config.settings.base import Settings
from mp_datagen.config.settings.datagen import DatagenSettings, get_settings
from mp_datagen.config.settings.loaders import EnvSettingsLoader

__all__ = ["DatagenSettings", "EnvSettingsLoader", "Settings", "get_settings"]
