"""Errors raised while loading or validating :class:`DatagenSettings`."""
from __future__ import annotations

from mp_datagen.kernel.errors import BaseError


class ConfigError(BaseError):
    """Settings could not be loaded."""

    default_code = "datagen_config_error"


class MissingRequiredSettingError(ConfigError):
    """An environment variable backing a field without default is unset."""

    default_code = "setting_missing"

    def __init__(self, env_key: str) -> None:
        super().__init__(f"Environment variable {env_key} must be set", detail={"env_key": env_key})
        self.setting_name = env_key


class InvalidSettingValueError(ConfigError):
    """A setting parsed but failed coercion or range validation."""

    default_code = "setting_invalid"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"{setting_name}={value!r} rejected: {reason}",
            detail={"setting": setting_name, "value": value},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
