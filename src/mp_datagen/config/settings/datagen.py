"""Config settings – DatagenSettings and the process-wide instance."""
from __future__ import annotations

import dataclasses
import functools

from mp_datagen.config.settings.base import Settings
from mp_datagen.config.settings.loaders import EnvSettingsLoader
from mp_datagen.config.validation import InvalidSettingValueError


@dataclasses.dataclass(frozen=True)
class DatagenSettings(Settings):
    """Tunables shared by the collection and object generators.

    Attributes:
        collection_min_size: Smallest size picked when a collection size is
            not given (inclusive).
        collection_max_size: Upper bound for that pick (exclusive).
        max_depth: Maximum nesting of composite objects; ``0`` disables the
            guard and recursion is unbounded.
        strict_instantiation: Raise instead of returning ``None`` when a
            target type fails to instantiate during ``get()``.
    """

    _prefix: dataclasses.ClassVar[str] = "MP_DATAGEN"

    collection_min_size: int = 10
    collection_max_size: int = 100
    max_depth: int = 0
    strict_instantiation: bool = False

    def _validate(self) -> None:
        if self.collection_min_size < 0:
            raise InvalidSettingValueError(
                "collection_min_size", self.collection_min_size, "must be >= 0"
            )
        if self.collection_max_size <= self.collection_min_size:
            raise InvalidSettingValueError(
                "collection_max_size",
                self.collection_max_size,
                f"must be greater than collection_min_size ({self.collection_min_size})",
            )
        if self.max_depth < 0:
            raise InvalidSettingValueError("max_depth", self.max_depth, "must be >= 0")


@functools.cache
def get_settings() -> DatagenSettings:
    """Return the settings loaded from the environment on first use."""
    return EnvSettingsLoader().load(DatagenSettings)


__all__ = ["DatagenSettings", "get_settings"]
