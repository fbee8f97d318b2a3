"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True)
class Settings:
    """Base class for env-driven settings.

    Subclasses are frozen dataclasses; ``_prefix`` names the environment
    variable namespace read by :class:`EnvSettingsLoader`.
    """

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""

    def replace(self, **changes: object) -> "Settings":
        """Return a validated copy with *changes* applied."""
        return dataclasses.replace(self, **changes)


__all__ = ["Settings"]
