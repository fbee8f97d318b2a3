"""Generation errors – hard validation failures and soft per-field failures."""

from __future__ import annotations

from typing import Any

from mp_datagen.kernel.errors.base import BaseError


class GenerationError(BaseError):
    """Raised when a generator cannot be built or cannot produce a value."""

    default_code = "generation_error"


class InvalidArgumentError(GenerationError, ValueError):
    """A generator factory received an argument it cannot work with.

    Raised at construction time, so the caller never obtains a usable
    generator: malformed bounds, empty fixed lists, missing generators,
    negative sizes, or unusable object targets.
    """

    default_code = "invalid_argument"


class UnsupportedTypeError(InvalidArgumentError):
    """A type cannot be described, instantiated or populated."""

    default_code = "unsupported_type"

    def __init__(self, type_hint: Any, reason: str, **kwargs: Any) -> None:
        super().__init__(f"Unsupported type {_type_name(type_hint)}: {reason}", **kwargs)
        self.type_hint = type_hint
        self.reason = reason


class FieldInjectionError(GenerationError):
    """A single field could not be resolved, produced or assigned."""

    default_code = "field_injection_failed"

    def __init__(self, owner: type, field: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Cannot populate {owner.__qualname__}.{field}: {reason}",
            detail={"owner": owner.__qualname__, "field": field, "reason": reason},
            **kwargs,
        )
        self.owner = owner
        self.field = field
        self.reason = reason


class RecursionLimitError(GenerationError):
    """The nesting guard refused to descend into another composite type."""

    default_code = "recursion_limit"

    def __init__(self, type_hint: Any, max_depth: int) -> None:
        super().__init__(
            f"Nesting deeper than {max_depth} while building {_type_name(type_hint)}",
            detail={"max_depth": max_depth},
        )
        self.type_hint = type_hint
        self.max_depth = max_depth


class InstantiationError(GenerationError):
    """The target type raised while being instantiated for a ``get()`` call."""

    default_code = "instantiation_failed"


def _type_name(type_hint: Any) -> str:
    return getattr(type_hint, "__qualname__", None) or repr(type_hint)


__all__ = [
    "FieldInjectionError",
    "GenerationError",
    "InstantiationError",
    "InvalidArgumentError",
    "RecursionLimitError",
    "UnsupportedTypeError",
]
