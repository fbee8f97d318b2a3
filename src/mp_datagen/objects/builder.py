"""Reflective object population.

:func:`objects` inspects a class once, resolves a generator for each of its
fields and returns a generator that, on every call, instantiates the class
and fills those fields::

    @dataclasses.dataclass
    class Address:
        street: str = ""
        number: int = 0

    @dataclasses.dataclass
    class Person:
        name: str = ""
        age: int = 0
        address: Address | None = None
        nicknames: list[str] = dataclasses.field(default_factory=list)

    person = objects(Person).get()
    person.address.street   # 'qHbTcYwL...'

Resolution order per field: the registry (defaults plus custom mappings),
enums, parameterised lists/sets/dicts (element types resolved the same
way), and finally nested classes, which are compiled recursively with the
same registry.

There are two failure channels.  Problems with the target itself (not a
class, not instantiable without arguments, primitive-like) raise
:class:`UnsupportedTypeError` immediately.  Problems with a single field
(un-parameterised collection, unsupported or unresolvable hint, failing
nested class, failing generator or assignment) are logged and the field
keeps its default.

Nested classes are not tracked for cycles.  A self-referential class
recurses until the interpreter's recursion limit unless
``DatagenSettings.max_depth`` is set, in which case fields nested deeper
than that are skipped.
"""
from __future__ import annotations

import dataclasses
import inspect
from typing import Any, TypeVar

from mp_datagen.config.settings import DatagenSettings, get_settings
from mp_datagen.generators.collections import lists, maps, sets
from mp_datagen.generators.core import ValueGenerator
from mp_datagen.generators.enums import enum_values_of
from mp_datagen.kernel.errors import (
    FieldInjectionError,
    GenerationError,
    InstantiationError,
    InvalidArgumentError,
    RecursionLimitError,
    UnsupportedTypeError,
)
from mp_datagen.kernel.types import Err, Ok, Result, capture
from mp_datagen.objects.descriptors import (
    CollectionKind,
    CollectionType,
    CompositeType,
    EnumType,
    FieldDescriptor,
    MapType,
    PrimitiveType,
    TypeDescriptor,
    describe,
    discover_fields,
    is_primitive,
)
from mp_datagen.objects.registry import GeneratorRegistry, Mappings, default_registry
from mp_datagen.observability.logging import get_logger

T = TypeVar("T")

_log = get_logger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class CompiledField:
    """A field paired with the generator that fills it."""

    field: FieldDescriptor
    generator: ValueGenerator[Any]

    def populate(self, instance: Any) -> Result[Any, FieldInjectionError]:
        owner, name = self.field.owner, self.field.name
        try:
            value = self.generator.get()
        except Exception as exc:  # noqa: BLE001
            return Err(FieldInjectionError(owner, name, f"generator failed: {exc!r}", cause=exc))
        if value is None:
            return Err(FieldInjectionError(owner, name, "generator produced None"))
        try:
            _inject(instance, name, value)
        except Exception as exc:  # noqa: BLE001
            return Err(FieldInjectionError(owner, name, f"assignment failed: {exc!r}", cause=exc))
        return Ok(value)


def _inject(instance: Any, attribute: str, value: Any) -> None:
    """Assign *value*, going around frozen dataclasses and ``__setattr__`` guards."""
    try:
        setattr(instance, attribute, value)
    except AttributeError:
        object.__setattr__(instance, attribute, value)


class ObjectGenerator(ValueGenerator[T]):
    """Generator of populated ``T`` instances, built by :func:`objects`.

    ``get()`` returns ``None`` when ``T()`` raises, unless the settings ask
    for strict instantiation, in which case :class:`InstantiationError` is
    raised.  The generator keeps no reference to what it returns.
    """

    __slots__ = ("_cls", "_fields", "_skipped", "_strict")

    def __init__(
        self,
        cls: type[T],
        fields: tuple[CompiledField, ...],
        skipped: tuple[FieldInjectionError, ...],
        *,
        strict: bool = False,
    ) -> None:
        super().__init__(self._populate, name=f"objects({cls.__qualname__})")
        self._cls = cls
        self._fields = fields
        self._skipped = skipped
        self._strict = strict

    @property
    def target(self) -> type[T]:
        return self._cls

    @property
    def field_names(self) -> tuple[str, ...]:
        """Fields filled on every call."""
        return tuple(compiled.field.name for compiled in self._fields)

    @property
    def skipped(self) -> tuple[FieldInjectionError, ...]:
        """Fields left at their defaults because no generator could be resolved."""
        return self._skipped

    def _populate(self) -> T | None:
        try:
            instance = self._cls()
        except Exception as exc:
            if self._strict:
                raise InstantiationError(
                    f"Failed to instantiate {self._cls.__qualname__}", cause=exc
                ) from exc
            _log.error("instantiation_failed", target=self._cls.__qualname__, exc_info=exc)
            return None

        for compiled in self._fields:
            result = compiled.populate(instance)
            if isinstance(result, Err):
                _log.warning("field_not_injected", error=result.error)
        return instance


class _Resolver:
    """Resolve descriptors to generators for one level of nesting."""

    def __init__(self, registry: GeneratorRegistry, settings: DatagenSettings, depth: int) -> None:
        self._registry = registry
        self._settings = settings
        self._depth = depth

    def resolve_field(self, field: FieldDescriptor) -> Result[ValueGenerator[Any], FieldInjectionError]:
        if field.unresolved is not None:
            return Err(FieldInjectionError(field.owner, field.name, field.unresolved))
        try:
            descriptor = describe(field.declared_type)
        except UnsupportedTypeError as exc:
            return Err(FieldInjectionError(field.owner, field.name, exc.reason, cause=exc))

        match self.resolve(descriptor):
            case Ok(value=found):
                return Ok(found)
            case Err(error=error):
                return Err(FieldInjectionError(field.owner, field.name, error.message, cause=error))

    def resolve(self, descriptor: TypeDescriptor) -> Result[ValueGenerator[Any], GenerationError]:
        found = self._registry.lookup(descriptor)
        if found is not None:
            return Ok(found)

        match descriptor:
            case PrimitiveType(kind=kind):
                return Err(UnsupportedTypeError(descriptor, f"no generator registered for {kind.value}"))
            case EnumType(cls=enum_cls):
                return capture(lambda: enum_values_of(enum_cls), InvalidArgumentError)
            case CollectionType(element=None):
                return Err(UnsupportedTypeError(descriptor, "collection is not type-parametrized"))
            case CollectionType(kind=kind, element=element):
                return self.resolve(element).map(lambda elements: self._container(kind, elements))
            case MapType(key=key, value=value) if key is not None and value is not None:
                match (self.resolve(key), self.resolve(value)):
                    case (Ok(value=keys), Ok(value=values)):
                        return Ok(maps(keys, values, settings=self._settings))
                    case (Err() as failed, _) | (_, Err() as failed):
                        return failed
            case MapType():
                return Err(UnsupportedTypeError(descriptor, "mapping is not type-parametrized"))
            case CompositeType(cls=cls):
                return self._nested(cls)
        return Err(UnsupportedTypeError(descriptor, "unknown descriptor"))

    def _container(self, kind: CollectionKind, elements: ValueGenerator[Any]) -> ValueGenerator[Any]:
        if kind is CollectionKind.LIST:
            return lists(elements, settings=self._settings)
        built = sets(elements, settings=self._settings)
        return built.map(frozenset) if kind is CollectionKind.FROZENSET else built

    def _nested(self, cls: type) -> Result[ValueGenerator[Any], GenerationError]:
        max_depth = self._settings.max_depth
        if max_depth and self._depth >= max_depth:
            return Err(RecursionLimitError(cls, max_depth))
        return capture(
            lambda: _compile(cls, self._registry, self._settings, self._depth + 1),
            InvalidArgumentError,
        )


def _check_target(cls: Any) -> None:
    if cls is None:
        raise InvalidArgumentError("missing class of object")
    if is_primitive(cls):
        raise UnsupportedTypeError(cls, "primitive-like types cannot be populated; use their own generators")
    if not inspect.isclass(cls):
        raise UnsupportedTypeError(cls, "not a class")
    try:
        cls()
    except Exception as exc:
        raise UnsupportedTypeError(cls, f"cannot instantiate without arguments ({exc!r})", cause=exc) from exc
    if not isinstance(describe(cls), CompositeType):
        raise UnsupportedTypeError(cls, "collections and enums cannot be populated field by field")


def _compile(cls: type[T], registry: GeneratorRegistry, settings: DatagenSettings, depth: int) -> ObjectGenerator[T]:
    _check_target(cls)
    resolver = _Resolver(registry, settings, depth)

    fields: list[CompiledField] = []
    skipped: list[FieldInjectionError] = []
    for field in discover_fields(cls):
        match resolver.resolve_field(field):
            case Ok(value=found):
                fields.append(CompiledField(field, found))
            case Err(error=error):
                _log.warning("field_skipped", error=error)
                skipped.append(error)

    return ObjectGenerator(
        cls,
        tuple(fields),
        tuple(skipped),
        strict=settings.strict_instantiation,
    )


def objects(
    cls: type[T],
    custom_mappings: Mappings | None = None,
    *,
    settings: DatagenSettings | None = None,
) -> ObjectGenerator[T]:
    """Build a generator of populated *cls* instances.

    Args:
        cls: Target class; must be instantiable with no arguments.
        custom_mappings: Generators that take precedence over the defaults,
            keyed by type hint (``{str: ..., Address: ...}``).  Applied at
            every nesting level.
        settings: Overrides the environment-loaded :class:`DatagenSettings`.

    Raises:
        InvalidArgumentError: *cls* is missing.
        UnsupportedTypeError: *cls* is not a class, cannot be instantiated
            without arguments, or is primitive-like, a collection or an enum.
    """
    settings = settings or get_settings()
    registry = default_registry().with_overrides(custom_mappings)
    return _compile(cls, registry, settings, depth=0)


__all__ = ["CompiledField", "ObjectGenerator", "objects"]
