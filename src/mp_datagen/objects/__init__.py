"""Objects – reflective population of plain data classes."""
from mp_datagen.objects.builder import CompiledField, ObjectGenerator, objects
from mp_datagen.objects.descriptors import (
    CollectionKind,
    CollectionType,
    CompositeType,
    EnumType,
    FieldDescriptor,
    MapType,
    PrimitiveKind,
    PrimitiveType,
    TypeDescriptor,
    describe,
    discover_fields,
    is_primitive,
)
from mp_datagen.objects.registry import GeneratorRegistry, default_registry

__all__ = [
    "CollectionKind",
    "CollectionType",
    "CompiledField",
    "CompositeType",
    "EnumType",
    "FieldDescriptor",
    "GeneratorRegistry",
    "MapType",
    "ObjectGenerator",
    "PrimitiveKind",
    "PrimitiveType",
    "TypeDescriptor",
    "default_registry",
    "describe",
    "discover_fields",
    "is_primitive",
    "objects",
]
