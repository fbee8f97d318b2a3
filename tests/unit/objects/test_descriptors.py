"""Unit tests for type descriptors and field discovery."""

from __future__ import annotations

import collections.abc
import dataclasses
import datetime
import decimal
import enum
import typing
import uuid
from typing import Annotated, Any, ClassVar, Final, Optional

import pytest

from mp_datagen.kernel.errors import UnsupportedTypeError
from mp_datagen.kernel.types import Long
from mp_datagen.objects.descriptors import (
    CollectionKind,
    CollectionType,
    CompositeType,
    EnumType,
    MapType,
    PrimitiveKind,
    PrimitiveType,
    describe,
    discover_fields,
    is_primitive,
)


class Suit(enum.Enum):
    HEARTS = 1
    SPADES = 2


@dataclasses.dataclass
class Card:
    suit: Suit = Suit.HEARTS
    rank: int = 0


@dataclasses.dataclass
class Base:
    identifier: str = ""


@dataclasses.dataclass
class Derived(Base):
    KIND: ClassVar[str] = "derived"
    LIMIT: Final[int] = 3
    scratch: dataclasses.InitVar[int] = 0
    tags: list[str] = dataclasses.field(default_factory=list)
    note: Annotated[str | None, "free text"] = None


class Vault:
    __secret: str
    label: str

    def __init__(self) -> None:
        self.label = ""


class Plain:
    title: str
    pages: int

    def __init__(self) -> None:
        self.title = "untitled"


# ---------------------------------------------------------------------------
# describe
# ---------------------------------------------------------------------------


class TestDescribePrimitives:
    @pytest.mark.parametrize(
        ("hint", "kind"),
        [
            (str, PrimitiveKind.STRING),
            (int, PrimitiveKind.INTEGER),
            (Long, PrimitiveKind.LONG),
            (float, PrimitiveKind.DOUBLE),
            (bool, PrimitiveKind.BOOLEAN),
            (bytes, PrimitiveKind.BYTES),
            (decimal.Decimal, PrimitiveKind.DECIMAL),
            (uuid.UUID, PrimitiveKind.UUID),
            (datetime.date, PrimitiveKind.DATE),
            (datetime.datetime, PrimitiveKind.INSTANT),
        ],
    )
    def test_primitive_kinds(self, hint: Any, kind: PrimitiveKind) -> None:
        assert describe(hint) == PrimitiveType(kind)
        assert is_primitive(hint)

    def test_optional_and_annotated_unwrap(self) -> None:
        assert describe(Optional[int]) == PrimitiveType(PrimitiveKind.INTEGER)
        assert describe(int | None) == PrimitiveType(PrimitiveKind.INTEGER)
        assert describe(Annotated[str, "meta"]) == PrimitiveType(PrimitiveKind.STRING)

    def test_composites_are_not_primitive(self) -> None:
        assert not is_primitive(Card)


class TestDescribeContainers:
    def test_parameterised_list(self) -> None:
        assert describe(list[int]) == CollectionType(
            CollectionKind.LIST, PrimitiveType(PrimitiveKind.INTEGER)
        )

    @pytest.mark.parametrize("hint", [typing.List[int], collections.abc.Sequence[int]])
    def test_list_aliases(self, hint: Any) -> None:
        assert describe(hint) == describe(list[int])

    @pytest.mark.parametrize(
        ("hint", "kind"),
        [
            (set[str], CollectionKind.SET),
            (collections.abc.MutableSet[str], CollectionKind.SET),
            (frozenset[str], CollectionKind.FROZENSET),
            (typing.FrozenSet[str], CollectionKind.FROZENSET),
            (collections.abc.Set[str], CollectionKind.FROZENSET),
        ],
    )
    def test_sets(self, hint: Any, kind: CollectionKind) -> None:
        assert describe(hint) == CollectionType(kind, PrimitiveType(PrimitiveKind.STRING))

    @pytest.mark.parametrize("hint", [list, typing.List, set])
    def test_unparameterised_collections(self, hint: Any) -> None:
        descriptor = describe(hint)
        assert isinstance(descriptor, CollectionType)
        assert descriptor.element is None

    def test_nested_generic(self) -> None:
        descriptor = describe(list[dict[str, Card]])
        assert descriptor == CollectionType(
            CollectionKind.LIST,
            MapType(PrimitiveType(PrimitiveKind.STRING), CompositeType(Card)),
        )

    def test_maps(self) -> None:
        descriptor = describe(dict[str, int])
        assert isinstance(descriptor, MapType)
        assert descriptor.parameterized
        assert describe(collections.abc.Mapping[str, int]) == descriptor

    def test_unparameterised_map(self) -> None:
        assert describe(dict) == MapType()
        assert not MapType().parameterized


class TestDescribeClasses:
    def test_enum(self) -> None:
        assert describe(Suit) == EnumType(Suit)

    def test_composite(self) -> None:
        assert describe(Card) == CompositeType(Card)

    @pytest.mark.parametrize("hint", [Any, int | str, typing.Literal["a"], typing.TypeVar("X")])
    def test_unsupported_hints(self, hint: Any) -> None:
        with pytest.raises(UnsupportedTypeError):
            describe(hint)


# ---------------------------------------------------------------------------
# discover_fields
# ---------------------------------------------------------------------------


class TestDiscoverFields:
    def test_dataclass_fields(self) -> None:
        fields = {f.name: f for f in discover_fields(Card)}
        assert set(fields) == {"suit", "rank"}
        assert fields["rank"].declared_type is int
        assert fields["rank"].owner is Card

    def test_excludes_classvar_final_and_initvar(self) -> None:
        names = [f.name for f in discover_fields(Derived)]
        assert names == ["identifier", "tags", "note"]

    def test_inherited_fields_report_declaring_class(self) -> None:
        fields = {f.name: f for f in discover_fields(Derived)}
        assert fields["identifier"].owner is Base
        assert fields["tags"].owner is Derived

    def test_type_args_and_unwrapping(self) -> None:
        fields = {f.name: f for f in discover_fields(Derived)}
        assert fields["tags"].type_args == (str,)
        assert fields["note"].declared_type is str

    def test_plain_class_annotations(self) -> None:
        assert [f.name for f in discover_fields(Plain)] == ["title", "pages"]

    def test_unresolvable_annotation_is_reported_per_field(self) -> None:
        class Broken:
            ref: "DoesNotExist"  # type: ignore[name-defined]  # noqa: F821
            LIMIT: "ClassVar[AlsoMissing]"  # type: ignore[name-defined]  # noqa: F821
            count: int

        fields = {f.name: f for f in discover_fields(Broken)}
        assert set(fields) == {"ref", "count"}
        assert fields["count"].unresolved is None
        assert fields["count"].declared_type is int
        assert "DoesNotExist" in fields["ref"].unresolved
        assert fields["ref"].owner is Broken

    def test_private_names_arrive_mangled(self) -> None:
        assert [f.name for f in discover_fields(Vault)] == ["_Vault__secret", "label"]
