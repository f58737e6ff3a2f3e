# Copyright 2026 rbxapi Contributors
# SPDX-License-Identifier: Apache-2.0

"""High-level tests demonstrating how to construct and query the item model."""

import pytest
from pydantic import TypeAdapter, ValidationError

from rbxapi.model import (
    Argument,
    CallbackDef,
    ClassDef,
    Database,
    EnumDef,
    EnumItemDef,
    EventDef,
    FunctionDef,
    Item,
    ItemKind,
    PropertyDef,
    YieldFunctionDef,
)


def _database() -> Database:
    return Database(
        items=(
            ClassDef(name="Instance", superclass="Root"),
            PropertyDef(class_name="Instance", name="Name", value_type="string"),
            FunctionDef(class_name="Instance", name="Clone", return_type="Instance"),
            ClassDef(name="Part", superclass="BasePart"),
            PropertyDef(class_name="Part", name="Anchored", value_type="bool"),
            EventDef(class_name="Instance", name="Changed", parameters=(Argument(type="Property", name="p"),)),
            EnumDef(name="Axis"),
            EnumItemDef(enum_name="Axis", name="X", value=0),
            EnumItemDef(enum_name="Axis", name="Y", value=1),
        )
    )


def test_item_kinds_match_dump_keywords() -> None:
    """Each kind's value is the keyword that starts its dump line."""
    assert [kind.value for kind in ItemKind] == [
        "Class",
        "Property",
        "Function",
        "YieldFunction",
        "Event",
        "Callback",
        "Enum",
        "EnumItem",
    ]


def test_each_item_carries_its_kind() -> None:
    assert ClassDef(name="A").kind == ItemKind.CLASS
    assert YieldFunctionDef(class_name="A", name="B", return_type="void").kind == ItemKind.YIELD_FUNCTION
    assert CallbackDef(class_name="A", name="B", return_type="void").kind == ItemKind.CALLBACK


def test_tags_default_to_empty() -> None:
    assert ClassDef(name="A").tags == frozenset()
    assert ClassDef(name="A").superclass is None


def test_argument_default_distinguishes_empty_from_absent() -> None:
    """An empty default value is a real default; None means there is none."""
    assert Argument(type="string", name="s").default is None
    assert Argument(type="string", name="s", default="").default == ""


def test_items_are_frozen() -> None:
    item = PropertyDef(class_name="Instance", name="Name", value_type="string")
    with pytest.raises(ValidationError):
        item.name = "Other"  # type: ignore[misc]


def test_items_are_hashable_and_compare_by_value() -> None:
    a = ClassDef(name="A", tags=frozenset({"x"}))
    b = ClassDef(name="A", tags=frozenset({"x"}))
    assert a == b
    assert hash(a) == hash(b)


@pytest.mark.parametrize("field", ["class_name", "name", "value_type"])
def test_empty_names_are_rejected(field: str) -> None:
    values = {"class_name": "Instance", "name": "Name", "value_type": "string"}
    values[field] = ""
    with pytest.raises(ValidationError):
        PropertyDef(**values)


def test_discriminator_selects_model_from_kind() -> None:
    adapter = TypeAdapter(Item)
    item = adapter.validate_python({"kind": ItemKind.ENUM_ITEM, "enum_name": "Axis", "name": "X", "value": 2})
    assert isinstance(item, EnumItemDef)
    assert item.value == 2


def test_unknown_kind_is_rejected() -> None:
    with pytest.raises(ValidationError):
        TypeAdapter(Item).validate_python({"kind": "Method", "name": "X"})


# ###############
# Database Queries
# ###############


def test_database_length() -> None:
    assert len(_database()) == 9
    assert len(Database()) == 0


def test_of_kind_keeps_declaration_order() -> None:
    classes = _database().of_kind(ItemKind.CLASS)
    assert [c.name for c in classes] == ["Instance", "Part"]


def test_find_class() -> None:
    db = _database()
    found = db.find_class("Part")
    assert found is not None
    assert found.superclass == "BasePart"
    assert db.find_class("Missing") is None


def test_members_of_includes_every_member_kind() -> None:
    members = _database().members_of("Instance")
    assert [m.name for m in members] == ["Name", "Clone", "Changed"]


def test_members_of_unknown_class_is_empty() -> None:
    assert _database().members_of("Workspace") == []


def test_enum_items() -> None:
    assert [(i.name, i.value) for i in _database().enum_items("Axis")] == [("X", 0), ("Y", 1)]
