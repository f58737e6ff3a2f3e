# Copyright 2026 rbxapi Contributors
# SPDX-License-Identifier: Apache-2.0

"""Items of a parsed API dump (classes, members, enums) and the database holding them."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class ItemKind(Enum):
    """The item types that may start a line of an API dump."""

    CLASS = "Class"
    PROPERTY = "Property"
    FUNCTION = "Function"
    YIELD_FUNCTION = "YieldFunction"
    EVENT = "Event"
    CALLBACK = "Callback"
    ENUM = "Enum"
    ENUM_ITEM = "EnumItem"


class Argument(BaseModel):
    """A typed, named argument of a function or parameter of an event or callback.

    Attributes:
        type: The value type of the argument.
        name: The argument name.
        default: The raw default value text, or None if the argument has no default.
            An empty string is a legitimate default (an empty string literal).
    """

    model_config = ConfigDict(frozen=True)

    type: str = _Field(min_length=1)
    name: str = _Field(min_length=1)
    default: str | None = None


class _ItemBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    tags: frozenset[str] = _Field(default_factory=frozenset)


class ClassDef(_ItemBase):
    """A class declaration, optionally inheriting from a superclass."""

    kind: Literal[ItemKind.CLASS] = ItemKind.CLASS
    name: str = _Field(min_length=1)
    superclass: str | None = None


class PropertyDef(_ItemBase):
    """A property member of a class."""

    kind: Literal[ItemKind.PROPERTY] = ItemKind.PROPERTY
    class_name: str = _Field(min_length=1)
    name: str = _Field(min_length=1)
    value_type: str = _Field(min_length=1)


class FunctionDef(_ItemBase):
    """A function member of a class."""

    kind: Literal[ItemKind.FUNCTION] = ItemKind.FUNCTION
    class_name: str = _Field(min_length=1)
    name: str = _Field(min_length=1)
    return_type: str = _Field(min_length=1)
    arguments: tuple[Argument, ...] = ()


class YieldFunctionDef(_ItemBase):
    """A function member that yields the calling thread until it returns."""

    kind: Literal[ItemKind.YIELD_FUNCTION] = ItemKind.YIELD_FUNCTION
    class_name: str = _Field(min_length=1)
    name: str = _Field(min_length=1)
    return_type: str = _Field(min_length=1)
    arguments: tuple[Argument, ...] = ()


class EventDef(_ItemBase):
    """An event member of a class; parameters are received by listeners."""

    kind: Literal[ItemKind.EVENT] = ItemKind.EVENT
    class_name: str = _Field(min_length=1)
    name: str = _Field(min_length=1)
    parameters: tuple[Argument, ...] = ()


class CallbackDef(_ItemBase):
    """A callback member of a class, invoked by the runtime and returning a value."""

    kind: Literal[ItemKind.CALLBACK] = ItemKind.CALLBACK
    class_name: str = _Field(min_length=1)
    name: str = _Field(min_length=1)
    return_type: str = _Field(min_length=1)
    parameters: tuple[Argument, ...] = ()


class EnumDef(_ItemBase):
    """An enumeration declaration."""

    kind: Literal[ItemKind.ENUM] = ItemKind.ENUM
    name: str = _Field(min_length=1)


class EnumItemDef(_ItemBase):
    """A named integer value belonging to an enumeration."""

    kind: Literal[ItemKind.ENUM_ITEM] = ItemKind.ENUM_ITEM
    enum_name: str = _Field(min_length=1)
    name: str = _Field(min_length=1)
    value: int


# One of the eight item models, discriminated by `kind`.
Item = Annotated[
    ClassDef | PropertyDef | FunctionDef | YieldFunctionDef | EventDef | CallbackDef | EnumDef | EnumItemDef,
    _Field(discriminator="kind"),
]

MemberDef = PropertyDef | FunctionDef | YieldFunctionDef | EventDef | CallbackDef


class Database(BaseModel):
    """All items parsed from one API dump, in declaration order."""

    model_config = ConfigDict(frozen=True)

    items: tuple[Item, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def of_kind(self, kind: ItemKind) -> list[Item]:
        """Return the items of the given kind, in declaration order."""
        return [item for item in self.items if item.kind == kind]

    def find_class(self, name: str) -> ClassDef | None:
        """Return the first class declared with *name*, or None."""
        for item in self.items:
            if isinstance(item, ClassDef) and item.name == name:
                return item
        return None

    def members_of(self, class_name: str) -> list[MemberDef]:
        """Return the members declared for *class_name*, in declaration order."""
        return [
            item
            for item in self.items
            if isinstance(item, MemberDef) and item.class_name == class_name
        ]

    def enum_items(self, enum_name: str) -> list[EnumItemDef]:
        """Return the items of the enum *enum_name*, in declaration order."""
        return [item for item in self.items if isinstance(item, EnumItemDef) and item.enum_name == enum_name]
