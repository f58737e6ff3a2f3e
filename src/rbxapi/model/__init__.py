# Copyright 2026 rbxapi Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model for parsed API dumps (items, arguments, and the item database)."""

from rbxapi.model.items import (
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
    MemberDef,
    PropertyDef,
    YieldFunctionDef,
)

__all__ = [
    "ItemKind",
    "Argument",
    # Items
    "ClassDef",
    "PropertyDef",
    "FunctionDef",
    "YieldFunctionDef",
    "EventDef",
    "CallbackDef",
    "EnumDef",
    "EnumItemDef",
    "Item",
    "MemberDef",
    # Database
    "Database",
]
