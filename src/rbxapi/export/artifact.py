# Copyright 2026 rbxapi Contributors
# SPDX-License-Identifier: Apache-2.0

"""Serialization and deserialization of parsed API databases.

Databases are stored as compact JSON files so that downstream tools (diffing,
documentation builders, code generators) need not parse the dump again.  The
format is versioned so future schema changes can be detected.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

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
    PropertyDef,
    YieldFunctionDef,
)

# ###############
# Public Interface
# ###############

ARTIFACT_FORMAT_VERSION = "1"
ARTIFACT_SUFFIX = ".json"


def serialize(database: Database) -> str:
    """Serialize a Database to a compact JSON string."""
    return json.dumps(_database_to_dict(database), separators=(",", ":"))


def deserialize(data: str) -> Database:
    """Deserialize a Database from a JSON string.

    Args:
        data: JSON string produced by :func:`serialize`.

    Returns:
        The reconstructed :class:`Database`.

    Raises:
        ValueError: If the data is not a JSON object, the artifact format version
            is not recognised, or an item is malformed or has an unknown kind.
    """
    obj = json.loads(data)
    if not isinstance(obj, dict):
        raise ValueError("Artifact must be a JSON object")
    version = obj.get("v")
    if version != ARTIFACT_FORMAT_VERSION:
        raise ValueError(f"Unsupported artifact format version: {version!r}")
    items = obj.get("items", [])
    if not isinstance(items, list):
        raise ValueError("Artifact 'items' must be a JSON array")
    return Database(items=tuple(_item_from_dict(i) for i in items))


def write_artifact(database: Database, path: Path) -> None:
    """Write a database artifact to *path*, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(serialize(database), encoding="utf-8")


def read_artifact(path: Path) -> Database:
    """Read and deserialize a database artifact from *path*."""
    return deserialize(path.read_text(encoding="utf-8"))


# ################
# Implementation
# ################


def _database_to_dict(database: Database) -> dict[str, Any]:
    return {
        "v": ARTIFACT_FORMAT_VERSION,
        "items": [_item_to_dict(item) for item in database.items],
    }


def _argument_to_dict(arg: Argument) -> dict[str, Any]:
    d: dict[str, Any] = {"type": arg.type, "name": arg.name}
    if arg.default is not None:
        d["default"] = arg.default
    return d


def _argument_from_dict(obj: dict[str, Any]) -> Argument:
    return Argument(type=obj["type"], name=obj["name"], default=obj.get("default"))


def _item_to_dict(item: Item) -> dict[str, Any]:
    """Encode an item as a dict tagged with its kind."""
    d: dict[str, Any] = {"kind": item.kind.value}
    if isinstance(item, ClassDef):
        d["name"] = item.name
        if item.superclass is not None:
            d["superclass"] = item.superclass
    elif isinstance(item, PropertyDef):
        d.update(class_name=item.class_name, name=item.name, value_type=item.value_type)
    elif isinstance(item, FunctionDef | YieldFunctionDef):
        d.update(
            class_name=item.class_name,
            name=item.name,
            return_type=item.return_type,
            arguments=[_argument_to_dict(a) for a in item.arguments],
        )
    elif isinstance(item, EventDef):
        d.update(
            class_name=item.class_name,
            name=item.name,
            parameters=[_argument_to_dict(p) for p in item.parameters],
        )
    elif isinstance(item, CallbackDef):
        d.update(
            class_name=item.class_name,
            name=item.name,
            return_type=item.return_type,
            parameters=[_argument_to_dict(p) for p in item.parameters],
        )
    elif isinstance(item, EnumDef):
        d["name"] = item.name
    else:
        # EnumItemDef is the only remaining variant.
        assert isinstance(item, EnumItemDef)
        d.update(enum_name=item.enum_name, name=item.name, value=item.value)
    d["tags"] = sorted(item.tags)
    return d


def _item_from_dict(obj: dict[str, Any]) -> Item:
    """Decode an item from a kind-tagged dict."""
    if not isinstance(obj, dict):
        raise ValueError(f"Item must be a JSON object, got {obj!r}")
    try:
        return _decode_item(obj)
    except KeyError as exc:
        raise ValueError(f"Item is missing field {exc.args[0]!r}: {obj!r}") from None
    except TypeError as exc:
        raise ValueError(f"Malformed item {obj!r}: {exc}") from None


def _decode_item(obj: dict[str, Any]) -> Item:
    try:
        kind = ItemKind(obj["kind"])
    except ValueError:
        raise ValueError(f"Unknown item kind: {obj['kind']!r}") from None
    tags = frozenset(obj.get("tags", []))
    if kind is ItemKind.CLASS:
        return ClassDef(name=obj["name"], superclass=obj.get("superclass"), tags=tags)
    if kind is ItemKind.PROPERTY:
        return PropertyDef(class_name=obj["class_name"], name=obj["name"], value_type=obj["value_type"], tags=tags)
    if kind is ItemKind.FUNCTION or kind is ItemKind.YIELD_FUNCTION:
        model = FunctionDef if kind is ItemKind.FUNCTION else YieldFunctionDef
        return model(
            class_name=obj["class_name"],
            name=obj["name"],
            return_type=obj["return_type"],
            arguments=tuple(_argument_from_dict(a) for a in obj.get("arguments", [])),
            tags=tags,
        )
    if kind is ItemKind.EVENT:
        return EventDef(
            class_name=obj["class_name"],
            name=obj["name"],
            parameters=tuple(_argument_from_dict(p) for p in obj.get("parameters", [])),
            tags=tags,
        )
    if kind is ItemKind.CALLBACK:
        return CallbackDef(
            class_name=obj["class_name"],
            name=obj["name"],
            return_type=obj["return_type"],
            parameters=tuple(_argument_from_dict(p) for p in obj.get("parameters", [])),
            tags=tags,
        )
    if kind is ItemKind.ENUM:
        return EnumDef(name=obj["name"], tags=tags)
    return EnumItemDef(enum_name=obj["enum_name"], name=obj["name"], value=obj["value"], tags=tags)
