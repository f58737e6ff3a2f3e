# Copyright 2026 rbxapi Contributors
# SPDX-License-Identifier: Apache-2.0

"""Per-class tables of settable properties and their value types."""

from collections.abc import Iterable

from rbxapi.model.items import Database, PropertyDef

# ###############
# Public Interface
# ###############

DEFAULT_EXCLUDED_TAGS: frozenset[str] = frozenset({"readonly", "hidden", "deprecated"})


def property_table(
    database: Database,
    exclude_tags: Iterable[str] = DEFAULT_EXCLUDED_TAGS,
) -> dict[str, dict[str, str]]:
    """Collect the properties of every class, keyed by class then property name.

    Args:
        database: A parsed API database.
        exclude_tags: Properties carrying any of these tags are left out.

    Returns:
        ``{class_name: {property_name: value_type}}``, classes and properties in
        declaration order.  Classes without any remaining property are omitted.
    """
    excluded = frozenset(exclude_tags)
    table: dict[str, dict[str, str]] = {}
    for item in database.items:
        if not isinstance(item, PropertyDef) or item.tags & excluded:
            continue
        table.setdefault(item.class_name, {})[item.name] = item.value_type
    return table


def format_property_table(table: dict[str, dict[str, str]]) -> str:
    """Render a property table as text: one class header, then indented properties."""
    lines: list[str] = []
    for class_name, properties in table.items():
        lines.append(class_name)
        for name, value_type in properties.items():
            lines.append(f"\t{name:<35} = {value_type}")
    return "\n".join(lines)
