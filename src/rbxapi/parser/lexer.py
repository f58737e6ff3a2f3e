# Copyright 2026 rbxapi Contributors
# SPDX-License-Identifier: Apache-2.0

"""Strict scanner for API dump files.

An API dump is produced by running the runtime executable with the ``-API``
option.  Every item occupies one line: an item type keyword, fields whose
layout depends on the item type, and zero or more bracketed tags::

    Class Instance : Root
        Property int Instance.DataCost [readonly] [RobloxPlaceSecurity]
        Function Instance Instance:FindFirstChild(string name, bool recursive = false)

Parsing stops at the first grammar violation and raises a
:class:`~rbxapi.parser.errors.ParseError` that points at the exact character.
"""

from collections.abc import Callable
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
from rbxapi.parser.cursor import Cursor
from rbxapi.parser.errors import ErrorKind, ScanFailure, locate

# ###############
# Public Interface
# ###############


def lex(source: str) -> Database:
    """Parse the text of an API dump into a Database.

    Args:
        source: The full contents of a dump file.  Lines end with ``\\n`` or ``\\r\\n``.

    Returns:
        A Database with one item per non-blank line, in source order.

    Raises:
        ParseError: At the first malformed item.  No partial result is returned.
    """
    try:
        return Database(items=tuple(_scan_items(Cursor(source))))
    except ScanFailure as failure:
        raise locate(source, failure) from None


def scan_tags(cursor: Cursor) -> frozenset[str]:
    """Scan the bracketed tags that follow an item, up to the end of the line.

    Raises:
        ScanFailure: On a character outside of brackets or an unclosed bracket.
    """
    tags: set[str] = set()
    while not cursor.at_end() and not cursor.at_line_break():
        ch = cursor.current()
        if ch == "[":
            cursor.advance()
            start = cursor.pos
            while cursor.current() != "]":
                if cursor.at_end() or cursor.at_line_break():
                    raise cursor.fail(ErrorKind.UNTERMINATED_TAG, "tag closer expected", detail="]")
                cursor.advance()
            tags.add(cursor.source[start : cursor.pos])
            cursor.advance()  # ]
            cursor.skip_white()
        elif ch in " \t":
            cursor.skip_white()
        elif ch == "\r":
            raise cursor.fail(ErrorKind.UNEXPECTED_CHARACTER, "unexpected character")
        else:
            raise cursor.fail(ErrorKind.UNEXPECTED_CHARACTER_BETWEEN_TAGS, "unexpected character between tags")
    return frozenset(tags)


def scan_arguments(cursor: Cursor, allow_default: bool) -> tuple[Argument, ...]:
    """Scan a parenthesized, comma-separated argument list.

    Args:
        cursor: Positioned at the opening parenthesis.
        allow_default: Whether arguments may carry ``= default`` values.

    Raises:
        ScanFailure: If the list is malformed.
    """
    cursor.expect("(")
    if cursor.peek(")"):
        cursor.advance()
        return ()
    arguments: list[Argument] = []
    while True:
        cursor.skip_white()
        arguments.append(_scan_argument(cursor, allow_default))
        if cursor.peek(","):
            cursor.advance()
            continue
        cursor.expect(")")
        return tuple(arguments)


# ################
# Implementation
# ################

_Fields = dict[str, Any]


def _scan_items(cursor: Cursor) -> list[Item]:
    """Drive the scan: one item per line until the input is exhausted."""
    items: list[Item] = []
    _skip_blank_lines(cursor)
    while not cursor.at_end():
        items.append(_scan_item(cursor))
        _skip_blank_lines(cursor)
    return items


def _scan_item(cursor: Cursor) -> Item:
    """Scan one item: keyword, kind-specific fields, then tags."""
    keyword_pos = cursor.pos
    keyword = cursor.scan_word()
    if keyword is None:
        raise cursor.fail(ErrorKind.ITEM_TYPE_EXPECTED, "item type expected")
    entry = _GRAMMARS.get(keyword)
    if entry is None:
        raise ScanFailure(
            ErrorKind.UNKNOWN_ITEM_TYPE,
            f"unknown item type `{keyword}`",
            keyword_pos,
            detail=keyword,
        )
    model, grammar = entry
    cursor.skip_white()
    fields = grammar(cursor)
    cursor.skip_white()
    fields["tags"] = scan_tags(cursor)
    return model(**fields)


def _skip_blank_lines(cursor: Cursor) -> None:
    """Skip line terminators and the indentation of the following lines."""
    while True:
        cursor.skip_white()
        if cursor.peek("\n"):
            cursor.advance()
        elif cursor.peek("\r\n"):
            cursor.advance(2)
        else:
            return


def _require(value: str | None, cursor: Cursor, field: str, message: str) -> str:
    """Return *value*, failing with MISSING_FIELD if a scan came back empty."""
    if value is None:
        raise cursor.fail(ErrorKind.MISSING_FIELD, message, detail=field)
    return value


def _scan_argument(cursor: Cursor, allow_default: bool) -> Argument:
    """Scan: <type> <name> [= <default>]"""
    arg_type = _require(cursor.scan_type(), cursor, "type", "argument type expected")
    cursor.skip_white()
    name = _require(cursor.scan_word(), cursor, "name", "argument name expected")
    default: str | None = None
    if allow_default:
        cursor.skip_white()
        if cursor.peek("="):
            cursor.advance()
            cursor.skip_white()
            default = cursor.scan_default()
    return Argument(type=arg_type, name=name, default=default)


# ------------------------------------------------------------------
# Item grammars
# ------------------------------------------------------------------


def _class(cursor: Cursor) -> _Fields:
    """Class <name> [: <superclass>]"""
    fields: _Fields = {"name": _require(cursor.scan_name(), cursor, "name", "class name expected")}
    if cursor.peek(":"):
        cursor.advance()
        cursor.skip_white()
        fields["superclass"] = _require(cursor.scan_name(), cursor, "superclass", "superclass name expected")
    return fields


def _property(cursor: Cursor) -> _Fields:
    """Property <type> <class>.<name>"""
    value_type = _require(cursor.scan_type(), cursor, "value_type", "type expected")
    cursor.skip_white()
    class_name = _require(cursor.scan_name(), cursor, "class_name", "class name expected")
    cursor.expect(".")
    name = _require(cursor.scan_name(), cursor, "name", "property name expected")
    return {"value_type": value_type, "class_name": class_name, "name": name}


def _function_grammar(label: str) -> Callable[[Cursor], _Fields]:
    def grammar(cursor: Cursor) -> _Fields:
        """<return type> <class>:<name>(<arguments>)"""
        return_type = _require(cursor.scan_type(), cursor, "return_type", "type expected")
        cursor.skip_white()
        class_name = _require(cursor.scan_name(), cursor, "class_name", "class name expected")
        cursor.expect(":")
        name = _require(cursor.scan_name(), cursor, "name", f"{label} name expected")
        arguments = scan_arguments(cursor, allow_default=True)
        return {"return_type": return_type, "class_name": class_name, "name": name, "arguments": arguments}

    return grammar


def _event(cursor: Cursor) -> _Fields:
    """Event <class>.<name>(<parameters>)"""
    class_name = _require(cursor.scan_name(), cursor, "class_name", "class name expected")
    cursor.expect(".")
    name = _require(cursor.scan_name(), cursor, "name", "event name expected")
    parameters = scan_arguments(cursor, allow_default=False)
    return {"class_name": class_name, "name": name, "parameters": parameters}


def _callback(cursor: Cursor) -> _Fields:
    """Callback <return type> <class>.<name>(<parameters>)"""
    return_type = _require(cursor.scan_type(), cursor, "return_type", "type expected")
    cursor.skip_white()
    class_name = _require(cursor.scan_name(), cursor, "class_name", "class name expected")
    cursor.expect(".")
    name = _require(cursor.scan_name(), cursor, "name", "callback name expected")
    parameters = scan_arguments(cursor, allow_default=False)
    return {"return_type": return_type, "class_name": class_name, "name": name, "parameters": parameters}


def _enum(cursor: Cursor) -> _Fields:
    """Enum <name>"""
    return {"name": _require(cursor.scan_name(), cursor, "name", "enum name expected")}


def _enum_item(cursor: Cursor) -> _Fields:
    """EnumItem <enum>.<name> : <value>"""
    enum_name = _require(cursor.scan_name(), cursor, "enum_name", "enum name expected")
    cursor.expect(".")
    name = _require(cursor.scan_name(), cursor, "name", "enum item name expected")
    cursor.expect(":")
    cursor.skip_white()
    value = _require(cursor.scan_int(), cursor, "value", "enum value (int) expected")
    return {"enum_name": enum_name, "name": name, "value": int(value)}


_GRAMMARS: dict[str, tuple[Callable[..., Item], Callable[[Cursor], _Fields]]] = {
    ItemKind.CLASS.value: (ClassDef, _class),
    ItemKind.PROPERTY.value: (PropertyDef, _property),
    ItemKind.FUNCTION.value: (FunctionDef, _function_grammar("function")),
    ItemKind.YIELD_FUNCTION.value: (YieldFunctionDef, _function_grammar("yield function")),
    ItemKind.EVENT.value: (EventDef, _event),
    ItemKind.CALLBACK.value: (CallbackDef, _callback),
    ItemKind.ENUM.value: (EnumDef, _enum),
    ItemKind.ENUM_ITEM.value: (EnumItemDef, _enum_item),
}
