# Copyright 2026 rbxapi Contributors
# SPDX-License-Identifier: Apache-2.0

"""Line-oriented, regular-expression based parser for API dump files.

Faster than :func:`rbxapi.parser.lexer.lex` and more forgiving: a line that
cannot be parsed is reported as a :class:`Diagnostic`, logged, and skipped
instead of aborting the parse.  For well-formed dumps both parsers produce
the same Database.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

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
    PropertyDef,
    YieldFunctionDef,
)

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class Diagnostic:
    """A dump line that was skipped.

    Attributes:
        line: 1-based physical line number.
        message: Human-readable reason the line was skipped.
    """

    line: int
    message: str


@dataclass
class FastParseResult:
    """Result of a fast parse.

    Attributes:
        database: The items of every line that parsed.
        diagnostics: One entry per skipped line, in source order.
    """

    database: Database
    diagnostics: list[Diagnostic] = field(default_factory=list)


def parse_fast(source: str) -> FastParseResult:
    """Parse an API dump line by line, skipping malformed lines.

    Args:
        source: The full contents of a dump file.

    Returns:
        A FastParseResult with the parsed Database and the diagnostics of
        every skipped line.
    """
    items: list[Item] = []
    diagnostics: list[Diagnostic] = []
    for number, line in enumerate(source.split("\n"), start=1):
        line = line.removesuffix("\r")
        if not line.strip():
            continue
        try:
            items.append(_parse_line(line))
        except _LineError as exc:
            diagnostic = Diagnostic(line=number, message=str(exc))
            logger.warning("error parsing line %d: %s", diagnostic.line, diagnostic.message)
            diagnostics.append(diagnostic)
    return FastParseResult(database=Database(items=tuple(items)), diagnostics=diagnostics)


# ################
# Implementation
# ################

_CLASS = r"[\w<> ]*[\w<>]"
_MEMBER = r"[\w ]*\w"
_TYPE = r"\w+"
_ENUM_ITEM = r"[\w ]*\w"
_ARGS = r"(\([^()]*\))"

_LINE_RE = re.compile(r"^\t*(\w+) (.+)$", re.ASCII)
_TAG_RE = re.compile(r"\[(.*?)\]")
_TAIL_RE = re.compile(r"^(?:[ \t]*\[[^\]]*\])*[ \t]*$")
_ARGUMENT_RE = re.compile(rf"^ ?({_TYPE}) (\w+)(.*)$", re.ASCII | re.DOTALL)
_DEFAULT_RE = re.compile(r"^ = (.*)$", re.DOTALL)

_CLASS_WITH_SUPER_RE = re.compile(rf"^({_CLASS})[ \t]*:[ \t]*({_CLASS})(.*)$", re.ASCII)
_CLASS_RE = re.compile(rf"^({_CLASS})(.*)$", re.ASCII)
_PROPERTY_RE = re.compile(rf"^({_TYPE}) ({_CLASS})\.({_MEMBER})(.*)$", re.ASCII)
_FUNCTION_RE = re.compile(rf"^({_TYPE}) ({_CLASS}):({_MEMBER}){_ARGS}(.*)$", re.ASCII)
_EVENT_RE = re.compile(rf"^({_CLASS})\.({_MEMBER}){_ARGS}(.*)$", re.ASCII)
_CALLBACK_RE = re.compile(rf"^({_TYPE}) ({_CLASS})\.({_MEMBER}){_ARGS}(.*)$", re.ASCII)
_ENUM_RE = re.compile(rf"^({_CLASS})(.*)$", re.ASCII)
_ENUM_ITEM_RE = re.compile(rf"^({_CLASS})\.({_ENUM_ITEM}) : (\d+)(.*)$", re.ASCII)


class _LineError(Exception):
    """Raised when a single line does not match its item grammar."""


def _parse_line(line: str) -> Item:
    m = _LINE_RE.match(line)
    if m is None:
        raise _LineError("expected an item type followed by its fields")
    keyword, data = m.groups()
    parser = _LINE_PARSERS.get(keyword)
    if parser is None:
        raise _LineError(f"unsupported item type `{keyword}`")
    return parser(data)


def _match(pattern: re.Pattern[str], data: str, keyword: str) -> tuple[str, ...]:
    m = pattern.match(data)
    if m is None:
        raise _LineError(f"malformed {keyword} item")
    return m.groups()


def _tags(text: str) -> frozenset[str]:
    if _TAIL_RE.match(text) is None:
        raise _LineError(f"unexpected text between tags: {text.strip()!r}")
    return frozenset(_TAG_RE.findall(text))


def _arguments(text: str) -> tuple[Argument, ...]:
    """Split the inside of ``(...)`` on commas; default values may not contain commas."""
    inner = text[1:-1]
    if not inner:
        return ()
    arguments: list[Argument] = []
    for raw in inner.split(","):
        m = _ARGUMENT_RE.match(raw)
        if m is None:
            raise _LineError(f"malformed argument {raw.strip()!r}")
        arg_type, name, rest = m.groups()
        default: str | None = None
        if rest:
            d = _DEFAULT_RE.match(rest)
            if d is None:
                raise _LineError(f"malformed default value for argument {name!r}")
            default = d.group(1)
        arguments.append(Argument(type=arg_type, name=name, default=default))
    return tuple(arguments)


def _class(data: str) -> Item:
    m = _CLASS_WITH_SUPER_RE.match(data)
    if m is not None:
        name, superclass, tags = m.groups()
    else:
        name, tags = _match(_CLASS_RE, data, "Class")
        superclass = None
    return ClassDef(name=name, superclass=superclass, tags=_tags(tags))


def _property(data: str) -> Item:
    value_type, class_name, name, tags = _match(_PROPERTY_RE, data, "Property")
    return PropertyDef(class_name=class_name, name=name, value_type=value_type, tags=_tags(tags))


def _function(data: str) -> Item:
    return_type, class_name, name, args, tags = _match(_FUNCTION_RE, data, "Function")
    return FunctionDef(
        class_name=class_name,
        name=name,
        return_type=return_type,
        arguments=_arguments(args),
        tags=_tags(tags),
    )


def _yield_function(data: str) -> Item:
    return_type, class_name, name, args, tags = _match(_FUNCTION_RE, data, "YieldFunction")
    return YieldFunctionDef(
        class_name=class_name,
        name=name,
        return_type=return_type,
        arguments=_arguments(args),
        tags=_tags(tags),
    )


def _event(data: str) -> Item:
    class_name, name, params, tags = _match(_EVENT_RE, data, "Event")
    return EventDef(class_name=class_name, name=name, parameters=_parameters(params), tags=_tags(tags))


def _callback(data: str) -> Item:
    return_type, class_name, name, params, tags = _match(_CALLBACK_RE, data, "Callback")
    return CallbackDef(
        class_name=class_name,
        name=name,
        return_type=return_type,
        parameters=_parameters(params),
        tags=_tags(tags),
    )


def _parameters(text: str) -> tuple[Argument, ...]:
    """Event and callback parameters never carry default values."""
    parameters = _arguments(text)
    for param in parameters:
        if param.default is not None:
            raise _LineError(f"parameter {param.name!r} may not have a default value")
    return parameters


def _enum(data: str) -> Item:
    name, tags = _match(_ENUM_RE, data, "Enum")
    return EnumDef(name=name, tags=_tags(tags))


def _enum_item(data: str) -> Item:
    enum_name, name, value, tags = _match(_ENUM_ITEM_RE, data, "EnumItem")
    return EnumItemDef(enum_name=enum_name, name=name, value=int(value), tags=_tags(tags))


_LINE_PARSERS = {
    "Class": _class,
    "Property": _property,
    "Function": _function,
    "YieldFunction": _yield_function,
    "Event": _event,
    "Callback": _callback,
    "Enum": _enum,
    "EnumItem": _enum_item,
}
