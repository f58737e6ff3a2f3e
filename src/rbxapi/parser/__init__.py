# Copyright 2026 rbxapi Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parsers for API dump files: the strict scanner and the fast line parser."""

from rbxapi.parser.errors import ErrorKind, ParseError
from rbxapi.parser.fast import Diagnostic, FastParseResult, parse_fast
from rbxapi.parser.lexer import lex

__all__ = [
    "lex",
    "ParseError",
    "ErrorKind",
    "parse_fast",
    "FastParseResult",
    "Diagnostic",
]
