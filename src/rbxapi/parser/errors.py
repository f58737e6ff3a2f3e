# Copyright 2026 rbxapi Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parse failures and their conversion into located, compiler-style diagnostics.

Scanners signal a problem by raising :class:`ScanFailure`, which records only
the flat character offset at which scanning stopped.  The failure travels up
to the entry point unchanged; :func:`locate` is the single place where the
offset is turned into a line, a column, the offending source line, and a
caret marker.
"""

import enum

# ###############
# Public Interface
# ###############


class ErrorKind(enum.Enum):
    """The ways in which a dump can violate the grammar."""

    EXPECTED_TOKEN = "expected-token"
    UNKNOWN_ITEM_TYPE = "unknown-item-type"
    ITEM_TYPE_EXPECTED = "item-type-expected"
    MISSING_FIELD = "missing-field"
    UNEXPECTED_CHARACTER_BETWEEN_TAGS = "unexpected-character-between-tags"
    UNTERMINATED_TAG = "unterminated-tag"
    UNEXPECTED_CHARACTER = "unexpected-character"


class ScanFailure(Exception):
    """Raised by scanners and grammars at the first grammar violation.

    Attributes:
        kind: What went wrong.
        message: Human-readable description, e.g. "class name expected".
        offset: 0-based offset into the source at which the violation was found.
        detail: The expected token, unknown word, or missing field name, if any.
    """

    def __init__(self, kind: ErrorKind, message: str, offset: int, detail: str | None = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.offset = offset
        self.detail = detail


class ParseError(Exception):
    """Raised when an API dump is malformed.

    Attributes:
        kind: What went wrong.
        detail: The expected token, unknown word, or missing field name, if any.
        message: Human-readable description of the problem.
        line: 1-based line number of the error.
        column: 1-based column number of the error.
        source_line: The offending line, with tabs rendered as single spaces.
        caret: ``column - 1`` spaces followed by ``^``, aligned with *source_line*.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        line: int,
        column: int,
        source_line: str,
        caret: str,
        detail: str | None = None,
    ) -> None:
        super().__init__(f"Line {line}, column {column}: {message}\n{source_line}\n{caret}")
        self.kind = kind
        self.detail = detail
        self.message = message
        self.line = line
        self.column = column
        self.source_line = source_line
        self.caret = caret


def locate(source: str, failure: ScanFailure) -> ParseError:
    """Convert a scan failure into a ParseError pointing into *source*.

    Args:
        source: The full dump text that was being scanned.
        failure: The failure raised by a scanner.

    Returns:
        A ParseError carrying the line, column, rendered line, and caret.
    """
    offset = min(max(failure.offset, 0), len(source))
    line_start = source.rfind("\n", 0, offset) + 1
    line_end = _line_end(source, offset)
    line = source.count("\n", 0, offset) + 1
    column = offset - line_start + 1
    source_line = source[line_start:line_end].replace("\t", " ")
    caret = " " * (column - 1) + "^"
    return ParseError(
        failure.kind,
        failure.message,
        line,
        column,
        source_line,
        caret,
        detail=failure.detail,
    )


# ################
# Implementation
# ################


def _line_end(source: str, offset: int) -> int:
    """Return the offset just past the last character of the line containing *offset*.

    The carriage return of a ``\\r\\n`` terminator is not part of the line.
    """
    end = source.find("\n", offset)
    if end == -1:
        return len(source)
    if end > 0 and source[end - 1] == "\r":
        return end - 1
    return end
