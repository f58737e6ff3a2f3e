# Copyright 2026 rbxapi Contributors
# SPDX-License-Identifier: Apache-2.0

"""Forward-only cursor over API dump text, with the primitive scanners.

The cursor never moves backwards.  Scanners that find nothing return ``None``,
so the caller decides whether an empty result is an error.
"""

from rbxapi.parser.errors import ErrorKind, ScanFailure

# ###############
# Public Interface
# ###############

WHITESPACE = frozenset(" \t")
WORD_CHARS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_")
DIGITS = frozenset("0123456789")

# Characters that end a loose name.  Names may contain spaces, so only these
# delimit them.
NAME_DELIMITERS = frozenset("[(:.\n\r")


class Cursor:
    """A scan position over immutable source text."""

    def __init__(self, source: str) -> None:
        self._source = source
        self.pos = 0

    @property
    def source(self) -> str:
        return self._source

    # ------------------------------------------------------------------
    # Character access
    # ------------------------------------------------------------------

    def at_end(self) -> bool:
        """Return True if every character has been consumed."""
        return self.pos >= len(self._source)

    def current(self) -> str:
        """Return the next unconsumed character, or '' at end of input."""
        if self.pos < len(self._source):
            return self._source[self.pos]
        return ""

    def peek(self, text: str) -> bool:
        """Return True if the source at the current position starts with *text*."""
        return self._source.startswith(text, self.pos)

    def advance(self, count: int = 1) -> None:
        """Move forward by *count* characters."""
        self.pos += count

    def expect(self, text: str) -> None:
        """Consume *text* at the current position.

        Raises:
            ScanFailure: EXPECTED_TOKEN if the source does not continue with *text*.
        """
        if not self.peek(text):
            raise ScanFailure(ErrorKind.EXPECTED_TOKEN, f"`{text}` expected", self.pos, detail=text)
        self.pos += len(text)

    def fail(self, kind: ErrorKind, message: str, detail: str | None = None) -> ScanFailure:
        """Build a failure located at the current position, for the caller to raise."""
        return ScanFailure(kind, message, self.pos, detail=detail)

    def at_line_break(self) -> bool:
        """Return True if the next characters are a ``\\n`` or ``\\r\\n`` terminator."""
        return self.peek("\n") or self.peek("\r\n")

    def skip_white(self) -> None:
        """Skip spaces and tabs.  Line breaks are never skipped."""
        while self.current() in WHITESPACE:
            self.pos += 1

    # ------------------------------------------------------------------
    # Primitive scanners
    # ------------------------------------------------------------------

    def scan_word(self) -> str | None:
        """Scan a run of letters, digits, and underscores."""
        return self._scan_run(WORD_CHARS)

    def scan_int(self) -> str | None:
        """Scan a run of ASCII digits."""
        return self._scan_run(DIGITS)

    def scan_type(self) -> str | None:
        """Scan a type name; type names are plain words."""
        return self.scan_word()

    def scan_name(self) -> str | None:
        """Scan a loose name: anything up to the next name delimiter.

        Interior whitespace is kept and trailing whitespace is dropped.  The
        trailing whitespace is still consumed.  Returns None if the name is
        empty or consists only of whitespace.
        """
        start = self.pos
        last = start - 1
        source = self._source
        while self.pos < len(source) and source[self.pos] not in NAME_DELIMITERS:
            if source[self.pos] not in WHITESPACE:
                last = self.pos
            self.pos += 1
        if last < start:
            return None
        return source[start : last + 1]

    def scan_default(self) -> str:
        """Scan a default value verbatim, up to the next ``,`` or ``)``.

        Stops early at a line break or end of input.  An empty result is a
        valid default (an empty string).
        """
        start = self.pos
        source = self._source
        while self.pos < len(source) and source[self.pos] not in ",)\r\n":
            self.pos += 1
        return source[start : self.pos]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _scan_run(self, chars: frozenset[str]) -> str | None:
        start = self.pos
        source = self._source
        while self.pos < len(source) and source[self.pos] in chars:
            self.pos += 1
        if self.pos == start:
            return None
        return source[start : self.pos]
