"""
Base grammar ABC and the line scanner shared by all event grammars.

Every event grammar reads one already-extracted body line and must match
it completely.  The contract is:
1. parse() takes the full line text and returns one event object.
2. Any mismatch -- a missing field, a non-integer or out-of-range field,
   or leftover text after the last field -- raises MalformedEventError
   tagged with the grammar's EventKind.

Fields may be separated by any run of spaces and tabs (including none
between a tag and the next number).  Grammars hold no per-call state, so
one instance of each is shared by every parse.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod

from chartfile.exceptions import MalformedEventError
from chartfile.models import EventKind
from chartfile.tokens import to_int32

_BLANKS = re.compile(r"[ \t]*")
_INT = re.compile(r"[+-]?[0-9]+")


class _NoMatch(Exception):
    """Internal signal from LineScanner; converted to MalformedEventError."""


class LineScanner:
    """Left-to-right matcher over a single line.

    Each ``expect_*`` / ``read_*`` method first skips horizontal
    whitespace, then either consumes its element or raises ``_NoMatch``
    without moving.
    """

    def __init__(self, line: str) -> None:
        self.line = line
        self.pos = 0

    def _skip_blanks(self) -> None:
        self.pos = _BLANKS.match(self.line, self.pos).end()

    def expect(self, literal: str) -> None:
        self._skip_blanks()
        if not self.line.startswith(literal, self.pos):
            raise _NoMatch(literal)
        self.pos += len(literal)

    def read_int(self) -> int:
        self._skip_blanks()
        match = _INT.match(self.line, self.pos)
        if match is None:
            raise _NoMatch("integer")
        value = to_int32(match.group())
        if value is None:
            raise _NoMatch("integer out of range")
        self.pos = match.end()
        return value

    def read_optional_int(self, default: int) -> int:
        start = self.pos
        try:
            return self.read_int()
        except _NoMatch:
            self.pos = start
            return default

    def read_word(self) -> str:
        """Consume a (possibly empty) run of characters other than space."""
        self._skip_blanks()
        end = self.line.find(" ", self.pos)
        if end == -1:
            end = len(self.line)
        word = self.line[self.pos:end]
        self.pos = end
        return word

    def expect_end(self) -> None:
        self._skip_blanks()
        if self.pos != len(self.line):
            raise _NoMatch("end of line")


class BaseGrammar(ABC):
    """Abstract base class for the per-line event grammars.

    Subclasses set ``kind`` and ``tag`` and implement ``_match()`` against
    a ``LineScanner``; ``parse()`` adds the full-line check and the error
    translation.
    """

    kind: EventKind
    tag: str

    def parse(self, line: str, line_number: int | None = None) -> object:
        """Parse *line* into this grammar's event type.

        Args:
            line: The complete body line.
            line_number: Used only to enrich error messages.

        Raises:
            MalformedEventError: If the line does not match.
        """
        scanner = LineScanner(line)
        try:
            position = scanner.read_int()
            scanner.expect("=")
            scanner.expect(self.tag)
            event = self._match(position, scanner)
            scanner.expect_end()
        except _NoMatch:
            raise MalformedEventError(
                self.kind, line_number=line_number, line=line
            ) from None
        return event

    @abstractmethod
    def _match(self, position: int, scanner: LineScanner) -> object:
        """Read the fields after the tag and build the event."""
