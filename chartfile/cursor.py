"""
Line cursor over the text of a .chart file.

The cursor keeps an integer offset into the caller's buffer rather than
slicing off the consumed prefix on every read.  Lines end at ``\\n`` or
``\\r\\n``; after each line the whole whitespace run that follows is
skipped, so blank lines and indentation never reach the section reader.
"""

from __future__ import annotations

import re

from chartfile.exceptions import EmptyHeaderError, TruncatedInputError

# ASCII whitespace only
_WHITESPACE_RUN = re.compile(r"[ \f\n\r\t\v]*")


class LineCursor:
    """Yields logical lines from a chart buffer, one at a time."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = _WHITESPACE_RUN.match(text).end()
        self._line_start = 0
        self._line_number = 1
        self._started = False

    @property
    def at_end(self) -> bool:
        return self._pos >= len(self._text)

    @property
    def line_number(self) -> int:
        """1-based line number of the line most recently returned."""
        return self._line_number

    def next_line(self) -> str:
        """Remove and return the next line.

        Raises:
            TruncatedInputError: If no input remains.
        """
        if self.at_end:
            raise TruncatedInputError(
                "Unexpected end of input: no lines left",
                line_number=self.line_number if self._started else None,
            )

        text = self._text
        start = self._pos
        # Only the span since the previous line start is counted
        self._line_number += text.count("\n", self._line_start, start)
        self._line_start = start
        self._started = True

        newline = text.find("\n", start)
        if newline == -1:
            self._pos = len(text)
            return text[start:]

        end = newline
        if end > start and text[end - 1] == "\r":
            end -= 1
        self._pos = _WHITESPACE_RUN.match(text, end).end()
        return text[start:end]


def strip_brackets(line: str) -> str:
    """Drop the first and last character of a ``[Header]`` line.

    Raises:
        EmptyHeaderError: If *line* is empty.
    """
    if not line:
        raise EmptyHeaderError("Section header is empty")
    return line[1:-1]
