"""
Custom exception hierarchy for chartfile.

Every parse failure aborts the whole parse, so the parser never hands back
a partial ``Chart``.  Parse errors carry the 1-based line number and the
text of the offending line when they are known, so callers can point the
user at the exact place in the file.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chartfile.models import EventKind


class ChartFileError(Exception):
    """Base exception for all chartfile errors."""


class ChartParseError(ChartFileError):
    """Raised when chart text does not follow the .chart grammar.

    Attributes:
        line_number: 1-based number of the failing line, if known.
        line: Text of the failing line, if known.
    """

    def __init__(
        self,
        message: str,
        *,
        line_number: int | None = None,
        line: str | None = None,
    ) -> None:
        self.line_number = line_number
        self.line = line
        if line_number is not None:
            message = f"Line {line_number}: {message}"
        if line is not None:
            message = f"{message} ({line!r})"
        super().__init__(message)


class TruncatedInputError(ChartParseError):
    """Raised when a required line was expected but the input ran out.

    Typically a section that never reaches its closing brace.
    """


class EmptyHeaderError(ChartParseError):
    """Raised when a section header line is empty."""


class MissingOpenBraceError(ChartParseError):
    """Raised when the line after a section header is not exactly ``{``."""


class IncompleteLineError(ChartParseError):
    """Raised when a section body line has fewer than three tokens."""


class MalformedEventError(ChartParseError):
    """Raised when an event line does not match its event grammar.

    Covers bad or out-of-range integer fields, missing fields and trailing
    text after the last field.
    """

    def __init__(
        self,
        kind: EventKind,
        *,
        line_number: int | None = None,
        line: str | None = None,
    ) -> None:
        self.kind = kind
        super().__init__(
            f"Malformed {kind.value} event",
            line_number=line_number,
            line=line,
        )


class ChartDecodeError(ChartFileError):
    """Raised when the raw bytes of a chart file cannot be decoded."""


class ConfigValidationError(ChartFileError):
    """Raised when chartconfig.yaml fails validation.

    This can happen if:
    - The file is empty.
    - Referenced section names do not exist in the parsed chart.
    """


class ExportError(ChartFileError):
    """Raised when the exporter fails to write output files.

    For example, permission errors, disk full, or unsupported format.
    """
