"""
Section reader for .chart files.

A section is four parts, read in order:

    [Name]          header; brackets stripped to give the section name
    {               must be exactly "{"
    ...             body lines, one event or metadata entry each
    }               must be exactly "}"

Body line classification (``classify_line``):

1. Split on spaces; fewer than three tokens is an IncompleteLineError.
2. If the first token is an integer, the third token is the event tag and
   selects a grammar from ``GRAMMARS``.  Unknown tags are skipped without
   error -- charts carry tags this library does not model.
3. Otherwise the line is metadata: ``key = value``.  The value is the
   third token onwards joined with *no* separator, so ``Name = My Song``
   stores ``"MySong"``.  Existing consumers depend on this exact string.
   A non-integer first token followed by a known event tag is an event
   line with a bad position and fails as MalformedEventError.
"""

from __future__ import annotations

import logging
from typing import Union

from chartfile.cursor import LineCursor, strip_brackets
from chartfile.exceptions import (
    EmptyHeaderError,
    IncompleteLineError,
    MalformedEventError,
    MissingOpenBraceError,
    TruncatedInputError,
)
from chartfile.grammars import GRAMMARS
from chartfile.models import EventKind, Section
from chartfile.tokens import parse_int_token, split_tokens

logger = logging.getLogger(__name__)

OPEN_BRACE = "{"
CLOSE_BRACE = "}"

SKIP = None
METADATA = "metadata"

# (kind, event) | (METADATA, key, value) | SKIP
LineOutcome = Union[tuple[EventKind, object], tuple[str, str, str], None]


def classify_line(line: str, line_number: int | None = None) -> LineOutcome:
    """Turn one body line into an event, a metadata entry, or ``SKIP``.

    Raises:
        IncompleteLineError: If the line has fewer than three tokens.
        MalformedEventError: If an event line fails its grammar.
    """
    tokens = split_tokens(line)
    if len(tokens) < 3:
        raise IncompleteLineError(
            "Body line has fewer than 3 tokens",
            line_number=line_number,
            line=line,
        )

    key, tag = tokens[0], tokens[2]
    grammar = GRAMMARS.get(tag)

    if parse_int_token(key) is not None:
        if grammar is None:
            logger.debug("Skipping line %s with unknown tag %r", line_number, tag)
            return SKIP
        return grammar.kind, grammar.parse(line, line_number)

    if grammar is not None:
        raise MalformedEventError(grammar.kind, line_number=line_number, line=line)

    return METADATA, key, "".join(tokens[2:])


def read_section(cursor: LineCursor) -> Section:
    """Read one complete section from *cursor*.

    Nothing is returned until the closing brace has been read, so a
    failure anywhere in the section leaves no partial result behind.

    Raises:
        TruncatedInputError: If input ends before the closing brace.
        EmptyHeaderError: If the header line is empty.
        MissingOpenBraceError: If the header is not followed by ``{``.
        IncompleteLineError: If a body line has fewer than three tokens.
        MalformedEventError: If an event line fails its grammar.
    """
    header = cursor.next_line()
    try:
        name = strip_brackets(header)
    except EmptyHeaderError as exc:
        raise EmptyHeaderError(
            "Section header is empty", line_number=cursor.line_number
        ) from exc

    brace = cursor.next_line()
    if brace != OPEN_BRACE:
        raise MissingOpenBraceError(
            f"Section [{name}] does not open with {OPEN_BRACE!r}",
            line_number=cursor.line_number,
            line=brace,
        )

    events: dict[EventKind, list] = {kind: [] for kind in EventKind}
    key_value_pairs: dict[str, str] = {}

    while True:
        try:
            line = cursor.next_line()
        except TruncatedInputError as exc:
            raise TruncatedInputError(
                f"Section [{name}] ends without {CLOSE_BRACE!r}",
                line_number=exc.line_number,
            ) from exc
        if line == CLOSE_BRACE:
            break
        outcome = classify_line(line, cursor.line_number)
        if outcome is SKIP:
            continue
        if outcome[0] == METADATA:
            _, key, value = outcome
            key_value_pairs[key] = value
        else:
            kind, event = outcome
            events[kind].append(event)

    section = Section(
        name=name,
        key_value_pairs=key_value_pairs,
        **{kind.section_field: tuple(items) for kind, items in events.items()},
    )
    logger.debug(
        "Read section [%s]: %d notes, %d metadata entries",
        name,
        len(section.note_events),
        len(key_value_pairs),
    )
    return section
