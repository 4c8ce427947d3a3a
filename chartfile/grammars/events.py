"""
The five event grammars and the tag -> grammar dispatch table.

=========  ===============================  ==================
Tag        Pattern                          Event
=========  ===============================  ==================
``N``      ``<int> = N <int> <int>``        NoteEvent
``S``      ``<int> = S <int> <int>``        SpecialEvent
``B``      ``<int> = B <int>``              BpmEvent
``TS``     ``<int> = TS <int> [<int>]``     TimeSigEvent
``E``      ``<int> = E <word>``             GenericEvent
=========  ===============================  ==================

The generic event payload is any run of non-space characters (quotes and
tabs included, possibly empty).  A payload with an internal space does
not match.
"""

from __future__ import annotations

from chartfile.grammars.base import BaseGrammar, LineScanner
from chartfile.models import (
    BpmEvent,
    EventKind,
    GenericEvent,
    NoteEvent,
    SpecialEvent,
    TimeSigEvent,
)

DEFAULT_TS_DENOMINATOR = 2


class NoteGrammar(BaseGrammar):
    kind = EventKind.NOTE
    tag = "N"

    def _match(self, position: int, scanner: LineScanner) -> NoteEvent:
        fret = scanner.read_int()
        length = scanner.read_int()
        return NoteEvent(position=position, fret=fret, length=length)


class SpecialGrammar(BaseGrammar):
    kind = EventKind.SPECIAL
    tag = "S"

    def _match(self, position: int, scanner: LineScanner) -> SpecialEvent:
        key = scanner.read_int()
        length = scanner.read_int()
        return SpecialEvent(position=position, key=key, length=length)


class BpmGrammar(BaseGrammar):
    kind = EventKind.BPM
    tag = "B"

    def _match(self, position: int, scanner: LineScanner) -> BpmEvent:
        return BpmEvent(position=position, bpm=scanner.read_int())


class TimeSigGrammar(BaseGrammar):
    kind = EventKind.TIME_SIGNATURE
    tag = "TS"

    def _match(self, position: int, scanner: LineScanner) -> TimeSigEvent:
        numerator = scanner.read_int()
        denominator = scanner.read_optional_int(DEFAULT_TS_DENOMINATOR)
        return TimeSigEvent(
            position=position, numerator=numerator, denominator=denominator
        )


class GenericGrammar(BaseGrammar):
    kind = EventKind.GENERIC
    tag = "E"

    def _match(self, position: int, scanner: LineScanner) -> GenericEvent:
        return GenericEvent(position=position, data=scanner.read_word())


# Keyed by the third space-separated token of a body line
GRAMMARS: dict[str, BaseGrammar] = {
    grammar.tag: grammar
    for grammar in (
        NoteGrammar(),
        SpecialGrammar(),
        BpmGrammar(),
        TimeSigGrammar(),
        GenericGrammar(),
    )
}
