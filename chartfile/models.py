"""
Document model for parsed .chart files.

A ``Chart`` is an ordered tuple of ``Section`` objects, one per bracketed
block in the file.  Each section keeps five ordered lists of typed events
plus a mapping of free-form metadata lines.

All dataclasses are frozen: the parser builds every section in one go
after reading its closing brace, so a section is never observed half
populated.  Values are stored raw -- tick positions, BPM fixed-point
numbers and the default time-signature denominator of ``2`` are passed
through untouched for downstream code to interpret.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class EventKind(str, Enum):
    """The five typed event kinds a section body line can produce."""

    NOTE = "note"
    SPECIAL = "special"
    BPM = "bpm"
    TIME_SIGNATURE = "time signature"
    GENERIC = "generic"

    @property
    def section_field(self) -> str:
        """Name of the ``Section`` attribute holding events of this kind."""
        return _SECTION_FIELDS[self]


_SECTION_FIELDS = {
    EventKind.NOTE: "note_events",
    EventKind.SPECIAL: "special_events",
    EventKind.BPM: "bpm_events",
    EventKind.TIME_SIGNATURE: "ts_events",
    EventKind.GENERIC: "generic_events",
}


@dataclass(frozen=True)
class NoteEvent:
    """``<position> = N <fret> <length>``."""

    position: int
    fret: int
    length: int


@dataclass(frozen=True)
class SpecialEvent:
    """``<position> = S <key> <length>`` (star power, solos, ...)."""

    position: int
    key: int
    length: int


@dataclass(frozen=True)
class BpmEvent:
    """``<position> = B <bpm>``.

    ``bpm`` keeps the file's fixed-point value (e.g. ``120000`` for 120 BPM).
    """

    position: int
    bpm: int


@dataclass(frozen=True)
class TimeSigEvent:
    """``<position> = TS <numerator> [<denominator>]``.

    When the file omits the second number the stored denominator is the
    literal ``2``; it is a raw value, not a resolved note length.
    """

    position: int
    numerator: int
    denominator: int = 2


@dataclass(frozen=True)
class GenericEvent:
    """``<position> = E <data>`` where data is one run of non-space text."""

    position: int
    data: str


@dataclass(frozen=True)
class Section:
    """A named, brace-delimited block of a chart.

    Attributes:
        name: Header text with the surrounding brackets removed.
        note_events: ``N`` lines, in file order.
        special_events: ``S`` lines, in file order.
        bpm_events: ``B`` lines, in file order.
        ts_events: ``TS`` lines, in file order.
        generic_events: ``E`` lines, in file order.
        key_value_pairs: Metadata lines (``Resolution = 192`` etc.).  A later
            line with the same key overwrites the earlier value.  Stored
            as a read-only copy; left out of the hash but not equality.
    """

    name: str
    note_events: tuple[NoteEvent, ...] = ()
    special_events: tuple[SpecialEvent, ...] = ()
    bpm_events: tuple[BpmEvent, ...] = ()
    ts_events: tuple[TimeSigEvent, ...] = ()
    generic_events: tuple[GenericEvent, ...] = ()
    key_value_pairs: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "key_value_pairs", MappingProxyType(dict(self.key_value_pairs))
        )

    def events_of(self, kind: EventKind) -> tuple:
        """Return the event tuple that holds events of *kind*."""
        return getattr(self, kind.section_field)


@dataclass(frozen=True)
class Chart:
    """A parsed chart: its sections in file order.

    Section names may repeat (malformed or hand-edited charts do this);
    repeated sections are kept as separate entries and never merged.
    """

    sections: tuple[Section, ...] = ()

    def section_names(self) -> list[str]:
        return [s.name for s in self.sections]

    def get_section(self, name: str) -> Section | None:
        """Return the first section called *name*, or ``None``."""
        for section in self.sections:
            if section.name == name:
                return section
        return None
