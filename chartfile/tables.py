"""
Flatten a parsed ``Chart`` into pandas DataFrames.

One table per event kind, with every section's events stacked and tagged
with the section they came from:

=================  ===================================================
Table              Columns (after ``section_index``, ``section``)
=================  ===================================================
notes              position, fret, length
specials           position, key, length
bpms               position, bpm
time_signatures    position, numerator, denominator
events             position, data
=================  ===================================================

``section_index`` is the 0-based position of the section in the file, so
repeated section names stay distinguishable.  Integer columns use
``int32``, the range the parser accepts.  Column order is fixed so that an
empty table still has the full schema.

Metadata lines go to a separate ``_meta`` table (``section_index``,
``section``, ``key``, ``value``).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import astuple, fields

import numpy as np
import pandas as pd

from chartfile.models import (
    BpmEvent,
    Chart,
    EventKind,
    GenericEvent,
    NoteEvent,
    Section,
    SpecialEvent,
    TimeSigEvent,
)

logger = logging.getLogger(__name__)

KEY_COLUMNS = ["section_index", "section"]
META_COLUMNS = KEY_COLUMNS + ["key", "value"]

# EventKind -> (table name, event dataclass)
EVENT_TABLES: dict[EventKind, tuple[str, type]] = {
    EventKind.NOTE: ("notes", NoteEvent),
    EventKind.SPECIAL: ("specials", SpecialEvent),
    EventKind.BPM: ("bpms", BpmEvent),
    EventKind.TIME_SIGNATURE: ("time_signatures", TimeSigEvent),
    EventKind.GENERIC: ("events", GenericEvent),
}


def _selected_sections(
    chart: Chart, sections: Iterable[str] | None
) -> list[tuple[int, Section]]:
    """Return ``(index, section)`` pairs, optionally filtered by name."""
    wanted = set(sections) if sections else None
    return [
        (index, section)
        for index, section in enumerate(chart.sections)
        if wanted is None or section.name in wanted
    ]


def _event_table(
    kind: EventKind, selected: list[tuple[int, Section]]
) -> pd.DataFrame:
    """Build the stacked DataFrame for one event kind."""
    _, event_cls = EVENT_TABLES[kind]
    event_columns = [f.name for f in fields(event_cls)]

    rows = [
        (index, section.name, *astuple(event))
        for index, section in selected
        for event in section.events_of(kind)
    ]
    df = pd.DataFrame(rows, columns=KEY_COLUMNS + event_columns)

    # object dtype for strings, int32 for everything numeric
    dtypes = {"section_index": np.int32, "section": object}
    for f in fields(event_cls):
        dtypes[f.name] = object if f.name == "data" else np.int32
    return df.astype(dtypes)


def build_event_tables(
    chart: Chart, sections: Iterable[str] | None = None
) -> dict[str, pd.DataFrame]:
    """Build one DataFrame per event kind.

    Args:
        chart: The parsed chart.
        sections: Section names to include.  ``None`` or empty includes
            every section.

    Returns:
        Dict mapping table name (``notes``, ``specials``, ``bpms``,
        ``time_signatures``, ``events``) -> DataFrame.
    """
    selected = _selected_sections(chart, sections)
    tables: dict[str, pd.DataFrame] = {}
    for kind, (table_name, _) in EVENT_TABLES.items():
        tables[table_name] = _event_table(kind, selected)
        logger.debug("Built table '%s': %d rows", table_name, len(tables[table_name]))
    logger.info(
        "Built %d event tables from %d section(s)", len(tables), len(selected)
    )
    return tables


def build_metadata_table(
    chart: Chart, sections: Iterable[str] | None = None
) -> pd.DataFrame:
    """Build the ``_meta`` table: one row per metadata entry per section."""
    rows = [
        (index, section.name, key, value)
        for index, section in _selected_sections(chart, sections)
        for key, value in section.key_value_pairs.items()
    ]
    df = pd.DataFrame(rows, columns=META_COLUMNS)
    return df.astype({"section_index": np.int32})
