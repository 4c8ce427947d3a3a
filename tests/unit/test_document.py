"""
Unit tests for the document parser (chartfile.document / chartfile.parse).

Covers whole-document behaviour: section order, determinism, the
all-or-nothing failure policy, and concatenation of documents.
"""

from __future__ import annotations

import pytest

import chartfile
from chartfile.document import parse_chart
from chartfile.exceptions import (
    ChartParseError,
    MalformedEventError,
    MissingOpenBraceError,
    TruncatedInputError,
)
from chartfile.models import Chart, NoteEvent, TimeSigEvent

SONG_DOC = """\
[Song]
{
  Name = "Test"
  Resolution = 192
}
"""

SYNC_DOC = """\
[SyncTrack]
{
  0 = TS 4
  0 = B 120000
  768 = TS 3 3
}
"""

NOTES_DOC = """\
[ExpertSingle]
{
  192 = N 0 0
  384 = N 1 96
}
"""


def _one_section(body: str):
    chart = parse_chart(f"[Foo]\n{{\n{body}\n}}\n")
    assert len(chart.sections) == 1
    return chart.sections[0]


class TestParseChart:
    """Tests for parse_chart()."""

    def test_single_section_shape(self):
        chart = parse_chart("[Foo]\n{\n0 = N 0 0\n}")
        assert len(chart.sections) == 1
        section = chart.sections[0]
        assert section.name == "Foo"
        assert section.note_events == (NoteEvent(0, 0, 0),)
        assert section.special_events == ()
        assert section.bpm_events == ()
        assert section.ts_events == ()
        assert section.generic_events == ()
        assert section.key_value_pairs == {}

    def test_sections_in_file_order(self):
        chart = parse_chart(SONG_DOC + SYNC_DOC + NOTES_DOC)
        assert chart.section_names() == ["Song", "SyncTrack", "ExpertSingle"]

    def test_repeated_section_names_not_merged(self):
        chart = parse_chart("[A]\n{\n0 = N 0 0\n}\n[A]\n{\n1 = N 1 0\n}\n")
        assert chart.section_names() == ["A", "A"]
        assert chart.sections[0].note_events == (NoteEvent(0, 0, 0),)
        assert chart.sections[1].note_events == (NoteEvent(1, 1, 0),)
        assert chart.get_section("A") is chart.sections[0]

    def test_get_section_missing(self):
        assert parse_chart(SONG_DOC).get_section("Nope") is None

    def test_empty_input(self):
        assert parse_chart("") == Chart(sections=())

    def test_whitespace_only_input(self):
        assert parse_chart("\r\n  \n").sections == ()

    def test_crlf_document(self):
        chart = parse_chart(NOTES_DOC.replace("\n", "\r\n"))
        assert len(chart.sections[0].note_events) == 2

    def test_deterministic(self):
        text = SONG_DOC + SYNC_DOC + NOTES_DOC
        assert parse_chart(text) == parse_chart(text)

    def test_concatenation_equals_separate_parses(self):
        combined = parse_chart(SYNC_DOC + NOTES_DOC)
        assert combined.sections == (
            parse_chart(SYNC_DOC).sections + parse_chart(NOTES_DOC).sections
        )

    def test_public_parse_alias(self):
        assert chartfile.parse(NOTES_DOC) == parse_chart(NOTES_DOC)


class TestEventBoundaries:
    """Boundary cases for individual body lines inside a document."""

    def test_time_signature_default_denominator(self):
        assert _one_section("0 = TS 4").ts_events == (TimeSigEvent(0, 4, 2),)

    def test_time_signature_explicit_denominator(self):
        assert _one_section("0 = TS 4 3").ts_events == (TimeSigEvent(0, 4, 3),)

    def test_unknown_tag_dropped_silently(self):
        section = _one_section("0 = X 1 2")
        assert section.note_events == ()
        assert section.special_events == ()
        assert section.bpm_events == ()
        assert section.ts_events == ()
        assert section.generic_events == ()
        assert section.key_value_pairs == {}

    def test_metadata_concatenation_quirk(self):
        """Intentional compatibility behaviour: "My Song" is stored as
        "MySong".  Downstream consumers rely on this exact string."""
        section = _one_section("Name = My Song")
        assert section.key_value_pairs["Name"] == "MySong"


class TestFailures:
    """The first malformed construct aborts the whole parse."""

    def test_missing_closing_brace(self):
        with pytest.raises(TruncatedInputError):
            parse_chart("[Foo]\n{")

    def test_non_integer_note_position(self):
        with pytest.raises(MalformedEventError):
            parse_chart("[Foo]\n{\nabc = N 1 2\n}\n")

    @pytest.mark.parametrize(
        "body", ["9" * 5000 + " = N 1 2", "0 = N 1 " + "9" * 5000]
    )
    def test_huge_integer_is_malformed_event(self, body):
        with pytest.raises(MalformedEventError):
            parse_chart(f"[A]\n{{\n{body}\n}}\n")

    def test_error_in_later_section_returns_nothing(self):
        with pytest.raises(MalformedEventError) as exc_info:
            parse_chart(SONG_DOC + "[Bad]\n{\n0 = B\n}\n")
        assert exc_info.value.line_number == 8

    def test_missing_open_brace(self):
        with pytest.raises(MissingOpenBraceError):
            parse_chart("[Foo]\n0 = N 0 0\n}\n")

    def test_trailing_garbage_after_last_section(self):
        with pytest.raises(ChartParseError):
            parse_chart(NOTES_DOC + "stray\n")

    def test_all_parse_errors_share_base(self):
        assert issubclass(TruncatedInputError, chartfile.ChartParseError)
        assert issubclass(MalformedEventError, chartfile.ChartFileError)
