"""
Unit tests for chart file loading (chartfile.reader).

Tests encoding sniffing (BOMs, UTF-8, Latin-1 fallback), forced
encodings, and file-level errors using pytest's tmp_path fixture.
"""

from __future__ import annotations

import codecs

import pytest

import chartfile
from chartfile.exceptions import ChartDecodeError
from chartfile.reader import decode_chart_bytes, detect_encoding, read_chart_text

TEXT = '[Song]\n{\n  Name = "Café"\n}\n'


class TestDetectEncoding:
    def test_utf8_bom(self):
        assert detect_encoding(codecs.BOM_UTF8 + b"x") == "utf-8-sig"

    def test_utf16_boms(self):
        assert detect_encoding(codecs.BOM_UTF16_LE + b"x\x00") == "utf-16"
        assert detect_encoding(codecs.BOM_UTF16_BE + b"\x00x") == "utf-16"

    def test_no_bom(self):
        assert detect_encoding(b"[Song]") is None


class TestDecodeChartBytes:
    def test_plain_utf8(self):
        assert decode_chart_bytes(TEXT.encode("utf-8")) == TEXT

    def test_utf8_bom_removed(self):
        assert decode_chart_bytes(TEXT.encode("utf-8-sig")) == TEXT

    def test_utf16_with_bom(self):
        assert decode_chart_bytes(TEXT.encode("utf-16")) == TEXT

    def test_latin1_fallback(self, caplog):
        data = TEXT.encode("latin-1")
        with caplog.at_level("WARNING", logger="chartfile.reader"):
            assert decode_chart_bytes(data) == TEXT
        assert "falling back" in caplog.text

    def test_forced_encoding(self):
        assert decode_chart_bytes(TEXT.encode("cp1252"), encoding="cp1252") == TEXT

    def test_forced_encoding_failure(self):
        with pytest.raises(ChartDecodeError):
            decode_chart_bytes(b"\xff\xfe\xfd", encoding="utf-8")

    def test_unknown_encoding(self):
        with pytest.raises(ChartDecodeError):
            decode_chart_bytes(b"x", encoding="no-such-codec")


class TestReadChartText:
    def test_reads_file(self, tmp_path):
        path = tmp_path / "notes.chart"
        path.write_bytes(TEXT.encode("utf-8-sig"))
        assert read_chart_text(path) == TEXT

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_chart_text(tmp_path / "missing.chart")


class TestLoad:
    """Tests for the public chartfile.load() helper."""

    def test_load_parses_file(self, tmp_path):
        path = tmp_path / "notes.chart"
        path.write_bytes(TEXT.encode("utf-16"))
        chart = chartfile.load(path)
        assert chart.sections[0].key_value_pairs == {"Name": '"Café"'}

    def test_load_bom_file_has_clean_header(self, tmp_path):
        path = tmp_path / "notes.chart"
        path.write_bytes(TEXT.encode("utf-8-sig"))
        assert chartfile.load(path).section_names() == ["Song"]
