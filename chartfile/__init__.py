"""
chartfile: Python library for parsing rhythm-game .chart files.

Public API surface:

- ``parse(text)`` -- **core entry point**.  Parses the decoded text of a
  .chart file into a ``Chart`` of ``Section`` objects, or raises a single
  ``ChartParseError`` describing the first malformed construct.

- ``load(path, ...)`` -- Reads a chart file from disk (sniffing its
  encoding) and parses it.

- ``init(...)`` -- First-run workflow.  Parses a chart, writes a
  ``chartconfig.yaml`` listing its sections, and optionally exports the
  event tables.  Returns the ``ChartConfig``.

- ``ingest(...)`` -- Subsequent-run workflow.  Loads ``chartconfig.yaml``,
  re-parses the chart, checks the configured sections, and exports.
"""

from __future__ import annotations

import logging
from pathlib import Path

from chartfile._pipeline import run_export
from chartfile.config import (
    ChartConfig,
    generate_default_config,
    load_config,
    save_config,
    validate_sections_against_chart,
)
from chartfile.document import parse_chart
from chartfile.exceptions import (
    ChartDecodeError,
    ChartFileError,
    ChartParseError,
    ConfigValidationError,
    EmptyHeaderError,
    ExportError,
    IncompleteLineError,
    MalformedEventError,
    MissingOpenBraceError,
    TruncatedInputError,
)
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
from chartfile.reader import read_chart_text

__all__ = [
    "parse",
    "load",
    "init",
    "ingest",
    "Chart",
    "Section",
    "EventKind",
    "NoteEvent",
    "SpecialEvent",
    "BpmEvent",
    "TimeSigEvent",
    "GenericEvent",
    "ChartConfig",
    "ChartFileError",
    "ChartParseError",
    "TruncatedInputError",
    "EmptyHeaderError",
    "MissingOpenBraceError",
    "IncompleteLineError",
    "MalformedEventError",
    "ChartDecodeError",
    "ConfigValidationError",
    "ExportError",
]

logger = logging.getLogger(__name__)


def parse(text: str) -> Chart:
    """Parse the text of a .chart file.

    Examples::

        chart = chartfile.parse(Path("notes.chart").read_text())
        song = chart.get_section("Song")
        resolution = int(song.key_value_pairs["Resolution"])

    Raises:
        ChartParseError: On the first malformed construct.
    """
    return parse_chart(text)


def load(path: str | Path, encoding: str | None = None) -> Chart:
    """Read, decode and parse a chart file.

    Args:
        path: Path to the .chart file.
        encoding: Force a text encoding instead of sniffing it.

    Raises:
        FileNotFoundError: If *path* does not exist.
        ChartDecodeError: If the file cannot be decoded.
        ChartParseError: If the text is not a valid chart.
    """
    logger.info("load() -- path=%s", path)
    return parse_chart(read_chart_text(path, encoding))


def init(
    input_path: str,
    output_dir: str = "outputs/",
    config_path: str = "chartconfig.yaml",
    run_immediately: bool = True,
) -> ChartConfig:
    """First-run entry point: parse, generate config, optionally export.

    Orchestration:
      1. ``load()`` -> ``Chart``
      2. ``generate_default_config()`` listing every section
      3. ``save_config()`` to *config_path*
      4. If *run_immediately* is True, export via ``run_export()``.

    Args:
        input_path: Path to the .chart file.
        output_dir: Directory where output tables will be written.
        config_path: Where to write the generated chartconfig.yaml.
        run_immediately: If False, only write the config file.

    Returns:
        The generated ``ChartConfig``.
    """
    logger.info("init() -- input_path=%s, output_dir=%s", input_path, output_dir)

    chart = load(input_path)
    config = generate_default_config(
        input_path=input_path,
        section_names=chart.section_names(),
        output_dir=output_dir,
    )
    save_config(config, config_path)

    if run_immediately:
        logger.info("run_immediately=True -- exporting tables")
        run_export(config, chart)

    return config


def ingest(config_path: str = "chartconfig.yaml") -> list[str]:
    """Subsequent-run entry point: load config, re-parse, export.

    Orchestration:
      1. ``load_config()`` -> ``ChartConfig`` (Pydantic validation on load).
      2. ``load()`` the configured source chart.
      3. ``validate_sections_against_chart()``.
      4. ``run_export()``.

    Returns:
        List of output file paths that were written.

    Raises:
        FileNotFoundError: If the config or chart file does not exist.
        pydantic.ValidationError: If the config fails schema validation.
        ConfigValidationError: If configured sections are not in the chart.
        ChartParseError: If the chart is malformed.
    """
    logger.info("ingest() -- config_path=%s", config_path)

    config = load_config(config_path)
    chart = load(config.source.input_path, encoding=config.source.encoding)
    validate_sections_against_chart(config, set(chart.section_names()))
    return run_export(config, chart)
