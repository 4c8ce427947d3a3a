"""
Internal export orchestration for chartfile.

Shared by the module-level ``init()`` and ``ingest()`` functions so both
run the same tables -> export sequence.

This module is **not** part of the public API.
"""

from __future__ import annotations

import logging

from chartfile.config import ChartConfig
from chartfile.export import export_tables
from chartfile.models import Chart
from chartfile.tables import build_event_tables, build_metadata_table

logger = logging.getLogger(__name__)


def run_export(config: ChartConfig, chart: Chart) -> list[str]:
    """Flatten *chart* into tables and write them per *config*.

    Steps:
      1. Build the event tables for the configured sections.
      2. Build the ``_meta`` table.
      3. Export everything to ``config.output.output_dir``.

    Returns:
        List of output file paths that were written.
    """
    sections = config.sections or None
    tables = build_event_tables(chart, sections)
    meta_df = build_metadata_table(chart, sections)

    written = export_tables(
        tables=tables,
        meta_df=meta_df,
        output_dir=config.output.output_dir,
        output_format=config.output.output_format,
    )
    logger.info("Export complete: wrote %d files", len(written))
    return written
