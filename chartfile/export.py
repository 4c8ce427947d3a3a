"""
Exporter for chartfile.

Writes the flattened event tables and the ``_meta`` table to the output
directory as CSV or Parquet.

Output file naming:
  {table_name}.{format}  -- e.g. "notes.parquet", "bpms.csv"
  "_meta.{format}"       -- always written alongside the event tables.

Parquet keeps the ``int32`` column types; CSV is there for spreadsheets
and other tools that cannot read Parquet.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import pandas as pd

from chartfile.exceptions import ExportError

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ("csv", "parquet")


def _write_table(df: pd.DataFrame, path: Path, output_format: str) -> None:
    """Write one DataFrame, wrapping any I/O failure in ExportError."""
    try:
        if output_format == "csv":
            df.to_csv(path, index=False, encoding="utf-8-sig")
        else:
            df.to_parquet(path, index=False, engine="pyarrow")
    except Exception as exc:
        raise ExportError(
            f"Failed to write {path.name} as {output_format}: {exc}"
        ) from exc


def export_tables(
    tables: dict[str, pd.DataFrame],
    meta_df: pd.DataFrame,
    output_dir: str | Path,
    output_format: Literal["csv", "parquet"] = "parquet",
) -> list[str]:
    """Write event tables and the ``_meta`` table to disk.

    The output directory is created if needed.  CSV files carry a UTF-8
    BOM so that non-ASCII song names open correctly in Excel.

    Args:
        tables: Table name -> DataFrame.
        meta_df: The metadata table.
        output_dir: Directory to write into.
        output_format: ``"csv"`` or ``"parquet"``.

    Returns:
        Paths written, event tables first and ``_meta`` last.

    Raises:
        ExportError: If *output_format* is unsupported or a write fails.
    """
    if output_format not in SUPPORTED_FORMATS:
        raise ExportError(
            f"Unsupported output format: '{output_format}'. "
            f"Supported formats: {list(SUPPORTED_FORMATS)}"
        )

    out = Path(output_dir)
    try:
        out.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ExportError(f"Cannot create output directory {out}: {exc}") from exc

    written: list[str] = []
    for table_name, df in tables.items():
        file_path = out / f"{table_name}.{output_format}"
        _write_table(df, file_path, output_format)
        written.append(str(file_path))
        logger.info("Exported '%s' -> %s (%d rows)", table_name, file_path.name, len(df))

    meta_path = out / f"_meta.{output_format}"
    _write_table(meta_df, meta_path, output_format)
    written.append(str(meta_path))
    logger.info("Exported _meta -> %s (%d rows)", meta_path.name, len(meta_df))

    return written
