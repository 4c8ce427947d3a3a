"""
Demo script: parse chart files and print a per-section summary.

Usage:
    uv run python scripts/dump_chart.py path/to/notes.chart [more.chart ...]
    uv run python scripts/dump_chart.py notes.chart --export outputs/notes

With --export, the first chart's event tables are also written (Parquet)
to the given directory, together with a chartconfig.yaml beside it.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("dump_chart")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main() -> int:
    import chartfile

    args = sys.argv[1:]
    export_dir: str | None = None
    if "--export" in args:
        idx = args.index("--export")
        if idx + 1 >= len(args):
            log.error("--export needs a directory")
            return 2
        export_dir = args[idx + 1]
        del args[idx:idx + 2]

    if not args:
        log.error("Usage: dump_chart.py CHART [CHART ...] [--export DIR]")
        return 2

    failures = 0
    for input_path in args:
        if not Path(input_path).exists():
            log.warning("SKIP  %s  (file not found)", input_path)
            continue

        log.info("=" * 70)
        log.info("Chart: %s", input_path)
        log.info("=" * 70)

        try:
            chart = chartfile.load(input_path)
        except chartfile.ChartFileError as exc:
            log.error("FAILED  %s", exc)
            failures += 1
            continue

        for section in chart.sections:
            log.info(
                "  [%s]  notes=%d specials=%d bpms=%d ts=%d events=%d metadata=%d",
                section.name,
                len(section.note_events),
                len(section.special_events),
                len(section.bpm_events),
                len(section.ts_events),
                len(section.generic_events),
                len(section.key_value_pairs),
            )

    if export_dir is not None and args and Path(args[0]).exists():
        config_path = str(Path(export_dir.rstrip("/\\")).with_suffix(".yaml"))
        chartfile.init(args[0], output_dir=export_dir, config_path=config_path)
        log.info("Exported %s -> %s", args[0], export_dir)

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
