"""
Document-level parser: text in, ``Chart`` out.

``parse_chart`` reads sections until the buffer is exhausted.  It is a
plain function with no module state; separate threads can parse separate
buffers at the same time.
"""

from __future__ import annotations

import logging

from chartfile.cursor import LineCursor
from chartfile.models import Chart, Section
from chartfile.section import read_section

logger = logging.getLogger(__name__)


def parse_chart(text: str) -> Chart:
    """Parse the full text of a .chart file.

    Args:
        text: Decoded file contents.

    Returns:
        A ``Chart`` with every section in file order.

    Raises:
        ChartParseError: On the first malformed construct.  No partial
            chart is returned.
    """
    cursor = LineCursor(text)
    sections: list[Section] = []

    while not cursor.at_end:
        sections.append(read_section(cursor))

    logger.info("Parsed chart: %d section(s)", len(sections))
    return Chart(sections=tuple(sections))
