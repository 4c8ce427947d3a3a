"""
Shared test fixtures and path constants for chartfile tests.

All input file paths are defined here as module-level constants for
easy discovery and modification.
"""

from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Input file paths -- edit here if files move or new ones are added
# ---------------------------------------------------------------------------
INPUT_DIR = Path(__file__).resolve().parent / "inputs"

SAMPLE_CHART = INPUT_DIR / "sample.chart"


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def sample_chart_text() -> str:
    return SAMPLE_CHART.read_text(encoding="utf-8")


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (runs against tests/inputs files)",
    )
