"""
Shared test fixtures and sample tables for table-compare tests.

All sample table texts are defined here as module-level constants for
easy discovery and reuse across unit and integration tests.
"""

from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Sample table texts
# ---------------------------------------------------------------------------

CSV_SAMPLE = "a,b,c\n1,2,3\n4,5,6"

ASCII_SAMPLE = "+---+---+\n| a | b |\n+---+---+\n| 1 | 2 |\n+---+---+"

ASCII_PEOPLE = """\
+-------+-----+--------+
| Name  | Age | City   |
+-------+-----+--------+
| Alice | 30  | Paris  |
+-------+-----+--------+
| Bob   | 25  | Berlin |
+-------+-----+--------+
"""

CSV_PEOPLE = """\
Name, Age, City
Alice, 30, Paris
Bob, 25, Berlin
"""

CSV_NO_HEADER = """\
1,2,3
4,5,6
7,8,9
"""


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def write_table(tmp_path: Path):
    """Return a helper that writes *text* to ``tmp_path / name``."""

    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (reads table files from disk)",
    )
