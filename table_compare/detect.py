"""
Format detection for table-compare.

Classifies raw text as one of the two supported table dialects, or as
unknown, using structural heuristics only (no schema, no config).

Detection algorithm:
1. Empty or whitespace-only text -> UNKNOWN.
2. Fewer than 3 lines -> CSV_TABLE if the first line contains a comma,
   otherwise UNKNOWN. An ASCII table needs a top border, a content line
   and a bottom border, so short input can only be CSV.
3. ASCII test: lines alternate border / content / border ..., i.e. every
   even-indexed line (0, 2, 4, ...) is a border line and every
   odd-indexed line is a content line. First and last lines must be
   borders.
4. CSV test: every line contains a comma and splits into the same
   number of fields as the first line, and that number is > 1.
5. Otherwise -> UNKNOWN.

ASCII is tested before CSV, so text matching both shapes is ASCII.

Line shapes are matched with plain character predicates:
- border:  ``+`` then one or more runs of ``-`` each closed by ``+``
  (``+---+`` or ``+---+-----+``).
- content: starts with ``|`` and ends with ``|`` (length >= 2).
"""

from __future__ import annotations

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class TableType(Enum):
    """Surface format of a table text."""

    ASCII_TABLE = "ascii"
    CSV_TABLE = "csv"
    UNKNOWN = "unknown"


def split_lines(data: str) -> list[str]:
    r"""Split text on ``\n``, dropping a trailing ``\r`` per line.

    A final empty line (text ending in a newline) is not returned. Other
    Unicode line boundaries (``\x0c``, ``\u2028``, a lone ``\r``, ...) stay
    inside their line.
    """
    lines = data.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def is_border_line(line: str) -> bool:
    """True for ``+---+`` style border lines (one or more ``-`` runs)."""
    if len(line) < 3 or line[0] != "+" or line[-1] != "+":
        return False
    runs = line[1:-1].split("+")
    return all(run and set(run) == {"-"} for run in runs)


def is_content_line(line: str) -> bool:
    """True for lines that start and end with ``|``."""
    return len(line) >= 2 and line[0] == "|" and line[-1] == "|"


def _is_ascii_table(lines: list[str]) -> bool:
    has_borders = is_border_line(lines[0]) and is_border_line(lines[-1])
    has_row_separators = all(is_border_line(line) for line in lines[0::2])
    has_valid_content = all(is_content_line(line) for line in lines[1::2])
    return has_borders and has_row_separators and has_valid_content


def _is_csv_table(lines: list[str]) -> bool:
    if not all("," in line for line in lines):
        return False
    first_line_columns = lines[0].count(",") + 1
    consistent = all(line.count(",") + 1 == first_line_columns for line in lines)
    return consistent and first_line_columns > 1


def deduct_table_type(data: str) -> TableType:
    """Classify raw table text.

    Args:
        data: The full text of a table file.

    Returns:
        ``TableType.ASCII_TABLE``, ``TableType.CSV_TABLE`` or
        ``TableType.UNKNOWN``. Never raises.
    """
    if not data.strip():
        logger.debug("Empty input, table type unknown")
        return TableType.UNKNOWN

    lines = split_lines(data)

    if len(lines) < 3:
        table_type = TableType.CSV_TABLE if "," in lines[0] else TableType.UNKNOWN
        logger.debug("Short input (%d lines) detected as %s", len(lines), table_type.value)
        return table_type

    if _is_ascii_table(lines):
        table_type = TableType.ASCII_TABLE
    elif _is_csv_table(lines):
        table_type = TableType.CSV_TABLE
    else:
        table_type = TableType.UNKNOWN

    logger.debug("Input (%d lines) detected as %s", len(lines), table_type.value)
    return table_type
