"""
table-compare: read ASCII box tables and CSV text into a uniform ``Table``.

Public API surface:

- ``read_table(data, first_line_is_header=None)`` -- detect the dialect
  of raw text and parse it. With ``first_line_is_header=None`` the header
  flag is guessed from the first two rows.

- ``read_table_file(path, ...)`` -- same, reading the text from a file.

- ``read_table_pair(path1, path2)`` -- parse the two tables of a
  comparison independently and return a ``TablePair``.

Building blocks are also exported: ``deduct_table_type()``,
``parse_table()``, ``first_line_is_header()`` and the ``Table`` model.
"""

from __future__ import annotations

import logging
from pathlib import Path

from table_compare._pipeline import TablePair, run_parse, run_parse_file, run_parse_pair
from table_compare.config import CompareConfig, TableSource
from table_compare.detect import TableType, deduct_table_type
from table_compare.header import first_line_is_header
from table_compare.parsers import parse_table
from table_compare.table import Table

__all__ = [
    "Table",
    "TablePair",
    "TableType",
    "deduct_table_type",
    "first_line_is_header",
    "parse_table",
    "read_table",
    "read_table_file",
    "read_table_pair",
]

logger = logging.getLogger(__name__)


def read_table(data: str, first_line_is_header: bool | None = None) -> Table:
    """Detect the dialect of *data* and parse it into a ``Table``.

    Args:
        data: Raw table text (ASCII box table or CSV).
        first_line_is_header: Whether the first row is a header. ``None``
            guesses it with ``first_line_is_header()``.

    Returns:
        The parsed ``Table``.

    Raises:
        InvalidTableSizeError: If the text is neither an ASCII table nor CSV.
        TableError: If the rows violate the table invariants.

    Examples::

        table = table_compare.read_table("a,b,c\\n1,2,3\\n4,5,6", True)
        table.get_value(0, "b")   # "2"
    """
    return run_parse(data, header=first_line_is_header).table


def read_table_file(
    path: str | Path,
    first_line_is_header: bool | None = None,
    encoding: str = "utf-8-sig",
) -> Table:
    """Read a table text file and parse it. See ``read_table()``."""
    source = TableSource(path=str(path), header=first_line_is_header, encoding=encoding)
    return run_parse_file(source).table


def read_table_pair(
    path1: str | Path,
    path2: str | Path,
    header1: bool | None = None,
    header2: bool | None = None,
) -> TablePair:
    """Parse two table files independently.

    Returns:
        A ``TablePair``; ``pair.first.table`` / ``pair.second.table`` hold
        the parsed tables.
    """
    logger.info("read_table_pair() -- %s, %s", path1, path2)
    config = CompareConfig(
        table1=TableSource(path=str(path1), header=header1),
        table2=TableSource(path=str(path2), header=header2),
    )
    return run_parse_pair(config)
