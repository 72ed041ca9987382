"""
Internal detect -> parse orchestration for table-compare.

Shared by the public functions in ``__init__.py`` and by the CLI so both
run the same sequence:

1. ``deduct_table_type()`` -> ``TableType``
2. ``get_parser()`` -> dialect parser (``UNKNOWN`` raises here)
3. If the header flag is unknown, ``parser.split_rows()`` +
   ``first_line_is_header()`` decide it.
4. ``parser.parse()`` -> ``Table``

This module is **not** part of the public API.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from table_compare.config import CompareConfig, TableSource
from table_compare.detect import TableType, deduct_table_type
from table_compare.header import first_line_is_header
from table_compare.parsers import get_parser
from table_compare.table import Table

logger = logging.getLogger(__name__)


@dataclass
class ParsedTable:
    """A parsed table together with how it was read."""

    table: Table
    table_type: TableType
    has_header: bool
    source: str = ""


@dataclass
class TablePair:
    """The two tables named on the command line, parsed independently."""

    first: ParsedTable
    second: ParsedTable

    def describe(self) -> dict[str, tuple[int, int]]:
        """Return ``{"table1": (rows, cols), "table2": (rows, cols)}``."""
        return {
            "table1": self.first.table.shape,
            "table2": self.second.table.shape,
        }


def run_parse(
    data: str,
    header: bool | None = None,
    source: str = "<text>",
) -> ParsedTable:
    """Detect the dialect of *data* and parse it.

    Args:
        data: Raw table text.
        header: Header flag; ``None`` guesses it from the first two rows.
        source: Label used in log messages (usually the file path).

    Raises:
        InvalidTableSizeError: If the dialect is not recognised.
        TableError: Any construction error from the parser.
    """
    table_type = deduct_table_type(data)
    logger.info("Detected %s table in %s", table_type.value, source)

    parser = get_parser(table_type)
    if header is None:
        header = first_line_is_header(parser.split_rows(data))
        logger.info("Guessed header=%s for %s", header, source)

    table = parser.parse(data, header)
    return ParsedTable(table=table, table_type=table_type, has_header=header, source=source)


def run_parse_file(source: TableSource) -> ParsedTable:
    """Read a table file and run it through ``run_parse()``."""
    path = Path(source.path)
    data = path.read_text(encoding=source.encoding)
    return run_parse(data, header=source.header, source=str(path))


def run_parse_pair(config: CompareConfig) -> TablePair:
    """Parse both tables of *config*."""
    return TablePair(
        first=run_parse_file(config.table1),
        second=run_parse_file(config.table2),
    )
