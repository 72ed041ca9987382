"""
Parsers sub-package for table-compare.

Contains dialect-specific parsers that convert raw table text into a
``Table``.

Design: Strategy Pattern
- base.py defines the BaseParser ABC (split_rows + shared parse()).
- csv_table.py implements CsvParser for comma-separated text.
- ascii_table.py implements AsciiParser for box-drawn ``+---+`` tables.

``parse_table()`` dispatches on the ``TableType`` produced by the
detector (detect.py). ``UNKNOWN`` input cannot be parsed and raises
``InvalidTableSizeError``.
"""

from __future__ import annotations

from table_compare.detect import TableType
from table_compare.exceptions import InvalidTableSizeError
from table_compare.parsers.ascii_table import AsciiParser
from table_compare.parsers.base import BaseParser
from table_compare.parsers.csv_table import CsvParser
from table_compare.table import Table

__all__ = ["AsciiParser", "BaseParser", "CsvParser", "get_parser", "parse_table"]

# Maps detected table type to parser class
_PARSER_MAP: dict[TableType, type[BaseParser]] = {
    TableType.ASCII_TABLE: AsciiParser,
    TableType.CSV_TABLE: CsvParser,
}


def get_parser(table_type: TableType) -> BaseParser:
    """Return a parser instance for *table_type*.

    Raises:
        InvalidTableSizeError: If *table_type* has no parser (``UNKNOWN``).
    """
    parser_cls = _PARSER_MAP.get(table_type)
    if parser_cls is None:
        raise InvalidTableSizeError(
            f"Cannot parse table of type '{table_type.value}'"
        )
    return parser_cls()


def parse_table(
    table_type: TableType,
    data: str,
    first_line_is_header: bool,
) -> Table:
    """Parse *data* with the parser selected by *table_type*.

    Raises:
        InvalidTableSizeError: If *table_type* is ``UNKNOWN``.
        TableError: Any construction error from the selected parser.
    """
    return get_parser(table_type).parse(data, first_line_is_header)
