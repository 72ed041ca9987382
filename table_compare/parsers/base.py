"""
Base parser ABC for table-compare.

All dialect-specific parsers implement this interface. The contract is:
1. ``split_rows()`` takes raw text and returns the rows as lists of
   trimmed cell strings (no header decision, no validation).
2. ``parse()`` takes raw text and a header flag and returns a ``Table``.

The header branching lives here so every dialect builds tables the same
way: with the flag set, the first split row becomes the header and the
rest are validated against it; without it, all rows are stored as-is.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from table_compare.exceptions import EmptyHeaderError
from table_compare.table import Table

logger = logging.getLogger(__name__)


class BaseParser(ABC):
    """Abstract base class for table text parsers."""

    #: Short dialect name used in log messages.
    name: str = ""

    @abstractmethod
    def split_rows(self, data: str) -> list[list[str]]:
        """Split raw table text into rows of trimmed cells.

        Args:
            data: Raw text already classified as this parser's dialect.

        Returns:
            Rows in source order.

        Raises:
            MalformedRowError: If a line breaks the dialect's layout.
        """

    def parse(self, data: str, first_line_is_header: bool) -> Table:
        """Parse raw table text into a ``Table``.

        Raises:
            EmptyHeaderError: If a header is requested but there are no rows.
            DuplicateColumnError: If the header repeats a column name.
            RowLengthMismatchError: If a data row's width differs from the header.
            MalformedRowError: If a line breaks the dialect's layout.
        """
        rows = self.split_rows(data)

        if first_line_is_header:
            if not rows:
                raise EmptyHeaderError()
            header, body = rows[0], rows[1:]
            table = Table.with_header_and_data(header, body)
        else:
            table = Table.with_data(rows)

        logger.info(
            "Parsed %s table: %d rows x %d columns (header=%s)",
            self.name,
            table.row_count(),
            table.column_count(),
            first_line_is_header,
        )
        return table
