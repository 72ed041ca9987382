"""
In-memory table model for table-compare.

A ``Table`` is a list of rows (each a list of string cells) plus an
optional header mapping column name -> column index. It is built once
through one of three factories and is append-only afterwards:

- ``Table.new()`` -- empty table, no header, no rows.
- ``Table.with_header_and_data(header, data)`` -- validated eagerly:
  non-empty header, unique names, every row as wide as the header.
- ``Table.with_data(data)`` -- header-less; rows are accepted as-is.

Validation asymmetry:
The header-less path performs **no** row-length checks, so a header-less
table may be ragged. This matches the behaviour of existing inputs
(ragged CSV files still load when no header is requested). Width of a
header-less table is inferred from its first row.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence

import pandas as pd

from table_compare.exceptions import (
    DuplicateColumnError,
    EmptyHeaderError,
    InvalidRowIndexError,
    RowLengthMismatchError,
)

logger = logging.getLogger(__name__)


class Table:
    """Rows of string cells with an optional name -> index header map."""

    def __init__(self) -> None:
        self._rows: list[list[str]] = []
        self._header_map: dict[str, int] = {}

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def new(cls) -> Table:
        """Create an empty table (zero rows, zero columns)."""
        return cls()

    @classmethod
    def with_header_and_data(
        cls,
        header: Sequence[str],
        data: Sequence[Sequence[str]],
    ) -> Table:
        """Create a table with a header row and data rows.

        Args:
            header: Column names, left to right.
            data: Data rows; each must have exactly ``len(header)`` cells.

        Returns:
            The constructed ``Table``.

        Raises:
            EmptyHeaderError: If *header* has no columns.
            DuplicateColumnError: On the first repeated column name
                (scanning left to right).
            RowLengthMismatchError: For the first row whose length
                differs from the header length.
        """
        if not header:
            raise EmptyHeaderError()

        header_map: dict[str, int] = {}
        for index, name in enumerate(header):
            if name in header_map:
                raise DuplicateColumnError(name)
            header_map[name] = index

        header_len = len(header)
        for row_index, row in enumerate(data):
            if len(row) != header_len:
                raise RowLengthMismatchError(row_index, len(row), header_len)

        table = cls()
        table._header_map = header_map
        table._rows = [list(row) for row in data]
        return table

    @classmethod
    def with_data(cls, data: Sequence[Sequence[str]]) -> Table:
        """Create a header-less table. Rows are not checked for equal length."""
        table = cls()
        table._rows = [list(row) for row in data]
        if table._rows and any(len(r) != len(table._rows[0]) for r in table._rows):
            logger.warning(
                "Header-less table has ragged rows (first row has %d cells)",
                len(table._rows[0]),
            )
        return table

    # ------------------------------------------------------------------
    # Mutation (append-only)
    # ------------------------------------------------------------------

    def add_row(self, row: Sequence[str]) -> None:
        """Append a row.

        Raises:
            RowLengthMismatchError: If the table has a header and the row
                length differs from the column count.
        """
        if self._header_map and len(row) != len(self._header_map):
            raise RowLengthMismatchError(
                len(self._rows), len(row), len(self._header_map)
            )
        self._rows.append(list(row))

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    def get(self, row_index: int) -> list[str] | None:
        """Return the row at *row_index*, or ``None`` if out of bounds."""
        if 0 <= row_index < len(self._rows):
            return self._rows[row_index]
        return None

    def get_value(self, row_index: int, column_name: str) -> str | None:
        """Return one cell by row index and column name.

        ``None`` when the column is unknown, the row is out of bounds, or
        the row is shorter than the column's index.
        """
        column_index = self._header_map.get(column_name)
        if column_index is None:
            return None
        row = self.get(row_index)
        if row is None or column_index >= len(row):
            return None
        return row[column_index]

    def row_count(self) -> int:
        return len(self._rows)

    def column_count(self) -> int:
        first_len = len(self._rows[0]) if self._rows else 0
        return max(len(self._header_map), first_len)

    @property
    def rows(self) -> list[list[str]]:
        return self._rows

    @property
    def header_map(self) -> dict[str, int]:
        return self._header_map

    @property
    def header(self) -> list[str]:
        """Column names ordered by column index (empty when header-less)."""
        return sorted(self._header_map, key=self._header_map.__getitem__)

    @property
    def has_header(self) -> bool:
        return bool(self._header_map)

    @property
    def shape(self) -> tuple[int, int]:
        return self.row_count(), self.column_count()

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to a ``pandas.DataFrame`` of string cells.

        Header names become the column labels. A header-less table gets a
        positional ``RangeIndex``; ragged rows are padded with ``None``.
        """
        if self._header_map:
            return pd.DataFrame(self._rows, columns=self.header, dtype=object)
        return pd.DataFrame(self._rows, dtype=object)

    def __getitem__(self, row_index: int) -> list[str]:
        row = self.get(row_index)
        if row is None:
            raise InvalidRowIndexError(row_index)
        return row

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[list[str]]:
        return iter(self._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Table):
            return NotImplemented
        return self._rows == other._rows and self._header_map == other._header_map

    def __repr__(self) -> str:
        rows, cols = self.shape
        return f"Table(rows={rows}, columns={cols}, header={self.header!r})"
