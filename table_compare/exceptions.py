"""
Custom exception hierarchy for table-compare.

Why a custom hierarchy:
- Callers can catch the whole family (``TableError``) or a single
  structural problem (e.g., ``DuplicateColumnError``) without relying on
  generic ValueError/IndexError.
- Every error carries the context needed for a precise diagnostic
  (row index, observed vs. expected length, offending column name) as
  attributes, not only in the message.
"""


class TableCompareError(Exception):
    """Base exception for all table-compare errors."""


class ConfigValidationError(TableCompareError):
    """Raised when a table-compare YAML config file cannot be used.

    This can happen if:
    - The file is empty.
    - Neither the config nor the command line names both input tables.
    """


class TableError(TableCompareError):
    """Base class for errors raised while building or parsing a ``Table``."""


class EmptyHeaderError(TableError):
    """Raised when a header row has zero columns."""

    def __init__(self) -> None:
        super().__init__("Header is empty: a table header needs at least one column")


class DuplicateColumnError(TableError):
    """Raised on the first column name that appears twice in a header."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Duplicate column name in header: '{name}'")


class RowLengthMismatchError(TableError):
    """Raised when a row's cell count differs from the header's column count."""

    def __init__(self, row_index: int, row_len: int, header_len: int) -> None:
        self.row_index = row_index
        self.row_len = row_len
        self.header_len = header_len
        super().__init__(
            f"Row {row_index} has {row_len} cells, header has {header_len} columns"
        )


class InvalidRowIndexError(TableError):
    """Raised when a row index is out of range for a table."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"Invalid row index: {index}")


class InvalidTableSizeError(TableError):
    """Raised when input cannot be parsed as a table.

    Note that this also covers text whose format was not recognised
    (``TableType.UNKNOWN``); it does not literally mean "wrong size".
    """

    def __init__(self, message: str = "Input could not be parsed as a table") -> None:
        super().__init__(message)


class MalformedRowError(TableError):
    """Raised when a content line breaks the layout its parser expects.

    For example, an ASCII table content line that does not start and end
    with ``|``.
    """

    def __init__(self, line_index: int, line: str) -> None:
        self.line_index = line_index
        self.line = line
        super().__init__(f"Malformed row at line {line_index}: {line!r}")
