"""
Header-row heuristic for table-compare.

Guesses whether the first row of already-split rows is a header or a
data row. Used by the pipeline when the caller does not say whether the
input has a header.

Signals, in order:
1. Numeric contrast: at any position, one of row 0 / row 1 parses as a
   number and the other does not -> header.
2. Naming style: every row-0 cell is made of letters, whitespace and
   underscores, or is entirely uppercase -> header.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

logger = logging.getLogger(__name__)

# Strict float syntax: no surrounding whitespace and no "_" digit separators
_FLOAT_PATTERN = re.compile(
    r"[+-]?(\d+\.?\d*([eE][+-]?\d+)?|\.\d+([eE][+-]?\d+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def is_number(value: str) -> bool:
    """True if *value* parses as a floating-point number."""
    return _FLOAT_PATTERN.fullmatch(value) is not None


def _looks_like_name(cell: str) -> bool:
    return all(c.isalpha() or c.isspace() or c == "_" for c in cell) or all(
        c.isupper() for c in cell
    )


def first_line_is_header(rows: Sequence[Sequence[str]]) -> bool:
    """Guess whether ``rows[0]`` is a header row.

    Args:
        rows: Rows already split into cells.

    Returns:
        ``True`` if the first row looks like a header. Always ``False``
        with fewer than two rows or when the first two rows differ in
        width.
    """
    if len(rows) < 2:
        return False

    first_row, second_row = rows[0], rows[1]
    if len(first_row) != len(second_row):
        return False

    for header, value in zip(first_row, second_row):
        if is_number(header) != is_number(value):
            logger.debug("Numeric contrast between %r and %r: header", header, value)
            return True

    return all(_looks_like_name(cell) for cell in first_row)
