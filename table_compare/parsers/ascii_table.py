"""
ASCII box-table parser for table-compare.

Expected layout (as classified by ``deduct_table_type``)::

    +---+---+
    | a | b |
    +---+---+
    | 1 | 2 |
    +---+---+

Border lines sit on even line indexes and content lines on odd ones.
Only content lines are read: the boundary pipes are dropped, the rest is
split on ``|`` and each cell is trimmed.

The parser does not trust the detector blindly: a selected line that
does not start and end with ``|`` raises ``MalformedRowError`` instead of
producing garbage cells.
"""

from __future__ import annotations

import logging

from table_compare.detect import is_content_line, split_lines
from table_compare.exceptions import MalformedRowError
from table_compare.parsers.base import BaseParser

logger = logging.getLogger(__name__)


class AsciiParser(BaseParser):
    """Parser for ``+---+`` / ``| a |`` box-drawn table text."""

    name = "ascii"

    def split_rows(self, data: str) -> list[list[str]]:
        rows: list[list[str]] = []
        for line_index, line in enumerate(split_lines(data)):
            if line_index % 2 == 0:
                continue
            if not is_content_line(line):
                raise MalformedRowError(line_index, line)
            rows.append([cell.strip() for cell in line[1:-1].split("|")])
        logger.debug("Split %d content lines", len(rows))
        return rows
