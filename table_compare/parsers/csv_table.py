"""
CSV parser for table-compare.

Splits every line on ``,`` and trims whitespace from each field. There
is no quoting support: a comma always separates fields, matching the
detector's field-count check.
"""

from __future__ import annotations

from table_compare.detect import split_lines
from table_compare.parsers.base import BaseParser


class CsvParser(BaseParser):
    """Parser for comma-separated table text."""

    name = "csv"

    def split_rows(self, data: str) -> list[list[str]]:
        return [
            [field.strip() for field in line.split(",")]
            for line in split_lines(data)
        ]
