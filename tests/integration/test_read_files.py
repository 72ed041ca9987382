"""
Integration tests: reading table files from disk.

Writes sample ASCII and CSV tables to temporary files and runs them
through read_table_file() / read_table_pair().
"""

from __future__ import annotations

import pytest

import table_compare
from table_compare.detect import TableType
from table_compare.exceptions import InvalidTableSizeError
from tests.conftest import ASCII_PEOPLE, CSV_PEOPLE


@pytest.mark.integration
class TestReadTableFile:
    """Tests for read_table_file()."""

    def test_csv_file(self, write_table):
        path = write_table("people.csv", CSV_PEOPLE)
        table = table_compare.read_table_file(path)
        assert table.header == ["Name", "Age", "City"]
        assert table.row_count() == 2

    def test_utf8_bom_is_ignored(self, tmp_path):
        path = tmp_path / "bom.csv"
        path.write_text(CSV_PEOPLE, encoding="utf-8-sig")
        table = table_compare.read_table_file(path, first_line_is_header=True)
        assert table.header[0] == "Name"

    def test_ascii_file_without_header(self, write_table):
        path = write_table("people.txt", ASCII_PEOPLE)
        table = table_compare.read_table_file(path, first_line_is_header=False)
        assert table.row_count() == 3
        assert table.get(0) == ["Name", "Age", "City"]

    def test_unknown_file(self, write_table):
        path = write_table("notes.txt", "nothing tabular here\n")
        with pytest.raises(InvalidTableSizeError):
            table_compare.read_table_file(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            table_compare.read_table_file(tmp_path / "missing.csv")


@pytest.mark.integration
class TestReadTablePair:
    """Tests for read_table_pair()."""

    def test_mixed_dialects(self, write_table):
        first = write_table("a.txt", ASCII_PEOPLE)
        second = write_table("b.csv", CSV_PEOPLE)
        pair = table_compare.read_table_pair(first, second)

        assert pair.first.table_type is TableType.ASCII_TABLE
        assert pair.second.table_type is TableType.CSV_TABLE
        # Same content in two dialects parses to the same table
        assert pair.first.table == pair.second.table
        assert pair.describe() == {"table1": (2, 3), "table2": (2, 3)}

    def test_per_table_header_flags(self, write_table):
        first = write_table("a.txt", ASCII_PEOPLE)
        second = write_table("b.csv", CSV_PEOPLE)
        pair = table_compare.read_table_pair(first, second, header1=True, header2=False)
        assert pair.first.table.row_count() == 2
        assert pair.second.table.row_count() == 3
