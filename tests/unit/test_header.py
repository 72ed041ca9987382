"""
Unit tests for HeaderHeuristic (table_compare.header).
"""

import pytest

from table_compare.header import first_line_is_header, is_number


class TestIsNumber:
    """Tests for is_number() float syntax."""

    @pytest.mark.parametrize(
        "value",
        ["0", "30", "-1", "+2.5", "3.", ".5", "1e5", "1.5E-3", "inf", "-Infinity", "NaN"],
    )
    def test_numbers(self, value):
        assert is_number(value) is True

    @pytest.mark.parametrize(
        "value", ["", "abc", "1,000", "1_000", " 1", "1 ", "1.2.3", "e5", "0x10", "."]
    )
    def test_not_numbers(self, value):
        assert is_number(value) is False


class TestFirstLineIsHeader:
    """Tests for first_line_is_header()."""

    def test_numeric_contrast(self):
        assert first_line_is_header([["Name", "Age"], ["Bob", "30"]]) is True

    def test_numeric_header_over_text_value(self):
        assert first_line_is_header([["2024", "x"], ["total", "x"]]) is True

    def test_fewer_than_two_rows(self):
        assert first_line_is_header([]) is False
        assert first_line_is_header([["Name", "Age"]]) is False

    def test_width_mismatch(self):
        assert first_line_is_header([["Name", "Age"], ["Bob"]]) is False

    def test_all_numeric_rows(self):
        """No contrast; '1' is neither alphabetic nor uppercase."""
        assert first_line_is_header([["1", "2"], ["3", "4"]]) is False

    def test_alphabetic_names_fallback(self):
        assert first_line_is_header([["first name", "last_name"], ["Bob", "Smith"]]) is True

    def test_punctuation_fails_fallback(self):
        assert first_line_is_header([["ID-1", "CODE"], ["x", "y"]]) is False

    def test_unicode_letters_pass_fallback(self):
        assert first_line_is_header([["Été", "CODE"], ["x", "y"]]) is True

    def test_mixed_name_fails_fallback(self):
        assert first_line_is_header([["col1", "col2"], ["a", "b"]]) is False

    def test_empty_cells_pass_fallback(self):
        assert first_line_is_header([["", ""], ["a", "b"]]) is True
