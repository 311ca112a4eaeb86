"""
Tests for coordinate tokenizing and part splitting.
"""

import pytest

from geowkter.core.errors import MalformedCoordinateError, MalformedStructureError
from geowkter.core.parsers import (
    find_closing_paren,
    parse_coordinate,
    parse_coordinate_list,
    split_parts,
)


class TestParseCoordinate:
    """Tests for single coordinate pairs."""

    def test_simple_pair(self):
        assert parse_coordinate("30 10") == (30.0, 10.0)

    def test_surrounding_whitespace(self):
        assert parse_coordinate("  \t30   10\n") == (30.0, 10.0)

    def test_plus_separator(self):
        """A literal '+' is accepted between the numbers."""
        assert parse_coordinate("30+10") == (30.0, 10.0)

    def test_signed_and_exponent_values(self):
        assert parse_coordinate("-1.5e+2 +4") == (-150.0, 4.0)
        assert parse_coordinate("1E-3 -0.25") == (0.001, -0.25)

    def test_exponent_plus_with_plus_separator(self):
        assert parse_coordinate("1e+2+3") == (100.0, 3.0)

    def test_coordinate_order_preserved(self):
        x, y = parse_coordinate("-122.08 37.42")
        assert x == -122.08
        assert y == 37.42

    @pytest.mark.parametrize("text", ["", "   ", "30", "30,"])
    def test_too_few_tokens(self, text):
        with pytest.raises(MalformedCoordinateError):
            parse_coordinate(text)

    def test_non_numeric_token(self):
        with pytest.raises(MalformedCoordinateError) as exc_info:
            parse_coordinate("1 x")
        assert exc_info.value.error_code == "MALFORMED_COORDINATE"
        assert "'x'" in exc_info.value.message

    def test_three_dimensions_rejected(self):
        with pytest.raises(MalformedCoordinateError):
            parse_coordinate("1 2 3")

    @pytest.mark.parametrize("text", ["nan 1", "1 inf", "-infinity 0", "1e999 0"])
    def test_non_finite_rejected(self, text):
        with pytest.raises(MalformedCoordinateError):
            parse_coordinate(text)

    @pytest.mark.parametrize("text", ["1_0 2", "١ 2", "1 ２", "0x1A 2", "1e 2", "- 2"])
    def test_non_wkt_numbers_rejected(self, text):
        """Only ASCII decimal and exponent notation is accepted."""
        with pytest.raises(MalformedCoordinateError) as exc_info:
            parse_coordinate(text)
        assert "Invalid number" in exc_info.value.message

    def test_bare_decimal_point_forms(self):
        assert parse_coordinate(".5 5.") == (0.5, 5.0)


class TestParseCoordinateList:
    """Tests for comma-separated coordinate lists."""

    def test_list(self):
        assert parse_coordinate_list("30 10, 10 30,40 40") == (
            (30.0, 10.0),
            (10.0, 30.0),
            (40.0, 40.0),
        )

    def test_whitespace_around_commas(self):
        assert parse_coordinate_list(" 1 2 ,\n 3 4 ") == ((1.0, 2.0), (3.0, 4.0))

    def test_single_coordinate(self):
        assert parse_coordinate_list("5 6") == ((5.0, 6.0),)

    def test_empty_list_rejected(self):
        with pytest.raises(MalformedCoordinateError):
            parse_coordinate_list("")

    def test_empty_entry_rejected(self):
        with pytest.raises(MalformedCoordinateError):
            parse_coordinate_list("1 2,,3 4")


class TestFindClosingParen:
    """Tests for matching parenthesis lookup."""

    def test_flat(self):
        assert find_closing_paren("(1 2)", 0) == 4

    def test_nested(self):
        text = "((0 0, 1 1), (2 2)) tail"
        assert find_closing_paren(text, 0) == 18
        assert find_closing_paren(text, 1) == 10

    def test_unclosed(self):
        with pytest.raises(MalformedStructureError):
            find_closing_paren("((0 0, 1 1)", 0)


class TestSplitParts:
    """Tests for splitting parenthesized part lists."""

    def test_two_rings(self):
        assert split_parts("(0 0,1 1),(2 2,3 3)") == ["0 0,1 1", "2 2,3 3"]

    def test_inner_commas_do_not_split(self):
        parts = split_parts("(0 0, 4 0, 4 4, 0 0), (1 1, 2 1, 2 2, 1 1)")
        assert len(parts) == 2
        assert parts[0] == "0 0, 4 0, 4 4, 0 0"

    def test_nested_groups_keep_inner_parens(self):
        parts = split_parts("((0 0,1 1)), ((2 2,3 3),(4 4,5 5))")
        assert parts == ["(0 0,1 1)", "(2 2,3 3),(4 4,5 5)"]

    def test_whitespace_between_groups(self):
        assert split_parts("  (1 2)  ,\n  (3 4)  ") == ["1 2", "3 4"]

    def test_unbalanced_open(self):
        with pytest.raises(MalformedStructureError):
            split_parts("(0 0, 1 1), (2 2")

    def test_unbalanced_close(self):
        with pytest.raises(MalformedStructureError):
            split_parts("(0 0)), (1 1)")

    def test_bare_coordinates_rejected(self):
        with pytest.raises(MalformedStructureError):
            split_parts("0 0, 1 1")

    def test_missing_separator_rejected(self):
        with pytest.raises(MalformedStructureError):
            split_parts("(0 0)(1 1)")

    def test_trailing_comma_rejected(self):
        with pytest.raises(MalformedStructureError):
            split_parts("(0 0),")

    def test_required_empty(self):
        with pytest.raises(MalformedStructureError) as exc_info:
            split_parts("   ")
        assert exc_info.value.error_code == "MALFORMED_STRUCTURE"

    def test_optional_empty(self):
        assert split_parts("", required=False) == []
