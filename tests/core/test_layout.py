"""Tests for psql aligned-output layout detection."""

import pytest

from tablecopy.core.exceptions import InputError
from tablecopy.core.layout import (
    column_ranges,
    detect_layout,
    is_rule_line,
    template_from_rule,
)
from tablecopy.core.models import ColumnRange, Role, parse_template


@pytest.mark.unit
class TestIsRuleLine:
    @pytest.mark.parametrize(
        "line",
        ["----+-----", "+----+---+", "-- ----", "├────┼───┤", "┌──┬──┐", "╞══╪══╡"],
    )
    def test_rules(self, line):
        assert is_rule_line(line)

    @pytest.mark.parametrize("line", ["", "   ", " id | name", "| 1 |", "(2 rows)", "++"])
    def test_not_rules(self, line):
        assert not is_rule_line(line)


@pytest.mark.unit
class TestTemplateFromRule:
    def test_border_one(self):
        assert template_from_rule("--+---") == parse_template("ddIddd")

    def test_border_two(self):
        assert template_from_rule("+--+--+") == parse_template("LddIddR")

    def test_unicode(self):
        assert template_from_rule("├──┼──┤") == parse_template("LddIddR")

    def test_border_zero_spaces_are_separators(self):
        assert template_from_rule("-- ---") == parse_template("ddIddd")


@pytest.mark.unit
class TestColumnRanges:
    def test_delimiters(self):
        assert column_ranges(parse_template("ddddIdddddddIdddddddd")) == [
            ColumnRange(xmin=-1, xmax=4),
            ColumnRange(xmin=4, xmax=12),
            ColumnRange(xmin=12, xmax=21),
        ]

    def test_with_borders(self):
        assert column_ranges(parse_template("LddIddR")) == [
            ColumnRange(xmin=0, xmax=3),
            ColumnRange(xmin=3, xmax=6),
        ]


@pytest.mark.unit
class TestDetectLayout:
    def test_border_one(self, orders_lines):
        layout = detect_layout(orders_lines)
        assert layout.border_top_row is None
        assert layout.border_head_row == 1
        assert layout.border_bottom_row is None
        assert layout.fixed_rows == 2
        assert layout.title_rows == 0
        assert layout.first_data_row == 2
        assert layout.last_data_row == 4
        assert layout.footer_row == 5
        assert layout.last_row == 5
        assert layout.columns == 3
        assert layout.template[4] is Role.SEPARATOR

    def test_border_two(self, bordered_lines):
        layout = detect_layout(bordered_lines)
        assert layout.border_top_row == 0
        assert layout.border_head_row == 2
        assert layout.first_data_row == 3
        assert layout.last_data_row == 4
        assert layout.border_bottom_row == 5
        assert layout.footer_row == 6
        assert layout.columns == 2
        assert layout.template[0] is Role.LEFT_BORDER
        assert layout.template[-1] is Role.RIGHT_BORDER

    def test_titled_border_two(self):
        lines = [
            "     Orders",
            "+----+-------+",
            "| id | name  |",
            "+----+-------+",
            "|  1 | alice |",
            "+----+-------+",
            "(1 row)",
        ]
        layout = detect_layout(lines)
        assert layout.title_rows == 1
        assert layout.border_top_row == 1
        assert layout.border_head_row == 3
        assert layout.first_data_row == 4
        assert layout.last_data_row == 4
        assert layout.border_bottom_row == 5
        assert layout.footer_row == 6
        assert layout.columns == 2

    def test_titled_border_one(self):
        layout = detect_layout(["  Orders", " id | name ", "----+------", "  1 | bob  "])
        assert layout.title_rows == 1
        assert layout.border_top_row is None
        assert layout.border_head_row == 2
        assert layout.first_data_row == 3

    def test_unicode_border(self):
        lines = [
            "┌────┬───────┐",
            "│ id │ name  │",
            "├────┼───────┤",
            "│  1 │ alice │",
            "└────┴───────┘",
        ]
        layout = detect_layout(lines)
        assert layout.border_top_row == 0
        assert layout.first_data_row == 3
        assert layout.last_data_row == 3
        assert layout.border_bottom_row == 4
        assert layout.footer_row is None
        assert layout.last_row == 4

    def test_no_footer_trailing_blank_lines(self):
        layout = detect_layout([" a ", "---", " 1 ", "", ""])
        assert layout.last_data_row == 2
        assert layout.footer_row is None
        assert layout.last_row == 2

    def test_empty_result(self):
        layout = detect_layout([" a ", "---", "(0 rows)"])
        assert layout.data_rows == 0
        assert layout.footer_row == 2

    def test_no_headline(self):
        with pytest.raises(InputError, match="no header separator"):
            detect_layout(["just", "some text"])
