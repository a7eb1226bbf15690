"""Tests for textify.table -- cell text, grid building, layout detection, rendering."""

from __future__ import annotations

import pytest

from textify.buffer import TextBuffer
from textify.nodes import OtherNode, TextNode, element
from textify.table import (
    Cell,
    Row,
    TableGrid,
    build_table_grid,
    column_widths,
    extract_cell_text,
    is_layout_table,
    parse_span,
    render_table,
)


def _render(grid: TableGrid) -> str:
    buffer = TextBuffer()
    render_table(grid, buffer)
    return buffer.getvalue()


def _table(rows: int, cols: int, **attrs: str):
    return element(
        "table",
        *[
            element("tr", *[element("td", f"r{r}c{c}") for c in range(cols)])
            for r in range(rows)
        ],
        **attrs,
    )


# ---------------------------------------------------------------------------
# extract_cell_text
# ---------------------------------------------------------------------------


class TestExtractCellText:
    def test_strips_runs_and_separates_with_spaces(self) -> None:
        td = element("td", "  a  ", element("b", " bold "), "tail")
        assert extract_cell_text(td) == "a bold tail "

    def test_blank_runs_contribute_nothing(self) -> None:
        td = element("td", "   ", element("span", "\n\t"), "x")
        assert extract_cell_text(td) == "x "

    def test_other_nodes_are_skipped(self) -> None:
        td = element("td", OtherNode((TextNode("hidden"),)), "shown")
        assert extract_cell_text(td) == "shown "

    def test_nbsp_only_cell_keeps_its_content(self) -> None:
        assert extract_cell_text(element("td", "\u00a0")) == "\u00a0 "

    def test_only_ascii_whitespace_is_stripped(self) -> None:
        td = element("td", " \t\u00a0x\u00a0\n")
        assert extract_cell_text(td) == "\u00a0x\u00a0 "

    def test_spacer_cells_keep_their_column_width(self) -> None:
        table = element(
            "table",
            element("tr", element("td", "\u00a0"), element("td", "a")),
            element("tr", element("td", "\u00a0"), element("td", "b")),
        )
        assert column_widths(build_table_grid(table)) == [2, 2]

    def test_none_and_childless(self) -> None:
        assert extract_cell_text(None) == ""
        assert extract_cell_text(element("td")) == ""

    def test_depth_bound_cuts_deep_content(self) -> None:
        node = element("span", "deep")
        for _ in range(10):
            node = element("span", node)
        td = element("td", "top", node)
        assert extract_cell_text(td, max_depth=5) == "top "


# ---------------------------------------------------------------------------
# parse_span / Cell
# ---------------------------------------------------------------------------


class TestSpans:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [(None, 1), ("2", 2), (" 3", 3), ("4px", 4), ("0", 1), ("-2", 1), ("wide", 1), ("", 1)],
    )
    def test_parse_span(self, raw: str | None, expected: int) -> None:
        assert parse_span(raw) == expected

    def test_cell_clamps_non_positive_spans(self) -> None:
        cell = Cell("x", colspan=0, rowspan=-4)
        assert cell.colspan == 1
        assert cell.rowspan == 1


# ---------------------------------------------------------------------------
# build_table_grid
# ---------------------------------------------------------------------------


class TestBuildTableGrid:
    def test_rows_and_cells_in_order(self) -> None:
        grid = build_table_grid(_table(2, 3))
        assert len(grid.rows) == 2
        assert [c.content for c in grid.rows[1].cells] == ["r1c0 ", "r1c1 ", "r1c2 "]

    def test_th_cells_are_collected(self) -> None:
        table = element("table", element("tr", element("th", "Name"), element("td", "Bob")))
        grid = build_table_grid(table)
        assert [c.content for c in grid.rows[0].cells] == ["Name ", "Bob "]

    def test_rows_inside_sections_are_collected(self) -> None:
        table = element(
            "table",
            element("thead", element("tr", element("th", "h"))),
            element("tbody", element("tr", element("td", "b"))),
        )
        assert len(build_table_grid(table).rows) == 2

    def test_cell_before_any_row_is_dropped(self) -> None:
        table = element("table", element("td", "lost"), element("tr", element("td", "kept")))
        grid = build_table_grid(table)
        assert len(grid.rows) == 1
        assert [c.content for c in grid.rows[0].cells] == ["kept "]

    def test_span_attributes(self) -> None:
        table = element(
            "table",
            element(
                "tr",
                element("td", "a", colspan="2", rowspan="3"),
                element("td", "b", colspan="0"),
                element("td", "c", colspan="junk"),
            ),
        )
        cells = build_table_grid(table).rows[0].cells
        assert [(c.colspan, c.rowspan) for c in cells] == [(2, 3), (1, 1), (1, 1)]

    def test_nested_table_rows_stay_in_their_cell(self) -> None:
        inner = element("table", element("tr", element("td", "inner")))
        table = element(
            "table",
            element("tr", element("td", inner), element("td", "o2")),
            element("tr", element("td", "o3"), element("td", "o4")),
        )
        grid = build_table_grid(table)
        assert len(grid.rows) == 2
        assert [c.content for c in grid.rows[0].cells] == ["inner ", "o2 "]
        assert [c.content for c in grid.rows[1].cells] == ["o3 ", "o4 "]


# ---------------------------------------------------------------------------
# is_layout_table
# ---------------------------------------------------------------------------


class TestIsLayoutTable:
    def test_three_by_three_is_data(self) -> None:
        assert is_layout_table(_table(3, 3)) is False

    def test_role_presentation_is_layout_regardless_of_shape(self) -> None:
        assert is_layout_table(_table(3, 3, role="presentation")) is True

    def test_role_is_case_insensitive(self) -> None:
        assert is_layout_table(_table(3, 3, role="Presentation")) is True

    def test_border_zero_is_layout(self) -> None:
        assert is_layout_table(_table(3, 3, border="0")) is True

    def test_other_border_values_are_data(self) -> None:
        assert is_layout_table(_table(3, 3, border="1")) is False
        assert is_layout_table(_table(3, 3, border="00")) is False

    def test_single_row_is_layout(self) -> None:
        assert is_layout_table(_table(1, 4)) is True

    def test_single_column_is_layout(self) -> None:
        assert is_layout_table(_table(4, 1)) is True

    def test_only_direct_rows_are_counted(self) -> None:
        table = element(
            "table",
            element("tbody", element("tr", element("td", "a"), element("td", "b"))),
            element("tbody", element("tr", element("td", "c"), element("td", "d"))),
        )
        assert is_layout_table(table) is True

    def test_nested_table_rows_are_not_counted(self) -> None:
        inner = _table(3, 3)
        table = element("table", element("tr", element("td", inner), element("td", "x")))
        assert is_layout_table(table) is True


# ---------------------------------------------------------------------------
# column_widths / render_table
# ---------------------------------------------------------------------------


class TestColumnWidths:
    def test_max_per_column(self) -> None:
        grid = TableGrid.from_rows([["a", "bb"], ["ccc", "d"]])
        assert column_widths(grid) == [3, 2]

    def test_spanning_cell_widens_only_its_first_column(self) -> None:
        grid = TableGrid(
            [
                Row([Cell("abcdef", colspan=2), Cell("x")]),
                Row([Cell("a"), Cell("b"), Cell("c")]),
            ]
        )
        assert column_widths(grid) == [6, 1, 1]

    def test_empty_grid(self) -> None:
        assert column_widths(TableGrid()) == []


class TestRenderTable:
    def test_two_by_two(self) -> None:
        grid = TableGrid.from_rows([["a", "bb"], ["ccc", "d"]])
        assert _render(grid) == (
            "+-----+----+\n"
            "| a   | bb |\n"
            "+-----+----+\n"
            "| ccc | d  |\n"
            "+-----+----+\n"
        )

    def test_line_lengths(self) -> None:
        grid = TableGrid.from_rows([["alpha", "b", "cc"], ["d", "epsilon", ""]])
        widths = column_widths(grid)
        expected = sum(w + 3 for w in widths) + 1
        border = "+" + "".join("-" * (w + 2) + "+" for w in widths)
        for line in _render(grid).splitlines():
            assert len(line) == expected
            if line.startswith("+"):
                assert line == border

    def test_short_row_is_not_padded_out(self) -> None:
        grid = TableGrid.from_rows([["a", "b"], ["c"]])
        assert _render(grid) == (
            "+---+---+\n"
            "| a | b |\n"
            "+---+---+\n"
            "| c |\n"
            "+---+---+\n"
        )

    def test_cells_past_last_column_are_dropped(self) -> None:
        grid = TableGrid(
            [
                Row([Cell("a", colspan=2), Cell("b")]),
                Row([Cell("c"), Cell("d")]),
            ]
        )
        assert _render(grid) == (
            "+---+---+\n"
            "| a |\n"
            "+---+---+\n"
            "| c | d |\n"
            "+---+---+\n"
        )

    def test_no_rows_renders_nothing(self) -> None:
        assert _render(TableGrid()) == ""

    def test_rows_without_cells_render_nothing(self) -> None:
        assert _render(TableGrid([Row(), Row()])) == ""

    def test_wide_characters_are_padded_by_columns(self) -> None:
        grid = TableGrid.from_rows([["世界", "x"], ["ab", "y"]])
        lines = _render(grid).splitlines()
        assert lines[1] == "| 世界 | x |"
        assert lines[3] == "| ab   | y |"
