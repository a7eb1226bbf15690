"""HTML tables: cell text extraction, grid building, layout detection, rendering.

A data table is rendered as an ASCII grid::

    +-----+----+
    | a   | bb |
    +-----+----+
    | ccc | d  |
    +-----+----+

Column widths are measured in terminal columns. A cell spanning several
columns advances the column counter by its ``colspan`` but only widens the
column it starts in. Rows are never merged vertically; ``rowspan`` is kept
on the cell for callers but does not affect rendering.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator

from textify.buffer import TextBuffer
from textify.config import DEFAULT_MAX_DEPTH, clamp_depth
from textify.nodes import ElementNode, Node, OtherNode, TextNode
from textify.utils import ASCII_WHITESPACE, pad_to_width, visible_width

_CELL_TAGS = ("td", "th")
_SPAN_RE = re.compile(r"\s*([+-]?\d+)")


# ---------------------------------------------------------------------------
# Grid model
# ---------------------------------------------------------------------------


@dataclass
class Cell:
    content: str = ""
    colspan: int = 1
    rowspan: int = 1

    def __post_init__(self) -> None:
        self.colspan = max(1, self.colspan)
        self.rowspan = max(1, self.rowspan)


@dataclass
class Row:
    cells: list[Cell] = field(default_factory=list)


@dataclass
class TableGrid:
    rows: list[Row] = field(default_factory=list)

    @property
    def max_cols(self) -> int:
        """Largest number of cells in any row."""
        return max((len(row.cells) for row in self.rows), default=0)

    @classmethod
    def from_rows(cls, rows: list[list[str]]) -> TableGrid:
        """Build a grid of single-span cells from plain strings."""
        return cls([Row([Cell(content) for content in row]) for row in rows])


# ---------------------------------------------------------------------------
# Cell text extraction
# ---------------------------------------------------------------------------


def extract_cell_text(
    node: Node | None, *, depth: int = 0, max_depth: int = DEFAULT_MAX_DEPTH
) -> str:
    """Flatten the text below *node* into one string.

    Each non-blank text run is stripped of ASCII whitespace and followed by
    a single space; element children contribute their own flattened text.
    Returns ``""`` for ``None`` or childless input.
    """
    if node is None or depth >= max_depth:
        return ""
    match node:
        case ElementNode(children=children) | OtherNode(children=children):
            pass
        case _:
            return ""

    parts: list[str] = []
    for child in children:
        match child:
            case TextNode(text=payload):
                stripped = payload.strip(ASCII_WHITESPACE)
                if stripped:
                    parts.append(stripped)
                    parts.append(" ")
            case ElementNode():
                parts.append(extract_cell_text(child, depth=depth + 1, max_depth=max_depth))
    return "".join(parts)


# ---------------------------------------------------------------------------
# Grid building
# ---------------------------------------------------------------------------


def parse_span(value: str | None) -> int:
    """Parse a ``colspan``/``rowspan`` value, clamped to at least 1.

    Leading digits are honoured (``"2px"`` -> 2); anything unparsable,
    zero or negative yields 1.
    """
    if value is None:
        return 1
    m = _SPAN_RE.match(value)
    if m is None:
        return 1
    return max(1, int(m.group(1)))


def build_table_grid(
    table: ElementNode, *, depth: int = 0, max_depth: int = DEFAULT_MAX_DEPTH
) -> TableGrid:
    """Collect the rows and cells of *table* into a :class:`TableGrid`.

    The whole subtree is visited. Rows and cells of nested tables are not
    collected; their text is already part of the enclosing cell. A cell
    that appears before any row is dropped.
    """
    grid = TableGrid()
    _collect(table, grid, depth, clamp_depth(max_depth), is_root=True)
    return grid


def _collect(node: Node, grid: TableGrid, depth: int, max_depth: int, *, is_root: bool = False) -> None:
    if depth >= max_depth:
        return
    match node:
        case ElementNode(tag="table") if not is_root:
            return
        case ElementNode(tag="tr"):
            grid.rows.append(Row())
        case ElementNode(tag=tag) if tag in _CELL_TAGS:
            if grid.rows:
                grid.rows[-1].cells.append(
                    Cell(
                        content=extract_cell_text(node, depth=depth, max_depth=max_depth),
                        colspan=parse_span(node.get("colspan")),
                        rowspan=parse_span(node.get("rowspan")),
                    )
                )
        case TextNode():
            return

    for child in node.children:
        _collect(child, grid, depth + 1, max_depth)


# ---------------------------------------------------------------------------
# Layout detection
# ---------------------------------------------------------------------------


def is_layout_table(table: ElementNode) -> bool:
    """Return ``True`` when *table* looks like visual layout rather than data.

    A table is layout if it has ``role="presentation"`` (any case),
    ``border="0"``, at most one direct ``tr`` child, or no direct row with
    more than one ``td``/``th`` child. Only direct children are counted.
    """
    role = table.get("role")
    if role is not None and role.casefold() == "presentation":
        return True
    if table.get("border") == "0":
        return True

    row_count = 0
    col_count = 0
    for tr in table.children:
        if not (isinstance(tr, ElementNode) and tr.tag == "tr"):
            continue
        row_count += 1
        cells = sum(
            1 for td in tr.children if isinstance(td, ElementNode) and td.tag in _CELL_TAGS
        )
        col_count = max(col_count, cells)

    return row_count <= 1 or col_count <= 1


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def column_widths(grid: TableGrid) -> list[int]:
    """Width of each column: the widest cell that starts in it."""
    widths = [0] * grid.max_cols
    for row in grid.rows:
        for col, cell in _placed_cells(row, len(widths)):
            widths[col] = max(widths[col], visible_width(cell.content))
    return widths


def render_table(grid: TableGrid, buffer: TextBuffer) -> None:
    """Append *grid* to *buffer* as a bordered ASCII table.

    Emits nothing for a grid without rows or cells. Ragged rows are not
    padded out: a short row's line ends after its last cell.
    """
    widths = column_widths(grid)
    if not widths:
        return

    border = "+" + "".join("-" * (w + 2) + "+" for w in widths) + "\n"
    for row in grid.rows:
        buffer.append(border)
        buffer.append_char("|")
        for col, cell in _placed_cells(row, len(widths)):
            buffer.append(f" {pad_to_width(cell.content, widths[col])} |")
        buffer.append_char("\n")
    buffer.append(border)


def _placed_cells(row: Row, max_cols: int) -> Iterator[tuple[int, Cell]]:
    """Yield ``(start_column, cell)`` until cells or columns run out."""
    col = 0
    for cell in row.cells:
        if col >= max_cols:
            break
        yield col, cell
        col += cell.colspan
