"""textify: render HTML documents as fixed-width terminal text."""

# Conversion entry points
from textify.convert import html_to_text, textify

# Configuration
from textify.config import DEFAULT_WIDTH, TextifyConfig, resolve_width

# Errors
from textify.errors import (
    EmptyDocument,
    InvalidInput,
    NoTextExtracted,
    ParseFailure,
    TextifyError,
)

# Document nodes
from textify.nodes import Document, ElementNode, Node, OtherNode, TextNode, element, text

# Parsing
from textify.parser import build_tree

# Tables
from textify.table import (
    Cell,
    Row,
    TableGrid,
    build_table_grid,
    column_widths,
    extract_cell_text,
    is_layout_table,
    render_table,
)

# Walking
from textify.buffer import TextBuffer
from textify.walker import TextWalker, render_text

# Utilities
from textify.utils import collapse_blank_lines, visible_width, wrap_columns

__all__ = [
    # Conversion
    "html_to_text",
    "textify",
    # Config
    "DEFAULT_WIDTH",
    "TextifyConfig",
    "resolve_width",
    # Errors
    "EmptyDocument",
    "InvalidInput",
    "NoTextExtracted",
    "ParseFailure",
    "TextifyError",
    # Nodes
    "Document",
    "ElementNode",
    "Node",
    "OtherNode",
    "TextNode",
    "element",
    "text",
    # Parsing
    "build_tree",
    # Tables
    "Cell",
    "Row",
    "TableGrid",
    "build_table_grid",
    "column_widths",
    "extract_cell_text",
    "is_layout_table",
    "render_table",
    # Walking
    "TextBuffer",
    "TextWalker",
    "render_text",
    # Utilities
    "collapse_blank_lines",
    "visible_width",
    "wrap_columns",
]
