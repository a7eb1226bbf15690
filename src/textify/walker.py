"""Tree-to-text walker: renders a document node tree as plain text.

Dispatch per node:

* text -- leading ASCII whitespace stripped; non-empty runs are emitted
  followed by one space.
* ``table`` -- layout tables are flattened and column-wrapped; data tables
  are rendered as a grid and then walked again like any other element.
* ``img`` -- ``[Image: alt]`` or ``[Image]``.
* block tags -- a newline, then the children.
* ``script``/``style``/``meta``/``link``/``title`` -- skipped entirely.
* anything else -- the children, in order.
"""

from __future__ import annotations

import logging

from textify.buffer import TextBuffer
from textify.config import DEFAULT_MAX_DEPTH, DEFAULT_WIDTH, clamp_depth
from textify.nodes import ElementNode, Node, OtherNode, TextNode
from textify.table import build_table_grid, is_layout_table, render_table
from textify.utils import ASCII_WHITESPACE, wrap_columns

logger = logging.getLogger(__name__)

BLOCK_TAGS = frozenset({"br", "p", "div", "h1", "h2", "h3", "h4", "h5", "h6", "li", "tr"})
SUPPRESSED_TAGS = frozenset({"script", "style", "meta", "link", "title"})


class TextWalker:
    """Walks one node tree into a :class:`TextBuffer`.

    A walker holds per-conversion state only (the wrap width, the depth
    bound and whether the bound was hit); create one per document. The
    depth bound is capped below the interpreter's recursion limit.
    """

    def __init__(self, width: int = DEFAULT_WIDTH, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        self.width = width
        self.max_depth = clamp_depth(max_depth)
        if self.max_depth < max_depth:
            logger.debug("Depth limit %d capped to %d by the recursion limit", max_depth, self.max_depth)
        self.truncated = False

    def walk(self, node: Node | None, buffer: TextBuffer, depth: int = 0) -> None:
        if node is None:
            return
        if depth >= self.max_depth:
            if not self.truncated:
                logger.debug("Depth limit %d reached; skipping deeper content", self.max_depth)
                self.truncated = True
            return

        match node:
            case TextNode(text=payload):
                stripped = payload.lstrip(ASCII_WHITESPACE)
                if stripped:
                    buffer.append(stripped)
                    buffer.append_char(" ")
                return

            case ElementNode(tag="table"):
                if is_layout_table(node):
                    flat = TextBuffer()
                    for child in node.children:
                        self.walk(child, flat, depth + 1)
                    buffer.append(wrap_columns(flat.getvalue(), self.width))
                    return
                grid = build_table_grid(node, depth=depth, max_depth=self.max_depth)
                render_table(grid, buffer)

            case ElementNode(tag="img"):
                alt = node.get("alt")
                buffer.append(f"[Image: {alt}]" if alt else "[Image]")
                return

            case ElementNode(tag=tag) if tag in BLOCK_TAGS:
                buffer.append_char("\n")

            case ElementNode(tag=tag) if tag in SUPPRESSED_TAGS:
                return

            case ElementNode() | OtherNode():
                pass

        for child in node.children:
            self.walk(child, buffer, depth + 1)


def render_text(
    root: Node | None, width: int = DEFAULT_WIDTH, max_depth: int = DEFAULT_MAX_DEPTH
) -> str:
    """Walk *root* and return the raw (uncollapsed) text."""
    buffer = TextBuffer()
    TextWalker(width, max_depth).walk(root, buffer)
    return buffer.getvalue()
