"""Conversion entry points: HTML bytes in, terminal text out."""

from __future__ import annotations

import logging

from textify.config import TextifyConfig, resolve_width
from textify.errors import InvalidInput, NoTextExtracted, TextifyError
from textify.parser import build_tree
from textify.utils import collapse_blank_lines
from textify.walker import render_text

logger = logging.getLogger(__name__)


def textify(
    data: bytes | str | None,
    width: int | None = None,
    config: TextifyConfig | None = None,
    *,
    encoding: str | None = None,
) -> str:
    """Convert HTML to plain text, raising :class:`TextifyError` on failure.

    *width* is the wrap width for layout tables; ``None`` or a non-positive
    value falls back to ``config.width``. *encoding* names the charset of
    byte input when the caller knows it.
    """
    config = config or TextifyConfig()
    if isinstance(data, str):
        data = data.encode("utf-8")
        encoding = "utf-8"
    if not data:
        raise InvalidInput("No HTML content")

    logger.debug("Starting HTML textification for %d bytes", len(data))
    if len(data) < config.min_input_bytes:
        raise InvalidInput(f"HTML content too short ({len(data)} bytes)")

    document = build_tree(data, encoding=encoding)
    text = render_text(
        document.root,
        width=resolve_width(width, config.width),
        max_depth=config.max_depth,
    )

    collapsed = collapse_blank_lines(text)
    if not collapsed:
        raise NoTextExtracted("No text content extracted")

    logger.debug("Extracted %d characters of text", len(collapsed))
    return collapsed


def html_to_text(
    data: bytes | str | None,
    width: int | None = None,
    config: TextifyConfig | None = None,
    *,
    encoding: str | None = None,
) -> str | None:
    """Convert HTML to plain text, or return ``None`` if there is none.

    Every failure cause (bad input, parse failure, empty document, no text)
    is reported the same way; the cause goes to the debug log.
    """
    try:
        return textify(data, width=width, config=config, encoding=encoding)
    except TextifyError as e:
        logger.debug("HTML textification failed: %s", e)
        return None
