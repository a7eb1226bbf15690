"""Terminal text utilities: width measurement, column wrapping, blank-line collapsing.

Widths are measured in terminal columns per grapheme cluster, so wide
CJK characters count as two and combining marks as zero. For plain ASCII
every measurement equals ``len``.
"""

from __future__ import annotations

import unicodedata

import grapheme
import wcwidth as _wcwidth

# ---------------------------------------------------------------------------
# Width cache (capped at 512 entries)
# ---------------------------------------------------------------------------

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512

_TAB_WIDTH = 1

# Stripped from text runs. NBSP and other Unicode spaces are content.
ASCII_WHITESPACE = " \t\n\v\f\r"


def _cache_width(key: str, value: int) -> int:
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[key] = value
    return value


# ---------------------------------------------------------------------------
# Grapheme width
# ---------------------------------------------------------------------------


def _grapheme_width(g: str) -> int:
    """Return the terminal display width of a single grapheme cluster.

    Rules:
    1. Tabs -> 1, other control characters -> 0.
    2. Emoji sequences (VS16, ZWJ, skin tones, regional indicators) -> 2.
    3. Otherwise delegate to wcwidth for the first codepoint.
    """
    if not g:
        return 0

    if len(g) == 1:
        if g == "\t":
            return _TAB_WIDTH
        cp = ord(g)
        if cp < 0x20 or (0x7F <= cp <= 0x9F):
            return 0
        return max(_wcwidth.wcwidth(g), 0)

    for ch in g:
        cp = ord(ch)
        if cp in (0xFE0F, 0x200D):  # VS16, ZWJ
            return 2
        if 0x1F3FB <= cp <= 0x1F3FF or 0x1F1E6 <= cp <= 0x1F1FF:
            return 2

    first_cp = ord(g[0])
    if first_cp >= 0x1F000 or 0x2600 <= first_cp <= 0x27BF:
        return 2

    cat = unicodedata.category(g[0])
    if cat.startswith("M") or cat == "Cf":
        return 0

    return max(_wcwidth.wcwidth(g[0]), 0)


# ---------------------------------------------------------------------------
# visible_width
# ---------------------------------------------------------------------------


def visible_width(text: str) -> int:
    """Calculate the terminal width of *text*.

    * Treats a tab as one column.
    * Uses a fast path for printable ASCII.
    * Caches results for non-ASCII strings.
    """
    if not text:
        return 0

    is_ascii = True
    for ch in text:
        cp = ord(ch)
        if cp < 0x20 or cp > 0x7E:
            is_ascii = False
            break

    if is_ascii:
        return len(text)

    cached = _width_cache.get(text)
    if cached is not None:
        return cached

    total = 0
    for g in grapheme.graphemes(text):
        total += _grapheme_width(g)

    return _cache_width(text, total)


def pad_to_width(text: str, width: int) -> str:
    """Right-pad *text* with spaces to *width* columns. Never truncates."""
    missing = width - visible_width(text)
    if missing <= 0:
        return text
    return text + " " * missing


# ---------------------------------------------------------------------------
# wrap_columns
# ---------------------------------------------------------------------------


def wrap_columns(text: str, width: int) -> str:
    """Greedy column wrap of *text* at *width* columns.

    A newline is inserted before any non-space grapheme that would start at
    or past *width*; runs without spaces are broken exactly at the boundary
    and spaces past the boundary are kept on the current line. Embedded
    newlines pass through and reset the column. The result ends with a
    newline whenever the last line has content.
    """
    width = max(width, 1)
    out: list[str] = []
    col = 0

    for g in grapheme.graphemes(text):
        if "\n" in g:
            out.append(g)
            col = 0
            continue
        if col >= width and g != " ":
            out.append("\n")
            col = 0
        out.append(g)
        col += _grapheme_width(g)

    if col > 0:
        out.append("\n")
    return "".join(out)


# ---------------------------------------------------------------------------
# collapse_blank_lines
# ---------------------------------------------------------------------------


def collapse_blank_lines(text: str) -> str:
    """Drop every newline past the second in an unbroken run of newlines."""
    out: list[str] = []
    newline_count = 0
    for ch in text:
        if ch == "\n":
            newline_count += 1
            if newline_count <= 2:
                out.append(ch)
        else:
            newline_count = 0
            out.append(ch)
    return "".join(out)
