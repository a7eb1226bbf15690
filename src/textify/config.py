"""Conversion settings, with environment overrides."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 72
DEFAULT_MAX_DEPTH = 512
MIN_INPUT_BYTES = 10

# Frames kept free for callers above the walker and for library internals.
_RECURSION_HEADROOM = 200


@dataclass
class TextifyConfig:
    """Settings shared by one or more conversions.

    ``width`` is the wrap width for layout tables; ``max_depth`` bounds how
    far the renderer descends into the node tree. Rendering recurses once
    per level, so the effective bound is capped by :func:`clamp_depth`.
    """

    width: int = DEFAULT_WIDTH
    max_depth: int = DEFAULT_MAX_DEPTH
    min_input_bytes: int = MIN_INPUT_BYTES

    @classmethod
    def from_env(cls) -> TextifyConfig:
        """Build a config from ``TEXTIFY_WIDTH`` / ``TEXTIFY_MAX_DEPTH``."""
        return cls(
            width=_positive_env("TEXTIFY_WIDTH", DEFAULT_WIDTH),
            max_depth=_positive_env("TEXTIFY_MAX_DEPTH", DEFAULT_MAX_DEPTH),
        )


def _positive_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer", name, raw)
        return default
    if value <= 0:
        logger.warning("Ignoring %s=%r: must be positive", name, raw)
        return default
    return value


def resolve_width(width: int | None, default: int = DEFAULT_WIDTH) -> int:
    """Return *width* if it is a positive integer, else *default*."""
    if width is None or width <= 0:
        return default if default > 0 else DEFAULT_WIDTH
    return width


def clamp_depth(max_depth: int) -> int:
    """Cap *max_depth* so rendering stays inside the recursion limit."""
    ceiling = max(1, sys.getrecursionlimit() - _RECURSION_HEADROOM)
    return max(1, min(max_depth, ceiling))
