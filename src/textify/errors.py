"""Failure causes for a conversion.

Callers that want the optional-result contract use
:func:`textify.convert.html_to_text`, which maps every one of these to
``None``; :func:`textify.convert.textify` lets them propagate.
"""

from __future__ import annotations


class TextifyError(Exception):
    """Base class for conversion failures."""


class InvalidInput(TextifyError):
    """The input buffer is missing, empty, or too short to be markup."""


class ParseFailure(TextifyError):
    """The markup parser could not build a tree."""


class EmptyDocument(TextifyError):
    """The parsed document has no root element."""


class NoTextExtracted(TextifyError):
    """The document rendered to nothing once blank lines were collapsed."""
