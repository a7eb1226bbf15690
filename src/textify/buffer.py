"""Append-only text accumulator."""

from __future__ import annotations


class TextBuffer:
    """Collects output text in order.

    Appends are cheap (parts are joined lazily); nothing is ever removed.
    """

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._length = 0

    def append(self, text: str) -> None:
        """Append a string. Empty strings are ignored."""
        if not text:
            return
        self._parts.append(text)
        self._length += len(text)

    def append_char(self, ch: str) -> None:
        self.append(ch)

    def getvalue(self) -> str:
        """Return everything appended so far as one string."""
        if len(self._parts) > 1:
            self._parts = ["".join(self._parts)]
        return self._parts[0] if self._parts else ""

    def __len__(self) -> int:
        return self._length

    def __str__(self) -> str:
        return self.getvalue()
