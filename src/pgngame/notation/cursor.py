"""Seekable character source for the PGN tokenizer."""

from __future__ import annotations

from typing import TextIO

_LINE_BREAKS = "\r\n"


class TextCursor:
    """Pull-based reader over an in-memory string.

    The position is an index into the text, so one-character rewinds
    (used to hand the start of the next game back to the caller) are a
    plain :meth:`seek`.
    """

    __slots__ = ("_text", "_pos")

    def __init__(self, text: str, pos: int = 0) -> None:
        self._text = text
        self._pos = 0
        self.seek(pos)

    @classmethod
    def from_source(cls, source: str | TextIO | TextCursor) -> TextCursor:
        """Wrap *source*; an existing cursor is returned unchanged."""
        if isinstance(source, TextCursor):
            return source
        if isinstance(source, str):
            return cls(source)
        if hasattr(source, "read"):
            return cls(source.read())
        raise TypeError(f"Unsupported PGN source: {type(source).__name__}")

    # ── Position ─────────────────────────────────────────────────────────

    @property
    def position(self) -> int:
        return self._pos

    @property
    def at_end(self) -> bool:
        return self._pos >= len(self._text)

    def seek(self, pos: int) -> None:
        if not 0 <= pos <= len(self._text):
            raise ValueError(f"Cursor position out of range: {pos}")
        self._pos = pos

    # ── Reading ──────────────────────────────────────────────────────────

    def read(self) -> str:
        """Next character, or ``""`` once the text is exhausted."""
        if self._pos >= len(self._text):
            return ""
        ch = self._text[self._pos]
        self._pos += 1
        return ch

    def peek(self) -> str:
        if self._pos >= len(self._text):
            return ""
        return self._text[self._pos]

    def skip_whitespace(self) -> None:
        text = self._text
        while self._pos < len(text) and text[self._pos].isspace():
            self._pos += 1

    def read_line(self) -> str:
        """Rest of the current line; the line break is consumed, not returned."""
        text = self._text
        start = self._pos
        end = start
        while end < len(text) and text[end] not in _LINE_BREAKS:
            end += 1
        line = text[start:end]
        if text.startswith("\r\n", end):
            end += 2
        elif end < len(text):
            end += 1
        self._pos = end
        return line

    def __repr__(self) -> str:
        return f"TextCursor(pos={self._pos}, length={len(self._text)})"
