"""PGN item classifier.

Pulls characters from a :class:`TextCursor` and returns one classified
item at a time.  It knows the PGN lexical grammar only; interpreting
tags and moves is the builder's job.
"""

from __future__ import annotations

from dataclasses import dataclass

from pgngame.notation.cursor import TextCursor
from pgngame.notation.models import PgnErrorKind, PgnItem, PgnItemKind
from pgngame.notation.tags import RESULT_TOKENS

_LINE_BREAKS = "\r\n"
_BRACKETS: dict[str, tuple[PgnItemKind, str]] = {
    "[": (PgnItemKind.TAG, "]"),
    "(": (PgnItemKind.COMMENT, ")"),
    "{": (PgnItemKind.COMMENT, "}"),
}


@dataclass(slots=True)
class BracketState:
    """An open bracket and how deeply it is nested."""

    opening: str
    closing: str
    depth: int = 0


def scan_item(
    cursor: TextCursor, *, awaiting_tag: bool = False, moves_started: bool = False
) -> PgnItem:
    """Read the next item from *cursor*.

    Args:
        cursor: Input position; advanced past the item.
        awaiting_tag: No tag accepted yet for this game, so everything up
            to the next ``[`` is discarded.
        moves_started: Moves were already read for this game.  A ``[`` then
            belongs to the next game: the cursor is rewound onto it and an
            ``UNEXPECTED_TAG`` error is returned.
    """
    cursor.skip_whitespace()
    kind = PgnItemKind.MOVE
    bracket: BracketState | None = None
    chars: list[str] = []

    while True:
        ch = cursor.read()
        if not ch:
            break
        if awaiting_tag and kind != PgnItemKind.TAG and ch != "[":
            continue
        if ch in _LINE_BREAKS and kind != PgnItemKind.COMMENT:
            break

        if bracket is None:
            if not chars:
                # Rest-of-line comment
                if ch == ";":
                    return _finish(PgnItemKind.COMMENT, cursor.read_line())
                # Escape mechanism: the line is ignored
                if ch == "%":
                    cursor.read_line()
                    continue
                # Leading periods ("1... e5")
                if ch == ".":
                    cursor.skip_whitespace()
                    continue
                if ch == "$":
                    kind = PgnItemKind.NAG
                    continue
                if ch.isdigit() and kind == PgnItemKind.MOVE:
                    kind = PgnItemKind.MOVE_NUMBER

            if ch in _BRACKETS:
                if ch == "[" and moves_started:
                    cursor.seek(cursor.position - 1)
                    return PgnItem.failure(PgnErrorKind.UNEXPECTED_TAG)
                kind, closing = _BRACKETS[ch]
                bracket = BracketState(ch, closing)

        if bracket is not None and ch == bracket.opening:
            bracket.depth += 1
        elif bracket is not None and ch == bracket.closing:
            bracket.depth -= 1
            if bracket.depth <= 0:
                break
        elif kind in (PgnItemKind.MOVE, PgnItemKind.NAG) and ch.isspace():
            break
        elif kind == PgnItemKind.MOVE_NUMBER and (ch.isspace() or ch == "."):
            break
        else:
            chars.append(ch)

    return _finish(kind, "".join(chars))


def _finish(kind: PgnItemKind, raw: str) -> PgnItem:
    text = raw.strip()
    if not text:
        return PgnItem.failure(PgnErrorKind.MALFORMED_ITEM)
    if kind in (PgnItemKind.MOVE, PgnItemKind.MOVE_NUMBER) and text in RESULT_TOKENS:
        return PgnItem(PgnItemKind.RESULT, text)
    return PgnItem(kind, text)
