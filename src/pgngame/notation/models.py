"""Shared notation-layer data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, StrEnum
from typing import TYPE_CHECKING

from pgngame.core.enums import GameResult, Variant
from pgngame.core.positions import STANDARD_FEN

if TYPE_CHECKING:
    from pgngame.board.interfaces import Move
    from pgngame.game.interfaces import ILiveGame


class PgnItemKind(IntEnum):
    """Semantic class of one chunk of PGN text."""

    TAG = 0
    MOVE = 1
    MOVE_NUMBER = 2
    NAG = 3
    COMMENT = 4
    RESULT = 5
    ERROR = 6


class PgnErrorKind(StrEnum):
    """Reason a game stopped on an error item."""

    MALFORMED_ITEM = "malformed item"
    UNEXPECTED_TAG = "no termination marker"
    INVALID_POSITION = "invalid FEN"
    PREMATURE_MOVE = "no tags found"
    ILLEGAL_MOVE = "illegal move"
    INVALID_ANNOTATION = "invalid annotation"


@dataclass(slots=True, frozen=True)
class PgnItem:
    """A classified item and its trimmed text."""

    kind: PgnItemKind
    text: str = ""
    error: PgnErrorKind | None = None

    @classmethod
    def failure(cls, error: PgnErrorKind, text: str = "") -> PgnItem:
        return cls(PgnItemKind.ERROR, text, error)

    @property
    def is_error(self) -> bool:
        return self.kind == PgnItemKind.ERROR


@dataclass(slots=True)
class GameRecord:
    """A game as read from, or written to, PGN.

    ``moves`` holds opaque values owned by the board implementation that
    produced them.  A record stays ``is_empty`` until its first tag has
    been accepted.
    """

    white: str = ""
    black: str = ""
    result: GameResult = GameResult.NO_RESULT
    fen: str = STANDARD_FEN
    variant: Variant = Variant.STANDARD
    is_random_variant: bool = False
    moves: list[Move] = field(default_factory=list)
    round: int = 0
    is_empty: bool = True

    @property
    def move_count(self) -> int:
        return len(self.moves)

    @classmethod
    def from_game(cls, game: ILiveGame) -> GameRecord:
        """Snapshot a live game without going through PGN text."""
        board = game.board
        return cls(
            white=game.white.name,
            black=game.black.name,
            result=game.result,
            fen=board.starting_fen(),
            variant=board.variant,
            is_random_variant=board.is_random_variant,
            moves=board.move_history(),
            is_empty=False,
        )
