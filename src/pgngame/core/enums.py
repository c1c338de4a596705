"""Core enumerations shared by the notation and game layers."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class GameResult(IntEnum):
    """Outcome of a game as recorded in PGN."""

    NO_RESULT = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3
    RESULT_ERROR = 4


class Variant(StrEnum):
    """Board variants understood by the reader and writer."""

    STANDARD = "Standard"
    CAPABLANCA = "Capablanca"


class NotationStyle(IntEnum):
    """Move text encodings a board can produce."""

    STANDARD_ALGEBRAIC = 0
    LONG_ALGEBRAIC = 1
