"""Core domain layer: enums and canonical positions, no external dependencies."""

from pgngame.core.enums import Color, GameResult, NotationStyle, Variant
from pgngame.core.positions import (
    CAPABLANCA_FEN,
    GOTHIC_FEN,
    STANDARD_FEN,
    default_fen,
)

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "NotationStyle",
    "Variant",
    # Positions
    "CAPABLANCA_FEN",
    "GOTHIC_FEN",
    "STANDARD_FEN",
    "default_fen",
]
