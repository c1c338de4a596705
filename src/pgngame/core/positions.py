"""Canonical starting positions.

The Capablanca family is played on a 10x8 board, so its FEN strings use
ten files per rank and the archbishop (``A``) / chancellor (``C``) pieces.
"""

from __future__ import annotations

from pgngame.core.enums import Variant

STANDARD_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
CAPABLANCA_FEN = (
    "rnabqkbcnr/pppppppppp/10/10/10/10/PPPPPPPPPP/RNABQKBCNR w KQkq - 0 1"
)
GOTHIC_FEN = (
    "rnbqckabnr/pppppppppp/10/10/10/10/PPPPPPPPPP/RNBQCKABNR w KQkq - 0 1"
)


def default_fen(variant: Variant) -> str:
    """Standard starting position for *variant*."""
    if variant == Variant.CAPABLANCA:
        return CAPABLANCA_FEN
    return STANDARD_FEN
