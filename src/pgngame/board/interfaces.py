"""Abstract board interface consumed by the PGN reader and writer.

The notation layer never looks inside a move: it only hands the opaque
values back to the board that produced them.  Any rules engine that
implements :class:`IBoard` can back the reader, including test doubles.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, TypeAlias

from pgngame.core.enums import NotationStyle, Variant

Move: TypeAlias = Any  # opaque, owned by the board implementation


class IBoard(ABC):
    """Interface for a rules engine that tracks one board."""

    @property
    @abstractmethod
    def variant(self) -> Variant: ...

    @property
    @abstractmethod
    def is_random_variant(self) -> bool: ...

    @abstractmethod
    def set_board(self, fen: str) -> bool:
        """Reset the board to *fen*. Returns False if the position is rejected."""

    @abstractmethod
    def fen_string(self) -> str:
        """FEN of the current position."""

    @abstractmethod
    def starting_fen(self) -> str:
        """FEN the board was last set to."""

    @abstractmethod
    def move_from_string(self, text: str) -> Move:
        """Decode move *text* in the current position.

        Undecodable text must yield a move that :meth:`is_legal_move`
        rejects rather than raising.
        """

    @abstractmethod
    def is_legal_move(self, move: Move) -> bool: ...

    @abstractmethod
    def make_move(self, move: Move) -> None:
        """Apply a legal *move* and advance the position."""

    @abstractmethod
    def move_string(self, move: Move, style: NotationStyle) -> str:
        """Encode *move*, which must be legal in the current position."""

    @abstractmethod
    def move_history(self) -> list[Move]:
        """Moves played since the last :meth:`set_board`."""


BoardFactory = Callable[[Variant, bool], IBoard]  # variant, is_random
