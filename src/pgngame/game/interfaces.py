"""Abstract interface for live games.

A :class:`~pgngame.notation.models.GameRecord` can be built straight from
any :class:`ILiveGame`, without going through PGN text.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pgngame.board.interfaces import IBoard
    from pgngame.core.enums import GameResult
    from pgngame.game.player import Player


class ILiveGame(ABC):
    """A game in memory: two players, a board with history, a result."""

    @property
    @abstractmethod
    def white(self) -> Player: ...

    @property
    @abstractmethod
    def black(self) -> Player: ...

    @property
    @abstractmethod
    def board(self) -> IBoard:
        """Board holding the starting position and move history."""

    @property
    @abstractmethod
    def result(self) -> GameResult: ...
