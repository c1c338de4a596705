"""A minimal live game that can be snapshotted to a record."""

from __future__ import annotations

from pgngame.board.interfaces import BoardFactory, IBoard
from pgngame.board.python_chess import create_board
from pgngame.core.enums import Color, GameResult, Variant
from pgngame.core.positions import default_fen
from pgngame.game.interfaces import ILiveGame
from pgngame.game.player import Player
from pgngame.notation.models import GameRecord


class GameSession(ILiveGame):
    """Plays moves on a board until a result is set."""

    __slots__ = ("_board_factory", "_board", "_white", "_black", "_result", "_started")

    def __init__(self, board_factory: BoardFactory = create_board) -> None:
        self._board_factory = board_factory
        self._board = board_factory(Variant.STANDARD, False)
        self._white = Player(Color.WHITE)
        self._black = Player(Color.BLACK)
        self._result = GameResult.NO_RESULT
        self._started = False

    @property
    def white(self) -> Player:
        return self._white

    @property
    def black(self) -> Player:
        return self._black

    @property
    def board(self) -> IBoard:
        return self._board

    @property
    def result(self) -> GameResult:
        return self._result

    @property
    def in_progress(self) -> bool:
        return self._started and self._result == GameResult.NO_RESULT

    def new_game(
        self,
        white: Player,
        black: Player,
        fen: str | None = None,
        variant: Variant = Variant.STANDARD,
        is_random: bool = False,
    ) -> None:
        """Set up a new game from *fen* or the variant's start position."""
        board = self._board_factory(variant, is_random)
        start_fen = fen or default_fen(variant)
        if not board.set_board(start_fen):
            raise ValueError(f"Invalid starting position: {start_fen!r}")

        self._board = board
        self._white, self._black = white, black
        self._result = GameResult.NO_RESULT
        self._started = True

    def submit_move(self, text: str) -> bool:
        """Play *text* (SAN or coordinates); False if illegal or no game runs."""
        if not self.in_progress:
            return False
        move = self._board.move_from_string(text)
        if not self._board.is_legal_move(move):
            return False
        self._board.make_move(move)
        return True

    def finish(self, result: GameResult) -> None:
        """Record the outcome; later moves are refused."""
        if result == GameResult.NO_RESULT:
            raise ValueError("A finished game needs a result")
        self._result = result

    def to_record(self) -> GameRecord:
        return GameRecord.from_game(self)
