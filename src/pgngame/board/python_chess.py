"""Board adapter backed by the ``chess`` (python-chess) library."""

from __future__ import annotations

import logging

import chess

from pgngame.board.interfaces import IBoard
from pgngame.core.enums import NotationStyle, Variant
from pgngame.core.positions import STANDARD_FEN

_LOGGER = logging.getLogger(__name__)

# Move-quality suffixes ("e4!", "Nf3?!") are not part of SAN proper.
_ANNOTATION_SUFFIX = "!?"


class PythonChessBoard(IBoard):
    """:class:`IBoard` over :class:`chess.Board`.

    Only the 8x8 standard variant is available; a random setup enables
    Chess960 castling rules.  Capablanca positions are always rejected
    because the library has no 10x8 board.
    """

    __slots__ = ("_variant", "_is_random", "_board", "_start_fen")

    def __init__(
        self, variant: Variant = Variant.STANDARD, is_random: bool = False
    ) -> None:
        self._variant = variant
        self._is_random = is_random
        self._board = chess.Board(STANDARD_FEN, chess960=is_random)
        self._start_fen = STANDARD_FEN

    # ── IBoard implementation ────────────────────────────────────────────

    @property
    def variant(self) -> Variant:
        return self._variant

    @property
    def is_random_variant(self) -> bool:
        return self._is_random

    def set_board(self, fen: str) -> bool:
        if self._variant != Variant.STANDARD:
            _LOGGER.debug("Variant %s is not supported by python-chess", self._variant)
            return False
        try:
            board = chess.Board(fen, chess960=self._is_random)
        except ValueError as exc:
            _LOGGER.debug("Rejected FEN %r: %s", fen, exc)
            return False
        if not board.is_valid():
            _LOGGER.debug("Rejected FEN %r: status %r", fen, board.status())
            return False
        self._board = board
        self._start_fen = fen
        return True

    def fen_string(self) -> str:
        return self._board.fen()

    def starting_fen(self) -> str:
        return self._start_fen

    def move_from_string(self, text: str) -> chess.Move:
        clean = text.rstrip(_ANNOTATION_SUFFIX)
        try:
            return self._board.parse_san(clean)
        except ValueError:
            pass
        # Coordinate notation, e.g. "e2e4" or "e7e8q"
        try:
            return chess.Move.from_uci(clean)
        except ValueError:
            return chess.Move.null()

    def is_legal_move(self, move: chess.Move) -> bool:
        if not move:
            return False
        return self._board.is_legal(move)

    def make_move(self, move: chess.Move) -> None:
        self._board.push(move)

    def move_string(self, move: chess.Move, style: NotationStyle) -> str:
        if style == NotationStyle.LONG_ALGEBRAIC:
            return move.uci()
        return self._board.san(move)

    def move_history(self) -> list[chess.Move]:
        return list(self._board.move_stack)


def create_board(
    variant: Variant = Variant.STANDARD, is_random: bool = False
) -> PythonChessBoard:
    """Default :data:`~pgngame.board.interfaces.BoardFactory`."""
    return PythonChessBoard(variant, is_random)
