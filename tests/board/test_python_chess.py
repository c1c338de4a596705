"""Tests for the python-chess board adapter."""

import chess

from pgngame.board.python_chess import PythonChessBoard, create_board
from pgngame.core.enums import NotationStyle, Variant
from pgngame.core.positions import CAPABLANCA_FEN, STANDARD_FEN

CHESS960_FEN = "bqnbrkrn/pppppppp/8/8/8/8/PPPPPPPP/BQNBRKRN w KQkq - 0 1"


class TestSetBoard:
    def test_starts_at_standard_position(self) -> None:
        board = PythonChessBoard()
        assert board.fen_string() == STANDARD_FEN
        assert board.starting_fen() == STANDARD_FEN

    def test_accepts_valid_fen(self) -> None:
        fen = "4k3/8/8/8/8/8/4P3/4K3 w - - 0 1"
        board = PythonChessBoard()
        assert board.set_board(fen) is True
        assert board.starting_fen() == fen
        assert board.move_history() == []

    def test_rejects_unparsable_fen(self) -> None:
        board = PythonChessBoard()
        assert board.set_board("not a fen") is False
        assert board.starting_fen() == STANDARD_FEN

    def test_rejects_position_without_kings(self) -> None:
        assert PythonChessBoard().set_board("8/8/8/8/8/8/8/8 w - - 0 1") is False

    def test_capablanca_is_unsupported(self) -> None:
        board = create_board(Variant.CAPABLANCA)
        assert board.variant == Variant.CAPABLANCA
        assert board.set_board(CAPABLANCA_FEN) is False

    def test_random_setup_uses_chess960_rules(self) -> None:
        board = create_board(Variant.STANDARD, is_random=True)
        assert board.is_random_variant is True
        assert board.set_board(CHESS960_FEN) is True


class TestMoves:
    def test_decode_san(self) -> None:
        board = PythonChessBoard()
        move = board.move_from_string("Nf3")
        assert move == chess.Move.from_uci("g1f3")
        assert board.is_legal_move(move)

    def test_decode_strips_quality_suffix(self) -> None:
        board = PythonChessBoard()
        assert board.is_legal_move(board.move_from_string("e4!?"))

    def test_decode_coordinate_notation(self) -> None:
        board = PythonChessBoard()
        move = board.move_from_string("e2e4")
        assert board.is_legal_move(move)

    def test_undecodable_move_is_illegal(self) -> None:
        board = PythonChessBoard()
        move = board.move_from_string("e9")
        assert move == chess.Move.null()
        assert board.is_legal_move(move) is False

    def test_san_illegal_in_position(self) -> None:
        board = PythonChessBoard()
        assert board.is_legal_move(board.move_from_string("e5")) is False

    def test_null_move_token_is_illegal(self) -> None:
        board = PythonChessBoard()
        assert board.is_legal_move(board.move_from_string("--")) is False

    def test_make_move_and_history(self) -> None:
        board = PythonChessBoard()
        e4 = board.move_from_string("e4")
        board.make_move(e4)
        e5 = board.move_from_string("e5")
        assert board.is_legal_move(e5)
        board.make_move(e5)
        assert board.move_history() == [e4, e5]
        assert board.starting_fen() == STANDARD_FEN

    def test_move_string_styles(self) -> None:
        board = PythonChessBoard()
        move = board.move_from_string("g1f3")
        assert board.move_string(move, NotationStyle.STANDARD_ALGEBRAIC) == "Nf3"
        assert board.move_string(move, NotationStyle.LONG_ALGEBRAIC) == "g1f3"
