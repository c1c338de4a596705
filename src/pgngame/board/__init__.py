"""Board collaborators: the abstract interface and the python-chess adapter."""

from pgngame.board.interfaces import BoardFactory, IBoard, Move
from pgngame.board.python_chess import PythonChessBoard, create_board

__all__ = [
    "BoardFactory",
    "IBoard",
    "Move",
    "PythonChessBoard",
    "create_board",
]
