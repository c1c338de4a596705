"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import re
from collections.abc import Callable

import pytest

from pgngame.board.interfaces import IBoard
from pgngame.core.enums import NotationStyle, Variant
from pgngame.core.positions import STANDARD_FEN

# Loose SAN shape check: enough to tell "e4" from "e9".
_SAN_RE = re.compile(r"^(?:O-O(?:-O)?|[KQRBN]?[a-h]?[1-8]?x?[a-h][1-8](?:=[QRBN])?)[+#]?$")


class FakeBoard(IBoard):
    """Deterministic board double: moves are their own SAN strings.

    A move is legal when it looks like SAN and is not listed in
    *illegal*.  A FEN is accepted when its placement has eight ranks.
    Every call is logged in :attr:`calls`.
    """

    def __init__(
        self,
        variant: Variant = Variant.STANDARD,
        is_random: bool = False,
        illegal: frozenset[str] = frozenset(),
    ) -> None:
        self._variant = variant
        self._is_random = is_random
        self._illegal = illegal
        self._fen = STANDARD_FEN
        self._history: list[str] = []
        self.calls: list[tuple[str, str]] = []

    @property
    def variant(self) -> Variant:
        return self._variant

    @property
    def is_random_variant(self) -> bool:
        return self._is_random

    def set_board(self, fen: str) -> bool:
        self.calls.append(("set_board", fen))
        if fen.split(" ")[0].count("/") != 7:
            return False
        self._fen = fen
        self._history = []
        return True

    def fen_string(self) -> str:
        return self._fen

    def starting_fen(self) -> str:
        return self._fen

    def move_from_string(self, text: str) -> str:
        return text

    def is_legal_move(self, move: str) -> bool:
        return bool(_SAN_RE.match(move)) and move not in self._illegal

    def make_move(self, move: str) -> None:
        self.calls.append(("make_move", move))
        self._history.append(move)

    def move_string(self, move: str, style: NotationStyle) -> str:
        self.calls.append(("move_string", move))
        return move

    def move_history(self) -> list[str]:
        return list(self._history)


class FakeBoardFactory:
    """BoardFactory that remembers the boards it created."""

    def __init__(self, illegal: frozenset[str] = frozenset()) -> None:
        self._illegal = illegal
        self.created: list[FakeBoard] = []

    def __call__(self, variant: Variant, is_random: bool) -> FakeBoard:
        board = FakeBoard(variant, is_random, self._illegal)
        self.created.append(board)
        return board


@pytest.fixture()
def fake_factory() -> FakeBoardFactory:
    return FakeBoardFactory()


@pytest.fixture()
def make_fake_factory() -> Callable[..., FakeBoardFactory]:
    return FakeBoardFactory
