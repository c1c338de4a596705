"""Reader and writer settings."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MAX_MOVES = 1000


@dataclass(slots=True, frozen=True)
class ReaderConfig:
    """Limits applied while parsing a single game."""

    max_moves: int = DEFAULT_MAX_MOVES

    def __post_init__(self) -> None:
        if self.max_moves < 0:
            raise ValueError("max_moves must be >= 0")


@dataclass(slots=True, frozen=True)
class WriterConfig:
    """Layout of generated PGN text."""

    plies_per_line: int = 8
    date_format: str = "%Y.%m.%d"

    def __post_init__(self) -> None:
        if self.plies_per_line < 1:
            raise ValueError("plies_per_line must be >= 1")
