"""pgngame: read and write chess games in Portable Game Notation.

Quick start::

    from pgngame import format_game, parse_game

    record = parse_game('[White "A"]\\n[Black "B"]\\n1. e4 e5 *\\n')
    print(format_game(record))
"""

from pgngame.config import DEFAULT_MAX_MOVES, ReaderConfig, WriterConfig
from pgngame.core.enums import Color, GameResult, NotationStyle, Variant
from pgngame.notation import (
    GameRecord,
    PgnGameBuilder,
    append_game,
    format_game,
    iter_games,
    parse_game,
    read_pgn_file,
    write_game,
)

__all__ = [
    "DEFAULT_MAX_MOVES",
    "Color",
    "GameRecord",
    "GameResult",
    "NotationStyle",
    "PgnGameBuilder",
    "ReaderConfig",
    "Variant",
    "WriterConfig",
    "append_game",
    "format_game",
    "iter_games",
    "parse_game",
    "read_pgn_file",
    "write_game",
]
