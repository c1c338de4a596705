"""PGN serializer: regenerates tag section and movetext from a record."""

from __future__ import annotations

import logging
from datetime import date, datetime
from pathlib import Path
from typing import TextIO

from pgngame.board.interfaces import BoardFactory
from pgngame.board.python_chess import create_board
from pgngame.config import WriterConfig
from pgngame.core.enums import NotationStyle
from pgngame.notation.models import GameRecord
from pgngame.notation.tags import result_token, variant_headers

_LOGGER = logging.getLogger(__name__)


def format_movetext(
    record: GameRecord,
    *,
    board_factory: BoardFactory = create_board,
    plies_per_line: int = 8,
) -> str:
    """Replay *record* on a fresh board and return its movetext lines.

    A board is only needed to spell out moves, so a record without moves
    is written whatever its position.
    """
    lines: list[list[str]] = []
    if record.moves:
        board = board_factory(record.variant, record.is_random_variant)
        if not board.set_board(record.fen):
            raise ValueError(f"Board rejected starting position: {record.fen!r}")

        for ply, move in enumerate(record.moves):
            if ply % plies_per_line == 0:
                lines.append([])
            if ply % 2 == 0:
                lines[-1].append(f"{ply // 2 + 1}.")
            lines[-1].append(board.move_string(move, NotationStyle.STANDARD_ALGEBRAIC))
            board.make_move(move)

    token = result_token(record.result)
    if lines:
        lines[-1].append(token)
    else:
        lines.append([token])
    return "\n".join(" ".join(parts) for parts in lines)


def format_game(
    record: GameRecord,
    today: date | None = None,
    *,
    board_factory: BoardFactory = create_board,
    config: WriterConfig | None = None,
) -> str:
    """Build the PGN text of *record*; empty records give ``""``."""
    if record.is_empty:
        return ""
    cfg = config or WriterConfig()
    day = today or datetime.now().date()
    token = result_token(record.result)
    variant_name, use_fen = variant_headers(
        record.variant, record.fen, record.is_random_variant
    )

    headers: dict[str, str] = {
        "Date": day.strftime(cfg.date_format),
        "White": record.white,
        "Black": record.black,
        "Result": token,
    }
    if variant_name is not None:
        headers["Variant"] = variant_name
    if use_fen:
        headers["FEN"] = record.fen

    lines = [f'[{key} "{value}"]' for key, value in headers.items()]
    lines.append("")
    lines.append(
        format_movetext(
            record, board_factory=board_factory, plies_per_line=cfg.plies_per_line
        )
    )
    lines.append("")
    return "\n".join(lines) + "\n"


def write_game(
    record: GameRecord,
    out: TextIO,
    today: date | None = None,
    *,
    board_factory: BoardFactory = create_board,
    config: WriterConfig | None = None,
) -> None:
    """Write *record* to an open text stream."""
    text = format_game(record, today, board_factory=board_factory, config=config)
    if text:
        out.write(text)


def append_game(
    record: GameRecord,
    path: Path | str,
    today: date | None = None,
    *,
    board_factory: BoardFactory = create_board,
    config: WriterConfig | None = None,
) -> None:
    """Append *record* to the PGN file at *path*.

    Nothing is opened, and so no file is created, for an empty record.
    """
    text = format_game(record, today, board_factory=board_factory, config=config)
    if not text:
        return
    with open(path, "a", encoding="utf-8") as fh:
        fh.write(text)
    _LOGGER.debug("Appended %d plies to %s", record.move_count, path)
