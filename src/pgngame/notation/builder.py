"""Game builder: folds tokenizer items into a :class:`GameRecord`."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

from pgngame.board.interfaces import BoardFactory, IBoard
from pgngame.board.python_chess import create_board
from pgngame.config import ReaderConfig
from pgngame.core.enums import GameResult, Variant
from pgngame.core.positions import STANDARD_FEN
from pgngame.notation.cursor import TextCursor
from pgngame.notation.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticSink,
    log_diagnostic,
)
from pgngame.notation.models import GameRecord, PgnErrorKind, PgnItem, PgnItemKind
from pgngame.notation.tags import (
    parse_variant_tag,
    result_from_token,
    split_tag,
)
from pgngame.notation.tokenizer import scan_item

_LOGGER = logging.getLogger(__name__)

_MAX_NAG = 255

_ERROR_CODES: dict[PgnErrorKind, DiagnosticCode] = {
    PgnErrorKind.MALFORMED_ITEM: DiagnosticCode.MALFORMED_ITEM,
    PgnErrorKind.UNEXPECTED_TAG: DiagnosticCode.UNEXPECTED_TAG,
    PgnErrorKind.INVALID_POSITION: DiagnosticCode.INVALID_POSITION,
    PgnErrorKind.PREMATURE_MOVE: DiagnosticCode.PREMATURE_MOVE,
    PgnErrorKind.ILLEGAL_MOVE: DiagnosticCode.ILLEGAL_MOVE,
    PgnErrorKind.INVALID_ANNOTATION: DiagnosticCode.INVALID_ANNOTATION,
}

PgnSource = str | TextIO | TextCursor


class PgnGameBuilder:
    """Reads one game at a time, validating moves against a private board.

    Parsing never raises on bad input.  It stops at the first error item
    and leaves whatever was read so far in the record, so callers judge
    completeness from :attr:`GameRecord.is_empty` and the move count.

    Args:
        board_factory: Creates the board used to decode and check moves.
        sink: Receives every diagnostic; defaults to the module logger.
        config: Reader limits.
    """

    __slots__ = (
        "_board_factory",
        "_sink",
        "_config",
        "_board",
        "_record",
        "_fen_from_tag",
        "_item_offset",
        "diagnostics",
    )

    def __init__(
        self,
        board_factory: BoardFactory = create_board,
        sink: DiagnosticSink | None = None,
        config: ReaderConfig | None = None,
    ) -> None:
        self._board_factory = board_factory
        self._sink = sink or log_diagnostic
        self._config = config or ReaderConfig()
        self.diagnostics: list[Diagnostic] = []
        self._item_offset = 0
        self.reset()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def record(self) -> GameRecord:
        return self._record

    @property
    def board(self) -> IBoard:
        return self._board

    # ── Parsing ──────────────────────────────────────────────────────────

    def reset(self) -> None:
        """Start a fresh record on a board at the standard position."""
        self._board = self._board_factory(Variant.STANDARD, False)
        self._board.set_board(STANDARD_FEN)
        self._record = GameRecord(fen=self._board.fen_string())
        self._fen_from_tag = False
        self.diagnostics = []

    def parse(self, source: PgnSource, max_moves: int | None = None) -> GameRecord:
        """Parse the next game from *source* into a new record.

        Stops on an error item, a result marker, *max_moves* plies or the
        end of input.  A :class:`TextCursor` or text stream is left just
        after the game, or on the ``[`` that starts the next one.  Streams
        must be seekable.
        """
        limit = self._config.max_moves if max_moves is None else max_moves
        if limit < 0:
            raise ValueError("max_moves must be >= 0")

        stream: TextIO | None = None
        start = 0
        if not isinstance(source, (str, TextCursor)) and hasattr(source, "read"):
            if not source.seekable():
                raise TypeError("PGN streams must be seekable")
            stream, start = source, source.tell()

        cursor = TextCursor.from_source(source)
        self.reset()
        record = self._record
        while not cursor.at_end and len(record.moves) < limit:
            item = self.read_item(cursor)
            if item.kind in (PgnItemKind.ERROR, PgnItemKind.RESULT):
                break

        if stream is not None:
            # tell() offsets are opaque for text files; re-read instead of adding.
            stream.seek(start)
            stream.read(cursor.position)
        return record

    def read_item(self, cursor: TextCursor) -> PgnItem:
        """Classify the next item and apply it to the current record."""
        record = self._record
        self._item_offset = cursor.position
        item = scan_item(
            cursor,
            awaiting_tag=record.is_empty,
            moves_started=bool(record.moves),
        )

        if item.kind == PgnItemKind.TAG:
            item = self._apply_tag(item)
        elif item.kind == PgnItemKind.MOVE:
            item = self._apply_move(item)
        elif item.kind == PgnItemKind.NAG:
            item = self._apply_nag(item)
        elif item.kind == PgnItemKind.RESULT:
            self._apply_result(item)
        elif item.kind == PgnItemKind.ERROR:
            self._fail(item)
        return item

    # ── Item handlers ────────────────────────────────────────────────────

    def _apply_tag(self, item: PgnItem) -> PgnItem:
        record = self._record
        name, value = split_tag(item.text)

        if name == "White":
            record.white = value
        elif name == "Black":
            record.black = value
        elif name == "Result":
            record.result = result_from_token(value)
            if record.result == GameResult.RESULT_ERROR:
                self._report(DiagnosticCode.INVALID_RESULT, f"Invalid result: {value}")
        elif name == "FEN":
            record.fen = value
            self._fen_from_tag = True
            if not self._board.set_board(value):
                return self._fail(
                    PgnItem.failure(PgnErrorKind.INVALID_POSITION, item.text),
                    f"Invalid FEN: {value}",
                )
        elif name == "Variant":
            failure = self._apply_variant(item, value)
            if failure is not None:
                return failure

        record.is_empty = False
        return item

    def _apply_variant(self, item: PgnItem, value: str) -> PgnItem | None:
        setup = parse_variant_tag(value)
        if setup is None:
            self._report(DiagnosticCode.UNKNOWN_VARIANT, f"Unknown variant: {value}")
            return None

        record = self._record
        # A FEN tag seen earlier wins over the variant's start position.
        fen = record.fen if self._fen_from_tag else setup.fen
        board = self._board_factory(setup.variant, setup.is_random)
        if not board.set_board(fen):
            return self._fail(
                PgnItem.failure(PgnErrorKind.INVALID_POSITION, item.text),
                f"Invalid FEN for variant {value}: {fen}",
            )
        self._board = board
        record.variant = setup.variant
        record.is_random_variant = setup.is_random
        record.fen = fen
        return None

    def _apply_move(self, item: PgnItem) -> PgnItem:
        if self._record.is_empty:
            return self._fail(
                PgnItem.failure(PgnErrorKind.PREMATURE_MOVE, item.text),
                "No tags found",
            )

        board = self._board
        move = board.move_from_string(item.text)
        if not board.is_legal_move(move):
            return self._fail(
                PgnItem.failure(PgnErrorKind.ILLEGAL_MOVE, item.text),
                f"Illegal move: {item.text}",
            )
        self._record.moves.append(move)
        board.make_move(move)
        return item

    def _apply_nag(self, item: PgnItem) -> PgnItem:
        try:
            nag = int(item.text)
        except ValueError:
            nag = -1
        if not 0 <= nag <= _MAX_NAG:
            return self._fail(
                PgnItem.failure(PgnErrorKind.INVALID_ANNOTATION, item.text),
                f"Invalid NAG: {item.text}",
            )
        return item

    def _apply_result(self, item: PgnItem) -> None:
        record = self._record
        result = result_from_token(item.text)
        if result != record.result:
            self._report(
                DiagnosticCode.RESULT_MISMATCH,
                "The termination marker is different from the result tag",
            )
        record.result = result

    # ── Diagnostics ──────────────────────────────────────────────────────

    def _fail(self, item: PgnItem, message: str | None = None) -> PgnItem:
        error = item.error or PgnErrorKind.MALFORMED_ITEM
        self._report(_ERROR_CODES[error], message or error.value.capitalize())
        return item

    def _report(self, code: DiagnosticCode, message: str) -> None:
        diagnostic = Diagnostic(code, message, self._item_offset)
        self.diagnostics.append(diagnostic)
        self._sink(diagnostic)


# ── Convenience API ──────────────────────────────────────────────────────────


def parse_game(
    source: PgnSource,
    *,
    max_moves: int | None = None,
    board_factory: BoardFactory = create_board,
    sink: DiagnosticSink | None = None,
) -> GameRecord:
    """Parse a single game from *source*."""
    builder = PgnGameBuilder(board_factory, sink)
    return builder.parse(source, max_moves)


def iter_games(
    source: PgnSource,
    *,
    max_moves: int | None = None,
    board_factory: BoardFactory = create_board,
    sink: DiagnosticSink | None = None,
) -> Iterator[GameRecord]:
    """Yield every non-empty game of a multi-game stream.

    A game that stops on an error is still yielded with what was read;
    the rest of it is skipped up to the next tag section.
    """
    cursor = TextCursor.from_source(source)
    builder = PgnGameBuilder(board_factory, sink)
    while not cursor.at_end:
        start = cursor.position
        record = builder.parse(cursor, max_moves)
        if not record.is_empty:
            _LOGGER.debug(
                "Read game %r vs %r: %d plies",
                record.white,
                record.black,
                record.move_count,
            )
            yield record
        if cursor.position == start:
            break


def read_pgn_file(
    path: Path | str,
    *,
    encoding: str = "utf-8",
    max_moves: int | None = None,
    board_factory: BoardFactory = create_board,
    sink: DiagnosticSink | None = None,
) -> list[GameRecord]:
    """Read every game from a PGN file."""
    text = Path(path).read_text(encoding=encoding)
    return list(
        iter_games(text, max_moves=max_moves, board_factory=board_factory, sink=sink)
    )
