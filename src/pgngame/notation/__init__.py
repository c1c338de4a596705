"""Notation package: PGN tokenizing, game building and serialization."""

from pgngame.notation.builder import (
    PgnGameBuilder,
    iter_games,
    parse_game,
    read_pgn_file,
)
from pgngame.notation.cursor import TextCursor
from pgngame.notation.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticCollector,
    DiagnosticSink,
    log_diagnostic,
)
from pgngame.notation.models import GameRecord, PgnErrorKind, PgnItem, PgnItemKind
from pgngame.notation.tags import (
    parse_variant_tag,
    result_from_token,
    result_token,
    variant_headers,
)
from pgngame.notation.tokenizer import BracketState, scan_item
from pgngame.notation.writer import (
    append_game,
    format_game,
    format_movetext,
    write_game,
)

__all__ = [
    # Models
    "GameRecord",
    "PgnErrorKind",
    "PgnItem",
    "PgnItemKind",
    # Diagnostics
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticCollector",
    "DiagnosticSink",
    "log_diagnostic",
    # Reading
    "BracketState",
    "PgnGameBuilder",
    "TextCursor",
    "iter_games",
    "parse_game",
    "read_pgn_file",
    "scan_item",
    # Tags
    "parse_variant_tag",
    "result_from_token",
    "result_token",
    "variant_headers",
    # Writing
    "append_game",
    "format_game",
    "format_movetext",
    "write_game",
]
