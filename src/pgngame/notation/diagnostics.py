"""Structured parse diagnostics and the sinks that receive them."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

_LOGGER = logging.getLogger(__name__)


class DiagnosticCode(StrEnum):
    """Everything the reader reports, fatal or not."""

    # Fatal: the game stops at this item.
    MALFORMED_ITEM = "malformed_item"
    UNEXPECTED_TAG = "unexpected_tag"
    INVALID_POSITION = "invalid_position"
    PREMATURE_MOVE = "premature_move"
    ILLEGAL_MOVE = "illegal_move"
    INVALID_ANNOTATION = "invalid_annotation"
    # Informational: parsing continues.
    INVALID_RESULT = "invalid_result"
    RESULT_MISMATCH = "result_mismatch"
    UNKNOWN_VARIANT = "unknown_variant"

    @property
    def is_fatal(self) -> bool:
        return self not in _NON_FATAL


_NON_FATAL = frozenset(
    {
        DiagnosticCode.INVALID_RESULT,
        DiagnosticCode.RESULT_MISMATCH,
        DiagnosticCode.UNKNOWN_VARIANT,
    }
)


@dataclass(slots=True, frozen=True)
class Diagnostic:
    """One reader message, anchored at a character offset of the input."""

    code: DiagnosticCode
    message: str
    offset: int = 0

    def __str__(self) -> str:
        return f"{self.message} (at offset {self.offset})"


DiagnosticSink = Callable[[Diagnostic], None]


def log_diagnostic(diagnostic: Diagnostic) -> None:
    """Default sink: forward to the module logger."""
    if diagnostic.code.is_fatal:
        _LOGGER.debug("%s", diagnostic)
    else:
        _LOGGER.warning("%s", diagnostic)


class DiagnosticCollector:
    """Sink that keeps every diagnostic it receives."""

    __slots__ = ("diagnostics",)

    def __init__(self) -> None:
        self.diagnostics: list[Diagnostic] = []

    def __call__(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)

    @property
    def codes(self) -> list[DiagnosticCode]:
        return [d.code for d in self.diagnostics]

    def clear(self) -> None:
        self.diagnostics.clear()
