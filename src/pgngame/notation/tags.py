"""PGN tag helpers: result tokens, tag splitting and variant names."""

from __future__ import annotations

from dataclasses import dataclass

from pgngame.core.enums import GameResult, Variant
from pgngame.core.positions import (
    CAPABLANCA_FEN,
    GOTHIC_FEN,
    STANDARD_FEN,
    default_fen,
)

RESULT_TOKENS = frozenset({"1-0", "0-1", "1/2-1/2", "*"})

_RESULT_BY_TOKEN: dict[str, GameResult] = {
    "*": GameResult.NO_RESULT,
    "1-0": GameResult.WHITE_WINS,
    "0-1": GameResult.BLACK_WINS,
    "1/2-1/2": GameResult.DRAW,
}
_TOKEN_BY_RESULT: dict[GameResult, str] = {
    GameResult.WHITE_WINS: "1-0",
    GameResult.BLACK_WINS: "0-1",
    GameResult.DRAW: "1/2-1/2",
}

_RANDOM_SUFFIX = "random"
_FISCHERANDOM = "Fischerandom"
_GOTHIC = "Gothic"


def result_token(result: GameResult) -> str:
    """Convert :class:`GameResult` to a PGN result token."""
    return _TOKEN_BY_RESULT.get(result, "*")


def result_from_token(token: str) -> GameResult:
    """Convert a PGN result token; anything unknown is ``RESULT_ERROR``."""
    return _RESULT_BY_TOKEN.get(token, GameResult.RESULT_ERROR)


def split_tag(text: str) -> tuple[str, str]:
    """Split the inside of ``[Name "value"]`` into name and unquoted value."""
    name, _, value = text.partition(" ")
    return name, value.replace('"', "")


# ── Variant tag ─────────────────────────────────────────────────────────────


@dataclass(slots=True, frozen=True)
class VariantSetup:
    """What a ``Variant`` tag value selects."""

    variant: Variant
    is_random: bool
    fen: str


def parse_variant_tag(value: str) -> VariantSetup | None:
    """Interpret a ``Variant`` tag value, or None if it is not recognized."""
    name = value.strip().lower()
    if name in ("standard", "normal", ""):
        return VariantSetup(Variant.STANDARD, False, STANDARD_FEN)
    if name in (_FISCHERANDOM.lower(), "chess960"):
        return VariantSetup(Variant.STANDARD, True, STANDARD_FEN)
    if name == _GOTHIC.lower():
        return VariantSetup(Variant.CAPABLANCA, False, GOTHIC_FEN)

    is_random = name.endswith(_RANDOM_SUFFIX)
    if is_random:
        name = name[: -len(_RANDOM_SUFFIX)]
    for variant in Variant:
        if variant.value.lower() == name:
            return VariantSetup(variant, is_random, default_fen(variant))
    return None


def variant_headers(
    variant: Variant, fen: str, is_random: bool
) -> tuple[str | None, bool]:
    """Decide the ``Variant`` tag value and whether a ``FEN`` tag is needed.

    Returns ``(variant_name_or_None, use_fen)``.
    """
    name: str | None = None
    use_fen = False
    if variant == Variant.STANDARD:
        if fen != STANDARD_FEN:
            use_fen = True
        if is_random:
            name = _FISCHERANDOM
    else:
        if fen == CAPABLANCA_FEN:
            name = variant.value
        elif fen == GOTHIC_FEN:
            name = _GOTHIC
        else:
            use_fen = True
        if is_random:
            name = f"{variant.value}{_RANDOM_SUFFIX}"
    return name, use_fen
