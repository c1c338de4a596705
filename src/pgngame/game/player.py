"""Game participants."""

from __future__ import annotations

from dataclasses import dataclass

from pgngame.core.enums import Color


@dataclass(frozen=True, slots=True)
class Player:
    """Side and display name; an empty name is shown as ``White`` / ``Black``."""

    color: Color
    name: str = ""

    @property
    def display_name(self) -> str:
        return self.name or str(self.color).capitalize()
