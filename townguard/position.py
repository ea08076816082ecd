"""Grid coordinates on the game board."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A column/row cell on the board, 1-based like terminal coordinates."""

    x: int = 0
    y: int = 0