"""Grid coordinates."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A cell on the board, addressed by row and column."""

    row: int
    column: int