"""Palette used for the board and the pieces."""

from __future__ import annotations

from typing import NamedTuple


class Color(NamedTuple):
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255


DARK_GREY = Color(26, 31, 40, 255)
GREEN = Color(47, 230, 23, 255)
RED = Color(232, 18, 18, 255)
ORANGE = Color(226, 116, 17, 255)
YELLOW = Color(237, 234, 4, 255)
PURPLE = Color(166, 0, 247, 255)
CYAN = Color(21, 204, 209, 255)
BLUE = Color(13, 64, 216, 255)

LIGHT_BLUE = Color(60, 85, 165, 255)
DARK_BLUE = Color(45, 45, 130, 255)


def get_cell_colors() -> list[Color]:
    """Return the colour for each cell value; index 0 is an empty cell."""
    return [DARK_GREY, GREEN, RED, ORANGE, YELLOW, PURPLE, CYAN, BLUE]