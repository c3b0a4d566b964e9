"""Falling pieces and their rotation states."""

from __future__ import annotations

from typing import ClassVar

from .position import Position


def _cells(*pairs: tuple[int, int]) -> tuple[Position, ...]:
    return tuple(Position(row, column) for row, column in pairs)


class Block:
    """A piece: a set of rotation states plus an offset on the board."""

    id: ClassVar[int] = 0
    cells: ClassVar[dict[int, tuple[Position, ...]]] = {}
    _spawn: ClassVar[tuple[int, int]] = (0, 0)

    def __init__(self) -> None:
        self.rotation_state = 0
        self.row_offset = 0
        self.column_offset = 0
        self.move(*self._spawn)

    def move(self, rows: int, columns: int) -> None:
        """Shift the piece by the given number of rows and columns."""
        self.row_offset += rows
        self.column_offset += columns

    def cell_positions(self) -> list[Position]:
        """Return the board positions covered in the current rotation."""
        return [
            Position(cell.row + self.row_offset, cell.column + self.column_offset)
            for cell in self.cells[self.rotation_state]
        ]

    def rotate(self) -> None:
        """Advance to the next rotation state, wrapping around."""
        self.rotation_state = (self.rotation_state + 1) % len(self.cells)

    def undo_rotation(self) -> None:
        """Go back to the previous rotation state, wrapping around."""
        self.rotation_state = (self.rotation_state - 1) % len(self.cells)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(rotation_state={self.rotation_state}, "
            f"row_offset={self.row_offset}, column_offset={self.column_offset})"
        )


class LBlock(Block):
    id = 1
    cells = {
        0: _cells((0, 2), (1, 0), (1, 1), (1, 2)),
        1: _cells((0, 1), (1, 1), (2, 1), (2, 2)),
        2: _cells((1, 0), (1, 1), (1, 2), (2, 0)),
        3: _cells((0, 0), (0, 1), (1, 1), (2, 1)),
    }
    _spawn = (0, 3)


class JBlock(Block):
    id = 2
    cells = {
        0: _cells((0, 0), (1, 0), (1, 1), (1, 2)),
        1: _cells((0, 1), (0, 2), (1, 1), (2, 1)),
        2: _cells((1, 0), (1, 1), (1, 2), (2, 2)),
        3: _cells((0, 0), (1, 1), (2, 0), (2, 1)),
    }
    _spawn = (0, 3)


class IBlock(Block):
    id = 3
    cells = {
        0: _cells((1, 0), (1, 1), (1, 2), (1, 3)),
        1: _cells((0, 2), (1, 2), (2, 2), (3, 2)),
        2: _cells((2, 0), (2, 1), (2, 2), (2, 3)),
        3: _cells((0, 1), (1, 1), (2, 1), (3, 1)),
    }
    _spawn = (-1, 3)


class OBlock(Block):
    id = 4
    cells = {
        0: _cells((0, 0), (0, 1), (1, 0), (1, 1)),
    }
    _spawn = (0, 4)


class SBlock(Block):
    id = 5
    cells = {
        0: _cells((0, 1), (0, 2), (1, 0), (1, 1)),
        1: _cells((0, 1), (1, 1), (1, 2), (2, 2)),
        2: _cells((1, 1), (1, 2), (2, 0), (2, 1)),
        3: _cells((0, 0), (1, 0), (1, 1), (2, 1)),
    }
    _spawn = (0, 3)


class TBlock(Block):
    id = 6
    cells = {
        0: _cells((0, 1), (1, 0), (1, 1), (1, 2)),
        1: _cells((0, 1), (1, 1), (1, 2), (2, 1)),
        2: _cells((1, 0), (1, 1), (1, 2), (2, 1)),
        3: _cells((0, 1), (1, 0), (1, 1), (2, 1)),
    }
    _spawn = (0, 3)


class ZBlock(Block):
    id = 7
    cells = {
        0: _cells((0, 0), (1, 0), (1, 1), (1, 2)),
        1: _cells((0, 2), (1, 1), (1, 2), (2, 1)),
        2: _cells((1, 0), (1, 1), (2, 1), (2, 2)),
        3: _cells((0, 1), (1, 0), (1, 1), (2, 0)),
    }
    _spawn = (0, 3)


def all_blocks() -> list[Block]:
    """Return a fresh instance of every piece kind."""
    return [IBlock(), JBlock(), LBlock(), OBlock(), SBlock(), TBlock(), ZBlock()]