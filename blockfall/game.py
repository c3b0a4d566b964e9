"""Game state: the active piece, the piece bag, the board and the score."""

from __future__ import annotations

import random
from enum import Enum, auto
from typing import Callable, Optional

from .block import Block, all_blocks
from .grid import Grid

_LINE_SCORES = {1: 100, 2: 300, 3: 500}


class Key(Enum):
    """Player inputs the game reacts to; OTHER is any other key press."""

    LEFT = auto()
    RIGHT = auto()
    DOWN = auto()
    UP = auto()
    OTHER = auto()


class Game:
    """Rules of play, independent of rendering and audio."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        on_rotate: Optional[Callable[[], None]] = None,
        on_clear: Optional[Callable[[], None]] = None,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._on_rotate = on_rotate
        self._on_clear = on_clear
        self.grid = Grid()
        self._bag: list[Block] = all_blocks()
        self.current_block = self._random_block()
        self.next_block = self._random_block()
        self.game_over = False
        self.score = 0

    def _random_block(self) -> Block:
        if not self._bag:
            self._bag = all_blocks()
        return self._bag.pop(self._rng.randrange(len(self._bag)))

    def handle_key(self, key: Optional[Key]) -> None:
        """React to one key press; None means no key was pressed."""
        if key is None:
            return
        if self.game_over:
            self.game_over = False
            self.reset()
        if key is Key.LEFT:
            self.move_block_left()
        elif key is Key.RIGHT:
            self.move_block_right()
        elif key is Key.DOWN:
            self.move_block_down()
            self.update_score(0, 1)
        elif key is Key.UP:
            self.rotate_block()

    def move_block_left(self) -> None:
        """Shift the active piece one column left if there is room."""
        if self.game_over:
            return
        self.current_block.move(0, -1)
        if not self._placement_valid():
            self.current_block.move(0, 1)

    def move_block_right(self) -> None:
        """Shift the active piece one column right if there is room."""
        if self.game_over:
            return
        self.current_block.move(0, 1)
        if not self._placement_valid():
            self.current_block.move(0, -1)

    def move_block_down(self) -> None:
        """Drop the active piece one row, locking it when it cannot fall."""
        if self.game_over:
            return
        self.current_block.move(1, 0)
        if not self._placement_valid():
            self.current_block.move(-1, 0)
            self._lock_block()

    def rotate_block(self) -> None:
        """Rotate the active piece if the new orientation fits."""
        if self.game_over:
            return
        self.current_block.rotate()
        if not self._placement_valid():
            self.current_block.undo_rotation()
        elif self._on_rotate is not None:
            self._on_rotate()

    def _is_block_outside(self) -> bool:
        return any(
            self.grid.is_cell_outside(cell.row, cell.column)
            for cell in self.current_block.cell_positions()
        )

    def _block_fits(self) -> bool:
        return all(
            self.grid.is_cell_empty(cell.row, cell.column)
            for cell in self.current_block.cell_positions()
        )

    def _placement_valid(self) -> bool:
        return not self._is_block_outside() and self._block_fits()

    def _lock_block(self) -> None:
        for cell in self.current_block.cell_positions():
            self.grid.cells[cell.row][cell.column] = self.current_block.id
        self.current_block = self.next_block
        if not self._block_fits():
            self.game_over = True
        self.next_block = self._random_block()
        rows_cleared = self.grid.clear_full_rows()
        if rows_cleared > 0:
            if self._on_clear is not None:
                self._on_clear()
            self.update_score(rows_cleared, 0)

    def reset(self) -> None:
        """Start a new round with an empty board and a fresh bag."""
        self.grid.initialize()
        self._bag = all_blocks()
        self.current_block = self._random_block()
        self.next_block = self._random_block()
        self.score = 0
        self.game_over = False

    def update_score(self, lines_cleared: int, move_down_points: int) -> None:
        """Add points for cleared lines and for soft-drop steps."""
        self.score += _LINE_SCORES.get(lines_cleared, 0)
        self.score += move_down_points