"""The playing field."""

from __future__ import annotations


class Grid:
    """A board of cell values; 0 is empty, other values are piece ids."""

    num_rows = 20
    num_cols = 10
    cell_size = 30

    def __init__(self) -> None:
        self.cells: list[list[int]] = []
        self.initialize()

    def initialize(self) -> None:
        """Empty every cell."""
        self.cells = [[0] * self.num_cols for _ in range(self.num_rows)]

    def is_cell_outside(self, row: int, column: int) -> bool:
        """Tell whether the coordinates fall off the board."""
        return not (0 <= row < self.num_rows and 0 <= column < self.num_cols)

    def is_cell_empty(self, row: int, column: int) -> bool:
        """Tell whether the cell holds no piece."""
        if self.is_cell_outside(row, column):
            raise IndexError(f"cell ({row}, {column}) is outside the grid")
        return self.cells[row][column] == 0

    def clear_full_rows(self) -> int:
        """Remove completed rows, drop the rows above, and return the count."""
        completed = 0
        for row in reversed(range(self.num_rows)):
            if self._is_row_full(row):
                self._clear_row(row)
                completed += 1
            elif completed:
                self._move_row_down(row, completed)
        return completed

    def _is_row_full(self, row: int) -> bool:
        return all(self.cells[row])

    def _clear_row(self, row: int) -> None:
        self.cells[row] = [0] * self.num_cols

    def _move_row_down(self, row: int, distance: int) -> None:
        self.cells[row + distance] = self.cells[row]
        self.cells[row] = [0] * self.num_cols

    def __str__(self) -> str:
        return "\n".join(
            "".join(f"{value}  " for value in row) for row in self.cells
        )