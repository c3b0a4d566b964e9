import pytest

from blockfall.grid import Grid


def _fill_row(grid, row, value):
    for column in range(grid.num_cols):
        grid.cells[row][column] = value


def test_new_grid_is_empty():
    grid = Grid()
    assert all(
        grid.is_cell_empty(row, column)
        for row in range(grid.num_rows)
        for column in range(grid.num_cols)
    )


def test_dimensions():
    grid = Grid()
    assert len(grid.cells) == 20
    assert all(len(row) == 10 for row in grid.cells)


@pytest.mark.parametrize(
    "row, column", [(-1, 0), (0, -1), (20, 0), (0, 10), (25, 25)]
)
def test_outside_coordinates(row, column):
    assert Grid().is_cell_outside(row, column)


@pytest.mark.parametrize("row, column", [(0, 0), (19, 9), (10, 5)])
def test_inside_coordinates(row, column):
    assert not Grid().is_cell_outside(row, column)


def test_is_cell_empty_rejects_outside():
    with pytest.raises(IndexError):
        Grid().is_cell_empty(-1, 0)


def test_occupied_cell_is_not_empty():
    grid = Grid()
    grid.cells[5][3] = 6
    assert not grid.is_cell_empty(5, 3)
    assert grid.is_cell_empty(5, 4)


def test_clear_single_bottom_row_drops_row_above():
    grid = Grid()
    _fill_row(grid, 19, 3)
    grid.cells[18][0] = 5
    assert grid.clear_full_rows() == 1
    assert grid.cells[19][0] == 5
    assert all(value == 0 for value in grid.cells[19][1:])
    assert all(value == 0 for value in grid.cells[18])


def test_clear_two_separate_rows():
    grid = Grid()
    _fill_row(grid, 19, 1)
    _fill_row(grid, 17, 2)
    grid.cells[18][2] = 7
    grid.cells[16][4] = 4
    assert grid.clear_full_rows() == 2
    assert grid.cells[19][2] == 7
    assert grid.cells[18][4] == 4
    occupied = sum(1 for row in grid.cells for value in row if value)
    assert occupied == 2


def test_no_full_rows_leaves_grid_unchanged():
    grid = Grid()
    grid.cells[19][0] = 1
    grid.cells[10][9] = 2
    before = [row[:] for row in grid.cells]
    assert grid.clear_full_rows() == 0
    assert grid.cells == before


def test_row_with_one_gap_is_not_cleared():
    grid = Grid()
    _fill_row(grid, 19, 6)
    grid.cells[19][4] = 0
    assert grid.clear_full_rows() == 0
    assert grid.cells[19][0] == 6


def test_initialize_resets():
    grid = Grid()
    _fill_row(grid, 0, 3)
    grid.initialize()
    assert all(value == 0 for row in grid.cells for value in row)


def test_str_lists_each_row():
    grid = Grid()
    grid.cells[0][0] = 7
    lines = str(grid).split("\n")
    assert len(lines) == grid.num_rows
    assert lines[0].split() == ["7"] + ["0"] * (grid.num_cols - 1)
    assert all(line.split() == ["0"] * grid.num_cols for line in lines[1:])