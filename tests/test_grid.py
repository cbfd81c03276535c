"""Tests for Grid storage and definitions."""

import numpy as np
import pytest

from mazerunner.core.definitions import (
    CellKind,
    InvalidDimensionsError,
    MazeError,
    Position,
)
from mazerunner.core.grid import Grid, format_grid


class TestGridConstruction:

    def test_new_grid_is_all_wall(self):
        grid = Grid(7, 9)
        assert grid.width == 7
        assert grid.height == 9
        assert grid.shape == (9, 7)
        assert grid.count(CellKind.WALL) == 63

    @pytest.mark.parametrize("width,height", [(6, 7), (7, 8), (5, 5), (1, 7), (0, 0)])
    def test_rejects_even_or_small_dimensions(self, width, height):
        with pytest.raises(InvalidDimensionsError):
            Grid(width, height)

    def test_dimension_error_is_value_error(self):
        with pytest.raises(ValueError):
            Grid(8, 8)
        assert issubclass(InvalidDimensionsError, MazeError)

    def test_from_array_round_trip(self):
        cells = np.full((7, 11), CellKind.WALL, dtype=np.int8)
        cells[1, 1:4] = CellKind.PATH
        grid = Grid.from_array(cells)
        assert grid.width == 11 and grid.height == 7
        assert grid.cell_kind(3, 1) == CellKind.PATH
        assert grid.cell_kind(4, 1) == CellKind.WALL

    def test_from_array_rejects_unknown_values(self):
        cells = np.full((7, 7), CellKind.WALL, dtype=np.int8)
        cells[1, 1] = 3
        with pytest.raises(ValueError, match="Unknown cell kind"):
            Grid.from_array(cells)

    def test_from_array_rejects_1d(self):
        with pytest.raises(ValueError):
            Grid.from_array(np.zeros(7))


class TestGridAccess:

    def test_set_and_get_use_x_y_order(self):
        grid = Grid(7, 7)
        grid.set(3, 1, CellKind.PATH)
        assert grid.cell_kind(3, 1) == CellKind.PATH
        assert grid[(3, 1)] == CellKind.PATH
        assert grid.cell_kind(1, 3) == CellKind.WALL
        assert grid.to_array()[1, 3] == CellKind.PATH

    def test_out_of_bounds_raises_index_error(self):
        grid = Grid(7, 7)
        with pytest.raises(IndexError):
            grid.cell_kind(7, 0)
        with pytest.raises(IndexError):
            grid.set(-1, 0, CellKind.PATH)

    def test_interior_and_border(self):
        grid = Grid(7, 7)
        assert grid.is_interior(1, 1)
        assert grid.is_interior(5, 5)
        assert not grid.is_interior(0, 3)
        assert not grid.is_interior(6, 3)
        assert grid.is_border(3, 0)
        assert not grid.is_border(3, 3)
        assert not grid.is_border(10, 10)

    def test_to_array_is_a_copy(self):
        grid = Grid(7, 7)
        snapshot = grid.to_array()
        snapshot[1, 1] = CellKind.PATH
        assert grid.cell_kind(1, 1) == CellKind.WALL

    def test_copy_is_independent_and_equal(self):
        grid = Grid(7, 7)
        grid.set(1, 1, CellKind.START)
        clone = grid.copy()
        assert clone == grid
        clone.set(2, 1, CellKind.PATH)
        assert clone != grid

    def test_positions_of(self):
        grid = Grid(7, 7)
        grid.set(1, 1, CellKind.START)
        grid.set(5, 3, CellKind.GOAL)
        assert list(grid.positions_of(CellKind.START)) == [Position(1, 1)]
        assert list(grid.positions_of(CellKind.GOAL)) == [Position(5, 3)]

    def test_is_open(self):
        grid = Grid(7, 7)
        grid.set(1, 1, CellKind.START)
        grid.set(2, 1, CellKind.PATH)
        grid.set(3, 1, CellKind.GOAL)
        assert grid.is_open(1, 1) and grid.is_open(2, 1) and grid.is_open(3, 1)
        assert not grid.is_open(4, 1)
        assert not grid.is_open(-1, 1)
        assert int(grid.open_mask().sum()) == 3


class TestPosition:

    def test_position_is_immutable(self):
        pos = Position(1, 2)
        with pytest.raises(AttributeError):
            pos.x = 5

    def test_position_compares_with_tuples(self):
        assert Position(1, 2) == (1, 2)
        assert Position(1, 2).offset(1, -1) == Position(2, 1)


def test_format_grid_marks_cells_and_player():
    grid = Grid(7, 7)
    grid.set(1, 1, CellKind.START)
    grid.set(2, 1, CellKind.PATH)
    grid.set(3, 1, CellKind.GOAL)
    lines = format_grid(grid).splitlines()
    assert len(lines) == 7
    assert lines[0] == '#######'
    assert lines[1] == '#S G###'
    assert format_grid(grid, player=(2, 1)).splitlines()[1] == '#S@G###'
