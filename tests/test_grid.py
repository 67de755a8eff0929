"""Tests for the Grid module."""

import pytest

from grid_snake.grid import CELL_SIZE, GRID_SIZE, Grid, GridPosition


class TestGridInit:
    def test_default_dimensions(self):
        grid = Grid()
        assert grid.size == GRID_SIZE == 15
        assert grid.cell_size == CELL_SIZE == 32
        assert grid.pixel_size == 480

    def test_minimum_size_enforced(self):
        with pytest.raises(ValueError, match="at least 2"):
            Grid(size=1)

    def test_cell_size_must_be_positive(self):
        with pytest.raises(ValueError, match="positive"):
            Grid(cell_size=0)


class TestGridOperations:
    def test_in_bounds(self):
        grid = Grid(size=5)
        assert grid.in_bounds(GridPosition(0, 0))
        assert grid.in_bounds(GridPosition(4, 4))
        assert not grid.in_bounds(GridPosition(-1, 0))
        assert not grid.in_bounds(GridPosition(0, 5))
        assert not grid.in_bounds(GridPosition(5, 0))

    def test_free_cells_all_empty(self):
        grid = Grid(size=4)
        cells = grid.free_cells()
        assert len(cells) == 16
        assert cells[0] == GridPosition(0, 0)
        assert cells[1] == GridPosition(1, 0)

    def test_free_cells_excludes_occupied(self):
        grid = Grid(size=4)
        cells = grid.free_cells([GridPosition(0, 0), GridPosition(2, 1)])
        assert len(cells) == 14
        assert GridPosition(0, 0) not in cells
        assert GridPosition(2, 1) not in cells

    def test_free_cells_ignores_out_of_bounds(self):
        grid = Grid(size=4)
        assert len(grid.free_cells([GridPosition(-1, 2), GridPosition(4, 0)])) == 16

    def test_to_pixels(self):
        grid = Grid(size=15, cell_size=32)
        assert grid.to_pixels(GridPosition(2, 3)) == (64, 96, 32, 32)


class TestGridSerialization:
    def test_to_dict(self):
        assert Grid(size=6, cell_size=10).to_dict() == {"size": 6, "cell_size": 10}
