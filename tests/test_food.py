"""Tests for the Food module."""

import numpy as np

from grid_snake.food import Food
from grid_snake.grid import Grid, GridPosition


class TestFoodInit:
    def test_default_position(self):
        assert Food().position == GridPosition(0, 0)

    def test_explicit_position(self):
        assert Food(GridPosition(3, 4)).position == (3, 4)


class TestFoodRelocation:
    def test_relocate_within_bounds(self):
        grid = Grid(size=15)
        rng = np.random.default_rng(42)
        food = Food()
        for _ in range(100):
            pos = food.relocate(grid, rng)
            assert grid.in_bounds(pos)
            assert food.position == pos

    def test_relocate_deterministic(self):
        """Same seed produces the same sequence of positions."""
        assert self._positions_with_seed(42) == self._positions_with_seed(42)

    def test_relocate_different_seeds(self):
        # Very unlikely to match over ten draws with different seeds.
        assert self._positions_with_seed(1) != self._positions_with_seed(2)

    def test_relocate_covers_grid(self):
        grid = Grid(size=3)
        rng = np.random.default_rng(0)
        food = Food()
        seen = {food.relocate(grid, rng) for _ in range(500)}
        assert len(seen) == 9

    def test_relocate_avoids_occupied(self):
        grid = Grid(size=3)
        rng = np.random.default_rng(7)
        occupied = [GridPosition(x, y) for x in range(3) for y in range(3)]
        free = occupied.pop(4)
        food = Food()
        for _ in range(20):
            assert food.relocate(grid, rng, occupied) == free

    def test_relocate_on_full_grid_keeps_position(self):
        grid = Grid(size=2)
        occupied = [GridPosition(x, y) for x in range(2) for y in range(2)]
        food = Food(GridPosition(1, 1))
        assert food.relocate(grid, np.random.default_rng(0), occupied) == (1, 1)

    @staticmethod
    def _positions_with_seed(seed: int) -> list[GridPosition]:
        grid = Grid(size=15)
        rng = np.random.default_rng(seed)
        food = Food()
        return [food.relocate(grid, rng) for _ in range(10)]


class TestFoodSerialization:
    def test_to_dict(self):
        assert Food(GridPosition(2, 9)).to_dict() == {"position": [2, 9]}
