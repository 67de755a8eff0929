"""Grid representation for the snake game."""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple

import numpy as np

GRID_SIZE = 15
CELL_SIZE = 32


class GridPosition(NamedTuple):
    """An ``(x, y)`` cell coordinate; ``x`` is the column, ``y`` the row."""

    x: int
    y: int


class Grid:
    """Square game board with a fixed number of cells per side.

    Coordinates use ``(x, y)`` ordering; the occupancy mask built by
    :meth:`free_cells` is indexed ``[y, x]`` like a NumPy image.
    """

    def __init__(self, size: int = GRID_SIZE, cell_size: int = CELL_SIZE) -> None:
        if size < 2:
            raise ValueError("Grid size must be at least 2.")
        if cell_size < 1:
            raise ValueError("Cell size must be positive.")
        self.size = size
        self.cell_size = cell_size

    @property
    def pixel_size(self) -> int:
        """Side length of the rendered board in pixels."""
        return self.size * self.cell_size

    def in_bounds(self, position: GridPosition) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= position.x < self.size and 0 <= position.y < self.size

    def free_cells(self, occupied: Iterable[GridPosition] = ()) -> list[GridPosition]:
        """Return every in-bounds cell not listed in *occupied*, row by row."""
        mask = np.ones((self.size, self.size), dtype=bool)
        for pos in occupied:
            if self.in_bounds(pos):
                mask[pos.y, pos.x] = False
        ys, xs = np.nonzero(mask)
        return [GridPosition(x, y) for y, x in zip(ys.tolist(), xs.tolist(), strict=True)]

    def to_pixels(self, position: GridPosition) -> tuple[int, int, int, int]:
        """Map a cell to an ``(left, top, width, height)`` pixel rectangle."""
        return (
            position.x * self.cell_size,
            position.y * self.cell_size,
            self.cell_size,
            self.cell_size,
        )

    def to_dict(self) -> dict:
        """Serialize grid dimensions to a dictionary."""
        return {"size": self.size, "cell_size": self.cell_size}
