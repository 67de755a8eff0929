"""Food placement logic."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

import numpy as np

from grid_snake.grid import GridPosition

if TYPE_CHECKING:
    from grid_snake.grid import Grid

logger = logging.getLogger(__name__)


class Food:
    """A single piece of food, moved to a new cell each time it is eaten.

    Uses a NumPy RNG so placement is reproducible under a fixed seed.
    """

    def __init__(self, position: GridPosition | None = None) -> None:
        self.position = position if position is not None else GridPosition(0, 0)

    def relocate(
        self,
        grid: Grid,
        rng: np.random.Generator,
        occupied: Iterable[GridPosition] = (),
    ) -> GridPosition:
        """Move to a uniformly random cell not listed in *occupied*.

        With nothing occupied every cell of the grid is a candidate. If
        the board has no free cell the food stays where it is.
        """
        candidates = grid.free_cells(occupied)
        if not candidates:
            logger.warning("No free cells available for food placement.")
            return self.position

        idx = int(rng.integers(len(candidates)))
        self.position = candidates[idx]
        logger.debug("Food placed at %s.", self.position)
        return self.position

    def to_dict(self) -> dict:
        """Serialize food state to a dictionary."""
        return {"position": list(self.position)}
