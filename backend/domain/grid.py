"""
GridModel - board geometry and food placement.
"""

import random
from typing import AbstractSet, Iterator, List, Optional

from .constants import GRID_SIZE, Position


class GridModel:
    """
    A square board of size x size cells.

    Attributes:
        size: number of cells along each edge
        rng: random source used for food placement (seed it for replayable games)
    """

    def __init__(self, size: int = GRID_SIZE, rng: Optional[random.Random] = None):
        if size < 1:
            raise ValueError(f"Grid size must be positive, got {size}.")
        self.size = size
        self.rng = rng or random.Random()

    def is_in_bounds(self, position: Position) -> bool:
        x, y = position
        return 0 <= x < self.size and 0 <= y < self.size

    def cells(self) -> Iterator[Position]:
        """Yield every cell in row-major order."""
        for y in range(self.size):
            for x in range(self.size):
                yield Position(x, y)

    def place_food(self, occupied: AbstractSet[Position]) -> Optional[Position]:
        """
        Return a cell chosen uniformly at random among the cells not in `occupied`.

        Free cells are enumerated and one is picked by index, so the cost is
        bounded by the grid area no matter how crowded the board is.

        Returns:
            The chosen Position, or None when every cell is occupied.
        """
        free: List[Position] = [cell for cell in self.cells() if cell not in occupied]
        if not free:
            return None
        return free[self.rng.randrange(len(free))]
