"""
Target placement for the game engine.
"""

import logging
import random
from typing import AbstractSet, Optional, Tuple

from .errors import ExhaustedGrid

logger = logging.getLogger(__name__)


class TargetSpawner:
    """
    Picks a random free cell for the next target.

    Cells are drawn uniformly from the complement of the occupied set, so the
    call always terminates; a full board raises ExhaustedGrid instead.
    """

    def __init__(self, grid_size: int, rng: Optional[random.Random] = None):
        self.grid_size = grid_size
        self.rng = rng or random.Random()

    def free_cells(self, occupied: AbstractSet[Tuple[int, int]]):
        """Return every in-bounds cell not in occupied, in row-major order."""
        return [
            (x, y)
            for y in range(self.grid_size)
            for x in range(self.grid_size)
            if (x, y) not in occupied
        ]

    def spawn(self, occupied: AbstractSet[Tuple[int, int]]) -> Tuple[int, int]:
        """
        Return a random cell (x, y) not present in occupied.

        Raises:
            ExhaustedGrid: if every cell of the grid is occupied
        """
        candidates = self.free_cells(occupied)
        if not candidates:
            raise ExhaustedGrid(
                f"No free cell left on the {self.grid_size}x{self.grid_size} grid"
            )
        cell = self.rng.choice(candidates)
        logger.debug(f"Spawned target at {cell} ({len(candidates)} free cells)")
        return cell

