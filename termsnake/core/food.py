# termsnake/core/food.py
from __future__ import annotations
from typing import Optional
import numpy as np
from termsnake.interfaces import CellType, Pos
from .grid import Grid
from .errors import NoSpaceForFood

class FoodSpawner:
    """Drops food on a uniformly random Empty cell."""

    def __init__(self, rng: Optional[np.random.Generator] = None, seed: Optional[int] = None):
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def spawn(self, grid: Grid) -> Pos:
        free = grid.empty_cells()
        if not free:
            raise NoSpaceForFood()
        pos = free[int(self.rng.integers(len(free)))]
        grid.set_cell_type(pos, CellType.FOOD)
        return pos
