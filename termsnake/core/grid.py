# termsnake/core/grid.py
from __future__ import annotations
from typing import List
import numpy as np
from termsnake.interfaces import Cell, CellType, Pos

class Grid:
    """NumPy-backed width x height board.

    Two parallel arrays indexed ``[x, y]``: the cell type codes and a
    "needs redraw" flag. Every explicit type-set marks the cell dirty,
    even when the type does not change.
    """

    def __init__(self, width: int, height: int):
        if width < 3 or height < 3:
            raise ValueError(f"grid must be at least 3x3, got {width}x{height}")
        self.width = width
        self.height = height
        self.types = np.full((width, height), CellType.EMPTY, dtype=np.int8)
        self.dirty = np.zeros((width, height), dtype=bool)

    def in_bounds(self, pos: Pos) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, pos: Pos) -> None:
        # numpy would happily wrap negative indices
        if not self.in_bounds(pos):
            raise IndexError(f"cell {pos} outside {self.width}x{self.height} grid")

    def cell_at(self, pos: Pos) -> Cell:
        self._check(pos)
        x, y = pos
        return Cell(x, y, CellType(int(self.types[x, y])), bool(self.dirty[x, y]))

    def type_at(self, pos: Pos) -> CellType:
        self._check(pos)
        return CellType(int(self.types[pos[0], pos[1]]))

    def set_cell_type(self, pos: Pos, cell_type: CellType) -> None:
        self._check(pos)
        x, y = pos
        self.types[x, y] = cell_type
        self.dirty[x, y] = True

    def build_walls(self) -> None:
        """Paint the border ring. Not marked dirty: the first frame draws everything."""
        self.types[0, :] = CellType.WALL
        self.types[-1, :] = CellType.WALL
        self.types[:, 0] = CellType.WALL
        self.types[:, -1] = CellType.WALL

    def positions_of(self, cell_type: CellType) -> List[Pos]:
        xs, ys = np.nonzero(self.types == cell_type)
        return list(zip(xs.tolist(), ys.tolist()))

    def empty_cells(self) -> List[Pos]:
        return self.positions_of(CellType.EMPTY)

    def count(self, cell_type: CellType) -> int:
        return int(np.count_nonzero(self.types == cell_type))

    def dirty_cells(self) -> List[Pos]:
        # column-major, same order render_all walks the board
        xs, ys = np.nonzero(self.dirty)
        return list(zip(xs.tolist(), ys.tolist()))

    def clear_dirty(self, pos: Pos) -> None:
        self.dirty[pos[0], pos[1]] = False

    def __iter__(self):
        for x in range(self.width):
            for y in range(self.height):
                yield self.cell_at((x, y))
