"""Grid representation for the snake game."""

from __future__ import annotations

import enum

import numpy as np


class CellType(enum.IntEnum):
    """Integer codes stored in the grid array."""

    EMPTY = 0
    SNAKE = 1
    FOOD = 2


class Grid:
    """NumPy-backed occupancy grid of ``columns × rows`` cells.

    Coordinates are ``(x, y)`` with the origin at the top-left corner. The
    backing array is shaped ``(rows, columns)`` and indexed ``cells[y, x]``.
    """

    def __init__(self, columns: int, rows: int) -> None:
        if columns < 1 or rows < 1:
            raise ValueError("Grid dimensions must be at least 1×1.")
        self.columns = columns
        self.rows = rows
        self.cells = np.zeros((rows, columns), dtype=np.int8)

    def clear(self) -> None:
        """Reset all cells to empty."""
        self.cells[:] = CellType.EMPTY

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= x < self.columns and 0 <= y < self.rows

    def get(self, x: int, y: int) -> CellType:
        """Return the cell type at the given coordinate."""
        return CellType(self.cells[y, x])

    def set(self, x: int, y: int, cell_type: CellType) -> None:
        """Set the cell type at the given coordinate."""
        self.cells[y, x] = cell_type

    def empty_cells(self) -> list[tuple[int, int]]:
        """Return all cells not covered by the snake, as ``(x, y)``."""
        ys, xs = np.where(self.cells != CellType.SNAKE)
        return list(zip(xs.tolist(), ys.tolist(), strict=True))
