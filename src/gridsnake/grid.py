# grid.py
from dataclasses import dataclass
from typing import Tuple

from .config import CELL_SIZE

Cell = Tuple[int, int]   # (row, col)


@dataclass(frozen=True)
class Grid:
    rows: int
    cols: int

    @property
    def area(self) -> int:
        return self.rows * self.cols

    def contains(self, cell: Cell) -> bool:
        row, col = cell
        return 0 <= row < self.rows and 0 <= col < self.cols

    def clamp(self, cell: Cell) -> Cell:
        """Pull a cell back inside the grid (nearest edge cell)."""
        row, col = cell
        return (min(max(row, 0), self.rows - 1), min(max(col, 0), self.cols - 1))


def grid_for_viewport(width: int, height: int, cell_size: int = CELL_SIZE) -> Grid:
    """
    Convert a container size in pixels into a cell grid.
    Never fails: anything smaller than one cell becomes a 1x1 grid.
    """
    if cell_size <= 0:
        raise ValueError(f"cell_size must be positive, got {cell_size}")
    rows = max(1, int(height) // cell_size)
    cols = max(1, int(width) // cell_size)
    return Grid(rows=rows, cols=cols)
