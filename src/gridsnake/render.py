# render.py
"""
Read-only view of a session for whatever draws it.

The board is a numpy array of cell kinds indexed [row, col]; the pygame front
end walks it once per frame.
"""
from dataclasses import dataclass
from typing import Iterable, Optional

import numpy as np  # type: ignore

from .grid import Cell, Grid

EMPTY, SNAKE, HEAD, FOOD = 0, 1, 2, 3


def build_board(grid: Grid, snake: Iterable[Cell], food: Optional[Cell]) -> np.ndarray:
    board = np.full((grid.rows, grid.cols), EMPTY, dtype=np.int8)
    if food is not None and grid.contains(food):
        board[food] = FOOD
    for i, cell in enumerate(snake):
        # cells left outside a shrunken grid are simply not drawn
        if grid.contains(cell):
            board[cell] = HEAD if i == 0 else SNAKE
    return board


@dataclass(frozen=True, eq=False)
class Snapshot:
    board: np.ndarray
    score: int
    elapsed_seconds: int
    phase: str
    is_playing: bool
    is_game_over: bool
    won: bool = False

    @property
    def rows(self) -> int:
        return self.board.shape[0]

    @property
    def cols(self) -> int:
        return self.board.shape[1]

    def kind_at(self, index: int) -> int:
        """Cell kind for a flat row-major index, as a DOM-style grid lays cells out."""
        row, col = divmod(index, self.cols)
        return int(self.board[row, col])

    @property
    def clock_text(self) -> str:
        return format_time(self.elapsed_seconds)


def format_time(seconds: int) -> str:
    mins, secs = divmod(max(0, int(seconds)), 60)
    return f"{mins:02d}:{secs:02d}"
