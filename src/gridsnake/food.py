# food.py
import logging
import random
from typing import Collection, Optional

from .grid import Cell, Grid

logger = logging.getLogger(__name__)


def spawn_food(grid: Grid, occupied: Collection[Cell], rng=random) -> Optional[Cell]:
    """
    Pick a uniformly random free cell by rejection sampling.

    Returns None when every cell of the grid is occupied; sampling would
    otherwise never terminate.
    """
    taken = sum(1 for cell in occupied if grid.contains(cell))
    if taken >= grid.area:
        logger.info("No free cell left on a %dx%d grid", grid.rows, grid.cols)
        return None

    while True:
        row = rng.randrange(grid.rows)
        col = rng.randrange(grid.cols)
        if (row, col) not in occupied:
            return (row, col)
