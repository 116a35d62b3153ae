# game.py
from dataclasses import dataclass
from typing import Optional, Tuple
import logging
import random

from .config import INITIAL_SNAKE, INITIAL_DIRECTION, DIRECTION_NAMES
from .food import spawn_food
from .grid import Cell, Grid
from .snake import Snake

logger = logging.getLogger(__name__)

# ---------- Helpers ----------
def is_opposite(a: Tuple[int, int], b: Tuple[int, int]) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]

def next_head(head: Cell, direction: Tuple[int, int]) -> Cell:
    return (head[0] + direction[0], head[1] + direction[1])

# ---------- State ----------
@dataclass
class GameState:
    snake: Snake                   # head at index 0
    direction: Tuple[int, int]     # committed on the last tick
    pending: Tuple[int, int]       # applied on the next tick
    food: Optional[Cell]           # None once the board is full
    grid: Grid
    score: int = 0

@dataclass
class TickResult:
    snake: Snake
    ate_food: bool = False
    collided: bool = False
    reason: Optional[str] = None   # 'wall' or 'self' when collided
    board_full: bool = False

def new_game_state(grid: Grid, rng=random) -> GameState:
    snake = Snake(INITIAL_SNAKE)
    food = spawn_food(grid, snake.occupied, rng)
    return GameState(
        snake=snake,
        direction=INITIAL_DIRECTION,
        pending=INITIAL_DIRECTION,
        food=food,
        grid=grid,
        score=0,
    )

# ---------- Update ----------
def step_game(state: GameState, rng=random) -> TickResult:
    """
    Advance the game by exactly one tick.

    Collisions are reported in the result and leave the snake untouched; the
    caller decides what game over means. The self-collision test runs against
    the body before the move, so the current tail cell still counts as taken.
    """
    # Commit direction once per tick; reversals were filtered on input
    state.direction = state.pending

    snake = state.snake
    new_head = next_head(snake.head, state.direction)

    # Wall collision
    if not state.grid.contains(new_head):
        logger.debug("Wall hit at %s heading %s", new_head, DIRECTION_NAMES.get(state.direction))
        return TickResult(snake=snake, collided=True, reason="wall")

    # Self collision
    if new_head in snake:
        logger.debug("Self hit at %s", new_head)
        return TickResult(snake=snake, collided=True, reason="self")

    # Move / grow
    snake.push_head(new_head)
    if new_head == state.food:
        state.score += 1
        state.food = spawn_food(state.grid, snake.occupied, rng)
        logger.debug("Ate food at %s, score=%d, next food %s", new_head, state.score, state.food)
        return TickResult(snake=snake, ate_food=True, board_full=state.food is None)

    snake.pop_tail()
    return TickResult(snake=snake)
