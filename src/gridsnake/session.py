# session.py
"""
Session controller: owns the game state, the input router and the clock, and
moves between the idle / playing / paused / game-over phases.

Every mutation happens inside one of the public methods below, called from a
single thread (the front end's event loop). A host with several threads has to
funnel its calls through one queue.
"""
from __future__ import annotations

from enum import Enum
import logging
import random

from .clock import GameClock
from .config import CFG, Config, INITIAL_DIRECTION, RESET_FOOD_CELL, DIRECTION_NAMES
from .controls import InputRouter
from .food import spawn_food
from .game import GameState, TickResult, new_game_state, step_game
from .grid import Grid, grid_for_viewport
from .render import Snapshot, build_board

logger = logging.getLogger(__name__)


class Phase(str, Enum):
    IDLE = "idle"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class Session:
    def __init__(self, width: int, height: int, config: Config = CFG, rng: random.Random | None = None):
        self.config = config
        self.rng = rng if rng is not None else random.Random(config.seed)
        self.grid: Grid = grid_for_viewport(width, height, config.cell_size)
        self.router = InputRouter(INITIAL_DIRECTION)
        self.clock = GameClock(
            on_move=self._on_move,
            on_second=self._on_second,
            move_every_ms=config.move_every_ms,
            second_ms=config.second_ms,
        )
        self.phase = Phase.IDLE
        self.elapsed_seconds = 0
        self.won = False
        self.last_tick: TickResult | None = None
        self.state: GameState = new_game_state(self.grid, self.rng)
        logger.info("New session on a %dx%d grid", self.grid.rows, self.grid.cols)

    # ---------- Read-only views ----------
    @property
    def score(self) -> int:
        return self.state.score

    @property
    def is_playing(self) -> bool:
        return self.phase is Phase.PLAYING

    @property
    def is_game_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

    def snapshot(self) -> Snapshot:
        return Snapshot(
            board=build_board(self.grid, self.state.snake, self.state.food),
            score=self.state.score,
            elapsed_seconds=self.elapsed_seconds,
            phase=self.phase.value,
            is_playing=self.is_playing,
            is_game_over=self.is_game_over,
            won=self.won,
        )

    # ---------- Intents ----------
    def toggle_play(self, now_ms: int) -> Phase:
        if self.phase is Phase.GAME_OVER:
            return self.phase
        if self.phase is Phase.PLAYING:
            self.clock.stop()
            self._enter(Phase.PAUSED)
        else:
            self._enter(Phase.PLAYING)
            self.clock.start(now_ms)
        return self.phase

    def direction(self, direction) -> bool:
        accepted = self.router.request(direction, playing=self.is_playing)
        if accepted:
            logger.debug("Pending direction -> %s", DIRECTION_NAMES[direction])
        return accepted

    def reset(self) -> None:
        self.clock.stop()
        self.router.reset(INITIAL_DIRECTION)
        self.state = new_game_state(self.grid, self.rng)
        self.elapsed_seconds = 0
        self.won = False
        self.last_tick = None
        self._enter(Phase.IDLE)
        logger.info("Session reset, food at %s", self.state.food)

    def reset_food(self) -> None:
        if self.phase is Phase.GAME_OVER:
            return
        cell = self.grid.clamp(RESET_FOOD_CELL)
        if cell in self.state.snake:
            cell = spawn_food(self.grid, self.state.snake.occupied, self.rng)
        self.state.food = cell
        logger.info("Food reset to %s", cell)

    def resize(self, width: int, height: int) -> Grid:
        grid = grid_for_viewport(width, height, self.config.cell_size)
        if grid != self.grid:
            logger.info("Grid resized %dx%d -> %dx%d", self.grid.rows, self.grid.cols, grid.rows, grid.cols)
        self.grid = grid
        self.state.grid = grid
        food = self.state.food
        if food is None or not grid.contains(food):
            self.state.food = spawn_food(grid, self.state.snake.occupied, self.rng)
        return grid

    # ---------- Clock ----------
    def advance(self, now_ms: int) -> int:
        """Deliver every tick due by now_ms; returns how many fired."""
        return self.clock.advance(now_ms)

    def _on_move(self) -> None:
        if self.phase is not Phase.PLAYING:
            return
        self.state.pending = self.router.pending
        result = step_game(self.state, self.rng)
        self.router.commit()
        self.last_tick = result
        if result.collided:
            self._game_over(f"collision ({result.reason})")
        elif result.board_full:
            self.won = True
            self._game_over("board full")

    def _on_second(self) -> None:
        if self.phase is Phase.PLAYING:
            self.elapsed_seconds += 1

    # ---------- Transitions ----------
    def _game_over(self, why: str) -> None:
        self.clock.stop()
        self._enter(Phase.GAME_OVER)
        logger.info("Game over: %s, score=%d, time=%ds", why, self.state.score, self.elapsed_seconds)

    def _enter(self, phase: Phase) -> None:
        if phase is not self.phase:
            logger.info("Phase %s -> %s", self.phase.value, phase.value)
        self.phase = phase
