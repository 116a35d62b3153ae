"""Grid snake: game-state engine plus a small pygame front end."""

from gridsnake.grid import Grid, grid_for_viewport
from gridsnake.snake import Snake
from gridsnake.food import spawn_food
from gridsnake.game import GameState, TickResult, new_game_state, step_game
from gridsnake.clock import GameClock, PeriodicTimer
from gridsnake.controls import InputRouter
from gridsnake.session import Phase, Session
from gridsnake.render import Snapshot, format_time

__all__ = [
    "Grid", "grid_for_viewport",
    "Snake",
    "spawn_food",
    "GameState", "TickResult", "new_game_state", "step_game",
    "GameClock", "PeriodicTimer",
    "InputRouter",
    "Phase", "Session",
    "Snapshot", "format_time",
]
