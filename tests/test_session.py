"""
Tests for the session state machine.

The session runs on the 10x10 grid from conftest; time is driven by hand
through advance(now_ms), with movement due every 160 ms.
"""

import random

from gridsnake.config import UP, DOWN, LEFT, RIGHT, INITIAL_SNAKE, Config
from gridsnake.render import FOOD, HEAD
from gridsnake.session import Phase, Session
from gridsnake.snake import Snake


class TestPhases:
    def test_starts_idle(self, session):
        assert session.phase is Phase.IDLE
        assert not session.is_playing and not session.is_game_over
        assert session.score == 0 and session.elapsed_seconds == 0
        assert session.grid.rows == 10 and session.grid.cols == 10

    def test_toggle_play_and_pause(self, session):
        assert session.toggle_play(0) is Phase.PLAYING
        assert session.clock.running
        assert session.toggle_play(50) is Phase.PAUSED
        assert not session.clock.running
        assert session.toggle_play(60) is Phase.PLAYING

    def test_no_ticks_while_idle(self, session):
        cells = session.state.snake.cells()
        assert session.advance(10_000) == 0
        assert session.state.snake.cells() == cells

    def test_pause_resume_before_a_tick_changes_nothing(self, session):
        cells = session.state.snake.cells()
        food = session.state.food
        session.toggle_play(0)
        session.toggle_play(100)
        session.toggle_play(120)
        session.advance(279)
        assert session.state.snake.cells() == cells
        assert session.state.food == food
        assert session.score == 0

    def test_no_ticks_while_paused(self, session):
        session.state.food = (9, 9)
        session.toggle_play(0)
        session.advance(160)
        session.toggle_play(200)
        cells = session.state.snake.cells()
        assert session.advance(60_000) == 0
        assert session.state.snake.cells() == cells
        assert session.elapsed_seconds == 0


class TestMovement:
    def test_eat_scenario(self, session):
        session.state.food = (3, 4)
        session.toggle_play(0)
        assert session.advance(160) == 1

        assert session.last_tick.ate_food
        assert session.score == 1
        assert session.state.snake.cells() == [(3, 4), (3, 5), (4, 5), (5, 5)]
        assert session.state.food not in session.state.snake
        assert session.grid.contains(session.state.food)

    def test_slide_scenario(self, session):
        session.state.food = (9, 9)
        session.toggle_play(0)
        session.advance(160)

        assert session.score == 0
        assert session.state.snake.cells() == [(3, 4), (3, 5), (4, 5)]

    def test_wall_collision_ends_the_game(self, session):
        cells = [(0, 5), (1, 5), (2, 5)]
        session.state.snake = Snake(cells)
        session.router.reset(UP)
        session.state.food = (9, 9)
        session.toggle_play(0)

        assert session.advance(5_000) == 1
        assert session.last_tick.collided
        assert session.is_game_over
        assert not session.is_playing
        assert not session.clock.running
        assert session.state.snake.cells() == cells
        assert session.elapsed_seconds == 0

    def test_stalled_frame_moves_only_one_cell(self, session):
        session.state.food = (9, 9)
        session.toggle_play(0)
        session.advance(160)
        assert session.state.snake.head == (3, 4)

        session.advance(2_000)
        assert session.state.snake.head == (3, 3)
        assert session.phase is Phase.PLAYING
        assert session.elapsed_seconds == 2

    def test_reverse_intent_does_not_apply_on_next_tick(self, session):
        session.state.food = (9, 9)
        session.toggle_play(0)
        assert session.direction(RIGHT) is False
        session.advance(160)
        assert session.state.direction == LEFT
        assert session.state.snake.head == (3, 4)

    def test_turn_applies_on_next_tick(self, session):
        session.state.food = (9, 9)
        session.toggle_play(0)
        assert session.direction(UP) is True
        session.advance(160)
        assert session.state.snake.head == (2, 5)
        assert session.router.committed == UP
        # DOWN is now the reverse of the committed direction
        assert session.direction(DOWN) is False

    def test_direction_ignored_when_not_playing(self, session):
        assert session.direction(UP) is False
        session.toggle_play(0)
        session.toggle_play(10)
        assert session.direction(UP) is False

    def test_full_board_is_a_win(self):
        session = Session(150, 50, config=Config(), rng=random.Random(0))
        assert (session.grid.rows, session.grid.cols) == (1, 3)
        session.state.snake = Snake([(0, 1), (0, 2)])
        session.state.food = (0, 0)
        session.toggle_play(0)
        session.advance(160)

        assert session.is_game_over
        assert session.won
        assert session.score == 1
        assert session.state.food is None


class TestElapsedTime:
    def test_seconds_count_only_while_playing(self):
        session = Session(500, 500, config=Config(move_every_ms=100_000), rng=random.Random(0))
        session.toggle_play(0)
        session.advance(3_000)
        assert session.elapsed_seconds == 3
        session.toggle_play(3_500)
        session.advance(20_000)
        assert session.elapsed_seconds == 3
        session.toggle_play(20_000)
        session.advance(21_000)
        assert session.elapsed_seconds == 4


class TestGameOverAndReset:
    def _crash(self, session):
        session.state.snake = Snake([(0, 5), (1, 5), (2, 5)])
        session.router.reset(UP)
        session.toggle_play(0)
        session.advance(160)
        assert session.is_game_over

    def test_toggle_is_a_no_op_after_game_over(self, session):
        self._crash(session)
        assert session.toggle_play(500) is Phase.GAME_OVER
        assert not session.clock.running

    def test_reset_restores_initial_state(self, session):
        session.state.score = 7
        session.elapsed_seconds = 42
        self._crash(session)
        session.reset()

        assert session.phase is Phase.IDLE
        assert session.score == 0 and session.elapsed_seconds == 0
        assert session.state.snake.cells() == list(INITIAL_SNAKE)
        assert session.router.committed == LEFT and session.router.pending == LEFT
        assert session.state.food not in session.state.snake
        assert not session.won

    def test_no_stale_ticks_after_reset(self, session):
        session.state.food = (9, 9)
        session.toggle_play(0)
        session.advance(160)
        session.reset()
        assert session.advance(10_000) == 0
        assert session.state.snake.cells() == list(INITIAL_SNAKE)

    def test_reset_food_is_ignored_after_game_over(self, session):
        self._crash(session)
        food = session.state.food
        session.reset_food()
        assert session.state.food == food


class TestFoodAndResize:
    def test_reset_food_uses_fixed_cell(self, session):
        session.reset_food()
        assert session.state.food == (2, 2)

    def test_reset_food_avoids_the_snake(self, session):
        session.state.snake = Snake([(2, 2), (2, 3)])
        session.reset_food()
        assert session.state.food != (2, 2)
        assert session.state.food not in session.state.snake

    def test_shrinking_relocates_out_of_bounds_food(self, session):
        session.state.food = (9, 9)
        grid = session.resize(250, 250)
        assert (grid.rows, grid.cols) == (5, 5)
        assert grid.contains(session.state.food)
        assert session.state.food not in session.state.snake

    def test_resize_keeps_food_that_still_fits(self, session):
        session.state.food = (1, 1)
        session.resize(1000, 1000)
        assert session.state.food == (1, 1)
        assert session.grid.rows == 20

    def test_resize_to_tiny_viewport(self, session):
        grid = session.resize(0, 0)
        assert (grid.rows, grid.cols) == (1, 1)
        assert session.state.food == (0, 0)


class TestSnapshot:
    def test_snapshot_reflects_state(self, session):
        session.state.food = (9, 9)
        snap = session.snapshot()
        assert snap.board.shape == (10, 10)
        assert snap.board[3, 5] == HEAD
        assert snap.board[9, 9] == FOOD
        assert snap.phase == "idle"
        assert not snap.is_playing and not snap.is_game_over
        assert snap.clock_text == "00:00"
