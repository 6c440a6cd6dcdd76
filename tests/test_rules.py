"""Tests for per-tick collision and growth resolution."""

import random

from gridsnake import rules
from gridsnake.body import Body
from gridsnake.grid import Grid
from gridsnake.models import (
    BoardFilled, BorderPolicy, Continued, Direction, GameOver, GameOverReason, Grew,
)


WRAP = Grid(20, 20, BorderPolicy.WRAP)
WALL = Grid(20, 20, BorderPolicy.WALL)


class TestMove:
    def test_plain_move_continues(self):
        body = Body([(10, 10)], Direction.UP)
        outcome = rules.tick(body, (3, 3), WRAP, random.Random(0))
        assert isinstance(outcome, Continued)
        assert outcome.cells == ((10, 9),)
        assert body.cells == outcome.cells

    def test_length_is_kept_without_food(self):
        body = Body([(5, 5), (5, 6), (5, 7)], Direction.UP)
        outcome = rules.tick(body, (0, 0), WRAP)
        assert len(outcome.cells) == 3

    def test_no_food_still_moves(self):
        body = Body([(5, 5)], Direction.RIGHT)
        assert isinstance(rules.tick(body, None, WRAP), Continued)
        assert body.head == (6, 5)

    def test_wrap_keeps_head_in_bounds(self):
        rng = random.Random(11)
        for direction in Direction:
            body = Body([(0, 0)], direction)
            for _ in range(45):
                rules.tick(body, None, WRAP, rng)
                assert WRAP.contains(body.head)


class TestGrowth:
    def test_eating_grows_at_old_tail(self):
        body = Body([(5, 5), (5, 6)], Direction.UP)
        outcome = rules.tick(body, (5, 4), WRAP, random.Random(2))
        assert isinstance(outcome, Grew)
        assert outcome.cells == ((5, 4), (5, 5), (5, 6))
        assert outcome.food not in outcome.cells
        assert WRAP.contains(outcome.food)

    def test_single_cell_growth(self):
        body = Body([(10, 10)], Direction.UP)
        outcome = rules.tick(body, (10, 9), WRAP, random.Random(2))
        assert outcome.cells == ((10, 9), (10, 10))

    def test_filling_the_board_is_a_win(self):
        grid = Grid(2, 1, BorderPolicy.WALL)
        body = Body([(0, 0)], Direction.RIGHT)
        outcome = rules.tick(body, (1, 0), grid)
        assert isinstance(outcome, BoardFilled)
        assert outcome.cells == ((1, 0), (0, 0))
        assert outcome.food is None
        assert outcome.reason is GameOverReason.EXHAUSTED


class TestCollisions:
    def test_wall_collision_rolls_back(self):
        body = Body([(0, 5), (1, 5), (2, 5)], Direction.LEFT)
        outcome = rules.tick(body, (9, 9), WALL)
        assert isinstance(outcome, GameOver)
        assert outcome.reason is GameOverReason.WALL
        assert outcome.cells == ((0, 5), (1, 5), (2, 5))
        assert body.cells == outcome.cells

    def test_wall_checked_before_food(self):
        body = Body([(0, 0)], Direction.UP)
        outcome = rules.tick(body, (0, 19), WALL)
        assert isinstance(outcome, GameOver)

    def test_self_collision_rolls_back(self):
        # Head at (5,5) coils back left into its own fourth segment
        cells = [(5, 5), (5, 4), (4, 4), (4, 5), (4, 6)]
        body = Body(cells, Direction.LEFT)
        outcome = rules.tick(body, (0, 0), WRAP)
        assert isinstance(outcome, GameOver)
        assert outcome.reason is GameOverReason.SELF
        assert body.cells == tuple(cells)

    def test_moving_into_the_old_tail_cell_is_fatal(self):
        body = Body([(5, 5), (5, 4), (4, 4), (4, 5)], Direction.LEFT)
        outcome = rules.tick(body, (0, 0), WRAP)
        assert isinstance(outcome, GameOver)
        assert outcome.reason is GameOverReason.SELF

    def test_overlap_on_a_one_wide_wrapped_grid(self):
        # Moving sideways on a one-column grid leaves the head where it was
        grid = Grid(1, 5, BorderPolicy.WRAP)
        body = Body([(0, 2), (0, 3)], Direction.LEFT)
        outcome = rules.tick(body, None, grid)
        assert isinstance(outcome, GameOver)
        assert body.cells == ((0, 2), (0, 3))
