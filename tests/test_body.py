"""Tests for the snake body."""

import pytest

from gridsnake.body import Body
from gridsnake.grid import Grid
from gridsnake.models import BorderPolicy, Direction, WallCollision


WRAP = Grid(20, 20, BorderPolicy.WRAP)
WALL = Grid(20, 20, BorderPolicy.WALL)


class TestSetDirection:
    def test_same_direction_is_rejected(self):
        body = Body([(5, 5)], Direction.UP)
        assert body.set_direction(Direction.UP, WRAP) is False
        assert body.direction is Direction.UP

    def test_reverse_into_neck_is_rejected(self):
        body = Body([(5, 5), (5, 6)], Direction.UP)
        assert body.set_direction(Direction.DOWN, WRAP) is False
        assert body.direction is Direction.UP

    def test_reverse_is_rejected_for_every_heading(self):
        for direction in Direction:
            dx, dy = direction.delta
            body = Body([(5, 5), (5 - dx, 5 - dy)], direction)
            assert body.set_direction(direction.opposite, WRAP) is False
            assert body.direction is direction

    def test_perpendicular_turn_is_accepted(self):
        body = Body([(5, 5), (5, 6)], Direction.UP)
        assert body.set_direction(Direction.LEFT, WRAP) is True
        assert body.direction is Direction.LEFT

    def test_single_cell_accepts_reverse(self):
        body = Body([(5, 5)], Direction.UP)
        assert body.set_direction(Direction.DOWN, WRAP) is True
        assert body.direction is Direction.DOWN

    def test_latest_valid_request_wins(self):
        body = Body([(5, 5), (5, 6)], Direction.UP)
        body.set_direction(Direction.LEFT, WRAP)
        body.set_direction(Direction.RIGHT, WRAP)
        assert body.direction is Direction.RIGHT

    def test_guard_checks_the_neck_not_the_heading(self):
        # Heading left already, but the neck is below: turning down must be refused
        body = Body([(5, 5), (5, 6)], Direction.LEFT)
        assert body.set_direction(Direction.DOWN, WRAP) is False
        assert body.set_direction(Direction.RIGHT, WRAP) is True

    def test_guard_holds_across_a_wrapped_edge(self):
        # Head just wrapped from the top row to the bottom row
        body = Body([(5, 19), (5, 0)], Direction.UP)
        assert body.set_direction(Direction.DOWN, WRAP) is False


class TestAdvance:
    def test_single_cell_moves_up(self):
        body = Body([(10, 10)], Direction.UP)
        previous = body.advance(WRAP)
        assert previous == ((10, 10),)
        assert body.cells == ((10, 9),)

    def test_segments_follow_their_predecessor(self):
        body = Body([(5, 5), (5, 6), (5, 7), (6, 7)], Direction.LEFT)
        previous = body.advance(WRAP)
        assert body.cells == ((4, 5),) + previous[:-1]
        assert len(body) == 4

    def test_wraps_head_under_wrap(self):
        body = Body([(0, 3)], Direction.LEFT)
        body.advance(WRAP)
        assert body.head == (19, 3)

    def test_wall_collision_leaves_body_untouched(self):
        body = Body([(0, 5), (1, 5)], Direction.LEFT)
        with pytest.raises(WallCollision):
            body.advance(WALL)
        assert body.cells == ((0, 5), (1, 5))


class TestGrowAndCollide:
    def test_grow_appends_tail(self):
        body = Body([(5, 5)], Direction.UP)
        body.grow((5, 6))
        assert body.cells == ((5, 5), (5, 6))
        assert body.tail == (5, 6)

    def test_self_collides(self):
        assert Body([(5, 5), (5, 6), (5, 5)]).self_collides() is True
        assert Body([(5, 5), (5, 6), (5, 7)]).self_collides() is False
        assert Body([(5, 5)]).self_collides() is False

    def test_restore_rolls_back(self):
        body = Body([(5, 5), (5, 6)], Direction.UP)
        previous = body.advance(WRAP)
        body.restore(previous)
        assert body.cells == ((5, 5), (5, 6))

    def test_restore_rejects_length_mismatch(self):
        body = Body([(5, 5), (5, 6)])
        with pytest.raises(ValueError):
            body.restore([(1, 1)])

    def test_empty_body_is_rejected(self):
        with pytest.raises(ValueError):
            Body([])
