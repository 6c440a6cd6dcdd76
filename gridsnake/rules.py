"""Per-tick collision and growth resolution."""

import logging
import random
from typing import Optional

from . import food as food_placement
from .body import Body
from .grid import Grid
from .models import (
    BoardFilled, Cell, Continued, Exhausted, GameOver, GameOverReason,
    Grew, SelfCollision, TickOutcome, WallCollision,
)

logger = logging.getLogger(__name__)


def check_self_collision(body: Body, previous: tuple[Cell, ...]):
    """Raise ``SelfCollision`` if the new head overlaps the body.

    The head is tested against every non-head segment as it stood before
    the move, and against the body as it stands after the move.
    """
    head = body.head
    if head in previous[1:] or body.self_collides():
        raise SelfCollision(head)


def tick(body: Body, food: Optional[Cell], grid: Grid, rng=random) -> TickOutcome:
    """Advance ``body`` by one step in place and report what happened.

    Walls are checked before self-collision; food only counts after a clean
    move. On a collision the body is rolled back to its pre-tick cells.
    """
    previous = body.snapshot()
    try:
        body.advance(grid)
    except WallCollision as exc:
        logger.debug("Wall collision at %s", exc.cell)
        return GameOver(previous, GameOverReason.WALL)

    try:
        check_self_collision(body, previous)
    except SelfCollision as exc:
        logger.debug("Self collision at %s", exc.cell)
        body.restore(previous)
        return GameOver(previous, GameOverReason.SELF)

    if food is None or body.head != food:
        return Continued(body.cells)

    body.grow(previous[-1])
    try:
        new_food = food_placement.place(grid, body.occupied(), rng)
    except Exhausted:
        return BoardFilled(body.cells)
    return Grew(body.cells, new_food)
