"""Core game state and logic."""

import logging
import random
from typing import Callable, Optional

from . import food as food_placement
from . import rules
from .body import Body
from .constants import DEFAULT_POLICY, GRID_H, GRID_W, SPEED_MS
from .grid import Grid
from .models import (
    BorderPolicy, Cell, Direction, Exhausted, GameOverReason, GameStatus, TickOutcome,
)
from .scheduler import Scheduler

logger = logging.getLogger(__name__)


class Game:
    """Single-snake engine: owns the body, the food and the run status.

    Renderers read ``body_cells()``, ``food_cell()`` and ``status``; input
    channels push intents through ``request_direction``, ``toggle_pause``,
    ``toggle_policy`` and ``reset``. The host calls ``advance_frame`` once per
    frame with the elapsed milliseconds.
    """

    def __init__(
        self,
        width: int = GRID_W,
        height: int = GRID_H,
        policy: BorderPolicy = BorderPolicy(DEFAULT_POLICY),
        speed: float = SPEED_MS,
        rng: Optional[random.Random] = None,
    ):
        self.grid = Grid(width, height, BorderPolicy(policy))
        self.rng = rng or random.Random()
        self.scheduler = Scheduler(self.tick, speed)
        self.listeners: list[Callable[[TickOutcome], None]] = []
        self._new_run()

    def _new_run(self):
        self.body = Body([self.grid.center], Direction.UP)
        self.food: Optional[Cell] = None
        self.score = 0
        self.reason: Optional[GameOverReason] = None
        self.last_outcome: Optional[TickOutcome] = None
        self.status = GameStatus.RUNNING
        self.scheduler.reset()
        try:
            self.food = food_placement.place(self.grid, self.body.occupied(), self.rng)
        except Exhausted:
            self._finish(GameOverReason.EXHAUSTED)

    def _finish(self, reason: GameOverReason):
        self.status = GameStatus.GAME_OVER
        self.reason = reason
        logger.info("Game over (%s) with score %d", reason.value, self.score)

    # ── Read surface ───────────────────────────────────────────────

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def policy(self) -> BorderPolicy:
        return self.grid.policy

    @property
    def direction(self) -> Direction:
        return self.body.direction

    @property
    def speed(self) -> float:
        return self.scheduler.speed

    @property
    def won(self) -> bool:
        return self.reason is GameOverReason.EXHAUSTED

    def body_cells(self) -> tuple[Cell, ...]:
        return self.body.cells

    def food_cell(self) -> Optional[Cell]:
        return self.food

    def state(self) -> GameStatus:
        return self.status

    def add_listener(self, listener: Callable[[TickOutcome], None]):
        self.listeners.append(listener)

    # ── Intents ────────────────────────────────────────────────────

    def request_direction(self, direction) -> bool:
        direction = Direction.parse(direction)
        if self.status is not GameStatus.RUNNING:
            return False
        return self.body.set_direction(direction, self.grid)

    def toggle_pause(self) -> GameStatus:
        if self.status is GameStatus.RUNNING:
            self.status = GameStatus.PAUSED
        elif self.status is GameStatus.PAUSED:
            self.status = GameStatus.RUNNING
            self.scheduler.reset()
        return self.status

    def toggle_policy(self) -> BorderPolicy:
        self.grid = self.grid.with_policy(self.grid.policy.toggled())
        if self.status is GameStatus.RUNNING:
            self.status = GameStatus.PAUSED
        logger.info("Borders %s", "enabled" if self.policy is BorderPolicy.WALL else "disabled")
        return self.policy

    def reset(self) -> bool:
        if not self.status.is_stopped:
            return False
        self._new_run()
        logger.info("Game reset on a %dx%d grid (%s)", self.width, self.height, self.policy.value)
        return True

    # ── Loop ───────────────────────────────────────────────────────

    def tick(self) -> Optional[TickOutcome]:
        if self.status is not GameStatus.RUNNING:
            return None

        outcome = rules.tick(self.body, self.food, self.grid, self.rng)
        self.last_outcome = outcome
        if outcome.grew:
            self.score += 1
            self.food = outcome.food
        if outcome.fatal:
            self._finish(outcome.reason)

        for listener in self.listeners:
            listener(outcome)
        return outcome

    def advance_frame(self, delta_ms: float) -> bool:
        if self.status is not GameStatus.RUNNING:
            return False
        return self.scheduler.advance(delta_ms)
