"""Data models."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .constants import DIRECTIONS, OPPOSITES

Cell = tuple[int, int]


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> Cell:
        return DIRECTIONS[self.value]

    @property
    def opposite(self) -> "Direction":
        return Direction(OPPOSITES[self.value])

    @classmethod
    def parse(cls, value) -> "Direction":
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value.lower() in DIRECTIONS:
            return cls(value.lower())
        raise ValueError(f"unknown direction: {value!r}")


class BorderPolicy(Enum):
    WRAP = "wrap"
    WALL = "wall"

    def toggled(self) -> "BorderPolicy":
        return BorderPolicy.WALL if self is BorderPolicy.WRAP else BorderPolicy.WRAP


class GameStatus(Enum):
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"

    @property
    def is_stopped(self) -> bool:
        return self is not GameStatus.RUNNING


class GameOverReason(Enum):
    WALL = "wall"
    SELF = "self"
    EXHAUSTED = "exhausted"


# ── Errors ─────────────────────────────────────────────────────────

class SnakeError(Exception):
    """Base class for engine errors that end a run."""


class WallCollision(SnakeError):
    def __init__(self, cell: Cell):
        super().__init__(f"cell {cell} is outside the walled grid")
        self.cell = cell


class SelfCollision(SnakeError):
    def __init__(self, cell: Cell):
        super().__init__(f"head ran into the body at {cell}")
        self.cell = cell


class Exhausted(SnakeError):
    def __init__(self):
        super().__init__("no free cell left for food")


# ── Tick outcomes ──────────────────────────────────────────────────

@dataclass(frozen=True)
class Continued:
    cells: tuple[Cell, ...]
    grew = False
    fatal = False


@dataclass(frozen=True)
class Grew:
    cells: tuple[Cell, ...]
    food: Cell
    grew = True
    fatal = False


@dataclass(frozen=True)
class GameOver:
    """The attempted move was undone; ``cells`` is the pre-tick body."""

    cells: tuple[Cell, ...]
    reason: GameOverReason
    grew = False
    fatal = True


@dataclass(frozen=True)
class BoardFilled:
    """The body covers the whole grid after eating. Counts as a win."""

    cells: tuple[Cell, ...]
    food: Optional[Cell] = None
    reason = GameOverReason.EXHAUSTED
    grew = True
    fatal = True


TickOutcome = Continued | Grew | GameOver | BoardFilled
