"""
Grid snake engine.

The simulation core (grid, body, food, rules, game, scheduler) has no
knowledge of rendering or input devices; ``main`` hosts it behind a
FastAPI WebSocket endpoint.
"""

from .body import Body
from .game import Game
from .grid import Grid
from .models import (
    BoardFilled, BorderPolicy, Continued, Direction, Exhausted, GameOver,
    GameOverReason, GameStatus, Grew, SelfCollision, SnakeError, WallCollision,
)
from .scheduler import Scheduler

__all__ = [
    'Body', 'Game', 'Grid', 'Scheduler',
    'BorderPolicy', 'Direction', 'GameStatus', 'GameOverReason',
    'Continued', 'Grew', 'GameOver', 'BoardFilled',
    'SnakeError', 'WallCollision', 'SelfCollision', 'Exhausted',
]
