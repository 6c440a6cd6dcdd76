"""Translate client input (keys, swipes, JSON intents) into engine calls."""

import logging
from typing import Optional, Union

from .game import Game
from .models import Direction

logger = logging.getLogger(__name__)

RESET = "reset"

KEY_BINDINGS = {
    "w": Direction.UP, "arrowup": Direction.UP,
    "s": Direction.DOWN, "arrowdown": Direction.DOWN,
    "a": Direction.LEFT, "arrowleft": Direction.LEFT,
    "d": Direction.RIGHT, "arrowright": Direction.RIGHT,
    " ": RESET,
}


def command_for_key(key: str) -> Optional[Union[Direction, str]]:
    if not isinstance(key, str):
        return None
    # Space must survive, so only lower-case rather than strip.
    return KEY_BINDINGS.get(key.lower())


def swipe_direction(start, end) -> Optional[Direction]:
    """Map a touch gesture to a direction; ``None`` for a tap with no movement.

    Screen coordinates: y grows downwards, matching the grid.
    """
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    if abs(dx) > abs(dy):
        return Direction.RIGHT if dx > 0 else Direction.LEFT
    if dy > 0:
        return Direction.DOWN
    if dy < 0:
        return Direction.UP
    return None


def apply_intent(game: Game, msg: dict) -> bool:
    """Apply one decoded client message. Returns True if the game state changed."""
    if not isinstance(msg, dict):
        logger.debug("Ignoring non-object message: %r", msg)
        return False

    kind = msg.get("type")
    if kind == "input":
        try:
            return game.request_direction(msg.get("direction"))
        except ValueError:
            logger.debug("Ignoring unknown direction %r", msg.get("direction"))
            return False
    elif kind == "key":
        command = command_for_key(msg.get("key"))
        if command == RESET:
            return game.reset()
        if command is not None:
            return game.request_direction(command)
    elif kind == "swipe":
        try:
            start = (float(msg["start"][0]), float(msg["start"][1]))
            end = (float(msg["end"][0]), float(msg["end"][1]))
        except (KeyError, IndexError, TypeError, ValueError):
            logger.debug("Ignoring malformed swipe: %r", msg)
            return False
        direction = swipe_direction(start, end)
        if direction is None:
            return game.reset()
        return game.request_direction(direction)
    elif kind == "pause":
        game.toggle_pause()
        return True
    elif kind == "toggle_policy":
        game.toggle_policy()
        return True
    elif kind == "reset":
        return game.reset()

    logger.debug("Ignoring message: %r", msg)
    return False
