"""WebSocket connection management and state serialization."""

import json
import logging

from fastapi import WebSocket

from .constants import VERSION
from .game import Game

logger = logging.getLogger(__name__)


class ConnectionManager:
    def __init__(self):
        self.connections: set[WebSocket] = set()

    async def connect(self, ws: WebSocket):
        await ws.accept()
        self.connections.add(ws)

    def disconnect(self, ws: WebSocket):
        self.connections.discard(ws)

    async def broadcast(self, message: str):
        disconnected = []
        for ws in list(self.connections):
            try:
                await ws.send_text(message)
            except Exception:
                logger.debug("Dropping socket after failed send", exc_info=True)
                disconnected.append(ws)
        for ws in disconnected:
            self.connections.discard(ws)

    async def send_personal(self, ws: WebSocket, message: str):
        await ws.send_text(message)


def segment_scales(length: int) -> list[float]:
    """Draw scale per segment: full-size head, tail tapering towards half size."""
    scales = []
    for i in range(length):
        if i == 0:
            scales.append(1.0)
        else:
            percentage = (length - i) / (length * 1.1)
            scales.append(round(percentage * 0.5 + 0.5, 4))
    return scales


def cell_to_list(cell):
    return [cell[0], cell[1]] if cell is not None else None


def build_state_msg(game: Game) -> str:
    segments = game.body_cells()
    return json.dumps({
        "type": "state",
        "segments": [cell_to_list(c) for c in segments],
        "food": cell_to_list(game.food_cell()),
        "status": game.status.value,
        "policy": game.policy.value,
        "direction": game.direction.value,
        "score": game.score,
        "reason": game.reason.value if game.reason else None,
        "won": game.won,
        "grid": [game.width, game.height],
        "speed": game.speed,
        "scales": segment_scales(len(segments)),
    })


def build_welcome_msg(game: Game) -> str:
    return json.dumps({
        "type": "welcome",
        "grid": [game.width, game.height],
        "version": VERSION,
    })
