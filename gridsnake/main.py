"""FastAPI application — HTTP routes, WebSocket endpoint, frame loop."""

import asyncio
import json
import logging
import os
import random
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, WebSocket, WebSocketDisconnect
from fastapi.responses import FileResponse

from .config import Settings, load_settings
from .connection_manager import ConnectionManager, build_state_msg, build_welcome_msg
from .controls import apply_intent
from .game import Game
from .models import GameOver, TickOutcome

logger = logging.getLogger(__name__)

HTML_PATH = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "index.html")


def build_game(settings: Settings) -> Game:
    rng = random.Random(settings.seed) if settings.seed is not None else None
    return Game(
        width=settings.grid_w,
        height=settings.grid_h,
        policy=settings.policy,
        speed=settings.speed_ms,
        rng=rng,
    )


def log_outcome(outcome: TickOutcome):
    if isinstance(outcome, GameOver):
        logger.info("Snake died (%s) at length %d", outcome.reason.value, len(outcome.cells))
    elif outcome.fatal:
        logger.info("Board filled at length %d", len(outcome.cells))


async def game_loop(game: Game, manager: ConnectionManager, frame_rate: int):
    """Feed real elapsed time into the engine once per frame and push state on ticks."""
    frame = 1 / frame_rate
    last = time.perf_counter()
    while True:
        await asyncio.sleep(frame)
        now = time.perf_counter()
        delta_ms = (now - last) * 1000
        last = now
        try:
            if game.advance_frame(delta_ms):
                await manager.broadcast(build_state_msg(game))
        except Exception:
            logger.exception("Frame loop error")


def create_app(
    settings: Optional[Settings] = None,
    game: Optional[Game] = None,
    run_loop: bool = True,
) -> FastAPI:
    settings = settings or load_settings()
    game = game or build_game(settings)
    manager = ConnectionManager()
    game.add_listener(log_outcome)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        task = None
        if run_loop:
            task = asyncio.create_task(game_loop(game, manager, settings.frame_rate))
        yield
        if task is not None:
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass

    app = FastAPI(lifespan=lifespan)
    app.state.game = game
    app.state.manager = manager

    @app.get("/")
    async def serve_index():
        return FileResponse(HTML_PATH, media_type="text/html")

    @app.get("/health")
    async def health():
        return {"status": "ok", "game": game.status.value}

    @app.websocket("/ws")
    async def websocket_endpoint(ws: WebSocket):
        await manager.connect(ws)
        try:
            await manager.send_personal(ws, build_welcome_msg(game))
            await manager.send_personal(ws, build_state_msg(game))
            while True:
                raw = await ws.receive_text()
                try:
                    msg = json.loads(raw)
                except json.JSONDecodeError:
                    logger.warning("Ignoring malformed frame: %.80r", raw)
                    continue
                if apply_intent(game, msg):
                    await manager.broadcast(build_state_msg(game))
        except WebSocketDisconnect:
            pass
        finally:
            manager.disconnect(ws)

    return app


def run():
    import uvicorn

    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    app = create_app(settings)
    logger.info("Snake server starting on http://%s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
