"""Runtime settings, read from the environment (and a local .env file)."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from .constants import DEFAULT_POLICY, FRAME_RATE, GRID_H, GRID_W, HOST, PORT, SPEED_MS
from .models import BorderPolicy


@dataclass
class Settings:
    grid_w: int = GRID_W
    grid_h: int = GRID_H
    speed_ms: float = SPEED_MS
    frame_rate: int = FRAME_RATE
    policy: BorderPolicy = BorderPolicy(DEFAULT_POLICY)
    host: str = HOST
    port: int = PORT
    log_level: str = "INFO"
    seed: Optional[int] = None


def _env_int(name: str, default: int, minimum: int = 1) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


def load_settings(env_file=None) -> Settings:
    """Build settings from SNAKE_* variables; a .env file only fills in unset ones."""
    load_dotenv(env_file or find_dotenv(usecwd=True))

    policy_raw = os.getenv("SNAKE_POLICY", DEFAULT_POLICY).strip().lower()
    try:
        policy = BorderPolicy(policy_raw)
    except ValueError:
        raise ValueError(f"SNAKE_POLICY must be 'wrap' or 'wall', got {policy_raw!r}") from None

    seed_raw = os.getenv("SNAKE_SEED")
    seed = _env_int("SNAKE_SEED", 0, minimum=0) if seed_raw else None

    return Settings(
        grid_w=_env_int("SNAKE_GRID_W", GRID_W),
        grid_h=_env_int("SNAKE_GRID_H", GRID_H),
        speed_ms=_env_int("SNAKE_SPEED_MS", SPEED_MS),
        frame_rate=_env_int("SNAKE_FRAME_RATE", FRAME_RATE),
        policy=policy,
        host=os.getenv("SNAKE_HOST", HOST),
        port=_env_int("SNAKE_PORT", PORT),
        log_level=os.getenv("SNAKE_LOG_LEVEL", "INFO").upper(),
        seed=seed,
    )
