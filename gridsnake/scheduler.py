"""Fixed-interval tick scheduler fed by host frame deltas."""

import logging
from typing import Callable

from .constants import SLOW_FRAME_MS, SLOW_FRAME_WARN_AT, SPEED_MS

logger = logging.getLogger(__name__)


class Scheduler:
    """
    Accumulates elapsed frame time and fires one tick once it passes ``speed``.

    The accumulator is zeroed after each tick, so any remainder is dropped and
    a long stall still yields a single tick. The tick rate can therefore never
    exceed the frame rate.
    """

    def __init__(
        self,
        tick: Callable[[], object],
        speed: float = SPEED_MS,
        slow_frame_ms: float = SLOW_FRAME_MS,
    ):
        if speed <= 0:
            raise ValueError(f"speed must be positive, got {speed}")
        self.tick = tick
        self.speed = speed
        self.slow_frame_ms = slow_frame_ms
        self.elapsed = 0.0
        self.slow_frames = 0

    def advance(self, delta_ms: float) -> bool:
        if delta_ms < 0:
            raise ValueError(f"frame delta cannot be negative, got {delta_ms}")
        if delta_ms > self.slow_frame_ms:
            self.slow_frames += 1
            if self.slow_frames == SLOW_FRAME_WARN_AT:
                logger.warning(
                    "Frames are running slow (%d frames over %sms); the game may stutter",
                    self.slow_frames, self.slow_frame_ms,
                )

        self.elapsed += delta_ms
        if self.elapsed > self.speed:
            self.tick()
            self.elapsed = 0.0
            return True
        return False

    def reset(self):
        self.elapsed = 0.0
