"""Game constants."""

VERSION = "1.0.0"

GRID_W, GRID_H = 20, 20
SPEED_MS = 100
FRAME_RATE = 60
SLOW_FRAME_MS = 20
SLOW_FRAME_WARN_AT = 50
DEFAULT_POLICY = "wrap"

HOST, PORT = "0.0.0.0", 8765

DIRECTIONS = {
    "up": (0, -1),
    "down": (0, 1),
    "left": (-1, 0),
    "right": (1, 0),
}
OPPOSITES = {"up": "down", "down": "up", "left": "right", "right": "left"}
