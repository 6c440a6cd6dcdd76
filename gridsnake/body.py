"""The snake body: ordered cells, head first, plus the current heading."""

from collections import deque
from typing import Iterable

from .grid import Grid
from .models import Cell, Direction


class Body:
    """
    Ordered sequence of occupied cells.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
        direction: heading used by the next ``advance``
    """

    def __init__(self, positions: Iterable[Cell], direction: Direction = Direction.UP):
        self.positions: deque[Cell] = deque(tuple(p) for p in positions)
        if not self.positions:
            raise ValueError("a body needs at least one cell")
        self.direction = direction

    def __len__(self) -> int:
        return len(self.positions)

    def __repr__(self):
        return f"<Body len={len(self)} head={self.head} direction={self.direction.value}>"

    @property
    def head(self) -> Cell:
        return self.positions[0]

    @property
    def tail(self) -> Cell:
        return self.positions[-1]

    @property
    def cells(self) -> tuple[Cell, ...]:
        return tuple(self.positions)

    def occupied(self) -> set[Cell]:
        return set(self.positions)

    def set_direction(self, direction: Direction, grid: Grid) -> bool:
        """Turn the head, unless the turn is redundant or would run into the neck.

        Returns True when the heading changed.
        """
        if direction is self.direction:
            return False
        if len(self.positions) > 1 and grid.neighbor(self.head, direction) == self.positions[1]:
            return False
        self.direction = direction
        return True

    def snapshot(self) -> tuple[Cell, ...]:
        return tuple(self.positions)

    def advance(self, grid: Grid) -> tuple[Cell, ...]:
        """Move one step and return the pre-move snapshot.

        Raises ``WallCollision`` (from the grid) before touching any segment.
        """
        previous = self.snapshot()
        dx, dy = self.direction.delta
        hx, hy = self.head
        new_head = grid.normalize((hx + dx, hy + dy))
        # Every segment follows the one ahead: drop the tail, push the new head.
        self.positions.appendleft(new_head)
        self.positions.pop()
        return previous

    def grow(self, at_cell: Cell):
        self.positions.append(tuple(at_cell))

    def self_collides(self) -> bool:
        head = self.positions[0]
        return any(cell == head for cell in list(self.positions)[1:])

    def restore(self, snapshot: Iterable[Cell]):
        cells = [tuple(c) for c in snapshot]
        if len(cells) != len(self.positions):
            raise ValueError(
                f"snapshot has {len(cells)} cells but the body has {len(self.positions)}"
            )
        self.positions = deque(cells)
