"""Grid coordinate model and border policies."""

from dataclasses import dataclass, replace
from typing import Iterator

from .models import BorderPolicy, Cell, Direction, WallCollision


@dataclass(frozen=True)
class Grid:
    width: int
    height: int
    policy: BorderPolicy = BorderPolicy.WRAP

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(f"grid must be at least 1x1, got {self.width}x{self.height}")

    @property
    def size(self) -> int:
        return self.width * self.height

    @property
    def center(self) -> Cell:
        # Rounds half up like the browser game did, so 20x20 starts at (10, 10).
        x = min(int(self.width * 0.5 + 0.5), self.width - 1)
        y = min(int(self.height * 0.5 + 0.5), self.height - 1)
        return (x, y)

    def contains(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def normalize(self, cell: Cell) -> Cell:
        """Bring ``cell`` onto the grid according to the border policy.

        Under ``WRAP`` each axis is taken modulo its extent and this never
        fails. Under ``WALL`` an out-of-bounds cell raises ``WallCollision``.
        """
        if self.policy is BorderPolicy.WRAP:
            return (cell[0] % self.width, cell[1] % self.height)
        if not self.contains(cell):
            raise WallCollision(cell)
        return cell

    def neighbor(self, cell: Cell, direction: Direction) -> Cell:
        dx, dy = direction.delta
        x, y = cell[0] + dx, cell[1] + dy
        if self.policy is BorderPolicy.WRAP:
            return (x % self.width, y % self.height)
        return (x, y)

    def cells(self) -> Iterator[Cell]:
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def with_policy(self, policy: BorderPolicy) -> "Grid":
        return replace(self, policy=policy)
