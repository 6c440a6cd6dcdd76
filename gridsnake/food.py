"""Food placement by rejection sampling."""

import random
from typing import Collection

from .grid import Grid
from .models import Cell, Exhausted


def place(grid: Grid, occupied: Collection[Cell], rng=random) -> Cell:
    """Pick a uniformly random free cell.

    Raises ``Exhausted`` up front when ``occupied`` already covers the grid,
    so the sampling loop below always has a free cell to find.
    """
    taken = set(occupied)
    if sum(1 for cell in taken if grid.contains(cell)) >= grid.size:
        raise Exhausted()

    while True:
        x = rng.randrange(grid.width)
        y = rng.randrange(grid.height)
        if (x, y) not in taken:
            return (x, y)
