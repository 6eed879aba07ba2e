"""Random tile placement onto a square grid."""

import logging
import random
from typing import Optional

from boardgen.layout import EMPTY, Grid, cell_position, ensure_capacity

logger = logging.getLogger(__name__)


def assign(grid: Grid, marker: str, count: int, rng: Optional[random.Random] = None) -> None:
    """Place ``count`` copies of ``marker`` into empty cells chosen at random.

    Cells are drawn uniformly from the whole grid and a draw that lands on a
    filled cell is thrown away, so the number of draws varies from call to
    call. Filled cells are never overwritten.

    Args:
        grid: Grid to fill in place
        marker: Value written into each chosen cell
        count: Number of cells to fill
        rng: Source of randomness (defaults to the ``random`` module)

    Raises:
        CapacityError: If the grid has fewer than ``count`` empty cells.
            The grid is left untouched.
    """
    ensure_capacity(grid, count)
    rng = rng or random

    size = len(grid)
    placed = 0
    draws = 0
    while placed < count:
        draws += 1
        row, col = cell_position(rng.randrange(size * size), size)
        if grid[row][col] == EMPTY:
            grid[row][col] = marker
            placed += 1

    logger.debug(f"Placed {count} x {marker!r} in {draws} draws")
