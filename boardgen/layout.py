"""Square grid helpers shared by the word board and the spymaster key."""

from typing import Any, List, Tuple

from boardgen.errors import CapacityError

Grid = List[List[str]]

EMPTY = ""


def create_empty(size: int) -> Grid:
    """Create a ``size x size`` grid with every cell unfilled."""
    return [[EMPTY for _ in range(size)] for _ in range(size)]


def cell_position(index: int, size: int) -> Tuple[int, int]:
    """Map a row-major cell index to ``(row, col)``."""
    return index // size, index % size


def cell_count(grid: Grid, value: Any) -> int:
    return sum(row.count(value) for row in grid)


def count_empty(grid: Grid) -> int:
    """Number of cells still holding the empty string."""
    return cell_count(grid, EMPTY)


def ensure_capacity(grid: Grid, count: int) -> None:
    """Raise CapacityError if ``count`` cells cannot be filled.

    Args:
        grid: Grid about to receive new tiles
        count: Number of cells the caller wants to fill

    Raises:
        CapacityError: If fewer than ``count`` cells are empty
    """
    available = count_empty(grid)
    if count > available:
        raise CapacityError(requested=count, available=available)
