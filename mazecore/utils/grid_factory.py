"""Grid factory for creating and resetting maze grids."""

import logging
from typing import Optional

from ..domain.cell import Cell
from ..domain.grid import Grid
from ..domain.types import Direction, GridConfig
from .rng import SeededRNG, default_rng

logger = logging.getLogger(__name__)


def create_grid(rows: int, cols: int, rng: Optional[SeededRNG] = None) -> Grid:
    """
    Create a fully linked grid with every wall up.

    Args:
        rows: Number of rows (must be > 0)
        cols: Number of columns (must be > 0)
        rng: Random source shared by every cell (uses default if None)

    Returns:
        New Grid instance; disjoint sets are not initialized

    Raises:
        ValueError: If rows or cols <= 0
    """
    if rows <= 0 or cols <= 0:
        raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")

    if rng is None:
        rng = default_rng

    grid = Grid(rows=rows, cols=cols, rng=rng)
    grid.cells = [[Cell(coord=(row, col), grid=grid) for col in range(cols)] for row in range(rows)]

    for cell in grid:
        linked = []
        for direction in Direction:
            dr, dc = direction.delta
            coord = (cell.row + dr, cell.col + dc)
            linked.append(grid.get_cell(coord) if grid.is_valid_coord(coord) else None)
        cell.set_neighbors(*linked)

    logger.debug("Built %dx%d grid (seed=%s)", rows, cols, rng.seed)
    return grid


def create_grid_from_config(config: GridConfig) -> Grid:
    """Create a grid with its own RNG seeded from the config."""
    return create_grid(config.rows, config.cols, SeededRNG(config.seed))


def reset_grid(grid: Grid, preserve_walls: bool = False) -> None:
    """
    Reset a grid for another generation run.

    Args:
        grid: Grid to reset
        preserve_walls: If True, keep the current wall layout
    """
    grid.reset_traversal()
    if not preserve_walls:
        for cell in grid:
            cell.set_walls(True, True, True, True)
    logger.debug("Reset %dx%d grid (preserve_walls=%s)", grid.rows, grid.cols, preserve_walls)
