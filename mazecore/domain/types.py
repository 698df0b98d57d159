"""Core type definitions for the maze cell graph."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

# Coordinate type for grid positions: (row, col)
Coord = Tuple[int, int]


class Direction(Enum):
    """The four sides of a cell, in canonical order."""
    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"

    @property
    def delta(self) -> Tuple[int, int]:
        """(row, col) offset of the neighbor on this side."""
        return _DELTAS[self]

    @property
    def opposite(self) -> "Direction":
        """The side a neighbor uses to face back at this one."""
        return _OPPOSITES[self]

    @property
    def bit(self) -> int:
        """Wall bit value: 1=North, 2=East, 4=South, 8=West."""
        return _BITS[self]


_DELTAS = {
    Direction.NORTH: (-1, 0),
    Direction.EAST: (0, 1),
    Direction.SOUTH: (1, 0),
    Direction.WEST: (0, -1),
}

_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.EAST: Direction.WEST,
    Direction.SOUTH: Direction.NORTH,
    Direction.WEST: Direction.EAST,
}

_BITS = {
    Direction.NORTH: 1,
    Direction.EAST: 2,
    Direction.SOUTH: 4,
    Direction.WEST: 8,
}


@dataclass
class GridConfig:
    """Configuration for building a maze grid."""
    rows: int = 10
    cols: int = 10
    seed: Optional[int] = None

    def __post_init__(self):
        """Reject empty grids."""
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {self.rows}x{self.cols}")

    @property
    def cell_count(self) -> int:
        """Total number of cells in the grid."""
        return self.rows * self.cols
