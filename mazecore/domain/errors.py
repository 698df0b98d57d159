"""Exceptions raised by the maze core."""

from typing import Optional
from .types import Coord


class MazeError(Exception):
    """Base class for all maze core errors."""


class InvalidNeighborError(MazeError, ValueError):
    """A wall was addressed through a cell that is not an installed neighbor."""

    def __init__(self, cell: Coord, neighbor: Optional[Coord]):
        self.cell = cell
        self.neighbor = neighbor
        super().__init__(f"Cell {neighbor} is not a neighbor of cell {cell}")


class NoNeighborsError(MazeError, IndexError):
    """Random neighbor selection on a cell with no neighbors."""

    def __init__(self, cell: Coord):
        self.cell = cell
        super().__init__(f"Cell {cell} has no neighbors to choose from")


class NeighborsAlreadySetError(MazeError, RuntimeError):
    """Neighbor relations are installed once, at grid construction."""

    def __init__(self, cell: Coord):
        self.cell = cell
        super().__init__(f"Neighbors of cell {cell} are already set")
