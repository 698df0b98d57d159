"""Maze Core - cell graph and union-find primitives for maze generation.

This package provides a rectangular grid of linked cells with mutable wall
state and traversal bookkeeping, plus a disjoint-set structure over those
cells, the building blocks for randomized Kruskal and depth-first
backtracker maze generators.
"""

from .domain.cell import Cell
from .domain.disjoint_set import DisjointSet
from .domain.errors import (
    InvalidNeighborError,
    MazeError,
    NeighborsAlreadySetError,
    NoNeighborsError,
)
from .domain.grid import Grid
from .domain.types import Coord, Direction, GridConfig
from .utils.grid_factory import create_grid, create_grid_from_config, reset_grid
from .utils.rng import SeededRNG, default_rng

__version__ = "1.0.0"

__all__ = [
    "Cell",
    "Coord",
    "Direction",
    "DisjointSet",
    "Grid",
    "GridConfig",
    "InvalidNeighborError",
    "MazeError",
    "NeighborsAlreadySetError",
    "NoNeighborsError",
    "SeededRNG",
    "create_grid",
    "create_grid_from_config",
    "default_rng",
    "reset_grid",
]
