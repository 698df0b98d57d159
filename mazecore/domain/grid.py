"""The grid arena that owns every cell of a maze."""

from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

import numpy as np

from ..utils.rng import SeededRNG
from .cell import Cell
from .types import Coord, Direction


@dataclass
class Grid:
    """Rows x cols cells, addressed by (row, col), with one shared RNG."""
    rows: int
    cols: int
    rng: SeededRNG = field(repr=False)
    cells: List[List[Cell]] = field(default_factory=list, repr=False)

    def is_valid_coord(self, coord: Coord) -> bool:
        """Check if coordinate is within grid bounds."""
        row, col = coord
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get_cell(self, coord: Coord) -> Cell:
        """
        Get the cell at ``coord``.

        Raises:
            ValueError: If the coordinate is out of bounds
        """
        if not self.is_valid_coord(coord):
            raise ValueError(f"Coordinate {coord} is outside the {self.rows}x{self.cols} grid")
        return self.cells[coord[0]][coord[1]]

    def __getitem__(self, coord: Coord) -> Cell:
        return self.get_cell(coord)

    def __iter__(self) -> Iterator[Cell]:
        """Cells in row-major order."""
        for row in self.cells:
            yield from row

    def __len__(self) -> int:
        return self.rows * self.cols

    def candidate_edges(self) -> List[Tuple[Cell, Cell]]:
        """Every adjacent pair still separated by a wall, each pair listed once."""
        edges = []
        for cell in self:
            for direction in (Direction.EAST, Direction.SOUTH):
                neighbor = cell.neighbor(direction)
                if neighbor is not None and cell.wall(direction):
                    edges.append((cell, neighbor))
        return edges

    def open_passages(self) -> int:
        """Number of knocked-down walls between cells."""
        count = 0
        for cell in self:
            for direction in (Direction.EAST, Direction.SOUTH):
                if cell.neighbor(direction) is not None and not cell.wall(direction):
                    count += 1
        return count

    def wall_mask(self) -> np.ndarray:
        """Wall bits of every cell as a rows x cols uint8 array."""
        mask = np.zeros((self.rows, self.cols), dtype=np.uint8)
        for cell in self:
            mask[cell.row, cell.col] = cell.wall_bits()
        return mask

    def reset_traversal(self):
        """Clear visited/examined flags and predecessors on every cell."""
        for cell in self:
            cell.reset_traversal()
