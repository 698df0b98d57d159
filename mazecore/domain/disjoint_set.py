"""Union-Find over the cells of a maze grid.

Parent and rank live on the cells themselves; this class only drives them.
Union is by rank. ``find`` compresses one level: the queried cell is pointed
straight at its root, the other cells on the path are left alone.
"""

import logging
from typing import List

from .cell import Cell
from .grid import Grid

logger = logging.getLogger(__name__)


class DisjointSet:
    """Partition of grid cells into connected regions."""

    def __init__(self) -> None:
        self._cells: List[Cell] = []

    @property
    def cells(self) -> List[Cell]:
        """The cells managed since the last ``make_set``."""
        return self._cells

    def __len__(self) -> int:
        return len(self._cells)

    def make_set(self, grid: Grid) -> None:
        """
        Make a singleton set out of each cell in the grid.

        Calling it again resets the partition for a fresh generation run.
        """
        self._cells = []
        for cell in grid:
            cell.set_rank(0)
            cell.set_parent(cell)
            self._cells.append(cell)
        logger.debug("Created %d singleton sets for %dx%d grid", len(self._cells), grid.rows, grid.cols)

    def find(self, cell: Cell) -> Cell:
        """
        Find the root of the set that ``cell`` belongs to.

        Only ``cell`` itself is re-pointed at the root. Rank is never changed.
        """
        current = cell
        parent = current.get_parent()
        while parent is not current:
            current = parent
            parent = current.get_parent()

        # path compression
        cell.set_parent(current)
        return current

    def union(self, cell1: Cell, cell2: Cell) -> None:
        """
        Merge the sets containing ``cell1`` and ``cell2``.

        If both are already in the same set nothing changes. Callers that
        need to know whether a merge happened compare ``find`` results first.
        """
        root1 = self.find(cell1)
        root2 = self.find(cell2)
        if root1 is root2:
            return

        if root1.get_rank() == root2.get_rank():
            root1.set_parent(root2)
            root2.set_rank(root2.get_rank() + 1)
        elif root1.get_rank() > root2.get_rank():
            root2.set_parent(root1)
        else:
            root1.set_parent(root2)

    def connected(self, cell1: Cell, cell2: Cell) -> bool:
        """Check if both cells share a root."""
        return self.find(cell1) is self.find(cell2)

    def set_count(self) -> int:
        """Number of distinct sets among the managed cells."""
        return len({self.find(cell).coord for cell in self._cells})
