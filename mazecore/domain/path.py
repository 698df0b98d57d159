"""Path reconstruction and direction utilities over predecessor links."""

from typing import List

from .cell import Cell
from .errors import MazeError
from .types import Coord, Direction


def reconstruct_path(end: Cell) -> List[Cell]:
    """
    Reconstruct the path ending at ``end`` by following predecessor links.
    Returns the path from start to end (reversed from the predecessor chain).

    Raises:
        MazeError: If the predecessor chain loops
    """
    path = []
    seen = set()
    current = end

    while current is not None:
        if current.coord in seen:
            raise MazeError(f"Predecessor chain from {end.coord} loops at {current.coord}")
        seen.add(current.coord)
        path.append(current)
        current = current.get_pred()

    return list(reversed(path))


def path_coords(path: List[Cell]) -> List[Coord]:
    """Coordinates of each cell along a path."""
    return [cell.coord for cell in path]


def path_directions(path: List[Cell]) -> List[Direction]:
    """
    Get the direction of each step along a path.

    Raises:
        InvalidNeighborError: If two consecutive cells are not neighbors
    """
    if len(path) < 2:
        return []

    return [path[i - 1].direction_to(path[i]) for i in range(1, len(path))]
