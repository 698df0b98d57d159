"""Cell graph node: walls, neighbor links, traversal and union-find state.

Each cell lives in a ``Grid`` arena. Neighbor, parent and predecessor links
are stored as ``Coord`` keys and resolved through the owning grid, so a cell
never holds another cell directly.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Optional

from .errors import InvalidNeighborError, NeighborsAlreadySetError, NoNeighborsError
from .types import Coord, Direction

if TYPE_CHECKING:
    from ..utils.rng import SeededRNG
    from .grid import Grid


def _all_walls() -> Dict[Direction, bool]:
    return {direction: True for direction in Direction}


def _no_neighbors() -> Dict[Direction, Optional[Coord]]:
    return {direction: None for direction in Direction}


@dataclass(eq=False)
class Cell:
    """
    A single maze position.

    Walls start up on all four sides. ``visited``/``examined`` and the
    predecessor link belong to whatever traversal the caller runs;
    ``parent``/``rank`` belong to ``DisjointSet`` and should not be touched
    by maze logic directly.
    """
    coord: Coord
    grid: "Grid" = field(repr=False)
    _walls: Dict[Direction, bool] = field(default_factory=_all_walls, init=False, repr=False)
    _neighbors: Dict[Direction, Optional[Coord]] = field(
        default_factory=_no_neighbors, init=False, repr=False
    )
    _linked: bool = field(default=False, init=False, repr=False)
    _visited: bool = field(default=False, init=False, repr=False)
    _examined: bool = field(default=False, init=False, repr=False)
    _pred: Optional[Coord] = field(default=None, init=False, repr=False)
    _parent: Optional[Coord] = field(default=None, init=False, repr=False)
    _rank: int = field(default=0, init=False, repr=False)

    def __post_init__(self):
        """A new cell is a singleton set."""
        self._parent = self.coord

    @property
    def row(self) -> int:
        return self.coord[0]

    @property
    def col(self) -> int:
        return self.coord[1]

    # -- topology ---------------------------------------------------------

    def set_neighbors(self, n: Optional["Cell"], e: Optional["Cell"],
                      s: Optional["Cell"], w: Optional["Cell"]) -> None:
        """
        Install the four neighbor relations. ``None`` marks a grid border.

        Must be called exactly once, before any traversal runs.

        Raises:
            NeighborsAlreadySetError: If neighbors were installed before
            ValueError: If a neighbor is not adjacent on its side
        """
        if self._linked:
            raise NeighborsAlreadySetError(self.coord)

        candidates = {
            Direction.NORTH: n,
            Direction.EAST: e,
            Direction.SOUTH: s,
            Direction.WEST: w,
        }
        for direction, neighbor in candidates.items():
            if neighbor is None:
                continue
            dr, dc = direction.delta
            expected = (self.row + dr, self.col + dc)
            if neighbor.grid is not self.grid or neighbor.coord != expected:
                raise ValueError(
                    f"{direction.value} neighbor of {self.coord} must be {expected}, "
                    f"got {neighbor.coord}"
                )

        for direction, neighbor in candidates.items():
            self._neighbors[direction] = neighbor.coord if neighbor is not None else None
        self._linked = True

    def neighbor(self, direction: Direction) -> Optional["Cell"]:
        """Get the neighbor on one side, or None at the border."""
        coord = self._neighbors[direction]
        if coord is None:
            return None
        return self.grid.get_cell(coord)

    def get_neighbors(self) -> List["Cell"]:
        """Installed neighbors in north, east, south, west order."""
        return [self.grid.get_cell(coord) for coord in self._neighbors.values() if coord is not None]

    def direction_to(self, neighbor: Optional["Cell"]) -> Direction:
        """
        Get the side of this cell that faces ``neighbor``.

        Raises:
            InvalidNeighborError: If ``neighbor`` is not an installed neighbor
        """
        if neighbor is not None and neighbor.grid is self.grid:
            for direction, coord in self._neighbors.items():
                if coord is not None and coord == neighbor.coord:
                    return direction
        raise InvalidNeighborError(self.coord, neighbor.coord if neighbor is not None else None)

    # -- walls ------------------------------------------------------------

    def set_walls(self, north: bool, east: bool, south: bool, west: bool) -> None:
        """Set this cell's wall flags directly. Neighbors are not mirrored."""
        self._walls[Direction.NORTH] = north
        self._walls[Direction.EAST] = east
        self._walls[Direction.SOUTH] = south
        self._walls[Direction.WEST] = west

    def wall(self, direction: Direction) -> bool:
        return self._walls[direction]

    def north(self) -> bool:
        return self._walls[Direction.NORTH]

    def east(self) -> bool:
        return self._walls[Direction.EAST]

    def south(self) -> bool:
        return self._walls[Direction.SOUTH]

    def west(self) -> bool:
        return self._walls[Direction.WEST]

    def has_all_walls(self) -> bool:
        """True if no wall of this cell has been knocked down yet."""
        return all(self._walls.values())

    def wall_bits(self) -> int:
        """Walls as a bitmask: 1=North, 2=East, 4=South, 8=West."""
        return sum(direction.bit for direction, up in self._walls.items() if up)

    def knock_down_wall(self, neighbor: "Cell") -> None:
        """
        Remove the wall between this cell and ``neighbor`` on both sides.

        Args:
            neighbor: One of the cells installed by ``set_neighbors``

        Raises:
            InvalidNeighborError: If ``neighbor`` is not an installed neighbor
        """
        direction = self.direction_to(neighbor)
        self._walls[direction] = False
        neighbor._walls[direction.opposite] = False

    def has_wall_between(self) -> List["Cell"]:
        """Neighbors still separated from this cell by a wall."""
        return [self.grid.get_cell(coord) for direction, coord in self._neighbors.items()
                if coord is not None and self._walls[direction]]

    def possible_path(self) -> List["Cell"]:
        """Neighbors reachable from this cell through an open passage."""
        return [self.grid.get_cell(coord) for direction, coord in self._neighbors.items()
                if coord is not None and not self._walls[direction]]

    # -- random selection -------------------------------------------------

    def get_random_neighbor(self, rng: Optional["SeededRNG"] = None) -> "Cell":
        """
        Pick one neighbor uniformly at random.

        Precondition: the cell has at least one neighbor, which holds on any
        grid with two or more cells along some dimension.

        Raises:
            NoNeighborsError: If the cell has no neighbors
        """
        neighbors = self.get_neighbors()
        if not neighbors:
            raise NoNeighborsError(self.coord)
        return (rng or self.grid.rng).choice(neighbors)

    def neighbor_with_walls(self, rng: Optional["SeededRNG"] = None) -> Optional["Cell"]:
        """Pick a random neighbor that still has all four walls, or None."""
        candidates = [cell for cell in self.get_neighbors() if cell.has_all_walls()]
        if not candidates:
            return None
        return (rng or self.grid.rng).choice(candidates)

    # -- traversal flags --------------------------------------------------

    def visit(self) -> None:
        self._visited = True

    def visited(self) -> bool:
        return self._visited

    def examine(self) -> None:
        self._examined = True

    def un_examine(self) -> None:
        self._examined = False

    def examined(self) -> bool:
        return self._examined

    def get_pred(self) -> Optional["Cell"]:
        """The cell this one was reached from, if any."""
        if self._pred is None:
            return None
        return self.grid.get_cell(self._pred)

    def set_pred(self, pred: Optional["Cell"]) -> None:
        self._pred = self._key_of(pred) if pred is not None else None

    def reset_traversal(self) -> None:
        """Clear visited, examined and predecessor; walls are untouched."""
        self._visited = False
        self._examined = False
        self._pred = None

    # -- union-find storage -----------------------------------------------

    def get_parent(self) -> "Cell":
        return self.grid.get_cell(self._parent)

    def set_parent(self, parent: "Cell") -> None:
        self._parent = self._key_of(parent)

    def get_rank(self) -> int:
        return self._rank

    def set_rank(self, rank: int) -> None:
        self._rank = rank

    def _key_of(self, other: "Cell") -> Coord:
        if other.grid is not self.grid:
            raise ValueError(f"Cell {other.coord} belongs to a different grid than {self.coord}")
        return other.coord
