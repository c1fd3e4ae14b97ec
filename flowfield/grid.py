"""Grid cells, positions and directions used for navigation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .errors import InvalidCostError, InvalidPositionError

OBSTACLE_COST = -1
UNREACHABLE = 2**31 - 1


@dataclass(frozen=True)
class Position:
    """A cell coordinate on the grid."""

    x: int
    y: int


@dataclass(frozen=True)
class Direction:
    """A unit step between neighbouring cells."""

    x: int = 0
    y: int = 0

    def is_diagonal(self) -> bool:
        """Return True when the step moves along both axes."""
        return self.x != 0 and self.y != 0


STILL = Direction(0, 0)


class CellType(IntEnum):
    """What occupies a grid cell."""

    PASSABLE = 0
    OBSTACLE = 1
    GOAL = 2
    BUILDING = 3


FOUR_WAY_DIRECTIONS = (
    Direction(0, -1),
    Direction(0, 1),
    Direction(-1, 0),
    Direction(1, 0),
)

EIGHT_WAY_DIRECTIONS = FOUR_WAY_DIRECTIONS + (
    Direction(-1, -1),
    Direction(-1, 1),
    Direction(1, -1),
    Direction(1, 1),
)


class Grid:
    """Movement costs, distances and flow directions for every cell.

    A cost of ``OBSTACLE_COST`` marks a blocked cell.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.costs = [[1] * width for _ in range(height)]
        self.flow_field = [[STILL] * width for _ in range(height)]
        self.distances = [[0] * width for _ in range(height)]
        self.cell_types = [[CellType.PASSABLE] * width for _ in range(height)]

    def is_valid_position(self, pos: Position) -> bool:
        """Return True when the position lies inside the grid."""
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def is_passable(self, pos: Position) -> bool:
        """Return True when the position is inside the grid and not blocked."""
        return self.is_valid_position(pos) and self.costs[pos.y][pos.x] != OBSTACLE_COST

    def _require_valid(self, pos: Position) -> None:
        if not self.is_valid_position(pos):
            raise InvalidPositionError()

    def set_obstacle(self, pos: Position) -> None:
        """Block a cell as an obstacle."""
        self._require_valid(pos)
        self.costs[pos.y][pos.x] = OBSTACLE_COST
        self.cell_types[pos.y][pos.x] = CellType.OBSTACLE

    def set_building(self, pos: Position) -> None:
        """Block a cell with a building."""
        self._require_valid(pos)
        self.costs[pos.y][pos.x] = OBSTACLE_COST
        self.cell_types[pos.y][pos.x] = CellType.BUILDING

    def set_cost(self, pos: Position, cost: int) -> None:
        """Set the movement cost of entering a cell."""
        self._require_valid(pos)
        if cost < 0:
            raise InvalidCostError()
        self.costs[pos.y][pos.x] = cost

    def flow_direction(self, pos: Position) -> Direction:
        """Return the stored flow direction of a cell."""
        self._require_valid(pos)
        return self.flow_field[pos.y][pos.x]

    def copy(self) -> Grid:
        """Return an independent copy of the grid."""
        clone = Grid(self.width, self.height)
        clone.costs = [list(row) for row in self.costs]
        clone.flow_field = [list(row) for row in self.flow_field]
        clone.distances = [list(row) for row in self.distances]
        clone.cell_types = [list(row) for row in self.cell_types]
        return clone