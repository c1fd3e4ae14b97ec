"""Flow field pathfinding towards a single goal."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

from .config import NavigationConfig
from .errors import InvalidGoalError, InvalidPositionError, NoPathError
from .grid import STILL, UNREACHABLE, Direction, Grid, Position


class FlowFieldNavigator:
    """Computes, for every cell, the step that leads towards the goal."""

    def __init__(self, config: NavigationConfig) -> None:
        config.validate()
        self._config = config
        self._grid = Grid(config.grid_width, config.grid_height)
        self._goal = Position(0, 0)
        self._goal_set = False

    def set_goal(self, goal: Position) -> None:
        """Move the goal and recompute the flow field."""
        if not self._grid.is_valid_position(goal):
            raise InvalidPositionError()
        if not self._grid.is_passable(goal):
            raise InvalidGoalError()
        self._goal = goal
        self._goal_set = True
        self._compute_flow_field()

    def flow_direction(self, pos: Position) -> Direction:
        """Return the step to take from a position towards the goal."""
        if not self._goal_set:
            raise InvalidGoalError()
        if not self._grid.is_valid_position(pos):
            raise InvalidPositionError()
        if pos == self._goal:
            return STILL
        direction = self._grid.flow_field[pos.y][pos.x]
        if direction == STILL:
            raise NoPathError()
        return direction

    def update_costs(self, costs: Sequence[Sequence[int]]) -> None:
        """Replace all cell costs and recompute the flow field if a goal is set."""
        grid = self._grid
        if len(costs) != grid.height:
            raise ValueError("cost grid height doesn't match navigator grid")
        if any(len(row) != grid.width for row in costs):
            raise ValueError("cost grid width doesn't match navigator grid")
        grid.costs = [list(row) for row in costs]

        if self._goal_set:
            if not grid.is_passable(self._goal):
                self._goal_set = False
                raise InvalidGoalError()
            self._compute_flow_field()

    @property
    def goal(self) -> Position:
        """The current goal position."""
        return self._goal

    @property
    def grid(self) -> Grid:
        """A copy of the current grid state."""
        return self._grid.copy()

    def _compute_flow_field(self) -> None:
        grid = self._grid
        goal = self._goal
        directions = self._config.directions

        grid.distances = [[UNREACHABLE] * grid.width for _ in range(grid.height)]
        grid.flow_field = [[STILL] * grid.width for _ in range(grid.height)]
        grid.distances[goal.y][goal.x] = 0

        queue = deque([goal])
        while queue:
            current = queue.popleft()
            current_dist = grid.distances[current.y][current.x]
            for step in directions:
                nxt = Position(current.x + step.x, current.y + step.y)
                if not grid.is_passable(nxt):
                    continue
                move_cost = grid.costs[nxt.y][nxt.x]
                if step.is_diagonal():
                    move_cost = int(move_cost * self._config.diagonal_cost)
                new_dist = current_dist + move_cost
                if new_dist < grid.distances[nxt.y][nxt.x]:
                    grid.distances[nxt.y][nxt.x] = new_dist
                    queue.append(nxt)

        for y in range(grid.height):
            for x in range(grid.width):
                pos = Position(x, y)
                if not grid.is_passable(pos) or pos == goal:
                    continue
                best_dist = grid.distances[y][x]
                best_dir = STILL
                for step in directions:
                    neighbour = Position(x + step.x, y + step.y)
                    if not grid.is_valid_position(neighbour):
                        continue
                    neighbour_dist = grid.distances[neighbour.y][neighbour.x]
                    if neighbour_dist < best_dist:
                        best_dist = neighbour_dist
                        best_dir = step
                grid.flow_field[y][x] = best_dir