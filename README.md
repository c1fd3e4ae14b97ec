# flowfield

Flow field pathfinding on a grid, with a small tower-defense style
simulation on top of it.

A flow field computes, once per goal, the best direction to move from every
cell of the grid. Any number of agents can then follow it cheaply.

## Modules

- `flowfield.grid`: `Position`, `Direction`, `CellType` and `Grid`, which
  holds movement costs, distances and flow directions. A cost of `-1` marks
  an impassable cell. `FOUR_WAY_DIRECTIONS` and `EIGHT_WAY_DIRECTIONS` hold
  the standard step sets.
- `flowfield.config`: `NavigationConfig` (grid size, directions, diagonal
  cost) with `validate()`, which raises `ValueError` for unusable settings,
  and `eight_way_config(width, height)`, which uses eight directions and a
  diagonal cost of 1.4.
- `flowfield.navigator`: `FlowFieldNavigator`. `set_goal` recomputes the
  field. `update_costs` replaces every cell cost and recomputes the field when
  a goal is set. `goal` gives the current goal. `grid` gives a copy of the grid.
- `flowfield.enemies`: `EnemySystem`, a crowd of enemies that follow the
  field while keeping apart, aligning, grouping and steering clear of blocked
  cells. `spawn(count)` places enemies in the bottom three rows. An enemy
  that reaches the goal cell is moved back to a random cell there.
  `SystemConfig` and `default_config()` hold the layout and steering
  parameters.
- `flowfield.turrets`: `Turret` and `TurretSystem`. `enemies_in_range(turret)`
  returns the enemies within a turret's attack range. `update()` prints
  `ENEMY IN RANGE` for each turret and enemy pair it finds and returns those
  pairs.
- `flowfield.buildings`: `BuildingSystem.place_building(grid_x, grid_y)`
  places a turret on a free, passable cell, blocks that cell in the navigator
  and returns whether it placed one.
- `flowfield.errors`: `NavigationError` and its subclasses
  `InvalidPositionError`, `InvalidCostError`, `NoPathError`,
  `InvalidGoalError`, `EmptyGridError` and `InvalidDirectionError`.
- `flowfield.app`: the interactive visualization. It also has the helpers
  `setup_obstacles`, `screen_to_grid`, `arrow_points` and `draw_flow_field`.

## Installation

```
pip install .
```

## Running the visualization

```
flowfield
```

A window opens with a 10×10 grid, a 3×3 wall in the middle and one hundred
enemies heading for the goal at cell (7, 2). Each open cell shows an arrow
for its flow direction. A cell with no route to the goal shows a grey dot.

- Left click on a cell to move the goal there. Clicks on walls or outside
  the grid are ignored.
- Press the space bar to place a turret on the cell under the mouse pointer.
  The turret blocks the cell, and the flow field is recomputed around it.
  A turret placed on the goal cell leaves the navigator without a goal, and
  the enemies stop receiving flow directions.

## Using the navigator

```python
from flowfield.config import eight_way_config
from flowfield.grid import Position
from flowfield.navigator import FlowFieldNavigator

navigator = FlowFieldNavigator(eight_way_config(10, 10))
navigator.set_goal(Position(7, 2))

step = navigator.flow_direction(Position(0, 9))
print(step.x, step.y)
```

`flow_direction` raises:

- `InvalidGoalError` before a goal is set.
- `InvalidPositionError` for a position outside the grid.
- `NoPathError` for a cell that cannot reach the goal.

At the goal itself it returns `Direction(0, 0)`.

## What it does not do

Turrets only detect enemies in range. They do not fire, deal damage or
remove enemies. There is no score, no waves and no end to a game.

## Tests

```
pip install .[test]
pytest
```