"""Enemy agents that steer along the flow field towards the goal."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field

import pygame

from .errors import NavigationError
from .grid import OBSTACLE_COST, Grid, Position
from .navigator import FlowFieldNavigator

RED = (230, 41, 55)
BLACK = (0, 0, 0)

FLOW_WEIGHT = 5.0
SEPARATION_WEIGHT = 0.5
ALIGNMENT_WEIGHT = 0.2
COHESION_WEIGHT = 0.1
AVOIDANCE_WEIGHT = 10.0
FLOW_STRENGTH = 0.8
AVOIDANCE_RADIUS_CELLS = 1.5
SPAWN_JITTER = 10


@dataclass
class Vec2:
    """A mutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def length(self) -> float:
        """Return the Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def distance(self, other: Vec2) -> float:
        """Return the Euclidean distance to another vector."""
        return math.hypot(self.x - other.x, self.y - other.y)


@dataclass
class SystemConfig:
    """Screen layout and steering parameters shared by the game systems."""

    width: int = 10
    height: int = 10
    cell_size: int = 50
    margin_x: int = 30
    margin_y: int = 30
    unit_speed: float = 2.0
    separation_radius: float = 15.0
    separation_force: float = 2.0
    alignment_radius: float = 25.0
    alignment_force: float = 0.3
    cohesion_radius: float = 35.0
    cohesion_force: float = 0.2
    max_steer_force: float = 0.8


def default_config() -> SystemConfig:
    """Return the default layout and steering parameters."""
    return SystemConfig()


@dataclass
class Enemy:
    """An agent moving in pixel space while following the flow field."""

    position: Vec2 = field(default_factory=Vec2)
    velocity: Vec2 = field(default_factory=Vec2)
    grid_pos: Vec2 = field(default_factory=Vec2)
    target_pos: Vec2 = field(default_factory=Vec2)
    moving: bool = False
    radius: float = 4.0


class EnemySystem:
    """Owns every enemy and moves them with flocking and flow-field forces."""

    def __init__(
        self,
        navigator: FlowFieldNavigator,
        config: SystemConfig,
        rng: random.Random | None = None,
    ) -> None:
        self._navigator = navigator
        self._config = config
        self._rng = rng if rng is not None else random.Random()
        self._enemies: list[Enemy] = []

    @property
    def enemies(self) -> list[Enemy]:
        """The live list of enemies."""
        return self._enemies

    def _random_spawn_cell(self) -> tuple[int, int]:
        cfg = self._config
        return (
            self._rng.randint(0, cfg.width - 1),
            self._rng.randint(cfg.height - 3, cfg.height - 1),
        )

    def _cell_centre(self, cell_x: float, cell_y: float) -> Vec2:
        cfg = self._config
        return Vec2(
            cfg.margin_x + cell_x * cfg.cell_size + cfg.cell_size / 2,
            cfg.margin_y + cell_y * cfg.cell_size + cfg.cell_size / 2,
        )

    def spawn(self, count: int) -> None:
        """Add enemies at random cells in the bottom three rows."""
        for _ in range(count):
            start_x, start_y = self._random_spawn_cell()
            position = self._cell_centre(start_x, start_y)
            position.x += self._rng.randint(-SPAWN_JITTER, SPAWN_JITTER)
            position.y += self._rng.randint(-SPAWN_JITTER, SPAWN_JITTER)
            self._enemies.append(
                Enemy(
                    position=position,
                    grid_pos=Vec2(float(start_x), float(start_y)),
                    target_pos=Vec2(position.x, position.y),
                )
            )

    def update(self) -> None:
        """Advance every enemy by one step."""
        cfg = self._config
        grid = self._navigator.grid
        goal = self._navigator.goal

        for enemy in self._enemies:
            separation = self._separation(enemy)
            alignment = self._alignment(enemy)
            cohesion = self._cohesion(enemy)
            avoidance = self._obstacle_avoidance(enemy, grid)
            flow = self._flow_force(enemy)

            total_x = (
                flow.x * FLOW_WEIGHT
                + separation.x * SEPARATION_WEIGHT
                + alignment.x * ALIGNMENT_WEIGHT
                + cohesion.x * COHESION_WEIGHT
                + avoidance.x * AVOIDANCE_WEIGHT
            )
            total_y = (
                flow.y * FLOW_WEIGHT
                + separation.y * SEPARATION_WEIGHT
                + alignment.y * ALIGNMENT_WEIGHT
                + cohesion.y * COHESION_WEIGHT
                + avoidance.y * AVOIDANCE_WEIGHT
            )

            enemy.velocity.x += total_x * cfg.max_steer_force
            enemy.velocity.y += total_y * cfg.max_steer_force

            speed = enemy.velocity.length()
            if speed > cfg.unit_speed:
                enemy.velocity.x = enemy.velocity.x / speed * cfg.unit_speed
                enemy.velocity.y = enemy.velocity.y / speed * cfg.unit_speed

            enemy.position.x += enemy.velocity.x
            enemy.position.y += enemy.velocity.y

            enemy.grid_pos = Vec2(
                (enemy.position.x - cfg.margin_x - cfg.cell_size / 2) / cfg.cell_size,
                (enemy.position.y - cfg.margin_y - cfg.cell_size / 2) / cfg.cell_size,
            )

            if int(enemy.grid_pos.x) == goal.x and int(enemy.grid_pos.y) == goal.y:
                start_x, start_y = self._random_spawn_cell()
                enemy.grid_pos = Vec2(float(start_x), float(start_y))
                enemy.position = self._cell_centre(start_x, start_y)
                enemy.velocity = Vec2()

    def draw(self, surface: pygame.Surface) -> None:
        """Draw every enemy with a short line showing its heading."""
        for enemy in self._enemies:
            centre = (int(enemy.position.x), int(enemy.position.y))
            pygame.draw.circle(surface, RED, centre, enemy.radius)
            pygame.draw.circle(surface, BLACK, centre, enemy.radius, width=1)
            if enemy.velocity.length() > 0.1:
                end = (
                    int(enemy.position.x + enemy.velocity.x * 5),
                    int(enemy.position.y + enemy.velocity.y * 5),
                )
                pygame.draw.line(surface, BLACK, centre, end)

    def _others(self, enemy: Enemy):
        return (other for other in self._enemies if other is not enemy)

    def _separation(self, enemy: Enemy) -> Vec2:
        radius = self._config.separation_radius
        steer = Vec2()
        count = 0
        for other in self._others(enemy):
            dx = enemy.position.x - other.position.x
            dy = enemy.position.y - other.position.y
            if abs(dx) > radius or abs(dy) > radius:
                continue
            dist = math.hypot(dx, dy)
            if 0 < dist < radius:
                force = radius - dist
                steer.x += dx / dist * force / radius
                steer.y += dy / dist * force / radius
                count += 1
        if count:
            steer.x *= self._config.separation_force
            steer.y *= self._config.separation_force
        return steer

    def _alignment(self, enemy: Enemy) -> Vec2:
        radius = self._config.alignment_radius
        steer = Vec2()
        count = 0
        for other in self._others(enemy):
            dist = enemy.position.distance(other.position)
            if 0 < dist < radius:
                steer.x += other.velocity.x
                steer.y += other.velocity.y
                count += 1
        if count:
            force = self._config.alignment_force
            steer.x = (steer.x / count - enemy.velocity.x) * force
            steer.y = (steer.y / count - enemy.velocity.y) * force
        return steer

    def _cohesion(self, enemy: Enemy) -> Vec2:
        radius = self._config.cohesion_radius
        centre = Vec2()
        count = 0
        for other in self._others(enemy):
            dist = enemy.position.distance(other.position)
            if 0 < dist < radius:
                centre.x += other.position.x
                centre.y += other.position.y
                count += 1
        if not count:
            return Vec2()
        force = self._config.cohesion_force
        return Vec2(
            (centre.x / count - enemy.position.x) * force,
            (centre.y / count - enemy.position.y) * force,
        )

    def _obstacle_avoidance(self, enemy: Enemy, grid: Grid) -> Vec2:
        cfg = self._config
        reach = cfg.cell_size * AVOIDANCE_RADIUS_CELLS
        steer = Vec2()
        grid_x = int(enemy.grid_pos.x)
        grid_y = int(enemy.grid_pos.y)

        for off_y in (-1, 0, 1):
            for off_x in (-1, 0, 1):
                if off_x == 0 and off_y == 0:
                    continue
                check_x = grid_x + off_x
                check_y = grid_y + off_y
                if not (0 <= check_x < cfg.width and 0 <= check_y < cfg.height):
                    continue
                if grid.costs[check_y][check_x] != OBSTACLE_COST:
                    continue
                obstacle_x = cfg.margin_x + check_x * cfg.cell_size + cfg.cell_size // 2
                obstacle_y = cfg.margin_y + check_y * cfg.cell_size + cfg.cell_size // 2
                dx = enemy.position.x - obstacle_x
                dy = enemy.position.y - obstacle_y
                dist = math.hypot(dx, dy)
                if 0 < dist < reach:
                    force = (reach - dist) / reach
                    steer.x += dx / dist * force
                    steer.y += dy / dist * force
        return steer

    def _flow_force(self, enemy: Enemy) -> Vec2:
        cfg = self._config
        grid_x = int(enemy.grid_pos.x)
        grid_y = int(enemy.grid_pos.y)
        if not (0 <= grid_x < cfg.width and 0 <= grid_y < cfg.height):
            return Vec2()
        try:
            direction = self._navigator.flow_direction(Position(grid_x, grid_y))
        except NavigationError:
            return Vec2()
        return Vec2(direction.x * FLOW_STRENGTH, direction.y * FLOW_STRENGTH)