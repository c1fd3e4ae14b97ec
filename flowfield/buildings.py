"""Placing turret buildings on the grid."""

from __future__ import annotations

import pygame

from .enemies import SystemConfig
from .errors import NavigationError
from .grid import OBSTACLE_COST, Position
from .navigator import FlowFieldNavigator
from .turrets import Turret, TurretSystem

BLUE = (0, 121, 241)
DARK_BLUE = (0, 82, 172)


class BuildingSystem:
    """Places turrets and keeps the navigator's costs in step with them."""

    def __init__(
        self,
        navigator: FlowFieldNavigator,
        turret_system: TurretSystem,
        config: SystemConfig,
    ) -> None:
        self._navigator = navigator
        self._turret_system = turret_system
        self._config = config

    @property
    def turret_system(self) -> TurretSystem:
        """The turret system that receives placed turrets."""
        return self._turret_system

    def place_building(self, grid_x: int, grid_y: int) -> bool:
        """Place a turret on a free cell; return whether it was placed."""
        if not self._navigator.grid.is_passable(Position(grid_x, grid_y)):
            return False
        turrets = self._turret_system.turrets
        if any(t.position_x == grid_x and t.position_y == grid_y for t in turrets):
            return False
        turrets.append(Turret(grid_x, grid_y))
        self._update_navigation_costs()
        return True

    def _update_navigation_costs(self) -> None:
        grid = self._navigator.grid
        costs = grid.costs
        for turret in self._turret_system.turrets:
            if turret.position_x < grid.width and turret.position_y < grid.height:
                costs[turret.position_y][turret.position_x] = OBSTACLE_COST
        try:
            self._navigator.update_costs(costs)
        except NavigationError:
            # Building over the goal leaves the navigator without one.
            pass

    def draw(self, surface: pygame.Surface) -> None:
        """Draw every turret as a filled, outlined cell."""
        cfg = self._config
        for turret in self._turret_system.turrets:
            rect = pygame.Rect(
                cfg.margin_x + turret.position_x * cfg.cell_size,
                cfg.margin_y + turret.position_y * cfg.cell_size,
                cfg.cell_size,
                cfg.cell_size,
            )
            pygame.draw.rect(surface, BLUE, rect)
            pygame.draw.rect(surface, DARK_BLUE, rect, width=1)