"""Turrets that watch for enemies within their attack range."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .enemies import Enemy, EnemySystem, SystemConfig

IN_RANGE_MESSAGE = "ENEMY IN RANGE"


@dataclass
class Turret:
    """A defensive building occupying one grid cell."""

    position_x: int
    position_y: int
    attack_range: int = 3
    attack_speed: float = 1.0


class TurretSystem:
    """Tracks turrets and reports enemies that come within their range."""

    def __init__(self, enemy_system: EnemySystem, config: SystemConfig) -> None:
        self.turrets: list[Turret] = []
        self._enemy_system = enemy_system
        self._config = config

    def enemies_in_range(self, turret: Turret) -> list[Enemy]:
        """Return the enemies whose grid cell lies within the turret's range."""
        cfg = self._config
        found = []
        for enemy in self._enemy_system.enemies:
            enemy_x = int((enemy.position.x - cfg.margin_x) / cfg.cell_size)
            enemy_y = int((enemy.position.y - cfg.margin_y) / cfg.cell_size)
            distance = math.hypot(turret.position_x - enemy_x, turret.position_y - enemy_y)
            if distance <= turret.attack_range:
                found.append(enemy)
        return found

    def update(self) -> list[tuple[Turret, Enemy]]:
        """Announce every enemy in range of a turret and return the pairs found."""
        pairs = []
        for turret in self.turrets:
            for enemy in self.enemies_in_range(turret):
                print(IN_RANGE_MESSAGE)
                pairs.append((turret, enemy))
        return pairs