"""Navigation settings."""

from __future__ import annotations

from dataclasses import dataclass, field

from .grid import EIGHT_WAY_DIRECTIONS, Direction


@dataclass
class NavigationConfig:
    """Grid size and movement rules for a navigator."""

    grid_width: int
    grid_height: int
    directions: tuple[Direction, ...] = field(default=EIGHT_WAY_DIRECTIONS)
    diagonal_cost: float = 1.4
    allow_corner_cutting: bool = True

    def validate(self) -> None:
        """Raise ValueError when the settings cannot be used."""
        if self.grid_width <= 0 or self.grid_height <= 0:
            raise ValueError("grid dimensions must be positive")
        if not self.directions:
            raise ValueError("must have at least one direction")
        if self.diagonal_cost <= 0:
            raise ValueError("diagonal cost must be positive")


def eight_way_config(width: int, height: int) -> NavigationConfig:
    """Return settings for movement in all eight directions."""
    return NavigationConfig(
        grid_width=width,
        grid_height=height,
        directions=EIGHT_WAY_DIRECTIONS,
        diagonal_cost=1.4,
        allow_corner_cutting=True,
    )