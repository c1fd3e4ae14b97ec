"""Interactive flow field demo: enemies follow the field, turrets block it."""

from __future__ import annotations

import argparse
import functools
import logging
from collections.abc import Sequence

import pygame

from .buildings import BuildingSystem
from .config import eight_way_config
from .enemies import EnemySystem, SystemConfig
from .errors import NavigationError
from .grid import OBSTACLE_COST, STILL, Direction, Position
from .navigator import FlowFieldNavigator
from .turrets import TurretSystem

log = logging.getLogger(__name__)

CELL_SIZE = 50
MARGIN_X = 30
MARGIN_Y = 30
FONT_SIZE = 24

GRID_WIDTH = 10
GRID_HEIGHT = 10

WINDOW_WIDTH = GRID_WIDTH * CELL_SIZE + 2 * MARGIN_X
WINDOW_HEIGHT = GRID_HEIGHT * CELL_SIZE + 2 * MARGIN_Y

INITIAL_GOAL = Position(7, 2)
ENEMY_COUNT = 100
TARGET_FPS = 60
WINDOW_TITLE = "Flow Field Pathfinding Visualization"

RAYWHITE = (245, 245, 245)
BLACK = (0, 0, 0)
LIME = (0, 158, 47)
DARK_BLUE = (0, 82, 172)
GRAY = (130, 130, 130)
LIGHT_GRAY = (200, 200, 200)

Point = tuple[int, int]


def setup_obstacles(navigator: FlowFieldNavigator) -> None:
    """Block the 3x3 square of cells from (4, 4) to (6, 6)."""
    grid = navigator.grid
    costs = grid.costs
    for x in range(4, 7):
        for y in range(4, 7):
            if x < grid.width and y < grid.height:
                costs[y][x] = OBSTACLE_COST
    try:
        navigator.update_costs(costs)
    except (NavigationError, ValueError) as exc:
        log.warning("Failed to update costs: %s", exc)


def screen_to_grid(x: float, y: float) -> Position:
    """Return the grid cell under a screen point, truncating towards zero."""
    return Position(int((x - MARGIN_X) / CELL_SIZE), int((y - MARGIN_Y) / CELL_SIZE))


def arrow_points(
    cell_x: int, cell_y: int, direction: Direction
) -> tuple[Point, Point, Point, Point] | None:
    """Return the shaft start, tip and two head corners of a cell's arrow.

    Returns None for a cell without a direction.
    """
    if direction == STILL:
        return None
    centre_x = cell_x + CELL_SIZE // 2
    centre_y = cell_y + CELL_SIZE // 2
    length = CELL_SIZE // 3
    head = CELL_SIZE // 8

    end_x = centre_x + direction.x * length
    end_y = centre_y + direction.y * length
    perp_x = -direction.y
    perp_y = direction.x
    back_x = end_x - direction.x * head
    back_y = end_y - direction.y * head
    side_x = int(perp_x * head / 2)
    side_y = int(perp_y * head / 2)

    return (
        (centre_x, centre_y),
        (end_x, end_y),
        (back_x + side_x, back_y + side_y),
        (back_x - side_x, back_y - side_y),
    )


@functools.lru_cache(maxsize=None)
def _cached_font(size: int) -> pygame.font.Font:
    return pygame.font.Font(None, size)


def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
        _cached_font.cache_clear()
    return _cached_font(size)


def _draw_grid_lines(surface: pygame.Surface, width: int, height: int) -> None:
    bottom = MARGIN_Y + height * CELL_SIZE
    right = MARGIN_X + width * CELL_SIZE
    for x in range(width + 1):
        line_x = MARGIN_X + x * CELL_SIZE
        pygame.draw.line(surface, LIGHT_GRAY, (line_x, MARGIN_Y), (line_x, bottom))
    for y in range(height + 1):
        line_y = MARGIN_Y + y * CELL_SIZE
        pygame.draw.line(surface, LIGHT_GRAY, (MARGIN_X, line_y), (right, line_y))


def _draw_goal(surface: pygame.Surface, rect: pygame.Rect) -> None:
    pygame.draw.rect(surface, LIME, rect)
    text = _font(FONT_SIZE // 2).render("GOAL", True, BLACK)
    surface.blit(
        text,
        (
            rect.x + (CELL_SIZE - text.get_width()) // 2,
            rect.y + CELL_SIZE // 2 - FONT_SIZE // 4,
        ),
    )


def _draw_arrow(surface: pygame.Surface, cell_x: int, cell_y: int, direction: Direction) -> None:
    points = arrow_points(cell_x, cell_y, direction)
    if points is None:
        centre = (cell_x + CELL_SIZE // 2, cell_y + CELL_SIZE // 2)
        pygame.draw.circle(surface, GRAY, centre, 3)
        return
    start, end, head1, head2 = points
    pygame.draw.line(surface, DARK_BLUE, start, end)
    pygame.draw.polygon(surface, DARK_BLUE, (end, head1, head2))


def draw_flow_field(surface: pygame.Surface, navigator: FlowFieldNavigator) -> None:
    """Draw grid lines, obstacles, the goal and one arrow per open cell."""
    grid = navigator.grid
    goal = navigator.goal
    _draw_grid_lines(surface, grid.width, grid.height)

    for y, (cost_row, flow_row) in enumerate(zip(grid.costs, grid.flow_field)):
        for x, (cost, direction) in enumerate(zip(cost_row, flow_row)):
            cell_x = MARGIN_X + x * CELL_SIZE
            cell_y = MARGIN_Y + y * CELL_SIZE
            rect = pygame.Rect(cell_x, cell_y, CELL_SIZE, CELL_SIZE)
            if cost == OBSTACLE_COST:
                pygame.draw.rect(surface, BLACK, rect)
            elif Position(x, y) == goal:
                _draw_goal(surface, rect)
            else:
                _draw_arrow(surface, cell_x, cell_y, direction)


def _system_config() -> SystemConfig:
    return SystemConfig(
        width=GRID_WIDTH,
        height=GRID_HEIGHT,
        cell_size=CELL_SIZE,
        margin_x=MARGIN_X,
        margin_y=MARGIN_Y,
        unit_speed=2.0,
        separation_radius=15.0,
        separation_force=10.0,
        alignment_radius=25.0,
        alignment_force=0.3,
        cohesion_radius=35.0,
        cohesion_force=0.2,
        max_steer_force=0.6,
    )


def _handle_events(navigator: FlowFieldNavigator, buildings: BuildingSystem) -> bool:
    """Process input; return False once the window should close."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            try:
                navigator.set_goal(screen_to_grid(*event.pos))
            except NavigationError:
                pass
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE:
            cell = screen_to_grid(*pygame.mouse.get_pos())
            buildings.place_building(cell.x, cell.y)
    return True


def main(argv: Sequence[str] | None = None) -> int:
    """Open the demo window and run until it is closed."""
    parser = argparse.ArgumentParser(
        description="Flow field pathfinding with enemies and turrets."
    )
    parser.parse_args(argv)

    navigator = FlowFieldNavigator(eight_way_config(GRID_WIDTH, GRID_HEIGHT))
    setup_obstacles(navigator)
    navigator.set_goal(INITIAL_GOAL)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()

        config = _system_config()
        enemies = EnemySystem(navigator, config)
        enemies.spawn(ENEMY_COUNT)
        turrets = TurretSystem(enemies, config)
        buildings = BuildingSystem(navigator, turrets, config)

        while _handle_events(navigator, buildings):
            enemies.update()
            turrets.update()

            screen.fill(RAYWHITE)
            draw_flow_field(screen, navigator)
            buildings.draw(screen)
            enemies.draw(screen)
            fps = _font(FONT_SIZE).render(f"{clock.get_fps():.0f} FPS", True, LIME)
            screen.blit(fps, (10, 10))
            pygame.display.flip()
            clock.tick(TARGET_FPS)
    finally:
        pygame.quit()
    return 0