import random

import pygame
import pytest

from flowfield.config import eight_way_config
from flowfield.enemies import (
    Enemy,
    EnemySystem,
    SystemConfig,
    Vec2,
    default_config,
)
from flowfield.grid import Position
from flowfield.navigator import FlowFieldNavigator


def make_navigator(goal=None):
    nav = FlowFieldNavigator(eight_way_config(10, 10))
    if goal is not None:
        nav.set_goal(goal)
    return nav


def cell_centre(cfg, x, y):
    return Vec2(
        cfg.margin_x + x * cfg.cell_size + cfg.cell_size / 2,
        cfg.margin_y + y * cfg.cell_size + cfg.cell_size / 2,
    )


def test_vec2_length_and_distance():
    assert Vec2(3.0, 4.0).length() == pytest.approx(5.0)
    assert Vec2(1.0, 1.0).distance(Vec2(4.0, 5.0)) == pytest.approx(5.0)
    assert Vec2().length() == 0.0


def test_default_config_values():
    cfg = default_config()
    assert cfg == SystemConfig()
    assert (cfg.width, cfg.height, cfg.cell_size) == (10, 10, 50)
    assert (cfg.margin_x, cfg.margin_y) == (30, 30)
    assert cfg.unit_speed == 2.0
    assert cfg.max_steer_force == 0.8


def test_spawn_places_enemies_in_bottom_rows():
    cfg = default_config()
    system = EnemySystem(make_navigator(), cfg, rng=random.Random(1))
    system.spawn(50)
    assert len(system.enemies) == 50
    for enemy in system.enemies:
        assert 0 <= enemy.grid_pos.x <= cfg.width - 1
        assert cfg.height - 3 <= enemy.grid_pos.y <= cfg.height - 1
        centre = cell_centre(cfg, enemy.grid_pos.x, enemy.grid_pos.y)
        assert abs(enemy.position.x - centre.x) <= 10
        assert abs(enemy.position.y - centre.y) <= 10
        assert enemy.target_pos == enemy.position
        assert enemy.velocity == Vec2()


def test_spawn_is_reproducible_with_seeded_rng():
    cfg = default_config()
    first = EnemySystem(make_navigator(), cfg, rng=random.Random(7))
    second = EnemySystem(make_navigator(), cfg, rng=random.Random(7))
    first.spawn(5)
    second.spawn(5)
    assert [e.position for e in first.enemies] == [e.position for e in second.enemies]


def test_enemy_follows_flow_towards_goal():
    cfg = default_config()
    system = EnemySystem(make_navigator(Position(5, 0)), cfg)
    start = cell_centre(cfg, 5, 8)
    system.enemies.append(Enemy(position=Vec2(start.x, start.y), grid_pos=Vec2(5.0, 8.0)))
    system.update()
    enemy = system.enemies[0]
    assert enemy.velocity.y < 0
    assert enemy.velocity.x == pytest.approx(0.0)
    assert enemy.position.y < start.y
    assert enemy.velocity.length() <= cfg.unit_speed + 1e-9


def test_speed_never_exceeds_unit_speed():
    cfg = default_config()
    system = EnemySystem(make_navigator(Position(7, 2)), cfg, rng=random.Random(3))
    system.spawn(30)
    for _ in range(20):
        system.update()
        for enemy in system.enemies:
            assert enemy.velocity.length() <= cfg.unit_speed + 1e-9


def test_enemy_at_goal_is_respawned():
    cfg = default_config()
    system = EnemySystem(make_navigator(Position(7, 2)), cfg, rng=random.Random(0))
    at_goal = cell_centre(cfg, 7, 2)
    system.enemies.append(Enemy(position=at_goal, grid_pos=Vec2(7.0, 2.0)))
    system.update()
    enemy = system.enemies[0]
    assert enemy.velocity == Vec2()
    assert cfg.height - 3 <= enemy.grid_pos.y <= cfg.height - 1
    assert enemy.position == cell_centre(cfg, enemy.grid_pos.x, enemy.grid_pos.y)


def test_obstacle_pushes_enemy_away():
    cfg = default_config()
    nav = make_navigator()
    costs = [[1] * 10 for _ in range(10)]
    costs[5][5] = -1
    nav.update_costs(costs)
    system = EnemySystem(nav, cfg)
    start = cell_centre(cfg, 4, 5)
    system.enemies.append(Enemy(position=Vec2(start.x, start.y), grid_pos=Vec2(4.0, 5.0)))
    system.update()
    enemy = system.enemies[0]
    assert enemy.velocity.x < 0
    assert enemy.velocity.y == pytest.approx(0.0)


def test_close_enemies_separate():
    cfg = default_config()
    system = EnemySystem(make_navigator(), cfg)
    left = Enemy(position=Vec2(200.0, 200.0), grid_pos=Vec2(3.0, 3.0))
    right = Enemy(position=Vec2(205.0, 200.0), grid_pos=Vec2(3.0, 3.0))
    system.enemies.extend([left, right])
    system.update()
    assert left.position.x < 200.0
    assert right.position.x > 205.0
    assert left.position.distance(right.position) > 5.0


def test_isolated_enemy_without_goal_stays_still():
    cfg = default_config()
    system = EnemySystem(make_navigator(), cfg)
    start = cell_centre(cfg, 2, 2)
    system.enemies.append(Enemy(position=Vec2(start.x, start.y), grid_pos=Vec2(2.0, 2.0)))
    system.update()
    assert system.enemies[0].position == start
    assert system.enemies[0].velocity == Vec2()


def test_draw_paints_enemy_red():
    cfg = default_config()
    system = EnemySystem(make_navigator(), cfg)
    system.enemies.append(Enemy(position=Vec2(100.0, 100.0)))
    surface = pygame.Surface((200, 200))
    surface.fill((255, 255, 255))
    system.draw(surface)
    assert tuple(surface.get_at((100, 100)))[:3] == (230, 41, 55)
    assert tuple(surface.get_at((150, 150)))[:3] == (255, 255, 255)