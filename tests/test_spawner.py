import logging
import math
import random

import pytest

from mazequest.entities.player import Player
from mazequest.entities.spawner import place_collectibles, place_enemies, sample_cell
from mazequest.maze.generator import generate_maze
from mazequest.maze.maze_core import MazeGrid
from mazequest.utils.constants import ENEMY_SPEED, POWERUP_TYPES


@pytest.fixture
def grid():
    return generate_maze(15, 15, random.Random(21))


@pytest.mark.parametrize("level,expected", [(1, 1), (2, 2), (3, 2), (4, 3), (9, 5)])
def test_enemy_count_scales_with_level(grid, rng, level, expected):
    assert len(place_enemies(level, grid, Player(), rng)) == expected


def test_enemies_spawn_outside_player_box(grid, rng):
    player = Player(0.5, 0.5)
    for _ in range(20):
        for enemy in place_enemies(9, grid, player, rng):
            cx, cy = enemy.x - 0.5, enemy.y - 0.5
            assert not (abs(cx - player.x) < 3 and abs(cy - player.y) < 3)


def test_enemy_box_is_measured_from_raw_cell_index(rng):
    # Player at (0.5, 0.5): column 3 gives |3 - 0.5| = 2.5 < 3 so only row or column 4 is allowed
    grid = MazeGrid(5)
    allowed = set()
    for _ in range(200):
        enemy = place_enemies(1, grid, Player(0.5, 0.5), rng)[0]
        allowed.add((int(enemy.x), int(enemy.y)))
    assert allowed
    assert all(x == 4 or y == 4 for x, y in allowed)


def test_enemy_defaults(grid, rng):
    for enemy in place_enemies(6, grid, Player(), rng):
        assert enemy.speed == ENEMY_SPEED
        assert 0 <= enemy.direction < 2 * math.pi
        assert enemy.x % 1 == 0.5 and enemy.y % 1 == 0.5


@pytest.mark.parametrize("level,keys,treasures,powerups", [
    (1, 1, 2, 0),
    (2, 2, 4, 1),
    (3, 3, 6, 2),
    (7, 3, 10, 2),
])
def test_collectible_counts(grid, rng, level, keys, treasures, powerups):
    items, boosts = place_collectibles(level, grid, Player(), (7.5, 7.5), rng)

    assert sum(1 for i in items if i.type == 'key') == keys
    assert sum(1 for i in items if i.type == 'treasure') == treasures
    assert len(boosts) == powerups
    assert all(not i.collected for i in items + boosts)


def test_collectibles_avoid_player_and_exit_cells(grid, rng):
    player = Player(0.5, 0.5)
    for _ in range(30):
        items, boosts = place_collectibles(5, grid, player, (7.5, 7.5), rng)
        for item in items + boosts:
            assert item.cell != (0, 0)
            assert item.cell != (7, 7)


def test_powerup_types_are_known(grid, rng):
    seen = set()
    for _ in range(30):
        _, boosts = place_collectibles(3, grid, Player(), (7.5, 7.5), rng)
        seen.update(b.type for b in boosts)
    assert seen <= set(POWERUP_TYPES)
    assert len(seen) > 1


def test_sample_cell_falls_back_to_scan(rng, caplog):
    grid = MazeGrid(3)

    def only_last(x, y):
        return (x, y) != (2, 2)

    with caplog.at_level(logging.WARNING):
        assert sample_cell(grid, rng, only_last, max_attempts=0) == (2, 2)
    assert "fell back" in caplog.text


def test_sample_cell_terminates_when_nothing_fits(rng):
    grid = MazeGrid(3)
    x, y = sample_cell(grid, rng, lambda x, y: True, max_attempts=50)
    assert grid.in_bounds(x, y)


def test_crowded_tiny_maze_still_places_enemies(rng):
    # Every cell of a 3x3 grid is inside the player's exclusion box
    grid = MazeGrid(3)
    enemies = place_enemies(4, grid, Player(1.5, 1.5), rng)
    assert len(enemies) == 3
