import random

import pytest

from mazequest.maze.difficulty import get_level_config, maze_size_for_level
from mazequest.maze.generator import generate_maze, iter_backtracker
from mazequest.maze.maze_core import (
    MazeGrid, carve_passage, is_open_between, neighbors_open, passage_count, reachable_cells
)
from mazequest.utils.constants import TOP, RIGHT, BOTTOM, LEFT


@pytest.mark.parametrize("size,seed", [(15, 1), (15, 99), (20, 5), (25, 42)])
def test_generated_maze_is_fully_connected(size, seed):
    grid = generate_maze(size, size, random.Random(seed))

    assert len(reachable_cells(grid, (0, 0))) == size * size
    assert len(reachable_cells(grid, (size - 1, size // 2))) == size * size


@pytest.mark.parametrize("seed", [3, 17, 256])
def test_generated_maze_is_a_spanning_tree(seed):
    grid = generate_maze(15, 15, random.Random(seed))

    # Connected with n - 1 edges means no cycles
    assert passage_count(grid) == 15 * 15 - 1


def test_walls_agree_between_neighbours():
    grid = generate_maze(18, 18, random.Random(11))

    for cell in grid:
        east = grid.cell(cell.x + 1, cell.y)
        if east is not None:
            assert cell.east == east.west
        south = grid.cell(cell.x, cell.y + 1)
        if south is not None:
            assert cell.south == south.north


def test_outer_border_stays_closed():
    grid = generate_maze(16, 16, random.Random(8))

    for i in range(16):
        assert grid.cell(i, 0).north
        assert grid.cell(i, 15).south
        assert grid.cell(0, i).west
        assert grid.cell(15, i).east


def test_every_cell_is_visited():
    grid = generate_maze(15, 15, random.Random(2))
    assert all(cell.visited for cell in grid)


def test_same_seed_gives_same_maze():
    a = generate_maze(15, 15, random.Random(2024))
    b = generate_maze(15, 15, random.Random(2024))
    c = generate_maze(15, 15, random.Random(2025))

    assert a.walls() == b.walls()
    assert a.walls() != c.walls()


def test_backtracker_frames_record_each_carve():
    frames = list(iter_backtracker(10, 10, random.Random(4)))

    carved = [f["carved"] for f in frames if f["carved"]]
    assert len(carved) == 10 * 10 - 1
    assert frames[-1]["done"] is True
    assert all(not f["done"] for f in frames[:-1])
    for (ax, ay), (bx, by) in carved:
        assert abs(ax - bx) + abs(ay - by) == 1


def test_largest_maze_generates_without_recursion():
    grid = generate_maze(25, 25, random.Random(0))
    assert len(reachable_cells(grid, (12, 12))) == 625


def test_grid_lookup_is_bounds_checked():
    grid = MazeGrid(5)

    assert grid.cell(-1, 0) is None
    assert grid.cell(0, 5) is None
    assert grid.cell(4, 4) is not None
    assert grid.center() == (2, 2)


def test_grid_rejects_non_positive_size():
    with pytest.raises(ValueError):
        MazeGrid(0)


def test_carve_passage_opens_both_sides():
    grid = MazeGrid(3)

    assert carve_passage(grid, 1, 1, 2, 1)
    assert not grid.cell(1, 1).has_wall(RIGHT)
    assert not grid.cell(2, 1).has_wall(LEFT)
    assert grid.cell(1, 1).has_wall(TOP)
    assert grid.cell(1, 1).has_wall(BOTTOM)
    assert is_open_between(grid, 2, 1, 1, 1)
    assert neighbors_open(grid, 1, 1) == [(2, 1)]
    assert grid.cell(1, 1).exits_count() == 1
    assert grid.cell(0, 0).exits_count() == 0


def test_carve_passage_ignores_non_adjacent_cells():
    grid = MazeGrid(3)
    assert not carve_passage(grid, 0, 0, 1, 1)
    assert not carve_passage(grid, 2, 0, 3, 0)


@pytest.mark.parametrize("level,size", [(1, 15), (2, 17), (5, 20), (10, 25), (30, 25)])
def test_maze_size_grows_with_level(level, size):
    assert maze_size_for_level(level) == size


def test_level_config_counts():
    config = get_level_config(4)

    assert config.maze_size == 19
    assert config.enemy_count == 3
    assert config.key_count == 3
    assert config.treasure_count == 8
    assert config.powerup_count == 2


def test_level_config_rejects_level_zero():
    with pytest.raises(ValueError):
        get_level_config(0)
