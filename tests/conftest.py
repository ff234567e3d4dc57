import random

import pytest

from mazequest.game.level_manager import LevelManager
from mazequest.game.simulation import Simulation
from mazequest.maze.maze_core import MazeGrid, carve_passage


def _open_grid(n):
    """Grid with every interior wall removed"""
    grid = MazeGrid(n, n)
    for y in range(n):
        for x in range(n):
            if x + 1 < n:
                carve_passage(grid, x, y, x + 1, y)
            if y + 1 < n:
                carve_passage(grid, x, y, x, y + 1)
    return grid


@pytest.fixture
def make_open_grid():
    return _open_grid


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def level_manager():
    return LevelManager()


@pytest.fixture
def state(level_manager):
    return level_manager.new_game(random.Random(7))


@pytest.fixture
def quiet_state(state):
    """Level 1 state on an open 15x15 grid with no enemies or items"""
    state.maze = _open_grid(state.maze_size)
    state.enemies = []
    state.collectibles = []
    state.powerups = []
    return state


@pytest.fixture
def sim(quiet_state, level_manager):
    return Simulation(quiet_state, level_manager)


def finish_move(sim, max_ticks=50):
    """Tick until the player's move animation completes"""
    for _ in range(max_ticks):
        if not sim.state.player.is_moving():
            return
        sim.tick()
    raise AssertionError("move animation never finished")
