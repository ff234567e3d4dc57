import random

from mazequest.game.level_manager import LevelManager
from mazequest.maze.maze_core import reachable_cells


def test_new_game_starts_at_level_one(state):
    assert state.level == 1
    assert state.maze_size == 15
    assert state.exit_pos == (7.5, 7.5)
    assert (state.player.x, state.player.y) == (0.5, 0.5)
    assert state.visited == {(0, 0)}
    assert state.score == 0
    assert not state.game_over
    assert len(state.enemies) == 1
    assert len(state.collectibles) == 3
    assert state.powerups == []
    assert len(reachable_cells(state.maze, (0, 0))) == 225


def test_integer_seed_is_repeatable():
    a = LevelManager().new_game(99)
    b = LevelManager().new_game(99)

    assert a.maze.walls() == b.maze.walls()
    assert [(e.x, e.y, e.direction) for e in a.enemies] == [(e.x, e.y, e.direction) for e in b.enemies]
    assert [(c.x, c.y, c.type) for c in a.collectibles] == [(c.x, c.y, c.type) for c in b.collectibles]


def test_next_level_resets_everything_but_score(state, level_manager):
    player = state.player
    old_maze = state.maze
    state.score = 230
    state.keys = 1
    state.treasures = 2
    state.active_powerup = 'speed'
    state.powerup_timer = 4.0
    state.visited.update({(1, 0), (2, 0)})
    state.game_over = True
    player.reset_position(7.5, 7.5)

    level_manager.next_level(state)

    assert state.level == 2
    assert state.maze_size == 17
    assert state.maze is not old_maze
    assert state.maze.cols == 17
    assert state.exit_pos == (8.5, 8.5)
    assert state.player is player
    assert (player.x, player.y) == (0.5, 0.5)
    assert player.render_pos == (0.5, 0.5)
    assert (state.camera.x, state.camera.y) == (0.0, 0.0)
    assert state.visited == {(0, 0)}
    assert state.keys == 0 and state.treasures == 0
    assert state.active_powerup is None
    assert state.score == 230
    assert not state.game_over
    assert len(state.enemies) == 2
    assert len(state.powerups) == 1
    assert level_manager.levels_completed == 1
    assert level_manager.best_score == 230


def test_maze_size_caps_at_25(level_manager):
    state = level_manager.new_game(random.Random(3), level=9)
    level_manager.next_level(state)
    level_manager.next_level(state)

    assert state.level == 11
    assert state.maze_size == 25
    assert state.exit_pos == (12.5, 12.5)
    assert len(state.collectibles) == 3 + 10
