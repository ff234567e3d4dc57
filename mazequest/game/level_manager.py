"""
Level Manager - builds levels and handles level progression
"""

import logging
import random
from mazequest.entities.player import Player
from mazequest.entities.particle import ParticleSystem
from mazequest.entities.spawner import place_enemies, place_collectibles
from mazequest.game.game_state import GameState
from mazequest.maze.difficulty import get_level_config
from mazequest.maze.generator import generate_maze

logger = logging.getLogger(__name__)


class LevelManager:
    """
    Creates the game state and regenerates it between levels
    """
    def __init__(self):
        self.levels_completed = 0
        self.best_score = 0

    def new_game(self, rng=None, level=1):
        """
        Create a new game

        Args:
            rng: random.Random, or an int seed, or None for an unseeded game
            level: Starting level number

        Returns:
            GameState ready for the first tick
        """
        if rng is None or isinstance(rng, int):
            rng = random.Random(rng)
        state = GameState(rng, Player(), ParticleSystem(rng))
        self.start_level(state, level)
        return state

    def start_level(self, state, level):
        """
        Reset per-level state and generate a fresh maze

        Score and the player object carry over; everything else is rebuilt.
        """
        config = get_level_config(level)
        state.level = level
        state.maze_size = config.maze_size

        # Reset player and view
        player = state.player
        player.reset_position()
        state.camera.snap(player.x, player.y)
        state.visited = {player.cell}

        # Reset counters
        state.keys = 0
        state.treasures = 0
        state.active_powerup = None
        state.powerup_timer = 0.0
        state.shake_ticks = 0
        state.scheduled = []

        # Generate maze and items
        state.maze = generate_maze(config.maze_size, config.maze_size, state.rng)
        cx, cy = state.maze.center()
        state.exit_pos = (cx + 0.5, cy + 0.5)
        state.enemies = place_enemies(level, state.maze, player, state.rng)
        state.collectibles, state.powerups = place_collectibles(
            level, state.maze, player, state.exit_pos, state.rng
        )

        state.game_over = False
        logger.info("Level %d: %dx%d maze, %d enemies, %d keys required",
                    level, config.maze_size, config.maze_size,
                    len(state.enemies), state.keys_required)
        return state

    def next_level(self, state):
        """Advance to the next level"""
        self.levels_completed += 1
        self.best_score = max(self.best_score, state.score)
        return self.start_level(state, state.level + 1)

    def __repr__(self):
        return f"LevelManager(completed={self.levels_completed}, best={self.best_score})"
