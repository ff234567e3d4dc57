"""
Entity placement - enemies, keys, treasures and power-ups
"""

import logging
import math
from mazequest.entities.enemy import Enemy
from mazequest.entities.collectible import Collectible, PowerUp
from mazequest.maze.difficulty import (
    enemy_count_for_level, key_count_for_level,
    treasure_count_for_level, powerup_count_for_level
)
from mazequest.utils.constants import ENEMY_SAFE_BOX, MAX_PLACEMENT_ATTEMPTS, POWERUP_TYPES
from mazequest.utils.helpers import cell_of

logger = logging.getLogger(__name__)


def sample_cell(grid, rng, rejected, max_attempts=MAX_PLACEMENT_ATTEMPTS):
    """
    Draw a uniformly random cell, resampling while rejected(x, y) is true

    After max_attempts draws the first acceptable cell in row-major order is
    used instead; if no cell is acceptable the last draw is returned.

    Args:
        grid: MazeGrid
        rng: random.Random
        rejected: Callable (x, y) -> bool
        max_attempts: Draw limit before falling back to a scan

    Returns:
        (x, y) cell coordinates
    """
    x = y = 0
    for _ in range(max_attempts):
        x = rng.randrange(grid.cols)
        y = rng.randrange(grid.rows)
        if not rejected(x, y):
            return x, y

    for cell in grid:
        if not rejected(cell.x, cell.y):
            logger.warning("Placement fell back to scan after %d draws: (%d, %d)",
                           max_attempts, cell.x, cell.y)
            return cell.x, cell.y

    logger.warning("No free cell in %r, reusing last draw (%d, %d)", grid, x, y)
    return x, y


def place_enemies(level, grid, player, rng):
    """
    Generate enemies for a level

    Enemies are kept out of the box |dx| < 3 and |dy| < 3 measured from the
    raw cell index to the player's position.

    Returns:
        List of Enemy objects
    """
    def too_close(x, y):
        return abs(x - player.x) < ENEMY_SAFE_BOX and abs(y - player.y) < ENEMY_SAFE_BOX

    enemies = []
    for _ in range(enemy_count_for_level(level)):
        x, y = sample_cell(grid, rng, too_close)
        enemies.append(Enemy(x + 0.5, y + 0.5, rng.random() * math.pi * 2))
    return enemies


def place_collectibles(level, grid, player, exit_pos, rng):
    """
    Generate keys, treasures and power-ups for a level

    Args:
        level: Level number
        grid: MazeGrid
        player: Player (its cell is excluded)
        exit_pos: (x, y) exit position (its cell is excluded)
        rng: random.Random

    Returns:
        (collectibles, powerups) tuple of lists
    """
    player_cell = cell_of(player.x, player.y)
    exit_cell = cell_of(*exit_pos)

    def occupied(x, y):
        return (x, y) == player_cell or (x, y) == exit_cell

    collectibles = []
    for _ in range(key_count_for_level(level)):
        x, y = sample_cell(grid, rng, occupied)
        collectibles.append(Collectible(x + 0.5, y + 0.5, 'key'))

    for _ in range(treasure_count_for_level(level)):
        x, y = sample_cell(grid, rng, occupied)
        collectibles.append(Collectible(x + 0.5, y + 0.5, 'treasure'))

    powerups = []
    for _ in range(powerup_count_for_level(level)):
        x, y = sample_cell(grid, rng, occupied)
        powerup_type = POWERUP_TYPES[rng.randrange(len(POWERUP_TYPES))]
        powerups.append(PowerUp(x + 0.5, y + 0.5, powerup_type))

    return collectibles, powerups
