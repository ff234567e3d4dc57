"""
Level scaling for Maze Quest
Maze size and entity counts grow with the level number
"""

from mazequest.utils.constants import (
    MAZE_BASE_SIZE, MAZE_MAX_SIZE, MAX_KEYS, MAX_TREASURES, MAX_POWERUPS
)


class LevelConfig:
    """Configuration for a single level"""
    def __init__(self, **kwargs):
        self.level = kwargs.get('level', 1)

        # Maze dimensions (always square)
        self.maze_size = kwargs.get('maze_size', MAZE_BASE_SIZE)

        # Entities
        self.enemy_count = kwargs.get('enemy_count', 1)
        self.key_count = kwargs.get('key_count', 1)
        self.treasure_count = kwargs.get('treasure_count', 2)
        self.powerup_count = kwargs.get('powerup_count', 0)

    def __repr__(self):
        return (f"LevelConfig(level={self.level}, size={self.maze_size}, "
                f"enemies={self.enemy_count}, keys={self.key_count}, "
                f"treasures={self.treasure_count}, powerups={self.powerup_count})")


def maze_size_for_level(level):
    """
    Maze side length for a level

    The first level uses the base size; every later level is
    base + level, capped at the maximum.
    """
    if level <= 1:
        return MAZE_BASE_SIZE
    return min(MAZE_BASE_SIZE + level, MAZE_MAX_SIZE)


def enemy_count_for_level(level):
    return level // 2 + 1


def key_count_for_level(level):
    """Keys required to unlock the exit"""
    return min(level, MAX_KEYS)


def treasure_count_for_level(level):
    return min(level * 2, MAX_TREASURES)


def powerup_count_for_level(level):
    if level <= 1:
        return 0
    return min(level - 1, MAX_POWERUPS)


def get_level_config(level):
    """
    Get configuration for a level number

    Args:
        level: Level number (1+)

    Returns:
        LevelConfig object
    """
    if level < 1:
        raise ValueError(f"level must be >= 1, got {level}")
    return LevelConfig(
        level=level,
        maze_size=maze_size_for_level(level),
        enemy_count=enemy_count_for_level(level),
        key_count=key_count_for_level(level),
        treasure_count=treasure_count_for_level(level),
        powerup_count=powerup_count_for_level(level),
    )
