"""
Maze grid, generation and level scaling
"""

from .maze_core import Cell, MazeGrid, is_valid_move, is_valid_enemy_move, reachable_cells
from .generator import generate_maze, iter_backtracker
from .difficulty import LevelConfig, get_level_config

__all__ = ['Cell', 'MazeGrid', 'is_valid_move', 'is_valid_enemy_move', 'reachable_cells',
           'generate_maze', 'iter_backtracker', 'LevelConfig', 'get_level_config']
