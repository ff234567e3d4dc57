"""
Maze Quest - explore a generated maze, collect keys and reach the artifact
"""

__version__ = "1.0.0"
GAME_TITLE = "Maze Quest"
