"""
Enemy entities
Enemies wander the maze on a continuous heading and turn at walls
"""

import math
from mazequest.maze.maze_core import is_valid_enemy_move
from mazequest.utils.colors import COLOR_ENEMY
from mazequest.utils.constants import ENEMY_SIZE, ENEMY_SPEED, ENEMY_TURN_CHANCE


class Enemy:
    """
    Wandering enemy
    """
    def __init__(self, x, y, direction, speed=ENEMY_SPEED, size=ENEMY_SIZE, color=COLOR_ENEMY):
        """
        Args:
            x, y: Position in cell-fraction units
            direction: Heading in radians
            speed: Cells travelled per tick
            size: Render radius in pixels
            color: RGB color
        """
        self.x = x
        self.y = y
        self.direction = direction
        self.speed = speed
        self.size = size
        self.color = color

    def next_position(self):
        """Position one step along the current heading"""
        return (self.x + math.cos(self.direction) * self.speed,
                self.y + math.sin(self.direction) * self.speed)

    def update(self, grid, maze_size, rng):
        """
        Update enemy AI for one tick

        Args:
            grid: MazeGrid
            maze_size: Side length of the maze
            rng: random.Random

        Returns:
            True if the enemy moved
        """
        if rng.random() < ENEMY_TURN_CHANCE:
            self.direction = rng.random() * math.pi * 2

        new_x, new_y = self.next_position()
        if is_valid_enemy_move(grid, maze_size, (self.x, self.y), (new_x, new_y)):
            self.x = new_x
            self.y = new_y
            return True

        # Hit a wall, turn without moving
        self.direction = rng.random() * math.pi * 2
        return False

    def __repr__(self):
        return f"Enemy(pos=({self.x:.2f},{self.y:.2f}), heading={self.direction:.2f})"
