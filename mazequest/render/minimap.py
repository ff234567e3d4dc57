"""
Minimap - top-down overview of the whole maze
"""

import numpy as np
import pygame
from mazequest.utils.colors import (
    COLOR_MINIMAP_BG, COLOR_MINIMAP_CELL, COLOR_MINIMAP_VISITED, COLOR_MINIMAP_BORDER,
    COLOR_WALL, COLOR_PLAYER, COLOR_EXIT_UNLOCKED, COLOR_EXIT_LOCKED
)
from mazequest.utils.constants import MINIMAP_SIZE
from mazequest.utils.helpers import cell_of


def build_minimap_array(state, size_px=MINIMAP_SIZE):
    """
    Build the minimap pixels

    Args:
        state: GameState
        size_px: Side length of the square minimap

    Returns:
        uint8 array of shape (size_px, size_px, 3) indexed [x, y], ready for
        pygame.surfarray.blit_array
    """
    n = state.maze_size
    scale = max(1, size_px // n)
    off = max(0, (size_px - n * scale) // 2)

    pix = np.empty((size_px, size_px, 3), dtype=np.uint8)
    pix[:] = COLOR_MINIMAP_BG

    # Floor: visited cells are brighter
    visited = np.zeros((n, n), dtype=bool)
    for x, y in state.visited:
        if 0 <= x < n and 0 <= y < n:
            visited[x, y] = True
    floor = np.where(visited[..., None],
                     np.array(COLOR_MINIMAP_VISITED, dtype=np.uint8),
                     np.array(COLOR_MINIMAP_CELL, dtype=np.uint8))
    block = np.repeat(np.repeat(floor, scale, axis=0), scale, axis=1)
    pix[off:off + n * scale, off:off + n * scale] = block

    # Walls
    if scale >= 3:
        for cell in state.maze:
            x0 = off + cell.x * scale
            y0 = off + cell.y * scale
            x1 = x0 + scale - 1
            y1 = y0 + scale - 1
            if cell.north:
                pix[x0:x1 + 1, y0] = COLOR_MINIMAP_BORDER
            if cell.south:
                pix[x0:x1 + 1, y1] = COLOR_MINIMAP_BORDER
            if cell.west:
                pix[x0, y0:y1 + 1] = COLOR_MINIMAP_BORDER
            if cell.east:
                pix[x1, y0:y1 + 1] = COLOR_MINIMAP_BORDER

    def mark(pos, color):
        cx, cy = cell_of(*pos)
        if not (0 <= cx < n and 0 <= cy < n):
            return
        pad = scale // 4
        x0 = off + cx * scale + pad
        y0 = off + cy * scale + pad
        pix[x0:x0 + max(1, scale - 2 * pad), y0:y0 + max(1, scale - 2 * pad)] = color

    mark(state.exit_pos, COLOR_EXIT_UNLOCKED if state.exit_unlocked else COLOR_EXIT_LOCKED)
    for enemy in state.enemies:
        mark((enemy.x, enemy.y), enemy.color)
    mark((state.player.x, state.player.y), COLOR_PLAYER)
    return pix


class Minimap:
    """
    Minimap overlay in a screen corner
    """
    def __init__(self, size=MINIMAP_SIZE):
        self.size = size
        self.margin = 10
        self.surface = pygame.Surface((size, size))

    def render(self, screen, state, position='top-right'):
        """
        Render minimap on screen

        Args:
            screen: pygame.Surface to render to
            state: GameState
            position: 'top-right' or 'top-left'
        """
        screen_w = screen.get_width()
        if position == 'top-right':
            x = screen_w - self.size - self.margin
        else:
            x = self.margin
        y = self.margin

        pygame.surfarray.blit_array(self.surface, build_minimap_array(state, self.size))
        screen.blit(self.surface, (x, y))
        pygame.draw.rect(screen, COLOR_WALL, (x - 1, y - 1, self.size + 2, self.size + 2), 1)
