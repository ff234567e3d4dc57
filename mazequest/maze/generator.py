"""
Maze generation - randomized depth-first backtracking
"""

import random
from mazequest.utils.constants import DIRS
from mazequest.maze.maze_core import MazeGrid


def iter_backtracker(cols, rows, rng=None):
    """
    Depth-First Search with backtracking - animated generator

    Carving uses an explicit stack of (x, y, remaining directions) frames so
    the depth is bounded by the cell count, not the interpreter's call stack.
    Each frame's four directions are shuffled once when the cell is entered.

    Args:
        cols, rows: Grid dimensions
        rng: random.Random instance (fresh unseeded one if None)

    Yields:
        Frame dicts {"grid", "current", "carved", "done"}
    """
    if rng is None:
        rng = random.Random()

    grid = MazeGrid(cols, rows)

    sx, sy = rng.randrange(cols), rng.randrange(rows)
    stack = [_enter(grid, sx, sy, rng)]

    yield {"grid": grid, "current": (sx, sy), "carved": None, "done": False}

    while stack:
        cx, cy, remaining = stack[-1]
        carved = None

        while remaining:
            dx, dy, wall_bit, opp_bit = remaining.pop()
            nx, ny = cx + dx, cy + dy
            nxt = grid.cell(nx, ny)
            if nxt is None or nxt.visited:
                continue
            grid.cells[cy][cx].remove_wall(wall_bit)
            nxt.remove_wall(opp_bit)
            stack.append(_enter(grid, nx, ny, rng))
            carved = ((cx, cy), (nx, ny))
            break

        if carved:
            yield {"grid": grid, "current": carved[1], "carved": carved, "done": False}
        else:
            stack.pop()
            yield {"grid": grid, "current": (cx, cy), "carved": None, "done": False}

    yield {"grid": grid, "current": (sx, sy), "carved": None, "done": True}


def _enter(grid, x, y, rng):
    """Mark cell visited and build its frame of shuffled directions"""
    grid.cells[y][x].visited = True
    directions = list(DIRS)
    rng.shuffle(directions)
    # Popped from the end, so reverse to try them in shuffled order
    directions.reverse()
    return x, y, directions


def generate_maze(cols, rows=None, rng=None):
    """
    Generate a complete maze instantly

    Returns:
        MazeGrid whose open passages form a spanning tree over every cell
    """
    if rows is None:
        rows = cols
    last_state = None
    for state in iter_backtracker(cols, rows, rng):
        last_state = state
    return last_state["grid"]
