"""
Core maze structures - cell grid, passages, reachability and move validation
"""

from collections import deque
from mazequest.utils.constants import TOP, RIGHT, BOTTOM, LEFT, ALL_WALLS, DIRS, DIR_TO_BITS
from mazequest.utils.helpers import cell_of


class Cell:
    """
    One grid unit with four wall flags stored as a bitmask
    """
    __slots__ = ('x', 'y', 'walls', 'visited')

    def __init__(self, x, y, walls=ALL_WALLS):
        self.x = x
        self.y = y
        self.walls = walls
        self.visited = False  # Used only during generation

    def has_wall(self, wall_bit):
        return (self.walls & wall_bit) != 0

    def remove_wall(self, wall_bit):
        self.walls &= ~wall_bit

    @property
    def north(self):
        return self.has_wall(TOP)

    @property
    def east(self):
        return self.has_wall(RIGHT)

    @property
    def south(self):
        return self.has_wall(BOTTOM)

    @property
    def west(self):
        return self.has_wall(LEFT)

    def exits_count(self):
        """Count number of open sides"""
        return sum(1 for bit in (TOP, RIGHT, BOTTOM, LEFT) if not self.has_wall(bit))

    def __repr__(self):
        sides = ''.join(c for c, on in zip('NESW', (self.north, self.east, self.south, self.west)) if on)
        return f"Cell(({self.x},{self.y}), walls={sides or '-'})"


class MazeGrid:
    """
    Square maze grid with wall-based representation
    Each cell has 4 possible walls: TOP, RIGHT, BOTTOM, LEFT
    """
    def __init__(self, cols, rows=None):
        if rows is None:
            rows = cols
        if cols <= 0 or rows <= 0:
            raise ValueError(f"maze dimensions must be positive, got {cols}x{rows}")
        self.cols = cols
        self.rows = rows
        # Initialize all walls closed
        self.cells = [[Cell(x, y) for x in range(cols)] for y in range(rows)]

    @property
    def size(self):
        return self.cols

    def in_bounds(self, x, y):
        """Check if coordinates are within grid bounds"""
        return 0 <= x < self.cols and 0 <= y < self.rows

    def cell(self, x, y):
        """Get cell at coordinates, or None when out of range"""
        if not self.in_bounds(x, y):
            return None
        return self.cells[y][x]

    def walls(self):
        """Flat list of wall bitmasks in row-major order"""
        return [c.walls for row in self.cells for c in row]

    def center(self):
        """Centre cell coordinates"""
        return self.cols // 2, self.rows // 2

    def __iter__(self):
        for row in self.cells:
            yield from row

    def __repr__(self):
        return f"MazeGrid({self.cols}x{self.rows})"


def carve_passage(grid, ax, ay, bx, by):
    """Carve a passage between two adjacent cells"""
    bits = DIR_TO_BITS.get((bx - ax, by - ay))
    a = grid.cell(ax, ay)
    b = grid.cell(bx, by)
    if bits is None or a is None or b is None:
        return False
    wall_bit, opp_bit = bits
    a.remove_wall(wall_bit)
    b.remove_wall(opp_bit)
    return True


def is_open_between(grid, ax, ay, bx, by):
    """Check if passage is open between two adjacent cells"""
    bits = DIR_TO_BITS.get((bx - ax, by - ay))
    a = grid.cell(ax, ay)
    if bits is None or a is None or not grid.in_bounds(bx, by):
        return False
    return not a.has_wall(bits[0])


def neighbors_open(grid, x, y):
    """Get list of open neighbor cells"""
    res = []
    for dx, dy, _, _ in DIRS:
        if is_open_between(grid, x, y, x + dx, y + dy):
            res.append((x + dx, y + dy))
    return res


def reachable_cells(grid, start):
    """BFS over open passages, returns the set of reachable cells"""
    seen = {start}
    q = deque([start])
    while q:
        x, y = q.popleft()
        for n in neighbors_open(grid, x, y):
            if n not in seen:
                seen.add(n)
                q.append(n)
    return seen


def passage_count(grid):
    """Number of open passages between adjacent cells"""
    count = 0
    for cell in grid:
        if not cell.east and grid.in_bounds(cell.x + 1, cell.y):
            count += 1
        if not cell.south and grid.in_bounds(cell.x, cell.y + 1):
            count += 1
    return count


# ========== MOVE VALIDATION ==========

def _in_play_area(maze_size, x, y):
    return 0.5 <= x < maze_size + 0.5 and 0.5 <= y < maze_size + 0.5


def _wall_check(grid, from_cell, to_cell):
    """Single-axis one-cell crossing through the source cell's wall"""
    fx, fy = from_cell
    tx, ty = to_cell
    dx, dy = tx - fx, ty - fy
    if (dx, dy) not in DIR_TO_BITS:
        return False
    source = grid.cell(fx, fy)
    if source is None:
        return False
    wall_bit, _ = DIR_TO_BITS[(dx, dy)]
    return not source.has_wall(wall_bit)


def is_valid_move(grid, maze_size, from_pos, to_pos):
    """
    Check a proposed player step

    Args:
        grid: MazeGrid
        maze_size: Side length of the maze
        from_pos, to_pos: (x, y) positions in cell-fraction units

    Returns:
        True if the target is inside the play area, exactly one cell away
        along one axis and the source cell has no wall on that side
    """
    if not _in_play_area(maze_size, to_pos[0], to_pos[1]):
        return False
    return _wall_check(grid, cell_of(*from_pos), cell_of(*to_pos))


def is_valid_enemy_move(grid, maze_size, from_pos, to_pos):
    """
    Check a continuous enemy step

    Movement inside a cell is always allowed; crossing into another cell
    uses the same wall test as the player.
    """
    if not _in_play_area(maze_size, to_pos[0], to_pos[1]):
        return False
    from_cell = cell_of(*from_pos)
    to_cell = cell_of(*to_pos)
    if from_cell == to_cell:
        return True
    return _wall_check(grid, from_cell, to_cell)
