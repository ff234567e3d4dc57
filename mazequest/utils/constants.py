"""
Global constants for Maze Quest
"""

# Screen settings
CELL_SIZE = 35
FPS = 60
WALL_THICK = 3
SCREEN_W = 900
SCREEN_H = 640

# HUD panel height
PANEL_H = 70

# Minimap size in pixels
MINIMAP_SIZE = 150

# Wall bit flags
TOP = 1
RIGHT = 2
BOTTOM = 4
LEFT = 8
ALL_WALLS = TOP | RIGHT | BOTTOM | LEFT

# Direction vectors with wall bits: (dx, dy, wall, opposite wall)
DIRS = [
    (0, -1, TOP, BOTTOM),    # north
    (1, 0, RIGHT, LEFT),     # east
    (0, 1, BOTTOM, TOP),     # south
    (-1, 0, LEFT, RIGHT),    # west
]

# Direction to bit mapping
DIR_TO_BITS = {
    (0, -1): (TOP, BOTTOM),
    (1, 0): (RIGHT, LEFT),
    (0, 1): (BOTTOM, TOP),
    (-1, 0): (LEFT, RIGHT),
}

# Input directions
DIRECTION_VECTORS = {
    'up': (0, -1),
    'down': (0, 1),
    'left': (-1, 0),
    'right': (1, 0),
}

# Maze size
MAZE_BASE_SIZE = 15
MAZE_MAX_SIZE = 25

# Player settings
PLAYER_START = (0.5, 0.5)
PLAYER_SIZE = 14
MOVE_STEP = 0.08           # Animation progress per tick
MOVE_STEP_SPEED = 0.16     # With speed power-up
CAMERA_SMOOTHING = 0.1

# Enemy settings
ENEMY_SIZE = 12
ENEMY_SPEED = 0.03         # Cells per tick
ENEMY_TURN_CHANCE = 0.02   # Chance per tick to pick a new heading
ENEMY_SAFE_BOX = 3         # Spawn exclusion box half-width around player

# Items
KEY_SCORE = 50
TREASURE_SCORE = 25
MAX_KEYS = 3
MAX_TREASURES = 10
MAX_POWERUPS = 2
POWERUP_TYPES = ['speed', 'ghost', 'freeze']
POWERUP_DURATION = 10.0    # Seconds

# Scoring
CATCH_PENALTY = 10
WIN_SCORE = 100

# Timing (fixed 60 ticks per second)
TICK_SECONDS = 1.0 / FPS
WIN_DELAY_TICKS = 3 * FPS
SHAKE_TICKS = FPS // 2

# Placement
MAX_PLACEMENT_ATTEMPTS = 1000

# Notification kinds with particle count
EVENT_MOVE = 'move'
EVENT_ARRIVE = 'arrive'
EVENT_KEY = 'key'
EVENT_TREASURE = 'treasure'
EVENT_POWERUP = 'powerup'
EVENT_CATCH = 'catch'
EVENT_WIN = 'win'

PARTICLE_COUNTS = {
    EVENT_MOVE: 8,
    EVENT_ARRIVE: 12,
    EVENT_KEY: 15,
    EVENT_TREASURE: 15,
    EVENT_POWERUP: 20,
    EVENT_CATCH: 20,
    EVENT_WIN: 80,
}
