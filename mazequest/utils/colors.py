"""
Color palette for Maze Quest
"""

# Background colors
COLOR_BG = (10, 10, 37)               # Main background
COLOR_PANEL_BG = (12, 12, 30)         # HUD panel

# Maze colors
COLOR_FLOOR = (21, 21, 53)            # Unvisited floor
COLOR_FLOOR_VISITED = (26, 26, 74)    # Visited floor
COLOR_GRID = (40, 40, 75)             # Faint cell grid
COLOR_WALL = (74, 74, 138)            # Maze walls

# UI colors
COLOR_TEXT = (210, 210, 230)
COLOR_TEXT_HIGHLIGHT = (255, 204, 0)
COLOR_TEXT_DIM = (140, 140, 170)

# Entity colors
COLOR_PLAYER = (107, 181, 255)
COLOR_PLAYER_DARK = (74, 143, 214)
COLOR_ENEMY = (255, 107, 107)
COLOR_EYE = (255, 255, 255)
COLOR_PUPIL = (0, 0, 0)
COLOR_SHADOW = (0, 0, 0)

# Exit artifact
COLOR_EXIT_UNLOCKED = (255, 204, 0)
COLOR_EXIT_UNLOCKED_CORE = (255, 170, 0)
COLOR_EXIT_LOCKED = (102, 102, 102)
COLOR_EXIT_LOCKED_CORE = (68, 68, 68)

# Collectibles
COLOR_KEY = (255, 204, 0)
COLOR_TREASURE = (255, 107, 107)
COLOR_POWERUP = (107, 255, 107)

# Particle effects
COLOR_PARTICLE_MOVE = (107, 181, 255)
COLOR_PARTICLE_KEY = (255, 204, 0)
COLOR_PARTICLE_TREASURE = (255, 107, 107)
COLOR_PARTICLE_POWERUP = (107, 255, 107)
COLOR_PARTICLE_CATCH = (255, 107, 107)
COLOR_PARTICLE_WIN = (255, 204, 0)

# Minimap
COLOR_MINIMAP_BG = (20, 20, 50)
COLOR_MINIMAP_CELL = (26, 26, 74)
COLOR_MINIMAP_VISITED = (42, 42, 106)
COLOR_MINIMAP_BORDER = (74, 74, 138)

# Win banner
COLOR_OVERLAY = (10, 10, 37, 190)
