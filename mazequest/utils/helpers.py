"""
Helper utility functions for Maze Quest
"""

import math


def clamp(value, min_value, max_value):
    """Clamp a value between min and max"""
    return max(min_value, min(value, max_value))


def distance(x1, y1, x2, y2):
    """Calculate Euclidean distance between two points"""
    return math.sqrt((x2 - x1) ** 2 + (y2 - y1) ** 2)


def cell_of(x, y):
    """Grid cell containing a cell-fraction position"""
    return int(math.floor(x)), int(math.floor(y))


def ease_out_cubic(t):
    """Decelerating easing curve (0-1)"""
    return 1 - (1 - t) ** 3


def pulse(time, frequency=1.0):
    """Generate a pulsing value (0-1) over time"""
    return (math.sin(time * frequency * math.pi * 2) + 1) / 2


def format_time(seconds):
    """Format elapsed seconds the way the HUD shows them"""
    return f"{int(seconds)}s"


def format_score(score):
    """Format score with thousands separator"""
    return f"{score:,}"
