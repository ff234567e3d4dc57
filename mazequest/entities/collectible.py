"""
Collectible items and power-ups
"""

from mazequest.utils.colors import COLOR_KEY, COLOR_TREASURE, COLOR_POWERUP
from mazequest.utils.constants import KEY_SCORE, TREASURE_SCORE, POWERUP_DURATION
from mazequest.utils.helpers import cell_of


class Collectible:
    """
    Key or treasure lying in a cell
    """
    SCORES = {
        'key': KEY_SCORE,
        'treasure': TREASURE_SCORE,
    }

    def __init__(self, x, y, item_type):
        """
        Args:
            x, y: Cell-centre position
            item_type: 'key' or 'treasure'
        """
        if item_type not in self.SCORES:
            raise ValueError(f"unknown collectible type: {item_type!r}")
        self.x = x
        self.y = y
        self.type = item_type
        self.collected = False

    @property
    def cell(self):
        return cell_of(self.x, self.y)

    @property
    def score(self):
        return self.SCORES[self.type]

    def get_color(self):
        return COLOR_KEY if self.type == 'key' else COLOR_TREASURE

    def is_at_cell(self, cx, cy):
        """Check if item is in the given cell and not collected"""
        return not self.collected and self.cell == (cx, cy)

    def collect(self):
        """Mark collected, returns False if it already was"""
        if self.collected:
            return False
        self.collected = True
        return True

    def __repr__(self):
        return f"Collectible(pos=({self.x},{self.y}), type={self.type}, collected={self.collected})"


class PowerUp:
    """
    Temporary modifier picked up from a cell
    """
    NAMES = {
        'speed': 'Speed Boost',
        'ghost': 'Ghost Mode',
        'freeze': 'Freeze Enemies',
    }

    def __init__(self, x, y, powerup_type, duration=POWERUP_DURATION):
        """
        Args:
            x, y: Cell-centre position
            powerup_type: 'speed', 'ghost' or 'freeze'
            duration: Effect duration in seconds
        """
        if powerup_type not in self.NAMES:
            raise ValueError(f"unknown power-up type: {powerup_type!r}")
        self.x = x
        self.y = y
        self.type = powerup_type
        self.duration = duration
        self.collected = False

    @property
    def cell(self):
        return cell_of(self.x, self.y)

    def get_name(self):
        """Get human-readable name"""
        return self.NAMES[self.type]

    def get_color(self):
        return COLOR_POWERUP

    def is_at_cell(self, cx, cy):
        return not self.collected and self.cell == (cx, cy)

    def collect(self):
        if self.collected:
            return False
        self.collected = True
        return True

    def __repr__(self):
        return f"PowerUp(pos=({self.x},{self.y}), type={self.type}, collected={self.collected})"


def powerup_label(powerup_type):
    """Display label for an active power-up type, '' for none"""
    if powerup_type is None:
        return ''
    return PowerUp.NAMES.get(powerup_type, '')
