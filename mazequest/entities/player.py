"""
Player entity with logical cell position and eased render position
"""

from mazequest.utils.constants import PLAYER_START, PLAYER_SIZE
from mazequest.utils.helpers import cell_of, clamp, ease_out_cubic


class PlayerAnimation:
    """
    Render-side position that lags the logical position during a move
    """
    def __init__(self, x, y):
        self.x = x
        self.y = y
        self.target_x = x
        self.target_y = y
        self.moving = False
        self.progress = 0.0

    def start(self, target_x, target_y):
        """Begin an eased transition toward a new target"""
        self.target_x = target_x
        self.target_y = target_y
        self.moving = True
        self.progress = 0.0

    def snap(self, x, y):
        """Jump straight to a position, cancelling any transition"""
        self.x = self.target_x = x
        self.y = self.target_y = y
        self.moving = False
        self.progress = 0.0

    def update(self, step):
        """
        Advance the transition

        Args:
            step: Progress added this tick

        Returns:
            True on the tick the transition completes
        """
        if not self.moving:
            return False

        arrived = False
        self.progress = clamp(self.progress + step, 0.0, 1.0)
        if self.progress >= 1.0:
            self.moving = False
            arrived = True

        eased = ease_out_cubic(self.progress)
        self.x += (self.target_x - self.x) * eased
        self.y += (self.target_y - self.y) * eased
        return arrived


class Player:
    """
    Player entity

    x, y is the logical position (cell centre) and changes the moment a move
    is accepted; animation holds the position the renderer draws.
    """
    def __init__(self, x=PLAYER_START[0], y=PLAYER_START[1], size=PLAYER_SIZE):
        self.x = x
        self.y = y
        self.size = size
        self.animation = PlayerAnimation(x, y)
        self.moves = 0

    @property
    def cell(self):
        return cell_of(self.x, self.y)

    @property
    def render_pos(self):
        return self.animation.x, self.animation.y

    def is_moving(self):
        return self.animation.moving

    def move_to(self, x, y):
        """Commit a new logical position and start animating toward it"""
        self.x = x
        self.y = y
        self.moves += 1
        self.animation.start(x, y)

    def reset_position(self, x=PLAYER_START[0], y=PLAYER_START[1]):
        """Reset player to a position without animation"""
        self.x = x
        self.y = y
        self.animation.snap(x, y)

    def __repr__(self):
        return f"Player(pos=({self.x},{self.y}), render=({self.animation.x:.2f},{self.animation.y:.2f}))"
