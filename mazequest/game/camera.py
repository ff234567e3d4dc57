"""
Camera - smoothly follows the player's rendered position
"""

from mazequest.utils.constants import CELL_SIZE, CAMERA_SMOOTHING


class Camera:
    """
    Camera position in pixels, centred on the player
    """
    def __init__(self, cell_size=CELL_SIZE, smoothing=CAMERA_SMOOTHING):
        self.cell_size = cell_size
        self.smoothing = smoothing
        self.x = 0.0
        self.y = 0.0
        self.target_x = 0.0
        self.target_y = 0.0

    def to_pixels(self, x, y):
        """Convert a cell-fraction position to camera pixel coordinates"""
        return (x - 0.5) * self.cell_size, (y - 0.5) * self.cell_size

    def follow(self, x, y):
        """Set the target to a cell-fraction position"""
        self.target_x, self.target_y = self.to_pixels(x, y)

    def snap(self, x, y):
        """Move both position and target to a cell-fraction position"""
        self.follow(x, y)
        self.x = self.target_x
        self.y = self.target_y

    def update(self):
        """Ease toward the target by the smoothing factor"""
        self.x += (self.target_x - self.x) * self.smoothing
        self.y += (self.target_y - self.y) * self.smoothing

    def __repr__(self):
        return f"Camera(pos=({self.x:.1f},{self.y:.1f}), target=({self.target_x:.1f},{self.target_y:.1f}))"
