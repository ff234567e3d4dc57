"""
pygame front end - world view, minimap and HUD panel
"""

from .renderer import Renderer
from .minimap import Minimap, build_minimap_array

__all__ = ['Renderer', 'Minimap', 'build_minimap_array']
