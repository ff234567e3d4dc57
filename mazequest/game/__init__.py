"""
Game state, per-frame simulation and level progression
"""

from .game_state import GameState, ScheduledEvent
from .camera import Camera
from .collision import CollisionHandler
from .level_manager import LevelManager
from .simulation import Simulation
from .hud import hud_snapshot

__all__ = ['GameState', 'ScheduledEvent', 'Camera', 'CollisionHandler',
           'LevelManager', 'Simulation', 'hud_snapshot']
