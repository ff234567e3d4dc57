"""
Game entities - player, enemies, items, particles and their placement
"""

from .player import Player, PlayerAnimation
from .enemy import Enemy
from .collectible import Collectible, PowerUp, powerup_label
from .particle import GameEvent, Particle, ParticleSystem
from .spawner import place_enemies, place_collectibles

__all__ = ['Player', 'PlayerAnimation', 'Enemy', 'Collectible', 'PowerUp', 'powerup_label',
           'GameEvent', 'Particle', 'ParticleSystem', 'place_enemies', 'place_collectibles']
