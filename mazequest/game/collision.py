"""
Collision detection and handling
"""

import logging
from mazequest.entities.particle import GameEvent
from mazequest.utils.constants import (
    CELL_SIZE, EVENT_KEY, EVENT_TREASURE, EVENT_POWERUP
)
from mazequest.utils.helpers import distance

logger = logging.getLogger(__name__)


class CollisionHandler:
    """
    Handles enemy catches and item pickups
    """
    def __init__(self, cell_size=CELL_SIZE):
        self.cell_size = cell_size

    def catch_radius(self, player, enemy):
        """Catch distance in cell units"""
        return (player.size + enemy.size) / self.cell_size

    def is_caught(self, player, enemy):
        """
        Check if an enemy is close enough to catch the player

        Uses the player's logical position, not the rendered one.
        """
        return distance(player.x, player.y, enemy.x, enemy.y) < self.catch_radius(player, enemy)

    def collect_items(self, state):
        """
        Collect everything lying in the player's cell

        Args:
            state: GameState

        Returns:
            Dictionary with pickup results:
            {
                'collectibles': [Collectible, ...],
                'powerups': [PowerUp, ...]
            }
        """
        result = {
            'collectibles': [],
            'powerups': []
        }
        cx, cy = state.player.cell

        for item in state.collectibles:
            if not item.is_at_cell(cx, cy):
                continue
            item.collect()
            if item.type == 'key':
                state.keys += 1
                state.notify(GameEvent(EVENT_KEY, item.x, item.y))
            else:
                state.treasures += 1
                state.notify(GameEvent(EVENT_TREASURE, item.x, item.y))
            state.add_score(item.score)
            result['collectibles'].append(item)
            logger.debug("Collected %s at (%d, %d)", item.type, cx, cy)

        for powerup in state.powerups:
            if not powerup.is_at_cell(cx, cy):
                continue
            powerup.collect()
            state.active_powerup = powerup.type
            state.powerup_timer = powerup.duration
            state.notify(GameEvent(EVENT_POWERUP, powerup.x, powerup.y))
            result['powerups'].append(powerup)
            logger.debug("Activated %s for %.1fs", powerup.get_name(), powerup.duration)

        return result
