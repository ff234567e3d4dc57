"""
Simulation - per-frame update of player, enemies, power-ups and the exit
"""

import logging
from mazequest.entities.particle import GameEvent
from mazequest.game.collision import CollisionHandler
from mazequest.game.level_manager import LevelManager
from mazequest.maze.maze_core import is_valid_move
from mazequest.utils.constants import (
    DIRECTION_VECTORS, MOVE_STEP, MOVE_STEP_SPEED, PLAYER_START,
    CATCH_PENALTY, WIN_SCORE, WIN_DELAY_TICKS, SHAKE_TICKS, TICK_SECONDS,
    EVENT_MOVE, EVENT_ARRIVE, EVENT_CATCH, EVENT_WIN
)
from mazequest.utils.helpers import distance

logger = logging.getLogger(__name__)

ACTION_NEXT_LEVEL = 'next_level'


class Simulation:
    """
    Advances a GameState one fixed tick at a time

    tick() is called once per frame; move requests arrive between ticks from
    the input layer. Nothing here draws: effects are queued on state.events.
    """
    def __init__(self, state, level_manager=None, collision_handler=None):
        """
        Args:
            state: GameState to drive
            level_manager: LevelManager used for level transitions
            collision_handler: CollisionHandler for catches and pickups
        """
        self.state = state
        self.level_manager = level_manager or LevelManager()
        self.collision = collision_handler or CollisionHandler()

    # ========== INPUT ==========

    def request_move(self, direction):
        """
        Move one cell in a named direction

        Args:
            direction: 'up', 'down', 'left' or 'right'

        Returns:
            True if the move was accepted
        """
        if direction not in DIRECTION_VECTORS:
            raise ValueError(f"unknown direction: {direction!r}")
        dx, dy = DIRECTION_VECTORS[direction]
        return self.try_move(dx, dy)

    def try_move_held(self, held):
        """
        Move using held-direction flags

        The flags are summed into one proposed step; opposite or diagonal
        combinations never pass validation.

        Args:
            held: Mapping of direction name -> bool
        """
        dx = dy = 0
        for direction, pressed in held.items():
            if pressed and direction in DIRECTION_VECTORS:
                vx, vy = DIRECTION_VECTORS[direction]
                dx += vx
                dy += vy
        if dx == 0 and dy == 0:
            return False
        return self.try_move(dx, dy)

    def try_move(self, dx, dy):
        """
        Try to move the player by (dx, dy) cells

        Returns:
            True if the move was committed
        """
        state = self.state
        player = state.player
        if state.game_over or player.is_moving():
            return False

        new_x, new_y = player.x + dx, player.y + dy
        if not is_valid_move(state.maze, state.maze_size, (player.x, player.y), (new_x, new_y)):
            return False

        state.notify(GameEvent(EVENT_MOVE, player.x, player.y))
        player.move_to(new_x, new_y)
        state.mark_visited(player.cell)
        self.collision.collect_items(state)
        return True

    # ========== TICK ==========

    def tick(self):
        """Run one simulation step"""
        state = self.state
        state.tick += 1

        self._run_scheduled()
        if state.shake_ticks > 0:
            state.shake_ticks -= 1

        self._update_player()
        self._update_enemies()
        state.particles.update()
        self._update_powerup()
        self._update_exit()

        if not state.game_over:
            state.elapsed_ticks += 1

    def _run_scheduled(self):
        for event in self.state.pop_due_events():
            if event.action == ACTION_NEXT_LEVEL:
                # Stale if something already restarted the level
                if self.state.game_over:
                    self.level_manager.next_level(self.state)
            else:
                logger.warning("Unknown scheduled action %r", event.action)

    def _update_player(self):
        """Advance the move animation and let the camera follow"""
        state = self.state
        player = state.player
        animation = player.animation

        if animation.moving:
            step = MOVE_STEP_SPEED if state.has_powerup('speed') else MOVE_STEP
            if animation.update(step):
                state.notify(GameEvent(EVENT_ARRIVE, player.x, player.y))
            state.camera.follow(animation.x, animation.y)

        state.camera.update()

    def _update_enemies(self):
        """Move every enemy and resolve catches"""
        state = self.state
        if state.has_powerup('freeze'):
            return

        for enemy in state.enemies:
            enemy.update(state.maze, state.maze_size, state.rng)

            if state.game_over or state.has_powerup('ghost'):
                continue
            if self.collision.is_caught(state.player, enemy):
                self._catch_player(enemy)

    def _catch_player(self, enemy):
        """Send the player back to the start and take the penalty"""
        state = self.state
        state.player.reset_position(*PLAYER_START)
        state.camera.follow(*PLAYER_START)
        state.add_score(-CATCH_PENALTY)
        state.shake_ticks = SHAKE_TICKS
        state.notify(GameEvent(EVENT_CATCH, state.player.x, state.player.y))
        logger.debug("Caught by %r, score now %d", enemy, state.score)

    def _update_powerup(self):
        state = self.state
        if state.active_powerup is None:
            return
        state.powerup_timer = max(0.0, state.powerup_timer - TICK_SECONDS)
        if state.powerup_timer <= 0:
            state.active_powerup = None

    def check_exit(self):
        """
        Check if the player reached an unlocked exit

        Returns:
            True when within half a cell of the exit holding every key
        """
        state = self.state
        ex, ey = state.exit_pos
        dist = distance(state.player.x, state.player.y, ex, ey)
        return dist < 0.5 and state.exit_unlocked

    def _update_exit(self):
        state = self.state
        if state.game_over or not self.check_exit():
            return

        state.game_over = True
        state.add_score(WIN_SCORE)
        ex, ey = state.exit_pos
        state.notify(GameEvent(EVENT_WIN, ex, ey))
        state.schedule(WIN_DELAY_TICKS, ACTION_NEXT_LEVEL)
        logger.info("Level %d complete in %ds, score %d",
                    state.level, state.elapsed_seconds, state.score)

    # ========== OUTPUT ==========

    def drain_events(self):
        """Return and clear pending notifications"""
        events = self.state.events
        self.state.events = []
        return events

    def __repr__(self):
        return f"Simulation({self.state!r})"
