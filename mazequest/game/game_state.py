"""
Game State - everything the simulation loop owns for one running game
"""

from mazequest.game.camera import Camera
from mazequest.utils.constants import FPS
from mazequest.maze.difficulty import key_count_for_level


class ScheduledEvent:
    """
    Deferred action due at a simulation tick
    """
    __slots__ = ('due_tick', 'action')

    def __init__(self, due_tick, action):
        self.due_tick = due_tick
        self.action = action

    def __repr__(self):
        return f"ScheduledEvent({self.action!r} at tick {self.due_tick})"


class GameState:
    """
    Mutable state of one game

    Built by LevelManager and mutated only by Simulation; renderers and the
    HUD read it.
    """
    def __init__(self, rng, player, particles):
        """
        Args:
            rng: random.Random shared by generation, AI and effects
            player: Player, kept across levels
            particles: ParticleSystem
        """
        self.rng = rng
        self.player = player
        self.particles = particles
        self.camera = Camera()

        # Level data
        self.level = 1
        self.maze_size = 0
        self.maze = None
        self.exit_pos = (0.5, 0.5)
        self.enemies = []
        self.collectibles = []
        self.powerups = []
        self.visited = set()

        # Counters
        self.score = 0
        self.keys = 0
        self.treasures = 0

        # Power-up
        self.active_powerup = None
        self.powerup_timer = 0.0

        # Flow
        self.game_over = False
        self.tick = 0
        self.elapsed_ticks = 0
        self.shake_ticks = 0
        self.scheduled = []
        self.events = []

    # ========== DERIVED VALUES ==========

    @property
    def keys_required(self):
        return key_count_for_level(self.level)

    @property
    def exit_unlocked(self):
        return self.keys == self.keys_required

    @property
    def elapsed_seconds(self):
        return self.elapsed_ticks // FPS

    @property
    def progress(self):
        """Exploration progress in percent (0-100)"""
        total = self.maze_size * self.maze_size
        if total == 0:
            return 0.0
        return min(len(self.visited) / total * 100, 100.0)

    def has_powerup(self, powerup_type):
        return self.active_powerup == powerup_type

    # ========== MUTATORS ==========

    def add_score(self, amount):
        """Change score, never letting it drop below zero"""
        self.score = max(0, self.score + amount)
        return self.score

    def mark_visited(self, cell):
        self.visited.add(cell)

    def schedule(self, delay_ticks, action):
        """Queue an action to run delay_ticks from now"""
        event = ScheduledEvent(self.tick + delay_ticks, action)
        self.scheduled.append(event)
        return event

    def pop_due_events(self):
        """Remove and return scheduled events whose tick has come"""
        due = [e for e in self.scheduled if e.due_tick <= self.tick]
        if due:
            self.scheduled = [e for e in self.scheduled if e.due_tick > self.tick]
        return due

    def notify(self, event):
        self.events.append(event)

    def __repr__(self):
        return (f"GameState(level={self.level}, size={self.maze_size}, score={self.score}, "
                f"keys={self.keys}/{self.keys_required}, game_over={self.game_over})")
