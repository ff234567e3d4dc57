"""
Particle Effects System
Particles are plain data in cell-fraction units; the renderer only reads them
"""

from mazequest.utils.colors import (
    COLOR_PARTICLE_MOVE, COLOR_PARTICLE_KEY, COLOR_PARTICLE_TREASURE,
    COLOR_PARTICLE_POWERUP, COLOR_PARTICLE_CATCH, COLOR_PARTICLE_WIN
)
from mazequest.utils.constants import (
    EVENT_MOVE, EVENT_ARRIVE, EVENT_KEY, EVENT_TREASURE, EVENT_POWERUP,
    EVENT_CATCH, EVENT_WIN, PARTICLE_COUNTS
)

EVENT_COLORS = {
    EVENT_MOVE: COLOR_PARTICLE_MOVE,
    EVENT_ARRIVE: COLOR_PARTICLE_MOVE,
    EVENT_KEY: COLOR_PARTICLE_KEY,
    EVENT_TREASURE: COLOR_PARTICLE_TREASURE,
    EVENT_POWERUP: COLOR_PARTICLE_POWERUP,
    EVENT_CATCH: COLOR_PARTICLE_CATCH,
    EVENT_WIN: COLOR_PARTICLE_WIN,
}


class GameEvent:
    """
    Notification emitted by the simulation for effects
    """
    __slots__ = ('kind', 'x', 'y', 'count', 'color')

    def __init__(self, kind, x, y, count=None, color=None):
        self.kind = kind
        self.x = x
        self.y = y
        self.count = PARTICLE_COUNTS.get(kind, 0) if count is None else count
        self.color = EVENT_COLORS.get(kind, (255, 255, 255)) if color is None else color

    def __repr__(self):
        return f"GameEvent({self.kind}, ({self.x},{self.y}), count={self.count})"


class Particle:
    """
    Single particle
    """
    def __init__(self, x, y, speed_x, speed_y, color, size, decay):
        """
        Args:
            x, y: Starting position (cell units)
            speed_x, speed_y: Drift per tick
            color: RGB color
            size: Radius in pixels
            decay: Life lost per tick (life starts at 1.0)
        """
        self.x = x
        self.y = y
        self.speed_x = speed_x
        self.speed_y = speed_y
        self.color = color
        self.size = size
        self.life = 1.0
        self.decay = decay

    @property
    def alive(self):
        return self.life > 0

    def update(self):
        """Update particle"""
        self.x += self.speed_x
        self.y += self.speed_y
        self.life = max(0.0, self.life - self.decay)


class ParticleSystem:
    """
    Manages all particles
    """
    def __init__(self, rng):
        """
        Args:
            rng: random.Random used for particle spread
        """
        self.rng = rng
        self.particles = []

    def add_particle(self, particle):
        """Add a particle"""
        self.particles.append(particle)

    def burst(self, x, y, count, color):
        """
        Spawn a burst of particles at a position

        Args:
            x, y: Position in cell units
            count: Number of particles
            color: Particle color
        """
        rng = self.rng
        for _ in range(count):
            self.add_particle(Particle(
                x, y,
                (rng.random() - 0.5) * 0.15,
                (rng.random() - 0.5) * 0.15,
                color,
                rng.random() * 4 + 1,
                rng.random() * 0.02 + 0.01,
            ))

    def emit(self, event):
        """Spawn the burst described by a GameEvent"""
        self.burst(event.x, event.y, event.count, event.color)

    def update(self):
        """Update all particles"""
        for particle in self.particles:
            particle.update()
        self.particles = [p for p in self.particles if p.alive]

    def clear(self):
        """Remove all particles"""
        self.particles.clear()

    def __len__(self):
        return len(self.particles)
