"""
Maze Quest - find the keys, dodge the wanderers, reach the artifact
"""

import argparse
import logging
import time

import pygame

from mazequest import GAME_TITLE, __version__
from mazequest.game.level_manager import LevelManager
from mazequest.game.simulation import Simulation
from mazequest.render.renderer import Renderer
from mazequest.utils.constants import FPS, SCREEN_W, SCREEN_H

logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    pygame.K_UP: 'up',
    pygame.K_w: 'up',
    pygame.K_DOWN: 'down',
    pygame.K_s: 'down',
    pygame.K_LEFT: 'left',
    pygame.K_a: 'left',
    pygame.K_RIGHT: 'right',
    pygame.K_d: 'right',
}


class MazeGame:
    """
    Main game class - owns the window, input and the frame loop
    """
    def __init__(self, seed=None, level=1, fps=FPS):
        pygame.init()
        self.screen = pygame.display.set_mode((SCREEN_W, SCREEN_H), pygame.RESIZABLE)
        pygame.display.set_caption(f"{GAME_TITLE} v{__version__}")

        self.clock = pygame.time.Clock()
        self.fps = fps
        self.running = True

        self.level_manager = LevelManager()
        self.state = self.level_manager.new_game(seed, level=level)
        self.simulation = Simulation(self.state, self.level_manager)
        self.renderer = Renderer()

        # Held direction flags
        self.held = {'up': False, 'down': False, 'left': False, 'right': False}
        self.start_time = time.monotonic()

    def handle_events(self):
        """Handle pygame events"""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key in KEY_DIRECTIONS:
                    self.held[KEY_DIRECTIONS[event.key]] = True
            elif event.type == pygame.KEYUP:
                if event.key in KEY_DIRECTIONS:
                    self.held[KEY_DIRECTIONS[event.key]] = False
            elif event.type == pygame.VIDEORESIZE:
                self.screen = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)

    def update(self):
        """Feed input, advance one tick, hand effects to the particle system"""
        if any(self.held.values()):
            self.simulation.try_move_held(self.held)

        self.simulation.tick()

        for event in self.simulation.drain_events():
            self.state.particles.emit(event)

    def render(self):
        self.renderer.render(self.screen, self.state, time.monotonic() - self.start_time)
        pygame.display.flip()

    def run(self):
        """Main game loop"""
        while self.running:
            self.clock.tick(self.fps)
            self.handle_events()
            self.update()
            self.render()

        logger.info("Quit at level %d with score %d", self.state.level, self.state.score)
        pygame.quit()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description=f"{GAME_TITLE} - maze exploration game")
    parser.add_argument("--seed", type=int, default=None, help="random seed for a repeatable game")
    parser.add_argument("--level", type=int, default=1, help="starting level (default: 1)")
    parser.add_argument("--fps", type=int, default=FPS, help=f"frame rate cap (default: {FPS})")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if args.level < 1:
        raise SystemExit("--level must be at least 1")

    print(f"{GAME_TITLE} v{__version__} (seed={args.seed}, level={args.level})")
    MazeGame(seed=args.seed, level=args.level, fps=args.fps).run()


if __name__ == "__main__":
    main()
