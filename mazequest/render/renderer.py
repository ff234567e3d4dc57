"""
Renderer - draws the game state with pygame
Only reads state; never changes it
"""

import math
import pygame
from mazequest.render.minimap import Minimap
from mazequest.game.hud import hud_snapshot
from mazequest.utils.colors import (
    COLOR_BG, COLOR_PANEL_BG, COLOR_FLOOR, COLOR_FLOOR_VISITED, COLOR_GRID, COLOR_WALL,
    COLOR_TEXT, COLOR_TEXT_HIGHLIGHT, COLOR_TEXT_DIM,
    COLOR_PLAYER, COLOR_PLAYER_DARK, COLOR_EYE, COLOR_PUPIL, COLOR_SHADOW,
    COLOR_EXIT_UNLOCKED, COLOR_EXIT_UNLOCKED_CORE, COLOR_EXIT_LOCKED, COLOR_EXIT_LOCKED_CORE,
    COLOR_OVERLAY
)
from mazequest.utils.constants import CELL_SIZE, WALL_THICK, PANEL_H
from mazequest.utils.helpers import pulse


class Renderer:
    """
    Camera-centred top-down view, particles, minimap and HUD panel
    """
    def __init__(self, cell_size=CELL_SIZE):
        self.cell_size = cell_size
        self.minimap = Minimap()

        pygame.font.init()
        self.font_small = pygame.font.SysFont("consolas", 14)
        self.font_medium = pygame.font.SysFont("consolas", 18)
        self.font_large = pygame.font.SysFont("consolas", 36, bold=True)

    def render(self, screen, state, time_s):
        """
        Draw one frame

        Args:
            screen: pygame display surface
            state: GameState
            time_s: Wall-clock seconds, only used for pulsing effects
        """
        screen_w, screen_h = screen.get_size()
        view_h = screen_h - PANEL_H
        screen.fill(COLOR_BG)

        # Screen shake after a catch
        shake_x = shake_y = 0
        if state.shake_ticks > 0:
            shake_x = int(math.sin(state.tick * 1.7) * 4)
            shake_y = int(math.cos(state.tick * 2.3) * 4)

        offset_x = screen_w / 2 - state.camera.x + shake_x
        offset_y = view_h / 2 - state.camera.y + shake_y

        view = screen.subsurface((0, 0, screen_w, view_h))
        self._draw_maze(view, state, offset_x, offset_y)
        self._draw_items(view, state, offset_x, offset_y)
        self._draw_exit(view, state, offset_x, offset_y, time_s)
        self._draw_enemies(view, state, offset_x, offset_y)
        self._draw_player(view, state, offset_x, offset_y)
        self._draw_particles(view, state, offset_x, offset_y)

        self.minimap.render(screen, state)
        self._draw_hud(screen, state, view_h, screen_w)

        if state.game_over:
            self._draw_win_banner(screen, state, screen_w, view_h)

    # ========== WORLD ==========

    def _to_screen(self, x, y, offset_x, offset_y):
        """Cell-fraction position to screen pixels (centre of a cell at n+0.5)"""
        return int(offset_x + x * self.cell_size), int(offset_y + y * self.cell_size)

    def _draw_maze(self, screen, state, offset_x, offset_y):
        """Draw visible cells and their walls"""
        cs = self.cell_size
        screen_w, screen_h = screen.get_size()
        camera = state.camera

        start_x = max(0, int((camera.x - screen_w / 2) // cs) - 1)
        start_y = max(0, int((camera.y - screen_h / 2) // cs) - 1)
        end_x = min(state.maze_size, int(math.ceil((camera.x + screen_w / 2) / cs)) + 1)
        end_y = min(state.maze_size, int(math.ceil((camera.y + screen_h / 2) / cs)) + 1)

        for y in range(start_y, end_y):
            for x in range(start_x, end_x):
                cell = state.maze.cells[y][x]
                x0 = int(offset_x + x * cs)
                y0 = int(offset_y + y * cs)
                x1 = x0 + cs
                y1 = y0 + cs

                floor = COLOR_FLOOR_VISITED if (x, y) in state.visited else COLOR_FLOOR
                pygame.draw.rect(screen, floor, (x0, y0, cs, cs))
                pygame.draw.rect(screen, COLOR_GRID, (x0, y0, cs, cs), 1)

                if cell.north:
                    pygame.draw.line(screen, COLOR_WALL, (x0, y0), (x1, y0), WALL_THICK)
                if cell.east:
                    pygame.draw.line(screen, COLOR_WALL, (x1, y0), (x1, y1), WALL_THICK)
                if cell.south:
                    pygame.draw.line(screen, COLOR_WALL, (x0, y1), (x1, y1), WALL_THICK)
                if cell.west:
                    pygame.draw.line(screen, COLOR_WALL, (x0, y0), (x0, y1), WALL_THICK)

    def _draw_items(self, screen, state, offset_x, offset_y):
        """Draw uncollected keys, treasures and power-ups"""
        radius = self.cell_size // 5
        for item in state.collectibles:
            if item.collected:
                continue
            cx, cy = self._to_screen(item.x, item.y, offset_x, offset_y)
            pygame.draw.circle(screen, item.get_color(), (cx, cy), radius)
            pygame.draw.circle(screen, COLOR_SHADOW if item.type == 'key' else COLOR_EYE,
                               (cx, cy), max(2, radius // 3))

        for powerup in state.powerups:
            if powerup.collected:
                continue
            cx, cy = self._to_screen(powerup.x, powerup.y, offset_x, offset_y)
            label = self.font_small.render(powerup.type[0].upper(), True, COLOR_SHADOW)
            pygame.draw.circle(screen, powerup.get_color(), (cx, cy), radius + 2)
            screen.blit(label, label.get_rect(center=(cx, cy)))

    def _draw_exit(self, screen, state, offset_x, offset_y, time_s):
        """Draw the pulsing exit artifact, gold when unlocked"""
        cx, cy = self._to_screen(state.exit_pos[0], state.exit_pos[1], offset_x, offset_y)
        p = pulse(time_s, frequency=1000 / (300 * 2 * math.pi))
        unlocked = state.exit_unlocked
        glow_color = COLOR_EXIT_UNLOCKED if unlocked else COLOR_EXIT_LOCKED
        core_color = COLOR_EXIT_UNLOCKED_CORE if unlocked else COLOR_EXIT_LOCKED_CORE

        glow_r = int(self.cell_size * (0.7 + p * 0.3))
        glow = pygame.Surface((glow_r * 2, glow_r * 2), pygame.SRCALPHA)
        pygame.draw.circle(glow, (*glow_color, int(80 + p * 60)), (glow_r, glow_r), glow_r)
        screen.blit(glow, (cx - glow_r, cy - glow_r))

        pygame.draw.circle(screen, glow_color, (cx, cy), self.cell_size // 3)
        pygame.draw.circle(screen, core_color, (cx, cy), self.cell_size // 6)

    def _draw_enemies(self, screen, state, offset_x, offset_y):
        for enemy in state.enemies:
            cx, cy = self._to_screen(enemy.x, enemy.y, offset_x, offset_y)
            pygame.draw.circle(screen, COLOR_SHADOW, (cx + 2, cy + 3), enemy.size)
            pygame.draw.circle(screen, enemy.color, (cx, cy), enemy.size)

            # Eyes look along the heading
            lx = int(math.cos(enemy.direction) * 2)
            ly = int(math.sin(enemy.direction) * 2)
            for side in (-4, 4):
                pygame.draw.circle(screen, COLOR_EYE, (cx + side, cy - 2), 3)
                pygame.draw.circle(screen, COLOR_PUPIL, (cx + side + lx, cy - 2 + ly), 1)

    def _draw_player(self, screen, state, offset_x, offset_y):
        player = state.player
        rx, ry = player.render_pos
        cx, cy = self._to_screen(rx, ry, offset_x, offset_y)

        pygame.draw.circle(screen, COLOR_SHADOW, (cx + 2, cy + 3), player.size)
        pygame.draw.circle(screen, COLOR_PLAYER_DARK, (cx, cy), player.size)
        pygame.draw.circle(screen, COLOR_PLAYER, (cx - 2, cy - 2), player.size - 3)
        if state.has_powerup('ghost'):
            pygame.draw.circle(screen, COLOR_EYE, (cx, cy), player.size + 3, 1)

        for side in (-4, 4):
            pygame.draw.circle(screen, COLOR_EYE, (cx + side, cy - 3), 3)
            pygame.draw.circle(screen, COLOR_PUPIL, (cx + side, cy - 3), 1)

    def _draw_particles(self, screen, state, offset_x, offset_y):
        """Draw particles faded by remaining life"""
        for particle in state.particles.particles:
            cx, cy = self._to_screen(particle.x, particle.y, offset_x, offset_y)
            r = max(1, int(particle.size))
            alpha = max(0, min(255, int(255 * particle.life)))
            surf = pygame.Surface((r * 2, r * 2), pygame.SRCALPHA)
            pygame.draw.circle(surf, (*particle.color[:3], alpha), (r, r), r)
            screen.blit(surf, (cx - r, cy - r))

    # ========== PANEL ==========

    def _draw_hud(self, screen, state, panel_y, screen_w):
        """Draw HUD panel below the maze view"""
        hud = hud_snapshot(state)
        pygame.draw.rect(screen, COLOR_PANEL_BG, (0, panel_y, screen_w, PANEL_H))

        left = [
            f"Level {hud['level']}",
            f"Score {hud['score_text']}",
            f"Time {hud['elapsed_text']}",
        ]
        mid = [
            f"Keys {hud['keys']}/{hud['keys_required']}",
            f"Treasures {hud['treasures']}",
            f"Pos {hud['position_text']}",
        ]
        for i, text in enumerate(left):
            surf = self.font_medium.render(text, True, COLOR_TEXT)
            screen.blit(surf, (12, panel_y + 4 + i * 21))
        for i, text in enumerate(mid):
            color = COLOR_TEXT_HIGHLIGHT if i == 0 and hud['exit_unlocked'] else COLOR_TEXT
            surf = self.font_medium.render(text, True, color)
            screen.blit(surf, (200, panel_y + 4 + i * 21))

        if hud['powerup']:
            text = f"{hud['powerup_label']} {hud['powerup_remaining']:.1f}s"
            surf = self.font_medium.render(text, True, COLOR_TEXT_HIGHLIGHT)
            screen.blit(surf, (420, panel_y + 4))

        # Exploration progress bar
        bar_x, bar_y, bar_w, bar_h = 420, panel_y + 40, screen_w - 440, 14
        pygame.draw.rect(screen, COLOR_GRID, (bar_x, bar_y, bar_w, bar_h), border_radius=4)
        fill = int(bar_w * hud['progress'] / 100)
        if fill > 0:
            pygame.draw.rect(screen, COLOR_PLAYER, (bar_x, bar_y, fill, bar_h), border_radius=4)
        label = self.font_small.render(f"Explored {hud['progress']:.0f}%", True, COLOR_TEXT_DIM)
        screen.blit(label, (bar_x, bar_y - 17))

    def _draw_win_banner(self, screen, state, screen_w, view_h):
        overlay = pygame.Surface((screen_w, 120), pygame.SRCALPHA)
        overlay.fill(COLOR_OVERLAY)
        top = view_h // 2 - 60
        screen.blit(overlay, (0, top))

        title = self.font_large.render("Artifact found!", True, COLOR_TEXT_HIGHLIGHT)
        sub = self.font_medium.render(f"Entering level {state.level + 1}...", True, COLOR_TEXT)
        screen.blit(title, title.get_rect(center=(screen_w // 2, top + 42)))
        screen.blit(sub, sub.get_rect(center=(screen_w // 2, top + 88)))
