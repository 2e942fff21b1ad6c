"""Pygame drawing of simulation snapshots. Reads snapshots, never mutates state."""

from __future__ import annotations

import pygame

from .config import (
    CANNON_COLOR,
    EXPLOSION_COLORS,
    HUD_AMMO_COLOR,
    HUD_HIGH_COLOR,
    HUD_PANEL,
    HUD_SCORE_COLOR,
    HUD_TEXT_COLOR,
    MISSILE_COLOR,
    MISSILE_FLAME_COLOR,
    SKY_HORIZON_LIGHTEN,
    TRACK_COLOR,
    TURRET_DETAIL_COLOR,
    SimulationConfig,
)
from .entities import Explosion, Missile, Obstacle, ObstacleKind, Vehicle
from .environment import EnvironmentClock, Palette
from .session import SessionState
from .simulation import Snapshot
from .utils import Color, scale_color, vertical_gradient


class Renderer:
    def __init__(self, config: SimulationConfig) -> None:
        self.config = config
        self.font_big = pygame.font.SysFont(None, 48)
        self.font_small = pygame.font.SysFont(None, 24)
        self._sky_key: Color | None = None
        self._sky_surface: pygame.Surface | None = None

    def _sky(self, sky: Color) -> pygame.Surface:
        # Rebuilt only when the blended sky color actually changes
        if self._sky_surface is None or self._sky_key != sky:
            w, h = self.config.width, int(self.config.ground_y)
            arr = vertical_gradient(sky, scale_color(sky, SKY_HORIZON_LIGHTEN), w, h)
            self._sky_surface = pygame.surfarray.make_surface(arr)
            self._sky_key = sky
        return self._sky_surface

    def draw(self, surf: pygame.Surface, snap: Snapshot) -> None:
        pal = snap.palette
        self.draw_background(surf, snap, pal)
        self.draw_vehicle(surf, snap.vehicle, pal)
        for obs in snap.obstacles:
            self.draw_obstacle(surf, obs, pal)
        for m in snap.missiles:
            self.draw_missile(surf, m)
        for e in snap.explosions:
            self.draw_explosion(surf, e)
        self.draw_hud(surf, snap)

    def draw_background(self, surf: pygame.Surface, snap: Snapshot, pal: Palette) -> None:
        cfg = self.config
        ground_y = int(cfg.ground_y)
        surf.blit(self._sky(pal.sky), (0, 0))

        # Sun or moon on an elliptical orbit
        clock = EnvironmentClock(cfg.sky_cycle_duration, 0.0, 0.0, sky_phase=snap.sky_phase)
        cx, cy, is_sun = clock.celestial_position(cfg.width, cfg.height)
        if is_sun:
            pygame.draw.rect(surf, pal.sun, pygame.Rect(int(cx) - 15, int(cy) - 15, 30, 30))
        else:
            pygame.draw.rect(surf, pal.sun, pygame.Rect(int(cx) - 12, int(cy) - 12, 24, 24))
            pygame.draw.rect(surf, pal.sky, pygame.Rect(int(cx) - 5, int(cy) - 5, 4, 4))
            pygame.draw.rect(surf, pal.sky, pygame.Rect(int(cx) + 2, int(cy) + 2, 3, 3))

        # Parallax mountains, then trees
        mountain_y = ground_y - 100
        span = cfg.width + 300
        for i in range(4):
            x = int((snap.mountain_offset + i * 300) % span) - 150
            pygame.draw.rect(surf, pal.mountain, pygame.Rect(x, mountain_y, 200, 100))
            pygame.draw.rect(surf, pal.mountain, pygame.Rect(x + 50, mountain_y - 30, 100, 130))
        tree_y = ground_y - 40
        span = cfg.width + 150
        for i in range(7):
            x = int((snap.tree_offset + i * 150) % span) - 75
            pygame.draw.rect(surf, pal.tree, pygame.Rect(x + 20, tree_y, 10, 40))
            pygame.draw.rect(surf, pal.tree, pygame.Rect(x + 10, tree_y - 20, 30, 20))

        pygame.draw.rect(surf, pal.ground, pygame.Rect(0, ground_y, cfg.width, cfg.ground_offset))
        for x in range(0, cfg.width, 20):
            pygame.draw.rect(surf, pal.ground_detail, pygame.Rect(x, ground_y + 10, 15, 5))

    def draw_vehicle(self, surf: pygame.Surface, v: Vehicle, pal: Palette) -> None:
        x, y, w, h = (int(c) for c in v.rect)
        pygame.draw.rect(surf, pal.tank, pygame.Rect(x, y, w, h))
        pygame.draw.rect(surf, TRACK_COLOR, pygame.Rect(x - 2, y + h - 5, w + 4, 5))
        pygame.draw.rect(surf, pal.tank, pygame.Rect(x + w // 4, y - 8, w // 2, 12))
        pygame.draw.rect(surf, CANNON_COLOR, pygame.Rect(x + 3 * w // 4, y - 2, 15, 4))

    def draw_obstacle(self, surf: pygame.Surface, obs: Obstacle, pal: Palette) -> None:
        x, y, w, h = (int(c) for c in obs.rect)
        color = pal.obstacle
        kind = obs.kind
        if kind is ObstacleKind.WALL:
            pygame.draw.rect(surf, color, pygame.Rect(x, y, w, h))
        elif kind in (ObstacleKind.LIGHT_TANK, ObstacleKind.HEAVY_TANK):
            inset = 5 if kind is ObstacleKind.LIGHT_TANK else 8
            pygame.draw.rect(surf, color, pygame.Rect(x, y, w, h))
            pygame.draw.rect(surf, TURRET_DETAIL_COLOR, pygame.Rect(x + inset, y - inset, w - 2 * inset, inset + 3))
        elif kind is ObstacleKind.INFANTRY:
            soldiers = max(1, w // 8)
            for i in range(soldiers):
                pygame.draw.rect(surf, color, pygame.Rect(x + i * 8, y, 6, h))
        elif kind is ObstacleKind.JET:
            pygame.draw.rect(surf, color, pygame.Rect(x, y + h // 2 - 3, w, 6))
            pygame.draw.rect(surf, color, pygame.Rect(x + w // 3, y, w // 3, h))
        elif kind is ObstacleKind.HELICOPTER:
            pygame.draw.rect(surf, color, pygame.Rect(x, y + h // 2 - 4, w, 8))
            pygame.draw.rect(surf, color, pygame.Rect(x + w // 2 - 2, y, 4, h // 2))
            pygame.draw.rect(surf, color, pygame.Rect(x - 4, y, w + 8, 2))
        else:
            pygame.draw.polygon(surf, color, [(x, y + h // 2), (x + w, y), (x + w, y + h)])

    def draw_missile(self, surf: pygame.Surface, m: Missile) -> None:
        x, y, w, h = (int(c) for c in m.rect)
        pygame.draw.rect(surf, MISSILE_COLOR, pygame.Rect(x, y, w, h))
        pygame.draw.rect(surf, MISSILE_FLAME_COLOR, pygame.Rect(x - 3, y + 1, 3, max(1, h - 2)))

    def draw_explosion(self, surf: pygame.Surface, e: Explosion) -> None:
        alpha = int(255 * e.alpha)
        if alpha <= 0:
            return
        color = EXPLOSION_COLORS[e.age % len(EXPLOSION_COLORS)]
        r = max(1, int(e.radius))
        s = pygame.Surface((r * 2 + 2, r * 2 + 2), pygame.SRCALPHA)
        pygame.draw.circle(s, (*color, alpha), (r + 1, r + 1), r)
        surf.blit(s, (int(e.x) - r - 1, int(e.y) - r - 1))
        for p in e.particles:
            pygame.draw.rect(surf, color, pygame.Rect(int(p.x), int(p.y), 2, 2))

    def _panel(self, surf: pygame.Surface, text: str, color: Color, topleft: tuple[int, int]) -> int:
        label = self.font_small.render(text, True, color)
        rect = label.get_rect(topleft=(topleft[0] + 8, topleft[1] + 6))
        bg = pygame.Surface((rect.width + 16, rect.height + 12), pygame.SRCALPHA)
        bg.fill(HUD_PANEL)
        surf.blit(bg, topleft)
        surf.blit(label, rect)
        return topleft[1] + bg.get_height() + 6

    def draw_hud(self, surf: pygame.Surface, snap: Snapshot) -> None:
        cfg = self.config
        y = self._panel(surf, f"SCORE: {snap.score}", HUD_SCORE_COLOR, (12, 12))
        y = self._panel(surf, f"HIGH: {snap.high_score}", HUD_HIGH_COLOR, (12, y))
        if snap.ammo_unlocked:
            self._panel(surf, f"MISSILES: {snap.ammo}/{snap.max_ammo}", HUD_AMMO_COLOR, (12, y))

        hint = "SPACE: Jump   P: Pause" + ("   F: Fire Missile" if snap.ammo_unlocked else "")
        help_text = self.font_small.render(hint, True, HUD_TEXT_COLOR)
        surf.blit(help_text, help_text.get_rect(bottomleft=(12, cfg.height - 12)))

        center = (cfg.width // 2, cfg.height // 2)
        lines: list[tuple[str, Color, pygame.font.Font]] = []
        if snap.state is SessionState.START:
            lines = [
                ("VANGUARD VELOCITY", HUD_SCORE_COLOR, self.font_big),
                ("Press SPACE or click to start", HUD_TEXT_COLOR, self.font_small),
            ]
        elif snap.state is SessionState.PAUSED:
            lines = [
                ("PAUSED", HUD_TEXT_COLOR, self.font_big),
                ("Press P to resume", HUD_TEXT_COLOR, self.font_small),
            ]
        elif snap.state is SessionState.GAME_OVER:
            lines = [
                ("GAME OVER!", HUD_AMMO_COLOR, self.font_big),
                (f"Score: {snap.score}", HUD_TEXT_COLOR, self.font_small),
            ]
            if snap.new_high_score:
                lines.append(("NEW HIGH SCORE!", HUD_SCORE_COLOR, self.font_small))
            lines.append(("Press SPACE or R to restart", HUD_TEXT_COLOR, self.font_small))
        if not lines:
            return
        overlay = pygame.Surface((cfg.width, cfg.height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 120))
        surf.blit(overlay, (0, 0))
        y = center[1] - 20 * len(lines)
        for text, color, font in lines:
            label = font.render(text, True, color)
            surf.blit(label, label.get_rect(midtop=(center[0], y)))
            y += label.get_height() + 12
