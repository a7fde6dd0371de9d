"""
render.py: Draws a Snapshot with pygame. Reads state, never changes it.
"""

import math
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

import pygame

from .constants import PIPE_WIDTH
from .data_models import Phase, PipeSnapshot, SessionResult, Snapshot

SKY = (112, 197, 206)
PIPE_FILL = (61, 163, 90)
PIPE_EDGE = (43, 122, 66)
PIPE_CAP = (47, 138, 78)
GROUND = (222, 154, 58)
GROUND_STRIPE = (200, 134, 44)
BIRD_BODY = (255, 235, 106)
BIRD_EDGE = (230, 201, 58)
BIRD_WING = (255, 216, 67)
WHITE = (255, 255, 255)
DARK = (34, 34, 34)

GAME_OVER_DELAY_MS = 420


@dataclass
class Cloud:
    x: float
    y: float
    w: float
    h: float
    vx: float


class Renderer:
    """Ambient clouds live here; they have nothing to do with gameplay."""

    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self.clouds: Optional[List[Cloud]] = None
        self.layer_size: Optional[Tuple[int, int]] = None
        self.cloud_layer: Optional[pygame.Surface] = None
        self.shade: Optional[pygame.Surface] = None
        self.large_font = pygame.font.Font(None, 48)
        self.font = pygame.font.Font(None, 26)

    def layers(self, size: Tuple[int, int]) -> Tuple[pygame.Surface, pygame.Surface]:
        """Translucent full-window layers, rebuilt only when the size changes."""
        if size != self.layer_size:
            self.layer_size = size
            self.cloud_layer = pygame.Surface(size, pygame.SRCALPHA)
            self.shade = pygame.Surface(size, pygame.SRCALPHA)
            self.shade.fill((0, 0, 0, 110))
        return self.cloud_layer, self.shade

    def _init_clouds(self, width: float, height: float):
        self.clouds = [
            Cloud(x=random.random() * width,
                  y=random.random() * height * 0.35,
                  w=60 + random.random() * 120,
                  h=18 + random.random() * 28,
                  vx=8 + random.random() * 18)
            for _ in range(6)
        ]

    def draw(self, snap: Snapshot, result: Optional[SessionResult] = None,
             ended_ms: Optional[int] = None, now_ms: int = 0, muted: bool = False):
        self.screen.fill(SKY)
        self._draw_clouds(snap)
        for pipe in snap.pipes:
            self._draw_pipe(pipe, snap)
        self._draw_ground(snap)
        self._draw_bird(snap)
        self._draw_hud(snap, muted)

        if snap.phase is Phase.IDLE:
            self._draw_panel(snap, ["Floppy Bird", "Tap / Click / Press Space to flap",
                                    "Enter = Ready"])
        elif snap.phase is Phase.ENDED and ended_ms is not None \
                and now_ms - ended_ms >= GAME_OVER_DELAY_MS:
            title = "New High Score!" if result is not None and result.new_best else "Game Over"
            best = result.best if result is not None else snap.best
            self._draw_panel(snap, [title, f"Score: {snap.score}", f"Best: {best}",
                                    "Press R to retry"])
        if snap.paused:
            self._draw_panel(snap, ["Paused", "Press P to resume"])

        pygame.display.flip()

    def _draw_clouds(self, snap: Snapshot):
        if self.clouds is None:
            self._init_clouds(snap.width, snap.height)
        layer, _ = self.layers((int(snap.width), int(snap.height)))
        layer.fill((0, 0, 0, 0))
        for c in self.clouds:
            c.x -= c.vx * 0.016
            if c.x + c.w < -20:
                c.x = snap.width + 40
            rect = pygame.Rect(int(c.x), int(c.y), int(c.w), int(c.h))
            pygame.draw.rect(layer, (255, 255, 255, 215), rect, border_radius=int(c.h * 0.5))
        self.screen.blit(layer, (0, 0))

    def _draw_pipe(self, p: PipeSnapshot, snap: Snapshot):
        top_rect = pygame.Rect(int(p.x), 0, PIPE_WIDTH, int(p.top))
        bottom_h = int(snap.height - p.bottom - snap.ground_height)
        bottom_rect = pygame.Rect(int(p.x), int(p.bottom), PIPE_WIDTH, max(0, bottom_h))
        for rect in (top_rect, bottom_rect):
            pygame.draw.rect(self.screen, PIPE_FILL, rect)
            pygame.draw.rect(self.screen, PIPE_EDGE, rect, 3)
        for cap_y in (p.top, p.bottom):
            pygame.draw.ellipse(self.screen, PIPE_CAP,
                                pygame.Rect(int(p.x), int(cap_y) - 10, PIPE_WIDTH, 20))

    def _draw_ground(self, snap: Snapshot):
        g = snap.ground_height
        top = int(snap.height - g)
        pygame.draw.rect(self.screen, GROUND, pygame.Rect(0, top, int(snap.width), g))
        for i in range(0, int(snap.width), 24):
            pygame.draw.rect(self.screen, GROUND_STRIPE, pygame.Rect(i, top, 12, 6))

    def _draw_bird(self, snap: Snapshot):
        b = snap.bird
        r = int(b.radius)
        size = (r + 2) * 2 + 8
        sprite = pygame.Surface((size, size), pygame.SRCALPHA)
        c = size // 2
        body = pygame.Rect(c - (r + 2), c - (r - 2), (r + 2) * 2, (r - 2) * 2)
        pygame.draw.ellipse(sprite, BIRD_BODY if b.alive else (180, 180, 180), body)
        pygame.draw.ellipse(sprite, BIRD_EDGE, body, 2)
        pygame.draw.circle(sprite, DARK, (c + 6, c - 4), 3)
        pygame.draw.polygon(sprite, BIRD_WING, [(c - 6, c + 2), (c - 16, c), (c - 8, c + 10)])
        # Positive angles turn counter-clockwise: nose up
        rotated = pygame.transform.rotate(sprite, math.degrees(b.rot))
        self.screen.blit(rotated, rotated.get_rect(center=(int(b.x), int(b.y))))

    def _draw_hud(self, snap: Snapshot, muted: bool):
        score = self.large_font.render(str(snap.score), True, WHITE)
        self.screen.blit(score, (snap.width // 2 - score.get_width() // 2, 20))
        best = self.font.render(f"Best: {snap.best}", True, WHITE)
        self.screen.blit(best, (snap.width - best.get_width() - 10, 10))
        if muted:
            self.screen.blit(self.font.render("Muted", True, WHITE), (10, 10))

    def _draw_panel(self, snap: Snapshot, lines: List[str]):
        _, shade = self.layers((int(snap.width), int(snap.height)))
        self.screen.blit(shade, (0, 0))
        y = snap.height // 2 - 30 * len(lines) // 2
        for i, line in enumerate(lines):
            font = self.large_font if i == 0 else self.font
            surf = font.render(line, True, WHITE)
            self.screen.blit(surf, (snap.width // 2 - surf.get_width() // 2, y))
            y += surf.get_height() + 10
