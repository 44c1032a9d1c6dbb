# src/game/render.py
from __future__ import annotations
import math
from typing import Dict, Optional
import pygame
from .config import (
    WIDTH, HEIGHT,
    COLOR_SKY_TOP, COLOR_SKY_BOT, COLOR_PIPE, COLOR_PIPE_LIP,
    COLOR_BIRD, COLOR_WING, COLOR_BEAK, COLOR_FG, COLOR_OUTLINE, COLOR_SHADE,
    PIPE_LIP_H, PIPE_LIP_W
)
from .bird import Bird
from .pipe import Pipe
from .simulation import Simulation, Phase

_sky_cache: Optional[pygame.Surface] = None


def make_fonts() -> Dict[str, pygame.font.Font]:
    """Needs pygame.font initialised (pygame.init())."""
    return {
        "title": pygame.font.SysFont("arial", 48),
        "score": pygame.font.SysFont("arial", 32, bold=True),
        "small": pygame.font.SysFont("arial", 24),
        "hud": pygame.font.SysFont("arial", 24, bold=True),
    }


def _sky() -> pygame.Surface:
    """Vertical gradient, built once."""
    global _sky_cache
    if _sky_cache is None:
        surf = pygame.Surface((WIDTH, HEIGHT))
        for y in range(HEIGHT):
            t = y / max(1, HEIGHT - 1)
            c = tuple(int(a + (b - a) * t) for a, b in zip(COLOR_SKY_TOP, COLOR_SKY_BOT))
            pygame.draw.line(surf, c, (0, y), (WIDTH, y))
        _sky_cache = surf
    return _sky_cache


def draw_pipe(surf: pygame.Surface, pipe: Pipe):
    top, bot = pipe.top_rect(), pipe.bottom_rect()
    pygame.draw.rect(surf, COLOR_PIPE, top)
    pygame.draw.rect(surf, COLOR_PIPE, bot)
    # Lips sit on the gap side of each segment
    lip_top = pygame.Rect(top.left - PIPE_LIP_W, top.bottom - PIPE_LIP_H, top.width + 2 * PIPE_LIP_W, PIPE_LIP_H)
    lip_bot = pygame.Rect(bot.left - PIPE_LIP_W, bot.top, bot.width + 2 * PIPE_LIP_W, PIPE_LIP_H)
    pygame.draw.rect(surf, COLOR_PIPE_LIP, lip_top)
    pygame.draw.rect(surf, COLOR_PIPE_LIP, lip_bot)


def draw_bird(surf: pygame.Surface, bird: Bird):
    s = int(bird.size)
    side = s * 3
    sprite = pygame.Surface((side, side), pygame.SRCALPHA)
    c = side // 2
    pygame.draw.circle(sprite, COLOR_BIRD, (c, c), s)
    wing = pygame.Rect(0, 0, int(s * 1.0), int(s * 0.6))
    wing.center = (c - 5, c)
    pygame.draw.ellipse(sprite, COLOR_WING, wing)
    eye = (c + int(s * 0.3), c - int(s * 0.2))
    pygame.draw.circle(sprite, (255, 255, 255), eye, max(1, int(s * 0.25)))
    pygame.draw.circle(sprite, (0, 0, 0), (c + int(s * 0.4), eye[1]), max(1, int(s * 0.12)))
    pygame.draw.polygon(sprite, COLOR_BEAK, [
        (c + int(s * 0.7), c),
        (c + int(s * 1.2), c - int(s * 0.1)),
        (c + int(s * 1.2), c + int(s * 0.1)),
    ])
    # pygame rotates counter-clockwise, screen y points down
    rotated = pygame.transform.rotate(sprite, -math.degrees(bird.rotation))
    surf.blit(rotated, rotated.get_rect(center=(int(bird.x), int(bird.y))))


def _outlined(surf, font, text, center):
    img = font.render(text, True, COLOR_FG)
    shadow = font.render(text, True, COLOR_OUTLINE)
    r = img.get_rect(center=center)
    for dx, dy in ((-2, 0), (2, 0), (0, -2), (0, 2)):
        surf.blit(shadow, r.move(dx, dy))
    surf.blit(img, r)


def _shade(surf):
    panel = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
    panel.fill(COLOR_SHADE)
    surf.blit(panel, (0, 0))


def draw_frame(surf: pygame.Surface, sim: Simulation, fonts: Dict[str, pygame.font.Font]):
    """Read-only view of the simulation; never mutates it."""
    surf.blit(_sky(), (0, 0))
    for pipe in sim.pipes:
        draw_pipe(surf, pipe)
    draw_bird(surf, sim.bird)

    cx, cy = WIDTH // 2, HEIGHT // 2
    if sim.phase is Phase.NOT_STARTED:
        _shade(surf)
        _outlined(surf, fonts["title"], "Flappy Bird", (cx, cy - 50))
        _outlined(surf, fonts["small"], "Press Space or Tap to Start", (cx, cy + 20))
    else:
        _outlined(surf, fonts["score"], f"Score: {sim.score}", (cx, 50))
        _outlined(surf, fonts["hud"], f"High Score: {sim.high_score}", (cx, 90))

    if sim.phase is Phase.OVER:
        _shade(surf)
        _outlined(surf, fonts["title"], "Game Over!", (cx, cy - 50))
        _outlined(surf, fonts["small"], f"Final Score: {sim.score}", (cx, cy))
        _outlined(surf, fonts["small"], "Press Space or Tap to Restart", (cx, cy + 40))
