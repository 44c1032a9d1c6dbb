# src/game/pipe.py
from __future__ import annotations
import random
from dataclasses import dataclass, field
import pygame
from .bird import Bird
from .config import (
    WIDTH, HEIGHT, PIPE_WIDTH, PIPE_GAP, PIPE_SPEED,
    PIPE_MIN_TOP, PIPE_MARGIN, HITBOX_SCALE
)

@dataclass
class Pipe:
    """
    A top + bottom barrier pair with a fixed opening between gap_top and gap_bottom.
    Scrolls left at PIPE_SPEED; `scored` flips once the bird has cleared it.
    """
    x: float
    gap_top: float
    width: float = PIPE_WIDTH
    gap: float = field(default=PIPE_GAP, init=False)
    scored: bool = False

    @property
    def gap_bottom(self) -> float:
        return self.gap_top + self.gap

    @property
    def trailing_edge(self) -> float:
        return self.x + self.width

    @classmethod
    def spawn(cls, rng: random.Random, x: float = WIDTH) -> "Pipe":
        """Random gap placement: top segment >= PIPE_MIN_TOP, bottom segment > 100 px."""
        gap_top = rng.random() * (HEIGHT - PIPE_GAP - PIPE_MARGIN) + PIPE_MIN_TOP
        return cls(x=float(x), gap_top=gap_top)

    def integrate(self):
        self.x -= PIPE_SPEED

    def is_offscreen(self) -> bool:
        return self.trailing_edge < 0

    def overlaps(self, bird: Bird) -> bool:
        """Shrunk-hitbox test: the bird only counts as 70% of its drawn radius."""
        h = bird.size * HITBOX_SCALE
        if bird.x + h > self.x and bird.x - h < self.x + self.width:
            if bird.y - h < self.gap_top or bird.y + h > self.gap_bottom:
                return True
        return False

    def top_rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.x), 0, int(self.width), int(self.gap_top))

    def bottom_rect(self) -> pygame.Rect:
        top = int(self.gap_bottom)
        return pygame.Rect(int(self.x), top, int(self.width), HEIGHT - top)
