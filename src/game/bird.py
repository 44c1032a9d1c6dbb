# src/game/bird.py
from __future__ import annotations
from dataclasses import dataclass
from .config import (
    WIDTH, HEIGHT, BIRD_X_FRAC, BIRD_SIZE, GRAVITY, LIFT, FLAP_BOOST,
    TERMINAL_VELOCITY, DRAG, ROTATION_K, MAX_ROTATION
)

@dataclass
class Bird:
    """
    The falling character. x never changes (the world scrolls left);
    y is the center, velocity > 0 means falling.
    """
    x: float
    y: float
    velocity: float = 0.0
    rotation: float = 0.0
    size: float = BIRD_SIZE

    @classmethod
    def spawn(cls) -> "Bird":
        return cls(x=WIDTH * BIRD_X_FRAC, y=HEIGHT / 2)

    def integrate(self):
        """Gravity, terminal clamp, drag, then move and stop dead at floor/ceiling."""
        self.velocity += GRAVITY
        self.velocity = min(self.velocity, TERMINAL_VELOCITY)
        self.velocity *= DRAG
        self.y += self.velocity

        self.rotation = min(MAX_ROTATION, max(-MAX_ROTATION, self.velocity * ROTATION_K))

        if self.y + self.size > HEIGHT:
            self.y = HEIGHT - self.size
            self.velocity = 0.0
        if self.y < self.size:
            self.y = self.size
            self.velocity = 0.0

    def flap(self):
        # Flapping while already rising gets a little extra lift.
        boost = FLAP_BOOST if self.velocity < 0 else 1.0
        self.velocity = LIFT * boost
