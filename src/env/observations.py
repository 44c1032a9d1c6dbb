# src/env/observations.py
from __future__ import annotations
from typing import Optional
import numpy as np

from src.game.config import WIDTH, HEIGHT, TERMINAL_VELOCITY
from src.game.pipe import Pipe
from src.game.simulation import Simulation

OBS_SIZE = 5
OBS_LOW = np.array([0.0, -1.0, 0.0, 0.0, 0.0], dtype=np.float32)
OBS_HIGH = np.array([1.0, 1.0, 1.0, 1.0, 1.0], dtype=np.float32)


def next_pipe(sim: Simulation) -> Optional[Pipe]:
    """First live pipe whose trailing edge is not yet behind the bird."""
    for pipe in sim.pipes:
        if pipe.trailing_edge >= sim.bird.x:
            return pipe
    return None


def build_observation(sim: Simulation) -> np.ndarray:
    """
    [y_norm, v_norm, dx_norm, gap_top_norm, gap_bottom_norm], float32.
    With no pipe ahead the gap reads as the whole screen, 1.0 away.
    """
    bird = sim.bird
    y_norm = bird.y / HEIGHT
    v_norm = bird.velocity / TERMINAL_VELOCITY

    pipe = next_pipe(sim)
    if pipe is None:
        dx, gap_top, gap_bot = 1.0, 0.0, 1.0
    else:
        dx = (pipe.trailing_edge - bird.x) / WIDTH
        gap_top = pipe.gap_top / HEIGHT
        gap_bot = pipe.gap_bottom / HEIGHT

    obs = np.array([y_norm, v_norm, dx, gap_top, gap_bot], dtype=np.float32)
    return np.clip(obs, OBS_LOW, OBS_HIGH)
