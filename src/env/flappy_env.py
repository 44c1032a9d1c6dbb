# src/env/flappy_env.py
from __future__ import annotations
from typing import Optional, Dict, Any
import numpy as np
import gymnasium as gym
import pygame

from src.game.config import WIDTH, HEIGHT, FPS
from src.game.simulation import Simulation, Phase
from src.game.store import MemoryStore
from src.game.render import draw_frame, make_fonts
from src.env.observations import build_observation, OBS_LOW, OBS_HIGH

ALIVE_REWARD = 0.1
SCORE_REWARD = 1.0
DEATH_REWARD = -1.0


class FlappyEnv(gym.Env):
    """
    Flappy Bird Gymnasium environment (vector observations).
    - Simulation advances one tick per frame (FPS ticks/sec of game time).
    - Agent acts every `frame_skip` ticks (default 4).
    - Observation: shape (5,), float32, see observations.build_observation.
    """
    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": FPS}

    def __init__(self,
                 render_mode: Optional[str] = None,
                 frame_skip: int = 4,
                 time_limit_seconds: Optional[float] = 30.0):
        super().__init__()
        assert frame_skip >= 1, "frame_skip must be >= 1"
        assert render_mode is None or render_mode in self.metadata["render_modes"]
        self.render_mode = render_mode
        self.frame_skip = int(frame_skip)

        self.time_limit_decisions = None
        if time_limit_seconds is not None:
            self.time_limit_decisions = int(FPS * time_limit_seconds / self.frame_skip)

        # Actions: 0 = NOOP, 1 = FLAP
        self.action_space = gym.spaces.Discrete(2)
        self.observation_space = gym.spaces.Box(low=OBS_LOW, high=OBS_HIGH, dtype=np.float32)

        self.sim: Optional[Simulation] = None
        self.timestep: int = 0

        # Rendering
        self.screen = None
        self.clock = None
        self.fonts = None

    # -------------------- Core API --------------------

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None):
        super().reset(seed=seed)
        # Explicit seed -> exact pipe layout; otherwise draw one from the env's RNG
        sim_seed = int(seed) if seed is not None else int(self.np_random.integers(0, 2**31 - 1))

        self.sim = Simulation(sim_seed, store=MemoryStore())
        self.sim.handle_input()  # skip the "press to start" screen
        self.timestep = 0

        if self.render_mode == "human":
            self.render()
        return self._get_obs(), self._info()

    def step(self, action: int):
        assert self.action_space.contains(action), f"Invalid action {action}"
        assert self.sim is not None, "Call reset() first"
        sim = self.sim

        if action == 1 and sim.phase is Phase.RUNNING:
            sim.handle_input()

        score_before = sim.score
        for _ in range(self.frame_skip):
            sim.tick()
            if sim.phase is not Phase.RUNNING:
                break

        terminated = sim.phase is Phase.OVER
        reward = SCORE_REWARD * (sim.score - score_before)
        reward += DEATH_REWARD if terminated else ALIVE_REWARD

        self.timestep += 1
        truncated = False
        if (self.time_limit_decisions is not None) and (self.timestep >= self.time_limit_decisions):
            truncated = not terminated

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), float(reward), terminated, truncated, self._info()

    # -------------------- Helpers --------------------

    def _get_obs(self) -> np.ndarray:
        assert self.sim is not None
        return build_observation(self.sim)

    def _info(self) -> Dict[str, Any]:
        assert self.sim is not None
        return {
            "score": self.sim.score,
            "high_score": self.sim.high_score,
            "tick_count": self.sim.tick_count,
            "timestep": self.timestep,
            "seed": self.sim.seed,
        }

    # -------------------- Rendering --------------------

    def render(self):
        if self.render_mode is None or self.sim is None:
            return None

        if self.screen is None:
            pygame.init()
            if self.render_mode == "human":
                self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
                pygame.display.set_caption("Flappy Bird — Gym Env")
            else:
                self.screen = pygame.Surface((WIDTH, HEIGHT))
            self.clock = pygame.time.Clock()
            self.fonts = make_fonts()

        draw_frame(self.screen, self.sim, self.fonts)

        if self.render_mode == "human":
            # Pump events so the OS doesn't think we're hung
            pygame.event.pump()
            pygame.display.flip()
            self.clock.tick(self.metadata["render_fps"])
            return None

        arr = pygame.surfarray.array3d(self.screen)  # (W, H, 3)
        return np.transpose(arr, (1, 0, 2))

    def close(self):
        if self.screen is not None:
            pygame.display.quit()
            pygame.quit()
            self.screen = None
            self.clock = None
            self.fonts = None
