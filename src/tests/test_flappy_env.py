# src/tests/test_flappy_env.py
"""
Tests for FlappyEnv (Gymnasium environment).

Usage (from repo root):
  pytest src/tests/test_flappy_env.py
  python -m src.tests.test_flappy_env
  python -m src.tests.test_flappy_env --render
"""

from __future__ import annotations
import argparse
import os
import sys
from typing import List, Tuple

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import numpy as np
import pytest
from gymnasium.utils.env_checker import check_env

from src.env.flappy_env import FlappyEnv
from src.env.observations import build_observation, next_pipe
from src.game.config import WIDTH, HEIGHT, SPAWN_INTERVAL
from src.game.simulation import Simulation


def test_api_check():
    """Verify Gym API contract (spaces, step/reset signatures, types)."""
    env = FlappyEnv()
    try:
        check_env(env.unwrapped, skip_render_check=True)
    finally:
        env.close()


def test_reset_starts_running():
    env = FlappyEnv()
    obs, info = env.reset(seed=5)
    assert env.observation_space.contains(obs)
    assert info["seed"] == 5 and info["score"] == 0 and info["tick_count"] == 0
    env.close()


@pytest.mark.parametrize("seed", [0, 123])
def test_smoke(seed, steps=300):
    """Short random rollout: no crashes, obs in space, reward type, proper terminations."""
    env = FlappyEnv()
    try:
        obs, info = env.reset(seed=seed)
        env.action_space.seed(seed)
        for t in range(steps):
            a = env.action_space.sample()
            obs, r, term, trunc, info = env.step(a)
            assert isinstance(r, float), "Reward must be a float"
            assert env.observation_space.contains(obs), f"Step {t}: observation out of bounds"
            if term or trunc:
                break
    finally:
        env.close()


def test_determinism(seed=123, steps=300):
    """Same seed + same action sequence => identical obs/reward/terminal flags."""
    def rollout(action_seq: List[int]) -> List[Tuple[np.ndarray, float, bool, bool]]:
        env = FlappyEnv()
        traj = []
        try:
            env.reset(seed=seed)
            for a in action_seq:
                obs, r, term, trunc, _ = env.step(int(a))
                traj.append((obs.copy(), float(r), bool(term), bool(trunc)))
                if term or trunc:
                    break
        finally:
            env.close()
        return traj

    rng = np.random.RandomState(42)
    action_seq = [int(rng.random_sample() < 0.1) for _ in range(steps)]
    t1, t2 = rollout(action_seq), rollout(action_seq)

    assert len(t1) == len(t2), "Determinism: trajectory length mismatch"
    for i, ((o1, r1, te1, tr1), (o2, r2, te2, tr2)) in enumerate(zip(t1, t2)):
        assert np.array_equal(o1, o2), f"Determinism: obs mismatch at step {i}"
        assert (r1, te1, tr1) == (r2, te2, tr2), f"Determinism: transition mismatch at step {i}"


def test_noop_dies_on_first_pipe():
    """Never flapping parks the bird on the floor until the first pipe hits it."""
    env = FlappyEnv(frame_skip=4)
    env.reset(seed=1)
    rewards = []
    term = trunc = False
    while not (term or trunc):
        _, r, term, trunc, info = env.step(0)
        rewards.append(r)
    env.close()

    assert term and not trunc
    assert rewards[-1] == pytest.approx(-1.0)
    assert all(r == pytest.approx(0.1) for r in rewards[:-1])
    assert info["score"] == 0
    assert info["tick_count"] > SPAWN_INTERVAL


def test_time_limit_truncates():
    env = FlappyEnv(frame_skip=1, time_limit_seconds=0.5)  # 30 decisions
    env.reset(seed=2)
    for i in range(30):
        _, _, term, trunc, _ = env.step(0)
    env.close()
    assert trunc and not term


def test_bad_frame_skip():
    with pytest.raises(AssertionError):
        FlappyEnv(frame_skip=0)


def test_observation_without_pipes():
    sim = Simulation(1)
    obs = build_observation(sim)
    assert obs.dtype == np.float32 and obs.shape == (5,)
    assert obs[0] == pytest.approx(0.5)
    assert obs[1] == 0.0
    assert list(obs[2:]) == [1.0, 0.0, 1.0]
    assert next_pipe(sim) is None


def test_observation_tracks_next_pipe():
    sim = Simulation(1)
    sim.handle_input()
    for _ in range(SPAWN_INTERVAL):
        sim.tick()
    pipe = next_pipe(sim)
    assert pipe is sim.pipes[0]
    obs = build_observation(sim)
    assert obs[2] == pytest.approx((pipe.x + pipe.width - sim.bird.x) / WIDTH)
    assert obs[3] == pytest.approx(pipe.gap_top / HEIGHT)
    assert obs[4] == pytest.approx(pipe.gap_bottom / HEIGHT)


def test_rgb_array_render():
    env = FlappyEnv(render_mode="rgb_array")
    try:
        env.reset(seed=3)
        frame = env.render()
        assert frame.shape == (HEIGHT, WIDTH, 3)
        assert frame.dtype == np.uint8
    finally:
        env.close()


def render_demo(steps: int, seed: int, frame_skip: int) -> None:
    """Open a window and run a short NOOP demo so you can visually verify behavior."""
    env = FlappyEnv(render_mode="human", frame_skip=frame_skip)
    try:
        env.reset(seed=seed)
        for _ in range(steps):
            _, _, term, trunc, _ = env.step(0)
            if term or trunc:
                break
    finally:
        env.close()
    print("✓ Render demo finished")


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--render", action="store_true", help="Run a short visual demo")
    ap.add_argument("--seed", type=int, default=123)
    ap.add_argument("--frame-skip", type=int, default=1)
    args = ap.parse_args()

    if args.render:
        os.environ.pop("SDL_VIDEODRIVER", None)
        render_demo(steps=600, seed=args.seed, frame_skip=args.frame_skip)
    else:
        sys.exit(pytest.main([__file__, "-q"]))


if __name__ == "__main__":
    main()
