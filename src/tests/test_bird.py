# src/tests/test_bird.py
import math
import random
import pytest

from src.game.bird import Bird
from src.game.config import WIDTH, HEIGHT, BIRD_X_FRAC, LIFT, FLAP_BOOST, MAX_ROTATION


def test_spawn_position():
    b = Bird.spawn()
    assert b.x == WIDTH * BIRD_X_FRAC
    assert b.y == HEIGHT / 2
    assert b.velocity == 0.0 and b.rotation == 0.0


def test_integration_is_deterministic():
    """Same start, no flaps => bit-identical (y, velocity) sequences."""
    def trace(v0):
        b = Bird.spawn()
        b.velocity = v0
        out = []
        for _ in range(200):
            b.integrate()
            out.append((b.y, b.velocity, b.rotation))
        return out

    assert trace(-3.7) == trace(-3.7)
    assert trace(0.0) == trace(0.0)


def test_gravity_pulls_down():
    b = Bird.spawn()
    y0 = b.y
    b.integrate()
    assert b.velocity > 0.0, "gravity should make velocity positive"
    assert b.y > y0


def test_floor_stops_dead():
    b = Bird.spawn()
    b.y = HEIGHT - b.size - 1
    b.velocity = 5.0
    b.integrate()
    assert b.y == HEIGHT - b.size
    assert b.velocity == 0.0, "no bounce off the floor"


def test_ceiling_stops_dead():
    b = Bird.spawn()
    b.y = b.size + 1
    b.velocity = -8.0
    b.integrate()
    assert b.y == b.size
    assert b.velocity == 0.0


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_stays_inside_playfield(seed):
    rng = random.Random(seed)
    b = Bird.spawn()
    b.velocity = rng.uniform(-30.0, 30.0)
    for t in range(600):
        if rng.random() < 0.1:
            b.flap()
        b.integrate()
        assert b.size <= b.y <= HEIGHT - b.size, f"tick {t}: y={b.y} out of bounds"


def test_terminal_velocity():
    b = Bird.spawn()
    b.velocity = 50.0
    b.integrate()
    # clamped to 10 before drag
    assert b.velocity == pytest.approx(10.0 * 0.97)


def test_rotation_clamped():
    b = Bird.spawn()
    b.velocity = -20.0
    b.integrate()
    assert b.rotation == -MAX_ROTATION
    assert MAX_ROTATION == pytest.approx(math.pi / 3)

    b = Bird.spawn()
    b.velocity = 2.0
    b.integrate()
    assert b.rotation == pytest.approx(b.velocity * 0.1)


def test_flap_sets_lift_when_falling_or_still():
    for v in (0.0, 3.0, 9.0):
        b = Bird.spawn()
        b.velocity = v
        b.flap()
        assert b.velocity == LIFT, f"flap from v={v} should give plain lift"


def test_flap_boost_while_rising():
    """Flapping while already going up gives a stronger impulse than from rest."""
    rising = Bird.spawn()
    rising.velocity = -0.5
    rising.flap()

    resting = Bird.spawn()
    resting.velocity = 0.0
    resting.flap()

    assert rising.velocity < resting.velocity
    assert rising.velocity == pytest.approx(LIFT * FLAP_BOOST)


def test_double_flap_boosts_second():
    b = Bird.spawn()
    b.flap()
    first = b.velocity
    b.flap()
    assert b.velocity < first
