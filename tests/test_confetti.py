import math
import random

import pytest

from draftlottery.confetti import COLORS, ConfettiParticle, spawn_confetti


def make_particle(rotation=0.0):
    return ConfettiParticle(
        x=10.0, y=20.0, vx=2.0, vy=-3.0, color="#ff0000",
        rotation=rotation, rotation_speed=4.0, size=8.0,
    )


def test_update_moves_and_applies_gravity():
    particle = make_particle()
    particle.update()
    assert particle.x == pytest.approx(12.0)
    assert particle.y == pytest.approx(17.0)
    assert particle.vy == pytest.approx(-3.0 + 0.1)
    assert particle.rotation == pytest.approx(4.0)


def test_corners_unrotated_square():
    corners = make_particle().corners()
    assert corners == [
        pytest.approx((6.0, 16.0)),
        pytest.approx((14.0, 16.0)),
        pytest.approx((14.0, 24.0)),
        pytest.approx((6.0, 24.0)),
    ]


@pytest.mark.parametrize("rotation", [0.0, 30.0, 90.0, 215.0])
def test_corners_keep_shape_when_rotated(rotation):
    particle = make_particle(rotation)
    corners = particle.corners()
    cx = sum(x for x, _ in corners) / 4
    cy = sum(y for _, y in corners) / 4
    assert (cx, cy) == pytest.approx((particle.x, particle.y))
    for (x1, y1), (x2, y2) in zip(corners, corners[1:] + corners[:1]):
        assert math.hypot(x2 - x1, y2 - y1) == pytest.approx(particle.size)


def test_spawn_default_count_and_origin():
    particles = spawn_confetti(1024, 768, random.Random(3))
    assert len(particles) == 150
    assert all((p.x, p.y) == (1024 // 2, 768 // 3) for p in particles)


def test_spawn_ranges():
    for p in spawn_confetti(801, 601, random.Random(5), count=300):
        assert p.color in COLORS
        assert 1.0 <= math.hypot(p.vx, p.vy + 3.0) <= 5.0 + 1e-9
        assert 0.0 <= p.rotation < 360.0
        assert -5.0 <= p.rotation_speed <= 5.0
        assert 5.0 <= p.size <= 15.0


def test_spawn_reproducible_with_seed():
    first = spawn_confetti(100, 100, random.Random(9), 10)
    second = spawn_confetti(100, 100, random.Random(9), 10)
    assert len(first) == 10
    assert [(p.vx, p.vy, p.color, p.rotation, p.rotation_speed, p.size) for p in first] == [
        (p.vx, p.vy, p.color, p.rotation, p.rotation_speed, p.size) for p in second
    ]
    assert all((p.x, p.y) == (50, 33) for p in first)