"""Confetti particles that burst upwards and fall under gravity."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

COLORS = ("#ffd700", "#ff0000", "#00ff00", "#0000ff", "#ff00ff", "#00ffff", "#ff8000")
GRAVITY = 0.1
DEFAULT_COUNT = 150


@dataclass
class ConfettiParticle:
    """A single spinning square of confetti."""

    x: float
    y: float
    vx: float
    vy: float
    color: str
    rotation: float
    rotation_speed: float
    size: float

    def update(self) -> None:
        """Advance one frame: move, accelerate downwards and spin."""
        self.x += self.vx
        self.y += self.vy
        self.vy += GRAVITY
        self.rotation += self.rotation_speed

    def corners(self) -> list[tuple[float, float]]:
        """Screen corners of the rotated square, rotation clockwise in degrees."""
        angle = math.radians(self.rotation)
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        half = self.size / 2
        return [
            (self.x + dx * cos_a - dy * sin_a, self.y + dx * sin_a + dy * cos_a)
            for dx, dy in ((-half, -half), (half, -half), (half, half), (-half, half))
        ]


def spawn_confetti(
    width: int, height: int, rng: random.Random | None = None, count: int = DEFAULT_COUNT
) -> list[ConfettiParticle]:
    """Create a burst of particles from a third of the way down the centre line."""
    rng = rng or random.Random()
    origin_x, origin_y = width // 2, height // 3
    particles = []
    for _ in range(count):
        angle = rng.random() * 2 * math.pi
        speed = 1.0 + rng.random() * 4.0
        particles.append(
            ConfettiParticle(
                x=float(origin_x),
                y=float(origin_y),
                vx=speed * math.cos(angle),
                vy=speed * math.sin(angle) - 3.0,
                color=COLORS[rng.randrange(len(COLORS))],
                rotation=rng.random() * 360.0,
                rotation_speed=-5.0 + rng.random() * 10.0,
                size=5.0 + rng.random() * 10.0,
            )
        )
    return particles