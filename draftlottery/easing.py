"""Easing curves and interpolation for the lottery animations."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Union

Value = Union[float, Sequence[float]]


def _clamp(t: float) -> float:
    return min(1.0, max(0.0, t))


def ease_out_bounce(t: float) -> float:
    """Decelerate with a series of diminishing bounces."""
    t = _clamp(t)
    if t == 1.0:
        return 1.0
    if t < 4 / 11:
        return 7.5625 * t * t
    if t < 8 / 11:
        t -= 6 / 11
        return 7.5625 * t * t + 0.75
    if t < 10 / 11:
        t -= 9 / 11
        return 7.5625 * t * t + 0.9375
    t -= 21 / 22
    return 7.5625 * t * t + 0.984375


def ease_out_cubic(t: float) -> float:
    t = _clamp(t) - 1.0
    return t * t * t + 1.0


def ease_in_cubic(t: float) -> float:
    t = _clamp(t)
    return t * t * t


def ease_in_quad(t: float) -> float:
    t = _clamp(t)
    return t * t


def interpolate(start: Value, end: Value, progress: float) -> Value:
    """Blend between two numbers or two equal-length coordinate tuples."""
    if isinstance(start, (int, float)) and isinstance(end, (int, float)):
        return start + (end - start) * progress
    if len(start) != len(end):
        raise ValueError("start and end must have the same length")
    return tuple(a + (b - a) * progress for a, b in zip(start, end))