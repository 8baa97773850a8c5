from __future__ import annotations

import math
from typing import Tuple

Vec2 = Tuple[float, float]


def add(a: Vec2, b: Vec2) -> Vec2:
    return (a[0] + b[0], a[1] + b[1])


def subtract(a: Vec2, b: Vec2) -> Vec2:
    return (a[0] - b[0], a[1] - b[1])


def scale(v: Vec2, factor: float) -> Vec2:
    return (v[0] * factor, v[1] * factor)


def dot(a: Vec2, b: Vec2) -> float:
    return a[0] * b[0] + a[1] * b[1]


def length(v: Vec2) -> float:
    return math.hypot(v[0], v[1])


def normalize(v: Vec2) -> Vec2:
    """Return the unit vector along ``v``; the zero vector stays zero."""
    size = length(v)
    if size == 0.0:
        return (0.0, 0.0)
    return (v[0] / size, v[1] / size)


def distance(a: Vec2, b: Vec2) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def step_towards(position: Vec2, target: Vec2, step: float) -> Tuple[Vec2, bool]:
    """Move ``position`` towards ``target`` by ``step`` units.

    Returns the new position and whether the target was reached. Reaching
    snaps exactly onto the target; the leftover distance is dropped.
    """
    if step >= distance(position, target):
        return target, True
    direction = normalize(subtract(target, position))
    return add(position, scale(direction, step)), False
