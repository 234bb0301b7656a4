"""Vector maths, collision checks and the fixed dimensions of the arena."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

SCREEN_WIDTH = 1700
SCREEN_HEIGHT = 1000
TARGET_FPS = 60

PLAYER_RADIUS = 15.0
ENEMY_RADIUS_MIN = 10.0
ENEMY_RADIUS_MAX = 30.0
BULLET_RADIUS = 5.0
PLAYER_SPEED = 300.0
BULLET_SPEED = 700.0
ENEMY_SPEED_MIN = 100.0
ENEMY_SPEED_MAX = 250.0

MAX_ENEMIES = 15


@dataclass(frozen=True, slots=True)
class Vec2:
    """An immutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def length_sqr(self) -> float:
        return self.x * self.x + self.y * self.y

    def normalize(self) -> Vec2:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length > 0:
            return Vec2(self.x / length, self.y / length)
        return Vec2(0.0, 0.0)

    def distance_to(self, other: Vec2) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y


def check_collision_circles(
    center1: Vec2, radius1: float, center2: Vec2, radius2: float
) -> bool:
    """True when two circles touch or overlap."""
    return center1.distance_to(center2) <= radius1 + radius2


def random_value(rng: random.Random, minimum: int, maximum: int) -> int:
    """Random integer in the closed range, accepting the bounds in either order."""
    low, high = (minimum, maximum) if minimum <= maximum else (maximum, minimum)
    return rng.randint(int(low), int(high))


def lerp(start: float, end: float, t: float) -> float:
    return start + t * (end - start)