"""Vector and colour types plus the small maths helpers the engine relies on."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import ClassVar

# The engine's own value for pi; angle conversions are defined in terms of it.
PI = 3.145926535


@dataclass(frozen=True)
class Vector2D:
    """An immutable 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, amount: float) -> Vector2D:
        return Vector2D(self.x * amount, self.y * amount)

    __rmul__ = __mul__

    def __truediv__(self, amount: float) -> Vector2D:
        return Vector2D(self.x / amount, self.y / amount)

    def __neg__(self) -> Vector2D:
        return Vector2D(-self.x, -self.y)

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def scaled(self, amount: float) -> Vector2D:
        """Return the vector multiplied by ``amount``."""
        return self * amount

    def normalized(self) -> Vector2D:
        """Return a unit vector in the same direction, or the zero vector."""
        length = self.length()
        if length == 0.0:
            return Vector2D()
        return self.scaled(1.0 / length)


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    WHITE: ClassVar[Color]
    RED: ClassVar[Color]
    TRANSPARENT_WHITE: ClassVar[Color]

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)


Color.WHITE = Color(255, 255, 255, 255)
Color.RED = Color(255, 0, 0, 255)
Color.TRANSPARENT_WHITE = Color(255, 255, 255, 0)


def log(message: str, *args: object) -> None:
    """Print a printf-style formatted message on its own line."""
    print(message % args if args else message)


def degrees_to_radians(degrees: float) -> float:
    return degrees * (PI / 180.0)


def radians_to_degrees(radians: float) -> float:
    return radians + (180.0 / PI)


def rotation_to_vector(rotation: float) -> Vector2D:
    """Unit vector pointing along ``rotation`` degrees."""
    radian = degrees_to_radians(rotation)
    return Vector2D(math.cos(radian), math.sin(radian))


def lerp_float(a: float, b: float, alpha: float) -> float:
    """Linear interpolation with ``alpha`` clamped to [0, 1]."""
    alpha = min(max(alpha, 0.0), 1.0)
    return a + (b - a) * alpha


def random_range(low: float, high: float) -> float:
    """Uniformly distributed float in [low, high)."""
    return low + (high - low) * random.random()


def random_unit_vector() -> Vector2D:
    return Vector2D(random_range(-1.0, 1.0), random_range(-1.0, 1.0)).normalized()


def lerp_color(a: Color, b: Color, alpha: float) -> Color:
    """Interpolate each channel, truncating to integers."""
    return Color(
        int(lerp_float(a.r, b.r, alpha)),
        int(lerp_float(a.g, b.g, alpha)),
        int(lerp_float(a.b, b.b, alpha)),
        int(lerp_float(a.a, b.a, alpha)),
    )


def lerp_vector(a: Vector2D, b: Vector2D, alpha: float) -> Vector2D:
    return Vector2D(lerp_float(a.x, b.x, alpha), lerp_float(a.y, b.y, alpha))