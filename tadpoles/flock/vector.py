"""
Vector2 - Immutable 2D vector for steering math.

Rescaling a zero vector (with_length, normalize) returns the zero vector
instead of raising.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2:
    """Immutable 2D vector."""
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Vector2:
        return self * scalar

    def __truediv__(self, scalar: float) -> Vector2:
        return Vector2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    @property
    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0

    def with_length(self, length: float) -> Vector2:
        """Same direction, new magnitude. Zero stays zero."""
        if self.is_zero():
            return self
        return self * (length / self.length)

    def normalize(self, length: float = 1.0) -> Vector2:
        """
        Scale to the given magnitude.

        A negative length flips the direction. Zero in, zero out.
        """
        current = self.length
        if current == 0:
            return Vector2()
        return self * (length / current)

    def limit(self, max_length: float) -> Vector2:
        """Clamp magnitude to max_length."""
        return self.with_length(min(max_length, self.length))

    def rotate(self, degrees: float) -> Vector2:
        """Rotate by angle in degrees (screen space, y down)."""
        theta = math.radians(degrees)
        cos_a = math.cos(theta)
        sin_a = math.sin(theta)
        return Vector2(
            self.x * cos_a - self.y * sin_a,
            self.x * sin_a + self.y * cos_a,
        )

    def dot(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    def distance_to(self, other: Vector2) -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def to_tuple(self) -> tuple:
        return (self.x, self.y)

    @staticmethod
    def zero() -> Vector2:
        return Vector2(0.0, 0.0)
