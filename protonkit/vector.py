"""Small geometric value types: 2D/3D vectors and rectangles."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Vector2:
    """A two-component float vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def distance(self, x: float, y: float) -> float:
        """Euclidean distance from this vector to the point (x, y)."""
        return math.hypot(self.x - x, self.y - y)


@dataclass
class Vector2i:
    """A two-component integer vector."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Vector2i) -> Vector2i:
        return Vector2i(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2i) -> Vector2i:
        return Vector2i(self.x - other.x, self.y - other.y)

    def distance(self, x: int, y: int) -> float:
        """Euclidean distance from this vector to the point (x, y)."""
        return math.hypot(float(self.x) - x, float(self.y) - y)


@dataclass
class Vector3:
    """A three-component float vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)


@dataclass
class Rect:
    """An axis-aligned rectangle given by position and size."""

    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0

    def __add__(self, other: Rect) -> Rect:
        return Rect(self.x + other.x, self.y + other.y, self.w + other.w, self.h + other.h)

    def __sub__(self, other: Rect) -> Rect:
        return Rect(self.x - other.x, self.y - other.y, self.w - other.w, self.h - other.h)