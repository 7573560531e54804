"""Plane geometry shared by the game: window size, vectors and rectangles."""

from __future__ import annotations

import math
from dataclasses import dataclass

WINDOW_WIDTH = 1200
WINDOW_HEIGHT = 600


@dataclass(frozen=True)
class Vec2:
    """An immutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec2:
        return Vec2(self.x / scalar, self.y / scalar)

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def dot(self, other: Vec2) -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y


def normalize(vec: Vec2) -> Vec2:
    """Return the unit vector pointing the same way as ``vec``."""
    length = vec.length()
    if length == 0:
        raise ValueError("cannot normalize a zero-length vector")
    return vec / length


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def _extent(self) -> tuple[float, float, float, float]:
        return (
            min(self.left, self.right),
            max(self.left, self.right),
            min(self.top, self.bottom),
            max(self.top, self.bottom),
        )

    def intersection(self, other: Rect) -> Rect | None:
        """Return the overlapping area of two rectangles, or None if they do not overlap."""
        a_left, a_right, a_top, a_bottom = self._extent()
        b_left, b_right, b_top, b_bottom = other._extent()
        left = max(a_left, b_left)
        right = min(a_right, b_right)
        top = max(a_top, b_top)
        bottom = min(a_bottom, b_bottom)
        if left < right and top < bottom:
            return Rect(left, top, right - left, bottom - top)
        return None

    def intersects(self, other: Rect) -> bool:
        """True when the rectangles share an area; touching edges do not count."""
        return self.intersection(other) is not None