"""Manifold-based collision between a ball and a set of solid rectangles."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .geometry import Rect, Vec2


def dot(a: Vec2, b: Vec2) -> float:
    """Dot product of two vectors."""
    return a.x * b.x + a.y * b.y


def normalise(vec: Vec2) -> Vec2:
    """Unit vector along ``vec``; a zero vector is returned unchanged."""
    length = math.sqrt(dot(vec, vec))
    return vec / length if length != 0 else vec


def reflect(velocity: Vec2, normal: Vec2) -> Vec2:
    """Reflect ``velocity`` about a surface with the given unit normal."""
    return normal * (-2.0 * dot(velocity, normal)) + velocity


@dataclass(frozen=True)
class Manifold:
    """Collision normal and how far the objects overlap along it."""

    normal: Vec2
    penetration: float


def get_manifold(overlap: Rect, collision_normal: Vec2) -> Manifold:
    """Pick the axis of least overlap and the direction to push the ball out."""
    if overlap.width < overlap.height:
        x = 1.0 if collision_normal.x < 0 else -1.0
        return Manifold(Vec2(x, 0.0), overlap.width)
    y = 1.0 if collision_normal.y < 0 else -1.0
    return Manifold(Vec2(0.0, y), overlap.height)


@dataclass
class SolidObject:
    """A static rectangle whose position is its centre."""

    size: Vec2
    position: Vec2 = field(default_factory=Vec2)

    def bounds(self) -> Rect:
        return Rect(
            self.position.x - self.size.x / 2,
            self.position.y - self.size.y / 2,
            self.size.x,
            self.size.y,
        )


def create_solid_objects() -> list[SolidObject]:
    """Build the four walls and, last, the paddle of the collision scene."""
    return [
        SolidObject(Vec2(600.0, 20.0), Vec2(300.0, 10.0)),
        SolidObject(Vec2(20.0, 760.0), Vec2(10.0, 400.0)),
        SolidObject(Vec2(20.0, 760.0), Vec2(590.0, 400.0)),
        SolidObject(Vec2(600.0, 20.0), Vec2(300.0, 790.0)),
        SolidObject(Vec2(100.0, 20.0), Vec2(300.0, 700.0)),
    ]


class CollisionBall:
    """A ball that bounces off the first solid object it overlaps."""

    SIZE = Vec2(20.0, 20.0)
    SPEED = 500.0

    def __init__(self, solid_objects: list[SolidObject], position: Vec2 | None = None) -> None:
        self.solid_objects = solid_objects
        self.position = position if position is not None else Vec2(300.0, 400.0)
        self.velocity = normalise(Vec2(1.2, 0.75))

    def bounds(self) -> Rect:
        return Rect(
            self.position.x - self.SIZE.x / 2,
            self.position.y - self.SIZE.y / 2,
            self.SIZE.x,
            self.SIZE.y,
        )

    def update(self, dt: float) -> None:
        """Advance the ball and resolve at most one collision."""
        self.position = self.position + self.velocity * (self.SPEED * dt)
        ball_bounds = self.bounds()
        for solid in self.solid_objects:
            overlap = solid.bounds().intersection(ball_bounds)
            if overlap is not None:
                manifold = get_manifold(overlap, solid.position - self.position)
                self._resolve(manifold)
                break

    def _resolve(self, manifold: Manifold) -> None:
        self.position = self.position + manifold.normal * manifold.penetration
        self.velocity = reflect(self.velocity, manifold.normal)