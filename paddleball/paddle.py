"""A player's paddle that slides vertically inside the window."""

from __future__ import annotations

from .geometry import WINDOW_HEIGHT, WINDOW_WIDTH, Rect, Vec2


class Paddle:
    """A paddle whose position is the centre of its rectangle."""

    SIZE = Vec2(25, 100)
    SPEED = 300.0

    def __init__(self, num: int) -> None:
        self.number = num
        start_y = WINDOW_HEIGHT / 2 - self.SIZE.y / 2
        if num == 1:
            self.position = Vec2(self.SIZE.x, start_y)
        elif num == 2:
            self.position = Vec2(WINDOW_WIDTH - self.SIZE.x * 2, start_y)
        else:
            self.position = Vec2()

    @property
    def size(self) -> Vec2:
        return self.SIZE

    def bounds(self) -> Rect:
        """The paddle's rectangle in window coordinates."""
        return Rect(
            self.position.x - self.SIZE.x / 2,
            self.position.y - self.SIZE.y / 2,
            self.SIZE.x,
            self.SIZE.y,
        )

    def update(self, direction: Vec2, dt: float) -> None:
        """Move along ``direction``, unless the step would leave the window."""
        step = direction * (self.SPEED * dt)
        top = self.bounds().top
        if top + step.y > 0 and top + self.SIZE.y + step.y < WINDOW_HEIGHT:
            self.position = self.position + step