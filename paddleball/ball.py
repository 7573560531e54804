"""The game ball: serves, bounces off borders and paddles, and reports scoring."""

from __future__ import annotations

import random
from enum import Enum, auto
from typing import Protocol

from .geometry import WINDOW_HEIGHT, WINDOW_WIDTH, Rect, Vec2, normalize


class BallEvent(Enum):
    """Things that happen to the ball during one update."""

    BORDER_HIT = auto()
    PADDLE_HIT = auto()
    PADDLE1_SCORED = auto()
    PADDLE2_SCORED = auto()


class _HasBounds(Protocol):
    def bounds(self) -> Rect: ...


class Ball:
    """A square ball whose position is the centre of its rectangle."""

    SIZE = Vec2(20.0, 20.0)
    INITIAL_SPEED = 400.0
    SPEED_MULTIPLIER = 1.05
    RESET_DELAY = 1.0
    START_X = WINDOW_WIDTH / 2 - SIZE.x / 2

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.position = Vec2(self.START_X, WINDOW_HEIGHT / 2 - self.SIZE.y / 2)
        self.direction = Vec2(1.0, 0.0)
        self.speed = self.INITIAL_SPEED
        self.elapsed = 0.0
        self.reset(0.0)

    def bounds(self) -> Rect:
        """The ball's rectangle in window coordinates."""
        return Rect(
            self.position.x - self.SIZE.x / 2,
            self.position.y - self.SIZE.y / 2,
            self.SIZE.x,
            self.SIZE.y,
        )

    def reset(self, x_dir: float) -> None:
        """Serve again from the middle; a zero ``x_dir`` picks a side at random."""
        rand_x = self._rng.uniform(0.4, 0.8)
        if x_dir == 0:
            x_dir = 1.0 if self._rng.uniform(-1.0, 1.0) >= 0 else -1.0
        rand_x *= x_dir
        rand_y = self._rng.uniform(0.0, 1.0)
        y = self._rng.uniform(self.SIZE.y, WINDOW_HEIGHT - self.SIZE.y)
        self.position = Vec2(self.START_X, y)
        self.speed = self.INITIAL_SPEED
        self.direction = normalize(Vec2(rand_x, rand_y))
        self.elapsed = 0.0

    def update(self, paddle1: _HasBounds, paddle2: _HasBounds, dt: float) -> list[BallEvent]:
        """Advance the ball by ``dt`` seconds and return what happened."""
        events: list[BallEvent] = []
        self.elapsed += dt
        if self.elapsed <= self.RESET_DELAY:
            return events

        events.extend(self._bounce(paddle1.bounds(), paddle2.bounds()))

        step = normalize(self.direction) * (self.speed * dt)
        left = self.bounds().left
        if left + self.SIZE.x < 0:
            self.reset(-1.0)
            events.append(BallEvent.PADDLE2_SCORED)
        elif left > WINDOW_WIDTH:
            self.reset(1.0)
            events.append(BallEvent.PADDLE1_SCORED)
        else:
            self.position = self.position + step
        return events

    def _bounce(self, left_paddle: Rect, right_paddle: Rect) -> list[BallEvent]:
        events: list[BallEvent] = []
        box = self.bounds()
        dx, dy = self.direction.x, self.direction.y

        if box.top < 0:
            dy = abs(dy)
            self.speed *= self.SPEED_MULTIPLIER
            events.append(BallEvent.BORDER_HIT)
        elif box.bottom > WINDOW_HEIGHT:
            dy = -abs(dy)
            self.speed *= self.SPEED_MULTIPLIER
            events.append(BallEvent.BORDER_HIT)

        if box.intersects(left_paddle) and dx < 0:
            if box.top > left_paddle.bottom and box.left < left_paddle.right:
                dy = abs(dy)
            elif box.bottom < left_paddle.top and box.left < left_paddle.right:
                dy = -abs(dy)
            else:
                dx = abs(dx)
            events.append(BallEvent.PADDLE_HIT)
        elif box.intersects(right_paddle) and dx > 0:
            if box.top > right_paddle.bottom and box.right > right_paddle.left:
                dy = abs(dy)
            elif box.bottom < right_paddle.top and box.right > right_paddle.left:
                dy = -abs(dy)
            else:
                dx = -abs(dx)
            events.append(BallEvent.PADDLE_HIT)

        self.direction = Vec2(dx, dy)
        return events