"""The Pong match: two paddles, a ball, borders and the score."""

from __future__ import annotations

import random

from .ball import Ball, BallEvent
from .geometry import WINDOW_HEIGHT, WINDOW_WIDTH, Rect, Vec2
from .paddle import Paddle


def input_direction(up_pressed: bool, down_pressed: bool) -> Vec2:
    """Vertical direction from the state of a player's two keys."""
    vec = Vec2(0.0, 0.0)
    if up_pressed:
        vec = vec + Vec2(0.0, -1.0)
    if down_pressed:
        vec = vec + Vec2(0.0, 1.0)
    return vec


class Pong:
    """Game state for a two-player match."""

    BORDER_SIZE = Vec2(float(WINDOW_WIDTH), 5.0)
    SCORE_FONT_SIZE = 50
    PADDLE1_SCORE_POS = Vec2(WINDOW_WIDTH / 2 - 100.0, 25.0)
    PADDLE2_SCORE_POS = Vec2(WINDOW_WIDTH / 2 + 90.0, 25.0)

    def __init__(self, rng: random.Random | None = None) -> None:
        self.paddle1 = Paddle(1)
        self.paddle2 = Paddle(2)
        self.ball = Ball(rng)
        self.paddle1_score = 0
        self.paddle2_score = 0

    @property
    def borders(self) -> tuple[Rect, Rect, Rect]:
        """Top, bottom and middle border rectangles."""
        size = self.BORDER_SIZE
        top = Rect(0.0, 0.0, size.x, size.y)
        bottom = Rect(0.0, WINDOW_HEIGHT - size.y, size.x, size.y)
        middle = Rect(WINDOW_WIDTH / 2 - size.y / 2, 0.0, size.y, size.x)
        return top, bottom, middle

    @property
    def score_texts(self) -> tuple[tuple[str, Vec2], tuple[str, Vec2]]:
        """Each player's score as text, with where it is drawn."""
        return (
            (str(self.paddle1_score), self.PADDLE1_SCORE_POS),
            (str(self.paddle2_score), self.PADDLE2_SCORE_POS),
        )

    def update(self, dt: float, paddle1_dir: Vec2, paddle2_dir: Vec2) -> list[BallEvent]:
        """Move paddles and ball by ``dt`` seconds, keep score, return ball events."""
        if paddle1_dir != Vec2(0.0, 0.0):
            self.paddle1.update(paddle1_dir, dt)
        if paddle2_dir != Vec2(0.0, 0.0):
            self.paddle2.update(paddle2_dir, dt)

        events = self.ball.update(self.paddle1, self.paddle2, dt)
        if BallEvent.PADDLE1_SCORED in events:
            self.paddle1_score += 1
        elif BallEvent.PADDLE2_SCORED in events:
            self.paddle2_score += 1
        return events