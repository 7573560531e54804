"""Window, input, sound and drawing for the game and the collision demo."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import pygame

from .ball import BallEvent
from .collision import CollisionBall, create_solid_objects
from .game import Pong, input_direction
from .geometry import WINDOW_HEIGHT, WINDOW_WIDTH, Rect, Vec2

FONT_FILE = "Teko-Bold.ttf"
PADDLE_HIT_SOUND = "PaddleHitSound.wav"
BORDER_HIT_SOUND = "BorderHitSound.wav"
SCORE_SOUND = "ScoreSound.wav"
ASSET_FILES = (FONT_FILE, PADDLE_HIT_SOUND, BORDER_HIT_SOUND, SCORE_SOUND)

DEMO_WIDTH = 600
DEMO_HEIGHT = 800

_BLACK = (0, 0, 0)
_WHITE = (255, 255, 255)
_CYAN = (0, 255, 255)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse the command line of the game."""
    parser = argparse.ArgumentParser(prog="paddleball", description="Two-player Pong.")
    parser.add_argument(
        "--assets",
        type=Path,
        default=Path("."),
        help="directory holding the font and sound files",
    )
    return parser.parse_args(argv)


def _missing_assets(directory: Path) -> list[Path]:
    return [directory / name for name in ASSET_FILES if not (directory / name).is_file()]


def _load_sounds(directory: Path) -> dict[BallEvent, pygame.mixer.Sound]:
    try:
        if pygame.mixer.get_init() is None:
            pygame.mixer.init()
        paddle = pygame.mixer.Sound(str(directory / PADDLE_HIT_SOUND))
        border = pygame.mixer.Sound(str(directory / BORDER_HIT_SOUND))
        score = pygame.mixer.Sound(str(directory / SCORE_SOUND))
    except pygame.error:
        return {}
    return {
        BallEvent.PADDLE_HIT: paddle,
        BallEvent.BORDER_HIT: border,
        BallEvent.PADDLE1_SCORED: score,
        BallEvent.PADDLE2_SCORED: score,
    }


def _draw_rect(surface: pygame.Surface, colour: tuple[int, int, int], rect: Rect) -> None:
    pygame.draw.rect(
        surface,
        colour,
        pygame.Rect(round(rect.left), round(rect.top), round(rect.width), round(rect.height)),
    )


def main(argv: list[str] | None = None) -> int:
    """Run the two-player game until the window is closed or Escape is pressed."""
    args = parse_args(argv)
    missing = _missing_assets(args.assets)
    if missing:
        for path in missing:
            print(f"paddleball: missing asset {path}", file=sys.stderr)
        return 1

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("Pong")
        font = pygame.font.Font(str(args.assets / FONT_FILE), Pong.SCORE_FONT_SIZE)
        sounds = _load_sounds(args.assets)
        game = Pong()
        clock = pygame.time.Clock()

        running = True
        while running:
            dt = clock.tick() / 1000.0
            keys = pygame.key.get_pressed()
            events = game.update(
                dt,
                input_direction(keys[pygame.K_a], keys[pygame.K_d]),
                input_direction(keys[pygame.K_LEFT], keys[pygame.K_RIGHT]),
            )
            for event in events:
                sound = sounds.get(event)
                if sound is not None:
                    sound.play()

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False

            screen.fill(_BLACK)
            _draw_rect(screen, _WHITE, game.paddle1.bounds())
            _draw_rect(screen, _WHITE, game.paddle2.bounds())
            _draw_rect(screen, _CYAN, game.ball.bounds())
            for border in game.borders:
                _draw_rect(screen, _WHITE, border)
            for text, position in game.score_texts:
                screen.blit(font.render(text, True, _WHITE), (position.x, position.y))
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0


def collision_demo(argv: list[str] | None = None) -> int:
    """Run the manifold collision scene; the mouse steers the paddle."""
    parser = argparse.ArgumentParser(
        prog="paddleball-collision",
        description="Ball bouncing inside walls, with a mouse-driven paddle.",
    )
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((DEMO_WIDTH, DEMO_HEIGHT))
        pygame.display.set_caption("Pong Collision")
        solids = create_solid_objects()
        paddle = solids[-1]
        ball = CollisionBall(solids, Vec2(300.0, 400.0))
        clock = pygame.time.Clock()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEMOTION:
                    x = max(0, min(DEMO_WIDTH, event.pos[0]))
                    paddle.position = Vec2(float(x), paddle.position.y)

            ball.update(clock.tick() / 1000.0)

            screen.fill(_BLACK)
            _draw_rect(screen, _WHITE, ball.bounds())
            for solid in solids:
                _draw_rect(screen, _WHITE, solid.bounds())
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0