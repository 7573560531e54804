# paddleball

A two-player table-tennis game for the desktop. Two paddles guard the left
and right edges of a 1200 × 600 field; a ball is served from the centre
after a one-second pause, speeds up by 5 % each time it bounces off the
top or bottom border, and scores a point for a player when it leaves the
field past the opposing paddle.

## Installing

```
pip install .
```

The game draws with pygame, which is installed as a dependency.

## Playing

The game needs four asset files in one directory:

- `Teko-Bold.ttf` — the font for the scores
- `PaddleHitSound.wav`
- `BorderHitSound.wav`
- `ScoreSound.wav`

These files are not shipped with the package; supply your own. By default
they are looked for in the current directory; point elsewhere with
`--assets`:

```
paddleball
paddleball --assets path/to/assets
```

If any of the files is missing, `paddleball` prints the missing paths and
exits with status 1. If the sounds cannot be played on your system, the
game runs silently.

Controls:

| Player | Up | Down |
|--------|----|------|
| Left paddle | `A` | `D` |
| Right paddle | `←` | `→` |

Press `Esc` or close the window to quit. Each player's score is shown
on their side of the centre line.

## Collision demo

```
paddleball-collision
```

Opens a 600 × 800 window with four walls and a paddle near the bottom.
A ball bounces off whatever it overlaps, and moving the mouse slides the
paddle horizontally. It needs no asset files.

## Using the game logic

The simulation is independent of the window, so it can be driven from your
own code or tests. Directions are vertical vectors built from the state of
two keys:

```python
import random

from paddleball.game import Pong, input_direction

game = Pong(random.Random(1))           # the generator is optional
left = input_direction(True, False)     # moving up
right = input_direction(False, False)   # standing still
events = game.update(1 / 60, left, right)
print(game.paddle1_score, game.paddle2_score, events)
```

`Pong.update` returns the list of `BallEvent` values from that step
(`BORDER_HIT`, `PADDLE_HIT`, `PADDLE1_SCORED`, `PADDLE2_SCORED`) and keeps
the score. `Pong.borders` and `Pong.score_texts` give what is drawn.

Lower-level pieces live in their own modules:

- `paddleball.geometry` — `WINDOW_WIDTH`, `WINDOW_HEIGHT`, the immutable
  `Vec2`, `normalize` (raises `ValueError` for a zero vector) and the
  axis-aligned `Rect` with `intersects` and `intersection`.
- `paddleball.paddle` — `Paddle`, which moves vertically at 300 units per
  second and refuses a step that would leave the field.
- `paddleball.ball` — `Ball`, which bounces off borders and paddles,
  serves again with `reset`, and reports what happened through `BallEvent`.
- `paddleball.collision` — a bounce-by-reflection model: `dot`,
  `normalise`, `reflect`, `Manifold`, `get_manifold`, `SolidObject`,
  `create_solid_objects` and `CollisionBall`.
- `paddleball.app` — the window code: `main`, `collision_demo` and
  `parse_args`.

## What it does not do

There is no computer opponent, no score limit or end of match, and no
menu: the game runs until the window is closed. The font and sound files
have to be provided separately.

## Running the tests

```
pip install ".[test]"
pytest
```