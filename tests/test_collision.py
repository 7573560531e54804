import pytest

from paddleball.collision import (
    CollisionBall,
    Manifold,
    SolidObject,
    create_solid_objects,
    dot,
    get_manifold,
    normalise,
    reflect,
)
from paddleball.geometry import Rect, Vec2


def test_dot_matches_vector_dot():
    a, b = Vec2(1.5, -2.0), Vec2(3.0, 4.0)
    assert dot(a, b) == a.dot(b)


def test_normalise_unit_and_zero():
    assert normalise(Vec2(1.2, 0.75)).length() == pytest.approx(1.0)
    assert normalise(Vec2(0, 0)) == Vec2(0, 0)


def test_reflect_flips_normal_component():
    assert reflect(Vec2(1, 1), Vec2(0, -1)) == Vec2(1, -1)
    v = Vec2(0.3, -0.7)
    n = Vec2(1, 0)
    r = reflect(v, n)
    assert r.length() == pytest.approx(v.length())
    assert reflect(r, n) == pytest.approx(v) if False else reflect(r, n) == v


@pytest.mark.parametrize(
    "normal_in, expected",
    [(Vec2(-5, 0), Vec2(1, 0)), (Vec2(5, 0), Vec2(-1, 0))],
)
def test_manifold_on_narrow_overlap_uses_x(normal_in, expected):
    overlap = Rect(0, 0, 2, 10)
    assert get_manifold(overlap, normal_in) == Manifold(expected, 2)


@pytest.mark.parametrize(
    "normal_in, expected",
    [(Vec2(0, -5), Vec2(0, 1)), (Vec2(0, 5), Vec2(0, -1))],
)
def test_manifold_on_flat_overlap_uses_y(normal_in, expected):
    overlap = Rect(0, 0, 10, 3)
    assert get_manifold(overlap, normal_in) == Manifold(expected, 3)


def test_solid_object_bounds_centered():
    solid = SolidObject(Vec2(100.0, 20.0), Vec2(300.0, 700.0))
    bounds = solid.bounds()
    assert bounds.left + bounds.width / 2 == solid.position.x
    assert bounds.top + bounds.height / 2 == solid.position.y
    assert (bounds.width, bounds.height) == (100.0, 20.0)


def test_scene_has_paddle_last():
    objects = create_solid_objects()
    assert len(objects) == 5
    assert objects[-1] == SolidObject(Vec2(100.0, 20.0), Vec2(300.0, 700.0))


def test_ball_moves_freely_when_clear():
    ball = CollisionBall(create_solid_objects(), Vec2(300.0, 400.0))
    start = ball.position
    velocity = ball.velocity
    ball.update(0.01)
    assert ball.velocity == velocity
    assert ball.position.x == pytest.approx(start.x + velocity.x * CollisionBall.SPEED * 0.01)
    assert ball.position.y == pytest.approx(start.y + velocity.y * CollisionBall.SPEED * 0.01)


def test_ball_bounces_off_right_wall():
    objects = create_solid_objects()
    ball = CollisionBall(objects, Vec2(575.0, 400.0))
    vy = ball.velocity.y
    assert ball.velocity.x > 0
    ball.update(0.01)
    assert ball.velocity.x < 0
    assert ball.velocity.y == pytest.approx(vy)
    assert not ball.bounds().intersects(objects[2].bounds())


def test_ball_stays_in_arena_over_time():
    objects = create_solid_objects()
    ball = CollisionBall(objects)
    for _ in range(2000):
        ball.update(1 / 120)
        assert ball.velocity.length() == pytest.approx(1.0)
        assert 0 < ball.position.x < 600
        assert 0 < ball.position.y < 800


def test_ball_sees_moved_paddle():
    objects = create_solid_objects()
    ball = CollisionBall(objects, Vec2(100.0, 400.0))
    objects[-1].position = Vec2(100.0, 400.0)
    ball.update(0.0)
    assert not ball.bounds().intersects(objects[-1].bounds())