import math
import random

import pytest

from core import (
    Arena, Ball, Paddle, Difficulty, InputSnapshot, Side,
    clamp, clamp_paddle, move_paddle, is_colliding, bounce_walls, impact_offset, deflect,
    reset_ball, check_score, right_paddle_x,
)


def test_arena_derives_paddle_height_and_ball_radius():
    arena = Arena(800, 600)
    assert arena.paddle_h == pytest.approx(100)
    assert arena.ball_r == pytest.approx(9)
    assert arena.center == (400, 300)
    assert right_paddle_x(arena) == 800 - 15 - 30


@pytest.mark.parametrize("w,h", [(0, 600), (800, 0), (-1, 10)])
def test_arena_rejects_empty_size(w, h):
    with pytest.raises(ValueError):
        Arena(w, h)


def test_difficulty_mistake_rates():
    assert Difficulty.EASY.mistake_rate == 0.30
    assert Difficulty.MEDIUM.mistake_rate == 0.15
    assert Difficulty.HARD.mistake_rate == 0.01
    assert Difficulty("hard") is Difficulty.HARD
    with pytest.raises(ValueError):
        Difficulty("impossible")


def test_clamp():
    assert clamp(5, 0, 3) == 3
    assert clamp(-1, 0, 3) == 0
    assert clamp(2, 0, 3) == 2


def test_move_paddle_clamps_to_arena():
    arena = Arena(800, 600)
    p = Paddle(30, 2, arena.paddle_h)
    move_paddle(p, InputSnapshot(up=True), arena)
    assert p.y == 0

    p.y = arena.height - p.h - 1
    move_paddle(p, InputSnapshot(down=True), arena)
    assert p.y == arena.height - p.h


def test_move_paddle_both_keys_cancel():
    arena = Arena(800, 600)
    p = Paddle(30, 200, arena.paddle_h)
    move_paddle(p, InputSnapshot(up=True, down=True), arena)
    assert p.y == 200


def test_clamp_paddle_taller_than_arena():
    arena = Arena(800, 600)
    p = Paddle(30, 50, 700)
    clamp_paddle(p, arena)
    assert p.y == 0


def test_is_colliding_bounding_box():
    p = Paddle(30, 250, 100)
    assert is_colliding(p, Ball(50, 300, 9))
    assert not is_colliding(p, Ball(60, 300, 9))
    # box corners overlap even though the circle itself would miss
    assert is_colliding(p, Ball(52, 243, 9))


def test_wall_bounce_flips_dy_without_moving_ball():
    arena = Arena(800, 600)
    ball = Ball(400, -3, 9, dy=-3)
    assert bounce_walls(ball, arena)
    assert ball.dy == 3
    assert ball.y == -3

    ball = Ball(400, 300, 9, dy=4)
    assert not bounce_walls(ball, arena)
    assert ball.dy == 4


def test_deflect_centre_hit_goes_straight_back():
    p = Paddle(30, 250, 100)
    ball = Ball(50, 300, 9, speed=10, dx=-10, dy=0)
    deflect(ball, p, 1)
    assert ball.speed == pytest.approx(10.2)
    assert ball.dx == pytest.approx(10.2)
    assert ball.dy == pytest.approx(0)


def test_deflect_angle_follows_impact_offset():
    p = Paddle(755, 250, 100)
    ball = Ball(750, 325, 9, speed=12, dx=12, dy=0)
    deflect(ball, p, -1)
    angle = 0.5 * math.pi / 4
    assert ball.dx == pytest.approx(-12.2 * math.cos(angle))
    assert ball.dy == pytest.approx(12.2 * math.sin(angle))
    assert ball.velocity_length() == pytest.approx(ball.speed)


def test_impact_offset_is_not_clamped():
    p = Paddle(30, 250, 100)
    ball = Ball(50, 245, 9, speed=10, dx=-10)
    assert is_colliding(p, ball)
    assert impact_offset(ball, p) == pytest.approx(-1.1)
    deflect(ball, p, 1)
    assert abs(ball.dy) > ball.speed * math.sin(math.pi / 4)


def test_reset_ball_serve_distribution():
    arena = Arena(800, 600)
    rng = random.Random(7)
    ball = Ball(10, 10, 1, speed=20, dx=3, dy=3)
    seen_dx = set()
    for _ in range(500):
        reset_ball(ball, arena, rng)
        assert (ball.x, ball.y) == (400, 300)
        assert ball.r == pytest.approx(9)
        assert ball.speed == 10
        assert -10 <= ball.dy < -5
        seen_dx.add(ball.dx)
    assert seen_dx == {10, -10}


def test_check_score_sides():
    arena = Arena(800, 600)
    assert check_score(Ball(5, 300, 9), arena) == Side.RIGHT
    assert check_score(Ball(795, 300, 9), arena) == Side.LEFT
    assert check_score(Ball(400, 300, 9), arena) is None
