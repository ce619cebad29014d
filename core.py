import math
import random
from dataclasses import dataclass
from enum import Enum

from config import (
    W, H, DIFFS, PADDLE_W, PADDLE_MARGIN, PADDLE_SPEED, PADDLE_H_RATIO,
    BALL_R_RATIO, BALL_RESTART_SPEED, BALL_RESTART_DX, BALL_SPEED_STEP,
    MAX_BOUNCE_ANGLE,
)


class GameState(Enum):
    MENU = "menu"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "gameOver"


class GameMode(Enum):
    SINGLE_PLAYER = "singlePlayer"
    TWO_PLAYER = "twoPlayer"


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def mistake_rate(self) -> float:
        return DIFFS[self.value]


class Side(Enum):
    LEFT = "left"
    RIGHT = "right"


class HitKind(Enum):
    WALL = "wall"
    PADDLE = "paddle"


@dataclass(frozen=True)
class InputSnapshot:
    up: bool = False
    down: bool = False


NO_INPUT = InputSnapshot()


# events emitted by a tick, consumed by the shell
@dataclass(frozen=True)
class Hit:
    kind: HitKind


@dataclass(frozen=True)
class Score:
    side: Side


@dataclass(frozen=True)
class RallyMilestone:
    count: int


@dataclass(frozen=True)
class GameOver:
    winner: Side
    winner_name: str


@dataclass
class Arena:
    width: float = W
    height: float = H

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"arena must have a positive size, got {self.width}x{self.height}")

    @property
    def paddle_h(self):
        return self.height * PADDLE_H_RATIO

    @property
    def ball_r(self):
        return min(self.width, self.height) * BALL_R_RATIO

    @property
    def center(self):
        return self.width / 2, self.height / 2


@dataclass
class Paddle:
    x: float
    y: float
    h: float
    w: float = PADDLE_W
    speed: float = PADDLE_SPEED
    score: int = 0

    @property
    def center_y(self):
        return self.y + self.h / 2


@dataclass
class Ball:
    x: float
    y: float
    r: float
    speed: float = BALL_RESTART_SPEED
    dx: float = 0.0
    dy: float = 0.0

    def velocity_length(self):
        return math.hypot(self.dx, self.dy)


def clamp(v, a, b):
    return max(a, min(b, v))


def right_paddle_x(arena: Arena):
    return arena.width - PADDLE_W - PADDLE_MARGIN


def clamp_paddle(p: Paddle, arena: Arena):
    p.y = clamp(p.y, 0.0, max(0.0, arena.height - p.h))


def move_paddle(p: Paddle, inp: InputSnapshot, arena: Arena):
    if inp.up:
        p.y -= p.speed
    if inp.down:
        p.y += p.speed
    clamp_paddle(p, arena)


def is_colliding(p: Paddle, ball: Ball):
    return (ball.x - ball.r < p.x + p.w and
            ball.x + ball.r > p.x and
            ball.y - ball.r < p.y + p.h and
            ball.y + ball.r > p.y)


def bounce_walls(ball: Ball, arena: Arena):
    # the ball is not pushed back inside, so a fast ball can sit past the edge for a tick
    if ball.y + ball.r > arena.height or ball.y - ball.r < 0:
        ball.dy = -ball.dy
        return True
    return False


def impact_offset(ball: Ball, p: Paddle):
    """Where the ball struck the paddle: -1 at the top edge, 0 at the centre, +1 at the bottom.

    Not clamped; a ball clipping a paddle corner can give |offset| > 1.
    """
    return (ball.y - p.center_y) / (p.h / 2)


def deflect(ball: Ball, p: Paddle, direction: int):
    angle = impact_offset(ball, p) * (math.pi * MAX_BOUNCE_ANGLE)
    ball.speed += BALL_SPEED_STEP
    ball.dx = direction * ball.speed * math.cos(angle)
    ball.dy = ball.speed * math.sin(angle)


def reset_ball(ball: Ball, arena: Arena, rng: random.Random):
    ball.x, ball.y = arena.center
    ball.r = arena.ball_r
    ball.speed = BALL_RESTART_SPEED
    ball.dx = BALL_RESTART_DX if rng.random() > 0.5 else -BALL_RESTART_DX
    # serves always start upward, dy in [-10, -5)
    ball.dy = rng.random() * 5 - 10


def check_score(ball: Ball, arena: Arena):
    if ball.x - ball.r < 0:
        return Side.RIGHT
    if ball.x + ball.r > arena.width:
        return Side.LEFT
    return None
