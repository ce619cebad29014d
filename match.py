import logging
import random

from ai import BotAI
from config import W, H, PADDLE_MARGIN, WIN_SCORE, RALLY_MILESTONE, DEFAULT_DIFFICULTY
from core import (
    Arena, Ball, Paddle, GameMode, GameState, Side, HitKind, InputSnapshot, NO_INPUT,
    Hit, Score, RallyMilestone, GameOver,
    right_paddle_x, move_paddle, is_colliding, bounce_walls, deflect, reset_ball, check_score,
)

logger = logging.getLogger(__name__)


class Match:
    """All state of one game: arena, paddles, ball, rally, scores and the AI.

    The shell owns a single Match, drives the lifecycle methods from its menus
    and calls :func:`tick` once per frame.
    """

    def __init__(self, width=W, height=H, rng=None):
        self.rng = rng if rng is not None else random.Random()
        self.arena = Arena(width, height)
        self.left = Paddle(PADDLE_MARGIN, 0.0, self.arena.paddle_h)
        self.right = Paddle(right_paddle_x(self.arena), 0.0, self.arena.paddle_h)
        self.ball = Ball(0.0, 0.0, self.arena.ball_r)
        self.bot = BotAI(DEFAULT_DIFFICULTY, rng=self.rng)
        self.mode = GameMode.SINGLE_PLAYER
        self.state = GameState.MENU
        self.rally = 0
        self.resize(width, height)

    @property
    def difficulty(self):
        return self.bot.difficulty

    def start(self, mode=GameMode.SINGLE_PLAYER, difficulty=DEFAULT_DIFFICULTY):
        self.mode = GameMode(mode)
        self.bot.set_difficulty(difficulty)
        self.bot.reset()
        self.left.score = 0
        self.right.score = 0
        self.resize(self.arena.width, self.arena.height)
        self.reset_ball()
        self.state = GameState.PLAYING
        logger.info("game started: %s, difficulty %s", self.mode.value, self.difficulty.value)

    def pause(self):
        if self.state != GameState.PLAYING:
            return False
        self.state = GameState.PAUSED
        return True

    def resume(self):
        if self.state != GameState.PAUSED:
            return False
        self.state = GameState.PLAYING
        return True

    def exit_to_menu(self):
        self.state = GameState.MENU

    def resize(self, width, height):
        self.arena = Arena(width, height)
        ph = self.arena.paddle_h
        for p in (self.left, self.right):
            p.h = ph
            p.y = height / 2 - ph / 2
        self.left.x = PADDLE_MARGIN
        self.right.x = right_paddle_x(self.arena)
        self.ball.x, self.ball.y = self.arena.center
        self.ball.r = self.arena.ball_r

    def reset_ball(self):
        reset_ball(self.ball, self.arena, self.rng)
        self.rally = 0

    def paddle_for(self, side: Side):
        return self.left if side == Side.LEFT else self.right

    @property
    def winner(self):
        if self.left.score >= WIN_SCORE or self.right.score >= WIN_SCORE:
            return Side.LEFT if self.left.score > self.right.score else Side.RIGHT
        return None

    def winner_name(self, side: Side):
        if side == Side.LEFT:
            return "Player 1"
        return "Player 2" if self.mode == GameMode.TWO_PLAYER else "CPU"

    @property
    def human_won(self):
        return self.mode == GameMode.SINGLE_PLAYER and self.winner == Side.LEFT


def _collide_paddles(match: Match, events):
    ball = match.ball
    on_left = ball.x < match.arena.width / 2
    paddle = match.left if on_left else match.right
    if not is_colliding(paddle, ball):
        return
    deflect(ball, paddle, 1 if on_left else -1)
    match.rally += 1
    if match.rally % RALLY_MILESTONE == 0:
        logger.debug("rally milestone: %d", match.rally)
        events.append(RallyMilestone(match.rally))
    events.append(Hit(HitKind.PADDLE))


def tick(match: Match, left_input: InputSnapshot = NO_INPUT, right_input: InputSnapshot = NO_INPUT):
    """Advance the match by one frame and return the events it produced."""
    if match.state != GameState.PLAYING:
        return []

    events = []
    arena, ball = match.arena, match.ball

    move_paddle(match.left, left_input, arena)
    if match.mode == GameMode.TWO_PLAYER:
        move_paddle(match.right, right_input, arena)
    else:
        match.bot.update(match.right, ball, arena)

    ball.x += ball.dx
    ball.y += ball.dy

    if bounce_walls(ball, arena):
        events.append(Hit(HitKind.WALL))

    _collide_paddles(match, events)

    scorer = check_score(ball, arena)
    if scorer is not None:
        match.paddle_for(scorer).score += 1
        match.reset_ball()
        events.append(Score(scorer))
        logger.debug("%s scores: %d-%d", scorer.value, match.left.score, match.right.score)

        winner = match.winner
        if winner is not None:
            match.state = GameState.GAME_OVER
            name = match.winner_name(winner)
            events.append(GameOver(winner, name))
            logger.info("game over: %s wins %d-%d", name, match.left.score, match.right.score)
            if match.mode == GameMode.SINGLE_PLAYER:
                logger.debug("cpu jittered on %d of %d ticks (%.3f)",
                             match.bot.jitters, match.bot.ticks, match.bot.jitter_ratio)

    return events
