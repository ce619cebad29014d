import random
from config import DEFAULT_DIFFICULTY, AI_TRACK_RATE, AI_JITTER_PX
from core import Arena, Ball, Difficulty, Paddle, clamp_paddle

class BotAI:
    def __init__(self, difficulty=DEFAULT_DIFFICULTY, rng=None):
        self.rng = rng if rng is not None else random.Random()
        self.set_difficulty(difficulty)
        self.ticks = 0
        self.jitters = 0
        self.last_move = None

    def set_difficulty(self, difficulty):
        # accepts a Difficulty or its string value; unknown names raise ValueError
        self.difficulty = Difficulty(difficulty)
        self.mistake_rate = self.difficulty.mistake_rate

    def reset(self):
        self.ticks = 0
        self.jitters = 0
        self.last_move = None

    @property
    def jitter_ratio(self):
        if self.ticks == 0:
            return 0.0
        return self.jitters / self.ticks

    def update(self, bot: Paddle, ball: Ball, arena: Arena):
        self.ticks += 1
        if self.rng.random() < self.mistake_rate:
            bot.y += AI_JITTER_PX if self.rng.random() > 0.5 else -AI_JITTER_PX
            self.jitters += 1
            self.last_move = "jitter"
        else:
            target_y = ball.y - bot.h / 2
            bot.y += (target_y - bot.y) * AI_TRACK_RATE
            self.last_move = "track"
        clamp_paddle(bot, arena)
