import os

W, H = 1000, 600

BG = (10, 10, 18)
WHITE = (235, 235, 235)
GRAY = (130, 130, 130)
CYAN = (80, 220, 255)
MAGENTA = (245, 90, 200)
YELLOW = (245, 220, 80)

FPS = 60

PADDLE_W = 15
PADDLE_MARGIN = 30
PADDLE_SPEED = 6.0
PADDLE_H_RATIO = 1 / 6

BALL_R_RATIO = 0.015
BALL_RESTART_SPEED = 10.0
BALL_RESTART_DX = 10.0
BALL_SPEED_STEP = 0.2
MAX_BOUNCE_ANGLE = 0.25  # fraction of pi

RALLY_MILESTONE = 5

WIN_SCORE = 5

AI_TRACK_RATE = 0.08
AI_JITTER_PX = 5.0

# mistake probability per tick: a higher level makes fewer mistakes
DIFFS = {
    "easy": 0.30,
    "medium": 0.15,
    "hard": 0.01,
}
DEFAULT_DIFFICULTY = "medium"

COUNTDOWN_FROM = 3
COUNTDOWN_STEP_SEC = 0.7

MUSIC_VOL_DEFAULT = 0.5
SFX_VOL_DEFAULT = 0.6
TEMPO_STEP = 0.005

HIGHSCORE_KEY = "pongHighScores"
HIGHSCORE_MAX = 5
HIGHSCORE_FILE = os.environ.get(
    "PONG_HIGHSCORE_FILE",
    os.path.join(os.path.expanduser("~"), ".neon_pong", "highscores.json"),
)

LOG_LEVEL = os.environ.get("PONG_LOG_LEVEL", "INFO").upper()

SPARK_LIFE = (0.15, 0.40)
SPARK_N = 14
