import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from core import GameMode  # noqa: E402
from match import Match  # noqa: E402


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def two_player(rng):
    m = Match(800, 600, rng=rng)
    m.start(GameMode.TWO_PLAYER)
    return m


@pytest.fixture
def single_player(rng):
    m = Match(800, 600, rng=rng)
    m.start(GameMode.SINGLE_PLAYER, "hard")
    return m
