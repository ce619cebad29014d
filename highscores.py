import json
import locale
import logging
import os
from datetime import date

from config import HIGHSCORE_FILE, HIGHSCORE_KEY, HIGHSCORE_MAX

logger = logging.getLogger(__name__)


def use_user_locale():
    """Format dates in the user's locale instead of C; returns False if it is unavailable."""
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error as e:
        logger.warning("keeping the C locale for dates: %s", e)
        return False
    return True


def today_label():
    # locale's date representation, e.g. 10/19/26
    return date.today().strftime("%x")


class HighScoreStore:
    """Top scores kept under one key of a small JSON file.

    Reads never fail: a missing, unreadable or malformed file is an empty list.
    """

    def __init__(self, path=HIGHSCORE_FILE, key=HIGHSCORE_KEY, max_entries=HIGHSCORE_MAX):
        self.path = path
        self.key = key
        self.max_entries = max_entries

    def _read_file(self):
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("could not read high scores from %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("ignoring malformed high score file %s", self.path)
            return {}
        return data

    def load(self):
        raw = self._read_file().get(self.key, [])
        if not isinstance(raw, list):
            logger.warning("ignoring malformed %r entry in %s", self.key, self.path)
            return []
        scores = []
        for entry in raw:
            try:
                scores.append({"score": int(entry["score"]), "date": str(entry["date"])})
            except (KeyError, TypeError, ValueError):
                logger.debug("skipping bad high score entry %r", entry)
        return scores

    def save(self, scores):
        data = self._read_file()
        data[self.key] = scores
        try:
            folder = os.path.dirname(self.path)
            if folder:
                os.makedirs(folder, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            logger.warning("could not save high scores to %s: %s", self.path, e)
            return False
        return True

    def add(self, score: int, when=None):
        scores = self.load()
        scores.append({"score": int(score), "date": when if when is not None else today_label()})
        scores.sort(key=lambda s: s["score"], reverse=True)
        scores = scores[:self.max_entries]
        if self.save(scores):
            logger.info("high score %d saved", score)
        return scores

    def is_high_score(self, score: int):
        scores = self.load()
        if len(scores) < self.max_entries:
            return True
        return score > scores[-1]["score"]
