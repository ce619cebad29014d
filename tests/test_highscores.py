import json
import locale
import logging
from datetime import date

import pytest

from highscores import HighScoreStore, today_label, use_user_locale


@pytest.fixture
def store(tmp_path):
    return HighScoreStore(str(tmp_path / "scores" / "highscores.json"))


def seed(store, values):
    store.save([{"score": v, "date": "01/01/26"} for v in values])


def test_missing_file_is_empty(store):
    assert store.load() == []
    assert store.is_high_score(1)


def test_insert_keeps_top_five_sorted(store):
    seed(store, [10, 9, 8, 7, 6])
    scores = store.add(8, when="10/19/26")
    assert [s["score"] for s in scores] == [10, 9, 8, 8, 7]
    assert [s["score"] for s in store.load()] == [10, 9, 8, 8, 7]


def test_low_score_does_not_make_the_list(store):
    seed(store, [10, 9, 8, 7, 6])
    assert not store.is_high_score(6)
    assert store.is_high_score(7)
    assert [s["score"] for s in store.add(3)] == [10, 9, 8, 7, 6]


def test_records_are_stored_under_the_fixed_key(store):
    store.add(5, when="10/19/26")
    with open(store.path, encoding="utf-8") as f:
        data = json.load(f)
    assert data == {"pongHighScores": [{"score": 5, "date": "10/19/26"}]}


def test_other_keys_in_the_file_survive(store, tmp_path):
    path = tmp_path / "shared.json"
    path.write_text(json.dumps({"settings": {"music": False}}), encoding="utf-8")
    shared = HighScoreStore(str(path))
    shared.add(4, when="x")
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["settings"] == {"music": False}
    assert data["pongHighScores"][0]["score"] == 4


def test_default_date_is_today(store):
    scores = store.add(5)
    assert scores[0]["date"] == today_label()


@pytest.mark.parametrize("content", [
    "not json at all",
    "[1, 2, 3]",
    '{"pongHighScores": "oops"}',
])
def test_corrupt_store_reads_as_empty(tmp_path, content):
    path = tmp_path / "highscores.json"
    path.write_text(content, encoding="utf-8")
    store = HighScoreStore(str(path))
    assert store.load() == []
    assert [s["score"] for s in store.add(5, when="d")] == [5]


def test_bad_entries_are_skipped(tmp_path):
    path = tmp_path / "highscores.json"
    path.write_text(json.dumps({"pongHighScores": [
        {"score": 7, "date": "a"},
        {"date": "no score"},
        {"score": "eleven", "date": "b"},
        3,
    ]}), encoding="utf-8")
    assert HighScoreStore(str(path)).load() == [{"score": 7, "date": "a"}]


def test_unwritable_store_fails_soft(tmp_path):
    # a directory where the file should be: reads and writes both fail
    store = HighScoreStore(str(tmp_path))
    assert store.load() == []
    assert store.save([]) is False
    assert store.add(9, when="d") == [{"score": 9, "date": "d"}]


@pytest.fixture
def restore_time_locale():
    saved = locale.setlocale(locale.LC_TIME)
    yield
    locale.setlocale(locale.LC_TIME, saved)


def test_user_locale_formats_dates(monkeypatch, restore_time_locale):
    monkeypatch.setenv("LC_ALL", "C")
    assert use_user_locale()
    assert locale.setlocale(locale.LC_TIME) == "C"
    assert today_label() == date.today().strftime("%m/%d/%y")


def test_unknown_user_locale_falls_back(monkeypatch, restore_time_locale, caplog):
    locale.setlocale(locale.LC_TIME, "C")
    monkeypatch.setenv("LC_ALL", "xx_NOWHERE.UTF-8")
    with caplog.at_level(logging.WARNING, logger="highscores"):
        assert not use_user_locale()
    assert "C locale" in caplog.text
    assert locale.setlocale(locale.LC_TIME) == "C"
    assert today_label() == date.today().strftime("%m/%d/%y")


def test_corrupt_store_warns_once_per_load(tmp_path, caplog):
    path = tmp_path / "highscores.json"
    path.write_text("{{{", encoding="utf-8")
    store = HighScoreStore(str(path))
    with caplog.at_level(logging.WARNING, logger="highscores"):
        scores = store.load()
    assert scores == []
    assert len([r for r in caplog.records if r.levelno == logging.WARNING]) == 1
