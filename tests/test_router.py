import threading
import time
from pathlib import Path

import pytest

from gophertypist.game import LEVELS, Mode
from gophertypist.leaderboard import Leaderboard, LeaderboardEntry, deserialize
from gophertypist.router import Router, Screen


class FakeAudio:
    def __init__(self):
        self.calls = []

    def play_sfx(self, path):
        self.calls.append(("sfx", Path(path).name))

    def start_background(self, path):
        self.calls.append(("bg_start", Path(path).name))

    def stop_background(self):
        self.calls.append(("bg_stop", None))


@pytest.fixture
def audio():
    return FakeAudio()


@pytest.fixture
def router(tmp_path, audio):
    return Router(audio=audio, leaderboard_path=tmp_path / "lb.bin")


def type_whole_level(router):
    for ch in router.game.text:
        router.game.handle_char(ch)


def test_starts_on_menu(router):
    assert router.screen is Screen.MENU
    assert router.game is None
    assert router.leaderboard.entries == []


def test_start_game_plays_first_level(router, audio):
    router.start_game(Mode.HARD)
    assert router.screen is Screen.PLAYING
    assert router.mode is Mode.HARD
    assert router.game.level == 0
    assert router.game.mode is Mode.HARD
    assert audio.calls == [("bg_start", "background.wav")]


def test_go_to_menu_stops_music(router, audio):
    router.start_game(Mode.QUICK)
    router.go_to_menu()
    assert router.screen is Screen.MENU
    assert router.game is None
    assert audio.calls[-1] == ("bg_stop", None)


def test_finish_level_on_empty_board_is_new_best(router, audio):
    router.start_game(Mode.QUICK)
    type_whole_level(router)
    router.name_input = "leftover"
    router.finish_level()
    assert router.screen is Screen.NAME_ENTRY
    assert router.name_entry.is_new_best is True
    assert router.name_entry.score.level == 0
    assert router.current_level == 1
    assert router.name_input == ""
    assert audio.calls[-1] == ("sfx", "new_best.wav")


def test_finish_level_below_best_plays_level_complete(router, audio):
    router.leaderboard.entries = [LeaderboardEntry(name="top", wpm=1e12)]
    router.start_game(Mode.QUICK)
    type_whole_level(router)
    router.finish_level()
    assert router.name_entry.is_new_best is False
    assert audio.calls[-1] == ("sfx", "level_complete.wav")


def test_finish_level_without_game_raises(router):
    with pytest.raises(RuntimeError):
        router.finish_level()


def test_submit_name_defaults_to_anonymous_and_saves(router, tmp_path):
    router.start_game(Mode.QUICK)
    type_whole_level(router)
    router.finish_level()
    router.submit_name()
    assert router.screen is Screen.SCORE
    assert router.leaderboard.entries[0].name == "Anonymous"
    assert router.score.score == router.name_entry.score
    assert router.score.player_rank == router.leaderboard.rank_of(
        router.name_entry.score.wpm
    )
    saved = deserialize((tmp_path / "lb.bin").read_bytes())
    assert [e.name for e in saved] == ["Anonymous"]


def test_submit_name_uses_entered_name(router):
    router.start_game(Mode.QUICK)
    type_whole_level(router)
    router.finish_level()
    router.name_input = "Grace"
    router.submit_name()
    assert router.leaderboard.entries[0].name == "Grace"
    assert router.leaderboard.entries[0].level == router.name_entry.score.level


def test_timeout_plays_sound(router, audio):
    router.start_game(Mode.HARD)
    router.timeout()
    assert router.screen is Screen.TIMEOUT
    assert audio.calls[-1] == ("sfx", "timeout.wav")


def test_next_level_advances(router):
    router.start_game(Mode.QUICK)
    router.current_level = 3
    router.next_level()
    assert router.current_level == 4
    assert router.game.level == 4
    assert router.screen is Screen.PLAYING


def test_next_level_past_end_returns_to_menu(router):
    router.start_game(Mode.QUICK)
    router.current_level = len(LEVELS) - 1
    router.next_level()
    assert router.screen is Screen.MENU
    assert router.game is None
    assert router.has_next_level() is False


def test_has_next_level(router):
    router.current_level = len(LEVELS) - 1
    assert router.has_next_level() is True
    router.current_level = len(LEVELS)
    assert router.has_next_level() is False


def test_poll_leaderboard_waits_for_loader(tmp_path, audio):
    release = threading.Event()
    loaded = Leaderboard(path=tmp_path / "x.bin", entries=[LeaderboardEntry(name="Ada")])
    seen_paths = []

    def loader(path):
        seen_paths.append(path)
        release.wait(5)
        return loaded

    router = Router(leaderboard_loader=loader, audio=audio, leaderboard_path=tmp_path / "x.bin")
    router.poll_leaderboard()
    assert router.leaderboard.entries == []

    release.set()
    deadline = time.monotonic() + 5
    while router.leaderboard is not loaded and time.monotonic() < deadline:
        router.poll_leaderboard()
        time.sleep(0.01)
    assert router.leaderboard is loaded
    assert seen_paths == [tmp_path / "x.bin"]

    router.leaderboard = Leaderboard(path=tmp_path / "y.bin")
    router.poll_leaderboard()
    assert router.leaderboard.entries == []