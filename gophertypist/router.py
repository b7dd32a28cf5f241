"""Navigation between screens and ownership of the current game."""

from __future__ import annotations

import queue
import threading
import time
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import Callable

from gophertypist.audio import AudioManager, asset
from gophertypist.game import LEVELS, Game, LevelScore, Mode
from gophertypist.leaderboard import (
    Leaderboard,
    LeaderboardEntry,
    empty_leaderboard,
    load_leaderboard,
)

ANONYMOUS = "Anonymous"


class Screen(IntEnum):
    """Which screen is shown."""

    MENU = 0
    PLAYING = 1
    NAME_ENTRY = 2
    SCORE = 3
    TIMEOUT = 4


def _zero_score() -> LevelScore:
    return LevelScore(level=0, accuracy=0.0, wpm=0.0, cps=0.0)


@dataclass
class NameEntryData:
    """State for the name entry screen."""

    score: LevelScore = field(default_factory=_zero_score)
    is_new_best: bool = False


@dataclass
class ScoreData:
    """State for the score screen."""

    score: LevelScore = field(default_factory=_zero_score)
    player_rank: int = 0


class Router:
    """Owns navigation state, the current game and the leaderboard."""

    def __init__(
        self,
        leaderboard_loader: Callable[[Path | str | None], Leaderboard] = load_leaderboard,
        audio: AudioManager | None = None,
        leaderboard_path: Path | str | None = None,
    ) -> None:
        self.screen = Screen.MENU
        self.name_entry = NameEntryData()
        self.score = ScoreData()
        self.game: Game | None = None
        self.mode = Mode.QUICK
        self.current_level = 0
        self.leaderboard = empty_leaderboard(leaderboard_path)
        self.name_input = ""
        self.audio = audio if audio is not None else AudioManager()

        self._pending: queue.Queue[Leaderboard] = queue.Queue(maxsize=1)
        self._loading = True
        threading.Thread(
            target=lambda: self._pending.put(leaderboard_loader(leaderboard_path)),
            name="leaderboard-load",
            daemon=True,
        ).start()

    def poll_leaderboard(self) -> None:
        """Take the background-loaded leaderboard if it is ready; never blocks."""
        if not self._loading:
            return
        try:
            board = self._pending.get_nowait()
        except queue.Empty:
            return
        self.leaderboard = board
        self._loading = False

    def go_to_menu(self) -> None:
        self.audio.stop_background()
        self.screen = Screen.MENU
        self.game = None

    def start_game(self, mode: Mode) -> None:
        self.mode = Mode(mode)
        self.current_level = 0
        self.audio.start_background(asset("background.wav"))
        self._start_level()

    def _start_level(self) -> None:
        self.game = Game(self.mode, self.current_level)
        self.screen = Screen.PLAYING

    def next_level(self) -> None:
        self.current_level += 1
        if self.current_level >= len(LEVELS):
            self.go_to_menu()
            return
        self._start_level()

    def finish_level(self) -> None:
        """Score the finished level and move to the name entry screen."""
        if self.game is None:
            raise RuntimeError("no game in progress")
        score = self.game.score()
        is_new_best = self.leaderboard.is_new_best(score.wpm)
        sound = "new_best.wav" if is_new_best else "level_complete.wav"
        self.audio.play_sfx(asset(sound))

        self.current_level += 1
        self.name_input = ""
        self.screen = Screen.NAME_ENTRY
        self.name_entry = NameEntryData(score=score, is_new_best=is_new_best)

    def submit_name(self) -> None:
        """Record the pending score under the entered name and show the ranking."""
        score = self.name_entry.score
        entry = LeaderboardEntry(
            name=self.name_input or ANONYMOUS,
            wpm=score.wpm,
            accuracy=score.accuracy,
            cps=score.cps,
            level=score.level & 0xFF,
            timestamp=int(time.time()),
        )
        self.leaderboard.insert(entry)
        rank = self.leaderboard.rank_of(score.wpm)
        self.screen = Screen.SCORE
        self.score = ScoreData(score=score, player_rank=rank)

    def timeout(self) -> None:
        self.audio.play_sfx(asset("timeout.wav"))
        self.screen = Screen.TIMEOUT

    def has_next_level(self) -> bool:
        return self.current_level < len(LEVELS)