"""Game state for a single typing level."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from enum import Enum, IntEnum

HARD_TARGET_WPM = 20.0
CHAR_FONT_SIZE = 144.0
WINDOW_RADIUS = 3
HARD_GRACE_SECONDS = 15.0
SHAKE_SECONDS = 0.5

LEVELS: tuple[str, ...] = (
    "red orange yellow green blue indigo violet are the colors of the rainbow.",
    "yeshua loves me. yeshua has plans to prosper me. i love yeshua.",
    "i am beautiful. i am worthy. i am brave. i am confident. i am kind.",
    "solutions present themselves daily to me. money flows to me when I need it.",
    "no weapon formed against me prospers. yeshua protects me.",
    "no conspiracy waged against me prospers. yeshua prospers me.",
    "i the lord you god will deliver you from the evil one. yeshua saves me.",
)


class Mode(IntEnum):
    """Game mode."""

    QUICK = 0
    HARD = 1


class Correctness(IntEnum):
    """State of a single character in the level text."""

    UNTRIED = 0
    CORRECT = 1
    WRONG = 2


class GameEvent(Enum):
    """Outcome of a keystroke."""

    NONE = 0
    CORRECT = 1
    WRONG = 2
    LEVEL_COMPLETE = 3


@dataclass(frozen=True)
class LevelScore:
    """Final statistics for a completed level."""

    level: int
    accuracy: float
    wpm: float
    cps: float


@dataclass
class Position:
    """Text origin as fractions of the screen width and height."""

    x: float = 0.0
    y: float = 0.0


def _time_allotted(text_length: int) -> float:
    word_count = text_length / 5.0
    return word_count / HARD_TARGET_WPM * 60.0 + HARD_GRACE_SECONDS


@dataclass(eq=False)
class _GameFields:
    mode: Mode
    level: int
    text: str = ""
    cursor: int = 0
    correctness: list[Correctness] = field(default_factory=list)
    total_tries: int = 0
    start_time: float | None = None
    remaining_secs: float = 0.0
    shake_timer: float = 0.0
    position: Position = field(default_factory=Position)


class Game(_GameFields):
    """One level being typed, in quick or hard mode."""

    def __init__(self, mode: Mode, level: int, rng: random.Random | None = None) -> None:
        if not 0 <= level < len(LEVELS):
            raise IndexError(f"level {level} out of range")
        super().__init__(mode=Mode(mode), level=level)
        self._rng = rng if rng is not None else random.Random()
        self.reset()

    def reset(self) -> None:
        """Restart the level from its first character."""
        self.text = LEVELS[self.level]
        self.cursor = 0
        self.correctness = [Correctness.UNTRIED] * len(self.text)
        self.total_tries = 0
        self.start_time = None
        self.shake_timer = 0.0
        if self.mode is Mode.HARD:
            self.remaining_secs = _time_allotted(len(self.text))
        else:
            self.remaining_secs = 0.0
        self.randomize_position()

    def randomize_position(self) -> None:
        """Move the text origin to a random spot away from the screen edges."""
        self.position = Position(
            x=0.15 + self._rng.random() * 0.70,
            y=0.20 + self._rng.random() * 0.60,
        )

    def handle_char(self, ch: str) -> GameEvent:
        """Process one keystroke and report what happened."""
        if self.cursor >= len(self.text):
            raise IndexError("level already complete")
        if self.start_time is None:
            self.start_time = time.monotonic()

        expected = self.text[self.cursor]
        self.total_tries += 1

        if ch == expected:
            self.correctness[self.cursor] = Correctness.CORRECT
            self.cursor += 1
            if self.mode is Mode.HARD:
                self.randomize_position()
            if self.cursor == len(self.text):
                return GameEvent.LEVEL_COMPLETE
            return GameEvent.CORRECT

        self.shake_timer = SHAKE_SECONDS
        if self.mode is Mode.HARD:
            self.correctness[self.cursor] = Correctness.WRONG
            self.cursor += 1
            self.randomize_position()
            if self.cursor == len(self.text):
                return GameEvent.LEVEL_COMPLETE
        return GameEvent.WRONG

    def tick_timer(self, dt: float) -> bool:
        """Advance the hard-mode countdown; return True once time has run out."""
        if self.mode is not Mode.HARD or self.start_time is None:
            return False
        self.remaining_secs -= dt
        if self.remaining_secs <= 0:
            self.remaining_secs = 0.0
            return True
        return False

    def tick_shake(self, dt: float) -> None:
        """Advance the shake animation timer."""
        if self.shake_timer > 0:
            self.shake_timer = max(self.shake_timer - dt, 0.0)

    def score(self) -> LevelScore:
        """Compute the statistics for the level as typed so far."""
        elapsed = 1.0
        if self.start_time is not None:
            elapsed = max(time.monotonic() - self.start_time, 0.001)

        correct = sum(1 for c in self.correctness if c is Correctness.CORRECT)
        length = len(self.text)
        return LevelScore(
            level=self.level,
            wpm=(length / 5.0) / (elapsed / 60.0),
            accuracy=correct / max(self.total_tries, 1) * 100.0,
            cps=length / elapsed,
        )

    def hard_timer_total(self) -> float:
        """Total seconds allotted for this level in hard mode."""
        return _time_allotted(len(self.text))