"""Persistent high-score table stored in the RTLB binary format."""

from __future__ import annotations

import contextlib
import struct
import sys
from dataclasses import dataclass, field
from pathlib import Path

MAGIC = b"RTLB"
MAX_ENTRIES = 20

_HEADER = struct.Struct("<4sI")
_FIXED = struct.Struct("<dddBQ")
_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class LeaderboardFormatError(ValueError):
    """Raised when leaderboard data cannot be decoded."""


def is_leap(year: int) -> bool:
    """Return whether the year is a Gregorian leap year."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


@dataclass
class LeaderboardEntry:
    """One saved score."""

    name: str = ""
    wpm: float = 0.0
    accuracy: float = 0.0
    cps: float = 0.0
    level: int = 0
    timestamp: int = 0

    def timestamp_display(self) -> str:
        """Format the UTC unix timestamp as 'YYYY-MM-DD HH:MM'."""
        days, time_of_day = divmod(self.timestamp, 86400)
        hours, rest = divmod(time_of_day, 3600)
        minutes = rest // 60

        year = 1970
        while days >= (days_in_year := 366 if is_leap(year) else 365):
            days -= days_in_year
            year += 1

        month = 1
        for index, length in enumerate(_MONTH_DAYS):
            if index == 1 and is_leap(year):
                length = 29
            if days < length:
                break
            days -= length
            month += 1

        return f"{year:04d}-{month:02d}-{days + 1:02d} {hours:02d}:{minutes:02d}"


def _executable_dir() -> Path | None:
    if not sys.argv or not sys.argv[0]:
        return None
    return Path(sys.argv[0]).resolve().parent


def config_path() -> Path:
    """Locate a writable leaderboard file, preferring ~/.config/rusty-typist."""
    with contextlib.suppress(OSError, RuntimeError):
        directory = Path.home() / ".config" / "rusty-typist"
        directory.mkdir(parents=True, exist_ok=True)
        probe = directory / ".write_probe"
        probe.touch()
        probe.unlink()
        return directory / "leaderboard.bin"

    exe_dir = _executable_dir()
    if exe_dir is not None:
        return exe_dir / "rusty-typist-leaderboard.bin"
    return Path("rusty-typist-leaderboard.bin")


def serialize(entries: list[LeaderboardEntry]) -> bytes:
    """Encode entries as RTLB: magic, u32 count, then each entry little-endian."""
    parts = [_HEADER.pack(MAGIC, len(entries) & 0xFFFFFFFF)]
    for entry in entries:
        name = entry.name.encode("utf-8")[:255]
        parts.append(bytes([len(name)]))
        parts.append(name)
        parts.append(
            _FIXED.pack(
                entry.wpm,
                entry.accuracy,
                entry.cps,
                entry.level & 0xFF,
                entry.timestamp & 0xFFFFFFFFFFFFFFFF,
            )
        )
    return b"".join(parts)


def deserialize(data: bytes) -> list[LeaderboardEntry]:
    """Decode RTLB data; entries cut short by the end of data are dropped."""
    if len(data) < _HEADER.size:
        raise LeaderboardFormatError("unexpected end of data")
    magic, count = _HEADER.unpack_from(data)
    if magic != MAGIC:
        raise LeaderboardFormatError("bad magic")

    entries: list[LeaderboardEntry] = []
    pos = _HEADER.size
    for _ in range(count):
        if pos >= len(data):
            break
        name_len = data[pos]
        pos += 1
        if pos + name_len > len(data):
            break
        name = data[pos : pos + name_len].decode("utf-8", errors="replace")
        pos += name_len
        if pos + _FIXED.size > len(data):
            break
        wpm, accuracy, cps, level, timestamp = _FIXED.unpack_from(data, pos)
        pos += _FIXED.size
        entries.append(
            LeaderboardEntry(
                name=name,
                wpm=wpm,
                accuracy=accuracy,
                cps=cps,
                level=level,
                timestamp=timestamp,
            )
        )
    return entries


@dataclass
class Leaderboard:
    """Scores sorted by WPM, best first, backed by a file."""

    path: Path
    entries: list[LeaderboardEntry] = field(default_factory=list)

    def _sort(self) -> None:
        self.entries.sort(key=lambda e: e.wpm, reverse=True)

    def save(self) -> None:
        """Write the entries to disk; failures are ignored."""
        path = Path(self.path)
        with contextlib.suppress(OSError):
            path.parent.mkdir(parents=True, exist_ok=True)
        with contextlib.suppress(OSError):
            path.write_bytes(serialize(self.entries))

    def is_new_best(self, wpm: float) -> bool:
        """Return whether wpm beats the current top score."""
        if not self.entries:
            return True
        return wpm > self.entries[0].wpm

    def rank_of(self, wpm: float) -> int:
        """Return 1 plus the number of entries with at least this wpm."""
        return 1 + sum(1 for e in self.entries if e.wpm >= wpm)

    def insert(self, entry: LeaderboardEntry) -> None:
        """Add an entry, keep the best MAX_ENTRIES and save."""
        self.entries.append(entry)
        self._sort()
        del self.entries[MAX_ENTRIES:]
        self.save()


def empty_leaderboard(path: Path | str | None = None) -> Leaderboard:
    """Return a leaderboard with no entries at path (or the default location)."""
    return Leaderboard(path=Path(path) if path is not None else config_path())


def load_leaderboard(path: Path | str | None = None) -> Leaderboard:
    """Load the leaderboard, returning an empty one if it is missing or invalid."""
    board = empty_leaderboard(path)
    try:
        data = Path(board.path).read_bytes()
        board.entries = deserialize(data)
    except (OSError, LeaderboardFormatError):
        return board
    board._sort()
    return board