"""Sound effects and looping background music played from a worker thread."""

from __future__ import annotations

import queue
import sys
import threading
from collections import deque
from enum import Enum
from pathlib import Path
from typing import Protocol

_QUEUE_SIZE = 16
_BACKGROUND_VOLUME = 0.35


class _Kind(Enum):
    SFX = "sfx"
    BG_START = "bg_start"
    BG_STOP = "bg_stop"


class AudioBackend(Protocol):
    """Something that can actually make sound."""

    def play_sfx(self, path: Path) -> None: ...

    def start_background(self, path: Path) -> None: ...

    def stop_background(self) -> None: ...


class _PygameBackend:
    """Plays WAV files through the pygame mixer, initialised on first use."""

    def __init__(self) -> None:
        self._ready: bool | None = None
        self._playing: deque = deque(maxlen=32)

    def _ensure_mixer(self) -> bool:
        if self._ready is None:
            import pygame

            try:
                pygame.mixer.init()
                self._ready = True
            except pygame.error:
                self._ready = False
        return self._ready

    def play_sfx(self, path: Path) -> None:
        if not self._ensure_mixer():
            return
        import pygame

        sound = pygame.mixer.Sound(str(path))
        sound.play()
        self._playing.append(sound)

    def start_background(self, path: Path) -> None:
        if not self._ensure_mixer():
            return
        import pygame

        pygame.mixer.music.load(str(path))
        pygame.mixer.music.set_volume(_BACKGROUND_VOLUME)
        pygame.mixer.music.play(loops=-1)

    def stop_background(self) -> None:
        if not self._ready:
            return
        import pygame

        pygame.mixer.music.stop()


class AudioManager:
    """Queues audio requests to a background thread so callers never block on I/O."""

    def __init__(self, backend: AudioBackend | None = None) -> None:
        self._backend = backend if backend is not None else _PygameBackend()
        self._queue: queue.Queue[tuple[_Kind, Path | None] | None] = queue.Queue(
            maxsize=_QUEUE_SIZE
        )
        self._closed = False
        self._thread = threading.Thread(target=self._run, name="audio", daemon=True)
        self._thread.start()

    def __enter__(self) -> AudioManager:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def play_sfx(self, path: Path | str) -> None:
        """Play a one-shot sound effect."""
        self._send(_Kind.SFX, Path(path))

    def start_background(self, path: Path | str) -> None:
        """Start looping background music, replacing any already playing."""
        self._send(_Kind.BG_START, Path(path))

    def stop_background(self) -> None:
        """Stop the background music, if any."""
        self._send(_Kind.BG_STOP, None)

    def close(self) -> None:
        """Finish the queued requests and stop the worker thread."""
        if self._closed:
            return
        self._closed = True
        self._queue.put(None)
        self._thread.join()

    def _send(self, kind: _Kind, path: Path | None) -> None:
        if self._closed:
            raise RuntimeError("audio manager is closed")
        self._queue.put((kind, path))

    def _run(self) -> None:
        while (message := self._queue.get()) is not None:
            kind, path = message
            try:
                if kind is _Kind.SFX:
                    self._backend.play_sfx(path)
                elif kind is _Kind.BG_START:
                    self._backend.start_background(path)
                else:
                    self._backend.stop_background()
            except (OSError, RuntimeError, ValueError, EOFError):
                continue


def _executable_dir() -> Path | None:
    if not sys.argv or not sys.argv[0]:
        return None
    return Path(sys.argv[0]).resolve().parent


def asset(name: str) -> Path:
    """Resolve a WAV file name, looking under the working directory then the program's."""
    candidates = [Path("assets", "wav", name)]
    exe_dir = _executable_dir()
    if exe_dir is not None:
        candidates.append(exe_dir / "assets" / "wav" / name)
    for candidate in candidates:
        if candidate.exists():
            return candidate
    return candidates[0]