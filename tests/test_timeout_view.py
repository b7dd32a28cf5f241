from pathlib import Path

import pygame
import pytest

from gophertypist.audio import AudioManager
from gophertypist.game import Mode
from gophertypist.leaderboard import empty_leaderboard
from gophertypist.router import Router, Screen
from gophertypist.timeout_view import BUTTON_GAP, BUTTON_WIDTH, draw_timeout
from gophertypist.widgets import Theme, Widgets


class RecordingBackend:
    def __init__(self):
        self.calls = []

    def play_sfx(self, path):
        self.calls.append(("sfx", Path(path).name))

    def start_background(self, path):
        self.calls.append(("bg_start", Path(path).name))

    def stop_background(self):
        self.calls.append(("bg_stop", None))


@pytest.fixture
def backend():
    return RecordingBackend()


@pytest.fixture
def router(tmp_path, backend):
    audio = AudioManager(backend)
    r = Router(
        leaderboard_loader=empty_leaderboard,
        audio=audio,
        leaderboard_path=tmp_path / "lb.bin",
    )
    yield r
    audio.close()


def click(button, pos=(5, 5)):
    button.rect = pygame.Rect(0, 0, 10, 10)
    button.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=pos))
    button.handle_event(pygame.event.Event(pygame.MOUSEBUTTONUP, button=1, pos=pos))


def test_retry_restarts_in_same_mode(router):
    router.start_game(Mode.HARD)
    router.timeout()
    assert router.screen is Screen.TIMEOUT
    widgets = Widgets()
    click(widgets.retry_btn)
    draw_timeout(pygame.Surface((900, 600)), Theme(), router, widgets)
    assert router.screen is Screen.PLAYING
    assert router.game.mode is Mode.HARD
    assert router.current_level == 0


def test_menu_button_returns_to_menu(router, backend):
    router.start_game(Mode.QUICK)
    router.timeout()
    widgets = Widgets()
    click(widgets.timeout_menu)
    draw_timeout(pygame.Surface((900, 600)), Theme(), router, widgets)
    router.audio.close()
    assert router.screen is Screen.MENU
    assert router.game is None
    assert ("bg_stop", None) in backend.calls


def test_buttons_laid_out_side_by_side_and_centered(router):
    widgets = Widgets()
    surface = pygame.Surface((900, 600))
    draw_timeout(surface, Theme(), router, widgets)
    retry, menu = widgets.retry_btn.rect, widgets.timeout_menu.rect
    assert retry.width == BUTTON_WIDTH
    assert menu.width == BUTTON_WIDTH
    assert menu.left - retry.right == BUTTON_GAP
    assert retry.top == menu.top
    assert retry.left == surface.get_width() - menu.right
    assert retry.top > surface.get_height() // 3


def test_no_click_leaves_screen_unchanged(router):
    router.start_game(Mode.HARD)
    router.timeout()
    draw_timeout(pygame.Surface((900, 600)), Theme(), router, Widgets())
    assert router.screen is Screen.TIMEOUT


def test_draws_something(router):
    theme = Theme()
    surface = pygame.Surface((900, 600))
    surface.fill(theme.background)
    before = pygame.image.tobytes(surface, "RGB")
    draw_timeout(surface, theme, router, Widgets())
    assert pygame.image.tobytes(surface, "RGB") != before
    assert tuple(surface.get_at((0, 0)))[:3] == theme.background