"""The main menu screen."""

from __future__ import annotations

import pygame

from gophertypist.game import Mode
from gophertypist.leaderboard_view import draw_leaderboard
from gophertypist.router import Router
from gophertypist.widgets import Theme, Widgets

TITLE = "Gopher Typist"
SUBTITLE = "press Escape anytime to return here"
BUTTON_WIDTH = 160
BUTTON_HEIGHT = 44
BUTTON_GAP = 16

_TITLE_SIZE = 64
_SUBTITLE_SIZE = 18


def _centered_text(
    surface: pygame.Surface, theme: Theme, text: str, size: int, color, centerx: int, top: int
) -> int:
    rendered = theme.font(size).render(text, True, color)
    rect = rendered.get_rect(midtop=(centerx, top))
    surface.blit(rendered, rect)
    return rect.bottom


def draw_menu(surface: pygame.Surface, theme: Theme, router: Router, widgets: Widgets) -> None:
    """Handle the menu buttons and draw the title, buttons and leaderboard."""
    if widgets.quick_btn.clicked():
        router.start_game(Mode.QUICK)
    if widgets.hard_btn.clicked():
        router.start_game(Mode.HARD)

    width, height = surface.get_size()
    centerx = width // 2

    y = height // 4
    y = _centered_text(surface, theme, TITLE, _TITLE_SIZE, theme.foreground, centerx, y) + 8
    y = _centered_text(surface, theme, SUBTITLE, _SUBTITLE_SIZE, theme.muted, centerx, y) + 24

    left = centerx - (2 * BUTTON_WIDTH + BUTTON_GAP) // 2
    widgets.quick_btn.rect = pygame.Rect(left, y, BUTTON_WIDTH, BUTTON_HEIGHT)
    widgets.hard_btn.rect = pygame.Rect(
        left + BUTTON_WIDTH + BUTTON_GAP, y, BUTTON_WIDTH, BUTTON_HEIGHT
    )
    widgets.quick_btn.draw(surface, theme)
    widgets.hard_btn.draw(surface, theme)

    draw_leaderboard(surface, theme, router, y + BUTTON_HEIGHT + 40)