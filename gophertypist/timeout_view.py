"""The screen shown when the hard-mode countdown runs out."""

from __future__ import annotations

import pygame

from gophertypist.router import Router
from gophertypist.widgets import Color, Theme, Widgets

OUT_OF_TIME = "Out of time!"
TYPE_FASTER = "Type faster!"
BUTTON_WIDTH = 130
BUTTON_HEIGHT = 44
BUTTON_GAP = 16

_H1_SIZE = 96
_H5_SIZE = 32


def _centered_text(
    surface: pygame.Surface,
    theme: Theme,
    text: str,
    size: int,
    color: Color,
    centerx: int,
    top: int,
) -> int:
    rendered = theme.font(size).render(text, True, color)
    rect = rendered.get_rect(midtop=(centerx, top))
    surface.blit(rendered, rect)
    return rect.bottom


def draw_timeout(surface: pygame.Surface, theme: Theme, router: Router, widgets: Widgets) -> None:
    """Handle the retry and menu buttons and draw the timeout message."""
    if widgets.retry_btn.clicked():
        router.start_game(router.mode)
    if widgets.timeout_menu.clicked():
        router.go_to_menu()

    width, height = surface.get_size()
    centerx = width // 2

    y = height // 3
    y = _centered_text(surface, theme, OUT_OF_TIME, _H1_SIZE, theme.foreground, centerx, y) + 12
    y = _centered_text(surface, theme, TYPE_FASTER, _H5_SIZE, theme.foreground, centerx, y) + 20

    left = centerx - (2 * BUTTON_WIDTH + BUTTON_GAP) // 2
    widgets.retry_btn.rect = pygame.Rect(left, y, BUTTON_WIDTH, BUTTON_HEIGHT)
    widgets.timeout_menu.rect = pygame.Rect(
        left + BUTTON_WIDTH + BUTTON_GAP, y, BUTTON_WIDTH, BUTTON_HEIGHT
    )
    widgets.retry_btn.draw(surface, theme)
    widgets.timeout_menu.draw(surface, theme)