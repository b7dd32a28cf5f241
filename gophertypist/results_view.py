"""The name entry and score screens shown after a level."""

from __future__ import annotations

import pygame

from gophertypist.game import LevelScore
from gophertypist.leaderboard_view import GOLD, draw_leaderboard
from gophertypist.router import NameEntryData, Router
from gophertypist.widgets import Theme, Widgets

NEW_BEST_TITLE = "New Best Score!"
NAME_PROMPT = "Enter your name for the leaderboard:"
EDITOR_WIDTH = 240
EDITOR_HEIGHT = 40
SUBMIT_WIDTH = 120
SCORE_BUTTON_WIDTH = 150
BUTTON_HEIGHT = 44
BUTTON_GAP = 16

_H3_SIZE = 48
_BODY1_SIZE = 22


def name_entry_title(data: NameEntryData) -> str:
    """Heading for the name entry screen."""
    if data.is_new_best:
        return NEW_BEST_TITLE
    return f"Level {data.score.level + 1} Complete!"


def stats_line(score: LevelScore) -> str:
    """One-line summary of a level's statistics."""
    return f"WPM: {score.wpm:.2f}   Accuracy: {score.accuracy:.2f}%   CPS: {score.cps:.2f}"


def _centered_text(
    surface: pygame.Surface, theme: Theme, text: str, size: int, color, centerx: int, top: int
) -> int:
    rendered = theme.font(size).render(text, True, color)
    rect = rendered.get_rect(midtop=(centerx, top))
    surface.blit(rendered, rect)
    return rect.bottom


def draw_name_entry(
    surface: pygame.Surface, theme: Theme, router: Router, widgets: Widgets
) -> None:
    """Handle submission and draw the score summary with the name editor."""
    if widgets.submit_btn.clicked():
        router.name_input = widgets.name_editor.text
        router.submit_name()
        widgets.name_editor.set_text("")

    data = router.name_entry
    width, height = surface.get_size()
    centerx = width // 2

    title_color = GOLD if data.is_new_best else theme.foreground
    y = height // 5
    y = _centered_text(surface, theme, name_entry_title(data), _H3_SIZE, title_color, centerx, y)
    y = _centered_text(
        surface, theme, stats_line(data.score), _BODY1_SIZE, theme.foreground, centerx, y + 16
    )
    y = _centered_text(surface, theme, NAME_PROMPT, _BODY1_SIZE, theme.foreground, centerx, y + 20)

    y += 8
    widgets.name_editor.rect = pygame.Rect(
        centerx - EDITOR_WIDTH // 2, y, EDITOR_WIDTH, EDITOR_HEIGHT
    )
    widgets.name_editor.draw(surface, theme)

    y += EDITOR_HEIGHT + 12
    widgets.submit_btn.rect = pygame.Rect(
        centerx - SUBMIT_WIDTH // 2, y, SUBMIT_WIDTH, BUTTON_HEIGHT
    )
    widgets.submit_btn.draw(surface, theme)


def draw_score(surface: pygame.Surface, theme: Theme, router: Router, widgets: Widgets) -> None:
    """Handle the score buttons and draw the player's rank and the leaderboard."""
    if widgets.next_level_btn.clicked():
        router.next_level()
    if widgets.play_again_btn.clicked():
        router.start_game(router.mode)
    if widgets.menu_btn.clicked():
        router.go_to_menu()

    width, height = surface.get_size()
    centerx = width // 2

    title = f"You ranked #{router.score.player_rank} on the leaderboard!"
    y = _centered_text(surface, theme, title, _H3_SIZE, theme.foreground, centerx, height // 5)
    y = draw_leaderboard(surface, theme, router, y + 16) + 24

    show_next = router.has_next_level()
    next_width = SCORE_BUTTON_WIDTH if show_next else 0
    row = [
        (widgets.next_level_btn, next_width),
        (widgets.play_again_btn, SCORE_BUTTON_WIDTH),
        (widgets.menu_btn, SCORE_BUTTON_WIDTH),
    ]
    total = sum(w for _, w in row) + BUTTON_GAP * (len(row) - 1)
    x = centerx - total // 2
    for button, button_width in row:
        if button_width:
            button.rect = pygame.Rect(x, y, button_width, BUTTON_HEIGHT)
            button.draw(surface, theme)
        else:
            button.rect = pygame.Rect(x, y, 0, 0)
        x += button_width + BUTTON_GAP