"""Drawing of the leaderboard table."""

from __future__ import annotations

from collections.abc import Sequence

import pygame

from gophertypist.leaderboard import LeaderboardEntry
from gophertypist.router import Router
from gophertypist.widgets import Color, Theme

COL_PROPORTIONS: tuple[float, ...] = (0.08, 0.18, 0.10, 0.13, 0.10, 0.08, 0.33)
COL_HEADERS: tuple[str, ...] = ("Rank", "Name", "WPM", "Accuracy", "CPS", "Level", "Date (UTC)")
MAX_TABLE_WIDTH = 700
ROW_HEIGHT = 30
EMPTY_MESSAGE = "No scores yet — play a game!"

GOLD: Color = (255, 215, 0)

_TITLE_SIZE = 32
_BODY1_SIZE = 22
_BODY2_SIZE = 18
_TITLE_GAP = 8
_HEADER_GAP = 4


def column_widths(max_width: float) -> list[float]:
    """Widths of the seven columns for a table at most MAX_TABLE_WIDTH wide."""
    table_width = min(float(max_width), float(MAX_TABLE_WIDTH))
    return [proportion * table_width for proportion in COL_PROPORTIONS]


def leaderboard_rows(entries: Sequence[LeaderboardEntry]) -> list[tuple[str, ...]]:
    """The text of each table row, best score first."""
    return [
        (
            f"#{rank}",
            entry.name,
            f"{entry.wpm:.1f}",
            f"{entry.accuracy:.1f}%",
            f"{entry.cps:.2f}",
            str(entry.level + 1),
            entry.timestamp_display(),
        )
        for rank, entry in enumerate(entries, start=1)
    ]


def _draw_row(
    surface: pygame.Surface,
    font: pygame.font.Font,
    cells: Sequence[str],
    widths: Sequence[float],
    left: float,
    top: int,
    color: Color,
) -> None:
    x = left
    for text, width in zip(cells, widths):
        rendered = font.render(text, True, color)
        area = pygame.Rect(0, 0, int(width), rendered.get_height())
        surface.blit(rendered, (round(x), top), area)
        x += width


def draw_leaderboard(surface: pygame.Surface, theme: Theme, router: Router, top: int) -> int:
    """Draw the leaderboard with its top edge at top; return the bottom edge."""
    entries = router.leaderboard.entries
    width = surface.get_width()

    if not entries:
        message = theme.font(_BODY1_SIZE).render(EMPTY_MESSAGE, True, theme.muted)
        rect = message.get_rect(midtop=(width // 2, top))
        surface.blit(message, rect)
        return rect.bottom

    widths = column_widths(width)
    left = (width - sum(widths)) / 2

    title = theme.font(_TITLE_SIZE).render("Leaderboard", True, theme.foreground)
    surface.blit(title, (round(left), top))
    y = top + title.get_height() + _TITLE_GAP

    font = theme.font(_BODY2_SIZE)
    _draw_row(surface, font, COL_HEADERS, widths, left, y, theme.muted)
    y += font.get_linesize() + _HEADER_GAP

    for rank, cells in enumerate(leaderboard_rows(entries), start=1):
        color = GOLD if rank == 1 else theme.foreground
        _draw_row(surface, font, cells, widths, left, y, color)
        y += ROW_HEIGHT
    return y