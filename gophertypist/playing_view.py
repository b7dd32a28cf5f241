"""The in-game screen showing the characters around the cursor."""

from __future__ import annotations

import math
from dataclasses import dataclass

import pygame

from gophertypist.game import CHAR_FONT_SIZE, WINDOW_RADIUS, Correctness, Game, Mode
from gophertypist.router import Router
from gophertypist.widgets import Theme

BLANK = "\u00a0"
SHAKE_FREQUENCY = 30.0
SHAKE_AMPLITUDE = 8.0

CURSOR_COLOR = (239, 68, 68)
UPCOMING_COLOR = (200, 200, 200)
CORRECT_COLOR = (134, 239, 172)
WRONG_COLOR = (252, 165, 165)
TIMER_COLOR = (239, 68, 68)

_OPACITY = {0: 1.0, 1: 0.75, 2: 0.50, 3: 0.25}
_TIMER_SIZE = 28
_UNDERLINE_HEIGHT = 2


@dataclass(frozen=True)
class GlyphSlot:
    """One character position in the visible window around the cursor."""

    offset: int
    char: str
    color: tuple[int, int, int, int]

    @property
    def underline(self) -> bool:
        return self.offset == 0


def _slot_color(game: Game, offset: int, index: int) -> tuple[int, int, int]:
    if offset == 0:
        return CURSOR_COLOR
    if offset > 0 or index < 0:
        return UPCOMING_COLOR
    state = game.correctness[index]
    if state is Correctness.CORRECT:
        return CORRECT_COLOR
    if state is Correctness.WRONG:
        return WRONG_COLOR
    return UPCOMING_COLOR


def char_window(game: Game) -> list[GlyphSlot]:
    """The characters from WINDOW_RADIUS before to WINDOW_RADIUS after the cursor."""
    slots = []
    for offset in range(-WINDOW_RADIUS, WINDOW_RADIUS + 1):
        index = game.cursor + offset
        char = game.text[index] if 0 <= index < len(game.text) else BLANK
        alpha = int(255 * _OPACITY.get(abs(offset), 1.0))
        slots.append(GlyphSlot(offset, char, (*_slot_color(game, offset, index), alpha)))
    return slots


def shake_offset(shake_timer: float) -> float:
    """Horizontal displacement of the text while the shake animation runs."""
    if shake_timer <= 0:
        return 0.0
    return math.sin(shake_timer * SHAKE_FREQUENCY * 2 * math.pi) * SHAKE_AMPLITUDE


def draw_playing(surface: pygame.Surface, theme: Theme, router: Router) -> None:
    """Draw the character window and, in hard mode, the countdown."""
    game = router.game
    if game is None:
        return

    width, height = surface.get_size()
    char_width = CHAR_FONT_SIZE * 0.6
    if game.mode is Mode.HARD:
        origin_x = game.position.x * width
        origin_y = game.position.y * height
    else:
        origin_x = width / 2
        origin_y = height / 2
    shake = shake_offset(game.shake_timer)

    font = theme.font(CHAR_FONT_SIZE)
    for slot in char_window(game):
        x = origin_x + slot.offset * char_width + shake
        glyph = font.render(slot.char, True, slot.color[:3])
        glyph.set_alpha(slot.color[3])
        surface.blit(glyph, glyph.get_rect(center=(round(x), round(origin_y))))
        if slot.underline:
            underline_y = origin_y + CHAR_FONT_SIZE * 0.45
            rect = pygame.Rect(
                round(x - char_width / 2),
                round(underline_y),
                round(char_width),
                _UNDERLINE_HEIGHT,
            )
            pygame.draw.rect(surface, slot.color[:3], rect)

    if game.mode is Mode.HARD:
        timer = f"{max(game.remaining_secs, 0.0):.1f}s"
        rendered = theme.font(_TIMER_SIZE).render(timer, True, TIMER_COLOR)
        surface.blit(rendered, (16, height - 40))