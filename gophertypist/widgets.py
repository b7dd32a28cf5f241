"""Stateful widgets that live for the whole lifetime of the application."""

from __future__ import annotations

from dataclasses import dataclass, field

import pygame

Color = tuple[int, int, int]

BLUE: Color = (59, 130, 246)
RED: Color = (239, 68, 68)
GREEN: Color = (34, 197, 94)
GRAY: Color = (75, 75, 75)

_UNDERLINE_HEIGHT = 2


def _empty_rect() -> pygame.Rect:
    return pygame.Rect(0, 0, 0, 0)


@dataclass
class Theme:
    """Colours and a cache of fonts by size."""

    foreground: Color = (255, 255, 255)
    background: Color = (17, 17, 17)
    muted: Color = (150, 150, 150)
    font_name: str | None = None
    _fonts: dict[int, pygame.font.Font] = field(default_factory=dict, init=False, repr=False)

    def font(self, size: float) -> pygame.font.Font:
        """Return the font of the given pixel size, loading it once."""
        key = round(size)
        if key <= 0:
            raise ValueError(f"font size must be positive, got {size}")
        if key not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[key] = pygame.font.Font(self.font_name, key)
        return self._fonts[key]


@dataclass(eq=False)
class Button:
    """A clickable rectangle with a label; its rect is set when laid out."""

    label: str
    background: Color = GRAY
    rect: pygame.Rect = field(default_factory=_empty_rect)
    text_size: int = 24
    _pressed: bool = field(default=False, init=False, repr=False)
    _clicks: int = field(default=0, init=False, repr=False)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Track left-button presses; return True if the event was used."""
        if getattr(event, "button", None) != 1:
            return False
        if event.type == pygame.MOUSEBUTTONDOWN:
            if self.rect.collidepoint(event.pos):
                self._pressed = True
                return True
            return False
        if event.type == pygame.MOUSEBUTTONUP:
            was_pressed, self._pressed = self._pressed, False
            if was_pressed and self.rect.collidepoint(event.pos):
                self._clicks += 1
                return True
        return False

    def clicked(self) -> bool:
        """Consume one pending click, returning whether there was one."""
        if self._clicks:
            self._clicks -= 1
            return True
        return False

    def draw(self, surface: pygame.Surface, theme: Theme) -> None:
        pygame.draw.rect(surface, self.background, self.rect, border_radius=4)
        label = theme.font(self.text_size).render(self.label, True, theme.foreground)
        surface.blit(label, label.get_rect(center=self.rect.center))


@dataclass(eq=False)
class TextInput:
    """A single-line text field showing a placeholder while empty."""

    placeholder: str = "Anonymous"
    text: str = ""
    rect: pygame.Rect = field(default_factory=_empty_rect)
    text_size: int = 28

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Apply typed text and backspace; return True if the event was used."""
        if event.type == pygame.TEXTINPUT:
            self.text += event.text
            return True
        if event.type == pygame.KEYDOWN and event.key == pygame.K_BACKSPACE:
            self.text = self.text[:-1]
            return True
        return False

    def set_text(self, text: str) -> None:
        self.text = text

    def draw(self, surface: pygame.Surface, theme: Theme) -> None:
        font = theme.font(self.text_size)
        if self.text:
            rendered = font.render(self.text, True, theme.foreground)
        else:
            rendered = font.render(self.placeholder, True, theme.muted)
        surface.blit(rendered, rendered.get_rect(midleft=self.rect.midleft))
        underline = pygame.Rect(
            self.rect.left,
            self.rect.bottom - _UNDERLINE_HEIGHT,
            self.rect.width,
            _UNDERLINE_HEIGHT,
        )
        pygame.draw.rect(surface, theme.foreground, underline)


@dataclass(eq=False)
class Widgets:
    """Every button and editor the screens use."""

    quick_btn: Button = field(default_factory=lambda: Button("New Quick Game", BLUE))
    hard_btn: Button = field(default_factory=lambda: Button("New Hard Game", RED))

    name_editor: TextInput = field(default_factory=TextInput)
    submit_btn: Button = field(default_factory=lambda: Button("Submit", BLUE))

    next_level_btn: Button = field(default_factory=lambda: Button("Next Level", BLUE))
    play_again_btn: Button = field(default_factory=lambda: Button("Play Again", GREEN))
    menu_btn: Button = field(default_factory=lambda: Button("Main Menu", GRAY))

    retry_btn: Button = field(default_factory=lambda: Button("Retry", RED))
    timeout_menu: Button = field(default_factory=lambda: Button("Main Menu", GRAY))