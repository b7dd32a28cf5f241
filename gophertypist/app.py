"""Application window, event dispatch and main loop."""

from __future__ import annotations

import argparse

import pygame

from gophertypist.audio import asset
from gophertypist.game import GameEvent
from gophertypist.menu_view import draw_menu
from gophertypist.playing_view import draw_playing
from gophertypist.results_view import draw_name_entry, draw_score
from gophertypist.router import Router, Screen
from gophertypist.timeout_view import draw_timeout
from gophertypist.widgets import Button, Theme, Widgets

TITLE = "Gopher Typist"
WINDOW_SIZE = (900, 600)
FPS = 60

_KEY_SOUNDS = {
    GameEvent.CORRECT: "keypress.wav",
    GameEvent.WRONG: "keypress_wrong.wav",
}


class App:
    """Ties the router, widgets and theme to a pygame window."""

    def __init__(
        self,
        router: Router | None = None,
        widgets: Widgets | None = None,
        theme: Theme | None = None,
    ) -> None:
        self.router = router if router is not None else Router()
        self.widgets = widgets if widgets is not None else Widgets()
        self.theme = theme if theme is not None else Theme()

    def _buttons(self) -> list[Button]:
        w = self.widgets
        screen = self.router.screen
        if screen is Screen.MENU:
            return [w.quick_btn, w.hard_btn]
        if screen is Screen.NAME_ENTRY:
            return [w.submit_btn]
        if screen is Screen.SCORE:
            return [w.next_level_btn, w.play_again_btn, w.menu_btn]
        if screen is Screen.TIMEOUT:
            return [w.retry_btn, w.timeout_menu]
        return []

    def tick(self, dt: float) -> None:
        """Advance timers by dt seconds and pick up the loaded leaderboard."""
        router = self.router
        router.poll_leaderboard()
        if router.screen is Screen.PLAYING and router.game is not None:
            router.game.tick_shake(dt)
            if router.game.tick_timer(dt):
                router.timeout()

    def _submit_name(self) -> None:
        self.router.name_input = self.widgets.name_editor.text
        self.router.submit_name()
        self.widgets.name_editor.set_text("")

    def _type(self, text: str) -> None:
        router = self.router
        for ch in text:
            if router.screen is not Screen.PLAYING or router.game is None:
                return
            result = router.game.handle_char(ch)
            if result is GameEvent.LEVEL_COMPLETE:
                router.finish_level()
            elif result in _KEY_SOUNDS:
                router.audio.play_sfx(asset(_KEY_SOUNDS[result]))

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Apply one input event; return True if it was used."""
        router = self.router
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                router.go_to_menu()
                return True
            if event.key == pygame.K_RETURN and router.screen is Screen.NAME_ENTRY:
                self._submit_name()
                return True

        if event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            return any([button.handle_event(event) for button in self._buttons()])

        if router.screen is Screen.NAME_ENTRY:
            return self.widgets.name_editor.handle_event(event)

        if event.type == pygame.TEXTINPUT and router.screen is Screen.PLAYING:
            self._type(event.text)
            return True
        return False

    def draw(self, surface: pygame.Surface) -> None:
        """Clear the surface and draw the current screen."""
        surface.fill(self.theme.background)
        screen = self.router.screen
        if screen is Screen.MENU:
            draw_menu(surface, self.theme, self.router, self.widgets)
        elif screen is Screen.PLAYING:
            draw_playing(surface, self.theme, self.router)
        elif screen is Screen.NAME_ENTRY:
            draw_name_entry(surface, self.theme, self.router, self.widgets)
        elif screen is Screen.SCORE:
            draw_score(surface, self.theme, self.router, self.widgets)
        elif screen is Screen.TIMEOUT:
            draw_timeout(surface, self.theme, self.router, self.widgets)

    def run(self) -> None:
        """Open the window and run until it is closed."""
        pygame.init()
        try:
            surface = pygame.display.set_mode(WINDOW_SIZE)
            pygame.display.set_caption(TITLE)
            pygame.key.start_text_input()
            clock = pygame.time.Clock()
            while True:
                dt = clock.tick(FPS) / 1000.0
                self.tick(dt)
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        return
                    self.handle_event(event)
                self.draw(surface)
                pygame.display.flip()
        finally:
            self.router.audio.close()
            pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Start the game."""
    parser = argparse.ArgumentParser(prog="gopher-typist", description="A typing game.")
    parser.parse_args(argv)
    App().run()
    return 0