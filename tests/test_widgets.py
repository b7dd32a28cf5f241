import pygame
import pytest

from gophertypist.widgets import Button, TextInput, Theme, Widgets


def mouse(kind, pos, button=1):
    return pygame.event.Event(kind, button=button, pos=pos)


@pytest.fixture
def button():
    return Button("Go", (10, 20, 30), rect=pygame.Rect(10, 10, 100, 40))


def test_press_and_release_inside_is_one_click(button):
    assert button.handle_event(mouse(pygame.MOUSEBUTTONDOWN, (20, 20))) is True
    assert button.handle_event(mouse(pygame.MOUSEBUTTONUP, (30, 25))) is True
    assert button.clicked() is True
    assert button.clicked() is False


def test_release_outside_is_not_a_click(button):
    button.handle_event(mouse(pygame.MOUSEBUTTONDOWN, (20, 20)))
    assert button.handle_event(mouse(pygame.MOUSEBUTTONUP, (500, 500))) is False
    assert button.clicked() is False


def test_press_outside_is_ignored(button):
    assert button.handle_event(mouse(pygame.MOUSEBUTTONDOWN, (500, 500))) is False
    button.handle_event(mouse(pygame.MOUSEBUTTONUP, (20, 20)))
    assert button.clicked() is False


def test_right_button_is_ignored(button):
    assert button.handle_event(mouse(pygame.MOUSEBUTTONDOWN, (20, 20), button=3)) is False
    button.handle_event(mouse(pygame.MOUSEBUTTONUP, (20, 20), button=3))
    assert button.clicked() is False


def test_clicks_are_counted(button):
    for _ in range(2):
        button.handle_event(mouse(pygame.MOUSEBUTTONDOWN, (20, 20)))
        button.handle_event(mouse(pygame.MOUSEBUTTONUP, (20, 20)))
    assert [button.clicked() for _ in range(3)] == [True, True, False]


def test_button_draw_fills_background(button):
    surface = pygame.Surface((200, 100))
    surface.fill((0, 0, 0))
    button.draw(surface, Theme())
    assert tuple(surface.get_at((button.rect.left + 1, button.rect.centery)))[:3] == (10, 20, 30)
    assert tuple(surface.get_at((0, 0)))[:3] == (0, 0, 0)


def test_text_input_typing_and_backspace():
    editor = TextInput()
    assert editor.handle_event(pygame.event.Event(pygame.TEXTINPUT, text="Ab")) is True
    assert editor.handle_event(pygame.event.Event(pygame.TEXTINPUT, text="c")) is True
    assert editor.text == "Abc"
    backspace = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_BACKSPACE)
    assert editor.handle_event(backspace) is True
    assert editor.text == "Ab"


def test_backspace_on_empty_stays_empty():
    editor = TextInput()
    editor.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_BACKSPACE))
    assert editor.text == ""


def test_text_input_ignores_other_keys():
    editor = TextInput(text="x")
    assert editor.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a)) is False
    assert editor.text == "x"


def test_set_text_replaces_text():
    editor = TextInput(text="old")
    editor.set_text("")
    assert editor.text == ""
    editor.set_text("Lin")
    assert editor.text == "Lin"


def test_text_input_draw_underline():
    theme = Theme()
    editor = TextInput(rect=pygame.Rect(0, 0, 150, 40))
    surface = pygame.Surface((160, 50))
    surface.fill((0, 0, 0))
    editor.draw(surface, theme)
    assert tuple(surface.get_at((75, 39)))[:3] == theme.foreground


def test_theme_font_is_cached_and_validates():
    theme = Theme()
    assert theme.font(20) is theme.font(20)
    assert theme.font(20) is not theme.font(30)
    with pytest.raises(ValueError):
        theme.font(0)


def test_widgets_labels_and_placeholder():
    widgets = Widgets()
    assert widgets.quick_btn.label == "New Quick Game"
    assert widgets.hard_btn.label == "New Hard Game"
    assert widgets.menu_btn.label == widgets.timeout_menu.label == "Main Menu"
    assert widgets.name_editor.placeholder == "Anonymous"
    assert widgets.quick_btn is not Widgets().quick_btn