import pygame
import pytest

from retroarcade.sfml_display import fill_color, translate_event
from retroarcade.types import Color, Event, KeyType, MouseButton


@pytest.mark.parametrize(
    "color, expected",
    [
        (Color.DEFAULT, (255, 255, 255)),
        (Color.WHITE, (255, 255, 255)),
        (Color.PURPLE, (128, 0, 128)),
        (Color.ORANGE, (255, 165, 0)),
        (Color.BLACK, (0, 0, 0)),
    ],
)
def test_fill_color_values(color, expected):
    assert fill_color(color) == expected


def test_every_color_is_rgb():
    for color in Color:
        rgb = fill_color(color)
        assert len(rgb) == 3
        assert all(0 <= channel <= 255 for channel in rgb)


@pytest.mark.parametrize(
    "key, expected",
    [
        (pygame.K_UP, KeyType.UP),
        (pygame.K_RETURN, KeyType.ENTER),
        (pygame.K_ESCAPE, KeyType.ESCAPE),
        (pygame.K_n, KeyType.NEXT_GAME),
        (pygame.K_p, KeyType.PREV_GAME),
        (pygame.K_g, KeyType.NEXT_GRAPHICS),
        (pygame.K_h, KeyType.PREV_GRAPHICS),
        (pygame.K_r, KeyType.RESTART_GAME),
        (pygame.K_q, KeyType.QUIT),
    ],
)
def test_key_press_translation(key, expected):
    event = pygame.event.Event(pygame.KEYDOWN, key=key)
    assert translate_event(event) == Event(expected)


def test_unbound_key_is_unknown():
    event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_z)
    assert translate_event(event).key is KeyType.UNKNOWN


@pytest.mark.parametrize(
    "button, expected",
    [
        (1, MouseButton.LEFT_CLICK),
        (2, MouseButton.MIDDLE_CLICK),
        (3, MouseButton.RIGHT_CLICK),
    ],
)
def test_mouse_press_translation(button, expected):
    event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=button, pos=(42, 17))
    result = translate_event(event)
    assert result == Event.click(expected, 42, 17)
    assert result.key is KeyType.MOUSE_CLICK


def test_other_mouse_button_is_unknown():
    event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=4, pos=(1, 2))
    assert translate_event(event) == Event(KeyType.UNKNOWN)


def test_unrelated_event_is_unknown():
    event = pygame.event.Event(pygame.MOUSEMOTION, pos=(3, 4), rel=(0, 0), buttons=(0, 0, 0))
    assert translate_event(event).key is KeyType.UNKNOWN