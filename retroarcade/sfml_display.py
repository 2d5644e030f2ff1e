"""Windowed display at a fixed frame rate, drawing cells as shapes with glyphs."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

import pygame

from .types import (
    Cell,
    CellContentType,
    Color,
    Event,
    Graphics,
    Grid,
    HighScores,
    KeyType,
    MouseButton,
)

RGB = Tuple[int, int, int]

CELL_SIZE = 20
WINDOW_SIZE = (1920, 1080)
FRAME_RATE = 11
FONT_PATH = "assets/fonts/Arial.ttf"

_WHITE: RGB = (255, 255, 255)
_YELLOW: RGB = (255, 255, 0)
_BLACK: RGB = (0, 0, 0)

_FILL: Dict[Color, RGB] = {
    Color.DEFAULT: (255, 255, 255),
    Color.WHITE: (255, 255, 255),
    Color.RED: (255, 0, 0),
    Color.GREEN: (0, 255, 0),
    Color.BLUE: (0, 0, 255),
    Color.YELLOW: (255, 255, 0),
    Color.PURPLE: (128, 0, 128),
    Color.ORANGE: (255, 165, 0),
    Color.BLACK: (0, 0, 0),
}

_KEYS: Dict[int, KeyType] = {
    pygame.K_UP: KeyType.UP,
    pygame.K_DOWN: KeyType.DOWN,
    pygame.K_LEFT: KeyType.LEFT,
    pygame.K_RIGHT: KeyType.RIGHT,
    pygame.K_SPACE: KeyType.SPACE,
    pygame.K_RETURN: KeyType.ENTER,
    pygame.K_ESCAPE: KeyType.ESCAPE,
    pygame.K_n: KeyType.NEXT_GAME,
    pygame.K_p: KeyType.PREV_GAME,
    pygame.K_g: KeyType.NEXT_GRAPHICS,
    pygame.K_h: KeyType.PREV_GRAPHICS,
    pygame.K_r: KeyType.RESTART_GAME,
    pygame.K_q: KeyType.QUIT,
}

_MOUSE_BUTTONS: Dict[int, MouseButton] = {
    1: MouseButton.LEFT_CLICK,
    2: MouseButton.MIDDLE_CLICK,
    3: MouseButton.RIGHT_CLICK,
}

_CONTROLS = (
    "Move: Arrow Keys",
    "Next Game: N",
    "Prev Game: P",
    "Next Graphics: G",
    "Prev Graphics: H",
    "Restart: R",
    "Quit: Q or ESC",
)

_RECT_TYPES = (
    CellContentType.BLOCK,
    CellContentType.POWERUP,
    CellContentType.OBSTACLE,
)


def fill_color(color: Color) -> RGB:
    """The RGB colour a cell of the given colour is filled with."""
    return _FILL.get(color, _WHITE)


def translate_event(event: "pygame.event.Event") -> Event:
    """Turn a key press or mouse press into an event; anything else is UNKNOWN."""
    if event.type == pygame.KEYDOWN:
        key = _KEYS.get(event.key)
        if key is not None:
            return Event(key)
    elif event.type == pygame.MOUSEBUTTONDOWN:
        button = _MOUSE_BUTTONS.get(event.button)
        if button is not None:
            x, y = event.pos
            return Event.click(button, x, y)
    return Event(KeyType.UNKNOWN)


class SfmlDisplay(Graphics):
    """A 1920x1080 window limited to eleven frames a second."""

    def __init__(self) -> None:
        pygame.display.init()
        pygame.font.init()
        self._window = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption("Arcade SFML")
        self._clock = pygame.time.Clock()
        self._fonts: Dict[int, Optional["pygame.font.Font"]] = {}
        self._open = True

    def _font(self, size: int) -> Optional["pygame.font.Font"]:
        if size not in self._fonts:
            try:
                self._fonts[size] = pygame.font.Font(FONT_PATH, size)
            except OSError:
                self._fonts[size] = None
        return self._fonts[size]

    def handle_input(self) -> List[Event]:
        events: List[Event] = []
        for raw in pygame.event.get():
            if raw.type == pygame.QUIT:
                events.append(Event(KeyType.QUIT))
            elif raw.type == pygame.KEYDOWN:
                events.append(translate_event(raw))
        return events

    def _draw_cell(self, cell: Cell) -> None:
        color = fill_color(cell.color)
        x = cell.x * CELL_SIZE
        y = cell.y * CELL_SIZE
        kind = cell.type
        if kind in (CellContentType.PLAYER, CellContentType.ENEMY):
            pygame.draw.circle(self._window, color, (x + 10, y + 10), 10)
        elif kind is CellContentType.FOOD:
            pygame.draw.circle(self._window, color, (x + 10, y + 10), 10)
            pygame.draw.circle(self._window, _BLACK, (x + 4 + 8, y + 1 + 8), 8)
        elif kind is CellContentType.PROJECTILE:
            pygame.draw.circle(self._window, color, (x + 10, y + 10), 5)
        elif kind is not CellContentType.EMPTY:
            self._window.fill(color, pygame.Rect(x, y, CELL_SIZE, CELL_SIZE))

        if cell.c and cell.c != " ":
            font = self._font(20)
            if font is None:
                return
            glyph = font.render(cell.c[0], True, _BLACK)
            self._window.blit(glyph, (x + 5, y + 2))

    def _draw_text(self, text: str, x: int, y: int, size: int, color: RGB) -> None:
        font = self._font(size)
        if font is None:
            return
        self._window.blit(font.render(text, True, color), (x, y))

    def render(
        self, grid: Grid, score: int, player_name: str, high_scores: HighScores
    ) -> None:
        self._window.fill(_BLACK)
        for row in grid:
            for cell in row:
                self._draw_cell(cell)

        ui_x = (len(grid[0]) if grid else 0) * 21
        ui_y = 10
        self._draw_text(f"Score: {score}", ui_x, ui_y, 30, _WHITE)
        ui_y += 40
        self._draw_text("Controls:", ui_x, ui_y, 24, _WHITE)
        ui_y += 30
        for line in _CONTROLS:
            self._draw_text(line, ui_x, ui_y, 20, _YELLOW)
            ui_y += 25

        pygame.display.flip()
        self._clock.tick(FRAME_RATE)

    def clear(self) -> None:
        self._window.fill(_BLACK)

    @property
    def name(self) -> str:
        return "SFML"

    def close(self) -> None:
        if self._open:
            self._open = False
            self._fonts.clear()
            pygame.font.quit()
            pygame.display.quit()


def create_graphics() -> SfmlDisplay:
    """Entry point used by the core to instantiate the display."""
    return SfmlDisplay()