"""Windowed display that draws cells as filled squares and dotted circles."""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Tuple

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

RGBA = Tuple[int, int, int, int]

CELL_SIZE = 20
FONT_PATH = "assets/fonts/Arial.ttf"
FONT_SIZE = 24
FRAME_DELAY_MS = 100

_BLACK: RGBA = (0, 0, 0, 255)
_WHITE: RGBA = (255, 255, 255, 255)
_YELLOW: RGBA = (255, 255, 0, 255)

_COLORS: Dict[Color, RGBA] = {
    Color.WHITE: (255, 255, 255, 255),
    Color.RED: (255, 0, 0, 255),
    Color.GREEN: (0, 255, 0, 255),
    Color.BLUE: (0, 0, 255, 255),
    Color.YELLOW: (255, 255, 0, 255),
    Color.PURPLE: (128, 0, 128, 255),
    Color.ORANGE: (255, 165, 0, 255),
    Color.BLACK: (0, 0, 0, 255),
}
_FALLBACK_COLOR: RGBA = (128, 128, 128, 0)

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


def cell_color(color: Color) -> RGBA:
    """The RGBA colour used to draw a cell of the given colour."""
    return _COLORS.get(color, _FALLBACK_COLOR)


def translate_key(key: int) -> Optional[KeyType]:
    """The logical key for a pygame key code, or None when it is not bound."""
    return _KEYS.get(key)


def circle_points(center_x: int, center_y: int, radius: int) -> Iterator[Tuple[int, int]]:
    """Pixels of a filled circle, scanned over a square of side ``2 * radius``."""
    for w in range(radius * 2):
        for h in range(radius * 2):
            dx = radius - w
            dy = radius - h
            if dx * dx + dy * dy <= radius * radius:
                yield (center_x + dx, center_y + dy)


class SdlDisplay(Graphics):
    """Full-screen window drawing each cell as a 20-pixel square or disc."""

    def __init__(self) -> None:
        pygame.display.init()
        pygame.font.init()
        width, height = pygame.display.get_desktop_sizes()[0]
        self._screen = pygame.display.set_mode((width, height), pygame.SHOWN)
        pygame.display.set_caption("SDL2")
        try:
            self._font = pygame.font.Font(FONT_PATH, FONT_SIZE)
        except OSError:
            self._font = pygame.font.Font(None, FONT_SIZE)
        self._closed = False

    def handle_input(self) -> List[Event]:
        events: List[Event] = []
        for raw in pygame.event.get():
            if raw.type == pygame.QUIT:
                events.append(Event(KeyType.QUIT))
            elif raw.type == pygame.KEYDOWN:
                key = translate_key(raw.key)
                if key is not None:
                    events.append(Event(key))
            elif raw.type == pygame.MOUSEBUTTONDOWN:
                button = _MOUSE_BUTTONS.get(raw.button, MouseButton.NONE)
                x, y = raw.pos
                events.append(Event.click(button, x, y))
        return events

    def _draw_circle(self, center_x: int, center_y: int, radius: int, color: RGBA) -> None:
        for point in circle_points(center_x, center_y, radius):
            self._screen.set_at(point, color)

    def _draw_cell(self, cell: Cell) -> None:
        color = cell_color(cell.color)
        x = cell.x * CELL_SIZE
        y = cell.y * CELL_SIZE
        centre_x, centre_y = x + CELL_SIZE // 2, y + CELL_SIZE // 2
        kind = cell.type
        if kind in (CellContentType.BLOCK, CellContentType.OBSTACLE):
            self._screen.fill(color, pygame.Rect(x, y, CELL_SIZE, CELL_SIZE))
        elif kind in (CellContentType.PLAYER, CellContentType.FOOD):
            self._draw_circle(centre_x, centre_y, 10, color)
            self._draw_circle(centre_x, centre_y, 8, _BLACK)
        elif kind in (CellContentType.ENEMY, CellContentType.POWERUP):
            self._draw_circle(centre_x, centre_y, 10, color)
        elif kind is CellContentType.PROJECTILE:
            self._draw_circle(centre_x, centre_y, 5, color)

    def _draw_text(self, text: str, x: int, y: int, color: RGBA) -> None:
        surface = self._font.render(text, False, color)
        self._screen.blit(surface, (x, y))

    def render(
        self, grid: Grid, score: int, player_name: str, high_scores: HighScores
    ) -> None:
        pygame.time.delay(FRAME_DELAY_MS)
        self._screen.fill(_BLACK)
        for row in grid:
            for cell in row:
                self._draw_cell(cell)

        ui_x = (len(grid[0]) if grid else 0) * 21
        ui_y = 10
        self._draw_text(f"Score: {score}", ui_x, ui_y, _WHITE)
        ui_y += 40
        self._draw_text("Controls:", ui_x, ui_y, _WHITE)
        ui_y += 30
        for line in _CONTROLS:
            self._draw_text(line, ui_x, ui_y, _YELLOW)
            ui_y += 25
        pygame.display.flip()

    def clear(self) -> None:
        self._screen.fill(_BLACK)

    @property
    def name(self) -> str:
        return "SDL2"

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            pygame.font.quit()
            pygame.display.quit()


def create_graphics() -> SdlDisplay:
    """Entry point used by the core to instantiate the display."""
    return SdlDisplay()