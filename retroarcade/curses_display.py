"""Terminal display backed by curses."""

from __future__ import annotations

import curses
from typing import Dict, List, Optional, Tuple

from .types import (
    Cell,
    CellContentType,
    Color,
    Event,
    Graphics,
    Grid,
    HighScores,
    KeyType,
)

_CursesError = curses.error

_KEYS: Dict[int, KeyType] = {
    curses.KEY_UP: KeyType.UP,
    curses.KEY_DOWN: KeyType.DOWN,
    curses.KEY_LEFT: KeyType.LEFT,
    curses.KEY_RIGHT: KeyType.RIGHT,
    ord(" "): KeyType.SPACE,
    ord("\n"): KeyType.ENTER,
    27: KeyType.ESCAPE,
    ord("n"): KeyType.NEXT_GAME,
    ord("p"): KeyType.PREV_GAME,
    ord("g"): KeyType.NEXT_GRAPHICS,
    ord("h"): KeyType.PREV_GRAPHICS,
    ord("r"): KeyType.RESTART_GAME,
    ord("q"): KeyType.QUIT,
}

_SOLID = (" ", " ", True)
_GLYPHS: Dict[CellContentType, Tuple[str, str, bool]] = {
    CellContentType.FOOD: ("<", ">", False),
    CellContentType.POWERUP: ("/", "\\", False),
    CellContentType.PROJECTILE: ("+", "+", False),
}

_PAIRS: Dict[Color, int] = {
    Color.DEFAULT: 0,
    Color.WHITE: 1,
    Color.RED: 2,
    Color.GREEN: 3,
    Color.BLUE: 4,
    Color.YELLOW: 5,
    Color.PURPLE: 6,
    Color.ORANGE: 7,
    Color.BLACK: 8,
}
_INVERTED_OFFSET = 10

_FOREGROUNDS: Dict[int, int] = {
    1: curses.COLOR_WHITE,
    2: curses.COLOR_RED,
    3: curses.COLOR_GREEN,
    4: curses.COLOR_BLUE,
    5: curses.COLOR_YELLOW,
    6: curses.COLOR_MAGENTA,
    7: curses.COLOR_CYAN,
    8: curses.COLOR_BLACK,
}

_MAX_HIGH_SCORES = 10


def key_to_event(ch: int) -> Event:
    """Translate a curses key code into an event."""
    return Event(_KEYS.get(ch, KeyType.UNKNOWN))


def cell_glyphs(cell: Cell) -> Tuple[str, str, bool]:
    """The two characters drawn for a cell and whether its colours are inverted."""
    first, second, inverted = _GLYPHS.get(cell.type, _SOLID)
    if cell.c:
        return " ", cell.c[0], inverted
    return first, second, inverted


class CursesDisplay(Graphics):
    """Draws the game map as pairs of characters in a terminal."""

    def __init__(self, screen: Optional["curses.window"] = None) -> None:
        self._screen = screen if screen is not None else curses.initscr()
        curses.cbreak()
        curses.noecho()
        self._screen.keypad(True)
        try:
            curses.curs_set(0)
        except _CursesError:
            pass
        self._screen.timeout(100)
        self._init_colors()

    @staticmethod
    def _init_colors() -> None:
        curses.start_color()
        black = curses.COLOR_BLACK
        curses.init_pair(_INVERTED_OFFSET, black, black)
        for pair, foreground in _FOREGROUNDS.items():
            curses.init_pair(pair, foreground, black)
            curses.init_pair(pair + _INVERTED_OFFSET, black, foreground)

    def handle_input(self) -> List[Event]:
        return [key_to_event(self._screen.getch())]

    def _put(self, y: int, x: int, ch) -> None:
        try:
            self._screen.addch(y, x, ch)
        except _CursesError:
            pass

    def _write(self, y: int, x: int, text: str) -> None:
        try:
            self._screen.addstr(y, x, text)
        except _CursesError:
            pass

    def _draw_cell(self, y: int, x: int, cell: Cell) -> None:
        first, second, inverted = cell_glyphs(cell)
        pair = _PAIRS[cell.color] + (_INVERTED_OFFSET if inverted else 0)
        attributes = curses.color_pair(pair) | curses.A_BOLD
        self._screen.attron(attributes)
        self._put(y, x * 2, first)
        self._put(y, x * 2 + 1, second)
        self._screen.attroff(attributes)

    def _draw_map(self, grid: Grid) -> None:
        for y, row in enumerate(grid):
            for x, cell in enumerate(row):
                self._draw_cell(y, x, cell)

    def _draw_box(self, top: int, left: int, height: int, width: int) -> None:
        bottom = top + height - 1
        right = left + width - 1
        for y in range(top, top + height):
            for x in range(left, left + width):
                if y in (top, bottom):
                    if x == left:
                        ch = curses.ACS_ULCORNER if y == top else curses.ACS_LLCORNER
                    elif x == right:
                        ch = curses.ACS_URCORNER if y == top else curses.ACS_LRCORNER
                    else:
                        ch = curses.ACS_HLINE
                elif x in (left, right):
                    ch = curses.ACS_VLINE
                else:
                    ch = " "
                self._put(y, x, ch)

    def _fill_box(
        self, top: int, left: int, score: int, player_name: str, high_scores: HighScores
    ) -> None:
        self._write(top + 1, left + 2, f"Player: {player_name}")
        self._write(top + 2, left + 2, f"Score: {score}")
        self._write(top + 4, left + 2, "High Scores:")
        for offset, (name, value) in enumerate(list(high_scores)[:_MAX_HIGH_SCORES]):
            self._write(top + 5 + offset, left + 2, f"{name}: {value}")

    def _draw_sidebar(
        self, rows: int, cols: int, score: int, player_name: str, high_scores: HighScores
    ) -> None:
        width = cols // 3
        top = 0
        left = cols - width - 1
        self._draw_box(top, left, rows, width)
        self._fill_box(top, left, score, player_name, high_scores)

    def render(
        self, grid: Grid, score: int, player_name: str, high_scores: HighScores
    ) -> None:
        rows, cols = self._screen.getmaxyx()
        self._screen.clear()
        self._draw_map(grid)
        self._draw_sidebar(rows, cols, score, player_name, high_scores)
        self._screen.refresh()

    def clear(self) -> None:
        self._screen.clear()

    @property
    def name(self) -> str:
        return "ncurses"

    def close(self) -> None:
        curses.endwin()


def create_graphics() -> CursesDisplay:
    """Entry point used by the core to instantiate the display."""
    return CursesDisplay()