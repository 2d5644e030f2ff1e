"""The minesweeper game."""

from __future__ import annotations

import random
from collections import deque
from typing import Iterator, Optional, Sequence, Set, Tuple

from .types import (
    Cell,
    CellContentType,
    Color,
    Event,
    Game,
    Grid,
    KeyType,
    MenuSelection,
)

Position = Tuple[int, int]


class Mines(Game):
    """Minesweeper on a 20x20 board framed by a border."""

    MAP_W = 20
    MAP_H = 20
    MIN_MINE_COUNT = 30
    MAX_MINE_COUNT = 50

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._closed = False
        self._game_libs: Tuple[str, ...] = ()
        self._graphics_libs: Tuple[str, ...] = ()
        self._player_name = ""
        self.restart()

    def restart(self) -> None:
        self._mines: Set[Position] = set()
        self._revealed: Set[Position] = set()
        self._flagged: Set[Position] = set()
        self._cursor_x = 0
        self._cursor_y = 0
        self._game_over = False
        self._won = False
        self._first_click = True
        self._score = 0

    @property
    def cursor(self) -> Position:
        """Cursor position as ``(x, y)``."""
        return (self._cursor_x, self._cursor_y)

    @property
    def won(self) -> bool:
        """Whether every safe cell has been revealed."""
        return self._won

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.MAP_W and 0 <= y < self.MAP_H

    def _on_border(self, x: int, y: int) -> bool:
        return x in (0, self.MAP_W - 1) or y in (0, self.MAP_H - 1)

    def _neighbourhood(self, x: int, y: int) -> Iterator[Position]:
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                if self._in_bounds(x + dx, y + dy):
                    yield (x + dx, y + dy)

    def _count_mines(self, x: int, y: int) -> int:
        return sum(pos in self._mines for pos in self._neighbourhood(x, y))

    def _generate_mines(self, safe_x: int, safe_y: int) -> None:
        count = self._rng.randint(self.MIN_MINE_COUNT, self.MAX_MINE_COUNT)
        while len(self._mines) < count:
            x = self._rng.randrange(self.MAP_W)
            y = self._rng.randrange(self.MAP_H)
            if (x, y) in self._mines:
                continue
            if abs(x - safe_x) <= 1 and abs(y - safe_y) <= 1:
                continue
            self._mines.add((x, y))

    def _reveal_cell(self, x: int, y: int) -> None:
        if not self._in_bounds(x, y) or self._on_border(x, y):
            return
        if (x, y) in self._revealed or (x, y) in self._flagged:
            return
        self._revealed.add((x, y))
        self._score += 1
        if (x, y) in self._mines:
            self._game_over = True
            self._revealed |= self._mines
            return
        if self._count_mines(x, y) == 0:
            self._flood(x, y)

    def _flood(self, x: int, y: int) -> None:
        queue = deque([(x, y)])
        self._revealed.add((x, y))
        while queue:
            cx, cy = queue.popleft()
            for pos in self._neighbourhood(cx, cy):
                if pos in self._revealed or pos in self._flagged:
                    continue
                self._revealed.add(pos)
                self._score += 1
                if self._count_mines(*pos) == 0:
                    queue.append(pos)

    def _check_win(self) -> bool:
        return len(self._revealed | self._mines) == self.MAP_W * self.MAP_H

    def update(self, events: Sequence[Event]) -> None:
        if self._game_over:
            return
        for event in events:
            match event.key:
                case KeyType.UP:
                    self._cursor_y = max(self._cursor_y - 1, 0)
                case KeyType.DOWN:
                    self._cursor_y = min(self._cursor_y + 1, self.MAP_H - 1)
                case KeyType.LEFT:
                    self._cursor_x = max(self._cursor_x - 1, 0)
                case KeyType.RIGHT:
                    self._cursor_x = min(self._cursor_x + 1, self.MAP_W - 1)
                case KeyType.SPACE:
                    if self._first_click:
                        self._generate_mines(self._cursor_x, self._cursor_y)
                        self._first_click = False
                    self._reveal_cell(self._cursor_x, self._cursor_y)
                    if self._check_win():
                        self._game_over = True
                        self._won = True
                case KeyType.ENTER:
                    self._flagged ^= {self.cursor}
                case KeyType.NEXT_GAME | KeyType.PREV_GAME | KeyType.ESCAPE:
                    self._game_over = True
                case KeyType.RESTART_GAME:
                    self.restart()

    def _cell(self, x: int, y: int) -> Cell:
        glyph = " "
        if self._on_border(x, y):
            color = Color.PURPLE
        elif (x, y) in self._revealed:
            if (x, y) in self._mines:
                glyph, color = "*", Color.RED
            else:
                glyph, color = str(self._count_mines(x, y)), Color.WHITE
        elif (x, y) in self._flagged:
            glyph, color = "F", Color.YELLOW
        else:
            color = Color.BLACK
        if (x, y) == self.cursor:
            color = Color.ORANGE
        return Cell(x, y, glyph, color, CellContentType.BLOCK)

    def get_map(self) -> Grid:
        return [[self._cell(x, y) for x in range(self.MAP_W)] for y in range(self.MAP_H)]

    @property
    def name(self) -> str:
        return "Minesweeper"

    @property
    def score(self) -> int:
        return self._score

    def is_game_over(self) -> bool:
        return self._game_over

    def close(self) -> None:
        """Mark the game as closed."""
        self._closed = True

    def get_selection(self) -> MenuSelection:
        return MenuSelection()

    def set_available_libraries(self, game_libs, graphics_libs) -> None:
        """Remember the library lists offered by the core."""
        self._game_libs = tuple(game_libs)
        self._graphics_libs = tuple(graphics_libs)

    def wants_text_input(self) -> bool:
        return False

    def set_player_name(self, name: str) -> None:
        """Remember the player's name."""
        self._player_name = name


def create_game() -> Mines:
    """Entry point used by the core to instantiate the game."""
    return Mines()