"""The snake game."""

from __future__ import annotations

import random
from typing import List, Optional, Sequence, Tuple

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

_OPPOSITE = {
    KeyType.UP: KeyType.DOWN,
    KeyType.DOWN: KeyType.UP,
    KeyType.LEFT: KeyType.RIGHT,
    KeyType.RIGHT: KeyType.LEFT,
}

_STEP = {
    KeyType.UP: (0, -1),
    KeyType.DOWN: (0, 1),
    KeyType.LEFT: (-1, 0),
    KeyType.RIGHT: (1, 0),
}


class Snake(Game):
    """Classic snake on a walled 40x30 board."""

    MAP_W = 40
    MAP_H = 30
    START_LENGTH = 4
    FOOD_POINTS = 10

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._body: List[Position] = []
        self._food: Position = (0, 0)
        self._direction = KeyType.RIGHT
        self._score = 0
        self._game_over = False
        self._closed = False
        self._game_libs: Tuple[str, ...] = ()
        self._graphics_libs: Tuple[str, ...] = ()
        self._player_name = ""
        self.restart()

    @property
    def body(self) -> List[Position]:
        """Snake segments, head first."""
        return list(self._body)

    @property
    def food(self) -> Position:
        """Position of the food."""
        return self._food

    def restart(self) -> None:
        start_x, start_y = self.MAP_W // 2, self.MAP_H // 2
        self._body = [(start_x - i, start_y) for i in range(self.START_LENGTH)]
        self._direction = KeyType.RIGHT
        self._score = 0
        self._game_over = False
        self._place_food()

    def _place_food(self) -> None:
        while True:
            x = self._rng.randrange(1, self.MAP_W - 1)
            y = self._rng.randrange(1, self.MAP_H - 1)
            if (x, y) not in self._body:
                self._food = (x, y)
                return

    def _move(self) -> None:
        dx, dy = _STEP[self._direction]
        head_x, head_y = self._body[0]
        head = (head_x + dx, head_y + dy)
        if not (0 < head[0] < self.MAP_W - 1 and 0 < head[1] < self.MAP_H - 1):
            self._game_over = True
            return
        if head in self._body:
            self._game_over = True
            return
        self._body.insert(0, head)
        if head == self._food:
            self._score += self.FOOD_POINTS
            self._place_food()
        else:
            self._body.pop()

    def update(self, events: Sequence[Event]) -> None:
        for event in events:
            key = event.key
            if key is KeyType.ESCAPE:
                self._game_over = True
                return
            if key in _OPPOSITE:
                if self._direction is not _OPPOSITE[key]:
                    self._direction = key
            elif key is KeyType.SPACE:
                self.restart()
        self._move()

    def get_map(self) -> Grid:
        grid = [
            [Cell(x, y, " ", Color.BLACK, CellContentType.EMPTY) for x in range(self.MAP_W)]
            for y in range(self.MAP_H)
        ]
        for y, row in enumerate(grid):
            for x in range(self.MAP_W):
                if y in (0, self.MAP_H - 1) or x in (0, self.MAP_W - 1):
                    row[x] = Cell(x, y, "", Color.WHITE, CellContentType.BLOCK)
        for index, (x, y) in enumerate(self._body):
            kind = CellContentType.PLAYER if index == 0 else CellContentType.ENEMY
            grid[y][x] = Cell(x, y, "", Color.GREEN, kind)
        food_x, food_y = self._food
        grid[food_y][food_x] = Cell(food_x, food_y, "", Color.YELLOW, CellContentType.FOOD)
        return grid

    @property
    def name(self) -> str:
        return "Snake"

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


def create_game() -> Snake:
    """Entry point used by the core to instantiate the game."""
    return Snake()