"""Shared data types and the interfaces games and displays implement."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Sequence, Tuple


class ArcadeError(Exception):
    """Fatal error; the command exits with ``exit_code``."""

    exit_code = 84


class CellContentType(Enum):
    """What occupies a cell of a game map."""

    EMPTY = auto()
    BLOCK = auto()
    PLAYER = auto()
    ENEMY = auto()
    FOOD = auto()
    POWERUP = auto()
    PROJECTILE = auto()
    OBSTACLE = auto()


class Color(Enum):
    """Colours a game may ask a display to use."""

    DEFAULT = auto()
    WHITE = auto()
    RED = auto()
    GREEN = auto()
    BLUE = auto()
    YELLOW = auto()
    PURPLE = auto()
    ORANGE = auto()
    BLACK = auto()


@dataclass(frozen=True)
class Cell:
    """One square of a game map; ``c`` is empty when there is no glyph."""

    x: int
    y: int
    c: str
    color: Color
    type: CellContentType


Grid = List[List[Cell]]


class KeyType(Enum):
    """Logical keys and actions produced by displays."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    SPACE = auto()
    ENTER = auto()
    ESCAPE = auto()
    NEXT_GAME = auto()
    PREV_GAME = auto()
    NEXT_GRAPHICS = auto()
    PREV_GRAPHICS = auto()
    RESTART_GAME = auto()
    QUIT = auto()
    MOUSE_CLICK = auto()
    TEXT_INPUT = auto()
    BACKSPACE = auto()
    UNKNOWN = auto()


class MouseButton(Enum):
    """Mouse buttons that can appear in a click event."""

    LEFT_CLICK = auto()
    RIGHT_CLICK = auto()
    MIDDLE_CLICK = auto()
    NONE = auto()


@dataclass(frozen=True)
class Event:
    """An input event delivered by a display to the core and the game."""

    key: KeyType
    mouse_button: MouseButton = MouseButton.NONE
    mouse_x: int = 0
    mouse_y: int = 0
    input_char: str = ""

    @classmethod
    def click(cls, button: MouseButton, x: int, y: int) -> "Event":
        """A mouse click at ``(x, y)``."""
        return cls(KeyType.MOUSE_CLICK, button, x, y)

    @classmethod
    def text(cls, key: KeyType, char: str) -> "Event":
        """A key event carrying a typed character."""
        return cls(key, input_char=char)


@dataclass(frozen=True)
class MenuSelection:
    """Choice reported by a menu-like game."""

    selection_made: bool = False
    selected_game_index: int = -1
    selected_graphics_index: int = -1


HighScores = Sequence[Tuple[str, int]]


class Game(ABC):
    """Interface every game implements."""

    @abstractmethod
    def update(self, events: Sequence[Event]) -> None:
        """Advance the game by one frame with the given events."""

    @abstractmethod
    def get_map(self) -> Grid:
        """The current map, as rows of cells."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name of the game."""

    @property
    @abstractmethod
    def score(self) -> int:
        """Current score."""

    @abstractmethod
    def is_game_over(self) -> bool:
        """Whether the current round has ended."""

    @abstractmethod
    def restart(self) -> None:
        """Start a new round."""

    @abstractmethod
    def close(self) -> None:
        """Release anything the game holds."""

    @abstractmethod
    def get_selection(self) -> MenuSelection:
        """Menu selection made by the player, if the game is a menu."""

    @abstractmethod
    def set_available_libraries(
        self, game_libs: Sequence[str], graphics_libs: Sequence[str]
    ) -> None:
        """Tell the game which libraries are available."""

    @abstractmethod
    def wants_text_input(self) -> bool:
        """Whether the game expects typed text."""

    @abstractmethod
    def set_player_name(self, name: str) -> None:
        """Set the player's name."""


class Graphics(ABC):
    """Interface every display implements."""

    @abstractmethod
    def handle_input(self) -> List[Event]:
        """Collect the pending input events."""

    @abstractmethod
    def render(
        self, grid: Grid, score: int, player_name: str, high_scores: HighScores
    ) -> None:
        """Draw a frame."""

    @abstractmethod
    def clear(self) -> None:
        """Clear the screen."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name of the backend."""

    @abstractmethod
    def close(self) -> None:
        """Shut the display down."""

    def __enter__(self) -> "Graphics":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()