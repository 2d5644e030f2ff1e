"""The core loop: discovers libraries, drives the game and switches backends."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from . import mines, snake
from .loader import LibraryLoader
from .types import ArcadeError, Event, Game, Graphics, KeyType

Factory = Callable[[], object]

DEFAULT_LIB_DIR = "lib"
DEFAULT_GAME = "arcade_minesweeper.so"
HIGH_SCORES = [("lol", 3)]

GRAPHICAL_LIBRARIES = (
    "arcade_ncurses.so",
    "arcade_sdl2.so",
    "arcade_ndk++.so",
    "arcade_aalib.so",
    "arcade_libcaca.so",
    "arcade_allegro5.so",
    "arcade_xlib.so",
    "arcade_gtk+.so",
    "arcade_sfml.so",
    "arcade_irrlicht.so",
    "arcade_opengl.so",
    "arcade_vulkan.so",
    "arcade_qt5.so",
)


def _create_curses() -> Graphics:
    from .curses_display import create_graphics

    return create_graphics()


def _create_sdl() -> Graphics:
    from .sdl_display import create_graphics

    return create_graphics()


def _create_sfml() -> Graphics:
    from .sfml_display import create_graphics

    return create_graphics()


GAME_FACTORIES: Dict[str, Factory] = {
    "arcade_snake.so": snake.create_game,
    "arcade_minesweeper.so": mines.create_game,
}

GRAPHICS_FACTORIES: Dict[str, Factory] = {
    "arcade_ncurses.so": _create_curses,
    "arcade_sdl2.so": _create_sdl,
    "arcade_sfml.so": _create_sfml,
}


def is_graphics_library(filename: str) -> bool:
    """Whether a library file name denotes a display rather than a game."""
    return filename in GRAPHICAL_LIBRARIES


def _index_of(name: str, names: Sequence[str]) -> int:
    try:
        return names.index(name)
    except ValueError:
        return -1


class Core:
    """Holds the available libraries and runs the main loop."""

    def __init__(
        self,
        default_graphics: str,
        lib_dir: str = DEFAULT_LIB_DIR,
        games: Optional[Mapping[str, Factory]] = None,
        graphics: Optional[Mapping[str, Factory]] = None,
    ) -> None:
        self._game_factories = GAME_FACTORIES if games is None else games
        self._graphics_factories = GRAPHICS_FACTORIES if graphics is None else graphics
        self._prefix = str(lib_dir).rstrip("/") + "/"
        self._game_loaders: Dict[str, LibraryLoader] = {}
        self._graphics_loaders: Dict[str, LibraryLoader] = {}
        self._game_names: List[str] = []
        self._graphics_names: List[str] = []

        try:
            entries = sorted(Path(lib_dir).iterdir(), key=lambda entry: entry.name)
        except OSError as exc:
            raise ArcadeError(f"Cannot read library directory {lib_dir}") from exc
        for entry in entries:
            if entry.is_file():
                self._register(entry.name)

        self._game_idx = _index_of(self._prefix + DEFAULT_GAME, self._game_names)
        self._graphics_idx = _index_of(default_graphics, self._graphics_names)

    def _register(self, filename: str) -> None:
        if not (filename.startswith("arcade_") and filename.endswith(".so")):
            return
        name = self._prefix + filename
        if is_graphics_library(filename):
            self._graphics_loaders[name] = LibraryLoader(name, self._graphics_factories)
            self._graphics_names.append(name)
        else:
            self._game_loaders[name] = LibraryLoader(name, self._game_factories)
            self._game_names.append(name)

    @property
    def game_names(self) -> List[str]:
        """Paths of the game libraries found, in load order."""
        return list(self._game_names)

    @property
    def graphics_names(self) -> List[str]:
        """Paths of the display libraries found, in load order."""
        return list(self._graphics_names)

    def _switch_game(self, game: Optional[Game]) -> Optional[Game]:
        name = self._game_names[self._game_idx]
        print(f"Switching to game library: {name}")
        if game is not None:
            game.close()
        new_game = self._game_loaders[name].instance()
        if new_game is None:
            print(f"Failed to load game library: {name}", file=sys.stderr)
        return new_game

    def _switch_graphics(self, graphics: Optional[Graphics]) -> Optional[Graphics]:
        name = self._graphics_names[self._graphics_idx]
        print(f"Switching to graphics library: {name}")
        if graphics is not None:
            graphics.close()
        new_graphics = self._graphics_loaders[name].instance()
        if new_graphics is None:
            print(f"Failed to load graphics library: {name}", file=sys.stderr)
        return new_graphics

    def dispatch(
        self,
        events: Sequence[Event],
        game: Optional[Game],
        graphics: Optional[Graphics],
    ) -> Tuple[Optional[Game], Optional[Graphics]]:
        """Handle library switching and restarts; return the active game and display."""
        if not events:
            return game, graphics
        key = events[0].key
        game_count = len(self._game_names)
        graphics_count = len(self._graphics_names)

        if key is KeyType.NEXT_GAME:
            self._game_idx = (self._game_idx + 1) % game_count
            game = self._switch_game(game)
        elif key is KeyType.PREV_GAME:
            self._game_idx = (self._game_idx - 1) % game_count
            game = self._switch_game(game)
        elif key is KeyType.NEXT_GRAPHICS:
            self._graphics_idx = (self._graphics_idx + 1) % graphics_count
            graphics = self._switch_graphics(graphics)
        elif key is KeyType.PREV_GRAPHICS:
            self._graphics_idx = (self._graphics_idx - 1) % graphics_count
            graphics = self._switch_graphics(graphics)
        elif key is KeyType.RESTART_GAME and game is not None:
            game.restart()

        if game is not None and game.is_game_over():
            game.restart()
        return game, graphics

    @staticmethod
    def _require(game: Optional[Game], graphics: Optional[Graphics]) -> None:
        if game is None:
            raise ArcadeError("Game instance is null")
        if graphics is None:
            raise ArcadeError("Graphics instance is null")

    def run(self) -> None:
        """Run the main loop until the display reports QUIT."""
        if not (
            0 <= self._game_idx < len(self._game_names)
            and 0 <= self._graphics_idx < len(self._graphics_names)
        ):
            raise ArcadeError("Invalid library indexes")

        game_key = self._game_names[self._game_idx]
        graphics_key = self._graphics_names[self._graphics_idx]
        for name in self._game_names:
            print(f"Game: {name}")
        for name in self._graphics_names:
            print(f"Graphic: {name}")

        game = self._game_loaders[game_key].instance()
        graphics = self._graphics_loaders[graphics_key].instance()
        try:
            while True:
                self._require(game, graphics)
                events = graphics.handle_input()
                game, graphics = self.dispatch(events, game, graphics)
                if events and events[0].key is KeyType.QUIT:
                    break
                self._require(game, graphics)
                game.update(events)
                graphics.clear()
                graphics.render(game.get_map(), game.score, game.name, list(HIGH_SCORES))
        finally:
            if graphics is not None:
                graphics.close()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the arcade with the display library named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        if len(args) != 1:
            raise ArcadeError("wrong number of args")
        Core(args[0]).run()
    except ArcadeError as error:
        print(error, file=sys.stderr)
        return ArcadeError.exit_code
    return 0


if __name__ == "__main__":
    raise SystemExit(main())