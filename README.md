# retroarcade

A small arcade cabinet for the terminal and the desktop. It hosts two
grid games and draws them through display backends that can be swapped
while it runs.

Games:

- **Snake** (`retroarcade.snake.Snake`): a 40x30 walled board. Steer the
  snake and eat the food. Each piece of food is worth 10 points. Running
  into a wall or into the snake ends the round.
- **Minesweeper** (`retroarcade.mines.Mines`): a 20x20 board with a
  border, holding 30 to 50 mines. Move the cursor, reveal cells and flag
  mines. The mines are placed on the first reveal and never in the 3x3
  square around the cursor. Every revealed cell scores a point.

Displays:

- **curses** (`retroarcade.curses_display.CursesDisplay`): draws in the
  terminal, with a sidebar that shows the score.
- **SDL-style window** (`retroarcade.sdl_display.SdlDisplay`): a pygame
  window the size of the desktop.
- **SFML-style window** (`retroarcade.sfml_display.SfmlDisplay`): a
  1920x1080 pygame window limited to 11 frames a second.

The windowed displays load `assets/fonts/Arial.ttf` for their text. The
SDL-style window falls back to pygame's default font if that file is
missing. The SFML-style window then draws no text.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Running

The cabinet finds its libraries by looking at the file names in `lib/`,
relative to the current directory. It never reads the files, so empty
files are enough:

```
mkdir lib
touch lib/arcade_ncurses.so lib/arcade_sdl2.so lib/arcade_sfml.so
touch lib/arcade_snake.so lib/arcade_minesweeper.so
```

Start it and name the display to open first by its path under `lib/`:

```
retroarcade lib/arcade_ncurses.so
```

The `lib/` directory is read as follows:

- Only regular files named `arcade_*.so` count, and they are taken in
  alphabetical order.
- A name on the list of known display names is a display; every other
  name is a game. The known display names include `arcade_ncurses.so`,
  `arcade_sdl2.so` and `arcade_sfml.so`.
- The only names that have something behind them are the three displays
  above plus `arcade_snake.so` and `arcade_minesweeper.so`. Any other
  `arcade_*.so` file, such as `arcade_opengl.so`, stops start-up with
  "Cannot open library".
- Minesweeper is always the first game, so `lib/arcade_minesweeper.so`
  must be present.

Each library step is appended to `DLLoader.log` in the current directory.

The command prints the error and exits with status 84 when:

- it is not given exactly one argument;
- `lib/` cannot be read;
- a library cannot be opened;
- the named display or Minesweeper is missing.

## Controls

| Key        | Action                                   |
|------------|------------------------------------------|
| Arrow keys | Move (Snake cannot reverse directly)     |
| Space      | Reveal (Minesweeper) / restart (Snake)   |
| Enter      | Flag or unflag (Minesweeper)             |
| N / P      | Next / previous game                     |
| G / H      | Next / previous display                  |
| R          | Restart the game                         |
| Esc        | End the current round                    |
| Q          | Quit                                     |

A round that has ended restarts at once. Only the first event of each
frame is checked for these cabinet-level keys: switching, restarting and
quitting.

## Using the pieces from Python

```python
import random

from retroarcade.mines import Mines
from retroarcade.snake import Snake
from retroarcade.types import Event, KeyType

game = Snake(random.Random(1))
game.update([Event(KeyType.UP)])
print(game.name, game.score, game.is_game_over(), game.body[0], game.food)

board = Mines(random.Random(1))
board.update([Event(KeyType.DOWN), Event(KeyType.RIGHT), Event(KeyType.SPACE)])
grid = board.get_map()          # rows of retroarcade.types.Cell
print(board.cursor, board.score, board.won)
```

The other pieces:

- Games implement `retroarcade.types.Game`.
- Displays implement `retroarcade.types.Graphics` and can be used as
  context managers, which close them on exit.
- `retroarcade.loader.LibraryLoader` maps a library name to a factory.
- `retroarcade.core.Core` discovers the libraries and runs the loop.
- `Core.dispatch` applies the switch and restart keys and returns the
  active game and display.
- Fatal problems raise `retroarcade.types.ArcadeError`.

`Core` takes the library directory and the factory mappings as
arguments, so other games or displays can be plugged in from Python:

```python
from retroarcade.core import Core
from retroarcade.snake import create_game

core = Core("lib/arcade_ncurses.so", lib_dir="lib",
            games={"arcade_minesweeper.so": create_game})
print(core.game_names, core.graphics_names)
```

## What it does not do

- Libraries are not loaded from disk. The `.so` names in `lib/` only
  select among the games and displays built into the package.
- There is no menu for picking a game or display.
- Scores are not saved. The curses sidebar shows the name of the game in
  its "Player" line and a single fixed high-score entry.
- Games do not accept typed text.
- Mouse clicks reach the games from the SDL-style window only, and
  neither game uses them.