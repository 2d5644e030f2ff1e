import curses
from unittest.mock import patch

import pytest

from retroarcade.curses_display import CursesDisplay, cell_glyphs, key_to_event
from retroarcade.types import Cell, CellContentType, Color, Event, KeyType


class FakeScreen:
    def __init__(self, rows=40, cols=120, keys=()):
        self.size = (rows, cols)
        self.keys = list(keys)
        self.chars = {}
        self.texts = []
        self.calls = []

    def getmaxyx(self):
        return self.size

    def keypad(self, flag):
        self.calls.append(("keypad", flag))

    def timeout(self, delay):
        self.calls.append(("timeout", delay))

    def getch(self):
        return self.keys.pop(0) if self.keys else -1

    def addch(self, y, x, ch):
        self.chars[(y, x)] = ch

    def addstr(self, y, x, text):
        self.texts.append((y, x, text))

    def attron(self, attributes):
        self.calls.append("attron")

    def attroff(self, attributes):
        self.calls.append("attroff")

    def clear(self):
        self.calls.append("clear")

    def refresh(self):
        self.calls.append("refresh")


@pytest.fixture
def setup():
    with patch("retroarcade.curses_display.curses") as fake_curses:
        screen = FakeScreen(keys=[ord("q")])
        display = CursesDisplay(screen)
        yield display, screen, fake_curses


@pytest.mark.parametrize(
    "code, key",
    [
        (curses.KEY_UP, KeyType.UP),
        (curses.KEY_DOWN, KeyType.DOWN),
        (curses.KEY_LEFT, KeyType.LEFT),
        (curses.KEY_RIGHT, KeyType.RIGHT),
        (ord(" "), KeyType.SPACE),
        (ord("\n"), KeyType.ENTER),
        (27, KeyType.ESCAPE),
        (ord("n"), KeyType.NEXT_GAME),
        (ord("p"), KeyType.PREV_GAME),
        (ord("g"), KeyType.NEXT_GRAPHICS),
        (ord("h"), KeyType.PREV_GRAPHICS),
        (ord("r"), KeyType.RESTART_GAME),
        (ord("q"), KeyType.QUIT),
        (ord("x"), KeyType.UNKNOWN),
        (-1, KeyType.UNKNOWN),
    ],
)
def test_key_to_event(code, key):
    assert key_to_event(code) == Event(key)


def test_glyphs_for_food_without_character():
    cell = Cell(0, 0, "", Color.YELLOW, CellContentType.FOOD)
    assert cell_glyphs(cell) == ("<", ">", False)


def test_glyphs_for_powerup_and_projectile():
    assert cell_glyphs(Cell(0, 0, "", Color.RED, CellContentType.POWERUP)) == ("/", "\\", False)
    assert cell_glyphs(Cell(0, 0, "", Color.RED, CellContentType.PROJECTILE)) == ("+", "+", False)


def test_glyphs_with_character_override():
    cell = Cell(0, 0, "3", Color.WHITE, CellContentType.BLOCK)
    assert cell_glyphs(cell) == (" ", "3", True)


def test_glyphs_for_solid_types_are_inverted():
    for kind in (CellContentType.EMPTY, CellContentType.PLAYER, CellContentType.OBSTACLE):
        assert cell_glyphs(Cell(0, 0, "", Color.GREEN, kind)) == (" ", " ", True)


def test_init_configures_screen(setup):
    display, screen, fake_curses = setup
    assert ("timeout", 100) in screen.calls
    assert ("keypad", True) in screen.calls
    fake_curses.init_pair.assert_any_call(12, curses.COLOR_BLACK, curses.COLOR_RED)
    fake_curses.init_pair.assert_any_call(2, curses.COLOR_RED, curses.COLOR_BLACK)


def test_handle_input_reads_one_key(setup):
    display, screen, _ = setup
    assert display.handle_input() == [Event(KeyType.QUIT)]
    assert display.handle_input() == [Event(KeyType.UNKNOWN)]


def test_render_draws_cells_two_columns_wide(setup):
    display, screen, _ = setup
    grid = [
        [Cell(x, y, "", Color.BLACK, CellContentType.EMPTY) for x in range(3)]
        for y in range(2)
    ]
    grid[1][2] = Cell(2, 1, "", Color.YELLOW, CellContentType.FOOD)
    display.render(grid, 0, "Snake", [])
    assert screen.chars[(1, 4)] == "<"
    assert screen.chars[(1, 5)] == ">"
    assert screen.chars[(0, 0)] == " "
    assert screen.calls[-1] == "refresh"
    assert "clear" in screen.calls


def test_render_uses_inverted_pair_for_blocks(setup):
    display, screen, fake_curses = setup
    grid = [
        [
            Cell(0, 0, "", Color.RED, CellContentType.BLOCK),
            Cell(1, 0, "", Color.YELLOW, CellContentType.FOOD),
        ]
    ]
    display.render(grid, 0, "x", [])
    fake_curses.color_pair.assert_any_call(12)
    fake_curses.color_pair.assert_any_call(5)


def test_render_sidebar_lines(setup):
    display, screen, _ = setup
    display.render([[]], 42, "Snake", [("alice", 3)])
    by_text = {text: (y, x) for y, x, text in screen.texts}
    player = by_text["Player: Snake"]
    assert by_text["Score: 42"] == (player[0] + 1, player[1])
    assert by_text["High Scores:"] == (player[0] + 3, player[1])
    assert by_text["alice: 3"] == (player[0] + 4, player[1])


def test_render_caps_high_scores(setup):
    display, screen, _ = setup
    scores = [(f"p{i}", i) for i in range(12)]
    display.render([[]], 0, "Snake", scores)
    texts = [text for _, _, text in screen.texts]
    assert [t for t in texts if t.startswith("p")] == [f"p{i}: {i}" for i in range(10)]


def test_name_clear_and_close(setup):
    display, screen, fake_curses = setup
    assert display.name == "ncurses"
    display.clear()
    assert screen.calls[-1] == "clear"
    display.close()
    fake_curses.endwin.assert_called_once_with()


def test_context_manager_closes(setup):
    display, screen, fake_curses = setup
    with display as entered:
        assert entered is display
    assert fake_curses.endwin.call_count == 1