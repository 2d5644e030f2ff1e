import pytest

from retroarcade.types import (
    ArcadeError,
    Cell,
    CellContentType,
    Color,
    Event,
    Game,
    Graphics,
    KeyType,
    MenuSelection,
    MouseButton,
)


def test_key_event_defaults():
    event = Event(KeyType.UP)
    assert event.key is KeyType.UP
    assert event.mouse_button is MouseButton.NONE
    assert (event.mouse_x, event.mouse_y) == (0, 0)
    assert event.input_char == ""


def test_click_event():
    event = Event.click(MouseButton.RIGHT_CLICK, 12, 34)
    assert event.key is KeyType.MOUSE_CLICK
    assert event.mouse_button is MouseButton.RIGHT_CLICK
    assert (event.mouse_x, event.mouse_y) == (12, 34)
    assert event.input_char == ""


def test_text_event():
    event = Event.text(KeyType.TEXT_INPUT, "a")
    assert event.key is KeyType.TEXT_INPUT
    assert event.input_char == "a"
    assert event.mouse_button is MouseButton.NONE


def test_events_compare_by_value():
    assert Event(KeyType.SPACE) == Event(KeyType.SPACE)
    assert Event(KeyType.SPACE) != Event(KeyType.ENTER)


def test_cell_equality():
    first = Cell(1, 2, "x", Color.RED, CellContentType.FOOD)
    second = Cell(1, 2, "x", Color.RED, CellContentType.FOOD)
    assert first == second
    assert first != Cell(1, 2, "x", Color.BLUE, CellContentType.FOOD)


def test_events_follow_key_declaration_order():
    keys = [Event(key).key.name for key in KeyType]
    assert keys[:4] == ["UP", "DOWN", "LEFT", "RIGHT"]
    assert keys[-1] == "UNKNOWN"
    buttons = [Event.click(button, 0, 0).mouse_button.name for button in MouseButton]
    assert buttons == ["LEFT_CLICK", "RIGHT_CLICK", "MIDDLE_CLICK", "NONE"]


def test_cells_accept_every_content_type_and_color():
    cells = [Cell(0, 0, " ", Color.DEFAULT, kind) for kind in CellContentType]
    assert cells[0] == Cell(0, 0, " ", Color.DEFAULT, CellContentType.EMPTY)
    assert cells[-1] == Cell(0, 0, " ", Color.DEFAULT, CellContentType.OBSTACLE)
    assert len(cells) == 8


def test_menu_selection_defaults():
    selection = MenuSelection()
    assert selection == MenuSelection(False, -1, -1)


def test_arcade_error_exit_code():
    error = ArcadeError("wrong number of args")
    assert error.exit_code == 84
    assert str(error) == "wrong number of args"


def test_game_is_abstract():
    with pytest.raises(TypeError):
        Game()


def test_graphics_is_abstract():
    with pytest.raises(TypeError):
        Graphics()


def test_graphics_context_manager_closes():
    class Recorder(Graphics):
        def __init__(self):
            self.closed = False

        def handle_input(self):
            return [Event(KeyType.QUIT)]

        def render(self, grid, score, player_name, high_scores):
            pass

        def clear(self):
            pass

        @property
        def name(self):
            return "recorder"

        def close(self):
            self.closed = True

    with Recorder() as display:
        assert display.handle_input() == [Event(KeyType.QUIT)]
        assert display.closed is False
    assert display.closed is True