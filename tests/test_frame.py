import pytest

from carcasonne.drawing import CharDrawing, Color
from carcasonne.frame import Cell, Frame
from carcasonne.layout import Point, Size


def test_frame_new_initializes_correctly():
    frame = Frame(Size(4, 3))
    assert frame.size.width == 4
    assert frame.size.height == 3
    assert len(frame.cells) == 3
    assert all(len(row) == 4 for row in frame.cells)
    for row in frame.cells:
        for cell in row:
            assert cell.symbol == CharDrawing.NONE.char
            assert cell.background_color == Color.BLACK
            assert cell.foreground_color == Color.WHITE


def test_frame_char_sets_correct_cell():
    frame = Frame(Size(3, 3))
    frame.char(Point(1, 1), "X", Color.RED, Color.BLUE)
    cell = frame.cells[1][1]
    assert cell.symbol == "X"
    assert cell.foreground_color == Color.RED
    assert cell.background_color == Color.BLUE


def test_frame_char_simple_defaults_colors():
    frame = Frame(Size(2, 2))
    frame.char_simple(Point(0, 0), "A")
    assert frame.cells[0][0] == Cell("A", Color.BLACK, Color.WHITE)


def test_set_cell_raises_on_out_of_bounds_x():
    frame = Frame(Size(2, 2))
    with pytest.raises(IndexError, match="Point out of bounds"):
        frame.char_simple(Point(2, 0), "Z")


def test_set_cell_raises_on_out_of_bounds_y():
    frame = Frame(Size(2, 2))
    with pytest.raises(IndexError, match="Point out of bounds"):
        frame.char_simple(Point(0, 2), "Z")


def test_writing_one_cell_leaves_others_blank():
    frame = Frame(Size(3, 2))
    frame.char_simple(Point(2, 0), "Q")
    assert frame.cells[0][2].symbol == "Q"
    assert frame.cells[1][2].symbol == " "
    symbols = [cell.symbol for row in frame.cells for cell in row]
    assert symbols.count("Q") == 1


def test_char_rejects_multi_character_string():
    frame = Frame(Size(2, 2))
    with pytest.raises(ValueError):
        frame.char_simple(Point(0, 0), "ab")


def test_empty_frame_has_no_cells():
    frame = Frame(Size(0, 0))
    assert frame.cells == []
    with pytest.raises(IndexError):
        frame.char_simple(Point(0, 0), "x")