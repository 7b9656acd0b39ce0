"""
Tests for fields, colors and the a8..h1 notation.
"""
import pytest

from reversi.game import (
    ALL_FIELDS,
    Board,
    Color,
    Field,
    InvalidLengthError,
    InvalidLetterError,
    InvalidNumberError,
    NotationError,
    OutOfBoundsError,
)


def test_in_bounds():
    assert Field(0, 3).in_bounds()
    assert Field(7, 5).in_bounds()
    assert not Field(3, 8).in_bounds()
    assert not Field(8, 0).in_bounds()
    assert not Field(-1, 2).in_bounds()


def test_all_fields_order():
    """Outer axis x, inner axis y."""
    fields = Field.all()
    assert len(fields) == 64
    assert len(set(fields)) == 64
    assert fields[0] == Field(0, 0)
    assert fields[1] == Field(0, 1)
    assert fields[8] == Field(1, 0)
    assert fields[-1] == Field(7, 7)
    assert fields is ALL_FIELDS


def test_neighbors():
    assert sorted(Field(0, 0).neighbors()) == [Field(0, 1), Field(1, 0), Field(1, 1)]
    assert len(Field(3, 3).neighbors()) == 8
    assert len(Field(7, 4).neighbors()) == 5
    assert Field(3, 3) not in Field(3, 3).neighbors()


def test_format():
    assert str(Field(3, 3)) == "d5"
    assert str(Field(0, 0)) == "a8"
    assert str(Field(7, 7)) == "h1"
    assert str(Field(2, 4)) == "c4"


def test_format_out_of_bounds():
    with pytest.raises(OutOfBoundsError):
        str(Field(8, 0))


def test_parse():
    assert Field.parse("a8") == Field(0, 0)
    assert Field.parse("h1") == Field(7, 7)
    assert Field.parse("c4") == Field(2, 4)


def test_round_trip():
    for field in ALL_FIELDS:
        assert Field.parse(str(field)) == field


@pytest.mark.parametrize("text", ["", "a", "a88", "c4 "])
def test_parse_invalid_length(text):
    with pytest.raises(InvalidLengthError):
        Field.parse(text)


@pytest.mark.parametrize("text", ["i4", "z1", "A8", "44"])
def test_parse_invalid_letter(text):
    with pytest.raises(InvalidLetterError):
        Field.parse(text)


@pytest.mark.parametrize("text", ["a0", "a9", "ax", "h-"])
def test_parse_invalid_number(text):
    with pytest.raises(InvalidNumberError):
        Field.parse(text)


def test_notation_errors_share_a_base():
    for text in ["", "i4", "a9"]:
        with pytest.raises(NotationError):
            Field.parse(text)


def test_color_other():
    assert Color.WHITE.other() == Color.BLACK
    assert Color.BLACK.other() == Color.WHITE
    for color in Color:
        assert color.other().other() == color
    assert Color.WHITE.label == "White"


def test_from_board_move():
    board = Board.new()
    assert Field.from_board_move("0", board) == Field(2, 4)
    assert Field.from_board_move("3", board) == Field(5, 3)
    assert Field.from_board_move("0", board, Color.BLACK) == Field(2, 3)


@pytest.mark.parametrize("text", ["", "x", "-1", "1.5", " 2"])
def test_from_board_move_invalid_number(text):
    with pytest.raises(InvalidNumberError):
        Field.from_board_move(text, Board.new())


@pytest.mark.parametrize("text", ["4", "99"])
def test_from_board_move_out_of_range(text):
    with pytest.raises(OutOfBoundsError):
        Field.from_board_move(text, Board.new())


if __name__ == "__main__":
    test_in_bounds()
    test_all_fields_order()
    test_neighbors()
    test_format()
    test_parse()
    test_round_trip()
    test_color_other()
    print("Field tests passed!")
