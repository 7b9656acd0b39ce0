"""
Tests for the text board.
"""
from reversi.display import CLEAR_SCREEN, DisplayOptions, redraw_board, render_board
from reversi.game import Board, Color


def test_render_shape():
    lines = render_board(Board.new()).split("\n")
    assert len(lines) == 17
    assert all(len(line) == 41 for line in lines)
    assert lines[0].startswith("╭") and lines[-1].endswith("╯")


def test_render_pieces():
    lines = render_board(Board.new()).split("\n")
    # Row d5/e5 is the fourth board row, drawn on line 7
    assert lines[7] == "│    │    │    │ WW │ BB │    │    │    │"
    assert lines[9] == "│    │    │    │ BB │ WW │    │    │    │"


def test_render_highlights_valid_moves():
    text = render_board(Board.new(), Color.WHITE)
    for notation in ("c4", "d3", "e6", "f5"):
        assert notation in text
    assert "c5" not in text

    text = render_board(Board.new(), Color.BLACK)
    for notation in ("c5", "d6", "e3", "f4"):
        assert notation in text


def test_redraw_options():
    lines = []
    redraw_board(Board.new(), DisplayOptions(title="Round 1", empty_lines=2), lines.append)
    assert lines[0] == CLEAR_SCREEN
    assert lines[1] == "Round 1"
    assert lines[-2:] == ["", ""]

    lines = []
    redraw_board(Board.new(), DisplayOptions(clear_screen=False, empty_lines=0), lines.append)
    assert lines == [render_board(Board.new())]
