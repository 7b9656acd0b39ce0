"""
Text rendering of the board.
"""
from dataclasses import dataclass
from typing import Callable, Optional

from .game import Board, Color, Field

CLEAR_SCREEN = "\033[2J\033[H"

PIECES = {Color.BLACK: "BB", Color.WHITE: "WW"}


@dataclass
class DisplayOptions:
    """How the board is redrawn between moves."""

    clear_screen: bool = True
    color: Optional[Color] = None  # highlight legal moves of this color
    title: Optional[str] = None
    empty_lines: int = 1


def render_board(board: Board, color: Optional[Color] = None) -> str:
    """
    Draw the board as a box grid, top row first.

    Empty fields that are legal moves for ``color`` show their notation.
    """
    size = Board.SIZE
    valid_moves = set(board.valid_moves(color)) if color is not None else set()

    lines = ["╭──" + "──┬──" * (size - 1) + "──╮"]
    for y in range(size):
        if y != 0:
            lines.append("├──" + "──┼──" * (size - 1) + "──┤")
        row = []
        for x in range(size):
            field = Field(x, y)
            piece = board[field]
            if piece is not None:
                row.append(f"│ {PIECES[piece]} ")
            elif field in valid_moves:
                row.append(f"│ {field} ")
            else:
                row.append("│    ")
        lines.append("".join(row) + "│")
    lines.append("╰──" + "──┴──" * (size - 1) + "──╯")
    return "\n".join(lines)


def redraw_board(board: Board, options: Optional[DisplayOptions] = None,
                 output: Callable[[str], None] = print) -> None:
    options = options or DisplayOptions()
    if options.clear_screen:
        output(CLEAR_SCREEN)
    if options.title:
        output(options.title)
    output(render_board(board, options.color))
    for _ in range(options.empty_lines):
        output("")
