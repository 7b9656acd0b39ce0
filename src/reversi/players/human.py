"""
Console player: shows the board and asks for a field until it is legal.
A field is entered in notation (``c4``) or as the index of a legal move.
"""
from dataclasses import replace
from typing import Callable, Optional

from ..display import DisplayOptions, redraw_board
from ..game import Board, Color, Field, PlaceError
from .base import Player, QuitGame

QUIT_WORDS = {"q", "quit", "exit"}


class HumanPlayer(Player):
    def __init__(self, color: Color, name: str,
                 input_func: Optional[Callable[[str], str]] = None,
                 output: Callable[[str], None] = print,
                 display: Optional[DisplayOptions] = None,
                 highlight: bool = True):
        super().__init__(color, name)
        self.input_func = input_func or input
        self.output = output
        self.display = display
        self.highlight = highlight

    def _read(self, prompt: str) -> str:
        try:
            value = self.input_func(prompt)
        except EOFError:
            raise QuitGame() from None

        value = value.strip().lower()
        if value in QUIT_WORDS:
            raise QuitGame()
        return value

    def turn(self, board: Board) -> Optional[Field]:
        if self.display is not None:
            options = replace(self.display, color=self.color if self.highlight else None)
            redraw_board(board, options, self.output)

        self.output(f"{self.color.label} {self.name}")

        if not board.has_any_valid_move(self.color):
            self.output("You have no valid moves. Press <Enter> to pass.")
            self._read("")
            return None

        while True:
            text = self._read("Enter a field: ")
            try:
                if text.isdigit():
                    field = Field.from_board_move(text, board, self.color)
                else:
                    field = Field.parse(text)
                board.move_validity(field, self.color)
            except PlaceError as exc:
                self.output(f"Invalid move {text!r}: {exc}")
                continue
            return field
