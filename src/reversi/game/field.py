"""
Board geometry for Reversi.
Defines piece colors, the Field coordinate type and the a8..h1 notation.
"""
from enum import IntEnum
from typing import TYPE_CHECKING, List, NamedTuple, Tuple

from .errors import (
    InvalidLengthError,
    InvalidLetterError,
    InvalidNumberError,
    OutOfBoundsError,
)

if TYPE_CHECKING:
    from .board import Board

SIZE = 8
LETTERS = "abcdefgh"


class Color(IntEnum):
    """Piece colors. The values match the cell codes stored on the board."""

    BLACK = 1
    WHITE = 2

    def other(self) -> 'Color':
        return Color(3 - self)

    @property
    def label(self) -> str:
        return self.name.title()


class Field(NamedTuple):
    """
    A board coordinate.

    ``x`` selects the column (the letter of the notation) and ``y`` the row,
    counted from the top, so ``Field(0, 0)`` is ``a8`` and ``Field(7, 7)``
    is ``h1``.
    """

    x: int
    y: int

    def in_bounds(self) -> bool:
        return 0 <= self.x < SIZE and 0 <= self.y < SIZE

    @staticmethod
    def all() -> Tuple['Field', ...]:
        """All 64 fields, outer axis x, inner axis y."""
        return ALL_FIELDS

    def neighbors(self) -> List['Field']:
        """The in-bounds fields adjacent to this one, diagonals included."""
        neighbors = []
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                neighbor = Field(self.x + dx, self.y + dy)
                if neighbor.in_bounds():
                    neighbors.append(neighbor)
        return neighbors

    @classmethod
    def parse(cls, text: str) -> 'Field':
        """
        Parse a field from its notation, e.g. ``"a8"`` or ``"h1"``.

        Raises:
            InvalidLengthError: text is not exactly two characters
            InvalidLetterError: the letter is not in a..h
            InvalidNumberError: the digit is not in 1..8
        """
        if len(text) != 2:
            raise InvalidLengthError()
        letter, digit = text
        x = LETTERS.find(letter)
        if x < 0:
            raise InvalidLetterError(f"Invalid letter: {letter!r}")
        if digit not in "12345678":
            raise InvalidNumberError(f"Invalid number: {digit!r}")
        return cls(x, SIZE - int(digit))

    @classmethod
    def from_board_move(cls, text: str, board: 'Board', color: Color = Color.WHITE) -> 'Field':
        """
        Pick a legal move by its index in ``board.valid_moves(color)``.

        Raises:
            InvalidNumberError: text is not a non-negative integer
            OutOfBoundsError: there is no legal move with that index
        """
        if not (text.isascii() and text.isdigit()):
            raise InvalidNumberError(f"Invalid number: {text!r}")
        moves = board.valid_moves(color)
        index = int(text)
        if index >= len(moves):
            raise OutOfBoundsError(f"No move number {index}, there are {len(moves)}")
        return moves[index]

    def __str__(self) -> str:
        if not self.in_bounds():
            raise OutOfBoundsError(f"Field ({self.x}, {self.y}) is out of bounds")
        return f"{LETTERS[self.x]}{SIZE - self.y}"


ALL_FIELDS: Tuple[Field, ...] = tuple(Field(x, y) for x in range(SIZE) for y in range(SIZE))
