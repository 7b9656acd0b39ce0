"""
Board module for Reversi.
Handles the board state, capture-based move validation and the game status.
The cells are stored in a flat 8x8 numpy array so copies stay cheap.
"""
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

import numpy as np

from .errors import CapturesNoneError, OccupiedError, OutOfBoundsError
from .field import ALL_FIELDS, SIZE, Color, Field

EMPTY = 0


@dataclass(frozen=True)
class GameStatus:
    """Outcome of a board: in progress, won by a color, or drawn."""

    state: str
    winner: Optional[Color] = None

    @classmethod
    def win(cls, color: Color) -> 'GameStatus':
        return cls('win', color)

    @property
    def is_over(self) -> bool:
        return self.state != 'in_progress'

    def __str__(self) -> str:
        if self.state == 'win':
            return f"{self.winner.label} wins"
        if self.state == 'draw':
            return "Draw"
        return "In progress"


GameStatus.IN_PROGRESS = GameStatus('in_progress')
GameStatus.DRAW = GameStatus('draw')


class Board:
    """
    Represents the Reversi board.
    Cells hold EMPTY, Color.BLACK or Color.WHITE and are indexed by Field.
    """

    SIZE = SIZE

    def __init__(self, cells: Optional[np.ndarray] = None):
        """
        Initialize a board.

        Args:
            cells: Optional 8x8 array indexed [x, y]. Copied, never aliased.
                An empty board is created if omitted.
        """
        if cells is None:
            self._cells = np.zeros((SIZE, SIZE), dtype=np.int8)
        else:
            cells = np.asarray(cells, dtype=np.int8)
            if cells.shape != (SIZE, SIZE):
                raise ValueError("Only 8x8 board is supported")
            if not np.isin(cells, (EMPTY, Color.BLACK, Color.WHITE)).all():
                raise ValueError("Cells must be 0, 1 or 2")
            self._cells = cells.copy()

    @classmethod
    def new(cls) -> 'Board':
        """The starting position: White on even coordinate sums, Black on odd."""
        board = cls.empty()
        for x in (3, 4):
            for y in (3, 4):
                board[Field(x, y)] = Color.WHITE if (x + y) % 2 == 0 else Color.BLACK
        return board

    @classmethod
    def empty(cls) -> 'Board':
        return cls()

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> 'Board':
        """
        Build a board from eight strings of eight characters, top row first.
        ``B`` is black, ``W`` is white and anything else is empty.
        """
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise ValueError("Expected 8 rows of 8 characters")
        codes = {'B': Color.BLACK, 'W': Color.WHITE}
        board = cls.empty()
        for y, row in enumerate(rows):
            for x, char in enumerate(row):
                board._cells[x, y] = codes.get(char.upper(), EMPTY)
        return board

    def copy(self) -> 'Board':
        return Board(self._cells)

    def __getitem__(self, field: Field) -> Optional[Color]:
        if not field.in_bounds():
            raise OutOfBoundsError()
        value = int(self._cells[field.x, field.y])
        return Color(value) if value else None

    def __setitem__(self, field: Field, color: Optional[Color]) -> None:
        if not field.in_bounds():
            raise OutOfBoundsError()
        self._cells[field.x, field.y] = EMPTY if color is None else int(color)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._cells, other._cells))

    __hash__ = None

    def __repr__(self) -> str:
        return f"Board({self.to_rows()!r})"

    def to_rows(self) -> List[str]:
        symbols = {EMPTY: '.', Color.BLACK: 'B', Color.WHITE: 'W'}
        return [''.join(symbols[int(self._cells[x, y])] for x in range(SIZE)) for y in range(SIZE)]

    def flip(self, field: Field) -> None:
        """Toggle the color of a piece. Empty fields stay empty."""
        color = self[field]
        if color is not None:
            self[field] = color.other()

    def count_pieces(self, color: Color) -> int:
        return int(np.count_nonzero(self._cells == int(color)))

    def is_full(self) -> bool:
        return not np.any(self._cells == EMPTY)

    def pieces(self, color: Color) -> List[Field]:
        """Fields holding ``color``, in Field.all() order."""
        return [Field(int(x), int(y)) for x, y in np.argwhere(self._cells == int(color))]

    def get_board_state(self) -> np.ndarray:
        """
        Get the board as a numpy array for display.

        Returns:
            2D array indexed [row, column], i.e. [y, x]
        """
        return self._cells.T.copy()

    def turn(self) -> Color:
        """
        Whose turn it is, derived from the piece count parity.
        Advisory only: a pass does not change the count, so the game loop
        tracks the turn itself.
        """
        return Color.WHITE if np.count_nonzero(self._cells) % 2 == 0 else Color.BLACK

    # ------------------------------------------------------------------
    # Capture engine
    # ------------------------------------------------------------------
    @staticmethod
    def line_between(start: Field, end: Field) -> Optional[List[Field]]:
        """
        The fields strictly between two fields on a row, column or diagonal.

        Returns:
            The fields ordered by ascending x (ascending y for a column), or
            None if the fields are not aligned or nothing lies between them.
        """
        dx, dy = end.x - start.x, end.y - start.y
        if dx != 0 and dy != 0 and abs(dx) != abs(dy):
            return None
        steps = max(abs(dx), abs(dy))
        if steps < 2:
            return None
        sx, sy = (dx > 0) - (dx < 0), (dy > 0) - (dy < 0)
        line = [Field(start.x + i * sx, start.y + i * sy) for i in range(1, steps)]
        if sx < 0 or (sx == 0 and sy < 0):
            line.reverse()
        return line

    def move_validity(self, field: Field, color: Color) -> List[Field]:
        """
        Check if a move is valid.

        Args:
            field: Target field, in bounds or not
            color: Color of the piece to place

        Returns:
            The fields captured by the move, each listed once

        Raises:
            OutOfBoundsError, OccupiedError or CapturesNoneError
        """
        if not field.in_bounds():
            raise OutOfBoundsError()
        if self[field] is not None:
            raise OccupiedError()
        # Every capturing line starts next to the target
        if all(self[neighbor] is None for neighbor in field.neighbors()):
            raise CapturesNoneError()

        opponent = color.other()
        captured: List[Field] = []
        for anchor in self.pieces(color):
            line = self.line_between(field, anchor)
            if line is not None and all(self[f] == opponent for f in line):
                captured.extend(line)

        if not captured:
            raise CapturesNoneError()

        assert len(set(captured)) == len(captured), "Captured pieces are not unique"
        return captured

    def is_valid(self, field: Field, color: Color) -> bool:
        try:
            self.move_validity(field, color)
        except (OutOfBoundsError, OccupiedError, CapturesNoneError):
            return False
        return True

    def valid_moves(self, color: Color) -> List[Field]:
        """All fields ``color`` can legally play, in Field.all() order."""
        return [field for field in ALL_FIELDS if self.is_valid(field, color)]

    def has_any_valid_move(self, color: Color) -> bool:
        return any(self.is_valid(field, color) for field in ALL_FIELDS)

    def add_piece(self, field: Field, color: Color) -> List[Field]:
        """
        Place a piece and flip every captured piece.

        Returns:
            The captured fields, in anchor enumeration order

        Raises:
            see move_validity; the board is left untouched on error
        """
        captured = self.move_validity(field, color)
        self[field] = color
        self.flip_all(captured)
        return captured

    def flip_all(self, fields: Iterable[Field]) -> None:
        for field in fields:
            self.flip(field)

    def sort(self) -> None:
        """
        Rearrange the pieces into colour blocks to show a final result.

        Reading top row first, left to right: Black pieces, then the empty
        fields, then White pieces. The counts are unchanged.
        """
        black = self.count_pieces(Color.BLACK)
        white = self.count_pieces(Color.WHITE)
        flat = np.full(SIZE * SIZE, EMPTY, dtype=np.int8)
        flat[:black] = Color.BLACK
        flat[flat.size - white:] = Color.WHITE
        # flat is row-major, the cells are indexed [x, y]
        self._cells = flat.reshape(SIZE, SIZE).T.copy()

    def sorted(self) -> 'Board':
        board = self.copy()
        board.sort()
        return board

    # ------------------------------------------------------------------
    # Game status
    # ------------------------------------------------------------------
    def final_status(self) -> GameStatus:
        """The status by piece count, assuming the game is done."""
        white = self.count_pieces(Color.WHITE)
        black = self.count_pieces(Color.BLACK)
        if white > black:
            return GameStatus.win(Color.WHITE)
        if black > white:
            return GameStatus.win(Color.BLACK)
        return GameStatus.DRAW

    def status(self) -> GameStatus:
        """Classify the board. Recomputed on every call."""
        if self.is_full():
            return self.final_status()
        if self.count_pieces(Color.WHITE) == 0:
            return GameStatus.win(Color.BLACK)
        if self.count_pieces(Color.BLACK) == 0:
            return GameStatus.win(Color.WHITE)
        if not self.has_any_valid_move(Color.WHITE) and not self.has_any_valid_move(Color.BLACK):
            return self.final_status()
        return GameStatus.IN_PROGRESS

    def __str__(self) -> str:
        return '\n'.join(' '.join(row) for row in self.to_rows())
