"""
Reversi game module.
This package contains the core game logic for Reversi.
"""

from .board import EMPTY, Board, GameStatus
from .errors import (
    CapturesNoneError,
    GameOverError,
    InvalidLengthError,
    InvalidLetterError,
    InvalidNumberError,
    NotationError,
    OccupiedError,
    OutOfBoundsError,
    PlaceError,
)
from .field import ALL_FIELDS, Color, Field
from .game import ReversiGame

__all__ = [
    'ALL_FIELDS', 'EMPTY', 'Board', 'CapturesNoneError', 'Color', 'Field',
    'GameOverError', 'GameStatus', 'InvalidLengthError', 'InvalidLetterError',
    'InvalidNumberError', 'NotationError', 'OccupiedError', 'OutOfBoundsError',
    'PlaceError', 'ReversiGame',
]
