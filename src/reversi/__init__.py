"""
Reversi: board, capture rules and a minimax bot.
"""
from .game import Board, Color, Field, GameStatus, PlaceError, ReversiGame
from .search import MinimaxBot, Strategy

__version__ = "0.1"

__all__ = ['Board', 'Color', 'Field', 'GameStatus', 'MinimaxBot', 'PlaceError',
           'ReversiGame', 'Strategy']
