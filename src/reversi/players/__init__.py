"""
Players: a human at the console or the minimax bot.
"""
from .base import Player, QuitGame
from .bot import BotPlayer
from .human import HumanPlayer

__all__ = ['BotPlayer', 'HumanPlayer', 'Player', 'QuitGame']
