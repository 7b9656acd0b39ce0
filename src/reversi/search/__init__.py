"""
Minimax search for the Reversi bot.
"""
from .minimax import MinimaxBot, SearchResult, Strategy, evaluate, minimax

__all__ = ['MinimaxBot', 'SearchResult', 'Strategy', 'evaluate', 'minimax']
