from typing import Optional

from ..game import Board, Color, Field
from ..search import MinimaxBot
from .base import Player


class BotPlayer(Player):
    """Player backed by the minimax search."""

    def __init__(self, color: Color, depth: int, workers: int = 1, name: Optional[str] = None):
        self.bot = MinimaxBot(color, depth, workers=workers)
        super().__init__(color, name or self.bot.name)

    @property
    def depth(self) -> int:
        return self.bot.depth

    def turn(self, board: Board) -> Optional[Field]:
        return self.bot.choose_move(board)
