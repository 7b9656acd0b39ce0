"""
Arena for running matches between minimax bots of different depths.
"""
import logging
from dataclasses import dataclass
from typing import Dict, Optional

from tqdm import tqdm

from .game import Color, GameStatus
from .logger import Logger
from .play import run_game
from .players import BotPlayer

logger = logging.getLogger(__name__)


@dataclass
class ArenaEntrant:
    """A named bot configuration."""
    name: str
    depth: int
    workers: int = 1

    def make_player(self, color: Color) -> BotPlayer:
        return BotPlayer(color, self.depth, workers=self.workers, name=self.name)


class Arena:
    """Plays games between two entrants, alternating who plays White."""

    def __init__(self, entrant_a: ArenaEntrant, entrant_b: ArenaEntrant,
                 metrics: Optional[Logger] = None):
        if entrant_a.name == entrant_b.name:
            raise ValueError(f"Entrants need distinct names, both are {entrant_a.name!r}")
        self.entrant_a = entrant_a
        self.entrant_b = entrant_b
        self.metrics = metrics

    def play_game(self, white: ArenaEntrant, black: ArenaEntrant) -> GameStatus:
        """
        Play a single game.

        Returns:
            The final status of the board
        """
        players = {
            Color.WHITE: white.make_player(Color.WHITE),
            Color.BLACK: black.make_player(Color.BLACK),
        }
        return run_game(players)

    def run_match(self, rounds: int = 2, progress: bool = True) -> Dict[str, int]:
        """
        Play ``rounds`` games. Entrant A plays White in even rounds.

        Returns:
            Wins per entrant name plus the number of draws
        """
        if rounds < 1:
            raise ValueError("Need at least 1 round")

        tally = {self.entrant_a.name: 0, self.entrant_b.name: 0, 'draws': 0}

        for round_num in tqdm(range(rounds), desc="Arena", disable=not progress):
            if round_num % 2 == 0:
                white, black = self.entrant_a, self.entrant_b
            else:
                white, black = self.entrant_b, self.entrant_a

            status = self.play_game(white, black)
            if status.winner is Color.WHITE:
                tally[white.name] += 1
            elif status.winner is Color.BLACK:
                tally[black.name] += 1
            else:
                tally['draws'] += 1

            if self.metrics is not None:
                self.metrics.log_metrics({
                    'white': white.name,
                    'black': black.name,
                    'result': str(status),
                }, round_num + 1, prefix='arena/')

        logger.info("Match result: %s", tally)
        return tally
