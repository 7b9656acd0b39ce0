"""
The game loop: alternates the two players until the board is decided.
"""
import logging
from typing import Callable, Mapping, Optional

from .display import DisplayOptions, redraw_board
from .game import Color, GameStatus, ReversiGame
from .players import Player

logger = logging.getLogger(__name__)


def run_game(players: Mapping[Color, Player], game: Optional[ReversiGame] = None,
             display: Optional[DisplayOptions] = None,
             output: Callable[[str], None] = print) -> GameStatus:
    """
    Play a game to the end.

    Args:
        players: The player for each color
        game: Game to continue (default: a new game)
        display: Redraw the board after every move when given
        output: Where rendered boards and results go

    Returns:
        The final status of the board
    """
    game = game or ReversiGame()

    while not game.is_game_over():
        player = players[game.current_player]
        field = player.turn(game.board)

        if field is None:
            if not game.pass_turn():
                raise RuntimeError(f"{player.name} passed while having legal moves")
            logger.info("%s (%s) passes", player.name, player.color.label)
            continue

        captured = game.make_move(field)
        logger.info(
            "%s (%s) plays %s, captures %s",
            player.name, player.color.label, field, " ".join(str(f) for f in captured),
        )

        if display is not None:
            redraw_board(game.board, display, output)

    status = game.get_status()
    black, white = game.get_score()
    logger.info("Game over: %s (Black %d, White %d)", status, black, white)
    return status
