"""
Command-line entry point: play Reversi against another player or the bot,
or let two bots play each other.
"""
import argparse
import logging
import os
import sys
from typing import List, Optional

from .arena import Arena, ArenaEntrant
from .config import Config, get_default_config
from .display import DisplayOptions, redraw_board
from .game import Color, GameStatus, ReversiGame
from .logger import Logger, setup_logger
from .play import run_game
from .players import BotPlayer, HumanPlayer, QuitGame

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='reversi',
        description='Play the Reversi game against another player or the computer.')

    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument('-p', '--player', action='store_true',
                      help='Play against another player')
    mode.add_argument('-b', '--bot', action='store_true',
                      help='Play against a bot')
    mode.add_argument('-a', '--arena', action='store_true',
                      help='Watch two bots play each other')

    parser.add_argument('--config', type=str, default=None,
                        help='Path to a JSON config file')
    parser.add_argument('--depth', type=int, default=None,
                        help='Bot search depth (recommended 1-8)')
    parser.add_argument('--workers', type=int, default=None,
                        help='Processes used by the bot to search root moves')
    parser.add_argument('--color', choices=['white', 'black'], default='white',
                        help='Your color when playing against the bot (White moves first)')
    parser.add_argument('--rounds', type=int, default=None,
                        help='Number of arena games')
    parser.add_argument('--log-level', type=str, default=None,
                        help='Logging level (DEBUG, INFO, WARNING, ...)')
    parser.add_argument('--no-clear', action='store_true',
                        help='Do not clear the screen between moves')
    return parser


def load_config(args: argparse.Namespace) -> Config:
    """Load the config file, if any, and apply command line overrides."""
    if args.config is not None:
        if not os.path.exists(args.config):
            raise FileNotFoundError(f"Config file {args.config} not found")
        config = Config.load(args.config)
    else:
        config = get_default_config()

    if args.depth is not None:
        config.search.depth = args.depth
    if args.workers is not None:
        config.search.workers = args.workers
    if args.rounds is not None:
        config.arena.rounds = args.rounds
    if args.log_level is not None:
        config.logging.log_level = args.log_level
    if args.no_clear:
        config.display.clear_screen = False

    return config.validate()


def _display_options(config: Config) -> DisplayOptions:
    return DisplayOptions(
        clear_screen=config.display.clear_screen,
        empty_lines=config.display.empty_lines,
    )


def _show_result(game: ReversiGame, status: GameStatus, display: DisplayOptions) -> None:
    """Draw the final position with the pieces grouped by colour, then the result."""
    black, white = game.get_score()
    redraw_board(game.board.sorted(), display)
    print(f"Game over: {status} (Black {black}, White {white})")


def _run_human_vs_human(config: Config) -> None:
    display = _display_options(config)
    players = {
        Color.WHITE: HumanPlayer(Color.WHITE, "Player 1", display=display,
                                 highlight=config.display.show_valid_moves),
        Color.BLACK: HumanPlayer(Color.BLACK, "Player 2", display=display,
                                 highlight=config.display.show_valid_moves),
    }
    game = ReversiGame()
    status = run_game(players, game)
    _show_result(game, status, display)


def _run_human_vs_bot(config: Config, human_color: Color) -> None:
    display = _display_options(config)
    players = {
        human_color: HumanPlayer(human_color, "You", display=display,
                                 highlight=config.display.show_valid_moves),
        human_color.other(): BotPlayer(human_color.other(), config.search.depth,
                                       workers=config.search.workers),
    }
    game = ReversiGame()
    status = run_game(players, game)
    _show_result(game, status, display)


def _run_arena(config: Config, metrics: Logger) -> None:
    arena = Arena(
        ArenaEntrant(f"A (depth {config.arena.depth_a})", config.arena.depth_a, config.search.workers),
        ArenaEntrant(f"B (depth {config.arena.depth_b})", config.arena.depth_b, config.search.workers),
        metrics=metrics,
    )
    tally = arena.run_match(config.arena.rounds)
    print("Arena results:")
    for name, count in tally.items():
        print(f"  {name:10s} {count:4d}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args)
    except (OSError, TypeError, ValueError) as exc:
        logging.basicConfig(level=logging.ERROR)
        logger.error("Invalid configuration: %s", exc)
        return 1

    metrics = setup_logger(config)
    try:
        if args.player:
            _run_human_vs_human(config)
        elif args.bot:
            _run_human_vs_bot(config, Color[args.color.upper()])
        else:
            _run_arena(config, metrics)
    except (QuitGame, KeyboardInterrupt):
        print("\nThanks for playing!")
        return 130
    finally:
        metrics.close()

    return 0


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    sys.exit(main())
