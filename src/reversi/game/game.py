"""
Reversi game module.
Handles game flow and turn order on top of the board.
"""
import logging
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from .board import Board, GameStatus
from .errors import GameOverError
from .field import Color, Field

logger = logging.getLogger(__name__)


class ReversiGame:
    """
    Main game class for Reversi that manages the game state and flow.

    The turn is tracked explicitly: a pass leaves the piece count unchanged,
    so it cannot be derived from the board.
    """

    def __init__(self, board: Optional[Board] = None, first_player: Color = Color.WHITE):
        """
        Initialize a new Reversi game.

        Args:
            board: Starting position (default: the standard opening)
            first_player: Color to move first (default: White)
        """
        self.initial_board = board.copy() if board is not None else Board.new()
        self.board = self.initial_board.copy()
        self.first_player = first_player
        self.current_player = first_player
        self.move_history: List[Dict[str, Any]] = []
        self.passes_in_a_row = 0

    def reset(self) -> None:
        """Reset the game to its starting board and first player."""
        self.board = self.initial_board.copy()
        self.current_player = self.first_player
        self.move_history = []
        self.passes_in_a_row = 0

    def make_move(self, field: Field) -> List[Field]:
        """
        Play a field for the current player.

        Args:
            field: The field to place a piece on

        Returns:
            The captured fields

        Raises:
            GameOverError if the game has ended, otherwise any PlaceError
            from the board. The game is unchanged on error.
        """
        if self.is_game_over():
            raise GameOverError()

        player = self.current_player
        captured = self.board.add_piece(field, player)

        self.move_history.append({
            'player': player,
            'move': field,
            'captured': captured,
        })
        self.passes_in_a_row = 0
        self.current_player = player.other()

        logger.debug("%s plays %s capturing %d", player.label, field, len(captured))
        return captured

    def pass_turn(self) -> bool:
        """
        Pass for the current player.

        Returns:
            bool: True if the pass was made, False if the player has a legal move
        """
        if self.board.has_any_valid_move(self.current_player):
            return False

        self.move_history.append({
            'player': self.current_player,
            'move': None,
            'captured': [],
        })
        self.passes_in_a_row += 1
        logger.debug("%s passes", self.current_player.label)
        self.current_player = self.current_player.other()
        return True

    def get_valid_moves(self) -> List[Field]:
        """Get all valid moves for the current player."""
        return self.board.valid_moves(self.current_player)

    def get_status(self) -> GameStatus:
        return self.board.status()

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self.board.status().is_over

    def get_winner(self) -> Optional[Color]:
        """
        Get the winner of the game.

        Returns:
            The winning color, or None for a draw or an unfinished game
        """
        return self.board.status().winner

    def get_score(self) -> Tuple[int, int]:
        """
        Get the current score (black, white).

        Returns:
            Tuple of (black_score, white_score)
        """
        return self.board.count_pieces(Color.BLACK), self.board.count_pieces(Color.WHITE)

    def get_board_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            2D numpy array indexed [row, column]
        """
        return self.board.get_board_state()

    def get_current_player(self) -> Color:
        return self.current_player

    def get_move_history(self) -> List[Dict[str, Any]]:
        return self.move_history.copy()

    def copy(self) -> 'ReversiGame':
        """Create a deep copy of the game."""
        new_game = ReversiGame(self.board, self.first_player)
        new_game.initial_board = self.initial_board.copy()
        new_game.current_player = self.current_player
        new_game.move_history = [dict(entry, captured=list(entry['captured'])) for entry in self.move_history]
        new_game.passes_in_a_row = self.passes_in_a_row
        return new_game

    def __str__(self) -> str:
        """String representation of the game state."""
        black, white = self.get_score()
        lines = [str(self.board)]
        lines.append(f"Current player: {self.current_player.label}")
        lines.append(f"Score - Black: {black}, White: {white}")
        if self.passes_in_a_row:
            lines.append(f"Passes in a row: {self.passes_in_a_row}")

        status = self.get_status()
        if status.is_over:
            lines.append(f"Game over! {status}!")

        return "\n".join(lines)
