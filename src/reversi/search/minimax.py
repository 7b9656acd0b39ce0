"""
Depth-limited minimax search for the Reversi bot.

White always maximizes and Black always minimizes the same score, the
piece differential White minus Black. There is no pruning.
"""
import logging
import math
from enum import Enum
from multiprocessing import Pool
from typing import List, NamedTuple, Optional, Tuple

from ..game import Board, Color, Field, GameStatus

logger = logging.getLogger(__name__)

MAX_RECOMMENDED_DEPTH = 8


class Strategy(Enum):
    """The search role of a color. Fixed: White maximizes, Black minimizes."""

    MAXIMIZE = Color.WHITE
    MINIMIZE = Color.BLACK

    @classmethod
    def for_color(cls, color: Color) -> 'Strategy':
        return cls(color)

    @property
    def color(self) -> Color:
        return self.value

    def other(self) -> 'Strategy':
        return Strategy(self.value.other())

    @property
    def worst(self) -> float:
        """A value every real evaluation improves on."""
        return -math.inf if self is Strategy.MAXIMIZE else math.inf

    def prefers(self, value: float, best: float) -> bool:
        """Whether ``value`` replaces ``best``. Ties go to the later candidate."""
        if self is Strategy.MAXIMIZE:
            return value >= best
        return value <= best


class SearchResult(NamedTuple):
    field: Optional[Field]
    value: float


def evaluate(board: Board, status: Optional[GameStatus] = None) -> float:
    """
    Static evaluation: +inf/-inf for a White/Black win, else White minus Black.

    ``status`` may be passed when the caller already classified the board.
    """
    if status is None:
        status = board.status()
    if status == GameStatus.win(Color.WHITE):
        return math.inf
    if status == GameStatus.win(Color.BLACK):
        return -math.inf
    if status == GameStatus.DRAW:
        return 0
    return board.count_pieces(Color.WHITE) - board.count_pieces(Color.BLACK)


def minimax(board: Board, depth: int, strategy: Strategy) -> SearchResult:
    """
    Recursive minimax.

    Args:
        board: Position to search; never modified
        depth: Remaining plies
        strategy: Role of the side to move

    Returns:
        The best field (None at a leaf or when the side must pass) and its value
    """
    return _minimax(board, depth, strategy)[0]


def _minimax(board: Board, depth: int, strategy: Strategy) -> Tuple[SearchResult, int]:
    """minimax that also counts the nodes it visits."""
    status = board.status()
    if depth == 0 or status.is_over:
        return SearchResult(None, evaluate(board, status)), 1

    color = strategy.color
    best = SearchResult(None, strategy.worst)
    nodes = 1

    # A side without moves gets no iterations and keeps the worst value
    for field in board.valid_moves(color):
        child = board.copy()
        child.add_piece(field, color)
        result, child_nodes = _minimax(child, depth - 1, strategy.other())
        nodes += child_nodes
        if strategy.prefers(result.value, best.value):
            best = SearchResult(field, result.value)

    return best, nodes


def _search_branch(args: Tuple[Board, Field, int, Strategy]) -> Tuple[float, int]:
    """
    Worker used by the process pool: play one root move and search below it.
    Module level so it pickles.
    """
    board, field, depth, strategy = args
    child = board.copy()
    child.add_piece(field, strategy.color)
    result, nodes = _minimax(child, depth - 1, strategy.other())
    return result.value, nodes


class MinimaxBot:
    """
    Minimax search bound to one color and a fixed depth.
    """

    def __init__(self, color: Color, depth: int, workers: int = 1):
        """
        Initialize the bot.

        Args:
            color: The color the bot plays
            depth: Search depth in plies, at least 1
            workers: Processes used to search root moves (1 = sequential)
        """
        if depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {depth}")
        if workers < 1:
            raise ValueError(f"Worker count must be at least 1, got {workers}")
        if depth > MAX_RECOMMENDED_DEPTH:
            logger.warning("Search depth %d is above %d and may be very slow", depth, MAX_RECOMMENDED_DEPTH)

        self.color = color
        self.depth = depth
        self.workers = workers
        self.nodes_evaluated = 0

    @property
    def strategy(self) -> Strategy:
        return Strategy.for_color(self.color)

    def evaluate(self, board: Board) -> float:
        return evaluate(board)

    def minimax(self, board: Board, depth: int, strategy: Strategy) -> SearchResult:
        result, nodes = _minimax(board, depth, strategy)
        self.nodes_evaluated += nodes
        return result

    def choose_move(self, board: Board) -> Optional[Field]:
        """
        Pick a move for the bot's color.

        Returns:
            The chosen field, or None if the bot has to pass
        """
        self.nodes_evaluated = 0
        if self.workers > 1:
            result = self._root_search_parallel(board)
        else:
            result = self.minimax(board, self.depth, self.strategy)

        logger.debug(
            "%s chose %s (value %s, %d nodes)",
            self.name, result.field, result.value, self.nodes_evaluated,
        )
        return result.field

    def _root_search_parallel(self, board: Board) -> SearchResult:
        """
        Search the root moves in a process pool and fold the results in
        enumeration order, so the choice matches the sequential search.
        """
        strategy = self.strategy
        if board.status() != GameStatus.IN_PROGRESS:
            return self.minimax(board, 0, strategy)

        moves = board.valid_moves(strategy.color)
        if len(moves) <= 1:
            return self.minimax(board, self.depth, strategy)

        tasks = [(board, field, self.depth, strategy) for field in moves]
        with Pool(processes=min(self.workers, len(moves))) as pool:
            results: List[Tuple[float, int]] = pool.map(_search_branch, tasks)

        best = SearchResult(None, strategy.worst)
        self.nodes_evaluated += 1
        for field, (value, nodes) in zip(moves, results):
            self.nodes_evaluated += nodes
            if strategy.prefers(value, best.value):
                best = SearchResult(field, value)
        return best

    @property
    def name(self) -> str:
        return f"Minimax Bot (depth {self.depth})"
