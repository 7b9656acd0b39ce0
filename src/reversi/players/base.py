from abc import ABC, abstractmethod
from typing import Optional

from ..game import Board, Color, Field


class QuitGame(Exception):
    """Raised when a human asks to leave the game."""


class Player(ABC):
    """Something that picks a field for its color, or None to pass."""

    def __init__(self, color: Color, name: str):
        self.color = color
        self.name = name

    @abstractmethod
    def turn(self, board: Board) -> Optional[Field]:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.color.label}, {self.name!r})"
