"""
Errors raised when a move or a field notation is rejected.
All of them are recoverable: callers re-prompt or pass.
"""


class PlaceError(ValueError):
    """Base class for every rejected placement."""

    message = "Invalid move"

    def __init__(self, message: str = None):
        super().__init__(message or self.message)


class OutOfBoundsError(PlaceError):
    message = "Field is out of bounds"


class OccupiedError(PlaceError):
    message = "Field is already occupied"


class CapturesNoneError(PlaceError):
    message = "Field captures no pieces"


class GameOverError(PlaceError):
    message = "The game is already over"


class NotationError(PlaceError):
    """Text that does not match the two character field notation."""

    message = "Invalid field notation"


class InvalidLengthError(NotationError):
    message = "Invalid length"


class InvalidLetterError(NotationError):
    message = "Invalid letter"


class InvalidNumberError(NotationError):
    message = "Invalid number"
