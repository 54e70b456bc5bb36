# Exception types raised by the engine. Invalid user input is never an
# exception; it is reported as a rejected move or an empty legal set.
class TicTacChecError(Exception):
    """Base exception for engine errors."""

    pass


class InvariantViolation(TicTacChecError):
    """Raised when piece accounting is broken (engine defect)."""

    pass


class PositionError(TicTacChecError):
    """Raised when a starting position cannot be loaded."""

    pass
