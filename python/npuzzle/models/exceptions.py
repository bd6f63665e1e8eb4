"""Exception hierarchy for the puzzle solver."""


class PuzzleError(Exception):
    """Base exception for conditions a caller is expected to handle."""


class MalformedBoardError(PuzzleError):
    """Raised when a grid is not a square permutation of ``0..N²-1``."""


class InvalidInputError(PuzzleError):
    """Raised when the solver is handed something that is not a board."""


class UnsolvableError(PuzzleError):
    """Raised when the permutation parity rules out reaching the goal."""


class EmptyQueueError(RuntimeError):
    """Raised on priority-queue underflow."""


class SearchExhaustedError(RuntimeError):
    """Raised when the open set empties before the goal is reached."""
