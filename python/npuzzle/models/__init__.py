from npuzzle.models.board import Board, Direction
from npuzzle.models.exceptions import (
    EmptyQueueError,
    InvalidInputError,
    MalformedBoardError,
    PuzzleError,
    SearchExhaustedError,
    UnsolvableError,
)

__all__ = [
    "Board",
    "Direction",
    "EmptyQueueError",
    "InvalidInputError",
    "MalformedBoardError",
    "PuzzleError",
    "SearchExhaustedError",
    "UnsolvableError",
]
