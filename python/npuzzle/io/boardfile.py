"""Reading and writing boards in the plain-text puzzle format.

The format is whitespace-separated integers: the board size ``N`` followed
by the ``N * N`` tile values in row-major order, ``0`` for the blank::

    3
    8 1 3
    4 0 2
    7 6 5
"""

from __future__ import annotations

from pathlib import Path

from npuzzle.models.board import Board
from npuzzle.models.exceptions import MalformedBoardError


def parse_board(text: str) -> Board:
    """Parse a board from its text representation."""
    tokens = text.split()
    if not tokens:
        raise MalformedBoardError("Board text is empty.")
    try:
        values = [int(tok) for tok in tokens]
    except ValueError as exc:
        raise MalformedBoardError(f"Board text contains a non-integer: {exc}") from exc

    size, flat = values[0], values[1:]
    if size < 2:
        raise MalformedBoardError(f"Board size must be at least 2, got {size}.")
    if len(flat) != size * size:
        raise MalformedBoardError(
            f"Expected {size * size} tiles after size {size}, got {len(flat)}."
        )
    return Board.from_flat(size, flat)


def read_board(path: Path) -> Board:
    return parse_board(Path(path).read_text())


def format_board(board: Board) -> str:
    width = len(str(board.size * board.size - 1))
    lines = [str(board.size)]
    for row in board.tiles:
        lines.append(" ".join(f"{v:>{width}}" for v in row))
    return "\n".join(lines) + "\n"


def write_board(path: Path, board: Board) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(format_board(board))
