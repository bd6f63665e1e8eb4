"""Vanilla terminal frontend — no third-party dependencies.

Prints the optimal move count and every board along the solution using
plain ``print`` and ANSI colours.
"""

from __future__ import annotations

from npuzzle.engine.solver import Solver, SolverConfig
from npuzzle.models.board import Board
from npuzzle.models.exceptions import UnsolvableError


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_RED = "\033[31;1m"  # bold red
_DIM = "\033[2m"     # dim
_R = "\033[0m"       # reset


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> str:
    """Return an ANSI-coloured text representation of the board."""
    width = len(str(board.size * board.size - 1))  # widest number
    cell_w = width + 2  # padding
    sep = "+" + (("-" * cell_w + "+") * board.size)

    lines: list[str] = [sep]
    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append(f"{_DIM} {'·':>{width}} {_R}")
            elif board.is_tile_correct(r, c):
                cells.append(f"{_G} {val:>{width}} {_R}")
            else:
                cells.append(f" {val:>{width}} ")
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


# -- public entry points ------------------------------------------------------


def check(board: Board) -> int:
    """Print the solvability verdict; return the process exit code."""
    print(_render_board(board))
    if board.is_solvable():
        print(f"  {_G}Solvable{_R}  {_DIM}(inversions: {board.inversions}){_R}")
        return 0
    print(f"  {_RED}This puzzle is unsolvable{_R}  {_DIM}(inversions: {board.inversions}){_R}")
    return 1


def run(board: Board, config: SolverConfig) -> int:
    """Solve *board* and print the path; return the process exit code."""
    try:
        solver = Solver(board, config)
    except UnsolvableError:
        print(_render_board(board))
        print(f"  {_RED}This puzzle is unsolvable{_R}")
        return 1

    print(f"  {_C}Puzzle solved in optimal {solver.moves()} steps{_R}")
    print(
        f"  {_DIM}expanded {solver.stats.expanded} boards, "
        f"generated {solver.stats.generated}{_R}"
    )
    print()
    directions = [None, *solver.directions()]
    for i, (step, direction) in enumerate(zip(solver.solution(), directions)):
        label = "start" if direction is None else f"slide {direction.value}"
        print(f"  {_Y}Step {i}{_R}  {_DIM}({label}){_R}")
        print(_render_board(step))
        print()
    return 0
