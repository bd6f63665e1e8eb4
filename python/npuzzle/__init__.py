"""Optimal N-puzzle solver.

The public API surface:

- ``npuzzle.models.Board``: immutable tile arrangement with heuristics,
  solvability and successor generation.
- ``npuzzle.engine.Solver``: A* search returning a shortest path.
- ``npuzzle.io``: the plain-text board format.
"""

from npuzzle.engine import BoardGenerator, Heuristic, Solver, SolverConfig
from npuzzle.models import Board, Direction

__all__ = [
    "Board",
    "BoardGenerator",
    "Direction",
    "Heuristic",
    "Solver",
    "SolverConfig",
]

__version__ = "0.1.0"
