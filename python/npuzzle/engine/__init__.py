from npuzzle.engine.generator import BoardGenerator
from npuzzle.engine.keyedmap import ProbeHashMap
from npuzzle.engine.pqueue import HeapAdaptablePriorityQueue, Locator
from npuzzle.engine.solver import (
    Heuristic,
    SearchStats,
    Solver,
    SolverConfig,
    SolverState,
)

__all__ = [
    "BoardGenerator",
    "HeapAdaptablePriorityQueue",
    "Heuristic",
    "Locator",
    "ProbeHashMap",
    "SearchStats",
    "Solver",
    "SolverConfig",
    "SolverState",
]
