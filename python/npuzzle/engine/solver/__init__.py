from npuzzle.engine.solver.astar import (
    Heuristic,
    SearchStats,
    Solver,
    SolverConfig,
    SolverState,
)

__all__ = ["Heuristic", "SearchStats", "Solver", "SolverConfig", "SolverState"]
