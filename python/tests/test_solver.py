"""Solver test suite.

Optimal move counts are checked against an independent breadth-first
search over flat tile tuples. Every returned path is replayed slide by
slide through ``Board.move`` to verify it really reaches the goal.
"""

from __future__ import annotations

import itertools
from collections import deque

import pytest

from npuzzle.engine.generator import BoardGenerator
from npuzzle.engine.solver import Heuristic, Solver, SolverConfig, SolverState
from npuzzle.models.board import Board
from npuzzle.models.exceptions import InvalidInputError, UnsolvableError

EXAMPLE = [[8, 1, 3], [4, 0, 2], [7, 6, 5]]


# -- helpers ------------------------------------------------------------------


def _bfs_distance(board: Board) -> int:
    """Shortest distance to the goal, by plain BFS over flat tuples."""
    n = board.size
    start = tuple(v for row in board.tiles for v in row)
    goal = tuple(range(1, n * n)) + (0,)
    dist = {start: 0}
    queue = deque([start])
    while queue:
        state = queue.popleft()
        if state == goal:
            return dist[state]
        z = state.index(0)
        r, c = divmod(z, n)
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nr, nc = r + dr, c + dc
            if 0 <= nr < n and 0 <= nc < n:
                j = nr * n + nc
                nxt = list(state)
                nxt[z], nxt[j] = nxt[j], nxt[z]
                t = tuple(nxt)
                if t not in dist:
                    dist[t] = dist[state] + 1
                    queue.append(t)
    raise AssertionError("goal unreachable")


def _assert_path(solver: Solver, initial: Board) -> None:
    """The path starts at *initial*, ends at the goal, one slide per step."""
    path = solver.solution()
    assert len(path) == solver.moves() + 1
    assert path[0] == initial
    assert path[-1].is_goal()
    for before, after in zip(path, path[1:]):
        assert after in before.neighbors()

    # ---- replay the slides and check the goal is reached ---------------------
    board = initial
    for i, direction in enumerate(solver.directions()):
        moved = board.move(direction)
        assert moved is not None, f"Move {i} ({direction.value}) was invalid"
        board = moved
    assert board.is_goal()


# -- concrete scenarios -------------------------------------------------------


def test_goal_board_needs_no_moves() -> None:
    goal = Board([[1, 2, 3], [4, 5, 6], [7, 8, 0]])
    solver = Solver(goal)
    assert solver.state == SolverState.SOLVED
    assert solver.moves() == 0
    assert solver.solution() == [goal]
    assert solver.directions() == []


def test_unsolvable_board_is_rejected() -> None:
    with pytest.raises(UnsolvableError):
        Solver(Board([[1, 2, 3], [4, 5, 6], [8, 7, 0]]))


def test_example_board_is_solved_optimally() -> None:
    board = Board(EXAMPLE)
    solver = Solver(board)
    assert solver.moves() == _bfs_distance(board)
    _assert_path(solver, board)


@pytest.mark.parametrize("bad", [None, [[1, 2], [3, 0]], "board"], ids=["none", "list", "str"])
def test_invalid_input(bad: object) -> None:
    with pytest.raises(InvalidInputError):
        Solver(bad)  # type: ignore[arg-type]


def test_one_move_boards() -> None:
    goal = Board.goal(4)
    for nb in goal.neighbors():
        solver = Solver(nb)
        assert solver.moves() == 1
        assert solver.solution() == [nb, goal]


# -- search bookkeeping -------------------------------------------------------


def test_closed_boards_are_never_reopened() -> None:
    solver = Solver(Board(EXAMPLE))
    # Every discovery gets its own record; a rediscovery would overwrite an id.
    assert len(solver._nodes) == len(solver._ids)
    assert not any(board in solver.open for board in solver.closed)
    assert len(solver.closed) == solver.stats.expanded
    for board, cost in solver.closed.items():
        assert solver._nodes[solver._ids[board]].cost == cost


def test_solution_is_a_fresh_list() -> None:
    solver = Solver(Board(EXAMPLE))
    first = solver.solution()
    first.clear()
    second = solver.solution()
    assert len(second) == solver.moves() + 1
    assert second == solver.solution()


def test_stats_are_populated() -> None:
    solver = Solver(Board(EXAMPLE))
    assert solver.stats.expanded > 0
    assert solver.stats.generated >= solver.stats.expanded
    assert solver.stats.peak_open >= 1


def test_manhattan_agrees_with_hamming() -> None:
    board = Board(EXAMPLE)
    by_hamming = Solver(board)
    by_manhattan = Solver(board, SolverConfig(heuristic=Heuristic.MANHATTAN))
    assert by_manhattan.moves() == by_hamming.moves()
    _assert_path(by_manhattan, board)


def test_relaxed_boards_keep_the_shorter_path() -> None:
    board = BoardGenerator.generate(3, moves=20, seed=5)
    solver = Solver(board)
    assert solver.stats.relaxations > 0
    assert solver.moves() == _bfs_distance(board)
    _assert_path(solver, board)
    # Each record's cost is its depth along the stored parent chain.
    for record in solver._nodes:
        depth = 0
        parent = record.parent
        while parent is not None:
            depth += 1
            parent = solver._nodes[parent].parent
        assert record.cost == depth


def test_directions_fail_loudly_on_a_broken_path(monkeypatch: pytest.MonkeyPatch) -> None:
    solver = Solver(Board(EXAMPLE))
    monkeypatch.setattr(Board, "direction_to", lambda self, other: None)
    with pytest.raises(RuntimeError):
        solver.directions()


# -- configuration ------------------------------------------------------------


@pytest.mark.parametrize("log_every", [0, -1], ids=["zero", "negative"])
def test_log_every_must_be_positive(log_every: int) -> None:
    with pytest.raises(ValueError):
        SolverConfig(log_every=log_every)


def test_log_every_one_still_solves() -> None:
    board = Board(EXAMPLE)
    solver = Solver(board, SolverConfig(log_every=1))
    assert solver.moves() == _bfs_distance(board)


# -- random scrambles ---------------------------------------------------------


_SCRAMBLES_3x3 = [BoardGenerator.generate(3, moves=depth, seed=seed)
                  for depth, seed in ((4, 1), (8, 2), (12, 3), (16, 4), (20, 5), (30, 6))]


@pytest.mark.parametrize(
    "board", _SCRAMBLES_3x3, ids=[f"scramble_3x3_{i}" for i in range(len(_SCRAMBLES_3x3))]
)
def test_random_3x3_matches_bfs(board: Board) -> None:
    solver = Solver(board)
    assert solver.moves() == _bfs_distance(board)
    _assert_path(solver, board)


@pytest.mark.parametrize("seed", [10, 11, 12])
def test_random_4x4_short_scrambles(seed: int) -> None:
    board = BoardGenerator.generate(4, moves=10, seed=seed)
    solver = Solver(board, SolverConfig(heuristic=Heuristic.MANHATTAN))
    assert solver.moves() <= 10
    assert solver.moves() % 2 == 0  # blank parity: 10 slides from the goal
    _assert_path(solver, board)


def test_2x2_every_solvable_board() -> None:
    for perm in itertools.permutations(range(4)):
        board = Board.from_flat(2, list(perm))
        if not board.is_solvable():
            with pytest.raises(UnsolvableError):
                Solver(board)
            continue
        solver = Solver(board)
        assert solver.moves() == _bfs_distance(board)
        _assert_path(solver, board)
