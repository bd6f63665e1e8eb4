"""A* solver for the N-puzzle.

The search runs to completion inside ``Solver.__init__``. Boards stay pure
values; everything the search learns about a board (its best path cost
and the board it was reached from) lives in a discovery record held in
the solver's arena and addressed by an integer id.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Callable, Optional

from npuzzle.engine.keyedmap import ProbeHashMap
from npuzzle.engine.pqueue import HeapAdaptablePriorityQueue, Locator
from npuzzle.models.board import Board, Direction
from npuzzle.models.exceptions import (
    InvalidInputError,
    SearchExhaustedError,
    UnsolvableError,
)
from npuzzle.utils.logger import get_logger

LOGGER = get_logger(__name__)


class Heuristic(StrEnum):
    HAMMING = "hamming"
    MANHATTAN = "manhattan"


class SolverState(StrEnum):
    RUNNING = "running"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"


_HEURISTICS: dict[Heuristic, Callable[[Board], int]] = {
    Heuristic.HAMMING: Board.hamming,
    Heuristic.MANHATTAN: Board.manhattan,
}


@dataclass(frozen=True)
class SolverConfig:
    """Tunable parameters of one search."""

    heuristic: Heuristic = Heuristic.HAMMING
    log_every: int = 10_000  # expansions between DEBUG progress lines

    def __post_init__(self) -> None:
        if self.log_every < 1:
            raise ValueError(f"log_every must be at least 1, got {self.log_every}.")


@dataclass
class SearchStats:
    expanded: int = 0
    generated: int = 0
    relaxations: int = 0
    peak_open: int = 0


@dataclass
class _Discovery:
    board: Board
    cost: int
    parent: Optional[int]


class Solver:
    """Finds a shortest slide sequence from *initial* to the goal board."""

    def __init__(self, initial: Board, config: SolverConfig | None = None) -> None:
        if initial is None:
            raise InvalidInputError("Given board is None.")
        if not isinstance(initial, Board):
            raise InvalidInputError(
                f"Expected a Board, got {type(initial).__name__}."
            )
        if not initial.is_solvable():
            raise UnsolvableError("Given board is unsolvable.")

        self.initial = initial
        self.config = config or SolverConfig()
        self.stats = SearchStats()
        self.state = SolverState.RUNNING
        self._heuristic = _HEURISTICS[self.config.heuristic]
        self._nodes: list[_Discovery] = []
        self._ids: ProbeHashMap[Board, int] = ProbeHashMap()
        self.open: ProbeHashMap[Board, int] = ProbeHashMap()
        self.closed: ProbeHashMap[Board, int] = ProbeHashMap()
        self._goal_id: int = -1
        self._moves: int = -1

        self._search()

    # -- search ---------------------------------------------------------------

    def _discover(self, board: Board, cost: int, parent: Optional[int]) -> int:
        node_id = len(self._nodes)
        self._nodes.append(_Discovery(board, cost, parent))
        self._ids[board] = node_id
        return node_id

    def _search(self) -> None:
        h = self._heuristic
        stats = self.stats
        queue: HeapAdaptablePriorityQueue[int, Board] = HeapAdaptablePriorityQueue()
        open_locators: ProbeHashMap[Board, Locator[int, Board]] = ProbeHashMap()
        open_costs = self.open
        closed = self.closed

        LOGGER.info(
            "Solving %d×%d board (heuristic=%s, h0=%d)",
            self.initial.size,
            self.initial.size,
            self.config.heuristic.value,
            h(self.initial),
        )

        self._discover(self.initial, 0, None)
        open_locators[self.initial] = queue.insert(h(self.initial), self.initial)
        open_costs[self.initial] = 0

        while not queue.is_empty():
            stats.peak_open = max(stats.peak_open, len(queue))
            _, current = queue.remove_min()
            current_id = self._ids[current]
            record = self._nodes[current_id]
            steps = record.cost

            if current.is_goal():
                self._moves = steps
                self._goal_id = current_id
                self.state = SolverState.SOLVED
                LOGGER.info(
                    "Solved in %d moves (expanded=%d, generated=%d)",
                    steps,
                    stats.expanded,
                    stats.generated,
                )
                return

            del open_costs[current]
            del open_locators[current]
            closed[current] = steps
            stats.expanded += 1
            if stats.expanded % self.config.log_every == 0:
                LOGGER.debug(
                    "expanded=%d open=%d closed=%d g=%d",
                    stats.expanded,
                    len(queue),
                    len(closed),
                    steps,
                )

            parent = (
                self._nodes[record.parent].board if record.parent is not None else None
            )
            for neighbor in current.neighbors():
                stats.generated += 1
                if neighbor == parent or neighbor in closed:
                    continue

                cost = steps + 1
                known = open_costs.get(neighbor)
                if known is not None:
                    # Path relaxation.
                    if cost < known:
                        queue.replace_key(open_locators[neighbor], cost + h(neighbor))
                        open_costs[neighbor] = cost
                        entry = self._nodes[self._ids[neighbor]]
                        entry.cost = cost
                        entry.parent = current_id
                        stats.relaxations += 1
                else:
                    self._discover(neighbor, cost, current_id)
                    open_locators[neighbor] = queue.insert(cost + h(neighbor), neighbor)
                    open_costs[neighbor] = cost

        self.state = SolverState.EXHAUSTED
        raise SearchExhaustedError(
            "Open set exhausted before reaching the goal from a solvable board."
        )

    # -- results --------------------------------------------------------------

    def moves(self) -> int:
        """Minimum number of moves to solve the initial board."""
        return self._moves

    def solution(self) -> list[Board]:
        """Boards of a shortest solution, initial to goal inclusive."""
        path: list[Board] = []
        node_id: Optional[int] = self._goal_id
        while node_id is not None:
            record = self._nodes[node_id]
            path.append(record.board)
            node_id = record.parent
        path.reverse()
        return path

    def directions(self) -> list[Direction]:
        """Slides of a shortest solution, in order."""
        path = self.solution()
        moves: list[Direction] = []
        for before, after in zip(path, path[1:]):
            direction = before.direction_to(after)
            if direction is None:
                raise RuntimeError("Consecutive solution boards are not neighbours.")
            moves.append(direction)
        return moves
