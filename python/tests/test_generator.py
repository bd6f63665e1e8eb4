"""Board generator tests."""

from __future__ import annotations

import random

import pytest

from npuzzle.engine.generator import BoardGenerator
from npuzzle.models.board import Board


def test_solved_is_the_goal() -> None:
    assert BoardGenerator.solved(3) == Board([[1, 2, 3], [4, 5, 6], [7, 8, 0]])
    assert BoardGenerator.solved(4).is_goal()


@pytest.mark.parametrize("size", [2, 3, 4, 5])
def test_generated_boards_are_solvable_and_scrambled(size: int) -> None:
    for seed in range(5):
        board = BoardGenerator.generate(size, seed=seed)
        assert board.size == size
        assert board.is_solvable()
        assert not board.is_goal()


def test_generate_is_reproducible_for_a_seed() -> None:
    a = BoardGenerator.generate(4, moves=50, seed=123)
    b = BoardGenerator.generate(4, moves=50, seed=123)
    assert a == b


def test_zero_moves_returns_the_goal() -> None:
    assert BoardGenerator.generate(3, moves=0, seed=1).is_goal()


def test_scramble_never_undoes_the_previous_slide() -> None:
    rng = random.Random(9)
    board = BoardGenerator.solved(3)
    # Two slides without backtracking always leave the goal.
    for _ in range(20):
        assert not BoardGenerator.scramble(board, 2, rng).is_goal()


def test_scramble_stays_within_its_slide_budget() -> None:
    rng = random.Random(4)
    goal = BoardGenerator.solved(3)
    for moves in range(1, 8):
        board = BoardGenerator.scramble(goal, moves, rng)
        assert board.manhattan() <= moves
