"""Generates solvable N-puzzle boards."""

from __future__ import annotations

import random

from npuzzle.models.board import Board


class BoardGenerator:
    """Creates solvable puzzles by random-walking from the goal board."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.goal(size)

    @staticmethod
    def scramble(board: Board, moves: int, rng: random.Random) -> Board:
        """Return *board* after *moves* random slides.

        A slide never immediately undoes the previous one, and every slide
        keeps the board in the same solvability class as *board*.
        """
        previous: Board | None = None
        for _ in range(moves):
            neighbors = board.neighbors()
            if previous in neighbors and len(neighbors) > 1:
                neighbors.remove(previous)
            previous, board = board, rng.choice(neighbors)
        return board

    @staticmethod
    def generate(size: int, moves: int | None = None, seed: int | None = None) -> Board:
        """Return a random *solvable* board of the given size.

        ``moves`` defaults to ``size * size * 100`` slides. The result is
        never the goal board when ``moves`` is positive, and is reproducible
        for a given ``seed``.
        """
        if moves is None:
            moves = size * size * 100
        rng = random.Random(seed)
        goal = BoardGenerator.solved(size)

        board = BoardGenerator.scramble(goal, moves, rng)
        # Ensure the board is not already solved; a 2×2 walk cycles back to
        # the goal every 12 slides.
        if moves > 0 and board.is_goal():
            board = BoardGenerator.scramble(board, 1, rng)
        return board
