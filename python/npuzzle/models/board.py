"""Board model for the N-puzzle."""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum

from npuzzle.models.exceptions import MalformedBoardError


class Direction(StrEnum):
    """Direction a *tile* slides into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# Offset from the blank to the tile that slides, keyed by the slide
# direction. Iteration order is the neighbour order: the tile right of the
# blank, then left, above, below.
_SLIDES: dict[Direction, tuple[int, int]] = {
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
    Direction.DOWN: (-1, 0),
    Direction.UP: (1, 0),
}


def _count_inversions(values: list[int]) -> int:
    """Count pairs ``i < j`` with ``values[i] > values[j]`` (merge sort)."""
    return _merge_count(values)[1]


def _merge_count(values: list[int]) -> tuple[list[int], int]:
    if len(values) < 2:
        return values, 0
    mid = len(values) // 2
    left, count_left = _merge_count(values[:mid])
    right, count_right = _merge_count(values[mid:])
    merged: list[int] = []
    count = count_left + count_right
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            # Every remaining left element is larger than right[j].
            merged.append(right[j])
            count += len(left) - i
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, count


class Board:
    """Immutable arrangement of tiles on an N×N grid.

    Tiles are stored as a tuple of row tuples. 0 represents the blank.
    Equality and hashing use the full grid; the cached heuristic values
    never take part in a board's identity.
    """

    __slots__ = (
        "size",
        "tiles",
        "blank_pos",
        "inversions",
        "_flat",
        "_hamming",
        "_manhattan",
        "_solvable",
        "_hash",
    )

    def __init__(self, tiles: Sequence[Sequence[int]]) -> None:
        try:
            rows = [list(row) for row in tiles]
        except TypeError as exc:
            raise MalformedBoardError("Board must be a sequence of rows.") from exc
        n = len(rows)
        if n < 2:
            raise MalformedBoardError(f"A board needs at least 2 rows, got {n}.")
        for r, row in enumerate(rows):
            if len(row) != n:
                raise MalformedBoardError(
                    f"Row {r} has {len(row)} tiles; expected {n} for a {n}×{n} board."
                )

        flat = [v for row in rows for v in row]
        for v in flat:
            if isinstance(v, bool) or not isinstance(v, int):
                raise MalformedBoardError(f"Tile values must be integers, got {v!r}.")
        if sorted(flat) != list(range(n * n)):
            raise MalformedBoardError(
                f"Tiles of a {n}×{n} board must be a permutation of 0..{n * n - 1}."
            )

        self._setup(rows)

    def _setup(self, rows: list[list[int]]) -> None:
        n = len(rows)
        flat = [v for row in rows for v in row]
        self.size = n
        self.tiles: tuple[tuple[int, ...], ...] = tuple(tuple(row) for row in rows)
        self._flat = tuple(flat)
        self._manhattan: int | None = None
        self._hash = hash((n, self._flat))

        hamming = 0
        blank_pos = (0, 0)
        for r in range(n):
            for c in range(n):
                v = rows[r][c]
                if v == 0:
                    blank_pos = (r, c)
                elif (v - 1) // n != r or (v - 1) % n != c:
                    hamming += 1
        self.blank_pos = blank_pos
        self._hamming = hamming

        self.inversions = _count_inversions([v for v in flat if v != 0])
        if n % 2 == 1:
            self._solvable = self.inversions % 2 == 0
        else:
            self._solvable = (self.inversions + blank_pos[0]) % 2 == 1

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: Sequence[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if len(flat) != size * size:
            raise MalformedBoardError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        return cls([flat[r * size : (r + 1) * size] for r in range(size)])

    @classmethod
    def _trusted(cls, rows: list[list[int]]) -> Board:
        """Build a board from rows already known to be a valid permutation."""
        obj = object.__new__(cls)
        obj._setup(rows)
        return obj

    @classmethod
    def goal(cls, size: int) -> Board:
        """Return the goal board (tiles ascending, blank bottom-right)."""
        return cls.from_flat(size, list(range(1, size * size)) + [0])

    # -- heuristics -----------------------------------------------------------

    def hamming(self) -> int:
        """Number of non-blank tiles outside their goal cell."""
        return self._hamming

    def manhattan(self) -> int:
        """Sum of the grid distances of every non-blank tile to its goal cell."""
        if self._manhattan is None:
            n = self.size
            total = 0
            for r, row in enumerate(self.tiles):
                for c, v in enumerate(row):
                    if v == 0:
                        continue
                    total += abs(r - (v - 1) // n) + abs(c - (v - 1) % n)
            self._manhattan = total
        return self._manhattan

    # -- queries --------------------------------------------------------------

    def is_goal(self) -> bool:
        return self._hamming == 0

    def is_solvable(self) -> bool:
        """Check whether the goal is reachable from this arrangement.

        Odd-sized boards are solvable iff the inversion count is even.
        Even-sized boards are solvable iff the inversion count plus the
        blank's row (counted from the top, 0-based) is odd.
        """
        return self._solvable

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.tiles[row][col]
        if val == 0:
            return row == self.size - 1 and col == self.size - 1
        return row == (val - 1) // self.size and col == (val - 1) % self.size

    def to_lists(self) -> list[list[int]]:
        return [list(row) for row in self.tiles]

    # -- successors -----------------------------------------------------------

    def move(self, direction: Direction) -> Board | None:
        """Return the board after sliding a tile in *direction*.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns ``None`` when there is no tile on that side of the blank.
        """
        br, bc = self.blank_pos
        dr, dc = _SLIDES[direction]
        tr, tc = br + dr, bc + dc
        if not (0 <= tr < self.size and 0 <= tc < self.size):
            return None

        rows = self.to_lists()
        rows[br][bc], rows[tr][tc] = rows[tr][tc], 0
        return Board._trusted(rows)

    def neighbors(self) -> list[Board]:
        """Return every board one slide away, in a fixed order."""
        result: list[Board] = []
        for direction in _SLIDES:
            board = self.move(direction)
            if board is not None:
                result.append(board)
        return result

    def direction_to(self, other: Board) -> Direction | None:
        """Return the slide that turns this board into *other*, if any."""
        for direction in _SLIDES:
            if self.move(direction) == other:
                return direction
        return None

    # -- identity -------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and self._flat == other._flat

    def __hash__(self) -> int:
        return self._hash

    def __repr__(self) -> str:
        return f"Board({self.to_lists()!r})"

    def __str__(self) -> str:
        width = len(str(self.size * self.size - 1))
        return "\n".join(
            "  ".join(f"{v:>{width}}" for v in row) for row in self.tiles
        )
