#!/usr/bin/env python3
"""N-puzzle solver.

Usage::

    python main.py boards/puzzle04.txt        # solve a board file
    python main.py puzzle.txt -f rich         # Rich terminal output
    python main.py --random 3 --depth 20      # solve a random scramble
    python main.py puzzle.txt --check         # solvability verdict only
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from npuzzle.engine.generator import BoardGenerator  # noqa: E402
from npuzzle.engine.solver import Heuristic, SolverConfig  # noqa: E402
from npuzzle.io.boardfile import read_board  # noqa: E402
from npuzzle.models.exceptions import MalformedBoardError  # noqa: E402
from npuzzle.utils.logger import configure_logging, get_logger  # noqa: E402

LOGGER = get_logger("npuzzle.cli")


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "npuzzle.frontend.cli.vanilla.app",
    Frontend.rich: "npuzzle.frontend.cli.rich.app",
}


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    file: Optional[Path] = typer.Argument(
        None,
        exists=True, dir_okay=False, readable=True,
        help="Board file: size N followed by N*N tiles, 0 for the blank.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="How to print the solution.",
    ),
    heuristic: Heuristic = typer.Option(
        Heuristic.HAMMING, "--heuristic",
        help="Heuristic driving the search.",
    ),
    random_size: Optional[int] = typer.Option(
        None, "--random",
        min=2, max=8,
        help="Solve a random scramble of this size instead of a file.",
    ),
    depth: int = typer.Option(
        20, "--depth",
        min=0,
        help="Random slides applied by --random.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for --random.",
    ),
    check: bool = typer.Option(
        False, "--check",
        help="Only report whether the board is solvable.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress.",
    ),
) -> None:
    """Find a shortest solution of a sliding-tile puzzle."""
    configure_logging(logging.DEBUG if verbose else logging.WARNING)

    if (file is None) == (random_size is None):
        typer.echo("Give either a board FILE or --random SIZE.", err=True)
        raise typer.Exit(code=2)

    if file is not None:
        try:
            board = read_board(file)
        except MalformedBoardError as exc:
            typer.echo(f"Malformed board in {file}: {exc}", err=True)
            raise typer.Exit(code=2)
    else:
        board = BoardGenerator.generate(random_size, moves=depth, seed=seed)
        LOGGER.info("Generated %d×%d board with %d slides", random_size, random_size, depth)

    mod = importlib.import_module(_RUNNERS[frontend])
    if check:
        code = mod.check(board)
    else:
        code = mod.run(board, SolverConfig(heuristic=heuristic))
    raise typer.Exit(code=code)


if __name__ == "__main__":
    app()
