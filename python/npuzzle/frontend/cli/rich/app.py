"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
solver as the vanilla CLI.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.columns import Columns
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from npuzzle.engine.solver import Solver, SolverConfig
from npuzzle.models.board import Board
from npuzzle.models.exceptions import UnsolvableError

console = Console()


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _board_panel(board: Board, title: str) -> Panel:
    return Panel(
        Align.center(_render_board(board)),
        title=title,
        border_style="bright_blue",
        padding=(0, 1),
        expand=False,
    )


def _draw_unsolvable(board: Board) -> None:
    message = Text()
    message.append("This puzzle is unsolvable", style="bold red")
    message.append(f"  (inversions: {board.inversions})", style="dim")
    size = board.size
    console.print(
        Panel(
            Group(Align.center(_render_board(board)), Align.center(message)),
            title=f"[bold red]Sliding Puzzle  {size}×{size}[/bold red]",
            border_style="red",
            padding=(1, 2),
        )
    )


# -- public entry points ------------------------------------------------------


def check(board: Board) -> int:
    """Print the solvability verdict; return the process exit code."""
    if not board.is_solvable():
        _draw_unsolvable(board)
        return 1
    size = board.size
    verdict = Text()
    verdict.append("Solvable", style="bold green")
    verdict.append(f"  (inversions: {board.inversions})", style="dim")
    console.print(
        Panel(
            Group(Align.center(_render_board(board)), Align.center(verdict)),
            title=f"[bold green]Sliding Puzzle  {size}×{size}[/bold green]",
            border_style="bold green",
            padding=(1, 2),
        )
    )
    return 0


def run(board: Board, config: SolverConfig) -> int:
    """Solve *board* and render the path; return the process exit code."""
    try:
        with console.status("[bold cyan]Solving…[/bold cyan]"):
            solver = Solver(board, config)
    except UnsolvableError:
        _draw_unsolvable(board)
        return 1

    stats = Table(box=rich.box.ROUNDED, border_style="dim", show_header=False)
    stats.add_column(style="dim")
    stats.add_column(justify="right", style="bold yellow")
    stats.add_row("Moves", str(solver.moves()))
    stats.add_row("Heuristic", config.heuristic.value)
    stats.add_row("Expanded", str(solver.stats.expanded))
    stats.add_row("Generated", str(solver.stats.generated))
    stats.add_row("Peak open", str(solver.stats.peak_open))

    panels: list[Panel] = []
    directions = [None, *solver.directions()]
    for i, (step, direction) in enumerate(zip(solver.solution(), directions)):
        label = "start" if direction is None else direction.value
        panels.append(_board_panel(step, f"[cyan]{i}[/cyan] [dim]{label}[/dim]"))

    size = board.size
    console.print(
        Panel(
            Align.center(stats),
            title=f"[bold green]Solved  {size}×{size}[/bold green]",
            border_style="bold green",
            padding=(1, 2),
        )
    )
    console.print(Columns(panels))
    return 0
