"""Rich terminal front end — renders a board, solves it, and shows the moves."""

from __future__ import annotations

import sys
import time

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from slidecore.engine.gameplay import GamePlay
from slidecore.engine.gamesolver import Solver
from slidecore.engine.gamesolver.solver import BEST_FIRST_MAX_SIZE
from slidecore.engine.search import SearchResult
from slidecore.models.board import Board

console = Console()

_ARROWS = {"LEFT": "←", "RIGHT": "→", "UP": "↑", "DOWN": "↓"}


# -- board rendering ----------------------------------------------------------


def render_board(board: Board) -> Table:
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

    for r, row in enumerate(board.rows()):
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


def render_result(board: Board, result: SearchResult) -> Panel:
    """Summarise a search: the board, the move list, and the search counters."""
    stats = result.state

    summary = Text()
    summary.append("  Algorithm: ", style="dim")
    summary.append(result.algorithm, style="bold yellow")
    summary.append("    Expanded: ", style="dim")
    summary.append(f"{stats.expanded:,}", style="bold yellow")
    summary.append("    Time: ", style="dim")
    summary.append(f"{stats.elapsed_time:.2f}s", style="bold yellow")

    if result.moves is None:
        outcome = Text(f"No solution found ({stats.phase})", style="bold red")
    elif not result.moves:
        outcome = Text("Already solved!", style="bold green")
    else:
        outcome = Text()
        outcome.append(f"{len(result.moves)} moves: ", style="bold green")
        outcome.append(" ".join(_ARROWS[m.value] for m in result.moves), style="cyan")

    body = Group(
        Align.center(render_board(board)),
        Text(""),
        Align.center(summary),
        Align.center(outcome),
    )
    return Panel(
        body,
        title=f"[bold cyan]Sliding Puzzle  {board.size}×{board.size}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )


# -- solver helpers -----------------------------------------------------------


def _animate(board: Board, result: SearchResult, delay: float) -> None:
    game = GamePlay.from_board(board)
    moves = result.moves or []
    for i, direction in enumerate(moves):
        game.move(direction)
        console.clear()

        progress = Text()
        progress.append(f"  Solving… move {i + 1}/{len(moves)} ", style="bold cyan")
        progress.append(f"({direction.value})", style="dim")

        panel = Panel(
            Align.center(render_board(game.board)),
            title=f"[bold cyan]Auto-Solve  {game.size}×{game.size}[/bold cyan]",
            border_style="cyan",
            padding=(1, 2),
        )
        console.print()
        console.print(Align.center(panel))
        console.print(Align.center(progress))
        sys.stdout.flush()
        time.sleep(delay)


def run(
    board: Board,
    timeout: float | None = None,
    best_first_max_size: int = BEST_FIRST_MAX_SIZE,
    animate: bool = False,
    delay: float = 0.05,
) -> SearchResult:
    """Solve *board*, print the outcome, and return the search result."""
    with console.status("[cyan]Searching…[/cyan]"):
        result = Solver.search(board, timeout, best_first_max_size)

    if animate and result.moves:
        _animate(board, result, delay)

    console.print()
    console.print(Align.center(render_result(board, result)))
    return result
