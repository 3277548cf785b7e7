#!/usr/bin/env python3
"""Sliding Puzzle Solver.

Usage::

    python main.py serve                      # HTTP service on $PORT (3000)
    python main.py solve 1 2 3 4 5 6 0 7 8    # solve a flat board
    python main.py solve --random -s 4        # solve a scrambled 4×4
"""

import math
import sys
from pathlib import Path
from typing import List, Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from slidecore.engine.gamegenerator import GameGenerator  # noqa: E402
from slidecore.exceptions import ConfigError, InvalidBoardError  # noqa: E402
from slidecore.models.board import Board  # noqa: E402

from slideapp.config import LOG_LEVELS, Settings  # noqa: E402
from slideapp.log import configure_logging  # noqa: E402


# -- helpers ------------------------------------------------------------------


def _load_settings(**overrides) -> Settings:
    try:
        settings = Settings.from_env()
    except ConfigError as e:
        typer.secho(f"Configuration error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(2)
    settings = settings.override(**overrides)
    if settings.log_level not in LOG_LEVELS:
        raise typer.BadParameter(f"Unknown log level {settings.log_level!r}.")
    return settings


def _board_from_args(
    tiles: Optional[List[int]], size: Optional[int], random: bool,
    scramble: Optional[int], seed: Optional[int],
) -> Board:
    if random:
        return GameGenerator.generate(size or 3, moves=scramble, seed=seed)
    if not tiles:
        raise typer.BadParameter("Give the tiles in row-major order or use --random.")
    if size is None:
        size = math.isqrt(len(tiles))
    try:
        board = Board.from_flat(size, tiles)
    except InvalidBoardError as e:
        raise typer.BadParameter(str(e))
    if sorted(board.tiles) != list(range(size * size)):
        raise typer.BadParameter(f"Tiles must be a permutation of 0..{size * size - 1}.")
    return board


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.command()
def serve(
    port: Optional[int] = typer.Option(
        None, "-p", "--port", help="Port to listen on (default $PORT or 3000).",
    ),
    host: Optional[str] = typer.Option(
        None, "--host", help="Interface to bind (default $HOST or 0.0.0.0).",
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="DEBUG, INFO, WARNING or ERROR.",
    ),
) -> None:
    """Run the HTTP solve service."""
    from slideapp.web import create_app

    settings = _load_settings(
        port=port, host=host, log_level=log_level.upper() if log_level else None,
    )
    configure_logging(settings.log_level)
    create_app(settings).run(host=settings.host, port=settings.port)


@app.command()
def solve(
    tiles: Optional[List[int]] = typer.Argument(
        None, help="Tiles in row-major order, 0 for the blank.",
    ),
    size: Optional[int] = typer.Option(
        None, "-s", "--size", min=2, max=8,
        help="Side length (inferred from the tile count when omitted).",
    ),
    random: bool = typer.Option(
        False, "--random", help="Solve a randomly scrambled board instead.",
    ),
    scramble: Optional[int] = typer.Option(
        None, "--scramble", min=0, help="Random moves used by --random.",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for --random."),
    timeout: Optional[float] = typer.Option(
        None, "-t", "--timeout", min=0, help="Give up after this many seconds (0 waits forever).",
    ),
    animate: bool = typer.Option(
        False, "--animate", help="Replay the solution on the board.",
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="DEBUG, INFO, WARNING or ERROR.",
    ),
) -> None:
    """Solve one board and print the moves."""
    from slideapp.cli.app import run

    settings = _load_settings(log_level=log_level.upper() if log_level else None)
    configure_logging(settings.log_level)
    board = _board_from_args(tiles, size, random, scramble, seed)

    result = run(
        board,
        timeout=timeout or None,
        best_first_max_size=settings.best_first_max_size,
        animate=animate,
    )
    if result.moves is None:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
