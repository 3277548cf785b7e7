"""Turns a ``/solve`` request body into a board and the solver's answer into a payload."""

from __future__ import annotations

import logging
from typing import Any

from slidecore.engine.gamesolver import Solver
from slidecore.exceptions import InvalidBoardError, RequestError
from slidecore.models.board import Board

from slideapp.config import Settings

logger = logging.getLogger(__name__)

SUPPORTED_SIZES = (3, 4, 5)

MISSING_FIELDS = "board and size required"
UNSUPPORTED_SIZE = "Unsupported size"
INVALID_BOARD = "Invalid board"
NO_SOLUTION = "No solution found or timeout"


def parse_request(body: Any) -> Board:
    """Validate a request body and return the board it describes.

    Raises ``RequestError`` with the message the client should see.
    """
    if not isinstance(body, dict):
        raise RequestError(MISSING_FIELDS)

    board = body.get("board")
    size = body.get("size")
    if board is None or not size:
        raise RequestError(MISSING_FIELDS)

    if type(size) is not int or size not in SUPPORTED_SIZES:
        raise RequestError(UNSUPPORTED_SIZE)

    if not isinstance(board, list):
        raise RequestError(INVALID_BOARD)
    try:
        parsed = Board.from_grid(board, size)
    except InvalidBoardError:
        raise RequestError(INVALID_BOARD) from None
    if any(type(v) is not int for v in parsed.tiles):
        raise RequestError(INVALID_BOARD)
    if sorted(parsed.tiles) != list(range(size * size)):
        raise RequestError(INVALID_BOARD)

    return parsed


def handle_solve(body: Any, settings: Settings) -> tuple[dict, int]:
    """Return the JSON payload and HTTP status for one ``/solve`` call."""
    try:
        board = parse_request(body)
    except RequestError as e:
        logger.info("Rejected solve request: %s", e.message)
        return {"error": e.message}, e.status

    if board.is_solved():
        return {"solution": []}, 200

    result = Solver.search(
        board,
        timeout=settings.solver_timeout,
        best_first_max_size=settings.best_first_max_size,
    )
    stats = result.state
    if result.moves is None:
        logger.warning(
            "%s gave up on %dx%d board %s: %s after %.2fs",
            result.algorithm, board.size, board.size, board.key,
            stats.phase, stats.elapsed_time,
        )
        return {"error": NO_SOLUTION}, 400

    logger.info(
        "%s solved %dx%d board in %d moves (%d expansions, %.2fs)",
        result.algorithm, board.size, board.size, len(result.moves),
        stats.expanded, stats.elapsed_time,
    )
    return {"solution": [m.value for m in result.moves]}, 200
