"""Command-line entry point: solve the configured puzzle and print it."""

from __future__ import annotations

import logging
import sys

from edge_match.config import CFG
from edge_match.core.puzzles import PuzzleConfigError, default_tiles, load_puzzle
from edge_match.core.render import render_board
from edge_match.core.solver import Solver

logger = logging.getLogger("edge_match")


def main() -> int:
    """Solve the puzzle and print the board.

    Returns:
        0 when a solution was found, 1 when the search was exhausted and 2
        when the puzzle file is invalid.
    """
    logging.basicConfig(
        level=getattr(logging, CFG.LOG_LEVEL, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if CFG.PUZZLE_FILE:
            logger.info("Loading puzzle from %s", CFG.PUZZLE_FILE)
            tiles, size = load_puzzle(CFG.PUZZLE_FILE)
        else:
            tiles, size = default_tiles(), 3
        solver = Solver(tiles, size)
    except PuzzleConfigError as exc:
        logger.error("Invalid puzzle: %s", exc)
        return 2

    solved = solver.solve()
    if solved:
        logger.info("Solved after %d placements", solver.stats.placements)
    else:
        logger.warning("No arrangement of the %d tiles fits the board", len(tiles))
    print(render_board(solver.board, empty=CFG.EMPTY_MARKER))
    return 0 if solved else 1


if __name__ == "__main__":
    sys.exit(main())
