"""Backtracking search that lays every tile on the board.

The solver walks the grid in row-major order. For each cell it tries every
unused tile in each of its four orientations, keeps a placement only if it
fits the neighbours already on the board, and backtracks when a cell cannot
be filled. The first complete arrangement found is kept.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from math import isqrt

import numpy as np
from numpy.typing import NDArray

from edge_match.core.board import Board
from edge_match.core.puzzles import PuzzleConfigError
from edge_match.core.tiles import Tile

logger = logging.getLogger(__name__)


@dataclass
class SearchStats:
    """Counters collected during one ``solve`` call.

    Attributes:
        placements: Candidate (tile, orientation) pairs put on the board.
        checks: Adjacency checks run against at least one filled neighbour.
        backtracks: Tiles abandoned at a cell after all four orientations
            failed.
    """

    placements: int = 0
    checks: int = 0
    backtracks: int = 0


class Solver:
    """Edge-matching puzzle solver over a fixed tile inventory.

    The inventory is copied on construction so the caller's tiles are never
    rotated. Usage flags live in a boolean array parallel to the inventory.

    Args:
        tiles: The tiles to place, one per cell.
        size: Board side length. Inferred from ``len(tiles)`` when omitted.

    Raises:
        PuzzleConfigError: If the inventory is empty, holds something other
            than tiles, or does not have exactly ``size ** 2`` tiles.
    """

    def __init__(self, tiles: Sequence[Tile], size: int | None = None) -> None:
        if not tiles:
            raise PuzzleConfigError("Tile inventory is empty")
        for i, tile in enumerate(tiles):
            if not isinstance(tile, Tile):
                raise PuzzleConfigError(f"Inventory item {i} is not a Tile: {tile!r}")
        if size is None:
            size = isqrt(len(tiles))
        if size < 1 or size * size != len(tiles):
            raise PuzzleConfigError(
                f"A {size}x{size} board needs {size * size} tiles, got {len(tiles)}"
            )

        self.size = size
        self.board = Board(size)
        self.stats = SearchStats()
        self.solved: bool | None = None
        self._tiles: list[Tile] = [tile.copy() for tile in tiles]
        self._used: NDArray[np.bool_] = np.zeros(len(tiles), dtype=np.bool_)
        # Quarter turns applied to each inventory tile since construction.
        self._turns: NDArray[np.int64] = np.zeros(len(tiles), dtype=np.int64)
        self._origin: NDArray[np.int64] = np.full((size, size), -1, dtype=np.int64)
        self._placed_turns: NDArray[np.int64] = np.full((size, size), -1, dtype=np.int64)

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    @property
    def tiles(self) -> list[Tile]:
        """The inventory tiles in their current stored orientation."""
        return list(self._tiles)

    @property
    def used(self) -> NDArray[np.bool_]:
        """A copy of the per-tile usage flags."""
        return self._used.copy()

    def assignment(self) -> tuple[NDArray[np.int64], NDArray[np.int64]]:
        """Return which inventory tile sits in each cell and how it is turned.

        Returns:
            Two ``(size, size)`` integer arrays. The first holds the inventory
            index placed in each cell, the second the number of clockwise
            quarter turns (0-3) relative to the tile as it was supplied. Empty
            cells hold -1 in both.
        """
        return self._origin.copy(), self._placed_turns.copy()

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def solve(self) -> bool:
        """Search for a complete arrangement.

        Returns:
            True if every cell was filled without an adjacency violation. The
            board then holds the first solution found. False if no
            arrangement exists, in which case the board is empty and no tile
            is marked used.
        """
        self.board.reset()
        self._used[:] = False
        self._origin.fill(-1)
        self._placed_turns.fill(-1)
        self.stats = SearchStats()

        logger.debug("Solving %dx%d board with %d tiles", self.size, self.size, len(self._tiles))
        solved = self._solve(0, 0)
        self.solved = solved
        logger.debug(
            "Search %s: placements=%d checks=%d backtracks=%d",
            "succeeded" if solved else "exhausted",
            self.stats.placements,
            self.stats.checks,
            self.stats.backtracks,
        )
        return solved

    def _solve(self, row: int, col: int) -> bool:
        if row == self.size:
            return True

        if col + 1 < self.size:
            next_row, next_col = row, col + 1
        else:
            next_row, next_col = row + 1, 0

        for index, tile in enumerate(self._tiles):
            if self._used[index]:
                continue
            self._used[index] = True

            for _ in range(4):
                self.board.place(row, col, tile.copy())
                self._origin[row, col] = index
                self._placed_turns[row, col] = self._turns[index]
                self.stats.placements += 1

                # Every cell after the first has a filled neighbour to the
                # left or above.
                if row or col:
                    self.stats.checks += 1
                if self.board.check_neighbors(row, col) and self._solve(next_row, next_col):
                    return True

                tile.rotate()
                self._turns[index] = (self._turns[index] + 1) % 4

            self._used[index] = False
            self.board.clear(row, col)
            self._origin[row, col] = -1
            self._placed_turns[row, col] = -1
            self.stats.backtracks += 1

        return False


def solve_puzzle(tiles: Sequence[Tile], size: int | None = None) -> Solver:
    """Build a solver for *tiles* and run it once.

    Args:
        tiles: The inventory to place.
        size: Optional board side length.

    Returns:
        The Solver after ``solve`` has returned. ``solved`` holds the
        result, ``board`` the arrangement and ``stats`` the search counters.

    Raises:
        PuzzleConfigError: If the inventory does not fit the board.
    """
    solver = Solver(tiles, size)
    solver.solve()
    return solver
