"""The square playing grid and the adjacency check over it."""

from __future__ import annotations

from edge_match.core.edges import compatible
from edge_match.core.tiles import Direction, Tile

# (row offset, col offset, side of the placed tile facing that neighbour)
_NEIGHBOURS: tuple[tuple[int, int, Direction], ...] = (
    (-1, 0, Direction.NORTH),
    (1, 0, Direction.SOUTH),
    (0, -1, Direction.WEST),
    (0, 1, Direction.EAST),
)


class Board:
    """An N x N grid of optional placed tiles.

    Cells are addressed by ``(row, col)`` with ``(0, 0)`` in the top-left
    corner. The grid is allocated once and only its slots change.

    Args:
        size: Number of rows (and columns). Must be at least 1.

    Raises:
        ValueError: If ``size`` is smaller than 1.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"Board size must be at least 1, got {size}")
        self.size = size
        self._grid: list[list[Tile | None]] = [[None] * size for _ in range(size)]

    # ------------------------------------------------------------------
    # Slot access
    # ------------------------------------------------------------------

    def _check_cell(self, row: int, col: int) -> None:
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IndexError(f"Cell ({row}, {col}) is off a {self.size}x{self.size} board")

    def get(self, row: int, col: int) -> Tile | None:
        """Return the tile at ``(row, col)``, or None if the slot is empty."""
        self._check_cell(row, col)
        return self._grid[row][col]

    def place(self, row: int, col: int, tile: Tile) -> None:
        """Put *tile* in the slot at ``(row, col)``, replacing any occupant."""
        self._check_cell(row, col)
        self._grid[row][col] = tile

    def clear(self, row: int, col: int) -> None:
        """Empty the slot at ``(row, col)``."""
        self._check_cell(row, col)
        self._grid[row][col] = None

    def reset(self) -> None:
        """Empty every slot."""
        for row in self._grid:
            for col in range(self.size):
                row[col] = None

    def rows(self) -> tuple[tuple[Tile | None, ...], ...]:
        """Return a row-major snapshot of the grid."""
        return tuple(tuple(row) for row in self._grid)

    def filled_count(self) -> int:
        """Return the number of occupied slots.

        Returns:
            How many slots hold a tile, between 0 and ``size ** 2``.
        """
        return sum(tile is not None for row in self._grid for tile in row)

    def is_full(self) -> bool:
        """Return True if every slot holds a tile.

        Returns:
            True when ``filled_count()`` equals ``size ** 2``.
        """
        return self.filled_count() == self.size * self.size

    # ------------------------------------------------------------------
    # Adjacency
    # ------------------------------------------------------------------

    def filled_neighbours(self, row: int, col: int) -> list[tuple[Direction, Tile]]:
        """Return the occupied neighbours of ``(row, col)``.

        Args:
            row: Row of the cell.
            col: Column of the cell.

        Returns:
            ``(side, neighbour)`` pairs, where *side* is the side of the cell
            at ``(row, col)`` that touches *neighbour*. Empty and off-grid
            neighbours are left out.
        """
        found: list[tuple[Direction, Tile]] = []
        for dr, dc, side in _NEIGHBOURS:
            r, c = row + dr, col + dc
            if 0 <= r < self.size and 0 <= c < self.size:
                neighbour = self._grid[r][c]
                if neighbour is not None:
                    found.append((side, neighbour))
        return found

    def check_neighbors(self, row: int, col: int) -> bool:
        """Return True if the tile at ``(row, col)`` fits all its neighbours.

        Each filled neighbour above, below, left and right must present an
        edge of the same species and the opposite half. Empty or off-grid
        neighbours impose nothing, so a cell with no filled neighbours is
        trivially compatible.

        Args:
            row: Row of the cell to check.
            col: Column of the cell to check.

        Returns:
            True if every filled neighbour is compatible. False if any is
            not, or if the cell itself is empty.
        """
        tile = self.get(row, col)
        if tile is None:
            return False
        for side, neighbour in self.filled_neighbours(row, col):
            if not compatible(tile.edge(side), neighbour.edge(side.opposite())):
                return False
        return True

    def count_violations(self) -> int:
        """Count internal shared edges whose two tiles do not fit.

        Only edges between two filled slots are considered. A fully solved
        board returns 0.

        Returns:
            The number of incompatible shared edges.
        """
        bad = 0
        for r in range(self.size):
            for c in range(self.size):
                tile = self._grid[r][c]
                if tile is None:
                    continue
                # Look right and down only so each shared edge is counted once.
                if c + 1 < self.size:
                    right = self._grid[r][c + 1]
                    if right is not None and not compatible(tile.east, right.west):
                        bad += 1
                if r + 1 < self.size:
                    below = self._grid[r + 1][c]
                    if below is not None and not compatible(tile.south, below.north):
                        bad += 1
        return bad
