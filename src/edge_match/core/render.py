"""Plain-text display of a board."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from edge_match.core.board import Board


def render_board(board: Board, empty: str = "None") -> str:
    """Render the grid row-major, one line per row.

    Args:
        board: The board to display.
        empty: Marker printed for an empty slot.

    Returns:
        The rows joined by newlines. Each cell is the placed tile's ``repr``
        or *empty*, separated by a single space.
    """
    lines = []
    for row in board.rows():
        lines.append(" ".join(empty if tile is None else repr(tile) for tile in row))
    return "\n".join(lines)
