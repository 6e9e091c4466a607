"""Runtime settings read from the environment.

Values are read once at import. Unset variables fall back to the built-in
puzzle, ``WARNING`` logging and ``None`` as the empty-cell marker.
"""

from __future__ import annotations

import os

# Path to a YAML puzzle; the built-in 3x3 puzzle is used when unset.
PUZZLE_FILE: str | None = os.getenv("EDGE_MATCH_PUZZLE") or None

LOG_LEVEL: str = os.getenv("EDGE_MATCH_LOG_LEVEL", "WARNING").upper()
EMPTY_MARKER: str = os.getenv("EDGE_MATCH_EMPTY_MARKER", "None")


class CFG:
    """Settings namespace consulted by the command-line entry point.

    Attributes:
        PUZZLE_FILE: Optional path to a YAML puzzle description.
        LOG_LEVEL: Name of the root logging level.
        EMPTY_MARKER: Text printed for an empty board slot.
    """

    PUZZLE_FILE: str | None = PUZZLE_FILE
    LOG_LEVEL: str = LOG_LEVEL
    EMPTY_MARKER: str = EMPTY_MARKER


__all__ = ["CFG"]
