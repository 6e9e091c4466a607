"""Puzzle inventories: the built-in instance and loading from YAML.

An inventory is an ordered list of tiles. Each tile is described either as a
four-item list of edge labels in north, east, south, west order, or as a
mapping with exactly the keys ``north``, ``east``, ``south`` and ``west``.
Edge labels are ``"species/polarity"`` strings or ``[species, polarity]``
pairs::

    size: 2
    tiles:
      - [spider/upper, bee/bottom, spider/bottom, cricket/upper]
      - {north: bee/upper, east: spider/upper, south: ladybug/bottom, west: cricket/bottom}
      ...
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from math import isqrt
from pathlib import Path
from typing import Any

import yaml

from edge_match.core.edges import EdgeLabel
from edge_match.core.tiles import Direction, Tile

_DIRECTION_KEYS: tuple[str, ...] = tuple(d.name.lower() for d in Direction)


class PuzzleConfigError(ValueError):
    """Raised when a tile inventory or puzzle file is malformed."""


# The nine tiles of the physical puzzle, edges in N, E, S, W order.
DEFAULT_TILES: tuple[tuple[str, str, str, str], ...] = (
    ("spider/bottom", "bee/upper", "spider/upper", "cricket/bottom"),
    ("ladybug/bottom", "cricket/bottom", "spider/bottom", "bee/bottom"),
    ("ladybug/upper", "spider/bottom", "bee/bottom", "cricket/upper"),
    ("spider/upper", "ladybug/upper", "ladybug/bottom", "cricket/upper"),
    ("ladybug/upper", "cricket/bottom", "bee/upper", "spider/upper"),
    ("bee/upper", "spider/bottom", "ladybug/upper", "cricket/upper"),
    ("cricket/bottom", "ladybug/upper", "bee/upper", "bee/bottom"),
    ("ladybug/bottom", "spider/upper", "bee/upper", "cricket/bottom"),
    ("bee/upper", "spider/upper", "ladybug/bottom", "cricket/bottom"),
)


def default_tiles() -> list[Tile]:
    """Return fresh Tile objects for the built-in 3x3 puzzle."""
    return [tile_from_spec(spec) for spec in DEFAULT_TILES]


def tile_from_spec(spec: Any) -> Tile:
    """Build a tile from a list of four labels or a direction mapping.

    Args:
        spec: Four edge labels in north, east, south, west order, or a
            mapping keyed by direction name.

    Returns:
        The constructed Tile.

    Raises:
        PuzzleConfigError: If the tile does not have exactly one label per
            direction or a label cannot be parsed.
    """
    if isinstance(spec, Tile):
        return spec.copy()
    if isinstance(spec, Mapping):
        keys = {str(k).lower() for k in spec}
        if keys != set(_DIRECTION_KEYS) or len(spec) != 4:
            raise PuzzleConfigError(
                f"Tile needs exactly the keys {', '.join(_DIRECTION_KEYS)}; got {sorted(keys)}"
            )
        lowered = {str(k).lower(): v for k, v in spec.items()}
        raw = [lowered[k] for k in _DIRECTION_KEYS]
    elif isinstance(spec, Sequence) and not isinstance(spec, str):
        if len(spec) != 4:
            raise PuzzleConfigError(f"Tile needs 4 edges, got {len(spec)}: {spec!r}")
        raw = list(spec)
    else:
        raise PuzzleConfigError(f"Cannot build a tile from {spec!r}")

    try:
        labels = [EdgeLabel.parse(value) for value in raw]
    except ValueError as exc:
        raise PuzzleConfigError(str(exc)) from exc
    return Tile(*labels)


def _parse_size(raw: Any) -> int:
    # bool is an int subclass; YAML turns "true" into one.
    if isinstance(raw, bool):
        raise PuzzleConfigError(f"Invalid board size: {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float) and raw.is_integer():
        return int(raw)
    if isinstance(raw, str):
        try:
            return int(raw.strip())
        except ValueError:
            pass
    raise PuzzleConfigError(f"Invalid board size: {raw!r}")


def tiles_from_spec(data: Any) -> tuple[list[Tile], int]:
    """Validate a puzzle description and build its inventory.

    Args:
        data: Either a mapping with a ``tiles`` list and an optional
            ``size``, or a bare list of tile descriptions.

    Returns:
        A ``(tiles, size)`` pair.

    Raises:
        PuzzleConfigError: If the description is malformed, a tile is
            invalid, or the tile count does not equal ``size ** 2``.
    """
    size: int | None = None
    if isinstance(data, Mapping):
        if "tiles" not in data:
            raise PuzzleConfigError("Puzzle is missing the 'tiles' list")
        raw_tiles = data["tiles"]
        if data.get("size") is not None:
            size = _parse_size(data["size"])
    else:
        raw_tiles = data

    if not isinstance(raw_tiles, Sequence) or isinstance(raw_tiles, str):
        raise PuzzleConfigError("'tiles' must be a list of tile descriptions")
    if not raw_tiles:
        raise PuzzleConfigError("Tile inventory is empty")

    tiles = [tile_from_spec(spec) for spec in raw_tiles]
    if size is None:
        size = isqrt(len(tiles))
    if size < 1 or size * size != len(tiles):
        raise PuzzleConfigError(
            f"A {size}x{size} board needs {size * size} tiles, got {len(tiles)}"
        )
    return tiles, size


def load_puzzle(path: str | Path) -> tuple[list[Tile], int]:
    """Read a puzzle description from a YAML file.

    Args:
        path: Location of the YAML file.

    Returns:
        A ``(tiles, size)`` pair, as from ``tiles_from_spec``.

    Raises:
        PuzzleConfigError: If the file cannot be read or parsed, or the
            puzzle it describes is invalid.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise PuzzleConfigError(f"Cannot read puzzle file {path}: {exc}") from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise PuzzleConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if data is None:
        raise PuzzleConfigError(f"Puzzle file {path} is empty")
    return tiles_from_spec(data)
