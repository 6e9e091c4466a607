"""Core domain types for Edge Match."""

from edge_match.core.board import Board
from edge_match.core.edges import EdgeLabel, Polarity, Species, compatible
from edge_match.core.puzzles import (
    DEFAULT_TILES,
    PuzzleConfigError,
    default_tiles,
    load_puzzle,
    tile_from_spec,
    tiles_from_spec,
)
from edge_match.core.render import render_board
from edge_match.core.solver import SearchStats, Solver, solve_puzzle
from edge_match.core.tiles import Direction, Tile

__all__ = [
    "Board",
    "DEFAULT_TILES",
    "Direction",
    "EdgeLabel",
    "Polarity",
    "PuzzleConfigError",
    "SearchStats",
    "Solver",
    "Species",
    "Tile",
    "compatible",
    "default_tiles",
    "load_puzzle",
    "render_board",
    "solve_puzzle",
    "tile_from_spec",
    "tiles_from_spec",
]
