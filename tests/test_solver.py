"""Tests for the backtracking solver."""

from __future__ import annotations

import logging

import numpy as np
import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from edge_match.core.edges import EdgeLabel, Polarity, Species
from edge_match.core.puzzles import PuzzleConfigError, default_tiles
from edge_match.core.solver import SearchStats, Solver, solve_puzzle
from edge_match.core.tiles import Tile

labels = st.builds(EdgeLabel, st.sampled_from(Species), st.sampled_from(Polarity))
tiles = st.builds(Tile, labels, labels, labels, labels)

BEE_UP = EdgeLabel(Species.BEE, Polarity.UPPER)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _flip(label: EdgeLabel) -> EdgeLabel:
    return EdgeLabel(label.species, label.polarity.flipped())


@st.composite
def solvable_inventories(draw: st.DrawFn, size: int) -> list[Tile]:
    """Cut a fitting grid into tiles, then turn and shuffle them."""
    south = [[draw(labels) for _ in range(size)] for _ in range(size)]
    east = [[draw(labels) for _ in range(size)] for _ in range(size)]
    result = []
    for r in range(size):
        for c in range(size):
            north = _flip(south[r - 1][c]) if r else draw(labels)
            west = _flip(east[r][c - 1]) if c else draw(labels)
            tile = Tile(north, east[r][c], south[r][c], west)
            for _ in range(draw(st.integers(0, 3))):
                tile.rotate()
            result.append(tile)
    return draw(st.permutations(result))


def _assert_solution(solver: Solver) -> None:
    n = solver.size
    assert solver.board.is_full()
    assert solver.board.count_violations() == 0
    assert solver.used.all()
    indices, turns = solver.assignment()
    assert sorted(indices.ravel().tolist()) == list(range(n * n))
    assert ((turns >= 0) & (turns < 4)).all()


def _assert_cleaned_up(solver: Solver) -> None:
    assert not solver.used.any()
    assert solver.board.filled_count() == 0
    indices, turns = solver.assignment()
    assert (indices == -1).all()
    assert (turns == -1).all()


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestSolverConstruction:
    """Tests for inventory validation."""

    def test_size_inferred(self) -> None:
        assert Solver(default_tiles()).size == 3

    def test_explicit_size(self) -> None:
        assert Solver(default_tiles(), size=3).size == 3

    def test_wrong_count(self) -> None:
        with pytest.raises(PuzzleConfigError, match="needs 4 tiles, got 3"):
            Solver(default_tiles()[:3], size=2)

    def test_not_a_square(self) -> None:
        with pytest.raises(PuzzleConfigError):
            Solver(default_tiles()[:5])

    def test_empty_inventory(self) -> None:
        with pytest.raises(PuzzleConfigError, match="empty"):
            Solver([])

    def test_non_tile_item(self) -> None:
        with pytest.raises(PuzzleConfigError, match="not a Tile"):
            Solver(["spider/upper"])  # type: ignore[list-item]

    def test_config_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Solver([])

    def test_caller_tiles_are_not_rotated(self) -> None:
        given_tiles = default_tiles()
        snapshot = [t.edges() for t in given_tiles]
        Solver(given_tiles).solve()
        assert [t.edges() for t in given_tiles] == snapshot

    def test_nothing_used_before_solving(self) -> None:
        solver = Solver(default_tiles())
        assert solver.solved is None
        _assert_cleaned_up(solver)


# ---------------------------------------------------------------------------
# The built-in puzzle
# ---------------------------------------------------------------------------


class TestDefaultPuzzle:
    """Tests against the nine-tile 3x3 instance."""

    def test_solves(self) -> None:
        solver = Solver(default_tiles())
        assert solver.solve() is True
        assert solver.solved is True
        _assert_solution(solver)

    def test_twelve_internal_edges_fit(self) -> None:
        solver = Solver(default_tiles())
        solver.solve()
        board = solver.board
        fits = 0
        for r in range(3):
            for c in range(3):
                tile = board.get(r, c)
                assert tile is not None
                if c < 2:
                    right = board.get(r, c + 1)
                    assert right is not None
                    fits += tile.east.matches(right.west)
                if r < 2:
                    below = board.get(r + 1, c)
                    assert below is not None
                    fits += tile.south.matches(below.north)
        assert fits == 12

    def test_first_solution_placement(self) -> None:
        solver = Solver(default_tiles())
        solver.solve()
        indices, turns = solver.assignment()
        np.testing.assert_array_equal(indices, [[0, 7, 5], [6, 2, 8], [3, 4, 1]])
        np.testing.assert_array_equal(turns, [[1, 2, 0], [1, 0, 2], [2, 2, 1]])

    def test_placed_tiles_are_turned_inventory_tiles(self) -> None:
        supplied = default_tiles()
        solver = Solver(supplied)
        solver.solve()
        indices, turns = solver.assignment()
        for r in range(3):
            for c in range(3):
                expected = supplied[indices[r, c]].copy()
                for _ in range(turns[r, c]):
                    expected.rotate()
                assert solver.board.get(r, c) == expected

    def test_deterministic_across_solvers(self) -> None:
        first = Solver(default_tiles())
        second = Solver(default_tiles())
        assert first.solve() == second.solve()
        for a, b in zip(first.assignment(), second.assignment()):
            np.testing.assert_array_equal(a, b)
        assert first.board.rows() == second.board.rows()
        assert first.stats == second.stats

    def test_solve_again_still_succeeds(self) -> None:
        solver = Solver(default_tiles())
        assert solver.solve()
        assert solver.solve()
        _assert_solution(solver)

    def test_stats_collected(self) -> None:
        solver = Solver(default_tiles())
        solver.solve()
        assert solver.stats.placements >= 9
        assert solver.stats.checks >= 8
        assert solver.stats.placements > solver.stats.checks

    def test_solve_puzzle_wrapper(self) -> None:
        solver = solve_puzzle(default_tiles())
        assert solver.solved is True
        _assert_solution(solver)

    def test_debug_logging(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="edge_match.core.solver"):
            Solver(default_tiles()).solve()
        messages = [r.getMessage() for r in caplog.records]
        assert any("Solving 3x3 board" in m for m in messages)
        assert any("Search succeeded" in m for m in messages)


# ---------------------------------------------------------------------------
# Boundaries and failures
# ---------------------------------------------------------------------------


class TestSolverBoundaries:
    """Tests for trivial and unsolvable inventories."""

    @given(tile=tiles)
    def test_hypothesis_single_tile(self, tile: Tile) -> None:
        solver = Solver([tile])
        assert solver.solve() is True
        assert solver.stats.checks == 0
        assert solver.stats.placements == 1
        assert solver.board.get(0, 0) == tile
        np.testing.assert_array_equal(solver.assignment()[1], [[0]])

    def test_unsolvable_two_by_two(self, caplog: pytest.LogCaptureFixture) -> None:
        inventory = [Tile(BEE_UP, BEE_UP, BEE_UP, BEE_UP) for _ in range(4)]
        solver = Solver(inventory)
        with caplog.at_level(logging.DEBUG, logger="edge_match.core.solver"):
            assert solver.solve() is False
        assert solver.solved is False
        _assert_cleaned_up(solver)
        assert solver.stats.backtracks > 0
        assert any("Search exhausted" in r.getMessage() for r in caplog.records)

    def test_unsolvable_restores_orientation(self) -> None:
        spider = EdgeLabel(Species.SPIDER, Polarity.UPPER)
        inventory = [Tile(BEE_UP, spider, BEE_UP, spider) for _ in range(4)]
        solver = Solver(inventory)
        assert solver.solve() is False
        assert [t.edges() for t in solver.tiles] == [t.edges() for t in inventory]

    def test_failure_is_repeatable(self) -> None:
        solver = Solver([Tile(BEE_UP, BEE_UP, BEE_UP, BEE_UP) for _ in range(4)])
        assert solver.solve() is False
        stats = solver.stats
        assert solver.solve() is False
        assert solver.stats == stats
        assert stats != SearchStats()

    @settings(max_examples=60, deadline=None)
    @given(inventory=st.lists(tiles, min_size=4, max_size=4))
    def test_hypothesis_random_two_by_two(self, inventory: list[Tile]) -> None:
        """Whatever the outcome, the board is either a solution or empty."""
        solver = Solver(inventory)
        if solver.solve():
            _assert_solution(solver)
        else:
            _assert_cleaned_up(solver)


# ---------------------------------------------------------------------------
# Generated solvable puzzles
# ---------------------------------------------------------------------------


class TestGeneratedPuzzles:
    """Inventories cut from a fitting grid always solve."""

    @settings(max_examples=60, deadline=None)
    @given(inventory=solvable_inventories(2))
    def test_hypothesis_two_by_two(self, inventory: list[Tile]) -> None:
        solver = Solver(inventory)
        assert solver.solve() is True
        _assert_solution(solver)

    @settings(max_examples=20, deadline=None)
    @given(inventory=solvable_inventories(3))
    def test_hypothesis_three_by_three(self, inventory: list[Tile]) -> None:
        solver = Solver(inventory)
        assert solver.solve() is True
        _assert_solution(solver)
