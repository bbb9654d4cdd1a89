"""Tests for the solvability simulator."""
import pytest

from mahjong_solitaire.core.simulator import SolvabilitySimulator
from mahjong_solitaire.models.board import Board
from mahjong_solitaire.models.tile import TileType
from conftest import make_board

A = TileType.WIND_NORTH
B = TileType.CIRCLE_7


def row(*types):
    """Board with the given types side by side on one row."""
    return make_board([(t, (x, 0, 0)) for x, t in enumerate(types)])


@pytest.fixture
def simulator():
    """Create simulator instance."""
    return SolvabilitySimulator()


class TestSolvabilitySimulator:
    """Test cases for SolvabilitySimulator."""

    def test_clears_nested_row(self, simulator):
        """Test a row cleared from the outside in is solvable."""
        result = simulator.simulate(row(A, B, B, A))

        assert result.removed_tiles == 4
        assert result.moves == 2
        assert result.removal_rate == 1.0
        assert result.solvable

    def test_interleaved_row_is_stuck(self, simulator):
        """Test a row whose free ends never match is rejected."""
        result = simulator.simulate(row(A, B, A, B))

        assert result.removed_tiles == 0
        assert result.moves == 0
        assert not result.solvable

    def test_wildcard_pools(self, simulator):
        """Test flowers and seasons pair across variants."""
        board = row(
            TileType.FLOWER_PLUM,
            TileType.SEASON_SPRING,
            TileType.SEASON_SUMMER,
            TileType.FLOWER_ORCHID,
        )
        result = simulator.simulate(board)

        assert result.moves == 2
        assert result.solvable

    def test_threshold(self):
        """Test the 80% removal threshold is inclusive."""
        # Cleared outside-in until an unmatched middle pair remains: 8 of 10
        c = TileType.BAMBOO_5
        board = row(A, A, c, c, B, TileType.DRAGON_RED, c, c, A, A)
        result = SolvabilitySimulator().simulate(board)

        assert result.removal_rate == pytest.approx(0.8)
        assert result.solvable
        assert not SolvabilitySimulator(solvable_removal_rate=0.9).is_solvable(board)

    def test_does_not_touch_board(self, simulator):
        """Test the caller's board flags are left alone."""
        board = row(A, B, B, A)
        board.set_selected_tile(board.tiles[0])

        simulator.simulate(board)

        assert not any(t.removed for t in board.tiles)
        assert board.selected_tile is board.tiles[0]

    def test_step_cap(self):
        """Test the playout stops after max_steps moves."""
        board = row(A, B, B, A)
        result = SolvabilitySimulator(max_steps=1).simulate(board)

        assert result.moves == 1
        assert result.removal_rate == 0.5

    def test_empty_board(self, simulator):
        """Test an empty board is not judged solvable."""
        result = simulator.simulate(Board("empty", []))

        assert result.total_tiles == 0
        assert result.removal_rate == 0.0
        assert not result.solvable
