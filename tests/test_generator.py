"""Tests for board generator."""
from collections import Counter

import pytest

from mahjong_solitaire.core.generator import BoardGenerator
from mahjong_solitaire.core.simulator import SimulationResult
from mahjong_solitaire.models.game import Difficulty
from mahjong_solitaire.models.tile import TileType
from conftest import make_layout


class FixedVerdictSimulator:
    """Simulator stand-in that always returns the same verdict."""

    def __init__(self, solvable: bool):
        self.solvable = solvable
        self.calls = 0

    def simulate(self, board):
        self.calls += 1
        return SimulationResult(
            total_tiles=len(board),
            removed_tiles=0,
            moves=0,
            removal_rate=1.0 if self.solvable else 0.0,
            solvable=self.solvable,
        )


@pytest.fixture
def grid_layout():
    """6x4 grid with a second layer on top: 24 + 8 positions."""
    coords = [(x, y, 0) for y in range(4) for x in range(6)]
    coords += [(x, y, 1) for y in range(1, 3) for x in range(1, 5)]
    return make_layout("grid", coords)


@pytest.fixture
def generator():
    """Create seeded generator instance."""
    return BoardGenerator(seed=1234)


class TestGenerateBoard:
    """Test cases for BoardGenerator.generate_board."""

    def test_tiles_follow_positions(self, generator, grid_layout):
        """Test tiles get sequential ids in position order."""
        board = generator.generate_board(grid_layout, Difficulty.MEDIUM)

        assert board.layout_id == "grid"
        assert len(board) == grid_layout.tile_count
        for i, tile in enumerate(board.tiles):
            assert tile.id == i
            assert tile.position == grid_layout.positions[i]
            assert not tile.removed
            assert not tile.selected

    def test_odd_layout_drops_last_position(self, generator):
        """Test odd layouts are truncated to an even count."""
        layout = make_layout("odd", [(x * 2, 0, 0) for x in range(9)])
        board = generator.generate_board(layout, Difficulty.HARD)

        assert len(board) == 8
        assert all(t.position != layout.positions[-1] for t in board.tiles)

    def test_types_come_in_pairs(self, generator, grid_layout):
        """Test every type on the board appears an even number of times."""
        board = generator.generate_board(grid_layout, Difficulty.EASY)
        counts = Counter(t.type for t in board.tiles)
        assert all(count % 2 == 0 for count in counts.values())

    def test_empty_layout(self, generator):
        """Test an empty layout yields an empty board."""
        board = generator.generate_board(make_layout("empty", []), Difficulty.EASY)
        assert len(board) == 0


class TestTileDistribution:
    """Test cases for BoardGenerator.generate_tile_distribution."""

    @pytest.mark.parametrize("tile_count", [0, 2, 36, 144, 170])
    def test_pairing_invariant(self, generator, tile_count):
        """Test counts are even and exact types stay within 4 pairs."""
        distribution = generator.generate_tile_distribution(tile_count, Difficulty.MEDIUM)
        counts = Counter(distribution)

        assert len(distribution) == tile_count
        for tile_type, count in counts.items():
            assert count % 2 == 0
            if not tile_type.is_flower and not tile_type.is_season:
                assert count <= 8

    def test_candidate_types(self):
        """Test all 42 variants are candidates."""
        assert len(BoardGenerator.get_available_tile_types()) == 42
        assert set(BoardGenerator.get_available_tile_types()) == set(TileType)

    def test_difficulty_does_not_shape_distribution(self):
        """Test the same seed yields the same distribution at any difficulty."""
        easy = BoardGenerator(seed=7).generate_tile_distribution(144, Difficulty.EASY)
        hard = BoardGenerator(seed=7).generate_tile_distribution(144, Difficulty.HARD)
        assert easy == hard


class TestDeterminism:
    """Test cases for seeded generation."""

    @staticmethod
    def _assignment(board):
        return [(t.id, t.type, t.position) for t in board.tiles]

    def test_same_seed_same_board(self, grid_layout):
        """Test a fixed seed reproduces the type-to-position assignment."""
        first = BoardGenerator(seed=99).generate_board(grid_layout, Difficulty.MEDIUM)
        second = BoardGenerator(seed=99).generate_board(grid_layout, Difficulty.MEDIUM)
        assert self._assignment(first) == self._assignment(second)

    def test_same_seed_same_solvable_board(self, grid_layout):
        """Test a fixed seed reproduces the accept/reject sequence."""
        first = BoardGenerator(seed=5).generate_solvable_board(grid_layout, Difficulty.EASY)
        second = BoardGenerator(seed=5).generate_solvable_board(grid_layout, Difficulty.EASY)
        assert self._assignment(first) == self._assignment(second)


class TestGenerateSolvableBoard:
    """Test cases for BoardGenerator.generate_solvable_board."""

    def test_accepts_first_solvable_board(self, grid_layout):
        """Test generation stops at the first accepted board."""
        simulator = FixedVerdictSimulator(solvable=True)
        generator = BoardGenerator(seed=1, simulator=simulator)

        board = generator.generate_solvable_board(grid_layout, Difficulty.EASY)

        assert simulator.calls == 1
        assert len(board) == grid_layout.tile_count

    def test_falls_back_after_max_attempts(self, grid_layout):
        """Test the last board is returned when nothing is accepted."""
        simulator = FixedVerdictSimulator(solvable=False)
        generator = BoardGenerator(seed=1, simulator=simulator)

        board = generator.generate_solvable_board(grid_layout, Difficulty.MEDIUM)

        assert simulator.calls == BoardGenerator.MAX_SOLVABLE_ATTEMPTS
        assert board is not None
        assert len(board) == grid_layout.tile_count

    def test_open_layout_is_accepted(self):
        """Test a layout where every tile is free is always accepted."""
        layout = make_layout("open", [(x * 2, 0, 0) for x in range(12)])
        generator = BoardGenerator(seed=2024)

        board = generator.generate_solvable_board(layout, Difficulty.EASY)
        result = generator.simulator.simulate(board)

        assert result.solvable
        assert result.removal_rate == 1.0
        assert not any(t.removed for t in board.tiles)
