"""Shared fixtures and builders for tests."""
from typing import List, Optional, Sequence, Tuple

import pytest

from mahjong_solitaire.core.session import SessionListener
from mahjong_solitaire.models.board import Board
from mahjong_solitaire.models.layout import Layout
from mahjong_solitaire.models.tile import Position, Tile, TileType


def make_board(
    entries: Sequence[Tuple[TileType, Tuple[int, int, int]]],
    layout_id: str = "test",
) -> Board:
    """Build a board from (type, (x, y, z)) pairs; ids follow list order."""
    return Board(layout_id, [
        Tile(id=i, type=tile_type, position=Position(*coords))
        for i, (tile_type, coords) in enumerate(entries)
    ])


def make_layout(layout_id: str, coords: Sequence[Tuple[int, int, int]]) -> Layout:
    """Build a synthetic layout from (x, y, z) tuples."""
    return Layout(layout_id, layout_id.title(), "", 1, [Position(*c) for c in coords])


class FakeClock:
    """Millisecond clock advanced by hand."""

    def __init__(self, now: int = 1_000):
        self.now = now

    def __call__(self) -> int:
        return self.now


class RecordingListener(SessionListener):
    """Records (event_name, payload) tuples."""

    def __init__(self):
        self.events: List[Tuple[str, object]] = []

    def names(self) -> List[str]:
        return [name for name, _ in self.events]

    def on_game_started(self, board):
        self.events.append(("game_started", board))

    def on_game_won(self, board, elapsed_ms):
        self.events.append(("game_won", elapsed_ms))

    def on_game_lost(self, board):
        self.events.append(("game_lost", board))

    def on_tile_selected(self, tile: Optional[Tile]):
        self.events.append(("tile_selected", tile))

    def on_tiles_removed(self, tile1, tile2):
        self.events.append(("tiles_removed", (tile1, tile2)))

    def on_layout_changed(self, layout):
        self.events.append(("layout_changed", layout))


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def listener():
    return RecordingListener()


@pytest.fixture
def two_tile_layout():
    """Two isolated positions: always one free matching pair."""
    return make_layout("pair", [(0, 0, 0), (4, 0, 0)])


@pytest.fixture
def four_tile_layout():
    """Four isolated positions on one row."""
    return make_layout("quad", [(0, 0, 0), (4, 0, 0), (8, 0, 0), (12, 0, 0)])
