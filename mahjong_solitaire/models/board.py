"""Board model: tile storage, freedom rule and pair removal."""
from collections import defaultdict
from typing import AbstractSet, Callable, Dict, Iterable, List, Optional

from .tile import MatchClass, Position, Tile, can_match, match_class

# Offsets of the 3x3 neighbourhood one layer up
_ABOVE_OFFSETS = [(dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1)]
_SIDE_ROWS = (-1, 0, 1)


class Board:
    """Tiles of one play session, indexed by position.

    Tiles are never deleted, only flagged removed, so ids and list order stay
    stable for the lifetime of the board.
    """

    def __init__(self, layout_id: str, tiles: Iterable[Tile]):
        self.layout_id = layout_id
        self._tiles: List[Tile] = list(tiles)
        self._position_map: Dict[Position, Tile] = {t.position: t for t in self._tiles}
        self._id_map: Dict[int, Tile] = {t.id: t for t in self._tiles}
        self._selected_tile: Optional[Tile] = None

    @property
    def tiles(self) -> List[Tile]:
        """Tiles in creation order (a copy of the list, same tile objects)."""
        return list(self._tiles)

    @property
    def selected_tile(self) -> Optional[Tile]:
        return self._selected_tile

    def get_tile_at(self, position: Position) -> Optional[Tile]:
        return self._position_map.get(position)

    def get_tile_by_id(self, tile_id: int) -> Optional[Tile]:
        return self._id_map.get(tile_id)

    def set_selected_tile(self, tile: Optional[Tile]) -> None:
        """Move the selection flag to the given tile (or clear it)."""
        if self._selected_tile is not None:
            self._selected_tile.selected = False
        self._selected_tile = tile
        if tile is not None:
            tile.selected = True

    def _is_free(self, tile: Tile, is_live: Callable[[Tile], bool]) -> bool:
        """Freedom rule over an arbitrary notion of which tiles remain."""
        pos = tile.position

        def occupied(p: Position) -> bool:
            other = self._position_map.get(p)
            return other is not None and is_live(other)

        # Nothing may rest on the tile
        for dx, dy in _ABOVE_OFFSETS:
            if occupied(pos.offset(dx, dy, 1)):
                return False

        # At least one horizontal side must be open
        left_blocked = any(occupied(pos.offset(-1, dy)) for dy in _SIDE_ROWS)
        right_blocked = any(occupied(pos.offset(1, dy)) for dy in _SIDE_ROWS)
        return not left_blocked or not right_blocked

    def is_tile_free(self, tile: Optional[Tile]) -> bool:
        """Check whether a tile can currently be selected and removed.

        A tile is free when no tile sits in the 3x3 cells directly above it
        and at least one of its left or right side columns is empty.
        """
        if tile is None or tile.removed:
            return False
        return self._is_free(tile, lambda t: not t.removed)

    def get_free_tiles(self) -> List[Tile]:
        """All currently free tiles, in board order."""
        return [t for t in self._tiles if self.is_tile_free(t)]

    def free_tiles_with(self, removed_ids: AbstractSet[int]) -> List[Tile]:
        """Free tiles when exactly the given ids are treated as removed.

        Tile flags on the board are ignored and left untouched.
        """
        def is_live(t: Tile) -> bool:
            return t.id not in removed_ids

        return [t for t in self._tiles if is_live(t) and self._is_free(t, is_live)]

    def remove_pair(self, tile1: Optional[Tile], tile2: Optional[Tile]) -> bool:
        """Remove two matching free tiles. All-or-nothing.

        Returns:
            True if both tiles were removed, False if nothing changed.
        """
        if tile1 is None or tile2 is None:
            return False
        if tile1.id == tile2.id:
            return False
        if not can_match(tile1.type, tile2.type):
            return False
        if not self.is_tile_free(tile1) or not self.is_tile_free(tile2):
            return False

        tile1.removed = True
        tile2.removed = True

        selected = self._selected_tile
        if selected is not None and selected.id in (tile1.id, tile2.id):
            selected.selected = False
            self._selected_tile = None
        return True

    def is_game_won(self) -> bool:
        return all(t.removed for t in self._tiles)

    def is_game_stuck(self) -> bool:
        """Check whether no two free tiles can be matched."""
        class_counts: Dict[MatchClass, int] = defaultdict(int)
        for tile in self.get_free_tiles():
            key = match_class(tile.type)
            class_counts[key] += 1
            if class_counts[key] >= 2:
                return False
        return True

    @property
    def remaining_tile_count(self) -> int:
        return sum(1 for t in self._tiles if not t.removed)

    def __len__(self) -> int:
        return len(self._tiles)

    def __repr__(self) -> str:
        return f"Board({self.layout_id}, {self.remaining_tile_count} tiles remaining)"
