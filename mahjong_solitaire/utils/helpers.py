"""Utility helper functions."""
from typing import Dict, Any, List, Optional

from ..models.board import Board
from ..models.tile import Position, Tile, TileType


def tile_to_dict(tile: Tile) -> Dict[str, Any]:
    """Flatten a tile into a JSON-friendly dictionary."""
    return {
        "id": tile.id,
        "type": tile.type.name,
        "x": tile.position.x,
        "y": tile.position.y,
        "z": tile.position.z,
        "selected": tile.selected,
        "removed": tile.removed,
    }


def board_to_dicts(board: Board) -> List[Dict[str, Any]]:
    """Flatten all board tiles, in board order."""
    return [tile_to_dict(t) for t in board.tiles]


def validate_tiles(tiles: List[Dict[str, Any]]) -> tuple[bool, Optional[str]]:
    """
    Validate flattened tile data.

    Args:
        tiles: Tile dictionaries with id, type, x, y, z.

    Returns:
        Tuple of (is_valid, error_message).
    """
    seen_ids = set()
    seen_positions = set()

    for tile in tiles:
        for key in ("id", "type", "x", "y", "z"):
            if key not in tile:
                return False, f"Tile missing '{key}' field"

        if tile["id"] in seen_ids:
            return False, f"Duplicate tile id: {tile['id']}"
        seen_ids.add(tile["id"])

        position = (tile["x"], tile["y"], tile["z"])
        if position in seen_positions:
            return False, f"Two tiles at position {position}"
        seen_positions.add(position)

        if tile["type"] not in TileType.__members__:
            return False, f"Unknown tile type: '{tile['type']}'"

    return True, None


def board_from_dicts(layout_id: str, tiles: List[Dict[str, Any]]) -> Board:
    """
    Build a board from flattened tile data.

    Raises:
        ValueError: If the tile data is invalid.
    """
    is_valid, error = validate_tiles(tiles)
    if not is_valid:
        raise ValueError(error)

    return Board(layout_id, [
        Tile(
            id=t["id"],
            type=TileType.from_name(t["type"]),
            position=Position(t["x"], t["y"], t["z"]),
            removed=bool(t.get("removed", False)),
        )
        for t in tiles
    ])
