"""Utility helpers package."""
from .helpers import (
    board_from_dicts,
    board_to_dicts,
    tile_to_dict,
    validate_tiles,
)

__all__ = [
    "board_from_dicts",
    "board_to_dicts",
    "tile_to_dict",
    "validate_tiles",
]
