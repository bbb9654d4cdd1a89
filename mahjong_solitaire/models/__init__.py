"""Data models package.

This package contains the domain models and the API schemas.
"""
from .tile import (
    Position,
    Suit,
    TileType,
    Tile,
    MatchClass,
    match_class,
    can_match,
)
from .layout import Layout, LayoutProvider
from .board import Board
from .game import (
    Difficulty,
    LayoutMode,
    GameConfig,
    TileState,
    GameSnapshot,
)

__all__ = [
    # Tiles
    "Position",
    "Suit",
    "TileType",
    "Tile",
    "MatchClass",
    "match_class",
    "can_match",
    # Layouts
    "Layout",
    "LayoutProvider",
    # Board
    "Board",
    # Game
    "Difficulty",
    "LayoutMode",
    "GameConfig",
    "TileState",
    "GameSnapshot",
]
