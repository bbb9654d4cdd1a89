"""Mahjong solitaire engine: board generation, freedom rules and game sessions."""

__version__ = "1.0.0"
