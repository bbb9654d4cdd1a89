"""Core game logic package.

This package contains the board generator, the solvability simulator,
the game session state machine and the default layout catalog.
"""
from .catalog import LayoutCatalog, get_catalog
from .generator import BoardGenerator
from .simulator import SimulationResult, SolvabilitySimulator, get_simulator
from .session import GameSession, SessionListener
from .store import EventRecorder, SessionStore, get_store

__all__ = [
    "LayoutCatalog",
    "get_catalog",
    "BoardGenerator",
    "SimulationResult",
    "SolvabilitySimulator",
    "get_simulator",
    "GameSession",
    "SessionListener",
    "EventRecorder",
    "SessionStore",
    "get_store",
]
