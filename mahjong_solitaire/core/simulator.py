"""Greedy playout used to judge whether a generated board is worth keeping."""
from dataclasses import dataclass
from typing import Dict, List, Optional, Set

from ..models.board import Board
from ..models.tile import Tile, TileType


@dataclass
class SimulationResult:
    """Result of a solvability playout."""
    total_tiles: int
    removed_tiles: int
    moves: int
    removal_rate: float
    solvable: bool

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "total_tiles": self.total_tiles,
            "removed_tiles": self.removed_tiles,
            "moves": self.moves,
            "removal_rate": round(self.removal_rate, 3),
            "solvable": self.solvable,
        }


class SolvabilitySimulator:
    """Bounded, non-backtracking playout over a private removed-id set.

    This is an acceptance filter, not a solver: it always takes the first
    removable pair it finds and never looks ahead.
    """

    MAX_STEPS = 100
    SOLVABLE_REMOVAL_RATE = 0.8

    def __init__(
        self,
        max_steps: int = MAX_STEPS,
        solvable_removal_rate: float = SOLVABLE_REMOVAL_RATE,
    ):
        self.max_steps = max_steps
        self.solvable_removal_rate = solvable_removal_rate

    def simulate(self, board: Board) -> SimulationResult:
        """
        Play the board greedily without touching its tile flags.

        Args:
            board: Freshly generated board.

        Returns:
            SimulationResult with removal statistics.
        """
        removed: Set[int] = set()
        moves = 0

        for _ in range(self.max_steps):
            free_tiles = board.free_tiles_with(removed)
            if not free_tiles:
                break

            pair = self._find_pair(free_tiles)
            if pair is None:
                break

            removed.update(t.id for t in pair)
            moves += 1

        total = len(board)
        removal_rate = len(removed) / total if total else 0.0

        return SimulationResult(
            total_tiles=total,
            removed_tiles=len(removed),
            moves=moves,
            removal_rate=removal_rate,
            solvable=total > 0 and removal_rate >= self.solvable_removal_rate,
        )

    def is_solvable(self, board: Board) -> bool:
        return self.simulate(board).solvable

    @staticmethod
    def _find_pair(free_tiles: List[Tile]) -> Optional[List[Tile]]:
        """Pick the next pair: exact types first, then flowers, then seasons."""
        # dict keeps first-appearance order of types among free tiles
        type_groups: Dict[TileType, List[Tile]] = {}
        for tile in free_tiles:
            type_groups.setdefault(tile.type, []).append(tile)

        for group in type_groups.values():
            if len(group) >= 2:
                return group[:2]

        flowers = [t for t in free_tiles if t.type.is_flower]
        if len(flowers) >= 2:
            return flowers[:2]

        seasons = [t for t in free_tiles if t.type.is_season]
        if len(seasons) >= 2:
            return seasons[:2]

        return None


# Singleton instance
_simulator = None


def get_simulator() -> SolvabilitySimulator:
    """Get or create simulator singleton instance."""
    global _simulator
    if _simulator is None:
        _simulator = SolvabilitySimulator()
    return _simulator
