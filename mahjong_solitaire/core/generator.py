"""Board generator: assigns tile types to layout positions."""
import logging
import random
from typing import List, Optional

from ..models.board import Board
from ..models.game import Difficulty
from ..models.layout import Layout
from ..models.tile import Tile, TileType
from .simulator import SolvabilitySimulator, get_simulator

logger = logging.getLogger(__name__)


class BoardGenerator:
    """Generates playable boards from layouts.

    The generator owns its random source; a fixed seed reproduces the same
    distributions and the same accept/reject sequence.
    """

    # Standard mahjong has 4 copies of each tile
    MAX_PAIRS_PER_TYPE = 4
    MAX_SOLVABLE_ATTEMPTS = 100

    def __init__(
        self,
        seed: Optional[int] = None,
        simulator: Optional[SolvabilitySimulator] = None,
    ):
        self.random = random.Random(seed)
        self.simulator = simulator or get_simulator()

    def generate_board(self, layout: Layout, difficulty: Difficulty) -> Board:
        """
        Generate a board from a layout without any acceptance check.

        Args:
            layout: Layout providing the tile positions.
            difficulty: Difficulty of the game (does not shape the distribution).

        Returns:
            Board keyed by the layout id.
        """
        positions = list(layout.positions)

        # Pairable count
        if len(positions) % 2 != 0:
            positions.pop()

        tile_types = self.generate_tile_distribution(len(positions), difficulty)

        tiles = [
            Tile(id=i, type=tile_type, position=position)
            for i, (position, tile_type) in enumerate(zip(positions, tile_types))
        ]
        return Board(layout.id, tiles)

    def generate_solvable_board(self, layout: Layout, difficulty: Difficulty) -> Board:
        """
        Generate a board the simulator judges solvable.

        Falls back to the last generated board when no attempt is accepted,
        so generation never fails.
        """
        board = None
        for attempt in range(1, self.MAX_SOLVABLE_ATTEMPTS + 1):
            board = self.generate_board(layout, difficulty)
            result = self.simulator.simulate(board)
            logger.debug(
                "Layout %s attempt %d: removal rate %.2f",
                layout.id, attempt, result.removal_rate,
            )
            if result.solvable:
                return board

        logger.warning(
            "No solvable board for layout %s after %d attempts, using last board",
            layout.id, self.MAX_SOLVABLE_ATTEMPTS,
        )
        return board

    def generate_tile_distribution(
        self, tile_count: int, difficulty: Difficulty
    ) -> List[TileType]:
        """
        Build a shuffled list of tile types made of pairs.

        Each candidate type is used for up to MAX_PAIRS_PER_TYPE pairs before
        moving on to the next one, wrapping around when exhausted.
        """
        available_types = self.get_available_tile_types()
        self.random.shuffle(available_types)

        distribution: List[TileType] = []
        type_index = 0
        pairs_of_this_type = 0

        for _ in range(tile_count // 2):
            tile_type = available_types[type_index]
            distribution.append(tile_type)
            distribution.append(tile_type)
            pairs_of_this_type += 1

            if pairs_of_this_type >= self.MAX_PAIRS_PER_TYPE:
                type_index = (type_index + 1) % len(available_types)
                pairs_of_this_type = 0

        self.random.shuffle(distribution)
        return distribution

    @staticmethod
    def get_available_tile_types() -> List[TileType]:
        """All tile types usable in generation, in declaration order."""
        return list(TileType)
