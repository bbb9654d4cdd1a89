"""Game session: layout selection, tile selection state machine and hints."""
import logging
import random
import time
from typing import Callable, List, Optional, Tuple

from ..models.board import Board
from ..models.game import GameConfig, GameSnapshot, LayoutMode, TileState
from ..models.layout import Layout, LayoutProvider
from ..models.tile import Position, Tile, TileType, can_match
from ..utils.helpers import validate_tiles
from .generator import BoardGenerator

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


class SessionListener:
    """Receives session events synchronously, inline with the triggering call.

    All callbacks are no-ops; override the ones you need.
    """

    def on_game_started(self, board: Board) -> None:
        pass

    def on_game_won(self, board: Board, elapsed_ms: int) -> None:
        pass

    def on_game_lost(self, board: Board) -> None:
        pass

    def on_tile_selected(self, tile: Optional[Tile]) -> None:
        pass

    def on_tiles_removed(self, tile1: Tile, tile2: Tile) -> None:
        pass

    def on_layout_changed(self, layout: Layout) -> None:
        pass


class GameSession:
    """Manages one running game and the statistics across games.

    Selection states are "no selection" and "one selected"; the selected
    tile lives on the board. Every transition goes through select_tile().
    """

    def __init__(
        self,
        layouts: LayoutProvider,
        generator: Optional[BoardGenerator] = None,
        config: Optional[GameConfig] = None,
        listener: Optional[SessionListener] = None,
        clock: Callable[[], int] = _now_ms,
        rng: Optional[random.Random] = None,
    ):
        self.layouts = layouts
        self.generator = generator or BoardGenerator()
        self.config = config or GameConfig()
        self.listener = listener or SessionListener()
        self.clock = clock
        self.rng = rng or random.Random()

        self.current_board: Optional[Board] = None
        self.current_layout: Optional[Layout] = None
        self.start_time_ms = 0
        self.games_won = 0
        self.games_played = 0

    def set_listener(self, listener: Optional[SessionListener]) -> None:
        """Attach a listener, replacing the previous one."""
        self.listener = listener or SessionListener()

    def start_new_game(self, layout_id: Optional[str] = None) -> Board:
        """
        Start a new game with the current configuration.

        Args:
            layout_id: If given, switch to FIXED mode on this layout first.

        Returns:
            The newly generated board.
        """
        if layout_id is not None:
            self.config.layout_mode = LayoutMode.FIXED
            self.config.fixed_layout_id = layout_id

        layout = self.select_layout()
        difficulty = self.config.difficulty

        if difficulty.requires_solvable:
            board = self.generator.generate_solvable_board(layout, difficulty)
        else:
            # HARD: unconstrained, may be unsolvable
            board = self.generator.generate_board(layout, difficulty)

        self.current_layout = layout
        self.current_board = board
        self.start_time_ms = self.clock()
        self.games_played += 1

        logger.info(
            "Game %d started on layout %s (%s, %d tiles)",
            self.games_played, layout.id, difficulty.value, len(board),
        )

        self.listener.on_layout_changed(layout)
        self.listener.on_game_started(board)
        return board

    def select_layout(self) -> Layout:
        """Choose the next layout according to the configured mode."""
        mode = self.config.layout_mode

        if mode == LayoutMode.FIXED and self.config.fixed_layout_id is not None:
            return self.layouts.get_layout_by_id(self.config.fixed_layout_id)

        # FIXED without an id behaves like RANDOM
        if mode in (LayoutMode.FIXED, LayoutMode.RANDOM):
            index = self.rng.randrange(self.layouts.get_layout_count())
            return self.layouts.get_layout_by_index(index)

        if mode == LayoutMode.PROGRESSIVE:
            index = self.config.progressive_index % self.layouts.get_layout_count()
            return self.layouts.get_layout_by_index(index)

        return self.layouts.get_layout_by_index(0)

    def select_tile(self, tile: Optional[Tile]) -> bool:
        """
        Handle a tile tap.

        Args:
            tile: Tapped tile, or None to only re-check win/stuck state.

        Returns:
            True if a pair was removed.
        """
        board = self.current_board
        if board is None:
            return False

        if tile is None:
            self._check_game_state()
            return False

        if tile.removed or not board.is_tile_free(tile):
            return False

        selected = board.selected_tile

        if selected is None:
            board.set_selected_tile(tile)
            self.listener.on_tile_selected(tile)
            return False

        if selected.id == tile.id:
            board.set_selected_tile(None)
            self.listener.on_tile_selected(None)
            return False

        if board.remove_pair(selected, tile):
            board.set_selected_tile(None)
            self.listener.on_tiles_removed(selected, tile)
            self._check_game_state()
            return True

        # No match: the new tile becomes the selection
        board.set_selected_tile(tile)
        self.listener.on_tile_selected(tile)
        return False

    def select_tile_by_id(self, tile_id: Optional[int]) -> bool:
        """select_tile() by id; unknown ids have no effect."""
        if tile_id is None:
            return self.select_tile(None)
        if self.current_board is None:
            return False
        tile = self.current_board.get_tile_by_id(tile_id)
        if tile is None:
            return False
        return self.select_tile(tile)

    def _check_game_state(self) -> None:
        board = self.current_board
        if board.is_game_won():
            self.games_won += 1
            elapsed_ms = self.elapsed_time_ms
            if self.config.layout_mode == LayoutMode.PROGRESSIVE:
                self.config.advance_progressive()
            logger.info("Game won on layout %s in %d ms", board.layout_id, elapsed_ms)
            self.listener.on_game_won(board, elapsed_ms)
        elif board.is_game_stuck():
            logger.info(
                "Game stuck on layout %s with %d tiles left",
                board.layout_id, board.remaining_tile_count,
            )
            self.listener.on_game_lost(board)

    @property
    def elapsed_time_ms(self) -> int:
        return self.clock() - self.start_time_ms

    def get_hint(self) -> Optional[Tuple[Tile, Tile]]:
        """Return the first matching pair of free tiles, in free-tile order."""
        if self.current_board is None:
            return None

        free_tiles = self.current_board.get_free_tiles()
        for i, first in enumerate(free_tiles):
            for second in free_tiles[i + 1:]:
                if can_match(first.type, second.type):
                    return first, second
        return None

    def save_snapshot(self) -> Optional[GameSnapshot]:
        """Capture the live session for an external store."""
        board = self.current_board
        if board is None:
            return None

        tile_states = [
            TileState(
                id=t.id,
                type=t.type.name,
                x=t.position.x,
                y=t.position.y,
                z=t.position.z,
                removed=t.removed,
            )
            for t in board.tiles
        ]
        selected = board.selected_tile

        return GameSnapshot(
            layout_id=board.layout_id,
            tile_states=tile_states,
            selected_tile_id=selected.id if selected is not None else -1,
            elapsed_time_ms=self.elapsed_time_ms,
            start_time_ms=self.start_time_ms,
        )

    def restore_snapshot(self, snapshot: GameSnapshot) -> Board:
        """
        Replace the live game with one rebuilt from a snapshot.

        The timer resumes from the stored elapsed time and the stored
        selection is restored if that tile is still on the board. Game
        counters are left as they are.

        Raises:
            ValueError: If tile ids or positions repeat or a tile type name
                is unknown. Nothing is changed.
        """
        is_valid, error = validate_tiles([s.to_dict() for s in snapshot.tile_states])
        if not is_valid:
            raise ValueError(error)

        tiles: List[Tile] = [
            Tile(
                id=state.id,
                type=TileType.from_name(state.type),
                position=Position(state.x, state.y, state.z),
                removed=state.removed,
            )
            for state in snapshot.tile_states
        ]
        board = Board(snapshot.layout_id, tiles)

        selected = board.get_tile_by_id(snapshot.selected_tile_id)
        if selected is not None and not selected.removed:
            board.set_selected_tile(selected)

        layout = self.layouts.get_layout_by_id(snapshot.layout_id)

        self.current_layout = layout
        self.current_board = board
        self.start_time_ms = self.clock() - snapshot.elapsed_time_ms

        logger.info(
            "Restored game on layout %s (%d of %d tiles left)",
            snapshot.layout_id, board.remaining_tile_count, len(board),
        )

        self.listener.on_layout_changed(layout)
        self.listener.on_game_started(board)
        return board
