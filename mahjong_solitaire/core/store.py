"""In-process session registry used by the HTTP host."""
import logging
import random
import threading
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..config import get_settings
from ..models.board import Board
from ..models.game import GameConfig
from ..models.layout import Layout, LayoutProvider
from ..models.tile import Tile
from .catalog import get_catalog
from .generator import BoardGenerator
from .session import GameSession, SessionListener

logger = logging.getLogger(__name__)


class EventRecorder(SessionListener):
    """Listener that keeps session events as plain dictionaries."""

    def __init__(self):
        self.events: List[Dict[str, Any]] = []

    def drain(self) -> List[Dict[str, Any]]:
        """Return recorded events and forget them."""
        events, self.events = self.events, []
        return events

    def on_game_started(self, board: Board) -> None:
        self.events.append({"event": "game_started", "tile_count": len(board)})

    def on_game_won(self, board: Board, elapsed_ms: int) -> None:
        self.events.append({"event": "game_won", "elapsed_ms": elapsed_ms})

    def on_game_lost(self, board: Board) -> None:
        self.events.append({
            "event": "game_lost",
            "remaining_tiles": board.remaining_tile_count,
        })

    def on_tile_selected(self, tile: Optional[Tile]) -> None:
        self.events.append({
            "event": "tile_selected",
            "tile_id": tile.id if tile is not None else None,
        })

    def on_tiles_removed(self, tile1: Tile, tile2: Tile) -> None:
        self.events.append({"event": "tiles_removed", "tile_ids": [tile1.id, tile2.id]})

    def on_layout_changed(self, layout: Layout) -> None:
        self.events.append({"event": "layout_changed", "layout_id": layout.id})


@dataclass
class SessionEntry:
    """A hosted session with its event recorder and access lock."""
    session: GameSession
    recorder: EventRecorder
    lock: threading.Lock = field(default_factory=threading.Lock)


class SessionStore:
    """Keeps live sessions by id.

    A session is not thread-safe, so callers hold the entry's lock around
    every read/mutate sequence. Each session draws its generator and layout
    seeds from the store's own random source, so a seeded store replays the
    same sequence of sessions.
    """

    def __init__(self, layouts: LayoutProvider, seed: Optional[int] = None):
        self.layouts = layouts
        self.random = random.Random(seed)
        self._sessions: Dict[str, SessionEntry] = {}
        self._lock = threading.Lock()

    def create(self, config: Optional[GameConfig] = None) -> str:
        """Register a new session (no game started) and return its id."""
        recorder = EventRecorder()
        with self._lock:
            generator_seed = self.random.getrandbits(32)
            layout_seed = self.random.getrandbits(32)
        session = GameSession(
            layouts=self.layouts,
            generator=BoardGenerator(seed=generator_seed),
            config=config,
            listener=recorder,
            rng=random.Random(layout_seed),
        )
        session_id = uuid.uuid4().hex
        with self._lock:
            self._sessions[session_id] = SessionEntry(session=session, recorder=recorder)
        logger.info("Created session %s (%d live)", session_id, len(self))
        return session_id

    def get(self, session_id: str) -> Optional[SessionEntry]:
        with self._lock:
            return self._sessions.get(session_id)

    def delete(self, session_id: str) -> bool:
        with self._lock:
            return self._sessions.pop(session_id, None) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)


# Singleton instance
_store = None


def get_store() -> SessionStore:
    """Get or create session store singleton instance."""
    global _store
    if _store is None:
        _store = SessionStore(get_catalog(), seed=get_settings().generator_seed)
    return _store
