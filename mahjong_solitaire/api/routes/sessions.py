"""Game session API routes."""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from ...config import get_settings
from ...models.game import GameConfig, GameSnapshot, LayoutMode
from ...models.schemas import (
    CreateSessionRequest,
    HintResponse,
    SelectRequest,
    SelectResponse,
    SessionState,
    SnapshotModel,
    TileModel,
)
from ...core.catalog import LayoutCatalog
from ...core.store import SessionEntry, SessionStore
from ...utils.helpers import board_to_dicts
from ..deps import get_layout_catalog, get_session_store

router = APIRouter(prefix="/api/sessions", tags=["sessions"])


def _get_entry(store: SessionStore, session_id: str) -> SessionEntry:
    entry = store.get(session_id)
    if entry is None:
        raise HTTPException(status_code=404, detail=f"Session not found: {session_id}")
    return entry


def _check_layout(catalog: LayoutCatalog, layout_id: Optional[str]) -> None:
    if layout_id is not None and not catalog.has_layout(layout_id):
        raise HTTPException(status_code=404, detail=f"Layout not found: {layout_id}")


def _session_state(session_id: str, entry: SessionEntry) -> dict:
    """Collect the live state of a session (caller holds the entry lock)."""
    session = entry.session
    board = session.current_board
    state = {
        "session_id": session_id,
        "config": session.config.to_dict(),
        "games_played": session.games_played,
        "games_won": session.games_won,
        "events": entry.recorder.drain(),
    }
    if board is None:
        return state

    selected = board.selected_tile
    state.update({
        "layout_id": board.layout_id,
        "tiles": [TileModel(**t) for t in board_to_dicts(board)],
        "free_tile_ids": [t.id for t in board.get_free_tiles()],
        "selected_tile_id": selected.id if selected is not None else None,
        "remaining_tiles": board.remaining_tile_count,
        "won": board.is_game_won(),
        "stuck": not board.is_game_won() and board.is_game_stuck(),
        "elapsed_time_ms": session.elapsed_time_ms,
    })
    return state


@router.post("", response_model=SessionState, status_code=201)
async def create_session(
    request: CreateSessionRequest,
    store: SessionStore = Depends(get_session_store),
    catalog: LayoutCatalog = Depends(get_layout_catalog),
) -> SessionState:
    """
    Create a session and start its first game.

    Args:
        request: CreateSessionRequest with difficulty and layout selection.
        store: SessionStore dependency.
        catalog: LayoutCatalog dependency.

    Returns:
        SessionState of the new game.
    """
    _check_layout(catalog, request.layout_id)

    settings = get_settings()
    config = GameConfig(
        difficulty=request.difficulty or settings.default_difficulty,
        layout_mode=request.layout_mode or settings.default_layout_mode,
        progressive_index=request.progressive_index,
    )
    if request.layout_id is not None:
        config.layout_mode = LayoutMode.FIXED
        config.fixed_layout_id = request.layout_id

    session_id = store.create(config)
    entry = _get_entry(store, session_id)
    with entry.lock:
        entry.session.start_new_game()
        return SessionState(**_session_state(session_id, entry))


@router.get("/{session_id}", response_model=SessionState)
async def get_session(
    session_id: str,
    store: SessionStore = Depends(get_session_store),
) -> SessionState:
    """Get the live state of a session."""
    entry = _get_entry(store, session_id)
    with entry.lock:
        return SessionState(**_session_state(session_id, entry))


@router.post("/{session_id}/new-game", response_model=SessionState)
async def new_game(
    session_id: str,
    layout_id: Optional[str] = None,
    store: SessionStore = Depends(get_session_store),
    catalog: LayoutCatalog = Depends(get_layout_catalog),
) -> SessionState:
    """Start the next game; a layout_id switches the session to fixed mode."""
    entry = _get_entry(store, session_id)
    _check_layout(catalog, layout_id)
    with entry.lock:
        entry.session.start_new_game(layout_id)
        return SessionState(**_session_state(session_id, entry))


@router.post("/{session_id}/select", response_model=SelectResponse)
async def select_tile(
    session_id: str,
    request: SelectRequest,
    store: SessionStore = Depends(get_session_store),
) -> SelectResponse:
    """
    Tap a tile. A null tile_id only re-checks win/stuck state.

    Returns:
        SelectResponse with the events emitted during the call.
    """
    entry = _get_entry(store, session_id)
    with entry.lock:
        board = entry.session.current_board
        if request.tile_id is not None and (
            board is None or board.get_tile_by_id(request.tile_id) is None
        ):
            raise HTTPException(status_code=404, detail=f"Tile not found: {request.tile_id}")

        removed = entry.session.select_tile_by_id(request.tile_id)
        return SelectResponse(removed=removed, **_session_state(session_id, entry))


@router.get("/{session_id}/hint", response_model=HintResponse)
async def get_hint(
    session_id: str,
    store: SessionStore = Depends(get_session_store),
) -> HintResponse:
    """Get a matching pair of free tiles, if one exists."""
    entry = _get_entry(store, session_id)
    with entry.lock:
        hint = entry.session.get_hint()
    if hint is None:
        return HintResponse(tile_ids=None)
    return HintResponse(tile_ids=[hint[0].id, hint[1].id])


@router.get("/{session_id}/snapshot", response_model=SnapshotModel)
async def get_snapshot(
    session_id: str,
    store: SessionStore = Depends(get_session_store),
) -> SnapshotModel:
    """Capture the session for external storage."""
    entry = _get_entry(store, session_id)
    with entry.lock:
        snapshot = entry.session.save_snapshot()
    if snapshot is None:
        raise HTTPException(status_code=404, detail="Session has no game in progress")
    return SnapshotModel(**snapshot.to_dict())


@router.post("/{session_id}/restore", response_model=SessionState)
async def restore_snapshot(
    session_id: str,
    request: SnapshotModel,
    store: SessionStore = Depends(get_session_store),
) -> SessionState:
    """Replace the session's game with one rebuilt from a snapshot."""
    entry = _get_entry(store, session_id)
    try:
        snapshot = GameSnapshot.from_dict(request.model_dump())
        with entry.lock:
            entry.session.restore_snapshot(snapshot)
            return SessionState(**_session_state(session_id, entry))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Restore failed: {str(e)}")


@router.delete("/{session_id}", status_code=204)
async def delete_session(
    session_id: str,
    store: SessionStore = Depends(get_session_store),
) -> None:
    """Drop a session."""
    if not store.delete(session_id):
        raise HTTPException(status_code=404, detail=f"Session not found: {session_id}")
