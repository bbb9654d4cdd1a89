"""Pydantic schemas for API request/response validation."""
from pydantic import BaseModel, Field
from typing import Dict, List, Any, Optional

from .game import Difficulty, LayoutMode


class PositionModel(BaseModel):
    """Grid position."""
    x: int = Field(..., description="Column")
    y: int = Field(..., description="Row")
    z: int = Field(default=0, ge=0, description="Layer")


class TileModel(BaseModel):
    """Tile on a board."""
    id: int = Field(..., description="Tile ID, unique within the board")
    type: str = Field(..., description="Tile type name (e.g. BAMBOO_3)")
    x: int = Field(..., description="Column")
    y: int = Field(..., description="Row")
    z: int = Field(..., description="Layer")
    selected: bool = Field(default=False, description="Whether the tile is selected")
    removed: bool = Field(default=False, description="Whether the tile was removed")


class LayoutSummary(BaseModel):
    """Layout without its positions."""
    id: str = Field(..., description="Layout ID")
    name: str = Field(..., description="Display name")
    description: str = Field(default="", description="Layout description")
    difficulty: int = Field(..., ge=1, le=10, description="Difficulty rating (1-10)")
    tile_count: int = Field(..., description="Number of positions")


class LayoutDetail(LayoutSummary):
    """Layout with its positions."""
    positions: List[PositionModel] = Field(default=[], description="Grid positions")


class LayoutListResponse(BaseModel):
    """Response schema for the layout list."""
    layouts: List[LayoutSummary] = Field(default=[], description="Available layouts")


class GenerateRequest(BaseModel):
    """Request schema for board generation."""
    layout_id: Optional[str] = Field(default=None, description="Catalog layout ID")
    positions: Optional[List[PositionModel]] = Field(
        default=None, description="Custom positions (used when layout_id is not set)"
    )
    difficulty: Difficulty = Field(default=Difficulty.MEDIUM, description="Difficulty")
    solvable: Optional[bool] = Field(
        default=None, description="Force the solvability filter on/off (default: by difficulty)"
    )
    seed: Optional[int] = Field(default=None, description="Random seed for reproducible boards")


class SimulationStats(BaseModel):
    """Solvability playout statistics."""
    total_tiles: int = Field(..., description="Tiles on the board")
    removed_tiles: int = Field(..., description="Tiles removed by the playout")
    moves: int = Field(..., description="Pairs removed by the playout")
    removal_rate: float = Field(..., ge=0, le=1, description="Removed / total")
    solvable: bool = Field(..., description="Whether the removal rate reaches the threshold")


class GenerateResponse(BaseModel):
    """Response schema for board generation."""
    layout_id: str = Field(..., description="Layout the board was generated from")
    tiles: List[TileModel] = Field(default=[], description="Generated tiles")
    simulation: SimulationStats = Field(..., description="Playout statistics")
    generation_time_ms: int = Field(default=0, description="Generation time in milliseconds")


class SimulateRequest(BaseModel):
    """Request schema for a solvability playout."""
    tiles: List[TileModel] = Field(..., description="Board tiles")
    layout_id: str = Field(default="custom", description="Layout ID of the board")


class CreateSessionRequest(BaseModel):
    """Request schema for session creation."""
    difficulty: Optional[Difficulty] = Field(default=None, description="Difficulty")
    layout_mode: Optional[LayoutMode] = Field(default=None, description="Layout selection mode")
    layout_id: Optional[str] = Field(default=None, description="Layout ID (implies fixed mode)")
    progressive_index: int = Field(default=0, ge=0, description="Starting progressive index")


class SelectRequest(BaseModel):
    """Request schema for tile selection. A null tile only re-checks the game state."""
    tile_id: Optional[int] = Field(default=None, description="Tile ID")


class SessionState(BaseModel):
    """Live session state."""
    session_id: str = Field(..., description="Session ID")
    config: Dict[str, Any] = Field(..., description="Session configuration")
    layout_id: Optional[str] = Field(default=None, description="Current layout ID")
    tiles: List[TileModel] = Field(default=[], description="Board tiles")
    free_tile_ids: List[int] = Field(default=[], description="Currently free tiles")
    selected_tile_id: Optional[int] = Field(default=None, description="Selected tile ID")
    remaining_tiles: int = Field(default=0, description="Tiles left on the board")
    won: bool = Field(default=False, description="All tiles removed")
    stuck: bool = Field(default=False, description="No matching free pair left")
    elapsed_time_ms: int = Field(default=0, description="Time since the game started")
    games_played: int = Field(default=0, description="Games started in this session")
    games_won: int = Field(default=0, description="Games won in this session")
    events: List[Dict[str, Any]] = Field(default=[], description="Events emitted by the call")


class SelectResponse(SessionState):
    """Response schema for tile selection."""
    removed: bool = Field(default=False, description="Whether a pair was removed")


class HintResponse(BaseModel):
    """Response schema for hints."""
    tile_ids: Optional[List[int]] = Field(default=None, description="Matching free pair, if any")


class TileStateModel(BaseModel):
    """Persisted tile state."""
    id: int
    type: str
    x: int
    y: int
    z: int
    removed: bool = False


class SnapshotModel(BaseModel):
    """Persisted session snapshot."""
    layout_id: str = Field(..., description="Layout ID")
    tile_states: List[TileStateModel] = Field(default=[], description="Tile states")
    selected_tile_id: int = Field(default=-1, description="Selected tile ID (-1 if none)")
    elapsed_time_ms: int = Field(default=0, ge=0, description="Elapsed play time")
    start_time_ms: int = Field(default=0, description="Start time (epoch ms)")
