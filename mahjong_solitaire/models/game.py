"""Game configuration and persisted session snapshot models."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class Difficulty(str, Enum):
    """Difficulty selects the board acceptance policy."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def requires_solvable(self) -> bool:
        """EASY and MEDIUM boards go through the solvability filter."""
        return self != Difficulty.HARD


class LayoutMode(str, Enum):
    """How the next layout is chosen."""
    FIXED = "fixed"              # Same layout every game
    RANDOM = "random"            # Random layout each game
    PROGRESSIVE = "progressive"  # Walk the catalog, one step per win


@dataclass
class GameConfig:
    """Session configuration, mutated between games."""
    difficulty: Difficulty = Difficulty.MEDIUM
    layout_mode: LayoutMode = LayoutMode.RANDOM
    fixed_layout_id: Optional[str] = None
    progressive_index: int = 0

    def advance_progressive(self) -> None:
        self.progressive_index += 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "difficulty": self.difficulty.value,
            "layout_mode": self.layout_mode.value,
            "fixed_layout_id": self.fixed_layout_id,
            "progressive_index": self.progressive_index,
        }


@dataclass(frozen=True)
class TileState:
    """Persisted state of a single tile."""
    id: int
    type: str
    x: int
    y: int
    z: int
    removed: bool

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "type": self.type,
            "x": self.x,
            "y": self.y,
            "z": self.z,
            "removed": self.removed,
        }


@dataclass
class GameSnapshot:
    """Complete state of a session, produced for an external store."""
    layout_id: str
    tile_states: List[TileState] = field(default_factory=list)
    selected_tile_id: int = -1
    elapsed_time_ms: int = 0
    start_time_ms: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "layout_id": self.layout_id,
            "tile_states": [t.to_dict() for t in self.tile_states],
            "selected_tile_id": self.selected_tile_id,
            "elapsed_time_ms": self.elapsed_time_ms,
            "start_time_ms": self.start_time_ms,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameSnapshot":
        """Build a snapshot from its dictionary form.

        Raises:
            ValueError: If a required field is missing or malformed.
        """
        try:
            tile_states = [
                TileState(
                    id=int(t["id"]),
                    type=str(t["type"]),
                    x=int(t["x"]),
                    y=int(t["y"]),
                    z=int(t["z"]),
                    removed=bool(t.get("removed", False)),
                )
                for t in data.get("tile_states", [])
            ]
            return cls(
                layout_id=str(data["layout_id"]),
                tile_states=tile_states,
                selected_tile_id=int(data.get("selected_tile_id", -1)),
                elapsed_time_ms=int(data.get("elapsed_time_ms", 0)),
                start_time_ms=int(data.get("start_time_ms", 0)),
            )
        except (KeyError, TypeError) as e:
            raise ValueError(f"Malformed snapshot: {e}") from e
