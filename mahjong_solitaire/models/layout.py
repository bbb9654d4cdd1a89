"""Board layout models and the layout provider interface."""
from dataclasses import dataclass
from typing import Protocol, Sequence, Tuple

from .tile import Position


@dataclass(frozen=True)
class Layout:
    """A named, fixed set of grid positions defining a board's shape."""
    id: str
    name: str
    description: str
    difficulty: int  # 1 ~ 10
    positions: Tuple[Position, ...]

    def __post_init__(self):
        # Accept any sequence, store an immutable tuple
        object.__setattr__(self, "positions", tuple(self.positions))

    @property
    def tile_count(self) -> int:
        return len(self.positions)

    def is_valid(self) -> bool:
        """Check the layout holds at least one pair."""
        return self.tile_count >= 2

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "difficulty": self.difficulty,
            "tile_count": self.tile_count,
            "positions": [p.to_dict() for p in self.positions],
        }


class LayoutProvider(Protocol):
    """Catalog of layouts consumed by the game session.

    Lookups never fail: unknown ids and out-of-range indices resolve to the
    default (first) layout, and unknown ids map to index 0.
    """

    def get_all_layouts(self) -> Sequence[Layout]:
        ...

    def get_layout_by_id(self, layout_id: str) -> Layout:
        ...

    def get_layout_by_index(self, index: int) -> Layout:
        ...

    def get_layout_count(self) -> int:
        ...

    def get_index_by_id(self, layout_id: str) -> int:
        ...
