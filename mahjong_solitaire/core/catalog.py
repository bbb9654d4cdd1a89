"""Default in-memory layout catalog.

Layouts are ordered by approximate difficulty, easiest first. The catalog is
one implementation of LayoutProvider; sessions accept any other provider.
"""
from typing import List, Optional, Sequence

from ..models.layout import Layout
from ..models.tile import Position


def _pyramid() -> List[Position]:
    """Stepped pyramid, 35 positions over three layers."""
    positions = []
    for y in range(5):
        for x in range(y, 9 - y):
            positions.append(Position(x + 4, y + 3, 0))
    for y in range(3):
        for x in range(y, 5 - y):
            positions.append(Position(x + 6, y + 4, 1))
    positions.append(Position(8, 5, 2))
    return positions


def _diamond() -> List[Position]:
    """Flat diamond, 32 positions."""
    positions = []
    widths = [2, 4, 6, 8, 6, 4, 2]
    for y, width in enumerate(widths):
        start_x = (10 - width) // 2
        for x in range(width):
            positions.append(Position(start_x + x + 4, y + 2, 0))
    return positions


def _cross() -> List[Position]:
    """Flat cross, 45 positions (truncated to 44 by the generator)."""
    positions = []
    # Vertical bar
    for y in range(9):
        for x in range(3):
            positions.append(Position(x + 8, y + 1, 0))
    # Horizontal bar, center already filled
    for x in range(9):
        for y in range(3):
            if x < 3 or x >= 6:
                positions.append(Position(x + 5, y + 4, 0))
    return positions


def _small_square() -> List[Position]:
    """Three stacked 4x4 squares, each shifted one cell up-left."""
    positions = []
    for z in range(3):
        for y in range(4):
            for x in range(4):
                positions.append(Position(x + 7 - z, y + 3 - z, z))
    return positions


DEFAULT_LAYOUTS = [
    Layout("pyramid", "Pyramid", "Simple triangular layout", 2, _pyramid()),
    Layout("diamond", "Diamond", "Diamond-shaped layout", 2, _diamond()),
    Layout("cross", "Cross", "Simple cross pattern", 2, _cross()),
    Layout("small_square", "Small Square", "Compact square layout", 3, _small_square()),
]


class LayoutCatalog:
    """Ordered collection of layouts with never-failing lookups."""

    def __init__(self, layouts: Optional[Sequence[Layout]] = None):
        self._layouts = list(layouts if layouts is not None else DEFAULT_LAYOUTS)
        if not self._layouts:
            raise ValueError("Layout catalog needs at least one layout")

    def get_all_layouts(self) -> List[Layout]:
        return list(self._layouts)

    def get_layout_by_id(self, layout_id: str) -> Layout:
        """Find a layout by id, defaulting to the first layout."""
        for layout in self._layouts:
            if layout.id == layout_id:
                return layout
        return self._layouts[0]

    def get_layout_by_index(self, index: int) -> Layout:
        """Find a layout by index, defaulting to the first layout."""
        if index < 0 or index >= len(self._layouts):
            return self._layouts[0]
        return self._layouts[index]

    def get_layout_count(self) -> int:
        return len(self._layouts)

    def get_index_by_id(self, layout_id: str) -> int:
        for i, layout in enumerate(self._layouts):
            if layout.id == layout_id:
                return i
        return 0

    def has_layout(self, layout_id: str) -> bool:
        return any(layout.id == layout_id for layout in self._layouts)


# Singleton instance
_catalog = None


def get_catalog() -> LayoutCatalog:
    """Get or create the default catalog singleton instance."""
    global _catalog
    if _catalog is None:
        _catalog = LayoutCatalog()
    return _catalog
