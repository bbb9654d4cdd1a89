"""Tile data models: grid positions, tile types and the matching rule."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Union


@dataclass(frozen=True)
class Position:
    """Grid cell (column, row, layer). Higher z sits above lower z."""
    x: int
    y: int
    z: int

    def offset(self, dx: int = 0, dy: int = 0, dz: int = 0) -> "Position":
        """Return the position shifted by the given deltas."""
        return Position(self.x + dx, self.y + dy, self.z + dz)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"x": self.x, "y": self.y, "z": self.z}


class Suit(str, Enum):
    """Suit category of a tile type."""
    CHARACTER = "character"
    BAMBOO = "bamboo"
    CIRCLE = "circle"
    WIND = "wind"
    DRAGON = "dragon"
    FLOWER = "flower"
    SEASON = "season"


class TileType(str, Enum):
    """Mahjong tile type.

    Suited, wind and dragon tiles only match themselves. Any flower matches
    any other flower and any season matches any other season.
    """
    # Characters (Man) 1-9
    CHARACTER_1 = "CHARACTER_1"
    CHARACTER_2 = "CHARACTER_2"
    CHARACTER_3 = "CHARACTER_3"
    CHARACTER_4 = "CHARACTER_4"
    CHARACTER_5 = "CHARACTER_5"
    CHARACTER_6 = "CHARACTER_6"
    CHARACTER_7 = "CHARACTER_7"
    CHARACTER_8 = "CHARACTER_8"
    CHARACTER_9 = "CHARACTER_9"
    # Bamboos (Sou) 1-9
    BAMBOO_1 = "BAMBOO_1"
    BAMBOO_2 = "BAMBOO_2"
    BAMBOO_3 = "BAMBOO_3"
    BAMBOO_4 = "BAMBOO_4"
    BAMBOO_5 = "BAMBOO_5"
    BAMBOO_6 = "BAMBOO_6"
    BAMBOO_7 = "BAMBOO_7"
    BAMBOO_8 = "BAMBOO_8"
    BAMBOO_9 = "BAMBOO_9"
    # Circles (Pin) 1-9
    CIRCLE_1 = "CIRCLE_1"
    CIRCLE_2 = "CIRCLE_2"
    CIRCLE_3 = "CIRCLE_3"
    CIRCLE_4 = "CIRCLE_4"
    CIRCLE_5 = "CIRCLE_5"
    CIRCLE_6 = "CIRCLE_6"
    CIRCLE_7 = "CIRCLE_7"
    CIRCLE_8 = "CIRCLE_8"
    CIRCLE_9 = "CIRCLE_9"
    # Winds
    WIND_NORTH = "WIND_NORTH"
    WIND_EAST = "WIND_EAST"
    WIND_SOUTH = "WIND_SOUTH"
    WIND_WEST = "WIND_WEST"
    # Dragons
    DRAGON_RED = "DRAGON_RED"
    DRAGON_GREEN = "DRAGON_GREEN"
    DRAGON_WHITE = "DRAGON_WHITE"
    # Flowers (any flower matches any flower)
    FLOWER_PLUM = "FLOWER_PLUM"
    FLOWER_ORCHID = "FLOWER_ORCHID"
    FLOWER_CHRYSANTHEMUM = "FLOWER_CHRYSANTHEMUM"
    FLOWER_BAMBOO = "FLOWER_BAMBOO"
    # Seasons (any season matches any season)
    SEASON_SPRING = "SEASON_SPRING"
    SEASON_SUMMER = "SEASON_SUMMER"
    SEASON_AUTUMN = "SEASON_AUTUMN"
    SEASON_WINTER = "SEASON_WINTER"

    @property
    def suit(self) -> Suit:
        """Suit category, derived from the member name prefix."""
        return Suit(self.name.split("_", 1)[0].lower())

    @property
    def is_flower(self) -> bool:
        return self.suit == Suit.FLOWER

    @property
    def is_season(self) -> bool:
        return self.suit == Suit.SEASON

    @classmethod
    def from_name(cls, name: str) -> "TileType":
        """Parse a tile type from its member name.

        Raises:
            ValueError: If the name is not a known tile type.
        """
        try:
            return cls[name]
        except KeyError:
            raise ValueError(f"Unknown tile type: '{name}'") from None


# Match-class key: the type itself for exact tiles, the suit for wildcards
MatchClass = Union[TileType, Suit]


def match_class(tile_type: TileType) -> MatchClass:
    """Return the key of the match class a tile type belongs to."""
    if tile_type.is_flower:
        return Suit.FLOWER
    if tile_type.is_season:
        return Suit.SEASON
    return tile_type


def can_match(a: TileType, b: TileType) -> bool:
    """Check whether two tile types can be removed as a pair."""
    return match_class(a) == match_class(b)


@dataclass(eq=False)
class Tile:
    """A tile on the board. Identity is the id; flags are mutable."""
    id: int
    type: TileType
    position: Position
    selected: bool = field(default=False)
    removed: bool = field(default=False)

    def can_match_with(self, other: "Tile") -> bool:
        return can_match(self.type, other.type)

    def __eq__(self, other):
        if not isinstance(other, Tile):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)

    def __repr__(self):
        return (
            f"Tile({self.id}, {self.type.name}, "
            f"({self.position.x}, {self.position.y}, {self.position.z}))"
        )
