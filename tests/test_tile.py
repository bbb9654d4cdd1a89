"""Tests for tile types and the matching rule."""
import itertools

import pytest

from mahjong_solitaire.models.tile import (
    Position,
    Suit,
    Tile,
    TileType,
    can_match,
    match_class,
)

FLOWERS = [t for t in TileType if t.is_flower]
SEASONS = [t for t in TileType if t.is_season]
EXACT = [t for t in TileType if not t.is_flower and not t.is_season]


class TestTileType:
    """Test cases for TileType classification."""

    def test_variant_counts(self):
        """Test the type groups have the expected sizes."""
        assert len(TileType) == 42
        assert len(FLOWERS) == 4
        assert len(SEASONS) == 4
        assert len(EXACT) == 34

    def test_suits(self):
        """Test suit classification from the type name."""
        assert TileType.CHARACTER_9.suit == Suit.CHARACTER
        assert TileType.BAMBOO_1.suit == Suit.BAMBOO
        assert TileType.CIRCLE_5.suit == Suit.CIRCLE
        assert TileType.WIND_EAST.suit == Suit.WIND
        assert TileType.DRAGON_WHITE.suit == Suit.DRAGON
        assert TileType.FLOWER_BAMBOO.suit == Suit.FLOWER
        assert TileType.SEASON_WINTER.suit == Suit.SEASON

    def test_suited_ranks(self):
        """Test three suits of nine ranks exist."""
        for suit in (Suit.CHARACTER, Suit.BAMBOO, Suit.CIRCLE):
            assert len([t for t in TileType if t.suit == suit]) == 9

    def test_from_name(self):
        """Test parsing a type from its name."""
        assert TileType.from_name("DRAGON_RED") is TileType.DRAGON_RED

    def test_from_name_unknown(self):
        """Test unknown names raise ValueError."""
        with pytest.raises(ValueError):
            TileType.from_name("JOKER")


class TestCanMatch:
    """Test cases for the matching rule."""

    def test_reflexive(self):
        """Test every type matches itself."""
        for t in TileType:
            assert can_match(t, t)

    def test_symmetric(self):
        """Test the relation is symmetric for all pairs."""
        for a, b in itertools.product(TileType, repeat=2):
            assert can_match(a, b) == can_match(b, a)

    def test_flowers_match_each_other(self):
        """Test any flower matches any flower."""
        for a, b in itertools.product(FLOWERS, repeat=2):
            assert can_match(a, b)

    def test_seasons_match_each_other(self):
        """Test any season matches any season."""
        for a, b in itertools.product(SEASONS, repeat=2):
            assert can_match(a, b)

    def test_flower_never_matches_season(self):
        """Test flowers and seasons are separate classes."""
        for a, b in itertools.product(FLOWERS, SEASONS):
            assert not can_match(a, b)

    def test_wildcards_never_match_exact_types(self):
        """Test flower/season types never match exact types."""
        for a, b in itertools.product(FLOWERS + SEASONS, EXACT):
            assert not can_match(a, b)

    def test_exact_types_are_singletons(self):
        """Test distinct exact types never match."""
        for a, b in itertools.product(EXACT, repeat=2):
            assert can_match(a, b) == (a == b)

    def test_match_class_keys(self):
        """Test match class keys group wildcards by suit."""
        assert match_class(TileType.FLOWER_PLUM) == Suit.FLOWER
        assert match_class(TileType.SEASON_AUTUMN) == Suit.SEASON
        assert match_class(TileType.WIND_WEST) == TileType.WIND_WEST


class TestTile:
    """Test cases for Tile identity and Position values."""

    def test_identity_is_by_id(self):
        """Test equality and hash ignore type, position and flags."""
        a = Tile(id=3, type=TileType.BAMBOO_1, position=Position(0, 0, 0))
        b = Tile(id=3, type=TileType.CIRCLE_2, position=Position(5, 5, 1), removed=True)
        c = Tile(id=4, type=TileType.BAMBOO_1, position=Position(0, 0, 0))

        assert a == b
        assert hash(a) == hash(b)
        assert a != c
        assert len({a, b, c}) == 2

    def test_can_match_with(self):
        """Test the tile-level match delegates to the type rule."""
        a = Tile(id=0, type=TileType.FLOWER_PLUM, position=Position(0, 0, 0))
        b = Tile(id=1, type=TileType.FLOWER_ORCHID, position=Position(2, 0, 0))
        c = Tile(id=2, type=TileType.SEASON_SPRING, position=Position(4, 0, 0))

        assert a.can_match_with(b)
        assert not a.can_match_with(c)

    def test_position_structural_equality(self):
        """Test positions compare and hash by coordinates."""
        assert Position(1, 2, 3) == Position(1, 2, 3)
        assert Position(1, 2, 3) != Position(1, 2, 4)
        assert {Position(1, 2, 3): "a"}[Position(1, 2, 3)] == "a"

    def test_position_is_immutable(self):
        """Test positions cannot be modified."""
        position = Position(0, 0, 0)
        with pytest.raises(AttributeError):
            position.x = 1
