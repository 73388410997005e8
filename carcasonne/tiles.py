"""Tile model: edges, features, extensions, and the pool tiles are drawn from."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple


class Edge(enum.Enum):
    """One of the four edges of a tile."""

    NORTH = "north"
    WEST = "west"
    EAST = "east"
    SOUTH = "south"


class FeatureType(enum.Enum):
    """The kind of a feature on a tile."""

    TOWN = "town"
    ROAD = "road"


class Enhancement(enum.Enum):
    """An optional enhancement on a feature."""

    SHIELD = "shield"


class Extension(enum.Enum):
    """Extra behaviour attached to a whole tile."""

    ABBEY = "abbey"


@dataclass(frozen=True)
class TileFeature:
    """A feature spanning some edges of a tile, possibly enhanced."""

    feature_type: FeatureType
    edges: Tuple[Edge, ...] = ()
    enhancement: Optional[Enhancement] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "edges", tuple(self.edges))


@dataclass(frozen=True)
class Tile:
    """A tile: its features and an optional extension."""

    features: Tuple[TileFeature, ...] = ()
    extension: Optional[Extension] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "features", tuple(self.features))


def _draw(tiles: List[Tile], rng: random.Random) -> Optional[Tile]:
    rng.shuffle(tiles)
    return tiles.pop() if tiles else None


@dataclass
class _TilePool:
    available_tiles: List[Tile] = field(default_factory=list)
    rng: random.Random = field(
        default_factory=random.Random, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        self.available_tiles = list(self.available_tiles)

    def __len__(self) -> int:
        return len(self.available_tiles)

    @classmethod
    def of(cls, tiles: Iterable[Tile]) -> "_TilePool":
        return cls(list(tiles))


@dataclass
class GameTiles(_TilePool):
    """The tile bag of a game, from which tiles are drawn at random."""

    def select_random_tile(self) -> Optional[Tile]:
        """Shuffle the pool and remove one tile from it, or return None if empty."""
        return _draw(self.available_tiles, self.rng)


@dataclass
class GameContext(_TilePool):
    """Mutable game data shared by the playing states."""

    def select_random_tile(self) -> Optional[Tile]:
        """Shuffle the pool and remove one tile from it, or return None if empty."""
        return _draw(self.available_tiles, self.rng)