"""Fluent builders for tile features, tiles and whole tile sets."""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from carcasonne.tiles import (
    Edge,
    Enhancement,
    Extension,
    FeatureType,
    GameTiles,
    Tile,
    TileFeature,
)


class TileFeatureBuilder:
    """Build a `TileFeature` from a type, its edges and an optional enhancement."""

    def __init__(self, feature_type: FeatureType) -> None:
        self._feature_type = feature_type
        self._edges: Tuple[Edge, ...] = ()
        self._enhancement: Optional[Enhancement] = None

    def edges(self, edges: Iterable[Edge]) -> TileFeatureBuilder:
        """Set the edges the feature occupies, replacing any set before."""
        self._edges = tuple(edges)
        return self

    def enhancement(self, enhancement: Enhancement) -> TileFeatureBuilder:
        """Set the feature's enhancement."""
        self._enhancement = enhancement
        return self

    def build(self) -> TileFeature:
        """Return the finished feature."""
        return TileFeature(self._feature_type, self._edges, self._enhancement)


class TileBuilder:
    """Build a `Tile` feature by feature, with an optional extension."""

    def __init__(self) -> None:
        self._features: List[TileFeature] = []
        self._extension: Optional[Extension] = None

    def _add(self, builder: TileFeatureBuilder) -> TileBuilder:
        self._features.append(builder.build())
        return self

    def add_town(self, edges: Iterable[Edge]) -> TileBuilder:
        """Add a town covering ``edges``."""
        return self._add(TileFeatureBuilder(FeatureType.TOWN).edges(edges))

    def add_shielded_town(self, edges: Iterable[Edge]) -> TileBuilder:
        """Add a town with a shield covering ``edges``."""
        return self._add(
            TileFeatureBuilder(FeatureType.TOWN)
            .edges(edges)
            .enhancement(Enhancement.SHIELD)
        )

    def add_road(self, edges: Iterable[Edge]) -> TileBuilder:
        """Add a road covering ``edges``."""
        return self._add(TileFeatureBuilder(FeatureType.ROAD).edges(edges))

    def add_abbey(self) -> TileBuilder:
        """Give the tile an abbey extension."""
        self._extension = Extension.ABBEY
        return self

    def build(self) -> Tile:
        """Return the finished tile."""
        return Tile(tuple(self._features), self._extension)


class GameBuilder:
    """Collect tiles, in given quantities, into a `GameTiles` set."""

    def __init__(self) -> None:
        self._tiles: List[Tile] = []

    def add_tiles(self, tile: Tile, quantity: int) -> GameBuilder:
        """Append ``quantity`` copies of ``tile``."""
        if quantity < 0:
            raise ValueError(f"quantity must be non-negative, got {quantity}")
        self._tiles.extend([tile] * quantity)
        return self

    def build(self) -> GameTiles:
        """Return a tile set holding every tile added, in order."""
        return GameTiles(list(self._tiles))