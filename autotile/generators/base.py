"""Base classes for map generation."""

from __future__ import annotations

import abc
from dataclasses import dataclass

import numpy as np

from autotile.types import TileCoord, TileDimensions


@dataclass
class GeneratedTileMap:
    """The output of a map generator.

    Attributes:
        tiles: 2D numpy array of tileset indices, shape (width, height),
            indexed [col, row] with row 0 at the bottom of the map.
        tile_size: Pixel size of one tile, for the renderer.
    """

    tiles: np.ndarray
    tile_size: TileDimensions | None = None

    @property
    def width(self) -> TileCoord:
        return self.tiles.shape[0]

    @property
    def height(self) -> TileCoord:
        return self.tiles.shape[1]

    def rows_top_down(self) -> list[list[int]]:
        """Tile indices as rows of a screen, top row first."""
        return [
            [int(tile) for tile in self.tiles[:, row]]
            for row in range(self.height - 1, -1, -1)
        ]


class BaseMapGenerator(abc.ABC):
    """Abstract base class for map generation algorithms."""

    def __init__(self, map_width: TileCoord, map_height: TileCoord) -> None:
        if map_width <= 0 or map_height <= 0:
            raise ValueError(
                f"Map dimensions must be positive, got {map_width}x{map_height}"
            )
        self.map_width = map_width
        self.map_height = map_height

    @abc.abstractmethod
    def generate(self) -> GeneratedTileMap:
        """Generate a complete tile map."""
        raise NotImplementedError
