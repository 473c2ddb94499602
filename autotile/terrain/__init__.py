"""Terrain definitions and the tile index <-> corner terrain encoding."""

from .catalog import TerrainCatalog, TerrainType
from .codec import CORNER_BITS, Corner, TileCodec

__all__ = [
    "CORNER_BITS",
    "Corner",
    "TerrainCatalog",
    "TerrainType",
    "TileCodec",
]
