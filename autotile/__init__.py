"""Procedural terrain maps from corner-matching Wang tilesets."""

from .autotiler import AutoTiler
from .generators import (
    ConstraintEngine,
    GeneratedTileMap,
    NoMatchError,
    WangMapGenerator,
)
from .terrain import Corner, TerrainCatalog, TerrainType, TileCodec
from .tileset import ConfigError, TilesetConfig, TilesetLayout

__all__ = [
    "AutoTiler",
    "ConfigError",
    "ConstraintEngine",
    "Corner",
    "GeneratedTileMap",
    "NoMatchError",
    "TerrainCatalog",
    "TerrainType",
    "TileCodec",
    "TilesetConfig",
    "TilesetLayout",
    "WangMapGenerator",
]
