"""AutoTiler: procedurally generate terrain maps from a tileset configuration.

Wires a tileset configuration, its terrain catalog and tile encoding to a
WangMapGenerator. All configuration checks run in the constructor, so a
constructed AutoTiler can always generate maps.

Usage:
    tiler = AutoTiler.from_config_file(16, 12, "assets/tileset.json")
    tile_map = tiler.generate_map()
"""

from __future__ import annotations

import logging
from pathlib import Path

from autotile.generators.base import GeneratedTileMap
from autotile.generators.wang import WangMapGenerator
from autotile.terrain.catalog import TerrainCatalog
from autotile.terrain.codec import TileCodec
from autotile.tileset import TilesetConfig, TilesetLayout
from autotile.types import TileCoord
from autotile.util.rng import RNG

logger = logging.getLogger(__name__)


class AutoTiler:
    """Generates corner-matching terrain maps for one tileset.

    Attributes:
        tileset_config: The validated tileset configuration.
        layout: Tileset geometry, checked against the terrain rows.
        catalog: Terrain ids and transitions.
        codec: Tile index to corner terrain mapping.
    """

    def __init__(
        self,
        map_width: TileCoord,
        map_height: TileCoord,
        tileset_config: TilesetConfig,
        layout: TilesetLayout | None = None,
        rng: RNG | None = None,
    ) -> None:
        """Set up terrain tables and the generator.

        Args:
            map_width: Map width in tiles.
            map_height: Map height in tiles.
            tileset_config: Validated tileset configuration.
            layout: Tileset geometry. Measured from the configured texture if
                omitted.
            rng: Random source for tile selection.

        Raises:
            ConfigError: If the terrain definitions or the tileset layout are
                invalid.
            ValueError: If the map dimensions are not positive.
        """
        self.map_width = map_width
        self.map_height = map_height
        self.tileset_config = tileset_config

        self.catalog = TerrainCatalog(tileset_config.terrain_defs)

        if layout is None:
            layout = TilesetLayout.from_image(
                tileset_config.texture_path,
                tileset_config.tile_width,
                tileset_config.tile_height,
            )
        layout.validate(self.catalog.row_count)
        self.layout = layout

        self.codec = TileCodec(self.catalog.rows)
        self.generator = WangMapGenerator(
            map_width,
            map_height,
            self.catalog,
            codec=self.codec,
            rng=rng,
            tile_size=tileset_config.tile_size,
        )
        logger.info(
            "AutoTiler ready: %d terrains, %d tiles, %dx%d map",
            len(self.catalog),
            self.codec.tileset_size,
            map_width,
            map_height,
        )

    @classmethod
    def from_config_file(
        cls,
        map_width: TileCoord,
        map_height: TileCoord,
        config_path: str | Path,
        rng: RNG | None = None,
    ) -> AutoTiler:
        """Load a JSON tileset configuration and build an AutoTiler for it."""
        tileset_config = TilesetConfig.load(config_path)
        return cls(map_width, map_height, tileset_config, rng=rng)

    @property
    def tile_width(self) -> int:
        return self.tileset_config.tile_width

    @property
    def tile_height(self) -> int:
        return self.tileset_config.tile_height

    @property
    def tileset_size(self) -> int:
        return self.codec.tileset_size

    def generate_map(self) -> GeneratedTileMap:
        """Procedurally generate a new terrain map."""
        return self.generator.generate()
