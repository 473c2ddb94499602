"""Corner-matching Wang tile map generator.

See: http://www.cr31.co.uk/stagecast/wang/2corn.html
"""

from __future__ import annotations

import logging

import numpy as np

from autotile import config
from autotile.generators.base import BaseMapGenerator, GeneratedTileMap
from autotile.generators.constraints import ConstraintEngine
from autotile.terrain.catalog import TerrainCatalog
from autotile.terrain.codec import TileCodec
from autotile.types import TileCoord, TileDimensions
from autotile.util import rng as rng_module
from autotile.util.rng import RNG

logger = logging.getLogger(__name__)


class WangMapGenerator(BaseMapGenerator):
    """Fills a map with tiles whose shared corners always match.

    Cells are visited from the bottom-left to the top-right, row by row, so
    the left, bottom and lower-right neighbors of every cell are placed before
    it. Each call to generate() builds a new, independently randomized map.
    """

    def __init__(
        self,
        map_width: TileCoord,
        map_height: TileCoord,
        catalog: TerrainCatalog,
        codec: TileCodec | None = None,
        rng: RNG | None = None,
        tile_size: TileDimensions | None = None,
    ) -> None:
        """Create a generator.

        Args:
            map_width: Map width in tiles.
            map_height: Map height in tiles.
            catalog: Terrain definitions of the tileset.
            codec: Tile index encoding. Built from the catalog's rows if omitted.
            rng: Random source. Defaults to the shared "map.wang_tiles" stream.
            tile_size: Tile pixel size, passed through to the generated map.
        """
        super().__init__(map_width, map_height)
        if codec is None:
            codec = TileCodec(catalog.rows)
        if rng is None:
            rng = rng_module.get(config.MAP_RNG_DOMAIN)
        self.catalog = catalog
        self.codec = codec
        self.tile_size = tile_size
        self.engine = ConstraintEngine(catalog, codec, rng)

    def generate(self) -> GeneratedTileMap:
        """Generate a new terrain map.

        Raises:
            NoMatchError: If some cell has no fitting tile. No partial map is
                returned.
        """
        tiles = np.full(
            (self.map_width, self.map_height), config.EMPTY_TILE, dtype=np.int32
        )

        # Iterate on map cells from bottom-left to top-right
        for row in range(self.map_height):
            for col in range(self.map_width):
                tiles[col, row] = self.engine.pick_tile(tiles, col, row)

        logger.info(
            "Generated %dx%d map from %d-tile tileset",
            self.map_width,
            self.map_height,
            self.codec.tileset_size,
        )
        return GeneratedTileMap(tiles=tiles, tile_size=self.tile_size)
