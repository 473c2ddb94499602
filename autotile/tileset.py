"""Tileset configuration and geometry.

The tileset configuration is a small JSON file next to the tileset texture::

    {
        "texture_path": "tiles.png",
        "tile_width": 32,
        "tile_height": 32,
        "terrain_defs": [["grass", "water"], ["grass", "sand"]]
    }

The texture is a grid of tiles with one row per `terrain_defs` entry and 16
tiles per row. Only the texture's pixel size is ever read here; turning tiles
into pixels on screen belongs to whatever renders the generated map.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from PIL import Image as PILImage

from autotile import config
from autotile.types import PixelBox, TileDimensions, TileIndex

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when a tileset configuration or tileset layout is malformed.

    Always raised while setting up, before any map cell is generated.
    """

    pass


def validate_tile_size(tile_width: Any, tile_height: Any) -> TileDimensions:
    """Check tile pixel dimensions are integers within the supported range."""
    for label, value in (("width", tile_width), ("height", tile_height)):
        if (
            not isinstance(value, int)
            or isinstance(value, bool)
            or not config.MIN_TILE_SIZE <= value <= config.MAX_TILE_SIZE
        ):
            raise ConfigError(
                f"Invalid tile {label} {value!r}, expected an integer in "
                f"{config.MIN_TILE_SIZE}..{config.MAX_TILE_SIZE}"
            )
    return tile_width, tile_height


@dataclass(frozen=True)
class TilesetConfig:
    """A parsed tileset configuration file.

    Attributes:
        texture_path: Tileset texture, resolved against the config file's directory.
        tile_width: Tile width in pixels.
        tile_height: Tile height in pixels.
        terrain_defs: Terrain name pair of each tileset row.
    """

    texture_path: Path
    tile_width: int
    tile_height: int
    terrain_defs: tuple[tuple[str, ...], ...]

    @property
    def tile_size(self) -> TileDimensions:
        return self.tile_width, self.tile_height

    @classmethod
    def load(cls, path: str | Path) -> TilesetConfig:
        """Read and validate a JSON tileset configuration file.

        Raises:
            ConfigError: If the file cannot be read or parsed, or any field is
                missing or invalid.
        """
        path = Path(path)
        try:
            with path.open(encoding="utf-8") as f:
                data = json.load(f)
        except OSError as exc:
            raise ConfigError(f"Cannot read tileset config {path}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Invalid JSON in tileset config {path}: {exc}") from exc

        tileset_config = cls.from_dict(data, base_dir=path.parent)
        logger.info(
            "Loaded tileset config %s (%d terrain rows, %dx%d tiles)",
            path,
            len(tileset_config.terrain_defs),
            tileset_config.tile_width,
            tileset_config.tile_height,
        )
        return tileset_config

    @classmethod
    def from_dict(
        cls, data: Any, base_dir: str | Path | None = None
    ) -> TilesetConfig:
        """Validate an already-parsed configuration mapping.

        Args:
            data: The decoded JSON object.
            base_dir: Directory relative texture paths are resolved against.
                Defaults to the current working directory.
        """
        if not isinstance(data, dict):
            raise ConfigError("Tileset config must be a JSON object")

        missing = [
            key
            for key in (
                config.CONFIG_KEY_TEXTURE_PATH,
                config.CONFIG_KEY_TILE_WIDTH,
                config.CONFIG_KEY_TILE_HEIGHT,
                config.CONFIG_KEY_TERRAIN_DEFS,
            )
            if key not in data
        ]
        if missing:
            raise ConfigError(f"Tileset config is missing {', '.join(missing)}")

        raw_path = data[config.CONFIG_KEY_TEXTURE_PATH]
        if not isinstance(raw_path, str) or not raw_path:
            raise ConfigError("Invalid Tile-set texture path")
        texture_path = Path(raw_path)
        if not texture_path.is_absolute() and base_dir is not None:
            texture_path = Path(base_dir) / texture_path
        if not texture_path.exists() or texture_path.is_dir():
            raise ConfigError(f"Invalid Tile-set texture path: {texture_path}")

        tile_width, tile_height = validate_tile_size(
            data[config.CONFIG_KEY_TILE_WIDTH], data[config.CONFIG_KEY_TILE_HEIGHT]
        )

        terrain_defs = data[config.CONFIG_KEY_TERRAIN_DEFS]
        if not isinstance(terrain_defs, list) or not all(
            isinstance(row, list) for row in terrain_defs
        ):
            raise ConfigError("terrain_defs must be a list of terrain name lists")

        return cls(
            texture_path=texture_path,
            tile_width=tile_width,
            tile_height=tile_height,
            terrain_defs=tuple(tuple(row) for row in terrain_defs),
        )


@dataclass(frozen=True)
class TilesetLayout:
    """How a tileset texture splits into tiles.

    Tile indices run row-major from the texture's top-left tile, so tile
    `row * columns + column` sits at the given row and column.

    Attributes:
        rows: Number of tile rows.
        columns: Number of tiles per row.
        tile_width: Tile width in pixels.
        tile_height: Tile height in pixels.
    """

    rows: int
    columns: int
    tile_width: int
    tile_height: int

    @classmethod
    def from_image(
        cls, texture_path: str | Path, tile_width: int, tile_height: int
    ) -> TilesetLayout:
        """Measure the layout of a tileset texture.

        Reads only the image header. Partial tiles at the right and bottom
        edges are dropped, as when a texture is split into whole tiles.

        Raises:
            ConfigError: If the file is not a readable image.
        """
        validate_tile_size(tile_width, tile_height)
        try:
            with PILImage.open(texture_path) as image:
                image_width, image_height = image.size
        except OSError as exc:
            raise ConfigError(
                f"Cannot read tileset texture {texture_path}: {exc}"
            ) from exc

        return cls(
            rows=image_height // tile_height,
            columns=image_width // tile_width,
            tile_width=tile_width,
            tile_height=tile_height,
        )

    @property
    def tile_count(self) -> int:
        return self.rows * self.columns

    def validate(self, terrain_row_count: int) -> None:
        """Check the layout matches the terrain definitions.

        Raises:
            ConfigError: If the row count differs from the number of terrain
                rows, or a row does not hold exactly 16 tiles.
        """
        if self.rows != terrain_row_count:
            raise ConfigError(
                f"Tileset rows do not match terrain definitions "
                f"({self.rows} tileset rows, {terrain_row_count} terrain rows)"
            )
        if self.columns != config.TILES_PER_ROW:
            raise ConfigError(
                f"Each tileset row must have exactly {config.TILES_PER_ROW} tiles "
                f"(found {self.columns})"
            )

    def tile_box(self, tile_index: TileIndex) -> PixelBox:
        """Pixel box (x1, y1, x2, y2) of a tile within the texture."""
        if not 0 <= tile_index < self.tile_count:
            raise IndexError(f"Tile index {tile_index} outside tileset layout")
        row, column = divmod(tile_index, self.columns)
        x1 = column * self.tile_width
        y1 = row * self.tile_height
        return x1, y1, x1 + self.tile_width, y1 + self.tile_height
