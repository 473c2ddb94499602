from __future__ import annotations

import json
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from PIL import Image as PILImage

from autotile.terrain.catalog import TerrainCatalog
from autotile.terrain.codec import TileCodec
from autotile.util import rng
from tests.helpers import SCENARIO_TERRAIN_DEFS

TILE_PX = 8


@pytest.fixture(autouse=True)
def reseed_rng() -> Iterator[None]:
    """Give every test the same deterministic global random streams."""
    rng.init("autotile-tests")
    yield
    rng.init("autotile-tests")


@pytest.fixture
def scenario_catalog() -> TerrainCatalog:
    """grass <-> water, grass <-> sand, no water/sand transition tiles."""
    return TerrainCatalog(SCENARIO_TERRAIN_DEFS)


@pytest.fixture
def scenario_codec(scenario_catalog: TerrainCatalog) -> TileCodec:
    return TileCodec(scenario_catalog.rows)


@pytest.fixture
def write_tileset(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a blank tileset texture plus its JSON config.

    Returns the config path. The texture is `rows` x `columns` tiles of
    TILE_PX pixels unless overridden.
    """

    def _write(
        terrain_defs: list[list[str]] | None = None,
        rows: int | None = None,
        columns: int = 16,
        tile_size: int = TILE_PX,
        **overrides: object,
    ) -> Path:
        if terrain_defs is None:
            terrain_defs = [list(row) for row in SCENARIO_TERRAIN_DEFS]
        if rows is None:
            rows = len(terrain_defs)

        texture = tmp_path / "tiles.png"
        PILImage.new("RGBA", (columns * TILE_PX, rows * TILE_PX)).save(texture)

        data: dict[str, object] = {
            "texture_path": "tiles.png",
            "tile_width": tile_size,
            "tile_height": tile_size,
            "terrain_defs": terrain_defs,
        }
        data.update(overrides)
        config_path = tmp_path / "tileset.json"
        config_path.write_text(json.dumps(data), encoding="utf-8")
        return config_path

    return _write
