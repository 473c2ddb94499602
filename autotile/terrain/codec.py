"""Mapping between tile indices and corner terrain codes.

Within a tileset row, the low four bits of a tile's index say which of the
row's two terrains sits in each corner::

    bit 0 (1) -> top-left       bit 1 (2) -> top-right
    bit 2 (4) -> bottom-left    bit 3 (8) -> bottom-right

A clear bit selects the row's first terrain, a set bit its second. Tile 0 of
a ("grass", "water") row is all grass, tile 15 all water, tile 3 has water
along its top edge. The row itself is `tile_index // 16`.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import IntEnum

import numpy as np

from autotile import config
from autotile.types import CornerCodes, TerrainID, TileIndex


class Corner(IntEnum):
    """Corner slots, in the order used by corner codes and match masks."""

    TOP_LEFT = 0
    TOP_RIGHT = 1
    BOTTOM_LEFT = 2
    BOTTOM_RIGHT = 3


# Bit of the tile index that selects each corner's terrain
CORNER_BITS: tuple[int, ...] = (0x1, 0x2, 0x4, 0x8)

# Terrain pair of the implicit single row of a codec without a row table
_RAW_ROW: tuple[TerrainID, TerrainID] = (0, 1)


class TileCodec:
    """Translates tile indices to corner terrain ids for one tileset.

    When built without a row table, every row resolves through the implicit
    (0, 1) pair, so corner codes are the raw selector bits. This suits plain
    two-terrain Wang sets and tests that reason in bits.
    """

    def __init__(
        self,
        rows: Sequence[tuple[TerrainID, TerrainID]] | None = None,
        row_count: int | None = None,
    ) -> None:
        """Create a codec.

        Args:
            rows: Terrain id pair of each tileset row, usually
                `TerrainCatalog.rows`. None for the raw selector variant.
            row_count: Number of rows of the raw variant. Ignored when rows
                are given; defaults to 1.
        """
        self._raw = rows is None
        if rows is None:
            rows = [_RAW_ROW] * (row_count if row_count is not None else 1)
        self._rows = tuple((int(a), int(b)) for a, b in rows)
        self.tileset_size = len(self._rows) * config.TILES_PER_ROW

        # Shape (tileset_size, 4): terrain id of each corner of each tile
        table = np.empty((self.tileset_size, len(Corner)), dtype=np.int16)
        for tile_index in range(self.tileset_size):
            table[tile_index] = self._decode(tile_index)
        table.flags.writeable = False
        self.corner_table = table

    @property
    def raw(self) -> bool:
        return self._raw

    @property
    def row_count(self) -> int:
        return len(self._rows)

    @staticmethod
    def selector_bits(tile_index: TileIndex) -> tuple[int, int, int, int]:
        """Return the 0/1 terrain selector of each corner of a tile."""
        return (
            tile_index & 0x1,
            (tile_index & 0x2) >> 1,
            (tile_index & 0x4) >> 2,
            (tile_index & 0x8) >> 3,
        )

    @staticmethod
    def compose(selectors: Sequence[int], row: int = 0) -> TileIndex:
        """Build the tile index with the given corner selectors in a tileset row.

        Inverse of `selector_bits` combined with `tile_index // 16`.
        """
        index = row * config.TILES_PER_ROW
        for bit, selector in zip(CORNER_BITS, selectors, strict=True):
            if selector:
                index |= bit
        return index

    def row_terrains(self, tile_index: TileIndex) -> tuple[TerrainID, TerrainID]:
        """Terrain pair of the row a tile belongs to."""
        self._check_index(tile_index)
        return self._rows[tile_index // config.TILES_PER_ROW]

    def corner_codes(self, tile_index: TileIndex) -> CornerCodes:
        """Terrain id at each corner of a tile: (TL, TR, BL, BR).

        Raises:
            IndexError: If tile_index is outside the tileset. Indices produced by
                the generator are always in range, so this means a caller bug.
        """
        self._check_index(tile_index)
        tl, tr, bl, br = self.corner_table[tile_index]
        return int(tl), int(tr), int(bl), int(br)

    def _check_index(self, tile_index: TileIndex) -> None:
        if not 0 <= tile_index < self.tileset_size:
            raise IndexError(
                f"Tile index {tile_index} outside tileset of {self.row_count} rows "
                f"({self.tileset_size} tiles)"
            )

    def _decode(self, tile_index: TileIndex) -> CornerCodes:
        terrain_row = self._rows[tile_index // config.TILES_PER_ROW]
        tl, tr, bl, br = (terrain_row[bit] for bit in self.selector_bits(tile_index))
        return tl, tr, bl, br
