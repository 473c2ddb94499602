"""Per-cell tile selection for corner-matching Wang tile maps.

A cell's tile must agree with the corners it shares with tiles already placed.
Maps are filled from the bottom-left to the top-right, row by row, so when a
cell is visited its left and bottom neighbors are known and its right and top
neighbors are not. The shared corners are gathered into a four slot match
mask, every tile satisfying the mask is a candidate, and one candidate is
drawn uniformly at random.

Terrains that only border some of the other terrains need one extra rule.
Picture grass bordering both water and sand, with no water/sand transition
tiles. If the cell to the lower right ends in water at its top-right corner
and this cell's top-right corner were left free, it could become sand, and
the next cell would need a tile with sand at one corner and water at the
opposite one. Such a tile does not exist. So when the lower-right diagonal
neighbor's top-right terrain has a limited set of partners and differs from
this cell's top-left, this cell's top-right is pinned to that terrain's first
partner (grass in the example).
"""

from __future__ import annotations

import logging

import numpy as np

from autotile import config
from autotile.terrain.catalog import TerrainCatalog
from autotile.terrain.codec import Corner, TileCodec
from autotile.types import TileCoord, TileIndex
from autotile.util.rng import RNG

logger = logging.getLogger(__name__)


class NoMatchError(RuntimeError):
    """Raised when no tile in the tileset satisfies a cell's match mask.

    This means the terrain definitions and tileset cannot tile the map, e.g.
    a terrain lacks a transition tile the relaxation rule could not stand in
    for. Retrying with the same inputs cannot succeed.
    """

    def __init__(self, col: TileCoord, row: TileCoord, mask: np.ndarray) -> None:
        self.col = col
        self.row = row
        self.mask = tuple(int(slot) for slot in mask)
        shown = ", ".join(
            "*" if slot == config.MATCH_ANY else str(slot) for slot in self.mask
        )
        super().__init__(
            f"No tile matches cell ({col}, {row}) with corner mask [{shown}]"
        )


def new_match_mask() -> np.ndarray:
    """A match mask with every corner unconstrained."""
    return np.full(len(Corner), config.MATCH_ANY, dtype=np.int16)


class ConstraintEngine:
    """Chooses tiles that fit the already-placed tiles around a cell.

    The engine holds no per-map state: the grid is passed to every call, and
    the catalog and codec are only read. One engine can serve many generation
    runs.
    """

    def __init__(self, catalog: TerrainCatalog, codec: TileCodec, rng: RNG) -> None:
        """Create an engine.

        Args:
            catalog: Terrain transitions used by the relaxation rule.
            codec: Corner codes of every tile in the tileset.
            rng: Source of the uniform tie-break draws.
        """
        self.catalog = catalog
        self.codec = codec
        self.rng = rng

    @property
    def tileset_size(self) -> int:
        return self.codec.tileset_size

    def pick_tile(self, grid: np.ndarray, col: TileCoord, row: TileCoord) -> TileIndex:
        """Pick a tile for map cell (col, row).

        Args:
            grid: Placed tile indices, shape (width, height), indexed [col, row]
                with row 0 at the bottom. Left, bottom and lower-right cells of
                (col, row) must already be filled.
            col: Map column.
            row: Map row.

        Returns:
            The index of the picked tile in the tileset.

        Raises:
            NoMatchError: If no tile satisfies the cell's match mask.
        """
        mask = self.build_match_mask(grid, col, row)
        candidates = self.find_matching_tiles(mask)
        if len(candidates) == 0:
            raise NoMatchError(col, row, mask)

        selected = self.rng.randrange(len(candidates))
        return int(candidates[selected])

    def build_match_mask(
        self, grid: np.ndarray, col: TileCoord, row: TileCoord
    ) -> np.ndarray:
        """Collect the corner constraints of cell (col, row) from its neighbors."""
        mask = new_match_mask()

        # Left neighbor: its right edge is our left edge
        self._update_mask_for_tile(
            mask,
            grid,
            col - 1,
            row,
            (Corner.TOP_LEFT, Corner.TOP_RIGHT),
            (Corner.BOTTOM_LEFT, Corner.BOTTOM_RIGHT),
        )

        # Bottom neighbor: its top edge is our bottom edge. Applied second, so
        # its bottom-left value wins.
        self._update_mask_for_tile(
            mask,
            grid,
            col,
            row - 1,
            (Corner.BOTTOM_LEFT, Corner.TOP_LEFT),
            (Corner.BOTTOM_RIGHT, Corner.TOP_RIGHT),
        )

        self._relax_for_diagonal(mask, grid, col, row)
        return mask

    def find_matching_tiles(self, mask: np.ndarray) -> np.ndarray:
        """Indices of all tiles whose corners agree with every constrained slot."""
        table = self.codec.corner_table
        fits = (mask == config.MATCH_ANY) | (table == mask)
        candidates = np.flatnonzero(fits.all(axis=1))
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Mask %s matches %d tiles", mask.tolist(), len(candidates))
        return candidates

    def _update_mask_for_tile(
        self,
        mask: np.ndarray,
        grid: np.ndarray,
        col: TileCoord,
        row: TileCoord,
        *pairs: tuple[Corner, Corner],
    ) -> None:
        """Copy corners of the tile at (col, row) into the mask.

        Each pair is (mask corner, neighbor corner). Cells outside the map
        leave the mask untouched.
        """
        tile_index = self._tile_at(grid, col, row)
        if tile_index is None:
            return

        codes = self.codec.corner_codes(tile_index)
        for mask_corner, tile_corner in pairs:
            mask[mask_corner] = codes[tile_corner]

    def _relax_for_diagonal(
        self, mask: np.ndarray, grid: np.ndarray, col: TileCoord, row: TileCoord
    ) -> None:
        tile_index = self._tile_at(grid, col + 1, row - 1)
        if tile_index is None:
            return

        tile_corner = self.codec.corner_codes(tile_index)[Corner.TOP_RIGHT]
        # An unconstrained top-left counts as a mismatch too
        if mask[Corner.TOP_LEFT] == tile_corner:
            return

        transitions = self.catalog.transitions(tile_corner)
        if transitions and len(transitions) < self.catalog.max_transitions:
            logger.debug(
                "Cell (%d, %d): pinning top-right to terrain %d for diagonal "
                "terrain %d",
                col,
                row,
                transitions[0],
                tile_corner,
            )
            mask[Corner.TOP_RIGHT] = transitions[0]

    @staticmethod
    def _tile_at(grid: np.ndarray, col: TileCoord, row: TileCoord) -> TileIndex | None:
        """Tile index at (col, row), or None if the cell is outside the map."""
        width, height = grid.shape
        if col < 0 or row < 0 or col >= width or row >= height:
            return None
        return int(grid[col, row])
