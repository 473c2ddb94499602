from __future__ import annotations

import numpy as np

from autotile.terrain.codec import Corner, TileCodec

SCENARIO_TERRAIN_DEFS: list[tuple[str, str]] = [("grass", "water"), ("grass", "sand")]

# One hub terrain with transition tiles to each of three others
STAR_TERRAIN_DEFS: list[tuple[str, str]] = [
    ("water", "grass"),
    ("grass", "sand"),
    ("dirt", "grass"),
]


def find_corner_mismatches(tiles: np.ndarray, codec: TileCodec) -> list[str]:
    """Describe every shared corner of a tile map whose terrains disagree."""
    width, height = tiles.shape
    mismatches: list[str] = []

    for col in range(width):
        for row in range(height):
            codes = codec.corner_codes(int(tiles[col, row]))

            if col > 0:
                left = codec.corner_codes(int(tiles[col - 1, row]))
                if codes[Corner.TOP_LEFT] != left[Corner.TOP_RIGHT]:
                    mismatches.append(f"({col}, {row}) top-left vs left neighbor")
                if codes[Corner.BOTTOM_LEFT] != left[Corner.BOTTOM_RIGHT]:
                    mismatches.append(f"({col}, {row}) bottom-left vs left neighbor")

            if row > 0:
                below = codec.corner_codes(int(tiles[col, row - 1]))
                if codes[Corner.BOTTOM_LEFT] != below[Corner.TOP_LEFT]:
                    mismatches.append(f"({col}, {row}) bottom-left vs bottom neighbor")
                if codes[Corner.BOTTOM_RIGHT] != below[Corner.TOP_RIGHT]:
                    mismatches.append(
                        f"({col}, {row}) bottom-right vs bottom neighbor"
                    )

    return mismatches
