from __future__ import annotations

# =============================================================================
# TILE-BASED COORDINATE SYSTEMS (Always integers)
# =============================================================================

TileCoord = int  # Column or row of a map cell, row 0 is the bottom row

MapTilePos = tuple[TileCoord, TileCoord]  # Example: (5, 3) = column 5, row 3

# =============================================================================
# TERRAIN & TILESET TYPES
# =============================================================================

# Small integer assigned to each distinct terrain name, in order of appearance
TerrainID = int

# Position of a tile in the tileset, row-major: row * 16 + column
TileIndex = int

# Terrain codes of one tile's corners: (top-left, top-right, bottom-left, bottom-right)
CornerCodes = tuple[TerrainID, TerrainID, TerrainID, TerrainID]

# Individual tile dimensions in pixels
TileDimensions = tuple[int, int]  # Example: (32, 32) = 32x32 pixel tiles

# Pixel box of a tile inside the tileset texture: (x1, y1, x2, y2)
PixelBox = tuple[int, int, int, int]

# =============================================================================
# UTILITY TYPES
# =============================================================================

# Master seed for the random streams. None means non-deterministic.
RandomSeed = int | str | None
