"""
Configuration constants.

Centralizes the fixed values of the tileset format and the generator defaults.
"""

import sys

# =============================================================================
# GENERAL
# =============================================================================

# RANDOM_SEED = "wang"
RANDOM_SEED = None

# Test environment detection
IS_TEST_ENVIRONMENT = "pytest" in sys.modules

# =============================================================================
# TILESET FORMAT
# =============================================================================

# Each tileset row holds two pure terrain tiles and 14 transition tiles,
# addressed by a 4 bit corner code (0 - 15).
TERRAINS_PER_ROW = 2
TILES_PER_ROW = 16

# Inclusive bounds for tile width and height, in pixels
MIN_TILE_SIZE = 1
MAX_TILE_SIZE = 128

# Keys of the JSON tileset configuration file
CONFIG_KEY_TEXTURE_PATH = "texture_path"
CONFIG_KEY_TILE_WIDTH = "tile_width"
CONFIG_KEY_TILE_HEIGHT = "tile_height"
CONFIG_KEY_TERRAIN_DEFS = "terrain_defs"

# =============================================================================
# MAP GENERATION
# =============================================================================

DEFAULT_MAP_WIDTH = 16
DEFAULT_MAP_HEIGHT = 12

# Match mask slot value meaning "any terrain fits this corner"
MATCH_ANY = 127

# Grid value of a cell that has not been visited yet
EMPTY_TILE = -1

# RNG stream used by map generators when no random source is injected
MAP_RNG_DOMAIN = "map.wang_tiles"
