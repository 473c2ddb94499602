"""Map generation for corner-matching Wang tilesets.

- WangMapGenerator: fills a map cell by cell, bottom-left to top-right
- ConstraintEngine: picks one cell's tile from its placed neighbors
"""

from .base import BaseMapGenerator, GeneratedTileMap
from .constraints import ConstraintEngine, NoMatchError, new_match_mask
from .wang import WangMapGenerator

__all__ = [
    "BaseMapGenerator",
    "ConstraintEngine",
    "GeneratedTileMap",
    "NoMatchError",
    "WangMapGenerator",
    "new_match_mask",
]
