"""Generate a map from a tileset configuration and print its tile indices."""

from __future__ import annotations

import argparse
import logging
import sys

from . import config
from .autotiler import AutoTiler
from .generators.constraints import NoMatchError
from .util import rng

logger = logging.getLogger("autotile")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="autotile",
        description="Generate a corner-matching Wang tile map.",
    )
    parser.add_argument("config", help="Path to the tileset JSON configuration")
    parser.add_argument(
        "--width",
        type=int,
        default=config.DEFAULT_MAP_WIDTH,
        help="Map width in tiles",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=config.DEFAULT_MAP_HEIGHT,
        help="Map height in tiles",
    )
    parser.add_argument(
        "--seed",
        default=config.RANDOM_SEED,
        help="Master random seed (random map if omitted)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log every tile decision"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    rng.init(args.seed)

    try:
        tiler = AutoTiler.from_config_file(args.width, args.height, args.config)
        tile_map = tiler.generate_map()
    # ConfigError is a ValueError
    except (ValueError, NoMatchError) as exc:
        logger.error("%s", exc)
        return 1

    cell_width = len(str(tiler.tileset_size - 1))
    for tile_row in tile_map.rows_top_down():
        print(" ".join(f"{tile:>{cell_width}}" for tile in tile_row))
    return 0


if __name__ == "__main__":
    sys.exit(main())
