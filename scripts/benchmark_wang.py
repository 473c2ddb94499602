#!/usr/bin/env python3
"""Benchmark corner-matching Wang tile map generation."""

from __future__ import annotations

import argparse
import json
import random
import time
from pathlib import Path

from autotile.generators import WangMapGenerator
from autotile.terrain import TerrainCatalog, TileCodec

MAP_SIZES: tuple[tuple[int, int], ...] = (
    (16, 12),
    (64, 48),
    (128, 128),
    (256, 256),
)

TERRAIN_DEFS: tuple[tuple[str, str], ...] = (
    ("grass", "water"),
    ("grass", "sand"),
    ("grass", "dirt"),
    ("grass", "snow"),
)


class WangBenchmark:
    """Times map generation for a fixed tileset across map sizes."""

    def __init__(self, iterations: int) -> None:
        self.iterations = iterations
        self.catalog = TerrainCatalog(TERRAIN_DEFS)
        self.codec = TileCodec(self.catalog.rows)
        self.results: dict[str, dict[str, float]] = {}

    def _run_case(self, width: int, height: int) -> float:
        """Average generation time in milliseconds for one map size."""
        elapsed_total = 0.0

        for i in range(self.iterations):
            rng = random.Random((width * 1_000_000) + (height * 1_000) + i)
            gen = WangMapGenerator(width, height, self.catalog, self.codec, rng)

            start = time.perf_counter()
            gen.generate()
            elapsed_total += time.perf_counter() - start

        return (elapsed_total / self.iterations) * 1000.0

    def run(self) -> None:
        print("Wang tile generation benchmark")
        print("=" * 42)
        print(f"Tileset: {self.codec.tileset_size} tiles, {len(self.catalog)} terrains")
        print(f"Iterations per size: {self.iterations}")
        print()
        print(f"{'Size':>12} {'ms':>10} {'us/cell':>10}")
        print("-" * 42)

        for width, height in MAP_SIZES:
            elapsed_ms = self._run_case(width, height)
            per_cell_us = elapsed_ms * 1000.0 / (width * height)

            size_key = f"{width}x{height}"
            self.results[size_key] = {"ms": elapsed_ms, "us_per_cell": per_cell_us}

            print(f"{size_key:>12} {elapsed_ms:10.2f} {per_cell_us:10.2f}")

    def save_results(self, filename: str) -> None:
        with Path(filename).open("w") as f:
            json.dump(self.results, f, indent=2)
        print(f"\nSaved benchmark results to {filename}")

    def compare_with_baseline(self, baseline_file: str) -> None:
        try:
            with Path(baseline_file).open() as f:
                baseline: dict[str, dict[str, float]] = json.load(f)
        except FileNotFoundError:
            print(f"\nBaseline file not found: {baseline_file}")
            return

        print(f"\nComparison vs baseline: {baseline_file}")
        print("=" * 64)

        for size_key, current in self.results.items():
            old_ms = baseline.get(size_key, {}).get("ms", 0.0)
            if old_ms <= 0:
                continue

            delta_pct = ((current["ms"] - old_ms) / old_ms) * 100.0
            print(
                f"{size_key:>12}: {current['ms']:8.2f}ms vs {old_ms:8.2f}ms "
                f"({delta_pct:+6.1f}%)"
            )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Benchmark Wang map generation")
    parser.add_argument(
        "--iterations",
        type=int,
        default=5,
        help="Number of runs per map size (default: 5)",
    )
    parser.add_argument("--save", type=str, help="Save current results to JSON")
    parser.add_argument(
        "--compare",
        type=str,
        help="Compare current results against baseline JSON",
    )
    args = parser.parse_args(argv)

    benchmark = WangBenchmark(iterations=args.iterations)
    benchmark.run()

    if args.save:
        benchmark.save_results(args.save)

    if args.compare:
        benchmark.compare_with_baseline(args.compare)


if __name__ == "__main__":
    main()
