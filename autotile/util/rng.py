"""Deterministic random number generation with isolated streams.

Map generators draw from named streams derived from one master seed, so a
seeded run can be replayed exactly, and one generator consuming more random
numbers never shifts the sequence another generator sees.

Usage:
    # At startup (or in a test)
    from autotile.util import rng
    rng.init("my seed")

    # In any module - cache the stream reference
    _rng = rng.get("map.wang_tiles")

    def pick(candidates: list[int]) -> int:
        return candidates[_rng.randrange(len(candidates))]

    # After rng.reset(), cached references automatically use the new stream

Domain naming convention (hierarchical):
    - "map.wang_tiles"
    - "map.preview"
"""

from __future__ import annotations

import zlib
from collections.abc import Sequence
from random import Random
from typing import TYPE_CHECKING, TypeAlias, TypeVar

if TYPE_CHECKING:
    from autotile.types import RandomSeed

T = TypeVar("T")


class RNGStream:
    """Proxy that delegates to the current RNG for a domain.

    Callers can keep a reference across rng.reset(); every call looks up the
    provider's current Random instance for the domain.
    """

    def __init__(self, provider: RNGProvider, domain: str) -> None:
        self._provider = provider
        self._domain = domain

    @property
    def domain(self) -> str:
        return self._domain

    def _rng(self) -> Random:
        return self._provider._get_raw(self._domain)

    def random(self) -> float:
        """Return random float in [0.0, 1.0)."""
        return self._rng().random()

    def randint(self, a: int, b: int) -> int:
        """Return random integer N such that a <= N <= b."""
        return self._rng().randint(a, b)

    def randrange(self, start: int, stop: int | None = None, step: int = 1) -> int:
        """Return randomly selected element from range(start, stop, step)."""
        return self._rng().randrange(start, stop, step)

    def choice(self, seq: Sequence[T]) -> T:
        """Return random element from non-empty sequence."""
        return self._rng().choice(seq)

    def shuffle(self, x: list) -> None:
        """Shuffle list x in place."""
        self._rng().shuffle(x)

    def getrandbits(self, k: int) -> int:
        """Return an integer with k random bits."""
        return self._rng().getrandbits(k)


# Anything a generator can draw from: a plain Random or a named stream.
RNG: TypeAlias = Random | RNGStream


class RNGProvider:
    """Hands out one independent Random per domain, all derived from a master seed."""

    def __init__(self, master_seed: RandomSeed = None) -> None:
        self._master_seed = master_seed
        self._streams: dict[str, Random] = {}
        self._proxies: dict[str, RNGStream] = {}

    @property
    def master_seed(self) -> RandomSeed:
        return self._master_seed

    def get(self, domain: str) -> RNGStream:
        """Get a cacheable stream proxy for the named domain.

        Args:
            domain: Hierarchical name like "map.wang_tiles"

        Returns:
            An RNGStream proxy with the subset of the Random interface
            the generators use.
        """
        if domain not in self._proxies:
            self._proxies[domain] = RNGStream(self, domain)
        return self._proxies[domain]

    def _get_raw(self, domain: str) -> Random:
        if domain not in self._streams:
            if self._master_seed is None:
                # No seed: system entropy
                self._streams[domain] = Random()
            else:
                # crc32 rather than hash(): hash() of str is salted per process
                derived_seed = zlib.crc32(f"{self._master_seed}:{domain}".encode())
                self._streams[domain] = Random(derived_seed)
        return self._streams[domain]

    def reset(self, master_seed: RandomSeed = None) -> None:
        """Drop all streams and derive new ones from master_seed on next use.

        Existing RNGStream proxies stay valid.
        """
        self._master_seed = master_seed
        self._streams.clear()


# =============================================================================
# Module-level API
# =============================================================================

_provider: RNGProvider | None = None


def init(master_seed: RandomSeed = None) -> None:
    """Initialize the global provider, or reset it if it already exists.

    Resetting instead of replacing keeps cached RNGStream proxies working.

    Args:
        master_seed: int, str, or None for non-deterministic behavior.
    """
    global _provider
    if _provider is not None:
        _provider.reset(master_seed)
    else:
        _provider = RNGProvider(master_seed)


def get(domain: str) -> RNGStream:
    """Get a stream for the named domain from the global provider.

    Auto-initializes an unseeded provider on first use. Call init() with a
    seed beforehand for reproducible maps.
    """
    global _provider
    if _provider is None:
        _provider = RNGProvider(None)
    return _provider.get(domain)


def reset(master_seed: RandomSeed = None) -> None:
    """Reset all global streams with a new master seed."""
    if _provider is None:
        raise RuntimeError("RNG not initialized - call rng.init() first")
    _provider.reset(master_seed)
