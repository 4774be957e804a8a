"""
Tick domain constants for Uniswap v4 pools.

Contains the global tick bounds and the default batching settings used
when loading ticks around the active tick.
"""

from typing import NamedTuple


class KeyDomain(NamedTuple):
    """Closed integer domain ``[min_key, max_key]`` of a key space."""

    min_key: int
    max_key: int

    def contains(self, key: int) -> bool:
        return self.min_key <= key <= self.max_key

    def strictly_inside(self, key: int) -> bool:
        return self.min_key < key < self.max_key


# Uniswap v4 TickMath bounds
MIN_TICK: int = -887272
MAX_TICK: int = 887272

TICK_DOMAIN: KeyDomain = KeyDomain(MIN_TICK, MAX_TICK)

# A bitmap word packs this many compressed ticks
WORD_SIZE: int = 256

# Tick loading defaults (ticks fetched per scan call, ticks per side)
DEFAULT_TICKS_PER_BATCH: int = 50
DEFAULT_TICK_BAND: int = 100
