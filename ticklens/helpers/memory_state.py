"""
In-memory, versioned tick state.

Public API
----------
MemoryStateProvider(domain=TICK_DOMAIN, within_one_word=True)
    ``StateProvider`` backed by immutable snapshots committed with
    ``commit(liquidity, version=..., spacing=...)``.

With ``within_one_word`` (the default) searches follow the on-chain
TickBitmap and may return an uninitialized word edge. Otherwise searches
jump straight to the nearest initialized tick, or to the domain bound
when there is none.
"""
from __future__ import annotations

import bisect
import logging
from collections.abc import Hashable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from ticklens.config.ticks import TICK_DOMAIN, KeyDomain
from ticklens.helpers.tick_bitmap import build_bitmap, next_initialized_tick_within_one_word
from ticklens.scanner.errors import ProviderReadError, SnapshotNotFoundError
from ticklens.scanner.types import Direction

__all__ = ["MemoryStateProvider", "MemorySnapshot"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MemorySnapshot:
    version: int
    spacing: int
    words: Mapping[int, int]
    liquidity: Mapping[int, tuple[int, int]]
    sorted_ticks: tuple[int, ...]


class MemoryStateProvider:
    """Holds committed snapshots and answers scanner reads against them."""

    def __init__(self, domain: KeyDomain = TICK_DOMAIN, within_one_word: bool = True):
        self.domain = domain
        self.within_one_word = within_one_word
        self._snapshots: dict[Hashable, MemorySnapshot] = {}

    # ------------------------------------------------------------------ #
    # snapshot management                                                 #
    # ------------------------------------------------------------------ #

    def commit(
        self,
        liquidity: Mapping[int, tuple[int, int]],
        *,
        version: int,
        spacing: int,
        handle: Hashable | None = None,
    ) -> Hashable:
        """
        Freeze ``{tick: (liquidity_gross, liquidity_net)}`` as a snapshot.

        Returns the snapshot handle (``version`` unless ``handle`` is given).
        """
        if spacing <= 0:
            raise ValueError(f"spacing must be positive, got {spacing}")
        for tick, (gross, _net) in liquidity.items():
            if not self.domain.contains(tick):
                raise ValueError(f"Tick {tick} outside [{self.domain.min_key}, {self.domain.max_key}]")
            if gross < 0:
                raise ValueError(f"Negative liquidityGross at tick {tick}")

        handle = version if handle is None else handle
        if handle in self._snapshots:
            raise ValueError(f"Snapshot {handle!r} already committed")

        frozen = {int(t): (int(g), int(n)) for t, (g, n) in liquidity.items()}
        self._snapshots[handle] = MemorySnapshot(
            version=version,
            spacing=spacing,
            words=MappingProxyType(build_bitmap(frozen, spacing)),
            liquidity=MappingProxyType(frozen),
            sorted_ticks=tuple(sorted(frozen)),
        )
        logger.debug("Committed snapshot %r (version %s, %d ticks)", handle, version, len(frozen))
        return handle

    def snapshot(self, handle: Hashable) -> MemorySnapshot:
        try:
            return self._snapshots[handle]
        except KeyError:
            raise SnapshotNotFoundError(f"Unknown snapshot: {handle!r}") from None

    # ------------------------------------------------------------------ #
    # StateProvider                                                       #
    # ------------------------------------------------------------------ #

    def find_next_occupied(
        self, snapshot: Hashable, from_tick: int, direction: Direction, spacing: int
    ) -> tuple[bool, int]:
        snap = self.snapshot(snapshot)
        if spacing != snap.spacing:
            raise ProviderReadError(
                f"Snapshot {snapshot!r} is indexed with spacing {snap.spacing}, got {spacing}"
            )

        if self.within_one_word:
            return next_initialized_tick_within_one_word(
                lambda word_pos: snap.words.get(word_pos, 0), from_tick, spacing, direction.lte
            )

        ticks = snap.sorted_ticks
        if direction.lte:
            idx = bisect.bisect_right(ticks, from_tick)
            if idx:
                return True, ticks[idx - 1]
            return False, self.domain.min_key
        idx = bisect.bisect_right(ticks, from_tick)
        if idx < len(ticks):
            return True, ticks[idx]
        return False, self.domain.max_key

    def fetch_record(self, snapshot: Hashable, tick: int) -> tuple[int, int]:
        return self.snapshot(snapshot).liquidity.get(tick, (0, 0))

    def current_state_version(self, snapshot: Hashable) -> int:
        return self.snapshot(snapshot).version
