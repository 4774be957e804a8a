"""
Batched tick loading around the active tick.

Loads up to ``band`` ticks on each side of ``current_tick`` by chaining
scans of ``ticks_per_batch`` steps. The lower side uses
``FORWARD_INCLUSIVE`` (so the current tick itself is included), the upper
side ``FORWARD_EXCLUSIVE``. Each batch resumes right after the last tick
of the previous one.

Every batch must report the same snapshot version; a change raises
``SnapshotMismatchError`` instead of returning a torn view.
"""
from __future__ import annotations

import logging
from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any

from ticklens.config.ticks import DEFAULT_TICK_BAND, DEFAULT_TICKS_PER_BATCH
from ticklens.scanner.errors import SnapshotMismatchError
from ticklens.scanner.tick_scanner import TickScanner
from ticklens.scanner.types import Direction, ScanRequest, TickRecord

__all__ = ["TickBand", "load_ticks", "load_tick_band"]

logger = logging.getLogger(__name__)

_UNSET = object()


@dataclass(frozen=True)
class TickBand:
    current_tick: int
    below: tuple[TickRecord, ...]  # nearest first, current tick included
    above: tuple[TickRecord, ...]  # nearest first
    snapshot_version: Any

    @property
    def ticks(self) -> tuple[TickRecord, ...]:
        """All loaded ticks in ascending order."""
        return tuple(reversed(self.below)) + self.above

    @property
    def initialized_ticks(self) -> dict[int, TickRecord]:
        return {r.tick: r for r in self.ticks if r.initialized}


def load_ticks(
    scanner: TickScanner,
    snapshot: Hashable,
    start_tick: int,
    direction: Direction,
    spacing: int,
    count: int,
    ticks_per_batch: int = DEFAULT_TICKS_PER_BATCH,
    *,
    expected_version: Any = _UNSET,
) -> tuple[list[TickRecord], Any]:
    """
    Collect up to ``count`` ticks in one direction, ``ticks_per_batch`` per scan.

    Returns ``(records, snapshot_version)``. Stops early when a batch comes
    back short (domain exhausted).
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if ticks_per_batch <= 0:
        raise ValueError(f"ticks_per_batch must be positive, got {ticks_per_batch}")

    records: list[TickRecord] = []
    version = expected_version
    cursor = start_tick
    batches = 0

    while len(records) < count:
        steps = min(ticks_per_batch, count - len(records))
        result = scanner.scan(ScanRequest(snapshot, cursor, direction, steps, spacing))
        batches += 1

        if version is _UNSET:
            version = result.snapshot_version
        elif result.snapshot_version != version:
            raise SnapshotMismatchError(version, result.snapshot_version)

        records.extend(result.valid_ticks)
        if result.exhausted:
            break
        cursor = direction.next_cursor(result.last_tick)

    if version is _UNSET:
        # nothing requested; still report which state we were pointed at
        version = scanner.provider.current_state_version(snapshot)

    logger.debug(
        "Loaded %d %s ticks from %s in %d batches", len(records), direction.value, start_tick, batches
    )
    return records, version


def load_tick_band(
    scanner: TickScanner,
    snapshot: Hashable,
    current_tick: int,
    spacing: int,
    band: int = DEFAULT_TICK_BAND,
    ticks_per_batch: int = DEFAULT_TICKS_PER_BATCH,
) -> TickBand:
    """Load ``band`` ticks below (inclusive) and above ``current_tick``."""
    below, version = load_ticks(
        scanner, snapshot, current_tick, Direction.FORWARD_INCLUSIVE, spacing, band, ticks_per_batch
    )
    above, _ = load_ticks(
        scanner, snapshot, current_tick, Direction.FORWARD_EXCLUSIVE, spacing, band, ticks_per_batch,
        expected_version=version,
    )
    logger.info(
        f"Loaded tick band around {current_tick}: {len(below)} below, {len(above)} above "
        f"(version {version})"
    )
    return TickBand(current_tick, tuple(below), tuple(above), version)
