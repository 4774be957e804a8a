"""
Request and result types for tick scans.

Public API
----------
Direction
    Search direction, including how the cursor advances after a hit.
TickRecord
    One tick as reported by a scan.
ScanRequest / ScanResult
    Input and fixed-capacity output of ``TickScanner.scan``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from collections.abc import Hashable
from typing import Any

__all__ = ["Direction", "TickRecord", "ScanRequest", "ScanResult", "EMPTY_RECORD"]


class Direction(Enum):
    """
    Scan direction.

    FORWARD_INCLUSIVE
        Searches ticks ``<=`` the cursor, walking toward lower ticks
        (``zeroForOne``). The cursor tick itself can be a hit, so after
        each hit the cursor moves to ``tick - 1``.
    FORWARD_EXCLUSIVE
        Searches ticks ``>`` the cursor, walking toward higher ticks
        (``oneForZero``). The cursor tick is never a hit, so the cursor
        simply becomes the hit tick.
    """

    FORWARD_INCLUSIVE = "inclusive"
    FORWARD_EXCLUSIVE = "exclusive"

    @property
    def lte(self) -> bool:
        """Bitmap search flag: True searches the cursor and below."""
        return self is Direction.FORWARD_INCLUSIVE

    zero_for_one = lte

    @classmethod
    def from_zero_for_one(cls, zero_for_one: bool) -> Direction:
        return cls.FORWARD_INCLUSIVE if zero_for_one else cls.FORWARD_EXCLUSIVE

    def next_cursor(self, tick: int) -> int:
        """Cursor for the search that follows a hit at ``tick``."""
        if self is Direction.FORWARD_INCLUSIVE:
            return tick - 1
        return tick

    def precedes(self, earlier: int, later: int) -> bool:
        """True if ``later`` comes strictly after ``earlier`` in this direction."""
        if self is Direction.FORWARD_INCLUSIVE:
            return later < earlier
        return later > earlier


@dataclass(frozen=True)
class TickRecord:
    initialized: bool = False
    tick: int = 0
    liquidity_gross: int = 0
    liquidity_net: int = 0


EMPTY_RECORD = TickRecord()


@dataclass(frozen=True)
class ScanRequest:
    """
    One scan: walk up to ``max_steps`` initialized ticks from ``start_tick``.

    ``snapshot`` is handed to the provider untouched (a block number for
    on-chain providers). ``spacing`` is passed through to the provider as
    the pool's tick spacing.
    """

    snapshot: Hashable
    start_tick: int
    direction: Direction
    max_steps: int
    spacing: int


@dataclass(frozen=True)
class ScanResult:
    """
    Fixed-capacity scan output.

    ``ticks`` always holds ``max_steps`` records; only the first
    ``valid_to`` are meaningful, the rest are ``EMPTY_RECORD``.
    """

    ticks: tuple[TickRecord, ...]
    valid_to: int
    snapshot_version: Any
    direction: Direction = field(default=Direction.FORWARD_EXCLUSIVE, compare=False)

    @property
    def valid_ticks(self) -> tuple[TickRecord, ...]:
        return self.ticks[: self.valid_to]

    @property
    def exhausted(self) -> bool:
        """True when the scan stopped at a domain bound before filling every slot."""
        return self.valid_to < len(self.ticks)

    @property
    def last_tick(self) -> int | None:
        if self.valid_to == 0:
            return None
        return self.ticks[self.valid_to - 1].tick
