"""
State provider interface consumed by the tick scanner.

Implementations must answer every read against one immutable snapshot;
the scanner never re-checks consistency between reads.
"""
from __future__ import annotations

from collections.abc import Hashable
from typing import Any, Protocol, runtime_checkable

from ticklens.scanner.types import Direction

__all__ = ["StateProvider"]


@runtime_checkable
class StateProvider(Protocol):

    def find_next_occupied(
        self, snapshot: Hashable, from_tick: int, direction: Direction, spacing: int
    ) -> tuple[bool, int]:
        """
        Nearest candidate tick from ``from_tick`` in ``direction``.

        Returns ``(initialized, tick)``. The tick is returned even when it
        is not initialized (e.g. the edge of a bitmap word).
        """
        ...

    def fetch_record(self, snapshot: Hashable, tick: int) -> tuple[int, int]:
        """``(liquidity_gross, liquidity_net)`` stored at ``tick``."""
        ...

    def current_state_version(self, snapshot: Hashable) -> Any:
        """Version (block number) of the state behind ``snapshot``."""
        ...
