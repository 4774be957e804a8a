"""
Bounded tick scanner.

Public API
----------
TickScanner(provider, domain=TICK_DOMAIN).scan(request)
    Walk up to ``request.max_steps`` initialized ticks from
    ``request.start_tick`` and return a fixed-capacity ``ScanResult``.
scan_ticks(provider, request, *, domain=TICK_DOMAIN)
    One-shot helper around ``TickScanner``.

Stopping rules
--------------
- every slot filled (``valid_to == max_steps``), or
- the provider's next candidate sits on or beyond a domain bound; that
  candidate is not recorded.

Both are successful outcomes; callers tell them apart by ``valid_to``.
Provider errors propagate and discard any progress.
"""
from __future__ import annotations

import logging

from ticklens.config.ticks import TICK_DOMAIN, KeyDomain
from ticklens.scanner.errors import InvalidScanRequestError
from ticklens.scanner.provider import StateProvider
from ticklens.scanner.types import EMPTY_RECORD, Direction, ScanRequest, ScanResult, TickRecord

__all__ = ["TickScanner", "scan_ticks", "validate_request"]

logger = logging.getLogger(__name__)


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_request(request: ScanRequest, domain: KeyDomain = TICK_DOMAIN) -> None:
    """Raise ``InvalidScanRequestError`` if ``request`` cannot be scanned."""
    if not isinstance(request.direction, Direction):
        raise InvalidScanRequestError(f"Unknown direction: {request.direction!r}")
    if not _is_int(request.max_steps) or request.max_steps < 0:
        raise InvalidScanRequestError(f"max_steps must be a non-negative integer, got {request.max_steps!r}")
    if not _is_int(request.spacing) or request.spacing <= 0:
        raise InvalidScanRequestError(f"spacing must be a positive integer, got {request.spacing!r}")
    if not _is_int(request.start_tick):
        raise InvalidScanRequestError(f"start_tick must be an integer, got {request.start_tick!r}")
    if not domain.contains(request.start_tick):
        raise InvalidScanRequestError(
            f"start_tick {request.start_tick} outside [{domain.min_key}, {domain.max_key}]"
        )


class TickScanner:
    """Scans initialized ticks through a ``StateProvider``."""

    def __init__(self, provider: StateProvider, domain: KeyDomain = TICK_DOMAIN):
        if domain.min_key >= domain.max_key:
            raise ValueError(f"Empty key domain: {domain}")
        self.provider = provider
        self.domain = domain

    def scan(self, request: ScanRequest) -> ScanResult:
        validate_request(request, self.domain)

        slots: list[TickRecord] = [EMPTY_RECORD] * request.max_steps
        valid_to = 0
        cursor = request.start_tick

        while valid_to < request.max_steps:
            initialized, tick = self.provider.find_next_occupied(
                request.snapshot, cursor, request.direction, request.spacing
            )
            if not self.domain.strictly_inside(tick):
                logger.debug("Candidate tick %s reached domain bound after %d ticks", tick, valid_to)
                break

            gross, net = self.provider.fetch_record(request.snapshot, tick)
            if not initialized:
                # word edge from a bitmap search; stored as reported
                logger.debug("Recording uninitialized candidate tick %s", tick)
            slots[valid_to] = TickRecord(bool(initialized), int(tick), int(gross), int(net))
            valid_to += 1

            cursor = request.direction.next_cursor(tick)

        version = self.provider.current_state_version(request.snapshot)
        logger.debug(
            "Scanned %d/%d ticks from %s (%s) at version %s",
            valid_to, request.max_steps, request.start_tick, request.direction.value, version,
        )
        return ScanResult(
            ticks=tuple(slots),
            valid_to=valid_to,
            snapshot_version=version,
            direction=request.direction,
        )


def scan_ticks(
    provider: StateProvider,
    request: ScanRequest,
    *,
    domain: KeyDomain = TICK_DOMAIN,
) -> ScanResult:
    return TickScanner(provider, domain).scan(request)
