"""
ticklens - bounded scans over Uniswap v4 initialized ticks.

Public API
----------
TickScanner / scan_ticks
    Walk initialized ticks from a start tick, one snapshot per scan.
MemoryStateProvider
    Versioned in-memory tick state.
StateViewProvider
    On-chain tick state read through the v4 StateView lens.
load_tick_band
    Chained scans on both sides of the active tick.
"""

from ticklens.config.ticks import KeyDomain, MIN_TICK, MAX_TICK, TICK_DOMAIN
from ticklens.helpers.memory_state import MemoryStateProvider
from ticklens.helpers.pool_id import PoolKey
from ticklens.helpers.state_view import StateViewProvider
from ticklens.helpers.tick_loader import TickBand, load_tick_band
from ticklens.scanner import (
    Direction,
    InvalidScanRequestError,
    ProviderReadError,
    ScanRequest,
    ScanResult,
    StateProvider,
    TickRecord,
    TickScanError,
    TickScanner,
    scan_ticks,
)

__version__ = "0.1.0"

__all__ = [
    'KeyDomain',
    'MIN_TICK',
    'MAX_TICK',
    'TICK_DOMAIN',
    'MemoryStateProvider',
    'PoolKey',
    'StateViewProvider',
    'TickBand',
    'load_tick_band',
    'Direction',
    'InvalidScanRequestError',
    'ProviderReadError',
    'ScanRequest',
    'ScanResult',
    'StateProvider',
    'TickRecord',
    'TickScanError',
    'TickScanner',
    'scan_ticks',
]
