"""
Tick scanner package: request/result types, the provider interface and
the scan loop.
"""

from ticklens.scanner.errors import (
    TickScanError,
    InvalidScanRequestError,
    ProviderReadError,
    SnapshotNotFoundError,
    SnapshotMismatchError,
)
from ticklens.scanner.provider import StateProvider
from ticklens.scanner.tick_scanner import TickScanner, scan_ticks, validate_request
from ticklens.scanner.types import (
    Direction,
    TickRecord,
    ScanRequest,
    ScanResult,
    EMPTY_RECORD,
)

__all__ = [
    # Errors
    'TickScanError',
    'InvalidScanRequestError',
    'ProviderReadError',
    'SnapshotNotFoundError',
    'SnapshotMismatchError',

    # Types
    'Direction',
    'TickRecord',
    'ScanRequest',
    'ScanResult',
    'EMPTY_RECORD',

    # Scanning
    'StateProvider',
    'TickScanner',
    'scan_ticks',
    'validate_request',
]
