"""Exceptions raised while scanning ticks."""


class TickScanError(Exception):
    """Base class for tick scanner failures."""


class InvalidScanRequestError(TickScanError, ValueError):
    """The request cannot be scanned (bad step count, spacing or start tick)."""


class ProviderReadError(TickScanError, RuntimeError):
    """The state provider could not be read."""


class SnapshotNotFoundError(ProviderReadError):
    """The snapshot handle does not name a known snapshot."""


class SnapshotMismatchError(TickScanError):
    """Chained scans observed different snapshot versions."""

    def __init__(self, expected: int, observed: int):
        super().__init__(f"Snapshot version changed mid-load: expected {expected}, got {observed}")
        self.expected = expected
        self.observed = observed
