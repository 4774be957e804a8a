import pytest

from ticklens.config.ticks import KeyDomain
from ticklens.helpers.memory_state import MemoryStateProvider

SMALL_DOMAIN = KeyDomain(-100, 100)

# {tick: (liquidity_gross, liquidity_net)}
EXAMPLE_TICKS = {
    -50: (100, 100),
    -10: (200, -50),
    0: (300, 25),
    20: (50, -25),
    60: (10, -50),
}


@pytest.fixture
def small_domain():
    return SMALL_DOMAIN


@pytest.fixture
def example_provider():
    """Bitmap-backed provider over the small example domain, snapshot handle 1."""
    provider = MemoryStateProvider(SMALL_DOMAIN)
    provider.commit(EXAMPLE_TICKS, version=1, spacing=10)
    return provider


@pytest.fixture
def nearest_provider():
    """Provider that jumps straight to the nearest initialized tick."""
    provider = MemoryStateProvider(SMALL_DOMAIN, within_one_word=False)
    provider.commit(EXAMPLE_TICKS, version=1, spacing=10)
    return provider


class RecordingProvider:
    """Wraps a provider and records every read."""

    def __init__(self, inner, fail_fetch_on=None, exc=None):
        self.inner = inner
        self.searches = []
        self.fetches = []
        self.fail_fetch_on = fail_fetch_on
        self.exc = exc

    def find_next_occupied(self, snapshot, from_tick, direction, spacing):
        self.searches.append(from_tick)
        return self.inner.find_next_occupied(snapshot, from_tick, direction, spacing)

    def fetch_record(self, snapshot, tick):
        self.fetches.append(tick)
        if self.fail_fetch_on is not None and len(self.fetches) == self.fail_fetch_on:
            raise self.exc
        return self.inner.fetch_record(snapshot, tick)

    def current_state_version(self, snapshot):
        return self.inner.current_state_version(snapshot)


@pytest.fixture
def recording():
    return RecordingProvider
