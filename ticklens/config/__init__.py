"""
Configuration package for the tick scanner.
"""

from ticklens.config.network import (
    CHAINS,
    CHAIN_ID_TO_NAME,
    DEFAULT_CHAIN,
    get_chain_config,
    get_rpc_url,
    get_state_view_address,
    get_web3,
)

from ticklens.config.ticks import (
    KeyDomain,
    MIN_TICK,
    MAX_TICK,
    TICK_DOMAIN,
    WORD_SIZE,
    DEFAULT_TICKS_PER_BATCH,
    DEFAULT_TICK_BAND,
)

from ticklens.config.abis import (
    STATE_VIEW_ABI
)

__all__ = [
    # Network
    'CHAINS',
    'CHAIN_ID_TO_NAME',
    'DEFAULT_CHAIN',
    'get_chain_config',
    'get_rpc_url',
    'get_state_view_address',
    'get_web3',

    # Ticks
    'KeyDomain',
    'MIN_TICK',
    'MAX_TICK',
    'TICK_DOMAIN',
    'WORD_SIZE',
    'DEFAULT_TICKS_PER_BATCH',
    'DEFAULT_TICK_BAND',

    # ABIs
    'STATE_VIEW_ABI',
]
