"""
Network configuration for the tick scanner.

Contains RPC URLs and the Uniswap v4 contract addresses for the
supported chains.
"""

import os
from typing import Any


# =============================================================================
# CHAIN CONFIGURATIONS
# =============================================================================

CHAINS: dict[str, dict[str, Any]] = {
    "ethereum": {
        "chain_id": 1,
        "name": "Ethereum Mainnet",
        "currency": "ETH",
        "block_time": 12,
        "rpc_urls": [
            "https://ethereum-rpc.publicnode.com",
            "https://rpc.ankr.com/eth",
        ],
        "pool_manager": "0x000000000004444c5dc75cB358380D2e3dE08A90",
        "state_view": "0x7fFE42C4a5DEeA5b0feC41C94C136Cf115597227",
        "explorer": {
            "name": "Etherscan",
            "url": "https://etherscan.io",
        },
    },
    "base": {
        "chain_id": 8453,
        "name": "Base",
        "currency": "ETH",
        "block_time": 2,
        "rpc_urls": [
            "https://mainnet.base.org",
            "https://base.publicnode.com",
        ],
        "pool_manager": "0x498581fF718922c3f8e6A244956aF099B2652b2b",
        "state_view": "0xA3c0c9b65baD0b08107Aa264b0f3dB444b867A71",
        "explorer": {
            "name": "Basescan",
            "url": "https://basescan.org",
        },
    },
}

# Chain ID to name mapping
CHAIN_ID_TO_NAME: dict[int, str] = {
    config["chain_id"]: name for name, config in CHAINS.items()
}

DEFAULT_CHAIN: str = "ethereum"

# Network timeouts
RPC_TIMEOUT: int = 30  # seconds


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def get_chain_config(chain: str | int | None = None) -> dict[str, Any]:
    """Get configuration for a specific chain.

    Args:
        chain: Chain name (e.g., 'ethereum', 'base') or chain ID.
               If None, uses CHAIN environment variable or defaults to 'ethereum'.

    Returns:
        Chain configuration dictionary.

    Raises:
        ValueError: If chain is not supported.
    """
    if chain is None:
        chain = os.getenv("CHAIN", DEFAULT_CHAIN)

    if isinstance(chain, int):
        name = CHAIN_ID_TO_NAME.get(chain)
        if name is None:
            raise ValueError(f"Unsupported chain ID: {chain}")
        chain = name

    chain = chain.lower()
    if chain not in CHAINS:
        raise ValueError(f"Unsupported chain: {chain}. Supported: {list(CHAINS.keys())}")

    return CHAINS[chain]


def get_rpc_url(chain: str | int | None = None) -> str:
    """Get the primary RPC URL for a chain.

    Uses RPC_URL environment variable if set, otherwise returns first default.
    """
    env_rpc = os.getenv("RPC_URL")
    if env_rpc:
        return env_rpc

    config = get_chain_config(chain)
    return config["rpc_urls"][0]


def get_state_view_address(chain: str | int | None = None) -> str:
    """Get the StateView lens address, honouring STATE_VIEW_ADDRESS."""
    env_addr = os.getenv("STATE_VIEW_ADDRESS")
    if env_addr:
        return env_addr

    config = get_chain_config(chain)
    return config["state_view"]


def get_web3(rpc_url: str | None = None, chain: str | int | None = None):
    """Get a Web3 instance connected to the configured RPC URL.

    Returns:
        Web3: Web3 instance
    """
    from web3 import Web3
    rpc_url = rpc_url or get_rpc_url(chain)
    return Web3(Web3.HTTPProvider(rpc_url, request_kwargs={"timeout": RPC_TIMEOUT}))
