"""
Uniswap v4 StateView interface ABIs.

Only the read functions the tick scanner relies on are listed.
"""

STATE_VIEW_ABI = [
    {
        "inputs": [
            {"internalType": "PoolId", "name": "poolId", "type": "bytes32"},
            {"internalType": "int16", "name": "tick", "type": "int16"},
        ],
        "name": "getTickBitmap",
        "outputs": [{"internalType": "uint256", "name": "tickBitmap", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [
            {"internalType": "PoolId", "name": "poolId", "type": "bytes32"},
            {"internalType": "int24", "name": "tick", "type": "int24"},
        ],
        "name": "getTickLiquidity",
        "outputs": [
            {"internalType": "uint128", "name": "liquidityGross", "type": "uint128"},
            {"internalType": "int128", "name": "liquidityNet", "type": "int128"},
        ],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [{"internalType": "PoolId", "name": "poolId", "type": "bytes32"}],
        "name": "getSlot0",
        "outputs": [
            {"internalType": "uint160", "name": "sqrtPriceX96", "type": "uint160"},
            {"internalType": "int24", "name": "tick", "type": "int24"},
            {"internalType": "uint24", "name": "protocolFee", "type": "uint24"},
            {"internalType": "uint24", "name": "lpFee", "type": "uint24"},
        ],
        "stateMutability": "view",
        "type": "function",
    },
]
