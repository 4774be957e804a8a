"""
Uniswap v4 pool identity helpers.

Public API
----------
PoolKey(currency0, currency1, fee, tick_spacing, hooks)
    ``pool_id`` is ``keccak256(abi.encode(key))``.
to_pool_id_bytes(value)
    Normalise a hex string / bytes PoolId to 32 bytes.
"""
from __future__ import annotations

from dataclasses import dataclass

from eth_abi import encode
from eth_utils import is_address, keccak, to_bytes, to_checksum_address

__all__ = ["PoolKey", "to_pool_id_bytes", "ZERO_ADDRESS", "DYNAMIC_FEE_FLAG"]

ZERO_ADDRESS = '0x0000000000000000000000000000000000000000'

# fee value marking a dynamic-fee pool
DYNAMIC_FEE_FLAG = 0x800000
MAX_LP_FEE = 1_000_000


@dataclass(frozen=True)
class PoolKey:
    currency0: str
    currency1: str
    fee: int
    tick_spacing: int
    hooks: str = ZERO_ADDRESS

    def __post_init__(self):
        for name in ("currency0", "currency1", "hooks"):
            value = getattr(self, name)
            if not is_address(value):
                raise ValueError(f"Invalid {name} address: {value!r}")
            object.__setattr__(self, name, to_checksum_address(value))
        if int(self.currency0, 16) >= int(self.currency1, 16):
            raise ValueError("currency0 must sort numerically below currency1")
        if self.fee != DYNAMIC_FEE_FLAG and not 0 <= self.fee <= MAX_LP_FEE:
            raise ValueError(f"Invalid fee: {self.fee}")
        if not 1 <= self.tick_spacing <= 32767:
            raise ValueError(f"Invalid tick spacing: {self.tick_spacing}")

    def encode(self) -> bytes:
        return encode(
            ['address', 'address', 'uint24', 'int24', 'address'],
            [self.currency0, self.currency1, self.fee, self.tick_spacing, self.hooks],
        )

    @property
    def pool_id(self) -> bytes:
        return keccak(self.encode())

    @property
    def pool_id_hex(self) -> str:
        return "0x" + self.pool_id.hex()


def to_pool_id_bytes(value: str | bytes) -> bytes:
    if isinstance(value, (bytes, bytearray)):
        raw = bytes(value)
    else:
        raw = to_bytes(hexstr=value)
    if len(raw) != 32:
        raise ValueError(f"PoolId must be 32 bytes, got {len(raw)}")
    return raw
