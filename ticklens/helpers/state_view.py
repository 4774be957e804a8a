"""
Uniswap v4 tick state read through the StateView lens contract.

Public API
----------
StateViewProvider(w3, pool_id, *, state_view_address=None, chain=None)
    ``StateProvider`` whose snapshot handle is a block number. Every read
    is issued with ``block_identifier=<snapshot>`` so one scan observes a
    single block.

Usage:
    w3 = get_web3()
    provider = StateViewProvider(w3, pool_key.pool_id)
    block = provider.pin_block()
    result = TickScanner(provider).scan(
        ScanRequest(block, start_tick, Direction.FORWARD_EXCLUSIVE, 50, pool_key.tick_spacing)
    )
"""
from __future__ import annotations

import logging
from typing import Any

from web3 import Web3

from ticklens.config.abis import STATE_VIEW_ABI
from ticklens.config.network import get_state_view_address
from ticklens.helpers.pool_id import to_pool_id_bytes
from ticklens.helpers.tick_bitmap import next_initialized_tick_within_one_word
from ticklens.scanner.errors import ProviderReadError
from ticklens.scanner.types import Direction

__all__ = ["StateViewProvider"]

logger = logging.getLogger(__name__)


def _block_number(snapshot: Any) -> int:
    if isinstance(snapshot, bool) or not isinstance(snapshot, int) or snapshot < 0:
        raise ProviderReadError(f"Snapshot must be a pinned block number, got {snapshot!r}")
    return snapshot


class StateViewProvider:
    """Reads tick bitmap words and tick liquidity of one v4 pool."""

    def __init__(
        self,
        w3: Web3,
        pool_id: str | bytes,
        *,
        state_view_address: str | None = None,
        chain: str | int | None = None,
    ):
        self.w3 = w3
        self.pool_id = to_pool_id_bytes(pool_id)
        address = state_view_address or get_state_view_address(chain)
        self.contract = w3.eth.contract(address=Web3.to_checksum_address(address), abi=STATE_VIEW_ABI)

    def _call(self, label: str, fn, block: int):
        try:
            return fn.call(block_identifier=block)
        except Exception as exc:
            logger.error(f"StateView {label} failed at block {block}: {exc}")
            raise ProviderReadError(f"StateView {label} failed at block {block}: {exc}") from exc

    def pin_block(self, block: int | str = "latest") -> int:
        """Resolve ``block`` (e.g. 'latest') to a concrete block number."""
        try:
            if block == "latest":
                return int(self.w3.eth.block_number)
            return int(self.w3.eth.get_block(block)["number"])
        except Exception as exc:
            raise ProviderReadError(f"Could not resolve block {block!r}: {exc}") from exc

    def get_slot0(self, snapshot: int) -> dict[str, int]:
        block = _block_number(snapshot)
        sqrt_price_x96, tick, protocol_fee, lp_fee = self._call(
            "getSlot0", self.contract.functions.getSlot0(self.pool_id), block
        )
        return {
            "sqrtPriceX96": int(sqrt_price_x96),
            "tick": int(tick),
            "protocolFee": int(protocol_fee),
            "lpFee": int(lp_fee),
        }

    def tick_bitmap_word(self, snapshot: int, word_pos: int) -> int:
        block = _block_number(snapshot)
        return int(self._call(
            f"getTickBitmap({word_pos})",
            self.contract.functions.getTickBitmap(self.pool_id, int(word_pos)),
            block,
        ))

    # ------------------------------------------------------------------ #
    # StateProvider                                                       #
    # ------------------------------------------------------------------ #

    def find_next_occupied(
        self, snapshot: int, from_tick: int, direction: Direction, spacing: int
    ) -> tuple[bool, int]:
        block = _block_number(snapshot)
        return next_initialized_tick_within_one_word(
            lambda word_pos: self.tick_bitmap_word(block, word_pos),
            from_tick,
            spacing,
            direction.lte,
        )

    def fetch_record(self, snapshot: int, tick: int) -> tuple[int, int]:
        block = _block_number(snapshot)
        gross, net = self._call(
            f"getTickLiquidity({tick})",
            self.contract.functions.getTickLiquidity(self.pool_id, int(tick)),
            block,
        )
        return int(gross), int(net)

    def current_state_version(self, snapshot: int) -> int:
        return _block_number(snapshot)
