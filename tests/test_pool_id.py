"""
Test suite for PoolKey / PoolId helpers.
"""

import pytest
from eth_utils import keccak

from ticklens.helpers.pool_id import DYNAMIC_FEE_FLAG, ZERO_ADDRESS, PoolKey, to_pool_id_bytes

USDC = "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"
WETH = "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2"


class TestPoolKey:

    def test_addresses_are_checksummed(self):
        key = PoolKey(USDC, WETH, 500, 10)
        assert key.currency0 == "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"
        assert key.hooks == ZERO_ADDRESS

    def test_encoding_is_five_words(self):
        encoded = PoolKey(ZERO_ADDRESS, USDC, 500, 10).encode()

        assert len(encoded) == 5 * 32
        assert encoded[32 + 12:64] == bytes.fromhex(USDC[2:])
        assert int.from_bytes(encoded[64:96], "big") == 500
        assert int.from_bytes(encoded[96:128], "big") == 10

    def test_negative_spacing_never_encoded(self):
        with pytest.raises(ValueError):
            PoolKey(ZERO_ADDRESS, USDC, 500, -10)

    def test_pool_id_is_keccak_of_encoding(self):
        key = PoolKey(ZERO_ADDRESS, USDC, 500, 10)

        assert key.pool_id == keccak(key.encode())
        assert len(key.pool_id) == 32
        assert key.pool_id_hex == "0x" + key.pool_id.hex()

    def test_pool_id_depends_on_every_field(self):
        base = PoolKey(ZERO_ADDRESS, USDC, 500, 10)
        variants = [
            PoolKey(ZERO_ADDRESS, WETH, 500, 10),
            PoolKey(ZERO_ADDRESS, USDC, 3000, 10),
            PoolKey(ZERO_ADDRESS, USDC, 500, 60),
            PoolKey(ZERO_ADDRESS, USDC, 500, 10, hooks=WETH),
        ]
        assert len({base.pool_id, *(v.pool_id for v in variants)}) == 5

    def test_currencies_must_be_sorted(self):
        with pytest.raises(ValueError):
            PoolKey(WETH, USDC, 500, 10)
        with pytest.raises(ValueError):
            PoolKey(USDC, USDC, 500, 10)

    def test_dynamic_fee_flag_accepted(self):
        assert PoolKey(ZERO_ADDRESS, USDC, DYNAMIC_FEE_FLAG, 60).fee == DYNAMIC_FEE_FLAG

    @pytest.mark.parametrize("fee", [-1, 1_000_001])
    def test_invalid_fee(self, fee):
        with pytest.raises(ValueError):
            PoolKey(ZERO_ADDRESS, USDC, fee, 10)

    @pytest.mark.parametrize("spacing", [0, 32768])
    def test_invalid_spacing(self, spacing):
        with pytest.raises(ValueError):
            PoolKey(ZERO_ADDRESS, USDC, 500, spacing)

    def test_invalid_address(self):
        with pytest.raises(ValueError):
            PoolKey(ZERO_ADDRESS, "0x1234", 500, 10)


class TestToPoolIdBytes:

    def test_hex_string(self):
        assert to_pool_id_bytes("0x" + "11" * 32) == b"\x11" * 32

    def test_bytes(self):
        assert to_pool_id_bytes(bytearray(32)) == bytes(32)

    @pytest.mark.parametrize("value", ["0x" + "11" * 31, b"\x00" * 33])
    def test_wrong_length(self, value):
        with pytest.raises(ValueError):
            to_pool_id_bytes(value)
