"""
Test suite for JSON encoding of scan results.
"""

import json

import pytest

from ticklens.helpers.serialization import (
    MAX_SAFE_INTEGER,
    band_to_dict,
    record_to_dict,
    result_from_dict,
    result_to_dict,
    result_to_json,
)
from ticklens.helpers.tick_loader import TickBand
from ticklens.scanner import EMPTY_RECORD, Direction, ScanRequest, ScanResult, TickRecord, TickScanner


@pytest.fixture
def result(example_provider, small_domain):
    return TickScanner(example_provider, small_domain).scan(
        ScanRequest(1, -10, Direction.FORWARD_INCLUSIVE, 4, 10)
    )


class TestResultToDict:

    def test_shape(self, result):
        data = result_to_dict(result)

        assert set(data) == {"ticks", "validTo", "blockNumber", "direction"}
        assert data["validTo"] == 2
        assert data["blockNumber"] == 1
        assert data["direction"] == "inclusive"
        assert data["ticks"][0] == {"initialized": True, "tick": -10, "liquidityGross": 200, "liquidityNet": -50}

    def test_every_slot_is_written(self, result):
        data = result_to_dict(result)

        assert len(data["ticks"]) == 4
        assert data["ticks"][3] == record_to_dict(EMPTY_RECORD)

    def test_large_liquidity_written_as_string(self):
        record = TickRecord(True, 60, 2 ** 127, -(2 ** 100))
        data = record_to_dict(record)

        assert data["liquidityGross"] == str(2 ** 127)
        assert data["liquidityNet"] == str(-(2 ** 100))
        assert record_to_dict(TickRecord(True, 60, MAX_SAFE_INTEGER, 1))["liquidityGross"] == MAX_SAFE_INTEGER

    def test_json_text(self, result):
        assert json.loads(result_to_json(result)) == result_to_dict(result)


class TestResultFromDict:

    def test_decodes_encoded_result(self, result):
        decoded = result_from_dict(json.loads(result_to_json(result)))

        assert decoded == result
        assert decoded.direction is Direction.FORWARD_INCLUSIVE

    def test_string_liquidity_decoded(self):
        data = {
            "ticks": [{"initialized": True, "tick": 10, "liquidityGross": str(2 ** 120), "liquidityNet": "-5"}],
            "validTo": 1,
            "blockNumber": 7,
        }
        decoded = result_from_dict(data)

        assert decoded.valid_ticks == (TickRecord(True, 10, 2 ** 120, -5),)
        assert decoded.direction is Direction.FORWARD_EXCLUSIVE

    @pytest.mark.parametrize("valid_to", [-1, 2])
    def test_valid_to_out_of_range(self, valid_to):
        data = {"ticks": [record_to_dict(EMPTY_RECORD)], "validTo": valid_to, "blockNumber": 1}
        with pytest.raises(ValueError):
            result_from_dict(data)


class TestBandToDict:

    def test_shape(self):
        band = TickBand(
            current_tick=0,
            below=(TickRecord(True, 0, 3, 3),),
            above=(TickRecord(True, 60, 4, -4), TickRecord(False, 120, 0, 0)),
            snapshot_version=21_000_000,
        )
        data = band_to_dict(band)

        assert data["currentTick"] == 0
        assert data["blockNumber"] == 21_000_000
        assert [t["tick"] for t in data["below"]] == [0]
        assert [t["tick"] for t in data["above"]] == [60, 120]

    def test_empty_result(self):
        data = result_to_dict(ScanResult(ticks=(), valid_to=0, snapshot_version=5))
        assert data == {"ticks": [], "validTo": 0, "blockNumber": 5, "direction": "exclusive"}
