"""
JSON encoding of scan results.

The wire shape mirrors the on-chain lens result::

    {
      "ticks": [{"initialized": bool, "tick": int,
                 "liquidityGross": int|str, "liquidityNet": int|str}, ...],
      "validTo": int,
      "blockNumber": int,
      "direction": "inclusive" | "exclusive"
    }

``ticks`` always carries every slot, including the default-valued ones
past ``validTo``. Liquidity values beyond 2**53 are written as decimal
strings so JavaScript consumers do not lose precision.
"""
from __future__ import annotations

import json
from typing import Any

from ticklens.helpers.tick_loader import TickBand
from ticklens.scanner.types import Direction, ScanResult, TickRecord

__all__ = ["record_to_dict", "result_to_dict", "result_from_dict", "result_to_json", "band_to_dict"]

MAX_SAFE_INTEGER = 2 ** 53


def _encode_int(value: int) -> int | str:
    if abs(value) > MAX_SAFE_INTEGER:
        return str(value)
    return value


def record_to_dict(record: TickRecord) -> dict[str, Any]:
    return {
        "initialized": record.initialized,
        "tick": record.tick,
        "liquidityGross": _encode_int(record.liquidity_gross),
        "liquidityNet": _encode_int(record.liquidity_net),
    }


def _record_from_dict(data: dict[str, Any]) -> TickRecord:
    return TickRecord(
        initialized=bool(data["initialized"]),
        tick=int(data["tick"]),
        liquidity_gross=int(data["liquidityGross"]),
        liquidity_net=int(data["liquidityNet"]),
    )


def result_to_dict(result: ScanResult) -> dict[str, Any]:
    return {
        "ticks": [record_to_dict(r) for r in result.ticks],
        "validTo": result.valid_to,
        "blockNumber": result.snapshot_version,
        "direction": result.direction.value,
    }


def result_from_dict(data: dict[str, Any]) -> ScanResult:
    ticks = tuple(_record_from_dict(item) for item in data["ticks"])
    valid_to = int(data["validTo"])
    if not 0 <= valid_to <= len(ticks):
        raise ValueError(f"validTo {valid_to} outside [0, {len(ticks)}]")
    return ScanResult(
        ticks=ticks,
        valid_to=valid_to,
        snapshot_version=data["blockNumber"],
        direction=Direction(data.get("direction", Direction.FORWARD_EXCLUSIVE.value)),
    )


def result_to_json(result: ScanResult, indent: int | None = 2) -> str:
    return json.dumps(result_to_dict(result), indent=indent)


def band_to_dict(band: TickBand) -> dict[str, Any]:
    return {
        "currentTick": band.current_tick,
        "blockNumber": band.snapshot_version,
        "below": [record_to_dict(r) for r in band.below],
        "above": [record_to_dict(r) for r in band.above],
    }
