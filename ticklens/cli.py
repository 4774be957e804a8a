"""CLI commands for scanning Uniswap v4 ticks.

Usage examples:
  # Next 20 initialized ticks above the active tick of a pool
  ticklens scan --pool-id 0x21c67e77... --tick-spacing 10 --steps 20

  # Walk down from a given tick at a fixed block, JSON output
  ticklens scan --currency0 0x0000000000000000000000000000000000000000 \
    --currency1 0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48 --fee 500 --tick-spacing 10 \
    --start-tick -195000 --direction inclusive --steps 10 --block 21500000 --json

  # Load 100 ticks on each side of the active tick, 25 per call
  ticklens band --pool-id 0x... --tick-spacing 60 --band 100 --batch 25

Environment: RPC_URL, CHAIN, STATE_VIEW_ADDRESS (a .env file is loaded if present).
"""

import argparse
import json
import sys
from decimal import Decimal, getcontext

from dotenv import load_dotenv
from tabulate import tabulate

from ticklens.config.logging_config import get_cli_logger
from ticklens.config.network import get_web3
from ticklens.config.ticks import DEFAULT_TICK_BAND, DEFAULT_TICKS_PER_BATCH
from ticklens.helpers.pool_id import ZERO_ADDRESS, PoolKey
from ticklens.helpers.serialization import band_to_dict, result_to_dict
from ticklens.helpers.state_view import StateViewProvider
from ticklens.helpers.tick_loader import load_tick_band
from ticklens.scanner import Direction, ScanRequest, TickScanError, TickScanner

getcontext().prec = 50

DIRECTIONS = {
    "inclusive": Direction.FORWARD_INCLUSIVE,
    "exclusive": Direction.FORWARD_EXCLUSIVE,
}


def tick_to_price(tick: int) -> Decimal:
    """Raw token1/token0 price at ``tick`` (no decimals adjustment)."""
    return Decimal("1.0001") ** tick


def resolve_pool_id(args) -> str:
    if args.pool_id:
        return args.pool_id
    if not (args.currency0 and args.currency1 and args.fee is not None):
        raise ValueError("Pass --pool-id, or --currency0/--currency1/--fee/--tick-spacing")
    key = PoolKey(args.currency0, args.currency1, args.fee, args.tick_spacing, args.hooks)
    return key.pool_id_hex


def build_provider(args) -> StateViewProvider:
    w3 = get_web3(args.rpc_url, args.chain)
    return StateViewProvider(
        w3,
        resolve_pool_id(args),
        state_view_address=args.state_view,
        chain=args.chain,
    )


def _print_records(records, title: str) -> None:
    headers = ["Tick", "Initialized", "Liquidity Gross", "Liquidity Net", "Price (raw)"]
    rows = [
        [r.tick, r.initialized, r.liquidity_gross, r.liquidity_net, f"{tick_to_price(r.tick):.8g}"]
        for r in records
    ]
    print(title)
    if not rows:
        print("  (none found within domain)")
        return
    print(tabulate(rows, headers=headers, tablefmt="grid"))


def scan_command(args, logger) -> int:
    provider = build_provider(args)
    block = provider.pin_block(args.block if args.block is not None else "latest")
    start_tick = args.start_tick
    if start_tick is None:
        start_tick = provider.get_slot0(block)["tick"]
        logger.info(f"Using active tick {start_tick} at block {block}")

    request = ScanRequest(
        snapshot=block,
        start_tick=start_tick,
        direction=DIRECTIONS[args.direction],
        max_steps=args.steps,
        spacing=args.tick_spacing,
    )
    result = TickScanner(provider).scan(request)

    if args.json:
        print(json.dumps(result_to_dict(result), indent=2))
    else:
        _print_records(
            result.valid_ticks,
            f"{result.valid_to}/{args.steps} ticks from {start_tick} ({args.direction}) at block {block}",
        )
        if result.exhausted:
            print("Reached the tick domain bound before filling every slot.")
    return 0


def band_command(args, logger) -> int:
    provider = build_provider(args)
    block = provider.pin_block(args.block if args.block is not None else "latest")
    current_tick = args.current_tick
    if current_tick is None:
        current_tick = provider.get_slot0(block)["tick"]
        logger.info(f"Using active tick {current_tick} at block {block}")

    band = load_tick_band(
        TickScanner(provider), block, current_tick, args.tick_spacing, args.band, args.batch
    )

    if args.json:
        print(json.dumps(band_to_dict(band), indent=2))
    else:
        _print_records(band.below, f"Below {current_tick} (inclusive), block {block}:")
        _print_records(band.above, f"Above {current_tick}, block {block}:")
    return 0


def _add_pool_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('--pool-id', help='PoolId (bytes32 hex)')
    parser.add_argument('--currency0', help='Pool currency0 (when --pool-id is not given)')
    parser.add_argument('--currency1', help='Pool currency1 (when --pool-id is not given)')
    parser.add_argument('--fee', type=int, help='Pool LP fee (when --pool-id is not given)')
    parser.add_argument('--hooks', default=ZERO_ADDRESS, help='Pool hooks address (default: none)')
    parser.add_argument('--tick-spacing', type=int, required=True, help='Pool tick spacing')
    parser.add_argument('--block', type=int, default=None, help='Block to read (default: latest)')
    parser.add_argument('--chain', default=None, help='Chain name or id (default: $CHAIN or ethereum)')
    parser.add_argument('--rpc-url', default=None, help='RPC endpoint (default: $RPC_URL or chain default)')
    parser.add_argument('--state-view', default=None, help='StateView address override')
    parser.add_argument('--json', action='store_true', help='Print results as JSON')
    parser.add_argument('--debug', action='store_true', help='Verbose logging')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Scan initialized ticks of a Uniswap v4 pool'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    scan_parser = subparsers.add_parser('scan', help='Walk initialized ticks from a start tick')
    _add_pool_arguments(scan_parser)
    scan_parser.add_argument('--start-tick', type=int, default=None, help='Start tick (default: active tick)')
    scan_parser.add_argument('--direction', choices=sorted(DIRECTIONS), default='exclusive',
                             help='inclusive walks down from the start tick, exclusive walks up')
    scan_parser.add_argument('--steps', type=int, default=DEFAULT_TICKS_PER_BATCH,
                             help=f'Ticks to return (default: {DEFAULT_TICKS_PER_BATCH})')
    scan_parser.set_defaults(func=scan_command)

    band_parser = subparsers.add_parser('band', help='Load ticks on both sides of a tick')
    _add_pool_arguments(band_parser)
    band_parser.add_argument('--current-tick', type=int, default=None, help='Centre tick (default: active tick)')
    band_parser.add_argument('--band', type=int, default=DEFAULT_TICK_BAND,
                             help=f'Ticks per side (default: {DEFAULT_TICK_BAND})')
    band_parser.add_argument('--batch', type=int, default=DEFAULT_TICKS_PER_BATCH,
                             help=f'Ticks per scan call (default: {DEFAULT_TICKS_PER_BATCH})')
    band_parser.set_defaults(func=band_command)

    return parser


def main(argv=None) -> int:
    """Main CLI entry point."""
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    logger = get_cli_logger(debug=args.debug)
    try:
        return args.func(args, logger)
    except (TickScanError, ValueError) as e:
        logger.error(f"Error: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
