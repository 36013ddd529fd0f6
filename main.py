#!/usr/bin/env python3
"""Command line entry point for one-shot source transaction lookups.

Runs the source transaction stage once for a single VAA id and prints the
resolved hash. Useful to check Wormscan connectivity and configuration.
"""

import argparse
import asyncio
import logging
import os
import sys

from source_tx_relayer.config import SourceTxOptions
from source_tx_relayer.models import Environment, MessageId, ProcessingContext
from source_tx_relayer.source_tx_stage import SourceTxStage


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level as string (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    log_level: int = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Resolve the source transaction hash of a Wormhole VAA",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""Environment Variables:
  WORMHOLE_ENV               - Default network (default: testnet)
  WORMSCAN_ENDPOINT          - Wormscan API base URL override
  SOURCE_TX_RETRIES          - Maximum fetch attempts override
  LOG_LEVEL                  - Logging level (can be overridden with --log-level)
        """
    )
    parser.add_argument(
        "vaa_id",
        help="VAA id as chain/emitter/sequence, e.g. 2/0000...0def/42"
    )
    parser.add_argument(
        "--env",
        default=os.environ.get("WORMHOLE_ENV", Environment.TESTNET.value),
        choices=[e.value for e in Environment],
        help="Wormhole network (default: testnet)"
    )
    parser.add_argument(
        "--endpoint",
        default=os.environ.get("WORMSCAN_ENDPOINT"),
        help="Wormscan API base URL (default: per-network endpoint)"
    )
    parser.add_argument(
        "--retries",
        type=int,
        default=None,
        help="Maximum fetch attempts (default: per-network value)"
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get("LOG_LEVEL", "INFO"),
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging level (default: INFO)"
    )
    return parser


async def resolve_once(args: argparse.Namespace) -> str:
    """Run the stage for a single VAA and return the resolved hash."""
    message_id = MessageId.parse(args.vaa_id)
    stage = SourceTxStage.for_environment(
        args.env,
        SourceTxOptions(wormscan_endpoint=args.endpoint, retries=args.retries),
    )
    stage.config.log_config()

    ctx = ProcessingContext(vaa=message_id, env=Environment(args.env), logger=logger)

    async def done() -> None:
        logger.info(f"Stage finished for {message_id}")

    await stage(ctx, done)
    return ctx.source_tx_hash or ""


async def main() -> None:
    """Main entry point.

    Raises:
        SystemExit: On configuration errors or when the hash is not found
    """
    args = build_parser().parse_args()
    setup_logging(args.log_level)

    try:
        tx_hash = await resolve_once(args)
    except ValueError as e:
        logger.error(f"Configuration Error: {e}")
        sys.exit(1)

    if not tx_hash:
        logger.error(f"No source transaction found for {args.vaa_id}")
        sys.exit(1)

    print(tx_hash)


if __name__ == "__main__":
    asyncio.run(main())
