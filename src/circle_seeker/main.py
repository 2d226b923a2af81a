#!/usr/bin/env python3
"""
Circle Seeker - Main Entry Point

Usage:
    circle-seeker                       # Run robot controller
    circle-seeker --web                 # Run with web interface (debug mode)
    circle-seeker --params my.json      # Use another parameter file
"""

import argparse
import asyncio
import logging
import random
import sys

from circle_seeker.errors import CircleSeekerError, ConfigError
from circle_seeker.params import PARAMS_FILE, MoveSpecs


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Circle Seeker Robot Controller")
    parser.add_argument(
        "--params",
        default=str(PARAMS_FILE),
        help="Motion parameter file (JSON)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the wall side choice (default: system entropy)",
    )
    parser.add_argument(
        "--web",
        action="store_true",
        help="Enable web interface for debugging",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    args = parser.parse_args()

    # Setup logging
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    logging.getLogger("aiohttp.access").setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info("Circle Seeker starting...")

    # Parameters are required: abort before touching any hardware
    try:
        specs = MoveSpecs.load(args.params)
    except ConfigError as e:
        logger.error(f"Invalid parameters: {e}")
        sys.exit(1)

    from circle_seeker.control import Controller

    # One generator for the whole run
    rng = random.Random(args.seed)
    controller = Controller(specs, rng=rng)

    async def run():
        runner = None
        if args.web:
            from circle_seeker.web import run_server
            runner = await run_server(controller=controller)
        try:
            await controller.run()
        finally:
            if runner is not None:
                await runner.cleanup()

    try:
        asyncio.run(run())
    except CircleSeekerError as e:
        logger.error(f"Stopped: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
