#!/usr/bin/env python3
"""
DentalHub-Bot - Interactive DentalHub appointment booking.

Main entry point for the application.
"""

import argparse
import asyncio
import logging
import sys
import uuid
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from dentalhub_bot.core.config import get_settings, load_config
from dentalhub_bot.core.config.config_loader import load_env_variables
from dentalhub_bot.core.exceptions import ConfigurationError
from dentalhub_bot.core.logger import run_id_ctx, setup_structured_logging
from dentalhub_bot.services.bot import run_booking
from dentalhub_bot.services.intake import ConsolePrompter, IntakeService


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="DentalHub-Bot - Interactive appointment booking")
    parser.add_argument("--config", default=None, help="Path to configuration file")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    headless = parser.add_mutually_exclusive_group()
    headless.add_argument(
        "--headless", dest="headless", action="store_true", default=None, help="Run headless"
    )
    headless.add_argument(
        "--headed", dest="headless", action="store_false", help="Show the browser window"
    )
    return parser


def main(argv: Optional[list] = None) -> int:
    """
    Main entry point.

    Returns:
        Process exit code: 0 on success or skip, 1 on failure
    """
    args = build_parser().parse_args(argv)
    # ENV from .env must be visible before logging decides on diagnose
    load_env_variables()
    logger = logging.getLogger(__name__)

    try:
        settings = get_settings()
    except PydanticValidationError as e:
        setup_structured_logging(args.log_level or "INFO", json_format=False)
        logger.error(f"Invalid settings: {e}")
        return 1

    setup_structured_logging(
        args.log_level or settings.log_level,
        json_format=settings.json_logging,
        logs_dir=settings.logs_dir,
    )
    run_id_ctx.set(uuid.uuid4().hex[:8])

    try:
        logger.info("Loading configuration...")
        config = load_config(args.config or settings.config_path)
        logger.info("Configuration loaded successfully")

        headless = args.headless if args.headless is not None else settings.headless
        if headless is not None:
            config.browser.headless = headless

        intake = IntakeService(ConsolePrompter(), config.intake_defaults)
        context = asyncio.run(run_booking(config, intake))
    except FileNotFoundError as e:
        logger.error(f"Configuration file not found: {e}")
        logger.info("Please copy config/config.example.yaml to config/config.yaml and configure it")
        return 1
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e.message} {e.details}")
        return 1
    except KeyboardInterrupt:
        logger.info("Booking stopped by user")
        return 1
    except Exception as e:
        logger.error(f"Fatal error: {e}")
        return 1

    if context.booked:
        logger.info(f"Booked: {context.confirmation_url}")
    elif context.skipped:
        logger.info("No booking made")
    return 0


if __name__ == "__main__":
    sys.exit(main())
