#!/usr/bin/env python3
"""
Country Explorer
Main Entry Point - Interactive Console Client

Fetches the REST Countries dataset once, then lets the user:
1. Search countries by common name
2. Sort the listing by name, population or region
3. Exit
"""

import argparse
import logging
import math
import sys
from typing import List, Optional

from dotenv import load_dotenv
from config.settings import get_settings, Settings
from src.core.command_loop import CommandLoop
from src.data.fetcher import CountryFetcher

load_dotenv()

logger = logging.getLogger("CountryExplorer")

EXIT_INTERRUPTED = 130
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def positive_float(value: str) -> float:
    """argparse type for a finite number of seconds greater than zero."""
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: '{value}'")
    if not math.isfinite(number) or number <= 0:
        raise argparse.ArgumentTypeError(f"must be greater than zero: '{value}'")
    return number


def setup_logging(level: str = "WARNING", log_file: str = ""):
    """Configure root logging to stderr and, optionally, a log file."""
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True
    )


def parse_args(argv: Optional[List[str]] = None, settings: Optional[Settings] = None):
    """Parse command-line flags; defaults come from settings."""
    settings = settings or get_settings()

    parser = argparse.ArgumentParser(
        description="Browse, search and sort the REST Countries dataset"
    )
    parser.add_argument("--url", "-u", type=str, default=settings.api_url,
                        help="Countries endpoint (default: %(default)s)")
    parser.add_argument("--timeout", "-t", type=positive_float, default=settings.request_timeout,
                        help="Request timeout in seconds (default: %(default)s)")
    parser.add_argument("--log-level", "-l", type=str.upper, default=settings.log_level.upper(),
                        choices=LOG_LEVELS)
    parser.add_argument("--log-file", type=str, default=settings.log_file,
                        help="Also write log records to this file")
    parser.add_argument("--no-listing", action="store_true",
                        default=not settings.show_initial_listing,
                        help="Skip the full listing shown at startup")

    return parser.parse_args(argv)


def main(
    url: Optional[str] = None,
    timeout: Optional[float] = None,
    show_initial_listing: bool = True,
    stdin=None,
    stdout=None
) -> int:
    """Run one interactive session and return its exit code."""
    fetcher = CountryFetcher(url=url, timeout=timeout)
    loop = CommandLoop(
        fetcher=fetcher,
        stdin=stdin,
        stdout=stdout,
        show_initial_listing=show_initial_listing
    )

    logger.info(f"Starting Country Explorer against {fetcher.url}")
    try:
        exit_code = loop.run()
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return EXIT_INTERRUPTED

    logger.info(f"Session finished with exit code {exit_code}")
    return exit_code


def cli(argv: Optional[List[str]] = None) -> int:
    """Console script entry point."""
    args = parse_args(argv)
    setup_logging(args.log_level, args.log_file)
    return main(
        url=args.url,
        timeout=args.timeout,
        show_initial_listing=not args.no_listing
    )


if __name__ == "__main__":
    sys.exit(cli())
