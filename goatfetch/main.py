#!/usr/bin/env python3
"""
Main entry point for goatfetch.
"""

import sys
import argparse
import logging

from .modules import get_collector
from .ui.report import FetchReport

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger("goatfetch")


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Show system information next to a goat")
    parser.add_argument("--debug", action="store_true", help="Log collector fallbacks to stderr")
    parser.add_argument("--version", action="store_true", help="Show version information")
    return parser.parse_args(argv)


def setup_logging(debug: bool = False):
    """Send log records to stderr so stdout only carries the report."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format=LOG_FORMAT
    )


def show_version():
    """Show version information."""
    from . import __version__
    print(f"goatfetch version {__version__}")


def main(argv=None):
    """Main function."""
    args = parse_arguments(argv)

    if args.version:
        show_version()
        sys.exit(0)

    setup_logging(args.debug)

    try:
        collector = get_collector()
        logger.debug(f"Using {collector.name} collector")
        facts = collector.run()
    except KeyboardInterrupt:
        sys.exit(0)

    print(FetchReport(facts).generate())


if __name__ == "__main__":
    main()
