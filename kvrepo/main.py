#!/usr/bin/env python3
"""
KV-Repo Command-Line Entry Point

Builds an in-memory store, wraps it in a Repository and prints the
seeded version.

Usage:
    python -m kvrepo.main                          # Print the version
    python -m kvrepo.main --debug                  # Enable debug logging
    python -m kvrepo.main --set Version=2.0.0      # Overwrite after seeding
    python -m kvrepo.main --set a=1 --get a        # Print another key

Environment Variables:
    KVREPO_DEBUG        - Enable debug mode (true/false)
    KVREPO_LOG_LEVEL    - Log level when not in debug mode
"""

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from .config.settings import settings
from .repository import Repository
from .store.memory import MemoryStore

logger = logging.getLogger(__name__)


def parse_pair(text: str) -> Tuple[str, str]:
    """Split a KEY=VALUE argument. The value may itself contain '='."""
    key, sep, value = text.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {text!r}")
    return key, value


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="KV-Repo: versioned key-value facade",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--set",
        dest="pairs",
        type=parse_pair,
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Write a pair into the store after the repository is built",
    )

    parser.add_argument(
        "--get",
        dest="key",
        default=None,
        metavar="KEY",
        help="Print the value of KEY instead of the version",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        default=settings.DEBUG,
        help="Enable debug logging",
    )

    return parser.parse_args(argv)


def setup_logging(debug: bool = False) -> None:
    """Configure logging based on debug flag."""
    if debug:
        level = logging.DEBUG
    else:
        level = getattr(logging, settings.LOG_LEVEL.upper(), None)
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(
        level=level,
        format=settings.LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ]
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)
    setup_logging(debug=args.debug)

    try:
        store = MemoryStore()
        repository = Repository(store)

        for key, value in args.pairs:
            logger.debug(f"Setting {key}={value!r}")
            store.set(key, value)

        if args.key is not None:
            value = store.get(args.key)
            print(value if value is not None else "(nil)")
        else:
            version = repository.get_version()
            print(version if version is not None else "(nil)")
    except Exception as e:
        logger.error(f"Command failed: {e}")
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
