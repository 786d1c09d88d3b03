"""
Command line entry point.

Fetches each feed given on the command line through the cache and prints
its entries.
"""

import argparse
import logging
import sys
from typing import List, Optional

from feed_cache.config import configure, load_config
from feed_cache.feed_cache import FeedCache, MissingEntries
from feed_cache.parsers.base import FeedParseError

logger = logging.getLogger(__name__)


def non_negative_int(value: str) -> int:
    """argparse type for --limit."""
    try:
        number = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from e
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {number}")
    return number


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="feed_cache", description="Fetch feeds through the feed cache."
    )
    parser.add_argument("urls", nargs="+", help="Feed URLs to fetch")
    parser.add_argument(
        "--limit", type=non_negative_int, default=None, help="Entries per feed"
    )
    parser.add_argument(
        "--config", default="config.json", help="Config file name beside the package"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main execution entry point."""
    # Configure logging
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    args = build_arg_parser().parse_args(argv)

    feed_cache = FeedCache(configure(settings=load_config(args.config)))

    status = 0
    for url in args.urls:
        try:
            entries = feed_cache.entries_for(url, limit=args.limit)
        except (MissingEntries, FeedParseError) as e:
            logger.error("%s", e)
            status = 1
            continue

        # Only feeds that were fetched successfully are cached
        if not entries and not feed_cache.config.cache.exists(url):
            logger.error("No feed fetched for %s", url)
            status = 1
            continue

        print(url)
        for entry in entries:
            print(f"  {entry['title']} - {entry['link']}")

    return status


if __name__ == "__main__":
    sys.exit(main())
