"""
Base classes and interfaces for feed parsers.

This module defines the contract that all feed parsers must follow.
"""

from typing import Protocol, Union
from feed_cache.models import Feed


class FeedParseError(Exception):
    """Raised when a fetched document cannot be read as a feed."""


class FeedParser(Protocol):
    """
    Protocol for feed parsers.

    Classes implementing this protocol fetch a URL and return the parsed
    Feed, or an integer status code when the fetch did not yield a feed.
    """

    def fetch_and_parse(self, url: str) -> Union[Feed, int]:
        """Fetches and parses a feed."""
