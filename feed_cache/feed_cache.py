"""
Fetch-and-cache façade.

FeedCache fetches a feed through a FeedParser and memoizes the result in the
configured CacheStore under the feed URL.
"""

import logging
from typing import List, Optional

from feed_cache.config import FeedCacheConfig
from feed_cache.models import Entry, Feed
from feed_cache.parsers.base import FeedParser
from feed_cache.parsers.rss import RSSParser

logger = logging.getLogger(__name__)


class MissingEntries(Exception):
    """Raised when the entries of a feed cannot be extracted."""


class FeedCache:
    """Reads feeds through the cache, calling the parser only on a miss."""

    def __init__(self, config: FeedCacheConfig, parser: Optional[FeedParser] = None):
        self.config = config
        if parser is None:
            parser = RSSParser(timeout=config.request_timeout, user_agent=config.user_agent)
        self.parser: FeedParser = parser

    def fetch(self, url: str) -> Optional[Feed]:
        """Returns the feed for url, or None if the parser did not produce one."""
        cache = self.config.cache
        if cache.exists(url):
            cached = cache.read(url)
            if cached is not None:
                logger.debug("Cache hit for %s", url)
                return cached

        logger.info("Cache miss for %s. Fetching.", url)
        result = self.parser.fetch_and_parse(url)
        if not isinstance(result, dict):
            logger.warning("No feed for %s (parser returned %r). Not caching.", url, result)
            return None

        cache.write(url, result)
        return result

    def entries_for(self, url: str, limit: Optional[int] = None) -> List[Entry]:
        """Returns the first entries of the feed at url, or [] if there is no feed."""
        if limit is None:
            limit = self.config.default_entries_limit
        if limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")

        try:
            feed = self.fetch(url)
            if feed is None:
                return []
            return list(feed["entries"][:limit])
        except TypeError as e:
            # Some upstream documents make the parser fail with a TypeError
            raise MissingEntries(f"Could not read entries for {url}: {e}") from e
