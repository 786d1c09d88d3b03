"""
Feed Cache

Fetches RSS/Atom feeds and memoizes the parsed result under the feed URL.
"""

from feed_cache.config import FeedCacheConfig, configure, load_config
from feed_cache.feed_cache import FeedCache, MissingEntries
from feed_cache.models import Entry, Feed
from feed_cache.parsers.base import FeedParseError, FeedParser
from feed_cache.parsers.rss import RSSParser
from feed_cache.services.store import CacheStore, MemoryStore

__all__ = [
    "CacheStore",
    "Entry",
    "Feed",
    "FeedCache",
    "FeedCacheConfig",
    "FeedParseError",
    "FeedParser",
    "MemoryStore",
    "MissingEntries",
    "RSSParser",
    "configure",
    "load_config",
]
