"""
Data models for the feed cache.
"""

from typing import List, Optional, TypedDict


class Entry(TypedDict):
    """Type definition for a single feed entry."""

    id: str
    title: str
    link: str
    summary: str
    published: Optional[str]


class Feed(TypedDict):
    """Type definition for a parsed feed, keyed in the cache by its url."""

    url: str
    title: str
    link: str
    entries: List[Entry]
