"""
RSS/Atom feed parser implementation.

This module provides the RSSParser class for fetching and parsing feeds
into Feed records.
"""

import re
from typing import List, Union, cast
import logging

import requests
import feedparser  # type: ignore
from feed_cache.models import Entry, Feed
from feed_cache.parsers.base import FeedParseError, FeedParser

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "FeedCacheBot/1.0"

# Returned when the request never produced an HTTP status
NO_RESPONSE = 0


class RSSParser(FeedParser):
    """Fetches feeds over HTTP and parses them with feedparser."""

    def __init__(self, timeout: float = 10, user_agent: str = DEFAULT_USER_AGENT):
        self.timeout = timeout
        self.user_agent = user_agent

    def _clean_html(self, raw_html: str) -> str:
        """Removes HTML tags from a string."""
        if not raw_html:
            return ""
        cleaner = re.compile("<.*?>")
        text = re.sub(cleaner, "", raw_html)
        return " ".join(text.split())

    def fetch_and_parse(self, url: str) -> Union[Feed, int]:
        """Fetches a feed, returning the status code if the request failed."""
        try:
            resp = requests.get(
                url, timeout=self.timeout, headers={"User-Agent": self.user_agent}
            )
        except requests.RequestException as req_err:
            logger.error("Network error fetching %s: %s", url, req_err)
            return NO_RESPONSE

        if not resp.ok:
            logger.warning("Fetching %s returned HTTP %d", url, resp.status_code)
            return resp.status_code

        return self.parse_document(resp.content, url)

    def parse_document(self, content: Union[bytes, str], url: str) -> Feed:
        """Parses raw feed content fetched from url."""
        parsed = feedparser.parse(content)
        if parsed.bozo and not parsed.entries and not parsed.feed:
            raise FeedParseError(f"{url} is not a feed: {parsed.get('bozo_exception')}")

        entries: List[Entry] = []
        for entry in parsed.entries:
            link = entry.link if hasattr(entry, "link") else ""
            entries.append(
                cast(
                    Entry,
                    {
                        "id": entry.get("id", link),
                        "title": entry.title if hasattr(entry, "title") else "",
                        "link": link,
                        "summary": self._clean_html(entry.get("summary", "")),
                        "published": entry.get("published"),
                    },
                )
            )

        channel = parsed.feed
        logger.debug("Parsed %d entries from %s", len(entries), url)
        return cast(
            Feed,
            {
                "url": url,
                "title": channel.get("title", ""),
                "link": channel.get("link", url),
                "entries": entries,
            },
        )
