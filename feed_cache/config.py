"""
Configuration loading for the feed cache.

Settings come from a JSON file next to this module, overridden by environment
variables. configure() turns them into a FeedCacheConfig that is handed to
FeedCache explicitly.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from feed_cache.parsers.rss import DEFAULT_USER_AGENT
from feed_cache.services.store import CacheStore, MemoryStore

logger = logging.getLogger(__name__)

DEFAULT_ENTRIES_LIMIT = 10
DEFAULT_TIMEOUT = 10

DEFAULTS: Dict[str, Any] = {
    "cache_backend": "memory",
    "default_entries_limit": DEFAULT_ENTRIES_LIMIT,
    "firestore_collection": "feed_cache",
    "gcp_project_id": None,
    "request_timeout": DEFAULT_TIMEOUT,
    "user_agent": DEFAULT_USER_AGENT,
}

# Env var -> (settings key, converter)
ENV_OVERRIDES = {
    "FEED_CACHE_BACKEND": ("cache_backend", str),
    "FEED_CACHE_DEFAULT_LIMIT": ("default_entries_limit", int),
    "FEED_CACHE_TIMEOUT": ("request_timeout", float),
    "GCP_PROJECT_ID": ("gcp_project_id", str),
}


class FeedCacheConfig:
    """The cache store, default entries limit and fetch settings used by a FeedCache."""

    def __init__(
        self,
        cache: CacheStore,
        default_entries_limit: int = DEFAULT_ENTRIES_LIMIT,
        request_timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        if (
            isinstance(default_entries_limit, bool)
            or not isinstance(default_entries_limit, int)
            or default_entries_limit < 0
        ):
            raise ValueError(
                f"default_entries_limit must be a non-negative int, got {default_entries_limit!r}"
            )
        self.cache = cache
        self.default_entries_limit = default_entries_limit
        self.request_timeout = request_timeout
        self.user_agent = user_agent

    def __repr__(self) -> str:
        return (
            f"FeedCacheConfig(cache={type(self.cache).__name__}, "
            f"default_entries_limit={self.default_entries_limit}, "
            f"request_timeout={self.request_timeout})"
        )


def load_config(config_filename: str = "config.json") -> Dict[str, Any]:
    """Loads settings from a JSON file, then applies environment overrides."""
    # Build absolute path relative to this module
    base_dir = os.path.dirname(os.path.abspath(__file__))
    config_path = os.path.join(base_dir, config_filename)

    settings = dict(DEFAULTS)
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            settings.update(json.load(f))
    except FileNotFoundError:
        logger.warning("Config file not found at %s. Using defaults.", config_path)

    for env_var, (key, convert) in ENV_OVERRIDES.items():
        raw = os.environ.get(env_var)
        if raw:
            try:
                settings[key] = convert(raw)
            except ValueError as e:
                raise ValueError(f"Invalid value for {env_var}: {raw!r}") from e

    return settings


def build_cache(settings: Dict[str, Any]) -> CacheStore:
    """Creates the cache store named by settings["cache_backend"]."""
    backend = settings.get("cache_backend", "memory")
    if backend == "memory":
        return MemoryStore()
    if backend != "firestore":
        raise ValueError(f"Unknown cache backend: {backend!r}")

    project_id = settings.get("gcp_project_id")
    if not project_id:
        logger.warning("GCP_PROJECT_ID not set. Falling back to in-memory cache.")
        return MemoryStore()

    # Imported here so the memory backend works without Firestore credentials
    from feed_cache.services.db import FirestoreStore  # pylint: disable=import-outside-toplevel

    try:
        return FirestoreStore(
            project_id, collection=settings.get("firestore_collection", "feed_cache")
        )
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.warning("Firestore connection failed: %s. Using in-memory cache.", e)
        return MemoryStore()


def configure(
    cache: Optional[CacheStore] = None,
    default_entries_limit: Optional[int] = None,
    settings: Optional[Dict[str, Any]] = None,
    request_timeout: Optional[float] = None,
    user_agent: Optional[str] = None,
) -> FeedCacheConfig:
    """
    Builds a FeedCacheConfig.

    Explicit arguments win over settings; settings default to load_config().
    Each call returns a new config, so callers can reconfigure freely.
    """
    if None in (cache, default_entries_limit, request_timeout, user_agent):
        if settings is None:
            settings = load_config()
        if cache is None:
            cache = build_cache(settings)
        if default_entries_limit is None:
            default_entries_limit = settings.get(
                "default_entries_limit", DEFAULT_ENTRIES_LIMIT
            )
        if request_timeout is None:
            request_timeout = settings.get("request_timeout", DEFAULT_TIMEOUT)
        if user_agent is None:
            user_agent = settings.get("user_agent", DEFAULT_USER_AGENT)

    return FeedCacheConfig(
        cache,
        default_entries_limit,
        request_timeout=request_timeout,
        user_agent=user_agent,
    )
