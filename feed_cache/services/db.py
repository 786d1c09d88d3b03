"""
Firestore-backed cache store.

This module provides the FirestoreStore class which keeps parsed feeds in a
Google Firestore collection so they survive between processes.
"""

import hashlib
import datetime
import logging
from typing import Optional
from google.cloud import firestore  # type: ignore

from feed_cache.models import Feed
from feed_cache.services.store import CacheStore

logger = logging.getLogger(__name__)


class FirestoreStore(CacheStore):
    """Stores feeds as Firestore documents keyed by a hash of the feed URL."""

    def __init__(self, project_id: str, collection: str = "feed_cache"):
        self.db = firestore.Client(project=project_id)
        self.collection = self.db.collection(collection)
        logger.info("Connected to Firestore collection %s.", collection)

    def get_id(self, url: str) -> str:
        """Creates a deterministic hash of the URL."""
        return hashlib.md5(url.encode("utf-8")).hexdigest()

    def exists(self, key: str) -> bool:
        return self.collection.document(self.get_id(key)).get().exists

    def read(self, key: str) -> Optional[Feed]:
        snap = self.collection.document(self.get_id(key)).get()
        if not snap.exists:
            return None
        return snap.to_dict().get("feed")

    def write(self, key: str, value: Feed) -> None:
        ref = self.collection.document(self.get_id(key))
        ref.set(
            {
                "url": key,
                "feed": value,
                "cached_at": datetime.datetime.now(),
            }
        )
        logger.info("Cached %d entries for %s.", len(value["entries"]), key)
