"""
Cache store interface and the in-process implementation.
"""

import copy
import logging
from typing import Any, Dict, Optional, Protocol

logger = logging.getLogger(__name__)


class CacheStore(Protocol):
    """Key/value store with existence checks."""

    def exists(self, key: str) -> bool:
        """Reports whether a value is stored under key."""

    def read(self, key: str) -> Optional[Any]:
        """Returns the value stored under key, or None."""

    def write(self, key: str, value: Any) -> None:
        """Stores value under key."""


class MemoryStore(CacheStore):
    """Dict-backed store. Values are copied in and out so cached feeds stay unchanged."""

    def __init__(self) -> None:
        self._data: Dict[str, Any] = {}

    def exists(self, key: str) -> bool:
        return key in self._data

    def read(self, key: str) -> Optional[Any]:
        if key not in self._data:
            return None
        return copy.deepcopy(self._data[key])

    def write(self, key: str, value: Any) -> None:
        self._data[key] = copy.deepcopy(value)

    def delete(self, key: str) -> bool:
        """Removes key, returning whether it was present."""
        return self._data.pop(key, None) is not None

    def clear(self) -> None:
        logger.debug("Clearing %d cached entries.", len(self._data))
        self._data.clear()
