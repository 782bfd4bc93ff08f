"""In-memory cache backend implementation."""

import math
import time
from collections.abc import Callable
from typing import Any, NamedTuple

from cachetools import TLRUCache  # type: ignore[import-untyped]

from keyedcache.core.entities.miss import MISS
from keyedcache.infrastructure.backends.base import BaseCacheBackend


class _Item(NamedTuple):
    value: Any
    duration: int


def _time_to_use(key: str, item: _Item, now: float) -> float:
    if item.duration > 0:
        return now + item.duration
    return math.inf


class InMemoryCacheBackend(BaseCacheBackend):
    """In-memory cache backend using LRU with per-item expiry.

    Suitable for single-process deployments and tests. Uses cachetools'
    TLRUCache so each entry expires after its own duration, and the least
    recently used entry is evicted once ``maxsize`` is reached.
    """

    def __init__(
        self,
        maxsize: int = 1000,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the in-memory cache backend.

        Args:
            maxsize: Maximum number of items in the cache.
            timer: Clock used for expiry, in seconds.
        """
        self._maxsize = maxsize
        self._cache: TLRUCache[str, _Item] = TLRUCache(
            maxsize=maxsize,
            ttu=_time_to_use,
            timer=timer,
        )

    async def get_value(self, key: str) -> Any:
        """Retrieve a stored payload, or MISS if absent or expired."""
        item = self._cache.get(key)
        if item is None:
            return MISS
        return item.value

    async def set_value(self, key: str, value: Any, duration: int) -> bool:
        """Store a payload with its own expiry."""
        self._cache[key] = _Item(value, duration)
        return True

    async def add_value(self, key: str, value: Any, duration: int) -> bool:
        """Store a payload unless a live entry exists."""
        if key in self._cache:
            return False
        self._cache[key] = _Item(value, duration)
        return True

    async def delete_value(self, key: str) -> bool:
        """Delete a payload; False if the key did not exist."""
        try:
            del self._cache[key]
            return True
        except KeyError:
            return False

    async def flush_values(self) -> bool:
        """Clear all cached values."""
        self._cache.clear()
        return True

    def __len__(self) -> int:
        """Return the number of items in the cache."""
        return len(self._cache)

    @property
    def maxsize(self) -> int:
        """Return the maximum size of the cache."""
        return self._maxsize
