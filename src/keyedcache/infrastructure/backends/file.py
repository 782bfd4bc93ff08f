"""File-based cache backend implementation."""

import asyncio
import logging
import sqlite3
from collections.abc import Callable
from typing import Any

from diskcache import Cache, Timeout  # type: ignore[import-untyped]

from keyedcache.core.entities.miss import MISS
from keyedcache.infrastructure.backends.base import BaseCacheBackend

logger = logging.getLogger(__name__)


class FileCacheBackend(BaseCacheBackend):
    """Disk-backed cache backend using diskcache.

    Entries survive process restarts and are shared by every process
    pointing at the same directory. Expiry and ``add`` are handled
    natively and atomically by diskcache. Calls run in worker threads so
    SQLite and file I/O never block the event loop; database errors and
    lock timeouts are logged and reported as failed writes or misses.
    """

    def __init__(self, directory: str, **settings: Any) -> None:
        """Initialize the file cache backend.

        Args:
            directory: Directory holding the cache database and files.
            **settings: Extra diskcache settings such as ``size_limit``.
        """
        self._directory = directory
        self._cache = Cache(directory, **settings)

    @property
    def directory(self) -> str:
        """Return the cache directory."""
        return self._directory

    async def get_value(self, key: str) -> Any:
        """Retrieve a stored payload, or MISS if absent, expired or on error."""
        return await self._run("GET", key, MISS, self._cache.get, key, MISS)

    async def set_value(self, key: str, value: Any, duration: int) -> bool:
        """Store a payload with its own expiry."""
        result = await self._run(
            "SET", key, False, self._cache.set, key, value, expire=_expire(duration)
        )
        return bool(result)

    async def add_value(self, key: str, value: Any, duration: int) -> bool:
        """Store a payload unless a live entry exists."""
        result = await self._run(
            "ADD", key, False, self._cache.add, key, value, expire=_expire(duration)
        )
        return bool(result)

    async def delete_value(self, key: str) -> bool:
        """Delete a payload; False if the key did not exist or on error."""
        return bool(await self._run("DELETE", key, False, self._cache.delete, key))

    async def flush_values(self) -> bool:
        """Remove every entry from the directory."""
        result = await self._run("CLEAR", self._directory, None, self._cache.clear)
        return result is not None

    def close(self) -> None:
        """Close the underlying database connection."""
        self._cache.close()

    def __len__(self) -> int:
        """Return the number of items in the cache."""
        return len(self._cache)

    async def _run(
        self,
        operation: str,
        key: str,
        default: Any,
        func: Callable[..., Any],
        *args: Any,
        **kwargs: Any,
    ) -> Any:
        try:
            return await asyncio.to_thread(func, *args, **kwargs)
        except (Timeout, sqlite3.Error) as e:
            logger.warning("diskcache %s failed for key %s: %s", operation, key, e)
            return default


def _expire(duration: int) -> int | None:
    return duration if duration > 0 else None
