"""Dummy cache backend that stores nothing."""

from typing import Any

from keyedcache.core.entities.miss import MISS
from keyedcache.infrastructure.backends.base import BaseCacheBackend


class DummyCacheBackend(BaseCacheBackend):
    """Backend that never stores anything.

    Every read misses and every write reports success, so caching can be
    switched off without touching call sites.
    """

    async def get_value(self, key: str) -> Any:
        return MISS

    async def set_value(self, key: str, value: Any, duration: int) -> bool:
        return True

    async def add_value(self, key: str, value: Any, duration: int) -> bool:
        return True

    async def delete_value(self, key: str) -> bool:
        return True

    async def flush_values(self) -> bool:
        return True
