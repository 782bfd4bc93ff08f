"""Base class for cache backends with looping batch operations."""

from abc import ABC, abstractmethod
from typing import Any


class BaseCacheBackend(ABC):
    """Abstract cache backend.

    Subclasses implement the five single-key primitives. The batch
    operations loop over them one key at a time, so one key failing never
    affects its siblings. Backends with native multi-key commands should
    override the batch methods.
    """

    @abstractmethod
    async def get_value(self, key: str) -> Any:
        """Retrieve a stored payload, or MISS."""

    @abstractmethod
    async def set_value(self, key: str, value: Any, duration: int) -> bool:
        """Store a payload, replacing any existing entry."""

    @abstractmethod
    async def add_value(self, key: str, value: Any, duration: int) -> bool:
        """Store a payload only if the key does not exist."""

    @abstractmethod
    async def delete_value(self, key: str) -> bool:
        """Delete a stored payload."""

    @abstractmethod
    async def flush_values(self) -> bool:
        """Delete every stored payload."""

    async def get_values(self, keys: list[str]) -> dict[str, Any]:
        """Retrieve several payloads, one ``get_value`` call per key."""
        return {key: await self.get_value(key) for key in keys}

    async def set_values(self, data: dict[str, Any], duration: int) -> list[str]:
        """Store several payloads, returning the keys that failed."""
        failed_keys = []
        for key, value in data.items():
            if not await self.set_value(key, value, duration):
                failed_keys.append(key)
        return failed_keys

    async def add_values(self, data: dict[str, Any], duration: int) -> list[str]:
        """Add several payloads, returning the keys that were not stored."""
        failed_keys = []
        for key, value in data.items():
            if not await self.add_value(key, value, duration):
                failed_keys.append(key)
        return failed_keys
