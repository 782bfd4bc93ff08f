"""Cache backend interface."""

from typing import Any, Protocol


class ICacheBackend(Protocol):
    """Contract for cache storage backends.

    Backends store already-normalized string keys and opaque payloads.
    Absent or expired keys are reported with the ``MISS`` sentinel, so
    payloads such as ``None`` or ``b""`` stay storable. A duration of 0
    means the entry never expires.

    Most backends only need the five single-key primitives; see
    ``BaseCacheBackend`` for looping batch defaults.
    """

    async def get_value(self, key: str) -> Any:
        """Retrieve a stored payload.

        Args:
            key: The normalized cache key.

        Returns:
            The stored payload, or MISS if not found or expired.
        """
        ...

    async def set_value(self, key: str, value: Any, duration: int) -> bool:
        """Store a payload, replacing any existing entry and its expiry.

        Args:
            key: The normalized cache key.
            value: The payload to store.
            duration: Seconds until expiry, 0 for never.

        Returns:
            True if the payload was stored.
        """
        ...

    async def add_value(self, key: str, value: Any, duration: int) -> bool:
        """Store a payload only if the key does not exist.

        Args:
            key: The normalized cache key.
            value: The payload to store.
            duration: Seconds until expiry, 0 for never.

        Returns:
            True if the payload was stored, False if the key existed.
        """
        ...

    async def delete_value(self, key: str) -> bool:
        """Delete a stored payload.

        Args:
            key: The normalized cache key.

        Returns:
            True if the key existed and was deleted, False otherwise.
        """
        ...

    async def flush_values(self) -> bool:
        """Delete every stored payload.

        Returns:
            True if the flush succeeded.
        """
        ...

    async def get_values(self, keys: list[str]) -> dict[str, Any]:
        """Retrieve several payloads at once.

        Args:
            keys: Normalized cache keys.

        Returns:
            A mapping with one entry per key; absent keys map to MISS.
        """
        ...

    async def set_values(self, data: dict[str, Any], duration: int) -> list[str]:
        """Store several payloads at once.

        Args:
            data: Normalized key to payload mapping.
            duration: Seconds until expiry, 0 for never.

        Returns:
            The keys that failed to store.
        """
        ...

    async def add_values(self, data: dict[str, Any], duration: int) -> list[str]:
        """Store several payloads, skipping keys that already exist.

        Args:
            data: Normalized key to payload mapping.
            duration: Seconds until expiry, 0 for never.

        Returns:
            The keys that were not stored, including existing ones.
        """
        ...
