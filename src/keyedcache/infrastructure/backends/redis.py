"""Redis cache backend implementation."""

import logging
from typing import Any

import redis.asyncio as redis
from redis.exceptions import RedisError

from keyedcache.core.entities.miss import MISS
from keyedcache.infrastructure.backends.base import BaseCacheBackend

logger = logging.getLogger(__name__)


class RedisCacheBackend(BaseCacheBackend):
    """Redis cache backend for distributed deployments.

    Uses native multi-key commands for batch operations and ``SET NX`` for
    atomic adds. Keys live under ``namespace:`` so ``flush_values`` only
    removes this backend's keys, not the whole database. Redis errors are
    logged and reported as failed writes or misses.

    With serialization disabled, only values Redis can store natively
    (bytes, str, int, float) are supported and reads return bytes.
    """

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379",
        namespace: str = "keyedcache",
        client: redis.Redis | None = None,
    ) -> None:
        """Initialize the Redis cache backend.

        Args:
            redis_url: Redis connection URL, used when no client is given.
            namespace: Prefix for all keys written by this backend.
            client: An existing ``redis.asyncio.Redis`` client.
        """
        self._redis: redis.Redis = client or redis.from_url(redis_url)  # type: ignore
        self._namespace = namespace

    async def get_value(self, key: str) -> Any:
        """Retrieve a stored payload, or MISS if absent or on error."""
        try:
            value = await self._redis.get(self._prefixed_key(key))
        except RedisError as e:
            logger.warning("Redis GET failed for key %s: %s", key, e)
            return MISS
        return MISS if value is None else value

    async def set_value(self, key: str, value: Any, duration: int) -> bool:
        """Store a payload, replacing any existing entry and its expiry."""
        try:
            result = await self._redis.set(
                self._prefixed_key(key), value, ex=_expire(duration)
            )
        except RedisError as e:
            logger.warning("Redis SET failed for key %s: %s", key, e)
            return False
        return bool(result)

    async def add_value(self, key: str, value: Any, duration: int) -> bool:
        """Store a payload only if the key does not exist (``SET NX``)."""
        try:
            result = await self._redis.set(
                self._prefixed_key(key), value, ex=_expire(duration), nx=True
            )
        except RedisError as e:
            logger.warning("Redis SET NX failed for key %s: %s", key, e)
            return False
        return bool(result)

    async def delete_value(self, key: str) -> bool:
        """Delete a payload; False if it did not exist or on error."""
        try:
            result = await self._redis.delete(self._prefixed_key(key))
        except RedisError as e:
            logger.warning("Redis DEL failed for key %s: %s", key, e)
            return False
        return result > 0

    async def flush_values(self) -> bool:
        """Delete every key under this backend's namespace."""
        try:
            await self._delete_by_pattern(f"{self._namespace}:*")
        except RedisError as e:
            logger.warning("Redis flush of namespace %s failed: %s", self._namespace, e)
            return False
        return True

    async def get_values(self, keys: list[str]) -> dict[str, Any]:
        """Retrieve several payloads with a single ``MGET``."""
        if not keys:
            return {}
        try:
            values = await self._redis.mget([self._prefixed_key(k) for k in keys])
        except RedisError as e:
            logger.warning("Redis MGET failed for %d keys: %s", len(keys), e)
            return {key: MISS for key in keys}
        return {
            key: MISS if value is None else value
            for key, value in zip(keys, values)
        }

    async def set_values(self, data: dict[str, Any], duration: int) -> list[str]:
        """Store several payloads in one pipeline."""
        return await self._pipeline_set(data, duration, nx=False)

    async def add_values(self, data: dict[str, Any], duration: int) -> list[str]:
        """Add several payloads in one pipeline; existing keys fail."""
        return await self._pipeline_set(data, duration, nx=True)

    async def _pipeline_set(
        self, data: dict[str, Any], duration: int, nx: bool
    ) -> list[str]:
        """Run one SET per key without a transaction.

        Each command succeeds or fails on its own; errors come back as
        results instead of aborting the batch.
        """
        if not data:
            return []
        try:
            async with self._redis.pipeline(transaction=False) as pipe:
                for key, value in data.items():
                    pipe.set(self._prefixed_key(key), value, ex=_expire(duration), nx=nx)
                results = await pipe.execute(raise_on_error=False)
        except RedisError as e:
            logger.warning("Redis pipeline failed for %d keys: %s", len(data), e)
            return list(data)
        return [key for key, result in zip(data, results) if result is not True]

    async def _delete_by_pattern(self, pattern: str) -> int:
        """Delete keys matching a pattern using SCAN.

        Uses SCAN instead of KEYS for production safety.
        """
        count = 0
        cursor = 0

        while True:
            cursor, keys = await self._redis.scan(cursor, match=pattern, count=100)

            if keys:
                deleted = await self._redis.delete(*keys)
                count += deleted

            if cursor == 0:
                break

        return count

    def _prefixed_key(self, key: str) -> str:
        return f"{self._namespace}:{key}"

    async def close(self) -> None:
        """Close the Redis connection."""
        await self._redis.aclose()

    async def __aenter__(self) -> "RedisCacheBackend":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: type, exc_val: Exception, exc_tb: object) -> None:
        """Async context manager exit."""
        await self.close()


def _expire(duration: int) -> int | None:
    return duration if duration > 0 else None
