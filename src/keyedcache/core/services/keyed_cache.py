"""Keyed cache - main facade for caching operations."""

import inspect
import logging
from collections.abc import Awaitable, Callable, Hashable, Iterable, Mapping, Sequence
from typing import Any

from keyedcache.core.entities.cache_config import SERIALIZER_DEFAULT, CacheConfig
from keyedcache.core.entities.miss import MISS
from keyedcache.core.interfaces.cache_backend import ICacheBackend
from keyedcache.core.interfaces.dependency import IDependency
from keyedcache.core.interfaces.key_builder import IKeyBuilder
from keyedcache.core.interfaces.serializer import ISerializer, SerializationError
from keyedcache.infrastructure.backends.dummy import DummyCacheBackend
from keyedcache.infrastructure.dependencies.base import reusable_scope
from keyedcache.infrastructure.key_builders.default import DefaultKeyBuilder
from keyedcache.infrastructure.serializers.pickle import PickleSerializer

logger = logging.getLogger(__name__)


class KeyedCache:
    """Backend-agnostic cache facade.

    Normalizes arbitrary keys, wraps values with an optional dependency,
    serializes them and delegates storage to a backend adapter. Reads
    return the ``MISS`` sentinel for absent, expired, invalidated, or
    unreadable entries, so any value (``None``, ``False``, ``0``) can be
    cached. Backend write failures come back as ``False`` or as failed
    key lists, never as exceptions.

    Example:
        cache = KeyedCache(InMemoryCacheBackend(), CacheConfig(key_prefix="app:"))
        await cache.set(("user", 42), {"name": "Alice"}, duration=60)
        user = await cache.get(("user", 42))
        if user is MISS:
            ...
    """

    def __init__(
        self,
        backend: ICacheBackend,
        config: CacheConfig | None = None,
        key_builder: IKeyBuilder | None = None,
    ) -> None:
        """Initialize the cache.

        Args:
            backend: The storage backend adapter.
            config: Optional cache configuration. Uses defaults if not provided.
            key_builder: Optional key builder. Defaults to a DefaultKeyBuilder
                using ``config.key_prefix``.
        """
        self._config = config or CacheConfig()
        self._backend = backend if self._config.enabled else DummyCacheBackend()
        self._key_builder = key_builder or DefaultKeyBuilder(prefix=self._config.key_prefix)
        self._serializer: ISerializer | None = _resolve_serializer(self._config)

        # Statistics
        self._hits = 0
        self._misses = 0

    @property
    def config(self) -> CacheConfig:
        """Get the cache configuration."""
        return self._config

    @property
    def backend(self) -> ICacheBackend:
        """Get the storage backend."""
        return self._backend

    @property
    def stats(self) -> dict[str, int]:
        """Get cache statistics.

        Returns:
            Dictionary with hits, misses, and total lookups.
        """
        return {
            "hits": self._hits,
            "misses": self._misses,
            "total": self._hits + self._misses,
        }

    def build_key(self, key: Any) -> str:
        """Normalize a logical key into the string stored by the backend."""
        return self._key_builder.build(key)

    async def get(self, key: Any) -> Any:
        """Retrieve a value.

        Args:
            key: The logical key.

        Returns:
            The cached value, or MISS if it is absent, expired, unreadable,
            or its dependency has changed.
        """
        payload = await self._backend.get_value(self.build_key(key))
        with reusable_scope():
            value = await self._decode(payload)
        self._record(value)
        return value

    async def exists(self, key: Any) -> bool:
        """Check whether the backend holds an entry for the key.

        Neither deserializes nor checks dependencies, so an entry whose
        dependency has changed still exists. Do not use as a freshness test.
        """
        return await self._backend.get_value(self.build_key(key)) is not MISS

    async def multi_get(self, keys: Iterable[Hashable]) -> dict[Hashable, Any]:
        """Retrieve several values with one backend call.

        Args:
            keys: Hashable logical keys.

        Returns:
            One entry per input key, in input order, each a value or MISS.
        """
        results = await self._fetch_many(keys)
        for value in results.values():
            self._record(value)
        return results

    async def set(
        self,
        key: Any,
        value: Any,
        duration: int | None = None,
        dependency: IDependency | None = None,
    ) -> bool:
        """Store a value, replacing any existing entry and its expiry.

        Args:
            key: The logical key.
            value: The value to cache.
            duration: Seconds until expiry. None uses ``default_duration``;
                0 means never expire.
            dependency: Optional dependency; the entry reads as a miss once
                it reports a change. Ignored when serialization is disabled.

        Returns:
            True if the backend stored the value.
        """
        if duration is None:
            duration = self._config.default_duration
        with reusable_scope():
            payload = await self._encode(value, dependency)
        return await self._backend.set_value(self.build_key(key), payload, duration)

    async def multi_set(
        self,
        items: Mapping[Hashable, Any],
        duration: int = 0,
        dependency: IDependency | None = None,
    ) -> list[Hashable]:
        """Store several values with one backend call.

        The dependency is evaluated once and shared by every item. There is
        no all-or-nothing guarantee: items not reported as failed are stored.

        Returns:
            The logical keys the backend failed to store.
        """
        with reusable_scope():
            data = await self._encode_items(items, dependency)
        failed = await self._backend.set_values(data, duration)
        return self._original_keys(items, failed)

    async def add(
        self,
        key: Any,
        value: Any,
        duration: int = 0,
        dependency: IDependency | None = None,
    ) -> bool:
        """Store a value only if the key does not exist yet.

        Atomicity depends on the backend's ``add_value``.

        Returns:
            True if stored, False if the key existed or the write failed.
        """
        with reusable_scope():
            payload = await self._encode(value, dependency)
        return await self._backend.add_value(self.build_key(key), payload, duration)

    async def multi_add(
        self,
        items: Mapping[Hashable, Any],
        duration: int = 0,
        dependency: IDependency | None = None,
    ) -> list[Hashable]:
        """Add several values with one backend call.

        Returns:
            The logical keys that were not stored, including existing ones.
        """
        with reusable_scope():
            data = await self._encode_items(items, dependency)
        failed = await self._backend.add_values(data, duration)
        return self._original_keys(items, failed)

    async def delete(self, key: Any) -> bool:
        """Delete the entry for a key."""
        return await self._backend.delete_value(self.build_key(key))

    async def flush(self) -> bool:
        """Delete every entry and reset statistics."""
        self._hits = 0
        self._misses = 0
        return await self._backend.flush_values()

    async def get_or_set(
        self,
        key: Any,
        producer: Callable[[], Any | Awaitable[Any]],
        duration: int | None = None,
        dependency: IDependency | None = None,
    ) -> Any:
        """Return the cached value, computing and storing it on a miss.

        This is a best-effort read-through, not single-flight: concurrent
        callers may all miss and all run ``producer``. A failed write,
        including a value the serializer rejects, is reported through
        ``config.on_set_failure`` (or a warning) and the produced value is
        still returned.

        Args:
            key: The logical key.
            producer: Called with no arguments on a miss; may be async.
            duration: Seconds until expiry, as for ``set``.
            dependency: Optional dependency, as for ``set``.

        Returns:
            The cached or freshly produced value.
        """
        value = await self.get(key)
        if value is not MISS:
            return value

        value = producer()
        if inspect.isawaitable(value):
            value = await value

        try:
            stored = await self.set(key, value, duration, dependency)
        except SerializationError as e:
            logger.debug("Could not serialize value for key %r: %s", key, e)
            stored = False

        if not stored:
            if self._config.on_set_failure is not None:
                self._config.on_set_failure(key)
            else:
                logger.warning("Failed to set cache value for key %r", key)
        return value

    async def _fetch_many(self, keys: Iterable[Hashable]) -> dict[Hashable, Any]:
        """Batch read without touching the hit/miss counters.

        Used by ``multi_get`` and by dependencies that keep their own
        state in the cache.
        """
        key_map = {key: self.build_key(key) for key in keys}
        payloads = await self._backend.get_values(list(key_map.values()))

        results: dict[Hashable, Any] = {}
        with reusable_scope():
            for key, built_key in key_map.items():
                results[key] = await self._decode(payloads.get(built_key, MISS))
        return results

    async def _encode(self, value: Any, dependency: IDependency | None) -> Any:
        if self._serializer is None:
            return value
        if dependency is not None:
            await dependency.evaluate_dependency(self)
        return self._serializer.serialize([value, dependency])

    async def _encode_items(
        self,
        items: Mapping[Hashable, Any],
        dependency: IDependency | None,
    ) -> dict[str, Any]:
        if self._serializer is not None and dependency is not None:
            await dependency.evaluate_dependency(self)

        data: dict[str, Any] = {}
        for key, value in items.items():
            if self._serializer is not None:
                value = self._serializer.serialize([value, dependency])
            data[self.build_key(key)] = value
        return data

    async def _decode(self, payload: Any) -> Any:
        """Turn a backend payload into a value, or MISS."""
        if payload is MISS or self._serializer is None:
            return payload

        try:
            decoded = self._serializer.deserialize(payload)
        except SerializationError as e:
            logger.debug("Discarding unreadable cache payload: %s", e)
            return MISS

        if not isinstance(decoded, Sequence) or isinstance(decoded, (str, bytes)):
            logger.debug("Discarding cache payload of unexpected shape")
            return MISS
        if len(decoded) != 2:
            logger.debug("Discarding cache payload of unexpected shape")
            return MISS

        value, dependency = decoded
        if dependency is None:
            return value
        if not isinstance(dependency, IDependency):
            # The serializer did not round-trip the dependency object
            logger.debug("Discarding cache payload with unusable dependency %r", dependency)
            return MISS
        if await dependency.is_changed(self):
            return MISS
        return value

    def _original_keys(
        self, items: Mapping[Hashable, Any], failed: list[str]
    ) -> list[Hashable]:
        """Map failed backend keys back to the caller's keys, in input order."""
        failed_set = set(failed)
        return [key for key in items if self.build_key(key) in failed_set]

    def _record(self, value: Any) -> None:
        if value is MISS:
            self._misses += 1
        else:
            self._hits += 1


def _resolve_serializer(config: CacheConfig) -> ISerializer | None:
    if not config.serialization_enabled:
        return None
    if config.serializer == SERIALIZER_DEFAULT:
        return PickleSerializer()
    return config.serializer  # type: ignore[return-value]
