"""keyedcache - Backend-agnostic async cache facade for Python.

A small library that puts one uniform API over any key-value store:
arbitrary keys are normalized into bounded strings, values are serialized
together with optional dependencies that invalidate them, and storage is
delegated to pluggable backends (in-memory, file, Redis).

Example:
    from keyedcache import (
        MISS,
        CacheConfig,
        InMemoryCacheBackend,
        KeyedCache,
        TagDependency,
    )

    cache = KeyedCache(
        backend=InMemoryCacheBackend(maxsize=10_000),
        config=CacheConfig(key_prefix="books:", default_duration=300),
    )

    await cache.set(("book", 7), book, dependency=TagDependency("author:3"))
    book = await cache.get(("book", 7))
    if book is MISS:
        book = await load_book(7)

    # Read-through
    authors = await cache.get_or_set("authors", load_authors, duration=60)

    # Invalidate everything tagged with author 3
    await TagDependency.invalidate(cache, "author:3")
"""

from keyedcache.core.entities import (
    MISS,
    SERIALIZER_DEFAULT,
    SERIALIZER_DISABLED,
    CacheConfig,
)
from keyedcache.core.interfaces import (
    ICacheBackend,
    IDependency,
    IKeyBuilder,
    ISerializer,
    SerializationError,
)
from keyedcache.core.services import KeyedCache
from keyedcache.decorators import cached, configure, invalidates
from keyedcache.infrastructure import (
    BaseCacheBackend,
    CallbackDependency,
    ChainedDependency,
    DefaultKeyBuilder,
    Dependency,
    DummyCacheBackend,
    ExpiringDependency,
    FileCacheBackend,
    FileDependency,
    InMemoryCacheBackend,
    JsonSerializer,
    PickleSerializer,
    RedisCacheBackend,
    TagDependency,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core entities
    "MISS",
    "CacheConfig",
    "SERIALIZER_DEFAULT",
    "SERIALIZER_DISABLED",
    # Core interfaces
    "ICacheBackend",
    "IDependency",
    "IKeyBuilder",
    "ISerializer",
    "SerializationError",
    # Core services
    "KeyedCache",
    # Backends
    "BaseCacheBackend",
    "DummyCacheBackend",
    "FileCacheBackend",
    "InMemoryCacheBackend",
    "RedisCacheBackend",
    # Dependencies
    "Dependency",
    "CallbackDependency",
    "ChainedDependency",
    "ExpiringDependency",
    "FileDependency",
    "TagDependency",
    # Key builders and serializers
    "DefaultKeyBuilder",
    "JsonSerializer",
    "PickleSerializer",
    # Decorators
    "cached",
    "configure",
    "invalidates",
]
