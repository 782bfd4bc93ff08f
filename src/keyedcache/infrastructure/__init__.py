"""Infrastructure layer implementations for keyedcache."""

from keyedcache.infrastructure.backends import (
    BaseCacheBackend,
    DummyCacheBackend,
    FileCacheBackend,
    InMemoryCacheBackend,
    RedisCacheBackend,
)
from keyedcache.infrastructure.dependencies import (
    CallbackDependency,
    ChainedDependency,
    Dependency,
    ExpiringDependency,
    FileDependency,
    TagDependency,
)
from keyedcache.infrastructure.key_builders import DefaultKeyBuilder
from keyedcache.infrastructure.serializers import JsonSerializer, PickleSerializer

__all__ = [
    "BaseCacheBackend",
    "DummyCacheBackend",
    "FileCacheBackend",
    "InMemoryCacheBackend",
    "RedisCacheBackend",
    "CallbackDependency",
    "ChainedDependency",
    "Dependency",
    "ExpiringDependency",
    "FileDependency",
    "TagDependency",
    "DefaultKeyBuilder",
    "JsonSerializer",
    "PickleSerializer",
]
