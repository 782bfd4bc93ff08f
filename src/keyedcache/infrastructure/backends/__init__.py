"""Cache backend implementations."""

from keyedcache.infrastructure.backends.base import BaseCacheBackend
from keyedcache.infrastructure.backends.dummy import DummyCacheBackend
from keyedcache.infrastructure.backends.file import FileCacheBackend
from keyedcache.infrastructure.backends.memory import InMemoryCacheBackend
from keyedcache.infrastructure.backends.redis import RedisCacheBackend

__all__ = [
    "BaseCacheBackend",
    "DummyCacheBackend",
    "FileCacheBackend",
    "InMemoryCacheBackend",
    "RedisCacheBackend",
]
