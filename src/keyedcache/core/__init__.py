"""Core domain layer for keyedcache.

Contains entities, interfaces (protocols), and domain services.
"""

from keyedcache.core.entities import MISS, CacheConfig
from keyedcache.core.interfaces import (
    ICacheBackend,
    IDependency,
    IKeyBuilder,
    ISerializer,
    SerializationError,
)
from keyedcache.core.services import KeyedCache

__all__ = [
    "MISS",
    "CacheConfig",
    "ICacheBackend",
    "IDependency",
    "IKeyBuilder",
    "ISerializer",
    "SerializationError",
    "KeyedCache",
]
