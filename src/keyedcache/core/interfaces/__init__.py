"""Core interfaces (Protocol classes) for keyedcache."""

from keyedcache.core.interfaces.cache_backend import ICacheBackend
from keyedcache.core.interfaces.dependency import IDependency
from keyedcache.core.interfaces.key_builder import IKeyBuilder
from keyedcache.core.interfaces.serializer import ISerializer, SerializationError

__all__ = [
    "ICacheBackend",
    "IDependency",
    "IKeyBuilder",
    "ISerializer",
    "SerializationError",
]
