"""Domain entities for keyedcache."""

from keyedcache.core.entities.cache_config import (
    SERIALIZER_DEFAULT,
    SERIALIZER_DISABLED,
    CacheConfig,
)
from keyedcache.core.entities.miss import MISS

__all__ = [
    "CacheConfig",
    "MISS",
    "SERIALIZER_DEFAULT",
    "SERIALIZER_DISABLED",
]
