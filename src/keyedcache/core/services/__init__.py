"""Domain services for keyedcache."""

from keyedcache.core.services.keyed_cache import KeyedCache

__all__ = ["KeyedCache"]
