"""Serializer implementations."""

from keyedcache.infrastructure.serializers.json import JsonSerializer
from keyedcache.infrastructure.serializers.pickle import PickleSerializer

__all__ = ["JsonSerializer", "PickleSerializer"]
