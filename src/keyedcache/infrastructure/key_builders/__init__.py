"""Key builder implementations."""

from keyedcache.infrastructure.key_builders.default import DefaultKeyBuilder

__all__ = ["DefaultKeyBuilder"]
