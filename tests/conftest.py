"""Pytest configuration for keyedcache tests."""

import pytest

from keyedcache import CacheConfig, InMemoryCacheBackend, KeyedCache


@pytest.fixture(autouse=True)
def reset_module_state():
    """Reset decorator configuration."""
    import keyedcache.decorators

    original_cache = keyedcache.decorators._cache

    yield

    keyedcache.decorators._cache = original_cache


@pytest.fixture
def backend() -> InMemoryCacheBackend:
    """Create an in-memory backend for testing."""
    return InMemoryCacheBackend(maxsize=100)


@pytest.fixture
def cache(backend: InMemoryCacheBackend) -> KeyedCache:
    """Create a cache over the in-memory backend."""
    return KeyedCache(backend=backend, config=CacheConfig(key_prefix="test:"))
