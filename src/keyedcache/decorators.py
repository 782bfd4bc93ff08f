"""Cache decorators for async functions.

These decorators memoize coroutine results through a configured KeyedCache
and invalidate tagged results after writes.
"""

import functools
import re
from collections.abc import Callable
from typing import Any, TypeVar

from keyedcache.core.services.keyed_cache import KeyedCache
from keyedcache.infrastructure.dependencies.tag import TagDependency

F = TypeVar("F", bound=Callable[..., Any])

# Module-level cache reference
_cache: KeyedCache | None = None


def configure(cache: KeyedCache | None) -> None:
    """Configure the cache used by the decorators.

    Until this is called, decorated functions run uncached. Pass None to
    switch caching off again.

    Example:
        configure(KeyedCache(InMemoryCacheBackend(), CacheConfig(key_prefix="app:")))
    """
    global _cache
    _cache = cache


def get_cache() -> KeyedCache | None:
    """Get the configured cache, or None if not configured."""
    return _cache


def cached(
    duration: int | None = None,
    tags: list[str] | None = None,
    key: str | Callable[..., Any] | None = None,
) -> Callable[[F], F]:
    """Decorator for caching async function results.

    Args:
        duration: Seconds to keep results. Uses the cache default if None.
        tags: Tags attached through a TagDependency. Supports {arg_name}
            interpolation from keyword arguments.
        key: Custom cache key or function to generate one.
            If string, supports {arg_name} interpolation.
            If callable, receives (*args, **kwargs) and returns the key.

    Returns:
        Decorated function.

    Example:
        @cached(duration=600, tags=["author", "author:{id}"])
        async def get_author(id: int) -> dict:
            return await repository.get_author(id)
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            if _cache is None:
                return await func(*args, **kwargs)

            cache_key = _build_cache_key(func, args, kwargs, key)
            resolved_tags = _resolve_tags(tags, kwargs)
            dependency = TagDependency(resolved_tags) if resolved_tags else None

            return await _cache.get_or_set(
                cache_key,
                lambda: func(*args, **kwargs),
                duration=duration,
                dependency=dependency,
            )

        return wrapper  # type: ignore

    return decorator


def invalidates(tags: list[str]) -> Callable[[F], F]:
    """Decorator for invalidating tagged results after a write.

    Executes the decorated function and then invalidates every entry
    tagged with any of the given tags.

    Args:
        tags: Tags to invalidate. Supports {arg_name} interpolation.

    Example:
        @invalidates(tags=["author:{id}"])
        async def update_author(id: int, data: dict) -> dict:
            return await repository.update_author(id, data)
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            result = await func(*args, **kwargs)

            if _cache is not None:
                await TagDependency.invalidate(_cache, _resolve_tags(tags, kwargs))

            return result

        return wrapper  # type: ignore

    return decorator


def _build_cache_key(
    func: Callable[..., Any],
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
    custom_key: str | Callable[..., Any] | None,
) -> Any:
    """Build the logical cache key for a function call.

    The default key is structured; KeyedCache hashes it into a bounded
    backend key.
    """
    if custom_key is not None:
        if callable(custom_key):
            return custom_key(*args, **kwargs)
        return _interpolate_string(custom_key, kwargs)

    return (func.__module__, func.__qualname__, args, kwargs)


def _resolve_tags(tags: list[str] | None, kwargs: dict[str, Any]) -> list[str]:
    if not tags:
        return []
    return [_interpolate_string(tag, kwargs) for tag in tags]


def _interpolate_string(template: str, kwargs: dict[str, Any]) -> str:
    """Interpolate {arg_name} placeholders from keyword arguments.

    Unknown placeholders are left as they are.
    """

    def replacer(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in kwargs:
            return str(kwargs[name])
        return match.group(0)

    return re.sub(r"\{(\w+)\}", replacer, template)
