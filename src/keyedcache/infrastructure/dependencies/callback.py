"""Dependency on the result of a callable."""

import inspect
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from keyedcache.infrastructure.dependencies.base import Dependency

if TYPE_CHECKING:
    from keyedcache.core.services.keyed_cache import KeyedCache


class CallbackDependency(Dependency):
    """Invalidates when a callable starts returning something else.

    The callable may be sync or async. It is stored with the cached value,
    so it must be picklable: a module-level function, not a lambda.
    """

    def __init__(self, callback: Callable[[], Any], reusable: bool = False) -> None:
        super().__init__(reusable=reusable)
        self.callback = callback

    async def generate_dependency_data(self, cache: "KeyedCache") -> Any:
        result = self.callback()
        if inspect.isawaitable(result):
            result = await result
        return result
