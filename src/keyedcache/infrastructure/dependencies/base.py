"""Base class for cache dependencies."""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any

from keyedcache.utils.hashing import hash_key

if TYPE_CHECKING:
    from keyedcache.core.services.keyed_cache import KeyedCache

_reusable_data: ContextVar[dict[str, Any] | None] = ContextVar(
    "reusable_dependency_data", default=None
)


@contextmanager
def reusable_scope() -> Iterator[None]:
    """Share reusable dependency data for the duration of one cache operation.

    Nested scopes join the outermost one. The memo is dropped on exit, so
    the next operation sees fresh data.
    """
    if _reusable_data.get() is not None:
        yield
        return
    token = _reusable_data.set({})
    try:
        yield
    finally:
        _reusable_data.reset(token)


class Dependency(ABC):
    """Dependency whose state is snapshotted on write and compared on read.

    Subclasses only implement ``generate_dependency_data``. The snapshot is
    stored in ``data`` and travels with the cached value, so dependencies
    must be picklable.

    Attributes:
        data: State captured by the last ``evaluate_dependency`` call.
        reusable: When True, generated data is memoized for the current
            cache operation and shared by every equal dependency, so a
            ``multi_get`` over many entries depending on the same state
            runs the expensive check once.
    """

    def __init__(self, reusable: bool = False) -> None:
        self.data: Any = None
        self.reusable = reusable

    async def evaluate_dependency(self, cache: "KeyedCache") -> None:
        """Capture the current state into ``data``."""
        self.data = await self._current_data(cache)

    async def is_changed(self, cache: "KeyedCache") -> bool:
        """Check whether the current state differs from ``data``."""
        return await self._current_data(cache) != self.data

    @abstractmethod
    async def generate_dependency_data(self, cache: "KeyedCache") -> Any:
        """Compute the state this dependency tracks.

        Args:
            cache: The cache the dependent value lives in.

        Returns:
            Any value comparable with ``==``.
        """

    async def _current_data(self, cache: "KeyedCache") -> Any:
        memo = _reusable_data.get()
        if not self.reusable or memo is None:
            return await self.generate_dependency_data(cache)
        key = self._reusable_hash()
        if key not in memo:
            memo[key] = await self.generate_dependency_data(cache)
        return memo[key]

    def _reusable_hash(self) -> str:
        state = {name: value for name, value in vars(self).items() if name != "data"}
        return hash_key((type(self).__module__, type(self).__qualname__, state))
