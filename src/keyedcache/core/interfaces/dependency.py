"""Cache dependency interface."""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from keyedcache.core.services.keyed_cache import KeyedCache


@runtime_checkable
class IDependency(Protocol):
    """Contract for conditions whose change invalidates a cached value.

    A dependency is snapshotted when the value is written and stored
    next to it. On read the cache asks whether the condition changed.
    """

    async def evaluate_dependency(self, cache: "KeyedCache") -> None:
        """Capture the current state of the condition.

        Args:
            cache: The cache the dependent value is written to.
        """
        ...

    async def is_changed(self, cache: "KeyedCache") -> bool:
        """Check whether the condition changed since the snapshot.

        Args:
            cache: The cache the dependent value was read from.

        Returns:
            True if the dependent value must be treated as stale.
        """
        ...
