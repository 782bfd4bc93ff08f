"""Time-based dependency."""

import time
from typing import TYPE_CHECKING

from keyedcache.infrastructure.dependencies.base import Dependency

if TYPE_CHECKING:
    from keyedcache.core.services.keyed_cache import KeyedCache


class ExpiringDependency(Dependency):
    """Invalidates once a number of seconds has passed since the write.

    Unlike a backend duration, the deadline is checked on read by the
    cache itself, so it works the same on every backend and can be
    combined with other dependencies in a ChainedDependency.
    """

    def __init__(self, duration: float) -> None:
        if duration < 0:
            raise ValueError("duration must be >= 0")
        super().__init__()
        self.duration = duration

    async def generate_dependency_data(self, cache: "KeyedCache") -> float:
        """Return the evaluation time as a Unix timestamp."""
        return time.time()

    async def is_changed(self, cache: "KeyedCache") -> bool:
        if self.data is None:
            return True
        return time.time() - self.data >= self.duration
