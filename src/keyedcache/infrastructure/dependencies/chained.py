"""Composite dependency."""

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from keyedcache.core.interfaces.dependency import IDependency
from keyedcache.infrastructure.dependencies.base import Dependency

if TYPE_CHECKING:
    from keyedcache.core.services.keyed_cache import KeyedCache


class ChainedDependency(Dependency):
    """Combines several dependencies.

    With ``depend_on_all`` (the default) the chain is changed as soon as
    any member changed. Without it, the chain is changed only when every
    member changed, i.e. a single unchanged member keeps the value valid.
    An empty chain never changes.
    """

    def __init__(
        self,
        dependencies: Iterable[IDependency],
        depend_on_all: bool = True,
    ) -> None:
        super().__init__()
        self.dependencies = list(dependencies)
        self.depend_on_all = depend_on_all

    async def evaluate_dependency(self, cache: "KeyedCache") -> None:
        for dependency in self.dependencies:
            await dependency.evaluate_dependency(cache)

    async def generate_dependency_data(self, cache: "KeyedCache") -> Any:
        return None

    async def is_changed(self, cache: "KeyedCache") -> bool:
        if not self.dependencies:
            return False
        for dependency in self.dependencies:
            changed = await dependency.is_changed(cache)
            if self.depend_on_all and changed:
                return True
            if not self.depend_on_all and not changed:
                return False
        return not self.depend_on_all
