"""Dependency on a file's modification time."""

import os
from typing import TYPE_CHECKING

from keyedcache.infrastructure.dependencies.base import Dependency

if TYPE_CHECKING:
    from keyedcache.core.services.keyed_cache import KeyedCache


class FileDependency(Dependency):
    """Invalidates when a file is modified, created, or removed."""

    def __init__(self, file_name: str | os.PathLike[str], reusable: bool = False) -> None:
        super().__init__(reusable=reusable)
        self.file_name = os.fspath(file_name)

    async def generate_dependency_data(self, cache: "KeyedCache") -> float | None:
        """Return the file's mtime, or None if it does not exist."""
        try:
            return os.stat(self.file_name).st_mtime
        except FileNotFoundError:
            return None
