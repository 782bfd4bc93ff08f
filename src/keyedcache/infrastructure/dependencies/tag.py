"""Tag-based dependency."""

import logging
import uuid
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from keyedcache.core.entities.miss import MISS
from keyedcache.infrastructure.dependencies.base import Dependency

if TYPE_CHECKING:
    from keyedcache.core.services.keyed_cache import KeyedCache

logger = logging.getLogger(__name__)

TAG_KEY_NAMESPACE = "keyedcache.TagDependency"


class TagDependency(Dependency):
    """Invalidates when any of its tags is invalidated.

    Each tag has a version token stored in the same cache as the values.
    The dependency snapshots the tokens on write; ``invalidate`` replaces
    them, which makes every entry tagged with those tags stale. Tags
    without a token get one the first time they are used.

    Example:
        await cache.set("user:42", user, dependency=TagDependency(["user:42"]))
        await TagDependency.invalidate(cache, ["user:42"])
        assert await cache.get("user:42") is MISS
    """

    def __init__(self, tags: str | Iterable[str]) -> None:
        super().__init__()
        self.tags = [tags] if isinstance(tags, str) else list(tags)

    async def generate_dependency_data(self, cache: "KeyedCache") -> dict[str, Any]:
        versions = await _get_versions(cache, self.tags)
        new_tags = [tag for tag, version in versions.items() if version is MISS]
        if new_tags:
            # An unstored token never matches on read, so the entry just misses
            touched, _ = await _touch(cache, new_tags)
            versions.update(touched)
        return versions

    async def is_changed(self, cache: "KeyedCache") -> bool:
        return await _get_versions(cache, self.tags) != self.data

    @staticmethod
    async def invalidate(cache: "KeyedCache", tags: str | Iterable[str]) -> bool:
        """Invalidate every entry depending on any of the given tags.

        Args:
            cache: The cache holding the tagged entries.
            tags: A tag or tags to invalidate.

        Returns:
            True if every tag got a new version. Entries depending on a
            tag whose write failed stay valid.
        """
        _, failed = await _touch(cache, [tags] if isinstance(tags, str) else list(tags))
        if failed:
            logger.warning("Failed to invalidate tags %s", failed)
        return not failed


async def _get_versions(cache: "KeyedCache", tags: list[str]) -> dict[str, Any]:
    values = await cache._fetch_many([_tag_key(tag) for tag in tags])
    return {tag: values[_tag_key(tag)] for tag in tags}


async def _touch(cache: "KeyedCache", tags: list[str]) -> tuple[dict[str, str], list[str]]:
    versions = {tag: uuid.uuid4().hex for tag in tags}
    failed = await cache.multi_set({_tag_key(tag): version for tag, version in versions.items()})
    return versions, [tag for _, tag in failed]


def _tag_key(tag: str) -> tuple[str, str]:
    return (TAG_KEY_NAMESPACE, tag)
