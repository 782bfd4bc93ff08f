"""Tests for cache decorators."""

import pytest

from keyedcache import KeyedCache
from keyedcache.decorators import cached, configure, get_cache, invalidates


@pytest.fixture
def configured_cache(cache: KeyedCache) -> KeyedCache:
    """Configure the decorators with the test cache."""
    configure(cache)
    return cache


class TestCachedDecorator:
    """Tests for @cached decorator."""

    @pytest.mark.asyncio
    async def test_cached_function(self, configured_cache: KeyedCache) -> None:
        """Test that @cached caches function results."""
        call_count = 0

        @cached()
        async def get_book(id: int) -> dict:
            nonlocal call_count
            call_count += 1
            return {"id": id, "title": "Dune"}

        assert await get_book(id=1) == {"id": 1, "title": "Dune"}
        assert await get_book(id=1) == {"id": 1, "title": "Dune"}
        assert call_count == 1

    @pytest.mark.asyncio
    async def test_cached_different_args(self, configured_cache: KeyedCache) -> None:
        """Test that different args create different cache entries."""
        call_count = 0

        @cached()
        async def get_author(id: int) -> dict:
            nonlocal call_count
            call_count += 1
            return {"id": id}

        await get_author(1)
        await get_author(2)
        await get_author(1)

        assert call_count == 2

    @pytest.mark.asyncio
    async def test_cached_none_result(self, configured_cache: KeyedCache) -> None:
        """Test that a None result is cached too."""
        call_count = 0

        @cached()
        async def find_book(isbn: str) -> None:
            nonlocal call_count
            call_count += 1
            return None

        assert await find_book(isbn="123") is None
        assert await find_book(isbn="123") is None
        assert call_count == 1

    @pytest.mark.asyncio
    async def test_custom_string_key(self, configured_cache: KeyedCache) -> None:
        """Test a string key with argument interpolation."""

        @cached(key="book:{id}")
        async def get_book(id: int) -> str:
            return "Dune"

        await get_book(id=7)

        assert await configured_cache.get("book:7") == "Dune"

    @pytest.mark.asyncio
    async def test_custom_callable_key(self, configured_cache: KeyedCache) -> None:
        """Test a key built by a callable."""

        @cached(key=lambda id: ("book", id))
        async def get_book(id: int) -> str:
            return "Dune"

        await get_book(7)

        assert await configured_cache.get(("book", 7)) == "Dune"

    @pytest.mark.asyncio
    async def test_not_configured(self) -> None:
        """Test that functions run uncached without a configured cache."""
        configure(None)
        call_count = 0

        @cached()
        async def get_book(id: int) -> int:
            nonlocal call_count
            call_count += 1
            return id

        await get_book(1)
        await get_book(1)

        assert call_count == 2
        assert get_cache() is None

    def test_preserves_metadata(self) -> None:
        """Test that functools.wraps keeps the function name."""

        @cached()
        async def get_book(id: int) -> int:
            """Load a book."""
            return id

        assert get_book.__name__ == "get_book"
        assert get_book.__doc__ == "Load a book."


class TestInvalidatesDecorator:
    """Tests for @invalidates decorator."""

    @pytest.mark.asyncio
    async def test_invalidates_tagged_results(self, configured_cache: KeyedCache) -> None:
        """Test that a write invalidates results tagged with its tags."""
        call_count = 0

        @cached(tags=["author:{id}"])
        async def get_author(id: int) -> dict:
            nonlocal call_count
            call_count += 1
            return {"id": id, "version": call_count}

        @invalidates(tags=["author:{id}"])
        async def update_author(id: int, name: str) -> dict:
            return {"id": id, "name": name}

        assert (await get_author(id=1))["version"] == 1
        assert (await get_author(id=1))["version"] == 1

        result = await update_author(id=1, name="Herbert")
        assert result == {"id": 1, "name": "Herbert"}

        assert (await get_author(id=1))["version"] == 2
        assert call_count == 2

    @pytest.mark.asyncio
    async def test_other_tags_untouched(self, configured_cache: KeyedCache) -> None:
        """Test that unrelated tagged results stay cached."""
        call_count = 0

        @cached(tags=["author:{id}"])
        async def get_author(id: int) -> int:
            nonlocal call_count
            call_count += 1
            return id

        @invalidates(tags=["author:{id}"])
        async def delete_author(id: int) -> None:
            return None

        await get_author(id=1)
        await get_author(id=2)
        await delete_author(id=2)
        await get_author(id=1)
        await get_author(id=2)

        assert call_count == 3
