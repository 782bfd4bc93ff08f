"""Tests for RedisCacheBackend with a mocked client."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from keyedcache import MISS
from keyedcache.infrastructure.backends.redis import RedisCacheBackend


@pytest.fixture
def client() -> MagicMock:
    """Create a mocked redis.asyncio client."""
    client = MagicMock()
    client.get = AsyncMock(return_value=None)
    client.set = AsyncMock(return_value=True)
    client.delete = AsyncMock(return_value=1)
    client.mget = AsyncMock(return_value=[])
    client.scan = AsyncMock(return_value=(0, []))
    client.aclose = AsyncMock()
    return client


@pytest.fixture
def pipe(client: MagicMock) -> MagicMock:
    """Attach a mocked pipeline to the client."""
    pipe = MagicMock()
    pipe.execute = AsyncMock(return_value=[])
    client.pipeline.return_value.__aenter__.return_value = pipe
    return pipe


@pytest.fixture
def backend(client: MagicMock) -> RedisCacheBackend:
    """Create a backend over the mocked client."""
    return RedisCacheBackend(namespace="test", client=client)


class TestRedisCacheBackend:
    """Tests for RedisCacheBackend."""

    @pytest.mark.asyncio
    async def test_get_value(self, backend: RedisCacheBackend, client: MagicMock) -> None:
        """Test that keys are namespaced and payloads returned."""
        client.get.return_value = b"payload"

        assert await backend.get_value("key1") == b"payload"
        client.get.assert_awaited_once_with("test:key1")

    @pytest.mark.asyncio
    async def test_get_missing(self, backend: RedisCacheBackend, client: MagicMock) -> None:
        """Test that a nil reply is a miss."""
        assert await backend.get_value("key1") is MISS

    @pytest.mark.asyncio
    async def test_get_error_is_miss(
        self, backend: RedisCacheBackend, client: MagicMock
    ) -> None:
        """Test that connection errors read as misses."""
        client.get.side_effect = RedisConnectionError("down")

        assert await backend.get_value("key1") is MISS

    @pytest.mark.asyncio
    async def test_set_with_duration(
        self, backend: RedisCacheBackend, client: MagicMock
    ) -> None:
        """Test that durations map to EX and 0 to no expiry."""
        assert await backend.set_value("key1", b"v", 30) is True
        client.set.assert_awaited_with("test:key1", b"v", ex=30)

        await backend.set_value("key1", b"v", 0)
        client.set.assert_awaited_with("test:key1", b"v", ex=None)

    @pytest.mark.asyncio
    async def test_set_error_is_false(
        self, backend: RedisCacheBackend, client: MagicMock
    ) -> None:
        """Test that write errors become False."""
        client.set.side_effect = RedisConnectionError("down")

        assert await backend.set_value("key1", b"v", 0) is False

    @pytest.mark.asyncio
    async def test_add_uses_nx(self, backend: RedisCacheBackend, client: MagicMock) -> None:
        """Test that add issues SET NX and reports existing keys."""
        client.set.return_value = None

        assert await backend.add_value("key1", b"v", 10) is False
        client.set.assert_awaited_once_with("test:key1", b"v", ex=10, nx=True)

    @pytest.mark.asyncio
    async def test_delete(self, backend: RedisCacheBackend, client: MagicMock) -> None:
        """Test deleting existing and missing keys."""
        assert await backend.delete_value("key1") is True

        client.delete.return_value = 0
        assert await backend.delete_value("key1") is False

    @pytest.mark.asyncio
    async def test_flush_scans_namespace(
        self, backend: RedisCacheBackend, client: MagicMock
    ) -> None:
        """Test that flush only deletes keys in the namespace."""
        client.scan.side_effect = [(5, [b"test:a", b"test:b"]), (0, [b"test:c"])]

        assert await backend.flush_values() is True

        client.scan.assert_any_await(0, match="test:*", count=100)
        client.scan.assert_any_await(5, match="test:*", count=100)
        client.delete.assert_any_await(b"test:a", b"test:b")
        client.delete.assert_any_await(b"test:c")

    @pytest.mark.asyncio
    async def test_get_values_uses_mget(
        self, backend: RedisCacheBackend, client: MagicMock
    ) -> None:
        """Test that batch reads use one MGET and map nils to MISS."""
        client.mget.return_value = [b"1", None]

        values = await backend.get_values(["a", "b"])

        assert values == {"a": b"1", "b": MISS}
        client.mget.assert_awaited_once_with(["test:a", "test:b"])

    @pytest.mark.asyncio
    async def test_get_values_error(
        self, backend: RedisCacheBackend, client: MagicMock
    ) -> None:
        """Test that a failed MGET misses every key."""
        client.mget.side_effect = RedisConnectionError("down")

        assert await backend.get_values(["a", "b"]) == {"a": MISS, "b": MISS}

    @pytest.mark.asyncio
    async def test_set_values_reports_failed_keys(
        self, backend: RedisCacheBackend, pipe: MagicMock
    ) -> None:
        """Test that per-command failures are reported individually."""
        pipe.execute.return_value = [True, RedisConnectionError("oops"), True]

        failed = await backend.set_values({"a": b"1", "b": b"2", "c": b"3"}, 0)

        assert failed == ["b"]
        pipe.execute.assert_awaited_once_with(raise_on_error=False)

    @pytest.mark.asyncio
    async def test_add_values_reports_existing_keys(
        self, backend: RedisCacheBackend, pipe: MagicMock
    ) -> None:
        """Test that SET NX nil replies are failed keys."""
        pipe.execute.return_value = [True, None]

        failed = await backend.add_values({"a": b"1", "b": b"2"}, 60)

        assert failed == ["b"]
        pipe.set.assert_any_call("test:b", b"2", ex=60, nx=True)

    @pytest.mark.asyncio
    async def test_empty_batches(self, backend: RedisCacheBackend, client: MagicMock) -> None:
        """Test that empty batches skip Redis."""
        assert await backend.get_values([]) == {}
        assert await backend.set_values({}, 0) == []
        client.mget.assert_not_awaited()
        client.pipeline.assert_not_called()

    @pytest.mark.asyncio
    async def test_context_manager_closes(self, client: MagicMock) -> None:
        """Test that leaving the context closes the client."""
        async with RedisCacheBackend(client=client):
            pass

        client.aclose.assert_awaited_once()
