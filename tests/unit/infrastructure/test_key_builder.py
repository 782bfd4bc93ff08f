"""Tests for DefaultKeyBuilder."""

import pytest

from keyedcache.infrastructure.key_builders.default import (
    DefaultKeyBuilder,
    is_verbatim_key,
)


class TestDefaultKeyBuilder:
    """Tests for DefaultKeyBuilder."""

    @pytest.fixture
    def key_builder(self) -> DefaultKeyBuilder:
        """Create a key builder for testing."""
        return DefaultKeyBuilder(prefix="test:")

    @pytest.mark.parametrize("key", ["a", "Books", "author42", "x" * 32])
    def test_short_alphanumeric_key_kept(
        self, key_builder: DefaultKeyBuilder, key: str
    ) -> None:
        """Test that short alphanumeric keys are only prefixed."""
        assert key_builder.build(key) == "test:" + key

    @pytest.mark.parametrize(
        "key",
        ["x" * 33, "user:1", "with space", "", "café", ("user", 1), 42, None],
    )
    def test_other_keys_hashed(self, key_builder: DefaultKeyBuilder, key: object) -> None:
        """Test that long, punctuated, non-ASCII and non-string keys are hashed."""
        built = key_builder.build(key)

        assert built.startswith("test:")
        assert len(built) == len("test:") + 32
        assert built != "test:" + str(key)

    def test_same_key_same_result(self, key_builder: DefaultKeyBuilder) -> None:
        """Test that equal structured keys produce the same key."""
        key1 = key_builder.build({"author": 3, "page": [1, 2]})
        key2 = key_builder.build({"page": [1, 2], "author": 3})

        assert key1 == key2

    def test_different_keys_different_result(
        self, key_builder: DefaultKeyBuilder
    ) -> None:
        """Test that distinct logical keys do not collide."""
        assert key_builder.build(("book", 1)) != key_builder.build(("book", 2))
        assert key_builder.build("123") != key_builder.build(123)

    def test_empty_prefix(self) -> None:
        """Test building keys without a prefix."""
        assert DefaultKeyBuilder().build("books") == "books"

    def test_prefix_property(self, key_builder: DefaultKeyBuilder) -> None:
        """Test the prefix property."""
        assert key_builder.prefix == "test:"


def test_is_verbatim_key() -> None:
    """Test the verbatim key check."""
    assert is_verbatim_key("abc123")
    assert not is_verbatim_key("abc-123")
    assert not is_verbatim_key(b"abc")
