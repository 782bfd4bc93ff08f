"""Key builder interface."""

from typing import Any, Protocol


class IKeyBuilder(Protocol):
    """Contract for normalizing logical cache keys.

    Key builders turn arbitrary keys (strings, tuples, dicts, ...) into
    bounded, deterministic strings that any backend can store.
    """

    def build(self, key: Any) -> str:
        """Build the normalized key.

        Args:
            key: The logical key supplied by the caller.

        Returns:
            The prefixed, normalized key string.
        """
        ...
