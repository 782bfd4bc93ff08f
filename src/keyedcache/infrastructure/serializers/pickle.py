"""Pickle serializer implementation."""

import pickle
from typing import Any

from keyedcache.core.interfaces.serializer import SerializationError


class PickleSerializer:
    """Default serializer for cache payloads.

    Pickle round-trips arbitrary Python objects, including the dependency
    objects stored next to cached values.
    """

    def __init__(self, protocol: int = pickle.HIGHEST_PROTOCOL) -> None:
        """Initialize the pickle serializer.

        Args:
            protocol: Pickle protocol version to write.
        """
        self._protocol = protocol

    def serialize(self, value: Any) -> bytes:
        """Serialize value to bytes.

        Raises:
            SerializationError: If the value cannot be pickled.
        """
        try:
            return pickle.dumps(value, protocol=self._protocol)
        except (pickle.PicklingError, TypeError, AttributeError) as e:
            raise SerializationError(f"Failed to serialize value: {e}") from e

    def deserialize(self, data: bytes) -> Any:
        """Deserialize bytes to value.

        Raises:
            SerializationError: If the data is not a valid pickle.
        """
        try:
            return pickle.loads(data)
        except Exception as e:
            raise SerializationError(f"Failed to deserialize data: {e}") from e
