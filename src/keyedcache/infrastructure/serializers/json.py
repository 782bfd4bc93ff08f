"""JSON serializer implementation."""

import json
from datetime import date, datetime
from typing import Any

from keyedcache.core.interfaces.serializer import SerializationError


class JsonSerializer:
    """JSON serializer for cache payloads.

    Produces portable, human-readable payloads. Dependency objects are not
    JSON-encodable, so use this serializer for caches written without
    dependencies. ``datetime`` and ``date`` values round-trip; other objects
    are stored as their ``__dict__`` and come back as plain dicts.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        """Initialize the JSON serializer.

        Args:
            encoding: Character encoding to use.
        """
        self._encoding = encoding

    def serialize(self, value: Any) -> bytes:
        """Serialize value to bytes.

        Raises:
            SerializationError: If the value cannot be serialized.
        """
        try:
            json_str = json.dumps(value, default=self._default_encoder)
            return json_str.encode(self._encoding)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Failed to serialize value: {e}") from e

    def deserialize(self, data: bytes) -> Any:
        """Deserialize bytes to value.

        Raises:
            SerializationError: If the data cannot be deserialized.
        """
        try:
            json_str = data.decode(self._encoding)
            return json.loads(json_str, object_hook=self._object_hook)
        except (ValueError, AttributeError) as e:
            raise SerializationError(f"Failed to deserialize data: {e}") from e

    def _default_encoder(self, obj: Any) -> Any:
        """Custom encoder for non-JSON-serializable types.

        Raises:
            TypeError: If the object cannot be encoded.
        """
        if isinstance(obj, datetime):
            return {"__datetime__": obj.isoformat()}
        if isinstance(obj, date):
            return {"__date__": obj.isoformat()}
        if hasattr(obj, "__dict__"):
            return obj.__dict__
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")

    def _object_hook(self, obj: dict[str, Any]) -> Any:
        if len(obj) == 1:
            if "__datetime__" in obj:
                return datetime.fromisoformat(obj["__datetime__"])
            if "__date__" in obj:
                return date.fromisoformat(obj["__date__"])
        return obj
