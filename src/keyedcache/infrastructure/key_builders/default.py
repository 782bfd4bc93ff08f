"""Default key builder implementation."""

from typing import Any

from keyedcache.utils.hashing import hash_key

MAX_VERBATIM_LENGTH = 32


class DefaultKeyBuilder:
    """Default key builder.

    Short ASCII-alphanumeric string keys are kept as they are so they stay
    readable in the backend. Everything else is replaced by an MD5 digest
    of its canonical encoding, which bounds key length and charset for
    backends with key restrictions.
    """

    def __init__(self, prefix: str = "") -> None:
        """Initialize the key builder.

        Args:
            prefix: Namespace prepended to all keys.
        """
        self._prefix = prefix

    @property
    def prefix(self) -> str:
        """Return the key prefix."""
        return self._prefix

    def build(self, key: Any) -> str:
        """Build the normalized key.

        Args:
            key: The logical key supplied by the caller.

        Returns:
            The prefixed, normalized key string.
        """
        if is_verbatim_key(key):
            return self._prefix + key
        return self._prefix + hash_key(key)


def is_verbatim_key(key: Any) -> bool:
    """Check whether a key can be used without hashing."""
    return (
        isinstance(key, str)
        and key.isascii()
        and key.isalnum()
        and len(key) <= MAX_VERBATIM_LENGTH
    )
