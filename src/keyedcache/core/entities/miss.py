"""Cache miss sentinel."""

from typing import Final


class _Miss:
    """Marker returned when a key is absent, expired, or invalidated.

    There is exactly one instance, ``MISS``. It is falsy but must be
    compared by identity, since cached values may be falsy too.
    """

    _instance: "_Miss | None" = None

    def __new__(cls) -> "_Miss":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISS"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        # Keep the singleton across pickling
        return "MISS"


MISS: Final = _Miss()
