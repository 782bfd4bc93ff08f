"""Cache configuration entity."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from keyedcache.core.interfaces.serializer import ISerializer

SERIALIZER_DEFAULT = "default"
SERIALIZER_DISABLED = "disabled"


@dataclass
class CacheConfig:
    """Cache configuration.

    Attributes:
        enabled: When False, the cache stores nothing and every read misses.
        key_prefix: Namespace prepended to every normalized key.
        serializer: ``"default"`` for the built-in pickle serializer,
            ``"disabled"`` to store raw values, or a custom ISerializer.
        default_duration: Seconds used by ``set`` and ``get_or_set`` when no
            duration is passed. 0 means never expire.
        on_set_failure: Called with the logical key when ``get_or_set``
            fails to store a produced value. A warning is logged if unset.
    """

    enabled: bool = True
    key_prefix: str = ""
    serializer: ISerializer | str = SERIALIZER_DEFAULT
    default_duration: int = 0
    on_set_failure: Callable[[Any], None] | None = None

    def __post_init__(self) -> None:
        """Validate option values."""
        if isinstance(self.serializer, str) and self.serializer not in (
            SERIALIZER_DEFAULT,
            SERIALIZER_DISABLED,
        ):
            raise ValueError(
                f"serializer must be {SERIALIZER_DEFAULT!r}, "
                f"{SERIALIZER_DISABLED!r} or a serializer instance, "
                f"got {self.serializer!r}"
            )
        if self.default_duration < 0:
            raise ValueError("default_duration must be >= 0")

    @property
    def serialization_enabled(self) -> bool:
        """Whether values are wrapped with their dependency and encoded."""
        return self.serializer != SERIALIZER_DISABLED
