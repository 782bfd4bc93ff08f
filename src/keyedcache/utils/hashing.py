"""Hashing utilities for cache key generation."""

import hashlib
import json
from collections.abc import Mapping
from typing import Any


def canonicalize(value: Any) -> Any:
    """Convert a value into a type-tagged, order-independent JSON structure.

    Every node carries its type name, so values that JSON would otherwise
    conflate (``1`` and ``"1"``, ``True`` and ``1``, tuples and lists) stay
    distinct. Mapping items and set members are sorted by their encoding.

    Args:
        value: Any key value. Unknown types fall back to their ``repr``.

    Returns:
        A structure that ``json.dumps`` can encode deterministically.
    """
    if value is None or isinstance(value, (bool, int, float, str)):
        return [type(value).__name__, value]
    if isinstance(value, bytes):
        return ["bytes", value.hex()]
    if isinstance(value, Mapping):
        items = [[canonicalize(k), canonicalize(v)] for k, v in value.items()]
        return ["mapping", sorted(items, key=_dumps)]
    if isinstance(value, (set, frozenset)):
        return ["set", sorted((canonicalize(v) for v in value), key=_dumps)]
    if isinstance(value, tuple):
        return ["tuple", [canonicalize(v) for v in value]]
    if isinstance(value, list):
        return ["list", [canonicalize(v) for v in value]]
    return [f"{type(value).__module__}.{type(value).__qualname__}", repr(value)]


def hash_key(value: Any) -> str:
    """Create a deterministic 128-bit hash of a key.

    Args:
        value: Any key value.

    Returns:
        A 32-character hexadecimal MD5 digest.
    """
    return hashlib.md5(_dumps(canonicalize(value)).encode()).hexdigest()


def _dumps(value: Any) -> str:
    return json.dumps(value, sort_keys=True, separators=(",", ":"))
