"""Hashing utilities for cache key generation."""

import hashlib
import json
from typing import Any


def canonical_json(value: Any) -> str:
    """Serialize a value to JSON with a stable field order.

    Args:
        value: Any JSON-serializable value.

    Returns:
        Compact JSON with sorted object keys.

    Raises:
        TypeError: If an object mixes key types that cannot be sorted,
            such as ``{1: ..., "a": ...}``.
    """
    return json.dumps(value, sort_keys=True, separators=(",", ":"), default=str)


def hash_value(value: Any) -> str:
    """Create a deterministic hash of a value.

    The value is canonicalized first, so object key order in the
    input never affects the digest.

    Args:
        value: Any JSON-serializable value.

    Returns:
        A 32 character hexadecimal MD5 digest.
    """
    normalized = canonical_json(value)
    return hashlib.md5(normalized.encode(), usedforsecurity=False).hexdigest()
