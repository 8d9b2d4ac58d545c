"""In-memory KV namespace implementation."""

import bisect
import time
from collections.abc import Callable

from cachetools import TLRUCache  # type: ignore[import-untyped]

from kvcache.core.entities.cache_entry import CacheEntry
from kvcache.core.entities.kv_list import KVKey, KVListResult


def _time_to_use(key: str, entry: CacheEntry, now: float) -> float:
    return entry.expires_at


class InMemoryKVNamespace:
    """In-memory KV namespace using LRU eviction with per-key TTL.

    Suitable for single-process deployments and tests. Uses cachetools'
    TLRUCache so each key expires on its own TTL, and lists keys in
    lexicographic order with the last returned key as the cursor.
    """

    def __init__(
        self,
        maxsize: int = 10000,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the in-memory namespace.

        Args:
            maxsize: Maximum number of keys kept before LRU eviction.
            timer: Clock used for expiration, in seconds.
        """
        self._maxsize = maxsize
        self._timer = timer
        self._cache: TLRUCache[str, CacheEntry] = TLRUCache(
            maxsize=maxsize,
            ttu=_time_to_use,
            timer=timer,
        )

    async def get(self, key: str, type: str = "text") -> str | None:
        """Retrieve a stored value.

        Args:
            key: The key to retrieve.
            type: Value representation, only ``"text"`` is supported.

        Returns:
            The stored string, or None if not found or expired.
        """
        entry = self._cache.get(key)
        return entry.value if entry is not None else None

    async def put(
        self,
        key: str,
        value: str,
        expiration_ttl: int | None = None,
    ) -> None:
        """Store a value with an optional TTL in seconds."""
        self._cache[key] = CacheEntry(
            value=value, stored_at=self._timer(), ttl=expiration_ttl
        )

    async def delete(self, key: str) -> None:
        """Delete a key. Missing keys are ignored."""
        self._cache.pop(key, None)

    async def list(
        self,
        prefix: str | None = None,
        cursor: str | None = None,
        limit: int = 1000,
    ) -> KVListResult:
        """List keys by prefix in lexicographic order.

        Args:
            prefix: Only keys starting with this prefix are returned.
            cursor: Last key of the previous page, None for the first.
            limit: Maximum number of keys in the page.

        Returns:
            The page of keys, with a cursor when more remain.
        """
        self._cache.expire()
        prefix = prefix or ""
        names = sorted(name for name in self._cache.keys() if name.startswith(prefix))

        start = bisect.bisect_right(names, cursor) if cursor else 0
        page = names[start : start + limit]
        complete = start + limit >= len(names)

        return KVListResult(
            keys=[KVKey(name=name) for name in page],
            list_complete=complete,
            cursor=None if complete else page[-1],
        )

    def __len__(self) -> int:
        """Return the number of live keys."""
        self._cache.expire()
        return len(self._cache)

    def __contains__(self, key: str) -> bool:
        return key in self._cache

    @property
    def maxsize(self) -> int:
        """Return the maximum number of keys."""
        return self._maxsize
