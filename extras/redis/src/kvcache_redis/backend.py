"""Redis KV namespace implementation."""

import re
from typing import Optional

import redis.asyncio as redis

from kvcache import KVKey, KVListResult

_GLOB_SPECIAL = re.compile(r"([*?\[\]\\])")


class RedisKVNamespace:
    """Redis-backed KV namespace for distributed deployments.

    Maps the KV contract onto Redis: ``SETEX`` for per-key TTL and
    ``SCAN`` for cursor-paginated prefix listing. SCAN may return a
    key more than once across pages, which invalidation tolerates.
    """

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379",
        client: Optional[redis.Redis] = None,
    ) -> None:
        """Initialize the Redis namespace.

        Args:
            redis_url: Redis connection URL.
            client: Existing client to use instead of connecting to
                ``redis_url``.
        """
        self._redis: redis.Redis = client or redis.from_url(redis_url)  # type: ignore

    async def get(self, key: str, type: str = "text") -> Optional[str]:
        """Retrieve a stored value.

        Args:
            key: The key to retrieve.
            type: Value representation, only ``"text"`` is supported.

        Returns:
            The stored string, or None if not found or expired.
        """
        value = await self._redis.get(key)
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    async def put(
        self,
        key: str,
        value: str,
        expiration_ttl: Optional[int] = None,
    ) -> None:
        """Store a value with an optional TTL in seconds."""
        if expiration_ttl:
            await self._redis.setex(key, expiration_ttl, value)
        else:
            await self._redis.set(key, value)

    async def delete(self, key: str) -> None:
        """Delete a key."""
        await self._redis.delete(key)

    async def list(
        self,
        prefix: Optional[str] = None,
        cursor: Optional[str] = None,
        limit: int = 1000,
    ) -> KVListResult:
        """List keys by prefix using SCAN.

        Uses SCAN instead of KEYS for production safety. ``limit`` is
        passed as the SCAN count hint, so pages may be smaller or
        slightly larger.

        Args:
            prefix: Only keys starting with this prefix are returned.
            cursor: Cursor from the previous page, None for the first.
            limit: Approximate page size.

        Returns:
            The page of keys, with a cursor when the scan is not done.
        """
        match = _GLOB_SPECIAL.sub(r"\\\1", prefix or "") + "*"
        next_cursor, keys = await self._redis.scan(
            int(cursor or 0), match=match, count=limit
        )

        names = [k.decode("utf-8") if isinstance(k, bytes) else k for k in keys]
        complete = int(next_cursor) == 0
        return KVListResult(
            keys=[KVKey(name=name) for name in names],
            list_complete=complete,
            cursor=None if complete else str(next_cursor),
        )

    async def close(self) -> None:
        """Close the Redis connection."""
        await self._redis.aclose()

    async def __aenter__(self) -> "RedisKVNamespace":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: type, exc_val: Exception, exc_tb: object) -> None:
        """Async context manager exit."""
        await self.close()
