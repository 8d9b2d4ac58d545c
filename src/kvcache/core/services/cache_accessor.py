"""Cache accessor - serialized reads and writes against a KV namespace."""

import logging
from typing import Any

from kvcache.core.interfaces.kv_namespace import IKVNamespace
from kvcache.core.interfaces.serializer import ISerializer
from kvcache.exceptions import SerializationError
from kvcache.infrastructure.serializers.json import JsonSerializer

logger = logging.getLogger(__name__)


class CacheAccessor:
    """Reads and writes cached values, containing every failure.

    A broken cache degrades to a cache miss: read errors return None,
    corrupted entries are deleted, and write errors are logged and
    dropped.
    """

    def __init__(
        self,
        kv: IKVNamespace,
        serializer: ISerializer | None = None,
    ) -> None:
        """Initialize the accessor.

        Args:
            kv: The KV namespace holding cached values.
            serializer: Serializer for cached values. Defaults to JSON.
        """
        self._kv = kv
        self._serializer = serializer or JsonSerializer()

    async def read(self, key: str) -> Any | None:
        """Read a cached value.

        Args:
            key: The cache key.

        Returns:
            The deserialized value, or None on a miss, a store error or
            a corrupted entry.
        """
        try:
            cached = await self._kv.get(key, type="text")
        except Exception:
            logger.error("Error reading from cache for key: %s", key, exc_info=True)
            return None

        if not cached:
            return None

        try:
            return self._serializer.deserialize(cached)
        except SerializationError as e:
            logger.error("Error parsing cached value for key: %s (%s)", key, e)
            await self._discard(key)
            return None

    async def write(self, key: str, value: Any, ttl: int) -> None:
        """Write a value to the cache.

        Args:
            key: The cache key.
            value: The value to cache.
            ttl: Time-to-live in seconds.
        """
        try:
            data = self._serializer.serialize(value)
            await self._kv.put(key, data, expiration_ttl=ttl)
        except Exception:
            logger.error("Error writing to cache for key: %s", key, exc_info=True)

    async def _discard(self, key: str) -> None:
        try:
            await self._kv.delete(key)
        except Exception as e:
            logger.debug("Could not delete corrupted cache entry %s: %s", key, e)
