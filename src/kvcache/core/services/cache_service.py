"""Cache service - main orchestrator for caching operations."""

from collections.abc import Iterable
from typing import Any

from kvcache.core.entities.cache_config import CacheConfig
from kvcache.core.entities.cache_options import CacheOptions, EntityPolicy
from kvcache.core.entities.invalidation_pattern import (
    EntityPattern,
    InvalidationPattern,
    TagPattern,
)
from kvcache.core.interfaces.database_adapter import OperationArgs
from kvcache.core.interfaces.invalidator import IInvalidator
from kvcache.core.interfaces.key_builder import IKeyBuilder
from kvcache.core.interfaces.kv_namespace import IKVNamespace
from kvcache.core.interfaces.serializer import ISerializer
from kvcache.core.services.cache_accessor import CacheAccessor
from kvcache.core.services.pattern_invalidator import PatternInvalidator
from kvcache.core.services.policy_resolver import PolicyResolver
from kvcache.infrastructure.key_builders.default import DefaultKeyBuilder


class CacheService:
    """Domain service that orchestrates caching operations.

    This is the main entry point for cache operations, composing the
    policy resolver, key builder, accessor and invalidator over one KV
    namespace. It holds no mutable state, so a single instance is
    shared by every concurrent call.
    """

    def __init__(
        self,
        kv: IKVNamespace,
        config: CacheConfig | None = None,
        key_builder: IKeyBuilder | None = None,
        serializer: ISerializer | None = None,
        invalidator: IInvalidator | None = None,
    ) -> None:
        """Initialize the cache service.

        Args:
            kv: The KV namespace to use for storage.
            config: Optional cache configuration. Uses defaults if not provided.
            key_builder: The key builder for generating cache keys.
            serializer: The serializer for encoding/decoding values.
            invalidator: Optional invalidation strategy. Defaults to
                listing and deleting keys in the namespace.
        """
        self._kv = kv
        self._config = config or CacheConfig()
        self._resolver = PolicyResolver(self._config)
        self._key_builder = key_builder or DefaultKeyBuilder(self._config)
        self._accessor = CacheAccessor(kv, serializer)
        self._invalidator: IInvalidator = invalidator or PatternInvalidator(
            kv, key_prefix=self._config.key_prefix
        )

    @property
    def config(self) -> CacheConfig:
        """Get the cache configuration."""
        return self._config

    @property
    def kv(self) -> IKVNamespace:
        return self._kv

    @property
    def resolver(self) -> PolicyResolver:
        return self._resolver

    @property
    def invalidator(self) -> IInvalidator:
        return self._invalidator

    def policy_for(
        self,
        slug: str,
        override: CacheOptions | None = None,
        versions: bool = False,
    ) -> EntityPolicy:
        """Resolve the effective policy for one call."""
        return self._resolver.policy_for(slug, override=override, versions=versions)

    def build_key(
        self,
        slug: str,
        operation: str,
        args: OperationArgs,
        versions: bool = False,
        override: CacheOptions | None = None,
    ) -> str:
        """Build the cache key for an operation."""
        return self._key_builder.build(
            slug=slug,
            operation=operation,
            args=args,
            versions=versions,
            override=override,
        )

    async def get_cached(self, key: str) -> Any | None:
        """Try to get a cached result.

        Args:
            key: The cache key.

        Returns:
            The cached value, or None on a miss.
        """
        return await self._accessor.read(key)

    async def cache_result(self, key: str, value: Any, ttl: int | None = None) -> None:
        """Cache an operation result.

        Args:
            key: The cache key.
            value: The result to cache.
            ttl: Optional TTL in seconds. Uses config default if not provided.
        """
        effective_ttl = ttl if ttl is not None else self._config.default_ttl
        await self._accessor.write(key, value, effective_ttl)

    async def invalidate(self, pattern: InvalidationPattern | str) -> int:
        """Invalidate cached entries matching a pattern.

        Returns:
            Number of entries invalidated.
        """
        return await self._invalidator.invalidate(pattern)

    async def invalidate_entity(self, slug: str, versions: bool = False) -> int:
        """Invalidate every cached entry of a collection or global.

        Args:
            slug: Collection or global slug.
            versions: Only invalidate version query entries.

        Returns:
            Number of entries invalidated.
        """
        return await self.invalidate(EntityPattern(slug, versions=versions))

    async def invalidate_tags(self, tags: Iterable[str]) -> int:
        """Invalidate cached entries by tags.

        Args:
            tags: Tags to invalidate.

        Returns:
            Number of entries invalidated.
        """
        return await self._invalidator.invalidate_many(TagPattern(tag) for tag in tags)

    async def clear(self) -> int:
        """Delete every key under the configured prefix.

        Without a key prefix this empties the whole namespace.

        Returns:
            Number of entries deleted.
        """
        prefix = self._config.key_prefix
        return await self.invalidate(f"{prefix}:*" if prefix else "*")
