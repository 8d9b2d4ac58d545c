"""Read-through caching wrapper for database adapters.

Wraps every read and write operation of a database adapter with the
same interface. Reads are served from the KV cache when possible and
populate it on a miss; writes go to the database first and then
invalidate every cached entry of the written collection or global.

Example:
    from kvcache import CacheConfig, CacheOptions, db_adapter_with_cache

    config = CacheConfig(
        collections={"posts": True, "media": CacheOptions(ttl=3600)},
        globals={"header": True},
    )
    db = db_adapter_with_cache(base_adapter=db, kv=kv, config=config)

    # Served from the cache on the second call
    await db.find({"collection": "posts", "where": {"status": "published"}})

    # Per-call override
    await db.find({"collection": "posts"}, cache=CacheOptions(skip=True))
"""

import logging
from typing import Any

from kvcache.core.entities.cache_config import CacheConfig
from kvcache.core.entities.cache_options import CacheOptions
from kvcache.core.interfaces.database_adapter import IDatabaseAdapter, OperationArgs
from kvcache.core.interfaces.key_builder import IKeyBuilder
from kvcache.core.interfaces.kv_namespace import IKVNamespace
from kvcache.core.interfaces.serializer import ISerializer
from kvcache.core.services.cache_service import CacheService

logger = logging.getLogger(__name__)


class CachingDatabaseAdapter:
    """Database adapter decorator adding KV caching.

    Composes the wrapped adapter rather than inheriting from it: cached
    operations are defined here, anything else is looked up on the
    wrapped adapter, so the wrapper is a drop-in replacement.

    Every operation accepts an optional ``cache`` keyword with per-call
    :class:`CacheOptions`. When given it replaces the configured options
    for that call (ttl, skip, explicit key, tags).

    Database errors always propagate. Cache errors never do: reads fall
    back to the database and failed invalidations are logged.
    """

    def __init__(
        self,
        base_adapter: IDatabaseAdapter,
        cache_service: CacheService,
    ) -> None:
        """Initialize the wrapper.

        Args:
            base_adapter: The database adapter to wrap.
            cache_service: The cache service to read and invalidate through.
        """
        self._base = base_adapter
        self._cache = cache_service
        self._debug = cache_service.config.debug

    def __getattr__(self, name: str) -> Any:
        if name in ("_base", "_cache", "_debug"):
            raise AttributeError(name)
        return getattr(self._base, name)

    @property
    def base_adapter(self) -> IDatabaseAdapter:
        return self._base

    @property
    def cache_service(self) -> CacheService:
        return self._cache

    # Reads

    async def find(
        self, args: OperationArgs, *, cache: CacheOptions | None = None
    ) -> Any:
        return await self._read("find", args["collection"], args, cache)

    async def find_one(
        self, args: OperationArgs, *, cache: CacheOptions | None = None
    ) -> Any:
        return await self._read("find_one", args["collection"], args, cache)

    async def count(
        self, args: OperationArgs, *, cache: CacheOptions | None = None
    ) -> Any:
        return await self._read("count", args["collection"], args, cache)

    async def query_drafts(
        self, args: OperationArgs, *, cache: CacheOptions | None = None
    ) -> Any:
        return await self._read("query_drafts", args["collection"], args, cache)

    async def find_versions(
        self, args: OperationArgs, *, cache: CacheOptions | None = None
    ) -> Any:
        return await self._read(
            "find_versions", args["collection"], args, cache,
            versions=True, check_versions=True,
        )

    async def count_versions(
        self, args: OperationArgs, *, cache: CacheOptions | None = None
    ) -> Any:
        return await self._read(
            "count_versions", args["collection"], args, cache,
            versions=True, check_versions=True,
        )

    async def find_global(
        self, args: OperationArgs, *, cache: CacheOptions | None = None
    ) -> Any:
        return await self._read("find_global", args["slug"], args, cache)

    async def find_global_versions(
        self, args: OperationArgs, *, cache: CacheOptions | None = None
    ) -> Any:
        return await self._read(
            "find_global_versions", args["global"], args, cache, versions=True
        )

    async def count_global_versions(
        self, args: OperationArgs, *, cache: CacheOptions | None = None
    ) -> Any:
        return await self._read(
            "count_global_versions", args["global"], args, cache, versions=True
        )

    # Writes

    async def create(
        self, args: OperationArgs, *, cache: CacheOptions | None = None
    ) -> Any:
        return await self._write("create", args["collection"], args, cache)

    async def update_one(
        self, args: OperationArgs, *, cache: CacheOptions | None = None
    ) -> Any:
        return await self._write("update_one", args["collection"], args, cache)

    async def update_many(
        self, args: OperationArgs, *, cache: CacheOptions | None = None
    ) -> Any:
        return await self._write("update_many", args["collection"], args, cache)

    async def delete_one(
        self, args: OperationArgs, *, cache: CacheOptions | None = None
    ) -> Any:
        return await self._write("delete_one", args["collection"], args, cache)

    async def delete_many(
        self, args: OperationArgs, *, cache: CacheOptions | None = None
    ) -> Any:
        return await self._write("delete_many", args["collection"], args, cache)

    async def upsert(
        self, args: OperationArgs, *, cache: CacheOptions | None = None
    ) -> Any:
        return await self._write("upsert", args["collection"], args, cache)

    async def delete_versions(
        self, args: OperationArgs, *, cache: CacheOptions | None = None
    ) -> Any:
        # The collection pattern also covers its version keys.
        return await self._write("delete_versions", args["collection"], args, cache)

    async def update_version(
        self, args: OperationArgs, *, cache: CacheOptions | None = None
    ) -> Any:
        return await self._write(
            "update_version", args["collection"], args, cache, versions=True
        )

    async def create_global(
        self, args: OperationArgs, *, cache: CacheOptions | None = None
    ) -> Any:
        return await self._write("create_global", args["slug"], args, cache)

    async def update_global(
        self, args: OperationArgs, *, cache: CacheOptions | None = None
    ) -> Any:
        return await self._write("update_global", args["slug"], args, cache)

    async def update_global_version(
        self, args: OperationArgs, *, cache: CacheOptions | None = None
    ) -> Any:
        return await self._write(
            "update_global_version", args["global"], args, cache, versions=True
        )

    async def invalidate_tags(self, tags: list[str]) -> int:
        """Invalidate cached entries by tags.

        Args:
            tags: Tags to invalidate.

        Returns:
            Number of entries invalidated.
        """
        count = await self._cache.invalidate_tags(tags)
        self._log(f"INVALIDATE: tags {tags}")
        return count

    async def _read(
        self,
        operation: str,
        slug: str,
        args: OperationArgs,
        override: CacheOptions | None,
        versions: bool = False,
        check_versions: bool = False,
    ) -> Any:
        """Serve a read from the cache, or run it and cache the result.

        Args:
            operation: Name of the wrapped adapter method.
            slug: Collection or global slug.
            args: Operation arguments.
            override: Per-call cache options.
            versions: Whether the key goes under the versions segment.
            check_versions: Whether version caching must be switched on
                for the slug.
        """
        policy = self._cache.policy_for(slug, override=override, versions=check_versions)

        if not policy.applies:
            self._log(f"SKIP: {operation} {slug}")
            return await self._delegate(operation, args)

        try:
            key = self._cache.build_key(
                slug, operation, args, versions=versions, override=override
            )
        except Exception:
            logger.warning(
                "Failed to build cache key for %s %s", operation, slug, exc_info=True
            )
            return await self._delegate(operation, args)

        cached = await self._cache.get_cached(key)
        if cached is not None:
            self._log(f"HIT: {operation} {slug}")
            return cached

        result = await self._delegate(operation, args)
        await self._cache.cache_result(key, result, ttl=policy.ttl)
        self._log(f"MISS: {operation} {slug}")

        return result

    async def _write(
        self,
        operation: str,
        slug: str,
        args: OperationArgs,
        override: CacheOptions | None,
        versions: bool = False,
    ) -> Any:
        """Run a write, then invalidate what it may have made stale.

        The write runs first; if it raises, nothing is invalidated.

        Args:
            operation: Name of the wrapped adapter method.
            slug: Collection or global slug.
            args: Operation arguments.
            override: Per-call cache options.
            versions: Only invalidate version query entries.
        """
        result = await self._delegate(operation, args)

        policy = self._cache.policy_for(slug, override=override)
        if not policy.applies:
            self._log(f"SKIP: {operation} {slug}")
            return result

        await self._cache.invalidate_entity(slug, versions=versions)
        if policy.tags:
            await self._cache.invalidate_tags(policy.tags)
        self._log(f"INVALIDATE: {operation} {slug}")

        return result

    async def _delegate(self, operation: str, args: OperationArgs) -> Any:
        try:
            return await getattr(self._base, operation)(args)
        except Exception as e:
            logger.debug("Database operation %s failed: %s", operation, e)
            raise

    def _log(self, message: str) -> None:
        if self._debug:
            logger.info("[kvcache] %s", message)


def db_adapter_with_cache(
    base_adapter: IDatabaseAdapter,
    kv: IKVNamespace,
    config: CacheConfig | None = None,
    key_builder: IKeyBuilder | None = None,
    serializer: ISerializer | None = None,
) -> CachingDatabaseAdapter:
    """Wrap a database adapter with KV caching.

    Args:
        base_adapter: The database adapter to wrap.
        kv: The KV namespace used as the cache.
        config: Cache configuration. Without one nothing is cached,
            since no collection or global opts in.
        key_builder: Optional custom key builder.
        serializer: Optional custom serializer.

    Returns:
        A caching adapter with the same interface as ``base_adapter``.
    """
    cache_service = CacheService(
        kv=kv,
        config=config,
        key_builder=key_builder,
        serializer=serializer,
    )
    return CachingDatabaseAdapter(base_adapter, cache_service)
