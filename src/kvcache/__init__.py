"""kvcache - Read-through caching for database adapters over KV stores.

Wraps a database adapter so that reads (find, find_one, count, version
queries) are served from a key-value namespace and writes (create,
update, delete, upsert) invalidate the cached entries of the written
collection or global. Works with any store offering get/put/delete
and cursor-paginated prefix listing, such as edge KV namespaces.

Example:
    from kvcache import CacheConfig, CacheOptions, db_adapter_with_cache
    from kvcache import InMemoryKVNamespace

    config = CacheConfig(
        collections={
            "posts": True,
            "media": CacheOptions(ttl=3600, versions=True),
        },
        globals={"header": True},
    )
    db = db_adapter_with_cache(
        base_adapter=db,
        kv=InMemoryKVNamespace(),
        config=config,
    )

    posts = await db.find({"collection": "posts", "where": {"status": "published"}})

    # Bypass the cache for one call
    fresh = await db.find({"collection": "posts"}, cache=CacheOptions(skip=True))

Installing at application startup:
    from kvcache.plugin import kv_cache_plugin

    app = kv_cache_plugin(kv, config)(app)
"""

from kvcache.adapter import CachingDatabaseAdapter, db_adapter_with_cache
from kvcache.core.entities import (
    DEFAULT_TTL,
    CacheConfig,
    CacheEntry,
    CacheKey,
    CacheOptions,
    DefaultCacheOptions,
    EntityPattern,
    EntityPolicy,
    ExactPattern,
    InvalidationPattern,
    KVKey,
    KVListResult,
    TagPattern,
)
from kvcache.core.interfaces import (
    IDatabaseAdapter,
    IInvalidator,
    IKeyBuilder,
    IKVNamespace,
    ISerializer,
)
from kvcache.core.services import (
    CacheAccessor,
    CacheService,
    PatternInvalidator,
    PolicyResolver,
)
from kvcache.exceptions import ConfigurationError, KVCacheError, SerializationError
from kvcache.infrastructure import (
    DefaultKeyBuilder,
    InMemoryKVNamespace,
    JsonSerializer,
)
from kvcache.plugin import install_cache, kv_cache_plugin

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core entities
    "DEFAULT_TTL",
    "CacheConfig",
    "DefaultCacheOptions",
    "CacheOptions",
    "EntityPolicy",
    "CacheEntry",
    "CacheKey",
    # Invalidation patterns
    "InvalidationPattern",
    "ExactPattern",
    "EntityPattern",
    "TagPattern",
    # KV listing
    "KVKey",
    "KVListResult",
    # Core interfaces
    "IDatabaseAdapter",
    "IKVNamespace",
    "IKeyBuilder",
    "ISerializer",
    "IInvalidator",
    # Core services
    "CacheService",
    "CacheAccessor",
    "PatternInvalidator",
    "PolicyResolver",
    # Infrastructure implementations
    "InMemoryKVNamespace",
    "DefaultKeyBuilder",
    "JsonSerializer",
    # Adapter and plugin
    "CachingDatabaseAdapter",
    "db_adapter_with_cache",
    "install_cache",
    "kv_cache_plugin",
    # Errors
    "KVCacheError",
    "ConfigurationError",
    "SerializationError",
]
