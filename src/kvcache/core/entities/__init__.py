"""Domain entities for kvcache."""

from kvcache.core.entities.cache_config import (
    DEFAULT_TTL,
    CacheConfig,
    DefaultCacheOptions,
    KeyGenerator,
)
from kvcache.core.entities.cache_entry import CacheEntry
from kvcache.core.entities.cache_key import CacheKey
from kvcache.core.entities.cache_options import CacheOptions, EntityPolicy
from kvcache.core.entities.invalidation_pattern import (
    EntityPattern,
    ExactPattern,
    InvalidationPattern,
    TagPattern,
)
from kvcache.core.entities.kv_list import KVKey, KVListResult

__all__ = [
    "DEFAULT_TTL",
    "CacheConfig",
    "DefaultCacheOptions",
    "KeyGenerator",
    "CacheEntry",
    "CacheKey",
    "CacheOptions",
    "EntityPolicy",
    # Invalidation patterns
    "InvalidationPattern",
    "ExactPattern",
    "EntityPattern",
    "TagPattern",
    # KV listing
    "KVKey",
    "KVListResult",
]
