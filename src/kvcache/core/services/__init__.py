"""Domain services for kvcache."""

from kvcache.core.services.cache_accessor import CacheAccessor
from kvcache.core.services.cache_service import CacheService
from kvcache.core.services.pattern_invalidator import LIST_PAGE_SIZE, PatternInvalidator
from kvcache.core.services.policy_resolver import PolicyResolver

__all__ = [
    "CacheService",
    "CacheAccessor",
    "PatternInvalidator",
    "PolicyResolver",
    "LIST_PAGE_SIZE",
]
