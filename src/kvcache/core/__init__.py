"""Core domain layer for kvcache."""

from kvcache.core.entities import CacheConfig, CacheOptions, EntityPolicy
from kvcache.core.interfaces import (
    IDatabaseAdapter,
    IInvalidator,
    IKeyBuilder,
    IKVNamespace,
    ISerializer,
)
from kvcache.core.services import CacheService

__all__ = [
    # Entities
    "CacheConfig",
    "CacheOptions",
    "EntityPolicy",
    # Interfaces
    "IDatabaseAdapter",
    "IKVNamespace",
    "IKeyBuilder",
    "ISerializer",
    "IInvalidator",
    # Services
    "CacheService",
]
