"""Cache options and resolved entity policy."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class CacheOptions:
    """Cache options for a collection, a global, or a single call.

    Used in three places: as the value of a ``collections``/``globals``
    entry in :class:`CacheConfig`, and as the per-call override passed
    to every operation of the caching adapter.

    Attributes:
        ttl: Time-to-live in seconds. None falls back to the default TTL.
        skip: Bypass the cache and always hit the database.
        key: Explicit cache key, replacing the generated one.
        tags: Tags for grouped invalidation.
        versions: Whether version queries are cached for this entity.
    """

    ttl: int | None = None
    skip: bool = False
    key: str | None = None
    tags: tuple[str, ...] = ()
    versions: bool | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CacheOptions":
        """Create options from a plain mapping.

        Args:
            data: Mapping with any of ``ttl``, ``skip``, ``key``,
                ``tags`` and ``versions``.

        Returns:
            A new CacheOptions instance.
        """
        tags = data.get("tags") or ()
        if isinstance(tags, str):
            tags = (tags,)
        return cls(
            ttl=data.get("ttl"),
            skip=bool(data.get("skip", False)),
            key=data.get("key"),
            tags=tuple(tags),
            versions=data.get("versions"),
        )


@dataclass(frozen=True)
class EntityPolicy:
    """Effective cache policy for one call against one entity.

    Resolved fresh for every call and never stored.
    """

    enabled: bool
    ttl: int
    key: str | None = None
    skip: bool = False
    versions: bool = False
    tags: tuple[str, ...] = field(default_factory=tuple)

    @property
    def applies(self) -> bool:
        """Whether the cache should be consulted for this call."""
        return self.enabled and not self.skip

    @classmethod
    def disabled(cls, ttl: int) -> "EntityPolicy":
        """Policy for an entity with no cache configuration."""
        return cls(enabled=False, ttl=ttl)
