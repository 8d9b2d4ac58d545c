"""Cache key value object."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

VERSIONS_SEGMENT = "versions"


def slug_segment(slug: str, versions: bool = False) -> str:
    """Return the slug part of a key, with the versions marker if needed."""
    return f"{slug}:{VERSIONS_SEGMENT}" if versions else slug


def with_prefix(prefix: str | None, value: str) -> str:
    """Namespace a key or pattern with the configured prefix."""
    if prefix:
        return f"{prefix}:{value}"
    return value


@dataclass(frozen=True)
class CacheKey:
    """Immutable cache key value object.

    Encapsulates the components of a generated key before it is
    rendered to the ``[prefix:]slug[:versions]:operation:digest`` string
    stored in the KV namespace.
    """

    slug: str
    operation: str
    digest: str
    versions: bool = False
    prefix: str | None = None

    def __str__(self) -> str:
        """Return the full cache key string.

        Returns:
            The complete cache key as a string.
        """
        body = f"{slug_segment(self.slug, self.versions)}:{self.operation}:{self.digest}"
        return with_prefix(self.prefix, body)

    @classmethod
    def from_components(
        cls,
        slug: str,
        operation: str,
        where: Any,
        locale: str | None = None,
        versions: bool = False,
        prefix: str | None = None,
        hash_func: Callable[[Any], str] | None = None,
    ) -> "CacheKey":
        """Create a CacheKey from raw query components.

        Args:
            slug: Collection or global slug.
            operation: Adapter operation name (``find``, ``count`` ...).
            where: The filter predicate of the query.
            locale: Locale of the query.
            versions: Whether the query targets historical versions.
            prefix: Optional key namespace.
            hash_func: Optional custom hash function.

        Returns:
            A new CacheKey instance.
        """
        from kvcache.utils.hashing import hash_value

        hasher = hash_func or hash_value

        # Field names are part of the hashed payload; keep them stable.
        payload = {
            "slug": slug,
            "locale": locale,
            "operation": operation,
            "versions": versions,
            "where": where,
        }
        return cls(
            slug=slug,
            operation=operation,
            digest=hasher(payload),
            versions=versions,
            prefix=prefix,
        )
