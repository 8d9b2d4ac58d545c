"""Pattern invalidation over a prefix-listing KV namespace."""

import asyncio
import logging
from collections.abc import Iterable

from kvcache.core.entities.invalidation_pattern import InvalidationPattern
from kvcache.core.interfaces.kv_namespace import IKVNamespace
from kvcache.utils.patterns import derive_list_prefix, match_keys

logger = logging.getLogger(__name__)

LIST_PAGE_SIZE = 1000


class PatternInvalidator:
    """Deletes every cached key matching a wildcard pattern.

    KV namespaces have no pattern delete, so invalidation lists keys by
    the literal prefix of the pattern, page by page, filters them
    against the full pattern and deletes the matches concurrently.

    Listing costs one round trip per page, so entities with many cached
    queries take many calls to invalidate. Tag patterns wildcard the
    slug position and can only be narrowed to the key prefix, which
    means scanning the whole namespace when no prefix is configured.

    Invalidation never raises. Failures are logged and the number of
    keys actually deleted is returned.
    """

    def __init__(
        self,
        kv: IKVNamespace,
        key_prefix: str | None = None,
        page_size: int = LIST_PAGE_SIZE,
    ) -> None:
        """Initialize the invalidator.

        Args:
            kv: The KV namespace holding cached values.
            key_prefix: Namespace prepended to rendered patterns.
            page_size: Number of keys requested per ``list`` call.
        """
        self._kv = kv
        self._key_prefix = key_prefix
        self._page_size = page_size

    def render(self, pattern: InvalidationPattern | str) -> str:
        """Render a pattern to the string matched against KV keys."""
        if isinstance(pattern, str):
            return pattern
        return pattern.render(self._key_prefix)

    async def invalidate(self, pattern: InvalidationPattern | str) -> int:
        """Invalidate every key matching a pattern.

        Args:
            pattern: Tagged pattern, or an already rendered string.

        Returns:
            Number of keys deleted.
        """
        rendered = self.render(pattern)
        try:
            keys = await self.list_keys(derive_list_prefix(rendered))
            return await self._delete_keys(match_keys(rendered, keys), rendered)
        except Exception:
            logger.error(
                "Error invalidating cache for pattern: %s", rendered, exc_info=True
            )
            return 0

    async def invalidate_many(
        self,
        patterns: Iterable[InvalidationPattern | str],
    ) -> int:
        """Invalidate several patterns one after another.

        Returns:
            Total number of keys deleted.
        """
        count = 0
        for pattern in patterns:
            count += await self.invalidate(pattern)
        return count

    async def list_keys(self, prefix: str) -> list[str]:
        """List every key under a prefix, following the cursor.

        Args:
            prefix: Literal key prefix.

        Returns:
            All key names reported by the namespace.
        """
        names: list[str] = []
        cursor: str | None = None

        while True:
            result = await self._kv.list(
                prefix=prefix, cursor=cursor, limit=self._page_size
            )
            names.extend(result.names)
            if result.list_complete:
                break
            cursor = result.cursor

        return names

    async def _delete_keys(self, keys: list[str], pattern: str) -> int:
        if not keys:
            return 0

        results = await asyncio.gather(
            *(self._kv.delete(key) for key in keys),
            return_exceptions=True,
        )
        failures = [r for r in results if isinstance(r, BaseException)]
        if failures:
            logger.warning(
                "Failed to delete %d of %d keys for pattern %s: %r",
                len(failures),
                len(keys),
                pattern,
                failures[0],
            )
        return len(keys) - len(failures)
