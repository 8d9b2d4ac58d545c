"""Cache invalidator interface."""

from collections.abc import Iterable
from typing import Protocol

from kvcache.core.entities.invalidation_pattern import InvalidationPattern


class IInvalidator(Protocol):
    """Contract for cache invalidation strategies.

    Invalidators remove every cached entry matching a pattern. They
    must never raise: failures are logged and the call returns.
    """

    async def invalidate(self, pattern: InvalidationPattern | str) -> int:
        """Invalidate cache entries matching a pattern.

        Args:
            pattern: The pattern to invalidate.

        Returns:
            Number of entries deleted.
        """
        ...

    async def invalidate_many(
        self, patterns: Iterable[InvalidationPattern | str]
    ) -> int:
        """Invalidate several patterns, returning the total deleted."""
        ...
