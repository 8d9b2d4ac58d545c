"""Key builder interface."""

from typing import Protocol

from kvcache.core.entities.cache_options import CacheOptions
from kvcache.core.interfaces.database_adapter import OperationArgs


class IKeyBuilder(Protocol):
    """Contract for building cache keys from database operations.

    Key builders are responsible for creating unique, deterministic
    cache keys from the entity, operation and query arguments.
    """

    def build(
        self,
        slug: str,
        operation: str,
        args: OperationArgs,
        versions: bool = False,
        override: CacheOptions | None = None,
    ) -> str:
        """Build unique cache key for a database operation.

        Args:
            slug: Collection or global slug.
            operation: Name of the adapter operation.
            args: Arguments passed to the operation.
            versions: Whether the operation targets historical versions.
            override: Per-call cache options, which may carry an
                explicit key.

        Returns:
            A unique string key for caching the operation result.
        """
        ...
