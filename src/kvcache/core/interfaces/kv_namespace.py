"""KV namespace interface."""

from typing import Protocol

from kvcache.core.entities.kv_list import KVListResult


class IKVNamespace(Protocol):
    """Contract for the key-value store behind the cache.

    Shaped after edge KV stores: string values with a per-key TTL,
    single-key deletes and cursor-paginated listing by literal prefix.
    Listing is eventually consistent and there are no multi-key or
    atomic operations. Implementations carry their own timeouts.
    """

    async def get(self, key: str, type: str = "text") -> str | None:
        """Retrieve a stored value.

        Args:
            key: The key to retrieve.
            type: Value representation. Only ``"text"`` is used.

        Returns:
            The stored string, or None if not found or expired.
        """
        ...

    async def put(
        self,
        key: str,
        value: str,
        expiration_ttl: int | None = None,
    ) -> None:
        """Store a value.

        Args:
            key: The key to store.
            value: The string value.
            expiration_ttl: Seconds from now until the key expires.
        """
        ...

    async def delete(self, key: str) -> None:
        """Delete a key. Deleting a missing key is not an error."""
        ...

    async def list(
        self,
        prefix: str | None = None,
        cursor: str | None = None,
        limit: int = 1000,
    ) -> KVListResult:
        """List keys by prefix, one page at a time.

        Args:
            prefix: Only keys starting with this prefix are returned.
            cursor: Cursor from the previous page, None for the first.
            limit: Maximum number of keys in the page.

        Returns:
            The page of keys and the cursor for the next one.
        """
        ...
