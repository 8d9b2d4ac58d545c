"""Database adapter interface."""

from collections.abc import Mapping
from typing import Any, Protocol

# Structured arguments of a database operation: the entity slug under
# ``collection``, ``slug`` or ``global``, plus ``where``, ``locale``,
# pagination and whatever else the adapter understands.
OperationArgs = Mapping[str, Any]


class IDatabaseAdapter(Protocol):
    """Contract for the persistent store wrapped by the cache.

    Only the operations the cache intercepts are listed. Anything else
    the adapter exposes is passed through untouched by the wrapper.
    """

    async def find(self, args: OperationArgs) -> Any: ...

    async def find_one(self, args: OperationArgs) -> Any: ...

    async def count(self, args: OperationArgs) -> Any: ...

    async def query_drafts(self, args: OperationArgs) -> Any: ...

    async def find_versions(self, args: OperationArgs) -> Any: ...

    async def count_versions(self, args: OperationArgs) -> Any: ...

    async def find_global(self, args: OperationArgs) -> Any: ...

    async def find_global_versions(self, args: OperationArgs) -> Any: ...

    async def count_global_versions(self, args: OperationArgs) -> Any: ...

    async def create(self, args: OperationArgs) -> Any: ...

    async def update_one(self, args: OperationArgs) -> Any: ...

    async def update_many(self, args: OperationArgs) -> Any: ...

    async def delete_one(self, args: OperationArgs) -> Any: ...

    async def delete_many(self, args: OperationArgs) -> Any: ...

    async def upsert(self, args: OperationArgs) -> Any: ...

    async def delete_versions(self, args: OperationArgs) -> Any: ...

    async def update_version(self, args: OperationArgs) -> Any: ...

    async def create_global(self, args: OperationArgs) -> Any: ...

    async def update_global(self, args: OperationArgs) -> Any: ...

    async def update_global_version(self, args: OperationArgs) -> Any: ...
