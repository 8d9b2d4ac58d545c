"""Pytest configuration for kvcache tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from kvcache import (
    CacheConfig,
    CacheOptions,
    CacheService,
    InMemoryKVNamespace,
)

READ_OPERATIONS = (
    "find",
    "find_one",
    "count",
    "query_drafts",
    "find_versions",
    "count_versions",
    "find_global",
    "find_global_versions",
    "count_global_versions",
)

WRITE_OPERATIONS = (
    "create",
    "update_one",
    "update_many",
    "delete_one",
    "delete_many",
    "upsert",
    "delete_versions",
    "update_version",
    "create_global",
    "update_global",
    "update_global_version",
)


@pytest.fixture
def kv() -> InMemoryKVNamespace:
    """Create an empty in-memory KV namespace."""
    return InMemoryKVNamespace()


@pytest.fixture
def config() -> CacheConfig:
    """Create a configuration caching the posts and media collections."""
    return CacheConfig(
        collections={
            "posts": True,
            "media": CacheOptions(ttl=3600, versions=True),
        },
    )


@pytest.fixture
def cache_service(kv: InMemoryKVNamespace, config: CacheConfig) -> CacheService:
    """Create a cache service over the in-memory namespace."""
    return CacheService(kv=kv, config=config)


@pytest.fixture
def base_adapter() -> MagicMock:
    """Create a database adapter double with async operations."""
    adapter = MagicMock()
    for name in READ_OPERATIONS + WRITE_OPERATIONS:
        setattr(adapter, name, AsyncMock(name=name))

    adapter.find.return_value = {
        "docs": [{"id": "1", "title": "Hello"}],
        "totalDocs": 1,
        "page": 1,
        "hasNextPage": False,
    }
    adapter.find_one.return_value = {"id": "1", "title": "Hello"}
    adapter.count.return_value = {"totalDocs": 1}
    adapter.query_drafts.return_value = {"docs": [], "totalDocs": 0}
    adapter.find_versions.return_value = {
        "docs": [{"id": "v1", "parent": "1", "version": {"title": "Hello"}}],
        "totalDocs": 1,
    }
    adapter.count_versions.return_value = {"totalDocs": 1}
    adapter.find_global.return_value = {"title": "Site"}
    adapter.find_global_versions.return_value = {"docs": [], "totalDocs": 0}
    adapter.count_global_versions.return_value = {"totalDocs": 0}
    adapter.create.return_value = {"id": "2", "title": "New"}
    adapter.update_one.return_value = {"id": "1", "title": "Updated"}
    adapter.update_global.return_value = {"title": "New site"}
    return adapter
