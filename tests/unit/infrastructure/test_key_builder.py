"""Tests for DefaultKeyBuilder."""

import re

import pytest

from kvcache import CacheConfig, CacheOptions, DefaultCacheOptions
from kvcache.infrastructure.key_builders.default import DefaultKeyBuilder

DIGEST = re.compile(r"^[0-9a-f]{32}$")


class TestDefaultKeyBuilder:
    """Tests for DefaultKeyBuilder."""

    @pytest.fixture
    def key_builder(self) -> DefaultKeyBuilder:
        """Create a key builder without a prefix."""
        return DefaultKeyBuilder(CacheConfig())

    def test_build_basic_key(self, key_builder: DefaultKeyBuilder) -> None:
        """Test the posts/find scenario key shape."""
        key = key_builder.build(
            slug="posts",
            operation="find",
            args={"collection": "posts", "where": {"status": "published"}, "locale": "en"},
        )

        slug, operation, digest = key.split(":")
        assert (slug, operation) == ("posts", "find")
        assert DIGEST.match(digest)

    def test_build_versions_key(self, key_builder: DefaultKeyBuilder) -> None:
        key = key_builder.build(
            slug="posts", operation="count_versions", args={}, versions=True
        )

        assert key.startswith("posts:versions:count_versions:")

    def test_build_key_with_prefix(self) -> None:
        key_builder = DefaultKeyBuilder(
            CacheConfig(default_cache_options=DefaultCacheOptions(key_prefix="app"))
        )

        key = key_builder.build(slug="posts", operation="find", args={})

        assert key.startswith("app:posts:find:")

    def test_same_query_same_key(self, key_builder: DefaultKeyBuilder) -> None:
        """Test that the same query produces the same key."""
        args = {"where": {"status": "published"}, "locale": "en"}

        key1 = key_builder.build(slug="posts", operation="find", args=args)
        key2 = key_builder.build(slug="posts", operation="find", args=dict(args))

        assert key1 == key2

    def test_key_order_does_not_matter(self, key_builder: DefaultKeyBuilder) -> None:
        """Test that predicate key order does not affect the key."""
        key1 = key_builder.build(
            slug="posts",
            operation="find",
            args={"where": {"status": "published", "author": {"equals": "1"}}},
        )
        key2 = key_builder.build(
            slug="posts",
            operation="find",
            args={"where": {"author": {"equals": "1"}, "status": "published"}},
        )

        assert key1 == key2

    @pytest.mark.parametrize(
        "changed",
        [
            {"slug": "pages"},
            {"operation": "find_one"},
            {"versions": True},
            {"args": {"where": {"status": "draft"}, "locale": "en"}},
            {"args": {"where": {"status": "published"}, "locale": "fr"}},
        ],
        ids=["slug", "operation", "versions", "where", "locale"],
    )
    def test_any_change_changes_key(
        self, key_builder: DefaultKeyBuilder, changed: dict
    ) -> None:
        """Test that changing any hashed field produces a different key."""
        base = {
            "slug": "posts",
            "operation": "find",
            "args": {"where": {"status": "published"}, "locale": "en"},
            "versions": False,
        }

        key1 = key_builder.build(**base)
        key2 = key_builder.build(**{**base, **changed})

        assert key1 != key2

    def test_digest_differs_for_versions(self, key_builder: DefaultKeyBuilder) -> None:
        """Test that the versions flag is hashed, not only the slug segment."""
        key1 = key_builder.build(slug="posts", operation="find", args={})
        key2 = key_builder.build(slug="posts", operation="find", args={}, versions=True)

        assert key1.rsplit(":", 1)[1] != key2.rsplit(":", 1)[1]

    def test_other_args_are_ignored(self, key_builder: DefaultKeyBuilder) -> None:
        """Test that only the predicate and locale are part of the key."""
        key1 = key_builder.build(slug="posts", operation="find", args={"depth": 1})
        key2 = key_builder.build(slug="posts", operation="find", args={"depth": 2})

        assert key1 == key2

    def test_explicit_key(self, key_builder: DefaultKeyBuilder) -> None:
        key = key_builder.build(
            slug="posts", operation="find", args={}, override=CacheOptions(key="home")
        )

        assert key == "home"

    def test_explicit_key_with_prefix(self) -> None:
        key_builder = DefaultKeyBuilder(
            CacheConfig(default_cache_options=DefaultCacheOptions(key_prefix="app"))
        )

        key = key_builder.build(
            slug="posts", operation="find", args={}, override=CacheOptions(key="home")
        )

        assert key == "app:home"

    def test_explicit_key_beats_generate_key(self) -> None:
        key_builder = DefaultKeyBuilder(
            CacheConfig(
                default_cache_options=DefaultCacheOptions(
                    generate_key=lambda args, operation, versions: "generated"
                )
            )
        )

        key = key_builder.build(
            slug="posts", operation="find", args={}, override=CacheOptions(key="home")
        )

        assert key == "home"

    def test_generate_key(self) -> None:
        """Test that a custom generator receives args, operation and versions."""
        calls = []

        def generate_key(args, operation, versions):
            calls.append((args, operation, versions))
            return f"custom:{operation}:{args['id']}"

        key_builder = DefaultKeyBuilder(
            CacheConfig(
                default_cache_options=DefaultCacheOptions(
                    key_prefix="app", generate_key=generate_key
                )
            )
        )

        key = key_builder.build(
            slug="posts", operation="find_one", args={"id": "7"}, versions=True
        )

        assert key == "app:custom:find_one:7"
        assert calls == [({"id": "7"}, "find_one", True)]

    def test_override_without_key_uses_default(
        self, key_builder: DefaultKeyBuilder
    ) -> None:
        key1 = key_builder.build(slug="posts", operation="find", args={})
        key2 = key_builder.build(
            slug="posts", operation="find", args={}, override=CacheOptions(ttl=5)
        )

        assert key1 == key2
