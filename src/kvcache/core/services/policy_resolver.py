"""Cache policy resolution per entity."""

from kvcache.core.entities.cache_config import CacheConfig
from kvcache.core.entities.cache_options import CacheOptions, EntityPolicy


class PolicyResolver:
    """Resolves the effective cache policy for a collection or global.

    Precedence: per-call override, then the ``collections`` entry, then
    the ``globals`` entry. The override replaces static options
    entirely; nothing is merged.

    Listing an entity in the configuration is the opt-in signal. An
    entity that is not listed is never cached, whatever the override
    or the defaults say. Globals only opt in while no collection is
    configured.
    """

    def __init__(self, config: CacheConfig) -> None:
        self._config = config

    @property
    def config(self) -> CacheConfig:
        return self._config

    def resolve(
        self,
        slug: str,
        override: CacheOptions | None = None,
    ) -> CacheOptions | None:
        """Return the cache options that apply to a call.

        Args:
            slug: Collection or global slug.
            override: Per-call cache options.

        Returns:
            The override if given, else the configured options for the
            slug, or None when the slug has no cache configuration.
        """
        if override is not None:
            return override

        for entries in (self._config.collections, self._config.globals):
            if slug in entries:
                value = entries[slug]
                if isinstance(value, CacheOptions):
                    return value
                return CacheOptions(ttl=self._config.default_ttl)

        return None

    def should_cache(self, slug: str, versions: bool = False) -> bool:
        """Check whether a slug is cached at all.

        When any collection is configured, only collections are cached
        and the ``globals`` map is not consulted. For version queries, a
        collection is only cached when version caching is switched on
        for it (``versions`` on its options, or the default for entries
        enabled with ``True``).

        Without collections, globals are matched on membership alone and
        never satisfy a version check.

        Args:
            slug: Collection or global slug.
            versions: Whether the call is a version query.

        Returns:
            True if the cache applies to the slug.
        """
        collections = self._config.collections
        if collections:
            if slug not in collections:
                return False
            if not versions:
                return True
            value = collections[slug]
            if isinstance(value, CacheOptions):
                return bool(value.versions)
            return self._config.default_cache_options.versions

        if versions:
            return False
        return slug in self._config.globals

    def policy_for(
        self,
        slug: str,
        override: CacheOptions | None = None,
        versions: bool = False,
    ) -> EntityPolicy:
        """Resolve the full policy for one call.

        Args:
            slug: Collection or global slug.
            override: Per-call cache options.
            versions: Whether the call is a version query that needs
                version caching switched on.

        Returns:
            The effective policy. ``policy.applies`` tells the caller
            whether to touch the cache.
        """
        default_ttl = self._config.default_ttl
        options = self.resolve(slug, override)
        if options is None:
            return EntityPolicy.disabled(ttl=default_ttl)

        return EntityPolicy(
            enabled=self.should_cache(slug, versions=versions),
            ttl=options.ttl if options.ttl is not None else default_ttl,
            key=options.key,
            skip=options.skip,
            versions=self.should_cache(slug, versions=True),
            tags=tuple(options.tags),
        )
