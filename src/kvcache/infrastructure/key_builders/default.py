"""Default key builder implementation."""

from kvcache.core.entities.cache_config import CacheConfig
from kvcache.core.entities.cache_key import CacheKey, with_prefix
from kvcache.core.entities.cache_options import CacheOptions
from kvcache.core.interfaces.database_adapter import OperationArgs


class DefaultKeyBuilder:
    """Default key builder using a hash of the query arguments.

    Resolution order, first match wins:

    1. An explicit key from the per-call cache options.
    2. The ``generate_key`` function from the configuration.
    3. ``slug[:versions]:operation:<md5>`` where the digest covers the
       slug, locale, operation, versions flag and ``where`` predicate.

    All three are namespaced with the configured key prefix, if any.
    """

    def __init__(self, config: CacheConfig | None = None) -> None:
        """Initialize the key builder.

        Args:
            config: Cache configuration providing the key prefix and
                the optional custom key generation function.
        """
        self._config = config or CacheConfig()

    @property
    def prefix(self) -> str | None:
        return self._config.key_prefix

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
        if override is not None and override.key:
            return with_prefix(self.prefix, override.key)

        generate_key = self._config.default_cache_options.generate_key
        if generate_key is not None:
            return with_prefix(self.prefix, generate_key(args, operation, versions))

        key = CacheKey.from_components(
            slug=slug,
            operation=operation,
            where=args.get("where"),
            locale=args.get("locale"),
            versions=versions,
            prefix=self.prefix,
        )
        return str(key)
