"""Cache configuration entity."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from kvcache.core.entities.cache_options import CacheOptions

DEFAULT_TTL = 300

# Receives (args, operation, versions) and returns a cache key.
KeyGenerator = Callable[[Mapping[str, Any], str, bool], str]


@dataclass(frozen=True)
class DefaultCacheOptions:
    """Defaults applied to every cached entity.

    Attributes:
        ttl: Default time-to-live in seconds.
        key_prefix: Namespace prepended to every key and pattern.
        generate_key: Optional custom key generation function.
        versions: Whether version queries are cached for entities
            enabled with a plain ``True``.
    """

    ttl: int = DEFAULT_TTL
    key_prefix: str | None = None
    generate_key: KeyGenerator | None = None
    versions: bool = False


@dataclass(frozen=True)
class CacheConfig:
    """Cache configuration.

    Built once at startup and shared read-only by every call.

    Collections and globals opt in to caching by being listed. A value
    of ``True`` enables caching with the default TTL; a
    :class:`CacheOptions` (or a plain dict, normalized on init) sets
    per-entity options. ``False`` entries are dropped.
    """

    collections: dict[str, bool | CacheOptions] = field(default_factory=dict)
    globals: dict[str, bool | CacheOptions] = field(default_factory=dict)
    default_cache_options: DefaultCacheOptions = field(
        default_factory=DefaultCacheOptions
    )
    debug: bool = False

    def __post_init__(self) -> None:
        """Normalize dict entries into CacheOptions."""
        object.__setattr__(self, "collections", _normalize(self.collections))
        object.__setattr__(self, "globals", _normalize(self.globals))

    @property
    def key_prefix(self) -> str | None:
        """Shortcut for the configured key prefix."""
        return self.default_cache_options.key_prefix

    @property
    def default_ttl(self) -> int:
        """Shortcut for the configured default TTL."""
        return self.default_cache_options.ttl

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CacheConfig":
        """Build a configuration from a plain mapping.

        Accepts both snake_case and camelCase keys, so settings loaded
        from JSON or YAML can be passed straight through.

        Args:
            data: Mapping with ``collections``, ``globals``,
                ``default_cache_options`` and ``debug`` keys.

        Returns:
            A new CacheConfig instance.
        """
        defaults = _get(data, "default_cache_options", "defaultCacheOptions") or {}
        default_options = DefaultCacheOptions(
            ttl=defaults.get("ttl", DEFAULT_TTL),
            key_prefix=_get(defaults, "key_prefix", "keyPrefix"),
            generate_key=_get(defaults, "generate_key", "generateKey"),
            versions=bool(defaults.get("versions", False)),
        )
        return cls(
            collections=dict(data.get("collections") or {}),
            globals=dict(data.get("globals") or {}),
            default_cache_options=default_options,
            debug=bool(data.get("debug", False)),
        )


def _get(data: Mapping[str, Any], snake: str, camel: str) -> Any:
    if snake in data:
        return data[snake]
    return data.get(camel)


def _normalize(
    entries: Mapping[str, bool | CacheOptions | Mapping[str, Any]],
) -> dict[str, bool | CacheOptions]:
    normalized: dict[str, bool | CacheOptions] = {}
    for slug, value in entries.items():
        if value is False:
            continue
        if isinstance(value, Mapping):
            normalized[slug] = CacheOptions.from_dict(value)
        else:
            normalized[slug] = value
    return normalized
