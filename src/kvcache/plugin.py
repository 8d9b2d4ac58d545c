"""Host lifecycle integration.

The host application is any object with a ``db`` attribute holding its
database adapter and an optional async ``on_init(app)`` hook, run once
at startup.
"""

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from kvcache.adapter import CachingDatabaseAdapter, db_adapter_with_cache
from kvcache.core.entities.cache_config import CacheConfig
from kvcache.core.interfaces.kv_namespace import IKVNamespace
from kvcache.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

App = TypeVar("App")


async def install_cache(
    app: Any,
    kv: IKVNamespace | None,
    config: CacheConfig | None = None,
) -> CachingDatabaseAdapter:
    """Verify the KV binding and wrap the app's database adapter.

    Args:
        app: The host application.
        kv: The KV namespace to cache into.
        config: Cache configuration.

    Returns:
        The caching adapter now installed as ``app.db``.

    Raises:
        ConfigurationError: If the namespace is missing or unreachable,
            or the app has no database adapter.
    """
    if kv is None:
        raise ConfigurationError("KV namespace must be provided")

    try:
        await kv.list(limit=1)
    except Exception as e:
        logger.error("Failed to access KV namespace", exc_info=True)
        raise ConfigurationError(f"Failed to access KV namespace: {e}") from e

    base_adapter = getattr(app, "db", None)
    if base_adapter is None:
        raise ConfigurationError("No database adapter found")

    adapter = db_adapter_with_cache(base_adapter=base_adapter, kv=kv, config=config)
    app.db = adapter
    return adapter


def kv_cache_plugin(
    kv: IKVNamespace | None,
    config: CacheConfig | None = None,
) -> Callable[[App], App]:
    """Create a plugin installing the cache when the app starts.

    The returned callable chains onto the app's existing ``on_init``
    hook, which still runs first.

    Args:
        kv: The KV namespace to cache into.
        config: Cache configuration.

    Returns:
        A function taking the app and returning it with the hook set.

    Example:
        app = kv_cache_plugin(kv, CacheConfig(collections={"posts": True}))(app)
        await app.on_init(app)
    """

    def plugin(app: App) -> App:
        incoming_on_init = getattr(app, "on_init", None)

        async def on_init(host: Any) -> None:
            if incoming_on_init is not None:
                await incoming_on_init(host)
            await install_cache(host, kv, config)

        app.on_init = on_init  # type: ignore[attr-defined]
        return app

    return plugin
