"""Redis KV namespace for kvcache."""

from kvcache_redis.backend import RedisKVNamespace

__all__ = ["RedisKVNamespace"]
