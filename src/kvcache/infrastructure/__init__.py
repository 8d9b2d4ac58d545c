"""Infrastructure layer implementations for kvcache."""

from kvcache.infrastructure.backends.memory import InMemoryKVNamespace
from kvcache.infrastructure.key_builders.default import DefaultKeyBuilder
from kvcache.infrastructure.serializers.json import JsonSerializer

__all__ = [
    "InMemoryKVNamespace",
    "DefaultKeyBuilder",
    "JsonSerializer",
]
