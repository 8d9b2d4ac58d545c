"""Core interfaces (Protocol classes) for kvcache."""

from kvcache.core.interfaces.database_adapter import IDatabaseAdapter, OperationArgs
from kvcache.core.interfaces.invalidator import IInvalidator
from kvcache.core.interfaces.key_builder import IKeyBuilder
from kvcache.core.interfaces.kv_namespace import IKVNamespace
from kvcache.core.interfaces.serializer import ISerializer

__all__ = [
    "IDatabaseAdapter",
    "IKVNamespace",
    "IKeyBuilder",
    "ISerializer",
    "IInvalidator",
    "OperationArgs",
]
