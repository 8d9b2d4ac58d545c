"""Exceptions raised by kvcache."""


class KVCacheError(Exception):
    """Base class for kvcache errors."""


class ConfigurationError(KVCacheError):
    """Raised at startup when the cache cannot be installed.

    This is the only error the cache layer lets halt the host: a
    missing or unreachable KV binding at boot is a misconfiguration,
    not a transient failure.
    """


class SerializationError(KVCacheError):
    """Raised when serialization or deserialization fails."""
