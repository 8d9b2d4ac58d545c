"""Stored KV value entity."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class CacheEntry:
    """A serialized value as held by an in-process KV namespace.

    Times are readings of the namespace's own clock, so entries stay
    comparable with a monotonic or fake timer.
    """

    value: str
    stored_at: float
    ttl: int | None = None

    @property
    def expires_at(self) -> float:
        """Clock reading at which the entry expires, ``inf`` without TTL."""
        if self.ttl is None:
            return math.inf
        return self.stored_at + self.ttl
