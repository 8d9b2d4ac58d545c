"""KV namespace listing result entities."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class KVKey:
    """A key returned by a KV ``list`` call."""

    name: str
    expiration: int | None = None
    metadata: Any = None


@dataclass(frozen=True)
class KVListResult:
    """One page of a KV ``list`` call.

    ``cursor`` is only meaningful while ``list_complete`` is False and
    must be passed back to fetch the next page.
    """

    keys: list[KVKey] = field(default_factory=list)
    list_complete: bool = True
    cursor: str | None = None

    @property
    def names(self) -> list[str]:
        return [key.name for key in self.keys]
