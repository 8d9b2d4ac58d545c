"""Invalidation pattern entities.

Patterns are kept as small tagged values and rendered to the
``prefix:slug:*`` wildcard string only when they reach the KV store.
"""

from dataclasses import dataclass

from kvcache.core.entities.cache_key import slug_segment, with_prefix


@dataclass(frozen=True)
class ExactPattern:
    """Every key starting with a literal value."""

    value: str

    def render(self, prefix: str | None = None) -> str:
        return with_prefix(prefix, self.value)


@dataclass(frozen=True)
class EntityPattern:
    """Every key cached for a collection or global.

    With ``versions`` set, only keys of version queries match.
    """

    slug: str
    versions: bool = False

    def render(self, prefix: str | None = None) -> str:
        return with_prefix(prefix, f"{slug_segment(self.slug, self.versions)}:*")


@dataclass(frozen=True)
class TagPattern:
    """Every key whose trailing segment contains a tag.

    The slug position is a wildcard, so listing cannot be narrowed
    beyond the key prefix and the whole namespace is scanned.
    """

    tag: str

    def render(self, prefix: str | None = None) -> str:
        return with_prefix(prefix, f"*:*:*{self.tag}*")


InvalidationPattern = ExactPattern | EntityPattern | TagPattern
