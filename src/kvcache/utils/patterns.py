"""Wildcard pattern helpers for KV invalidation.

The KV store only lists keys by literal prefix, so a pattern is turned
into the longest literal prefix it allows, and the listed keys are then
filtered against the full pattern.
"""

import re
from collections.abc import Iterable

WILDCARD = "*"

_SEGMENT_WILDCARD = re.compile(r"^(.+?):\*$")


def derive_list_prefix(pattern: str) -> str:
    """Return the literal key prefix to list for a pattern.

    ``posts:*`` lists ``posts:``, ``posts*`` lists ``posts`` and a
    pattern without wildcards is used as is. Wildcards earlier in the
    pattern cut the prefix at the first ``*``, so ``app:*:*:*tag*``
    lists ``app:`` and ``*:*:*tag*`` lists everything.

    Args:
        pattern: Rendered invalidation pattern.

    Returns:
        The prefix to pass to the KV ``list`` call.
    """
    match = _SEGMENT_WILDCARD.match(pattern)
    if match:
        prefix = match.group(1) + ":"
    elif pattern.endswith(WILDCARD):
        prefix = pattern[: -len(WILDCARD)]
    else:
        prefix = pattern

    if WILDCARD in prefix:
        prefix = prefix[: prefix.index(WILDCARD)]
    return prefix


def compile_pattern(pattern: str) -> re.Pattern[str] | None:
    """Compile a wildcard pattern to a regex anchored on the whole key.

    Args:
        pattern: Rendered invalidation pattern.

    Returns:
        The compiled regex, or None when the pattern has no wildcard
        and every key sharing its prefix matches.
    """
    if WILDCARD not in pattern:
        return None
    body = ".*".join(re.escape(part) for part in pattern.split(WILDCARD))
    return re.compile(f"^{body}$", re.DOTALL)


def match_keys(pattern: str, keys: Iterable[str]) -> list[str]:
    """Filter listed keys down to those matching the full pattern."""
    regex = compile_pattern(pattern)
    if regex is None:
        return list(keys)
    return [key for key in keys if regex.match(key)]
