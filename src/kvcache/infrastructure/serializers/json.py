"""JSON serializer for KV text values."""

import json
from datetime import date, datetime
from typing import Any

from kvcache.exceptions import SerializationError

__all__ = ["JsonSerializer", "SerializationError"]

# Single-key wrappers marking values JSON has no type for.
_DATETIME_TAG = "__datetime__"
_DATE_TAG = "__date__"


class JsonSerializer:
    """Serializes query results to JSON text.

    KV namespaces store text, so results are written as JSON strings.
    Dates and datetimes are wrapped in a tagged object and restored on
    read, which lets records carrying timestamps come back unchanged.
    Sets are stored as lists.
    """

    def serialize(self, value: Any) -> str:
        """Encode a query result.

        Raises:
            SerializationError: If the value has no JSON representation.
        """
        try:
            return json.dumps(value, default=_encode)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Failed to serialize value: {e}") from e

    def deserialize(self, data: str) -> Any:
        """Decode a stored value.

        Raises:
            SerializationError: If the text is not valid JSON, which
                callers treat as a corrupted entry.
        """
        try:
            return json.loads(data, object_hook=_decode)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Failed to deserialize data: {e}") from e


def _encode(obj: Any) -> Any:
    # datetime first, it is a date subclass
    if isinstance(obj, datetime):
        return {_DATETIME_TAG: obj.isoformat()}
    if isinstance(obj, date):
        return {_DATE_TAG: obj.isoformat()}
    if isinstance(obj, (set, frozenset)):
        return list(obj)
    if hasattr(obj, "__dict__"):
        return vars(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def _decode(obj: dict[str, Any]) -> Any:
    if len(obj) != 1:
        return obj
    if _DATETIME_TAG in obj:
        return datetime.fromisoformat(obj[_DATETIME_TAG])
    if _DATE_TAG in obj:
        return date.fromisoformat(obj[_DATE_TAG])
    return obj
