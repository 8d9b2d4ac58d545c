"""Serializer interface."""

from typing import Any, Protocol


class ISerializer(Protocol):
    """Contract for serializing/deserializing cached values.

    Serializers handle the conversion between Python objects
    and the text stored in a KV namespace.
    """

    def serialize(self, value: Any) -> str:
        """Serialize value to text.

        Args:
            value: The Python object to serialize.

        Returns:
            The serialized value.

        Raises:
            SerializationError: If the value cannot be serialized.
        """
        ...

    def deserialize(self, data: str) -> Any:
        """Deserialize text to value.

        Args:
            data: The text to deserialize.

        Returns:
            The deserialized Python object.

        Raises:
            SerializationError: If the data cannot be deserialized.
        """
        ...
