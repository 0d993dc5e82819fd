from typing import Protocol, Any


class Serializer(Protocol):
    """
    Defines the interface for turning raw structured values into the
    opaque byte sequences handed to storage and transport collaborators.

    Implementations must be:
    - deterministic
    - pure (no side effects)
    - safe against malformed input (failures surface as EncodingError)
    """

    def serialize(self, value: Any) -> bytes:
        """Encode a raw structured value (or a Serializable entity) into bytes."""

    def deserialize(self, data: bytes) -> Any:
        """Decode bytes back into a raw structured value."""
