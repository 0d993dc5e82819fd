from typing import Any

from vaultcodec.core.encoding.binary import string_to_bytes, bytes_to_string
from vaultcodec.core.marshal import marshal, unmarshal
from vaultcodec.core.ports.serializer import Serializer
from vaultcodec.core.serializable import Serializable


class JsonSerializer(Serializer):
    """
    UTF-8 encoded compact JSON, the default byte wire format.
    Produces exactly what `Serializable.to_bytes()` produces.
    """
    def serialize(self, value: Any) -> bytes:
        if isinstance(value, Serializable):
            value = value.to_raw()
        return string_to_bytes(marshal(value))

    def deserialize(self, data: bytes) -> Any:
        return unmarshal(bytes_to_string(data))
