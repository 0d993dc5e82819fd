import msgpack
from typing import Any

from vaultcodec.core.errors import EncodingError
from vaultcodec.core.ports.serializer import Serializer
from vaultcodec.core.serializable import Serializable


class MsgPackSerializer(Serializer):
    """
    MsgPack-based implementation of the Serializer interface.

    - deterministic binary encoding
    - compact
    - carries bytes natively, no base64 detour
    """
    def serialize(self, value: Any) -> bytes:
        if isinstance(value, Serializable):
            value = value.to_raw()
        try:
            return msgpack.packb(value, use_bin_type=True)
        except (TypeError, ValueError, OverflowError) as ex:
            raise EncodingError(str(ex)) from ex

    def deserialize(self, data: bytes) -> Any:
        try:
            return msgpack.unpackb(data, raw=False)
        except (msgpack.UnpackException, TypeError, ValueError) as ex:
            raise EncodingError(str(ex)) from ex
