from typing import Any

from vaultcodec.core.errors import EncodingError


def as_bytes(data: Any) -> bytes:
    """
    Copy a byte sequence into `bytes`.

    Buffers (bytes, bytearray, memoryview) and lists or tuples of
    integers in range(256) are accepted. Anything else, ints included,
    raises EncodingError instead of being coerced.
    """
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)

    if isinstance(data, (list, tuple)):
        try:
            return bytes(data)
        except (TypeError, ValueError) as ex:
            raise EncodingError(str(ex)) from ex

    raise EncodingError(f"expected a byte sequence, got {type(data).__name__}")
