import re

from cryptography.hazmat.primitives import constant_time

from vaultcodec.core.encoding.b64 import bytes_to_base64, base64_to_bytes
from vaultcodec.core.encoding.buffer import as_bytes
from vaultcodec.core.errors import EncodingError

_HEX_RE = re.compile(r"(?:[0-9a-fA-F]{2})*")


def string_to_bytes(text: str) -> bytes:
    try:
        return text.encode("utf-8")
    except (AttributeError, UnicodeError) as ex:
        raise EncodingError(str(ex)) from ex


def bytes_to_string(data: bytes, encoding: str = "utf-8") -> str:
    try:
        return as_bytes(data).decode(encoding)
    except (LookupError, UnicodeError) as ex:
        raise EncodingError(str(ex)) from ex


def string_to_base64(text: str, url_safe: bool = True) -> str:
    return bytes_to_base64(string_to_bytes(text), url_safe)


def base64_to_string(text: str) -> str:
    return bytes_to_string(base64_to_bytes(text))


def hex_to_bytes(text: str) -> bytes:
    """
    Decode hexadecimal text, two characters per byte.

    bytes.fromhex() tolerates whitespace, so the input is checked
    against the strict pair grammar first.
    """
    if not isinstance(text, str) or not _HEX_RE.fullmatch(text):
        raise EncodingError("invalid hex string: expected pairs of [0-9a-fA-F]")
    return bytes.fromhex(text)


def bytes_to_hex(data: bytes) -> str:
    return as_bytes(data).hex()


def base64_to_hex(text: str) -> str:
    return bytes_to_hex(base64_to_bytes(text))


def hex_to_base64(text: str) -> str:
    return bytes_to_base64(hex_to_bytes(text))


def concat_bytes(*chunks: bytes) -> bytes:
    return b"".join(as_bytes(chunk) for chunk in chunks)


def equal_bytes(a: bytes, b: bytes) -> bool:
    """Constant-time comparison. Different lengths compare unequal."""
    return constant_time.bytes_eq(as_bytes(a), as_bytes(b))
