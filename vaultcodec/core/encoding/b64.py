import base64
import binascii
import re

from vaultcodec.core.encoding.buffer import as_bytes
from vaultcodec.core.errors import EncodingError

_BASE64_RE = re.compile(r"[A-Za-z0-9+/\-_]*={0,2}")
_TO_STANDARD = str.maketrans("-_", "+/")


def _normalize(text: str) -> str:
    """
    Map both alphabets onto the standard one and restore padding.
    Raises ValueError when `text` cannot be base64 at all.
    """
    if not isinstance(text, str) or not _BASE64_RE.fullmatch(text):
        raise ValueError("invalid base64 character")

    stripped = text.rstrip("=")
    if len(stripped) % 4 == 1:
        raise ValueError("invalid base64 length")
    if text != stripped and len(text) % 4:
        raise ValueError("invalid base64 padding")

    stripped = stripped.translate(_TO_STANDARD)
    return stripped + "=" * (-len(stripped) % 4)


def bytes_to_base64(data: bytes, url_safe: bool = True) -> str:
    """
    Encode bytes as base64. The URL-safe alphabet ('-' and '_') without
    padding is the default; pass url_safe=False for standard padded base64.
    """
    data = as_bytes(data)
    if url_safe:
        return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")
    return base64.b64encode(data).decode("ascii")


def base64_to_bytes(text: str) -> bytes:
    """Decode base64 text in either alphabet, padded or not."""
    try:
        return base64.b64decode(_normalize(text), validate=True)
    except (binascii.Error, ValueError) as ex:
        raise EncodingError(str(ex)) from ex


def is_base64(text: str) -> bool:
    try:
        _normalize(text)
    except ValueError:
        return False
    return True


def base64_byte_length(text: str) -> int:
    """Number of bytes `text` decodes to, computed from its length alone."""
    return len(text.rstrip("=")) * 3 // 4
