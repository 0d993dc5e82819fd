import json
from typing import Any

from vaultcodec.core.errors import EncodingError


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-finite number '{name}' is not allowed")


def marshal(value: Any) -> str:
    """
    Serialize a raw structured value into compact JSON text.

    Non-finite floats, cyclic containers and objects JSON has no
    representation for are rejected with EncodingError.
    """
    try:
        return json.dumps(
            value,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError, RecursionError) as ex:
        raise EncodingError(str(ex)) from ex


def unmarshal(text: str) -> Any:
    """Parse JSON text back into a raw structured value."""
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except (TypeError, ValueError, RecursionError) as ex:
        raise EncodingError(str(ex)) from ex
