from dataclasses import dataclass, asdict
from typing import Any


@dataclass
class Message:
    """
    Result of a vaultctl command, rendered by the configured Renderer.
    """
    type: str
    """
    type of message, e.g. "ok", "error"
    """

    data: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
