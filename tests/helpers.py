from dataclasses import dataclass, field
from typing import Any, ClassVar

from vaultcodec.core.encoding.b64 import base64_to_bytes, bytes_to_base64
from vaultcodec.core.registry import entities
from vaultcodec.core.serializable import Serializable


@entities.register
@dataclass
class Account(Serializable):
    __type__: ClassVar[str] = "account"

    email: str = ""

    def validate(self) -> bool:
        return super().validate() and isinstance(self.email, str)


@dataclass
class Named(Serializable):
    name: str = ""

    def validate(self) -> bool:
        return super().validate() and isinstance(self.name, str) and bool(self.name)


@dataclass
class Note(Serializable):
    label: str = ""
    body: str = ""
    _draft: str = ""


class Session(Serializable):
    """Plain (non-dataclass) entity, properties come from the instance dict."""

    def __init__(self) -> None:
        self.id = ""
        self.scopes: list[str] = []
        self._key = b""

    def validate(self) -> bool:
        return (
            super().validate()
            and isinstance(self.id, str)
            and isinstance(self.scopes, list)
        )


class Exploding(Serializable):
    def validate(self) -> bool:
        raise RuntimeError("boom")


@entities.register
@dataclass
class Attachment(Serializable):
    __type__: ClassVar[str] = "attachment"

    name: str = ""
    data: bytes = b""

    def to_raw(self, exclude=()) -> dict[str, Any]:
        raw = super().to_raw(exclude)
        if "data" in raw:
            raw["data"] = bytes_to_base64(self.data)
        return raw

    def from_raw(self, raw) -> "Attachment":
        return super().from_raw({
            **raw,
            "data": base64_to_bytes(raw.get("data", "")),
        })

    def validate(self) -> bool:
        return (
            super().validate()
            and isinstance(self.name, str)
            and isinstance(self.data, bytes)
        )


@entities.register
@dataclass
class VaultItem(Serializable):
    __type__: ClassVar[str] = "vault-item"

    name: str = ""
    owner: Account | None = None
    tags: list[str] = field(default_factory=list)
    attachments: list[Attachment] = field(default_factory=list)
    _unlocked: bool = False

    def from_raw(self, raw) -> "VaultItem":
        raw = dict(raw)
        owner = raw.pop("owner", None)
        attachments = raw.pop("attachments", [])
        return super().from_raw({
            **raw,
            "owner": None if owner is None else Account().from_raw(owner),
            "attachments": [Attachment().from_raw(each) for each in attachments],
        })

    def validate(self) -> bool:
        return (
            super().validate()
            and isinstance(self.name, str)
            and bool(self.name)
            and (self.owner is None or isinstance(self.owner, Account))
            and isinstance(self.tags, list)
            and all(isinstance(tag, str) for tag in self.tags)
            and all(isinstance(each, Attachment) for each in self.attachments)
        )


def make_item(name: str = "github", unlocked: bool = False) -> VaultItem:
    return VaultItem(
        name=name,
        owner=Account(email="a@b.com"),
        tags=["dev", "work"],
        attachments=[
            Attachment(name="key.pem", data=b"\x00\x01\xfe\xff"),
            Attachment(name="empty", data=b""),
        ],
        _unlocked=unlocked,
    )


@dataclass(slots=True)
class Slotted(Serializable):
    name: str = ""
    tags: list[str] = field(default_factory=list)

    def validate(self) -> bool:
        return Serializable.validate(self) and isinstance(self.name, str) and bool(self.name)


@dataclass
class Misencoded(Serializable):
    """Declares bytes but holds whatever was assigned, so to_raw can fail."""

    data: Any = b""

    def to_raw(self, exclude=()) -> dict[str, Any]:
        return {"data": bytes_to_base64(self.data) if isinstance(self.data, bytes) else self.data.hex()}
