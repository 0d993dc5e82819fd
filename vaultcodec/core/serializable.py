import contextlib
import dataclasses
import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, Self, TypeVar

from vaultcodec.core.encoding.binary import string_to_bytes, bytes_to_string
from vaultcodec.core.errors import EncodingError, ValidationFailed
from vaultcodec.core.marshal import marshal, unmarshal
from vaultcodec.core.ports.serializer import Serializer

PRIVATE_PREFIX = "_"
"""
Properties whose name starts with this prefix live only in memory
and never appear in the raw value.
"""

_MISSING = object()

_logger = logging.getLogger("core.serializable")

S = TypeVar("S", bound="Serializable")


@dataclass(frozen=True, slots=True)
class DecodeResult(Generic[S]):
    """
    Outcome of a non-raising restore: either the validated entity
    or the EncodingError that prevented it.

    The error is a ValidationFailed when validate() rejected the data
    and a plain EncodingError for any other failure.
    """
    value: S | None = None
    error: EncodingError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> S:
        if self.error is not None:
            raise self.error
        return self.value


@contextlib.contextmanager
def _encoding_boundary(entity: "Serializable", action: str) -> Iterator[None]:
    """Re-signal anything escaping a conversion path as EncodingError."""
    try:
        yield
    except EncodingError:
        raise
    except Exception as ex:
        raise EncodingError(f"failed to {action} {entity.type}: {ex}") from ex


def _raw_value(value: Any) -> Any:
    if isinstance(value, Serializable):
        return value.to_raw()
    if isinstance(value, (list, tuple)):
        return [_raw_value(each) for each in value]
    return value


class Serializable:
    """
    Base class for entities that can be converted into a raw structured
    value, JSON text or a byte sequence for storage and transfer, and
    restored from any of those forms with validation.

    Entities are usually dataclasses whose fields all have defaults, so
    that `Entity()` yields an empty instance ready for `from_raw`. The
    base `from_raw` copies raw values verbatim; subclasses override it to
    rebuild typed values (nested entities, bytes) before delegating:

        @dataclass
        class Item(Serializable):
            __type__: ClassVar[str] = "item"

            name: str = ""
            secret: bytes = b""
            parent: "Item | None" = None

            def to_raw(self, exclude=()):
                return {
                    **super().to_raw(exclude),
                    "secret": bytes_to_base64(self.secret),
                }

            def from_raw(self, raw):
                raw = dict(raw)
                parent = raw.pop("parent", None)
                return super().from_raw({
                    **raw,
                    "secret": base64_to_bytes(raw["secret"]),
                    "parent": parent and Item().from_raw(parent),
                })

            def validate(self):
                return (
                    super().validate()
                    and isinstance(self.name, str)
                    and isinstance(self.secret, bytes)
                    and (self.parent is None or isinstance(self.parent, Item))
                )
    """

    __type__: ClassVar[str | None] = None
    """
    Explicit, stable type tag. Required for entities placed in a
    TypeRegistry; when unset, `type` falls back to the class name.
    """

    @property
    def type(self) -> str:
        """
        String discriminator for the entity, useful for segmenting storage.
        Defaults to the lowercase class name.
        """
        return self.__type__ or type(self).__name__.lower()

    def validate(self) -> bool:
        """
        Checks that all properties hold values of the expected types.
        Called on every restore; subclasses combine their own checks
        with `super().validate()`.
        """
        return True

    def _properties(self) -> Iterator[tuple[str, Any]]:
        if dataclasses.is_dataclass(self):
            for field in dataclasses.fields(self):
                value = getattr(self, field.name, _MISSING)
                if value is not _MISSING:
                    yield field.name, value
        else:
            yield from vars(self).items()

    def to_raw(self, exclude: Iterable[str] = ()) -> dict[str, Any]:
        """
        Builds the raw structured value of this entity.

        Private-prefixed properties and names listed in `exclude` are
        skipped. Nested entities are converted through their own
        `to_raw`, sequences element by element.
        """
        excluded = {exclude} if isinstance(exclude, str) else set(exclude)
        return {
            prop: _raw_value(value)
            for prop, value in self._properties()
            if not prop.startswith(PRIVATE_PREFIX) and prop not in excluded
        }

    def from_raw(self, raw: Mapping[str, Any]) -> Self:
        """
        Copies every key of `raw` onto this entity and validates it.

        Dataclass entities only accept their declared fields; other
        entities refuse dunder names and names defined on the class.
        On any failure the entity is put back into the state it had
        before the call and EncodingError (ValidationFailed when
        `validate` returned False) is raised.
        """
        if not isinstance(raw, Mapping):
            raise EncodingError(
                f"cannot restore {self.type} from {type(raw).__name__}"
            )

        for prop in raw:
            if not self._assignable(prop):
                raise EncodingError(f"{self.type} has no property {prop!r}")

        snapshot = self._snapshot()
        try:
            for prop, value in raw.items():
                setattr(self, prop, value)
            valid = self.validate()
        except Exception as ex:
            self._rollback(snapshot)
            raise EncodingError(f"failed to restore {self.type}: {ex}") from ex

        if not valid:
            self._rollback(snapshot)
            _logger.warning(f"Failed to validate {self.type}")
            raise ValidationFailed(f"{self.type} failed validation")

        return self

    def _assignable(self, prop: Any) -> bool:
        if not isinstance(prop, str):
            return False
        if dataclasses.is_dataclass(self):
            return prop in {field.name for field in dataclasses.fields(self)}
        return not prop.startswith("__") and not hasattr(type(self), prop)

    def _snapshot(self) -> tuple[dict[str, Any], dict[str, Any]]:
        # Slotted dataclass fields live outside the instance dict
        fields: dict[str, Any] = {}
        if dataclasses.is_dataclass(self):
            fields = {
                field.name: getattr(self, field.name, _MISSING)
                for field in dataclasses.fields(self)
            }
        return dict(getattr(self, "__dict__", {})), fields

    def _rollback(self, snapshot: tuple[dict[str, Any], dict[str, Any]]) -> None:
        state, fields = snapshot
        if hasattr(self, "__dict__"):
            vars(self).clear()
            vars(self).update(state)

        for name, value in fields.items():
            if value is not _MISSING:
                setattr(self, name, value)
            elif hasattr(self, name):
                delattr(self, name)

    def try_from_raw(self, raw: Mapping[str, Any]) -> DecodeResult[Self]:
        """Like `from_raw`, but reports failure in the result instead of raising."""
        try:
            with _encoding_boundary(self, "restore"):
                return DecodeResult(value=self.from_raw(raw))
        except EncodingError as ex:
            return DecodeResult(error=ex)

    def _checked_raw(self) -> dict[str, Any]:
        with _encoding_boundary(self, "convert"):
            return self.to_raw()

    def to_json(self) -> str:
        return marshal(self._checked_raw())

    def from_json(self, text: str) -> Self:
        raw = unmarshal(text)
        with _encoding_boundary(self, "restore"):
            return self.from_raw(raw)

    def to_bytes(self, serializer: Serializer | None = None) -> bytes:
        """
        UTF-8 encoded JSON by default; a Serializer selects another
        byte wire format for the raw value.
        """
        if serializer is None:
            return string_to_bytes(self.to_json())
        return serializer.serialize(self._checked_raw())

    def from_bytes(self, data: bytes, serializer: Serializer | None = None) -> Self:
        if serializer is None:
            return self.from_json(bytes_to_string(data))

        raw = serializer.deserialize(data)
        with _encoding_boundary(self, "restore"):
            return self.from_raw(raw)

    def clone(self) -> Self:
        """Validated deep copy made through the raw value."""
        with _encoding_boundary(self, "clone"):
            return type(self)().from_raw(self.to_raw())
