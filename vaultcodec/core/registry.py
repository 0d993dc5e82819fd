import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from vaultcodec.core.errors import EncodingError
from vaultcodec.core.serializable import Serializable

T = TypeVar("T", bound=type[Serializable])


class TypeRegistry:
    """
    Maps explicit type tags to Serializable entity classes.

    Every registered class must declare its own non-empty `__type__`,
    the class-name fallback of `Serializable.type` is not accepted here.
    Each tag may be registered exactly once; a second registration under
    the same tag raises a RuntimeError.
    """

    def __init__(self) -> None:
        self._types: dict[str, type[Serializable]] = {}
        self._logger = logging.getLogger("core.registry")

    def register(self, cls: T) -> T:
        if not (isinstance(cls, type) and issubclass(cls, Serializable)):
            raise TypeError(f"{cls!r} is not a Serializable class")

        tag = cls.__dict__.get("__type__")
        if not isinstance(tag, str) or not tag:
            raise ValueError(f"{cls.__name__} must declare an explicit __type__ tag")

        existing = self._types.get(tag)
        if existing is not None and existing is not cls:
            raise RuntimeError(
                f"Type tag '{tag}' already registered for {existing.__name__}"
            )

        self._types[tag] = cls
        self._logger.debug(f"Registered {cls.__name__} as '{tag}'")
        return cls

    def resolve(self, tag: str) -> type[Serializable] | None:
        return self._types.get(tag)

    def restore(self, tag: str, raw: Mapping[str, Any]) -> Serializable:
        """Build a fresh entity of the class registered under `tag` from `raw`."""
        cls = self.resolve(tag)
        if cls is None:
            raise EncodingError(f"Unknown type tag '{tag}'")
        return cls().from_raw(raw)

    def types(self) -> dict[str, type[Serializable]]:
        return dict(self._types)

    def __contains__(self, tag: object) -> bool:
        return tag in self._types


entities = TypeRegistry()
"""
Default registry for the application's entity set.
"""
