"""Field accessors: read and assign a single field of a target object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable


_MISSING = object()


@dataclass(frozen=True)
class AttrAccessor:
    """Field stored as an attribute (``obj.<attr>``)."""

    attr: str

    def get(self, obj: Any, default: Any = _MISSING) -> Any:
        if default is _MISSING:
            return getattr(obj, self.attr)
        return getattr(obj, self.attr, default)

    def set(self, obj: Any, value: Any) -> None:
        setattr(obj, self.attr, value)


@dataclass(frozen=True)
class ItemAccessor:
    """Field stored under a key of a mapping held by the object.

    With ``container=None`` the object itself is the mapping; otherwise
    ``getattr(obj, container)`` is.
    """

    key: str
    container: str | None = None

    def _mapping(self, obj: Any) -> Any:
        if self.container is None:
            return obj
        return getattr(obj, self.container)

    def get(self, obj: Any, default: Any = _MISSING) -> Any:
        mapping = self._mapping(obj)
        if default is _MISSING:
            return mapping[self.key]
        return mapping.get(self.key, default)

    def set(self, obj: Any, value: Any) -> None:
        self._mapping(obj)[self.key] = value


@dataclass(frozen=True)
class CallableAccessor:
    """Field reached through a user-supplied getter / setter pair."""

    getter: Callable[[Any], Any]
    setter: Callable[[Any, Any], None]

    def get(self, obj: Any, default: Any = _MISSING) -> Any:
        try:
            return self.getter(obj)
        except (AttributeError, KeyError):
            if default is _MISSING:
                raise
            return default

    def set(self, obj: Any, value: Any) -> None:
        self.setter(obj, value)


Accessor = AttrAccessor | ItemAccessor | CallableAccessor


def is_accessor(obj: Any) -> bool:
    return callable(getattr(obj, "get", None)) and callable(getattr(obj, "set", None))
