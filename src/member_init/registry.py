"""Field descriptors and per-type member registries."""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator

from .accessor import Accessor, AttrAccessor, is_accessor
from .errors import MissingDefaultConstructor, RegistryError


logger = logging.getLogger(__name__)

REGISTRY_ATTR = "__member_registry__"


# ---------------------------------------------------------------------------
# Signature helpers
# ---------------------------------------------------------------------------

def signature_of(factory: Callable[..., Any]) -> inspect.Signature | None:
    """Return the call signature of *factory*, or None if it can't be read.

    Some builtins (``int``, ``dict``, ...) expose no signature; the plan pass
    lets those through and the apply pass turns their ``TypeError`` into
    ``ArgumentMismatch``.
    """
    try:
        return inspect.signature(factory)
    except (TypeError, ValueError):
        return None


def bind_error(factory: Callable[..., Any], args: tuple) -> str | None:
    """Return why *args* can't be passed to *factory*, or None if they can."""
    sig = signature_of(factory)
    if sig is None:
        return None
    try:
        sig.bind(*args)
    except TypeError as exc:
        return str(exc)
    return None


# ---------------------------------------------------------------------------
# MemberSpec / FieldDescriptor
# ---------------------------------------------------------------------------

@dataclass
class MemberSpec:
    """Declaration of one member, before it gets an index."""

    name: str
    factory: Callable[..., Any]
    accessor: Accessor | None = None
    required: bool = False  # callers always supply a marker


def member(
    name: str,
    factory: Callable[..., Any],
    *,
    attr: str | None = None,
    accessor: Accessor | None = None,
    required: bool = False,
) -> MemberSpec:
    """Declare a member. The field is stored in ``obj.<attr or name>`` by default."""
    if accessor is not None and attr is not None:
        raise RegistryError(f"member {name!r}: give either attr or accessor, not both")
    if accessor is None:
        accessor = AttrAccessor(attr or name)
    return MemberSpec(name=name, factory=factory, accessor=accessor, required=required)


@dataclass(frozen=True)
class FieldDescriptor:
    name: str
    index: int
    accessor: Accessor
    factory: Callable[..., Any]
    required: bool = False

    @property
    def default_constructible(self) -> bool:
        return bind_error(self.factory, ()) is None


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Registry:
    """Ordered member list of one target type."""

    type_name: str
    fields: tuple[FieldDescriptor, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for i, fd in enumerate(self.fields):
            if fd.index != i:
                raise RegistryError(
                    f"{self.type_name}: field {fd.name!r} has index {fd.index}, expected {i}"
                )
            if fd.name in seen:
                raise RegistryError(f"{self.type_name}: duplicate field name {fd.name!r}")
            if not callable(fd.factory):
                raise RegistryError(f"{self.type_name}.{fd.name}: factory is not callable")
            if not is_accessor(fd.accessor):
                raise RegistryError(f"{self.type_name}.{fd.name}: invalid accessor")
            seen.add(fd.name)

    @property
    def count(self) -> int:
        return len(self.fields)

    @property
    def names(self) -> list[str]:
        return [fd.name for fd in self.fields]

    def __len__(self) -> int:
        return len(self.fields)

    def __iter__(self) -> Iterator[FieldDescriptor]:
        return iter(self.fields)

    def __getitem__(self, index: int) -> FieldDescriptor:
        return self.fields[index]

    def __contains__(self, name: object) -> bool:
        return any(fd.name == name for fd in self.fields)

    def by_name(self, name: str) -> FieldDescriptor | None:
        for fd in self.fields:
            if fd.name == name:
                return fd
        return None

    @classmethod
    def build(cls, type_name: str, members: Iterable[MemberSpec | tuple]) -> Registry:
        """Assign declaration indices to *members* and build a Registry.

        Each item is a ``MemberSpec`` or a ``(name, factory)`` pair.
        """
        fields: list[FieldDescriptor] = []
        for i, m in enumerate(members):
            if not isinstance(m, MemberSpec):
                try:
                    name, factory = m
                except (TypeError, ValueError):
                    raise RegistryError(
                        f"{type_name}: member {i} must be a MemberSpec or (name, factory) pair"
                    ) from None
                m = member(name, factory)
            fields.append(
                FieldDescriptor(
                    name=m.name,
                    index=i,
                    accessor=m.accessor or AttrAccessor(m.name),
                    factory=m.factory,
                    required=m.required,
                )
            )
        return cls(type_name=type_name, fields=tuple(fields))


# ---------------------------------------------------------------------------
# Static checks
# ---------------------------------------------------------------------------

def check_registry(target: Registry | type) -> list[str]:
    """Names of non-required fields that have no zero-argument construction path."""
    reg = target if isinstance(target, Registry) else registry_of(target)
    return [fd.name for fd in reg if not fd.required and not fd.default_constructible]


# ---------------------------------------------------------------------------
# Registration on classes
# ---------------------------------------------------------------------------

def register(cls: type, members: Iterable[MemberSpec | tuple], *, check: bool = True) -> Registry:
    """Attach a member registry to *cls* and return it.

    With *check*, every field that is not ``required`` must be
    default-constructible; otherwise ``MissingDefaultConstructor`` is raised
    now rather than on first use.
    """
    reg = Registry.build(cls.__qualname__, members)
    if check:
        for fd in reg:
            if fd.required:
                continue
            reason = bind_error(fd.factory, ())
            if reason is not None:
                raise MissingDefaultConstructor(reg.type_name, fd.name, reason)
    setattr(cls, REGISTRY_ATTR, reg)
    logger.debug("Registered %d member(s) on %s: %s", reg.count, reg.type_name, reg.names)
    return reg


def members(*specs: MemberSpec | tuple, check: bool = True) -> Callable[[type], type]:
    """Class decorator form of :func:`register`.

    Usage::

        @members(member("x", int), member("y", str))
        class Point:
            def __init__(self, *args):
                initialize(self, *args)
    """
    def decorate(cls: type) -> type:
        register(cls, specs, check=check)
        return cls
    return decorate


def registry_of(target: Any) -> Registry:
    """Registry for a class or instance; inherited through the MRO.

    Unregistered types get an empty registry.
    """
    cls = target if isinstance(target, type) else type(target)
    reg = getattr(cls, REGISTRY_ATTR, None)
    if reg is None:
        return Registry(type_name=cls.__qualname__)
    return reg


def member_count(target: Any) -> int:
    return registry_of(target).count
