"""member_init — build an object's fields from one marker-annotated argument list."""

from .accessor import AttrAccessor, CallableAccessor, ItemAccessor
from .config import InitOptions, default_options
from .errors import (
    ArgumentMismatch,
    DoubleForwardError,
    MemberInitError,
    MissingDefaultConstructor,
    OrphanedMarkerError,
    RegistryError,
)
from .initializer import ForwardLedger, initialize, initialize_all, initialize_field
from .registry import (
    FieldDescriptor,
    MemberSpec,
    Registry,
    check_registry,
    member,
    member_count,
    members,
    register,
    registry_of,
)
from .resolver import OrphanedMarker, Range, extract, find_orphans, resolve
from .tokens import (
    Marker,
    Ownership,
    Token,
    TokenStream,
    Value,
    borrowed,
    marker,
    owned,
    stream,
)

__all__ = [
    "initialize",
    "initialize_all",
    "initialize_field",
    "ForwardLedger",
    "resolve",
    "extract",
    "find_orphans",
    "Range",
    "OrphanedMarker",
    "Marker",
    "Value",
    "Token",
    "TokenStream",
    "Ownership",
    "marker",
    "owned",
    "borrowed",
    "stream",
    "FieldDescriptor",
    "MemberSpec",
    "Registry",
    "member",
    "members",
    "register",
    "registry_of",
    "member_count",
    "check_registry",
    "AttrAccessor",
    "ItemAccessor",
    "CallableAccessor",
    "InitOptions",
    "default_options",
    "MemberInitError",
    "MissingDefaultConstructor",
    "ArgumentMismatch",
    "OrphanedMarkerError",
    "DoubleForwardError",
    "RegistryError",
]
