"""Error types for member_init."""

from __future__ import annotations


class MemberInitError(Exception):
    """Base class for every error raised by member_init."""


class RegistryError(MemberInitError):
    """A member registry is malformed (duplicate names, bad factory, ...)."""


class MissingDefaultConstructor(MemberInitError):
    """A field has no marker and its factory cannot be called without arguments."""

    def __init__(self, type_name: str, field: str, reason: str = "") -> None:
        self.type_name = type_name
        self.field = field
        self.reason = reason
        msg = f"{type_name}.{field}: no marker supplied and field is not default-constructible"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class ArgumentMismatch(MemberInitError):
    """The arguments matched to a field do not fit its factory."""

    def __init__(self, type_name: str, field: str, arguments: tuple, reason: str) -> None:
        self.type_name = type_name
        self.field = field
        self.arguments = arguments
        self.reason = reason
        super().__init__(
            f"{type_name}.{field}: cannot construct from {len(arguments)} argument(s): {reason}"
        )


class OrphanedMarkerError(MemberInitError):
    """Markers that are duplicated or name no field (strict mode only)."""

    def __init__(self, type_name: str, markers: list) -> None:
        self.type_name = type_name
        self.markers = markers
        listed = ", ".join(f"{m.name!r}@{m.index}" for m in markers)
        super().__init__(f"{type_name}: orphaned marker(s): {listed}")


class DoubleForwardError(MemberInitError):
    """An owned value was forwarded to more than one constructor."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"owned value at stream position {index} was already forwarded")
