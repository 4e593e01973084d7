"""Initializer: builds every registered field of an object from a token stream."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from .config import InitOptions, default_options
from .errors import (
    ArgumentMismatch,
    DoubleForwardError,
    MissingDefaultConstructor,
    OrphanedMarkerError,
)
from .registry import FieldDescriptor, Registry, bind_error, registry_of, signature_of
from .resolver import Range, extract, find_orphans, resolve
from .tokens import TokenStream, Value, stream as make_stream


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Forwarding ledger
# ---------------------------------------------------------------------------

@dataclass
class ForwardLedger:
    """Owned value tokens already handed to a constructor.

    Keyed by token identity, so one ledger can span several streams; the
    tokens are kept alive so their ids are never reused.
    """

    consumed: dict[int, Value] = field(default_factory=dict)

    def forward(self, index: int, value: Value) -> Any:
        if value.owned:
            if id(value) in self.consumed:
                raise DoubleForwardError(index)
            self.consumed[id(value)] = value
        return value.payload


# ---------------------------------------------------------------------------
# Per-field plan
# ---------------------------------------------------------------------------

@dataclass
class _Step:
    fd: FieldDescriptor
    range: Range
    values: list[Value]


def _plan_field(fd: FieldDescriptor, stream: TokenStream, type_name: str) -> _Step:
    """Resolve *fd*'s arguments and check they fit its factory."""
    rng = resolve(fd.name, stream)
    if not rng.found:
        if fd.required:
            raise MissingDefaultConstructor(type_name, fd.name, "field is required")
        reason = bind_error(fd.factory, ())
        if reason is not None:
            raise MissingDefaultConstructor(type_name, fd.name, reason)
        return _Step(fd, rng, [])

    values = extract(stream, rng.begin, rng.end)
    payloads = tuple(v.payload for v in values)
    reason = bind_error(fd.factory, payloads)
    if reason is not None:
        raise ArgumentMismatch(type_name, fd.name, payloads, reason)
    return _Step(fd, rng, values)


def _apply(step: _Step, obj: Any, ledger: ForwardLedger, type_name: str) -> Any:
    fd = step.fd
    args: list[Any] = []
    if step.range.found:
        args = [
            ledger.forward(step.range.begin + 1 + offset, v)
            for offset, v in enumerate(step.values)
        ]
        logger.debug("%s: constructing from %d argument(s)", fd.name, len(args))
    else:
        logger.debug("%s: default construction", fd.name)

    if signature_of(fd.factory) is not None:
        value = fd.factory(*args)
    else:
        # no signature to check in the plan pass (int, str, dict, ...)
        try:
            value = fd.factory(*args)
        except TypeError as exc:
            raise ArgumentMismatch(type_name, fd.name, tuple(args), str(exc)) from exc
    fd.accessor.set(obj, value)
    return value


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def initialize_field(
    fd: FieldDescriptor,
    obj: Any,
    stream: TokenStream,
    *,
    ledger: ForwardLedger | None = None,
    type_name: str | None = None,
) -> Any:
    """Construct the single field *fd* of *obj* and return the new value.

    If the stream has a ``Marker(fd.name)``, the values after it (up to the
    next marker) are passed positionally to ``fd.factory``; otherwise the
    factory is called with no arguments.
    """
    tname = type_name or type(obj).__qualname__
    step = _plan_field(fd, stream, tname)
    return _apply(step, obj, ledger if ledger is not None else ForwardLedger(), tname)


def initialize_all(
    obj: Any,
    stream: TokenStream,
    registry: Registry | None = None,
    *,
    options: InitOptions | None = None,
) -> None:
    """Initialize every registered field of *obj* from *stream*.

    Two passes:

    1. plan: resolve each field's argument range and check it against the
       field's factory. Configuration errors are raised here, before any
       field is constructed. Factories without a readable signature
       (``int``, ``str``, ``dict``, ...) can only be checked by calling
       them, so their ``ArgumentMismatch`` surfaces in pass 2 and fields
       before them stay assigned.
    2. apply: construct fields in declaration order (index 0 first),
       whatever order their markers have in the stream.

    A type with no registered fields is left alone and the stream is not
    inspected.
    """
    reg = registry if registry is not None else registry_of(obj)
    if reg.count == 0:
        return

    opts = options if options is not None else default_options()

    # Pass 1: plan
    steps = [_plan_field(fd, stream, reg.type_name) for fd in reg]
    _check_orphans(reg, stream, opts)

    # Pass 2: apply
    ledger = ForwardLedger()
    for step in steps:
        _apply(step, obj, ledger, reg.type_name)


def initialize(
    obj: Any,
    *args: Any,
    registry: Registry | None = None,
    options: InitOptions | None = None,
) -> None:
    """Variadic form of :func:`initialize_all`.

    Usage::

        initialize(self, marker("x"), 5, marker("y"), owned(buf))
    """
    initialize_all(obj, make_stream(*args), registry, options=options)


def _check_orphans(reg: Registry, stream: TokenStream, opts: InitOptions) -> None:
    if not (opts.strict_markers or opts.warn_orphans):
        return
    orphans = find_orphans(reg.names, stream)
    if not orphans:
        return
    if opts.strict_markers:
        raise OrphanedMarkerError(reg.type_name, orphans)
    for o in orphans:
        logger.warning(
            "%s: %s marker %r at position %d ignored (%d value(s) dropped)",
            reg.type_name, o.reason, o.name, o.index, o.dropped,
        )
