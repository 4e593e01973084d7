"""Token types: field-name markers, argument values and the token stream."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Iterator, Union, overload


# ---------------------------------------------------------------------------
# Ownership
# ---------------------------------------------------------------------------

class Ownership(Enum):
    OWNED = auto()     # temporary handed over to exactly one constructor
    BORROWED = auto()  # caller keeps it; passed by reference


# ---------------------------------------------------------------------------
# Token kinds
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Marker:
    """Names the field that the following values (up to the next marker) build."""

    name: str

    def __repr__(self) -> str:
        return f"Marker({self.name!r})"


@dataclass(frozen=True, slots=True)
class Value:
    payload: Any
    ownership: Ownership = Ownership.BORROWED

    @property
    def owned(self) -> bool:
        return self.ownership is Ownership.OWNED

    def __repr__(self) -> str:
        tag = "owned" if self.owned else "borrowed"
        return f"Value({self.payload!r}, {tag})"


Token = Union[Marker, Value]


def marker(name: str) -> Marker:
    return Marker(name)


def owned(payload: Any) -> Value:
    """Wrap *payload* as an owned temporary."""
    return Value(payload, Ownership.OWNED)


def borrowed(payload: Any) -> Value:
    return Value(payload, Ownership.BORROWED)


# ---------------------------------------------------------------------------
# TokenStream
# ---------------------------------------------------------------------------

class TokenStream:
    """Immutable, fully materialized sequence of tokens for one call."""

    __slots__ = ("_tokens",)

    def __init__(self, tokens=()) -> None:
        items = tuple(tokens)
        for i, tok in enumerate(items):
            if not isinstance(tok, (Marker, Value)):
                raise TypeError(
                    f"token {i} is {type(tok).__name__}, expected Marker or Value"
                )
        self._tokens: tuple[Token, ...] = items

    @property
    def tokens(self) -> tuple[Token, ...]:
        return self._tokens

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    @overload
    def __getitem__(self, index: int) -> Token: ...
    @overload
    def __getitem__(self, index: slice) -> tuple[Token, ...]: ...

    def __getitem__(self, index):
        return self._tokens[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TokenStream):
            return self._tokens == other._tokens
        return NotImplemented

    __hash__ = None  # payloads may be mutable

    def __repr__(self) -> str:
        return "TokenStream([" + ", ".join(repr(t) for t in self._tokens) + "])"

    def markers(self) -> list[tuple[int, Marker]]:
        """All markers with their positions, in stream order."""
        return [(i, t) for i, t in enumerate(self._tokens) if isinstance(t, Marker)]


def stream(*args: Any) -> TokenStream:
    """Build a TokenStream from the arguments of a flat call.

    ``Marker`` and ``Value`` arguments are kept as they are; any other
    argument becomes a borrowed ``Value``.
    """
    return TokenStream(
        a if isinstance(a, (Marker, Value)) else Value(a, Ownership.BORROWED)
        for a in args
    )
