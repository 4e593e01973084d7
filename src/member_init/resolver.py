"""Range resolution and argument slicing over a token stream."""

from __future__ import annotations

from dataclasses import dataclass

from .tokens import Marker, TokenStream, Value


# ---------------------------------------------------------------------------
# Range
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Range:
    """``[begin, end)`` span of a stream matched to one field's marker.

    ``begin`` is the marker itself; the field's arguments are
    ``begin + 1 .. end``. When not found, ``begin == end == len(stream)``.
    """

    found: bool
    begin: int
    end: int

    @property
    def arguments(self) -> int:
        return self.end - self.begin - 1 if self.found else 0


# ---------------------------------------------------------------------------
# Resolver
# ---------------------------------------------------------------------------

def resolve(name: str, stream: TokenStream) -> Range:
    """Find the range of *stream* that belongs to the marker *name*.

    First match wins: the range starts at the first ``Marker(name)`` and
    ends at the next marker of any name (a repeated ``Marker(name)``
    included), or at the end of the stream.
    """
    n = len(stream)
    begin = n
    for i, tok in enumerate(stream):
        if isinstance(tok, Marker) and tok.name == name:
            begin = i
            break
    else:
        return Range(found=False, begin=n, end=n)

    end = n
    for i in range(begin + 1, n):
        if isinstance(stream[i], Marker):
            end = i
            break
    return Range(found=True, begin=begin, end=end)


def extract(stream: TokenStream, begin: int, end: int) -> list[Value]:
    """Return the Value tokens ``stream[begin + 1:end]`` in order.

    The marker at *begin* is dropped. ``begin == end == len(stream)``
    (the not-found range) yields an empty list.
    """
    n = len(stream)
    if begin == end == n:
        return []
    if not 0 <= begin < end <= n:
        raise IndexError(f"invalid range [{begin}, {end}) for stream of length {n}")

    values: list[Value] = []
    for i in range(begin + 1, end):
        tok = stream[i]
        if not isinstance(tok, Value):
            raise ValueError(f"marker {tok.name!r} at position {i} inside argument range")
        values.append(tok)
    return values


# ---------------------------------------------------------------------------
# Orphaned markers
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class OrphanedMarker:
    """A marker no field will ever match.

    ``reason`` is ``"duplicate"`` (a later marker for a name already matched)
    or ``"unknown"`` (the name belongs to no field). Values following it up
    to the next marker are never forwarded.
    """

    name: str
    index: int
    reason: str
    dropped: int  # number of values left unconsumed after it


def find_orphans(names: list[str], stream: TokenStream) -> list[OrphanedMarker]:
    """List the markers of *stream* that first-match resolution leaves unused."""
    known = set(names)
    seen: set[str] = set()
    markers = stream.markers()
    orphans: list[OrphanedMarker] = []
    for pos, (i, mk) in enumerate(markers):
        next_i = markers[pos + 1][0] if pos + 1 < len(markers) else len(stream)
        if mk.name not in known:
            orphans.append(OrphanedMarker(mk.name, i, "unknown", next_i - i - 1))
        elif mk.name in seen:
            orphans.append(OrphanedMarker(mk.name, i, "duplicate", next_i - i - 1))
        seen.add(mk.name)
    return orphans
