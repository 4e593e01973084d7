"""Tests for member_init.tokens."""

import pytest

from member_init.tokens import (
    Marker,
    Ownership,
    TokenStream,
    Value,
    borrowed,
    marker,
    owned,
    stream,
)


class TestValue:
    def test_default_is_borrowed(self):
        assert Value(5).ownership is Ownership.BORROWED
        assert not Value(5).owned

    def test_owned_helper(self):
        v = owned([1, 2])
        assert v.owned
        assert v.payload == [1, 2]

    def test_borrowed_keeps_identity(self):
        buf = bytearray(b"abc")
        assert borrowed(buf).payload is buf


class TestStream:
    def test_wraps_plain_args_as_borrowed(self):
        s = stream(marker("x"), 5, "str")
        assert s.tokens == (Marker("x"), Value(5), Value("str"))

    def test_keeps_wrapped_values(self):
        s = stream(marker("x"), owned(1), borrowed(2))
        assert s[1].ownership is Ownership.OWNED
        assert s[2].ownership is Ownership.BORROWED

    def test_empty(self):
        assert len(stream()) == 0
        assert stream().markers() == []

    def test_markers_with_positions(self):
        s = stream(marker("y"), "a", marker("x"), 1, 2)
        assert s.markers() == [(0, Marker("y")), (2, Marker("x"))]

    def test_rejects_raw_tokens(self):
        with pytest.raises(TypeError):
            TokenStream([Marker("x"), 5])

    def test_immutable_backing(self):
        src = [Marker("x"), Value(1)]
        s = TokenStream(src)
        src.append(Value(2))
        assert len(s) == 2

    def test_equality(self):
        assert stream(marker("a"), 1) == stream(marker("a"), 1)
        assert stream(marker("a"), 1) != stream(marker("a"), 2)

    def test_marker_is_not_a_plain_string(self):
        s = stream("x", 1)
        assert s.markers() == []

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(stream(marker("x"), [1]))
