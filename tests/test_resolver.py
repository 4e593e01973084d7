"""Tests for member_init.resolver."""

import pytest

from member_init.resolver import Range, extract, find_orphans, resolve
from member_init.tokens import Value, marker, owned, stream


class TestResolve:
    def test_single_marker_to_end(self):
        s = stream(marker("a"))
        assert resolve("a", s) == Range(True, 0, 1)

    def test_marker_between_values(self):
        s = stream(1, marker("a"), 2)
        assert resolve("a", s) == Range(True, 1, 3)

    def test_ends_at_next_marker_of_any_name(self):
        s = stream(1, marker("a"), 2, marker("b"), "c", 4.0, 5.0)
        assert resolve("a", s) == Range(True, 1, 3)
        assert resolve("b", s) == Range(True, 3, 7)

    def test_not_found(self):
        s = stream(marker("a"), 1, 2)
        r = resolve("z", s)
        assert r == Range(False, 3, 3)
        assert r.arguments == 0

    def test_empty_stream(self):
        assert resolve("a", stream()) == Range(False, 0, 0)

    def test_first_match_wins(self):
        s = stream(marker("x"), 1, marker("x"), 2)
        assert resolve("x", s) == Range(True, 0, 2)

    def test_marker_with_no_arguments(self):
        s = stream(marker("a"), marker("b"), 1)
        r = resolve("a", s)
        assert r == Range(True, 0, 1)
        assert r.arguments == 0

    def test_order_of_markers_irrelevant_for_lookup(self):
        s1 = stream(marker("x"), 5, marker("y"), "str")
        s2 = stream(marker("y"), "str", marker("x"), 5)
        for name in ("x", "y"):
            r1, r2 = resolve(name, s1), resolve(name, s2)
            assert [v.payload for v in extract(s1, r1.begin, r1.end)] == [
                v.payload for v in extract(s2, r2.begin, r2.end)
            ]


class TestExtract:
    def test_drops_marker(self):
        s = stream(marker("x"), 5, 6, marker("y"))
        assert extract(s, 0, 3) == [Value(5), Value(6)]

    def test_not_found_range_is_empty(self):
        s = stream(marker("x"), 5)
        assert extract(s, 2, 2) == []

    def test_marker_only_range_is_empty(self):
        s = stream(marker("x"), marker("y"))
        assert extract(s, 0, 1) == []

    def test_preserves_ownership_and_identity(self):
        buf = [1]
        s = stream(marker("x"), owned(buf), buf)
        vals = extract(s, 0, 3)
        assert vals[0].owned and not vals[1].owned
        assert vals[0].payload is buf and vals[1].payload is buf

    def test_out_of_bounds(self):
        s = stream(marker("x"), 1)
        with pytest.raises(IndexError):
            extract(s, 0, 5)
        with pytest.raises(IndexError):
            extract(s, 1, 1)

    def test_marker_inside_range(self):
        s = stream(marker("x"), 1, marker("y"), 2)
        with pytest.raises(ValueError):
            extract(s, 0, 4)


class TestFindOrphans:
    def test_none(self):
        s = stream(marker("x"), 1, marker("y"), 2)
        assert find_orphans(["x", "y"], s) == []

    def test_duplicate(self):
        s = stream(marker("x"), 1, marker("x"), 2)
        (o,) = find_orphans(["x", "y"], s)
        assert (o.name, o.index, o.reason, o.dropped) == ("x", 2, "duplicate", 1)

    def test_unknown(self):
        s = stream(marker("q"), 1, 2, marker("x"))
        (o,) = find_orphans(["x"], s)
        assert (o.name, o.reason, o.dropped) == ("q", "unknown", 2)
