"""Tests for causalexpr.spans module."""

import pytest

from causalexpr.spans import BoundaryMatch, find_spans, st_within

PAREN = dict(left=r"\(", right=r"\)", rm_left=1)


class TestStWithinDefaults:
    """Default boundaries return bracket-indexed variable names."""

    def test_indexed_names(self):
        assert st_within("(XX[Y=0] == 1) > (XX[Y=1] == 0)") == ["XX", "XX"]

    def test_double_brackets_count_once(self):
        assert st_within("(XXX[[Y=0]] == 1 + XXX[[Y=1]] == 0)") == ["XXX", "XXX"]

    def test_underscore_is_part_of_name(self):
        assert st_within("a_b[X=1]") == ["a_b"]

    def test_no_brackets(self):
        assert st_within("X == 1") == []

    def test_rejects_non_string(self):
        with pytest.raises(TypeError, match="must be a string"):
            st_within(["X[Y=1]"])


class TestParenthesisSpans:
    """Spans bounded by parentheses, as used for wildcard expansion."""

    def test_two_spans_in_order(self):
        assert st_within("(a[b]) > (c[d])", **PAREN) == ["a[b]", "c[d]"]

    def test_offsets(self):
        assert find_spans("(a[b]) > (c[d])", **PAREN) == [
            BoundaryMatch(1, 5),
            BoundaryMatch(10, 14),
        ]

    def test_boundary_match_text(self):
        assert BoundaryMatch(1, 5).text("(a[b])") == "a[b]"

    def test_close_without_open_is_dropped(self):
        assert st_within("a) (b)", **PAREN) == ["b"]

    def test_no_spans(self):
        assert st_within("abc", **PAREN) == []

    def test_adjacent_close_markers_collapse(self):
        assert st_within("(a))", **PAREN) == ["a"]

    def test_empty_parentheses(self):
        assert st_within("()", **PAREN) == [""]

    def test_nested_uses_nearest_open(self):
        # the outer ')' pairs with the inner '(' and would overlap the first span
        assert st_within("((a) b)", **PAREN) == ["a"]
