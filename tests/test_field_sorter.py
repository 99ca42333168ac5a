"""Tests for field ordering"""

import random

import pytest

from prettylog.formatters.field_sorter import key_width, sort_fields


class TestSortFields:
    """Test field name ordering rules."""

    def test_lexicographic_by_default(self):
        assert sort_fields(["c", "a", "b"]) == ["a", "b", "c"]

    def test_priority_precedence(self):
        names = ["c", "b", "a"]
        assert sort_fields(names, priority={"a": 5, "b": 1}) == ["a", "b", "c"]

    def test_negative_priority_sorts_after_unprioritised(self):
        names = ["stack", "b", "a"]
        assert sort_fields(names, priority={"stack": -1}) == ["a", "b", "stack"]

    def test_equal_priority_sorted_by_name(self):
        names = ["y", "x", "z"]
        assert sort_fields(names, priority={"x": 2, "y": 2, "z": 2}) == ["x", "y", "z"]

    def test_order_hint_fallback(self):
        names = ["m", "a", "z"]
        assert sort_fields(names, order_hint=["z", "a"]) == ["z", "a", "m"]

    def test_unhinted_names_sorted_among_themselves(self):
        names = ["q", "b", "hinted", "a"]
        assert sort_fields(names, order_hint=["hinted"]) == ["hinted", "a", "b", "q"]

    def test_duplicate_hint_keeps_first_position(self):
        names = ["a", "b"]
        assert sort_fields(names, order_hint=["b", "a", "b"]) == ["b", "a"]

    def test_priority_wins_over_hint(self):
        names = ["z", "a", "m"]
        assert sort_fields(names, priority={"m": 1}, order_hint=["z", "a"]) == ["m", "a", "z"]

    def test_empty_priority_uses_hint(self):
        assert sort_fields(["a", "z"], priority={}, order_hint=["z"]) == ["z", "a"]

    def test_input_is_not_modified(self):
        names = ["b", "a"]
        sort_fields(names)
        assert names == ["b", "a"]

    @pytest.mark.parametrize("seed", range(20))
    def test_order_is_independent_of_input_order(self, seed):
        rng = random.Random(seed)
        names = [f"field{n}" for n in range(12)]
        priority = {name: rng.randint(-2, 2) for name in names[:6]}
        hint = rng.sample(names, 5)

        expected_priority = sort_fields(names, priority=priority)
        expected_hint = sort_fields(names, order_hint=hint)

        shuffled = list(names)
        rng.shuffle(shuffled)
        assert sort_fields(shuffled, priority=priority) == expected_priority
        assert sort_fields(shuffled, order_hint=hint) == expected_hint


class TestKeyWidth:
    """Test key column width."""

    def test_minimum(self):
        assert key_width([]) == 5
        assert key_width(["a", "bb"]) == 5

    def test_longest_name(self):
        assert key_width(["a", "request_id"]) == 10

    def test_maximum(self):
        assert key_width(["x" * 40]) == 20
