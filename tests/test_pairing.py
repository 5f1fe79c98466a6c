"""Tests for diffs between consecutive snapshots."""

from operator import add, mul

import pytest
from hypothesis import given
from hypothesis import strategies as st

from conftest import customers, make_customer
from fpplayground.core.folds import fold_left
from fpplayground.core.pairing import (
    PairingStrategy,
    describe_changes,
    diffs_by_fold,
    diffs_by_index,
    diffs_by_zip,
    pairwise_diff,
)
from fpplayground.models import Customer

ALL_STRATEGIES = list(PairingStrategy)


class TestFoldLeft:
    def test_sum(self):
        assert fold_left([1, 2, 3, 4], 0, add) == 10

    def test_product(self):
        assert fold_left([1, 2, 3, 4], 1, mul) == 24

    def test_is_left_associative(self):
        assert fold_left([1, 2, 3], "0", lambda acc, n: f"({acc}+{n})") == "(((0+1)+2)+3)"

    def test_accepts_generators(self):
        assert fold_left((n * n for n in range(4)), 0, add) == 14


class TestStrategies:
    @pytest.mark.parametrize("strategy", ALL_STRATEGIES)
    def test_reference_trail(self, strategy, trail, expected_changes):
        assert describe_changes(trail, strategy) == expected_changes

    @pytest.mark.parametrize("function", [diffs_by_index, diffs_by_zip, diffs_by_fold])
    def test_each_implementation_directly(self, function, trail, expected_changes):
        assert function(trail) == expected_changes

    @pytest.mark.parametrize("strategy", ALL_STRATEGIES)
    @pytest.mark.parametrize("size", [0, 1])
    def test_short_trails_have_no_pairs(self, strategy, size):
        assert pairwise_diff([make_customer()] * size, strategy) == ()

    def test_default_strategy_is_zip(self, trail):
        assert pairwise_diff(trail) == diffs_by_zip(trail)

    @given(trail=st.lists(customers, max_size=6))
    def test_strategies_agree(self, trail):
        results = {strategy: pairwise_diff(trail, strategy) for strategy in ALL_STRATEGIES}
        assert results[PairingStrategy.INDEX] == results[PairingStrategy.ZIP]
        assert results[PairingStrategy.ZIP] == results[PairingStrategy.FOLD]

    @given(trail=st.lists(customers, max_size=6))
    def test_one_diff_per_adjacent_pair(self, trail):
        assert len(pairwise_diff(trail)) == max(0, len(trail) - 1)


class TestEmptyDiffs:
    def test_pairwise_diff_keeps_positions(self, c1, c2):
        assert pairwise_diff([c1, c1, c2]) == ("", "name: Johny Kovalsky -> John Kovalsky")

    def test_describe_changes_drops_unchanged_pairs(self, c1, c2):
        assert describe_changes([c1, c1, c2, c2]) == ("name: Johny Kovalsky -> John Kovalsky",)

    def test_identical_snapshots_describe_no_changes(self, c1):
        assert describe_changes([c1, c1, c1]) == ()


class TestPurity:
    @pytest.mark.parametrize("strategy", ALL_STRATEGIES)
    def test_input_is_left_untouched(self, strategy, trail):
        before = list(trail)
        snapshots = [Customer.from_dict(customer.to_dict()) for customer in trail]

        pairwise_diff(trail, strategy)

        assert trail == before
        assert all(a is b for a, b in zip(trail, before))
        assert trail == snapshots

    def test_accepts_tuples(self, trail, expected_changes):
        assert describe_changes(tuple(trail)) == expected_changes
