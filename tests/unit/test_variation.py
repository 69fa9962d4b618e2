"""
Unit tests for shuffle, breeding and mutation operators.
"""

from collections import Counter
from unittest.mock import MagicMock

import numpy as np
import pytest

from permopt.core.errors import InvalidArgumentError
from permopt.core.item import unique_ids
from permopt.variation.breeding import breed
from permopt.variation.mutation import mutate
from permopt.variation.shuffle import shuffle_ordering, swap_positions


def scripted_rng(*indices):
    """Generator stand-in returning the given integers in order."""
    rng = MagicMock(spec=np.random.Generator)
    rng.integers.side_effect = list(indices)
    return rng


class TestSwapPositions:
    """Test cases for swap_positions()."""

    def test_swap(self, task_factory):
        """Test exchanging two positions."""
        ordering = task_factory(1, 2, 3)

        swap_positions(ordering, 0, 2)

        assert unique_ids(ordering) == [3, 2, 1]

    def test_same_index_is_noop(self, task_factory):
        """Test that equal indices leave the ordering alone."""
        ordering = task_factory(1, 2, 3)

        swap_positions(ordering, 1, 1)

        assert unique_ids(ordering) == [1, 2, 3]

    def test_none_ordering(self):
        """Test that a None ordering is rejected."""
        with pytest.raises(InvalidArgumentError):
            swap_positions(None, 0, 1)


class TestShuffle:
    """Test cases for shuffle_ordering()."""

    def test_exactly_n_swaps(self, task_factory):
        """Test that n swaps (2n index draws) are made."""
        ordering = task_factory(1, 2, 3, 4)
        rng = scripted_rng(0, 1, 2, 2, 3, 0, 1, 1)

        shuffle_ordering(ordering, rng)

        assert rng.integers.call_count == 8
        # (0,1) -> 2,1,3,4 ; (2,2) skipped ; (3,0) -> 4,1,3,2 ; (1,1) skipped
        assert unique_ids(ordering) == [4, 1, 3, 2]

    def test_indices_drawn_from_full_range(self, task_factory):
        """Test that indices are drawn uniformly from [0, n)."""
        ordering = task_factory(1, 2, 3)
        rng = scripted_rng(0, 0, 0, 0, 0, 0)

        shuffle_ordering(ordering, rng)

        for call in rng.integers.call_args_list:
            assert call.args == (0, 3)

    def test_preserves_multiset(self, task_factory, rng):
        """Test that shuffling only reorders."""
        ordering = task_factory(*range(1, 21))

        shuffle_ordering(ordering, rng)

        assert Counter(unique_ids(ordering)) == Counter(range(1, 21))

    def test_empty_ordering(self, rng):
        """Test that an empty ordering is returned unchanged."""
        assert shuffle_ordering([], rng) == []

    def test_seeded_shuffle_is_reproducible(self, task_factory):
        """Test that the same seed gives the same ordering."""
        first = shuffle_ordering(task_factory(*range(10)), np.random.default_rng(3))
        second = shuffle_ordering(task_factory(*range(10)), np.random.default_rng(3))

        assert unique_ids(first) == unique_ids(second)


class TestBreed:
    """Test cases for breed()."""

    def test_identical_orderings_noop(self, task_factory):
        """Test that breeding identical orderings changes nothing."""
        parent = task_factory(1, 2, 3, 4)
        child = task_factory(1, 2, 3, 4)

        assert breed(parent, child) is False
        assert unique_ids(child) == [1, 2, 3, 4]

    def test_repairs_first_divergence_only(self, task_factory):
        """Test a single repair at the first differing position."""
        parent = task_factory(1, 2, 3, 4, 5)
        child = task_factory(1, 4, 5, 2, 3)

        assert breed(parent, child) is True
        # Position 1 diverges (4 vs 2): swap child's 4 with child's 2
        assert unique_ids(child) == [1, 2, 5, 4, 3]

    def test_parent_unchanged(self, task_factory):
        """Test that the parent is never modified."""
        parent = task_factory(3, 1, 2)
        child = task_factory(1, 2, 3)

        breed(parent, child)

        assert unique_ids(parent) == [3, 1, 2]
        assert unique_ids(child) == [3, 2, 1]

    def test_short_orderings_noop(self, task_factory):
        """Test that orderings with fewer than 2 elements are left alone."""
        parent = task_factory(1)
        child = task_factory(2)

        assert breed(parent, child) is False
        assert unique_ids(child) == [2]

    def test_repeated_breeding_converges(self, task_factory):
        """Test that enough repairs make the child equal the parent."""
        parent = task_factory(5, 3, 1, 4, 2)
        child = task_factory(1, 2, 3, 4, 5)

        for _ in range(len(parent)):
            breed(parent, child)

        assert unique_ids(child) == unique_ids(parent)

    def test_preserves_multiset(self, task_factory):
        """Test that breeding only reorders the child."""
        parent = task_factory(4, 3, 2, 1)
        child = task_factory(1, 3, 4, 2)

        breed(parent, child)

        assert sorted(unique_ids(child)) == [1, 2, 3, 4]


class TestMutate:
    """Test cases for mutate()."""

    def test_single_element_noop(self, task_factory, rng):
        """Test that a single-element ordering is not mutated."""
        ordering = task_factory(1)

        assert mutate(ordering, rng) is False
        assert unique_ids(ordering) == [1]

    def test_single_element_draws_nothing(self, task_factory):
        """Test that no randomness is consumed for short orderings."""
        rng = scripted_rng()

        mutate(task_factory(1), rng)

        rng.integers.assert_not_called()

    def test_swaps_drawn_positions(self, task_factory):
        """Test that the two drawn positions are exchanged."""
        ordering = task_factory(1, 2, 3, 4)

        assert mutate(ordering, scripted_rng(0, 3)) is True
        assert unique_ids(ordering) == [4, 2, 3, 1]

    def test_equal_positions_noop(self, task_factory):
        """Test that coinciding positions leave the ordering alone."""
        ordering = task_factory(1, 2, 3, 4)

        assert mutate(ordering, scripted_rng(2, 2)) is False
        assert unique_ids(ordering) == [1, 2, 3, 4]

    @pytest.mark.parametrize("seed", range(20))
    def test_changes_at_most_two_positions(self, task_factory, seed):
        """Test that a mutation touches at most two positions."""
        ordering = task_factory(*range(8))
        before = unique_ids(ordering)

        mutate(ordering, np.random.default_rng(seed))

        changed = [i for i, (a, b) in enumerate(zip(before, unique_ids(ordering))) if a != b]
        assert len(changed) in (0, 2)

    def test_none_ordering(self, rng):
        """Test that a None ordering is rejected."""
        with pytest.raises(InvalidArgumentError):
            mutate(None, rng)
