"""
Unit tests for Population and ScoredOrdering.
"""

from unittest.mock import MagicMock

import pytest

from permopt.core.item import unique_ids
from permopt.core.population import Population, ScoredOrdering


class TestScoredOrdering:
    """Test cases for ScoredOrdering."""

    def test_score_on_creation(self, task_factory, cost_function):
        """Test that a new member carries the cost of its ordering."""
        member = ScoredOrdering.score(task_factory((1, 2), (2, 5)), cost_function)

        assert member.cost == 5
        assert unique_ids(member.ordering) == [1, 2]

    def test_cost_is_required(self, task_factory):
        """Test that a member cannot be created without a cost."""
        with pytest.raises(TypeError):
            ScoredOrdering(ordering=task_factory(1, 2))

    def test_rescore_after_change(self, task_factory, cost_function):
        """Test that rescoring reflects in-place changes."""
        member = ScoredOrdering.score(task_factory((1, 2), (2, 5)), cost_function)

        member.ordering.reverse()
        cost = member.rescore(cost_function)

        assert cost == 2
        assert member.cost == 2

    def test_repr(self, task_factory):
        """Test string representation shows ids."""
        member = ScoredOrdering(ordering=task_factory(3, 1), cost=4)

        assert repr(member) == "ScoredOrdering(cost=4, ids=[3, 1])"


class TestPopulation:
    """Test cases for Population."""

    def test_population_size(self, sample_population):
        """Test the population reports its size."""
        assert sample_population.size == 5
        assert len(sample_population) == 5

    def test_empty_population_rejected(self):
        """Test that a population needs at least one member."""
        with pytest.raises(ValueError, match="at least one member"):
            Population([])

    def test_sort_uses_current_costs(self, sample_population):
        """Test that sort() orders by cost without calling the cost function."""
        sample_population.sort()

        assert [m.cost for m in sample_population] == [10, 12, 18, 20, 20]
        assert unique_ids(sample_population.best().ordering) == [4, 3, 2, 1]

    def test_rescore_and_sort_ascending(self, sample_population, cost_function):
        """Test that members are sorted ascending by recomputed cost."""
        sample_population[0].ordering.reverse()

        sample_population.rescore_and_sort(cost_function)

        costs = [m.cost for m in sample_population]
        assert costs == sorted(costs)
        assert unique_ids(sample_population.best().ordering) == [3, 4, 1, 2]

    def test_sort_is_stable(self, sample_population, cost_function):
        """Test that equal costs keep their original order."""
        first_tie = sample_population[1]
        second_tie = sample_population[3]

        sample_population.rescore_and_sort(cost_function)

        positions = [i for i, m in enumerate(sample_population) if m.cost == first_tie.cost]
        assert [id(sample_population[i]) for i in positions] == [id(first_tie), id(second_tie)]

    def test_rescore_calls_cost_function_for_every_member(self, sample_population):
        """Test that costs are recomputed on every pass."""
        cost_function = MagicMock(return_value=7)

        sample_population.rescore_and_sort(cost_function)
        sample_population.rescore_and_sort(cost_function)

        assert cost_function.call_count == 10

    def test_size_never_changes(self, sample_population, cost_function):
        """Test that sorting does not add or drop members."""
        before = {id(m) for m in sample_population}

        sample_population.rescore_and_sort(cost_function)

        assert {id(m) for m in sample_population} == before

    def test_statistics(self, sample_population):
        """Test statistics over the member costs."""
        stats = sample_population.statistics()

        assert stats["size"] == 5
        assert stats["best_cost"] == 10
        assert stats["worst_cost"] == 20
        assert stats["avg_cost"] == pytest.approx(16.0)
        assert isinstance(stats["best_cost"], int)

    def test_cost_function_error_propagates(self, sample_population):
        """Test that cost function failures are not swallowed."""
        def broken(ordering):
            raise RuntimeError("cost failure")

        with pytest.raises(RuntimeError, match="cost failure"):
            sample_population.rescore_and_sort(broken)

    def test_repr(self, sample_population):
        """Test string representation."""
        assert repr(sample_population) == "Population(size=5, best_cost=10, avg_cost=16.0)"
