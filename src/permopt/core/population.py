"""
Population management for the genetic optimizer.

This module defines ScoredOrdering, one candidate solution with its cached
cost, and Population, a fixed-size collection of them that is evolved in
place and re-ranked after every generation.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Generic, Iterator, List, Sequence, Union

import numpy as np

from .item import T


@dataclass
class ScoredOrdering(Generic[T]):
    """
    One member of the population.

    Members are created scored (see ScoredOrdering.score), so every member
    always carries the cost of some ordering it held.

    Attributes:
        ordering: The candidate ordering (mutated in place by variation operators)
        cost: Cost from the last (re)score
    """

    ordering: List[T]
    cost: int

    @classmethod
    def score(cls, ordering: List[T], cost_function: Callable[[List[T]], int]) -> "ScoredOrdering[T]":
        """
        Create a member with the cost of its ordering.

        Args:
            ordering: Candidate ordering
            cost_function: Caller-supplied cost function

        Returns:
            Scored member
        """
        return cls(ordering=ordering, cost=cost_function(ordering))

    def rescore(self, cost_function: Callable[[List[T]], int]) -> int:
        """
        Recompute the cost of the current ordering.

        Args:
            cost_function: Caller-supplied cost function

        Returns:
            The new cost
        """
        self.cost = cost_function(self.ordering)
        return self.cost

    def __repr__(self) -> str:
        ids = [item.unique_id for item in self.ordering]
        return f"ScoredOrdering(cost={self.cost}, ids={ids})"


class Population(Generic[T]):
    """
    A fixed-size, ordered collection of scored orderings.

    Members are evolved and rescored in place; the population never grows or
    shrinks after creation. After sort() or rescore_and_sort() the member at
    index 0 is the lowest-cost ordering.

    Attributes:
        members: List of members, best first after a sort
    """

    def __init__(self, members: Sequence[ScoredOrdering[T]]):
        """
        Initialize a Population.

        Args:
            members: Initial members (at least one)
        """
        if not members:
            raise ValueError("Population requires at least one member")

        self.members: List[ScoredOrdering[T]] = list(members)

    @property
    def size(self) -> int:
        """Get the population size."""
        return len(self.members)

    def sort(self) -> None:
        """Stable sort ascending by the current costs; equal costs keep their order."""
        self.members.sort(key=lambda m: m.cost)

    def rescore_and_sort(self, cost_function: Callable[[List[T]], int]) -> None:
        """
        Rescore every member and sort ascending by cost.

        Costs are never reused across calls since orderings change between
        generations.

        Args:
            cost_function: Caller-supplied cost function
        """
        for member in self.members:
            member.rescore(cost_function)

        self.sort()

    def best(self) -> ScoredOrdering[T]:
        """
        Get the first member.

        Only meaningful after a sort.
        """
        return self.members[0]

    def statistics(self) -> Dict[str, Union[int, float]]:
        """
        Compute population statistics.

        Returns:
            Dictionary with size, best_cost, worst_cost and avg_cost
        """
        scores = [m.cost for m in self.members]

        return {
            "size": len(self.members),
            "best_cost": int(np.min(scores)),
            "worst_cost": int(np.max(scores)),
            "avg_cost": float(np.mean(scores)),
        }

    def __repr__(self) -> str:
        stats = self.statistics()
        return (
            f"Population(size={stats['size']}, "
            f"best_cost={stats['best_cost']}, "
            f"avg_cost={stats['avg_cost']:.1f})"
        )

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[ScoredOrdering[T]]:
        return iter(self.members)

    def __getitem__(self, index: int) -> ScoredOrdering[T]:
        return self.members[index]
