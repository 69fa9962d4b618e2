"""
Random search optimizer.

Repeatedly shuffles a fresh clone of the candidate set and keeps the
lowest-cost ordering seen. Serves as the benchmark the genetic optimizer is
measured against.
"""

import logging
import math
import time
from datetime import timedelta
from typing import Callable, List, Optional, Sequence

import numpy as np

from ..core.item import T, clone_all
from ..core.permutations import permutations
from ..core.result import OptimizationResult
from ..variation.shuffle import shuffle_ordering
from .validation import validate_iteration_count, validate_search_arguments

logger = logging.getLogger(__name__)


class RandomSearchOptimizer:
    """
    Best-of-k random shuffle search.

    Example usage:
        ```python
        optimizer = RandomSearchOptimizer(seed=7)
        result = optimizer.optimize(items, cost_function, iteration_count=100)
        ```
    """

    def __init__(self, seed: Optional[int] = None):
        """
        Initialize the optimizer.

        Args:
            seed: Seed for the per-run random generator (None for fresh entropy)
        """
        self.seed = seed

    def optimize(
        self,
        candidates: Sequence[T],
        cost_function: Callable[[List[T]], int],
        iteration_count: int,
        rng: Optional[np.random.Generator] = None
    ) -> OptimizationResult[T]:
        """
        Return the best of iteration_count random orderings.

        Each iteration clones the full candidate set, shuffles the clone and
        scores it. Only a strictly lower cost replaces the current best, so on
        ties the earliest ordering wins.

        Args:
            candidates: Items to order (never modified)
            cost_function: Ordering -> integer cost, lower is better
            iteration_count: Number of random orderings to sample (>= 1)
            rng: Generator to draw from; created from the seed if omitted

        Returns:
            OptimizationResult with the best ordering found
        """
        validate_search_arguments(candidates, cost_function)
        validate_iteration_count(iteration_count)

        start = time.perf_counter()

        if rng is None:
            rng = np.random.default_rng(self.seed)

        logger.info(f"Starting random search: {len(candidates)} items, {iteration_count} iterations")

        best_cost = math.inf
        best_ordering: Optional[List[T]] = None

        for iteration in range(iteration_count):
            current = shuffle_ordering(clone_all(candidates), rng)
            current_cost = cost_function(current)

            if current_cost < best_cost:
                logger.debug(f"Iteration {iteration}: new best cost {current_cost}")
                best_cost = current_cost
                best_ordering = current

        elapsed = timedelta(seconds=time.perf_counter() - start)

        logger.info(f"Random search complete. Best cost: {best_cost} in {elapsed.total_seconds():.3f}s")

        return OptimizationResult(
            best_ordering=best_ordering,
            best_cost=best_cost,
            elapsed_time=elapsed,
            permutation_count=permutations(len(candidates), len(candidates)),
        )


def random_search(
    candidates: Sequence[T],
    cost_function: Callable[[List[T]], int],
    iteration_count: int,
    rng: Optional[np.random.Generator] = None
) -> OptimizationResult[T]:
    """Run a RandomSearchOptimizer once. See RandomSearchOptimizer.optimize."""
    return RandomSearchOptimizer().optimize(candidates, cost_function, iteration_count, rng=rng)
