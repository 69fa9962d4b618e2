"""
Genetic optimizer for permopt.

Evolves a fixed-size population of candidate orderings for a fixed number of
generations using pairwise breeding and mutation, re-ranking the population
by cost after every generation.
"""

import logging
import time
from datetime import timedelta
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np

from ..core.item import T, clone_all
from ..core.permutations import permutations
from ..core.population import Population, ScoredOrdering
from ..core.result import OptimizationResult
from ..variation.breeding import breed
from ..variation.mutation import mutate
from ..variation.shuffle import shuffle_ordering
from .config import GeneticSearchConfig, GenerationHistory
from .validation import validate_search_arguments

logger = logging.getLogger(__name__)


class GeneticOptimizer:
    """
    Population-based search over orderings.

    Each generation walks the population in disjoint adjacent pairs (i, i+1).
    With probability 1 - breed_threshold member i is bred into member i+1,
    otherwise member i+1 is mutated. The population is then rescored and
    stably sorted ascending by cost. Member i is never modified within its
    pair, so the best member found so far survives every generation.

    Example usage:
        ```python
        optimizer = GeneticOptimizer(GeneticSearchConfig(seed=42))
        result = optimizer.optimize(items, cost_function)
        print(result.best_cost, optimizer.history[-1].avg_cost)
        ```
    """

    def __init__(
        self,
        config: Optional[GeneticSearchConfig] = None,
        output_dir: Optional[Path] = None,
        run_id: Optional[str] = None
    ):
        """
        Initialize the genetic optimizer.

        Args:
            config: Search hyperparameters (defaults to GeneticSearchConfig()). When
                given, its log_level is applied to the "permopt" logger
            output_dir: Output directory for JSON run logs (optional)
            run_id: Run ID for JSON run logs (optional)
        """
        self.config = config if config is not None else GeneticSearchConfig()

        # State of the most recent run
        self.generation: int = 0
        self.history: List[GenerationHistory] = []

        # Search logger (optional, for detailed logging)
        self.search_logger = None
        if output_dir and run_id:
            from ..utils.search_logger import SearchLogger
            self.search_logger = SearchLogger(Path(output_dir), run_id)

        # Only an explicit config overrides the caller's logging setup
        if config is not None:
            logging.getLogger("permopt").setLevel(getattr(logging, config.log_level.upper()))

        logger.debug(f"Initialized GeneticOptimizer with {self.config.n_generations} generations, "
                     f"max population {self.config.max_population_size}")

    def optimize(
        self,
        candidates: Sequence[T],
        cost_function: Callable[[List[T]], int],
        rng: Optional[np.random.Generator] = None
    ) -> OptimizationResult[T]:
        """
        Run the full genetic search.

        Args:
            candidates: Items to order (never modified)
            cost_function: Ordering -> integer cost, lower is better
            rng: Generator to draw from; created from config.seed if omitted

        Returns:
            OptimizationResult with the lowest-cost member of the final population
        """
        validate_search_arguments(candidates, cost_function)

        start = time.perf_counter()

        if rng is None:
            rng = np.random.default_rng(self.config.seed)

        self.generation = 0
        self.history = []

        permutation_count = permutations(len(candidates), len(candidates))
        population_size = int(min(permutation_count, self.config.max_population_size))

        logger.info(f"Starting genetic search: {len(candidates)} items, "
                    f"population {population_size}, {self.config.n_generations} generations")

        # Step 1: Initialize population
        population = self._initialize_population(candidates, population_size, cost_function, rng)
        population.sort()
        self._log_generation_stats(0, population, 0, 0)

        if self.search_logger:
            self.search_logger.log_initial_population(population)

        # Step 2: Main evolution loop
        for generation in range(1, self.config.n_generations + 1):
            self.generation = generation

            n_bred, n_mutated = self._evolve_generation(population, rng)
            population.rescore_and_sort(cost_function)

            self._log_generation_stats(generation, population, n_bred, n_mutated)

        # Step 3: Return best member
        population.rescore_and_sort(cost_function)
        best = population.best()

        elapsed = timedelta(seconds=time.perf_counter() - start)

        logger.info(f"Genetic search complete. Best cost: {best.cost} in {elapsed.total_seconds():.3f}s")

        if self.search_logger:
            self.search_logger.log_history(self.history)
            self.search_logger.log_final_best(best, self.generation)

        return OptimizationResult(
            best_ordering=best.ordering,
            best_cost=best.cost,
            elapsed_time=elapsed,
            permutation_count=permutation_count,
        )

    def _initialize_population(
        self,
        candidates: Sequence[T],
        population_size: int,
        cost_function: Callable[[List[T]], int],
        rng: np.random.Generator
    ) -> Population[T]:
        """
        Build the initial population from scored, shuffled clones of the candidates.

        Args:
            candidates: Items to order
            population_size: Number of members to create
            cost_function: Caller-supplied cost function
            rng: Generator for the current run

        Returns:
            Unsorted population
        """
        members = [
            ScoredOrdering.score(shuffle_ordering(clone_all(candidates), rng), cost_function)
            for _ in range(population_size)
        ]

        logger.debug(f"Generated initial population with {len(members)} members")
        return Population(members)

    def _evolve_generation(
        self,
        population: Population[T],
        rng: np.random.Generator
    ) -> Tuple[int, int]:
        """
        Apply breeding or mutation to each disjoint adjacent pair.

        Args:
            population: Population to vary in place
            rng: Generator for the current run

        Returns:
            Tuple of (pairs bred, pairs mutated)
        """
        n_bred = 0
        n_mutated = 0

        i = 0
        while i + 1 < population.size:
            parent = population[i].ordering
            child = population[i + 1].ordering

            if rng.random() > self.config.breed_threshold:
                breed(parent, child)
                n_bred += 1
            else:
                mutate(child, rng)
                n_mutated += 1

            i += self.config.pair_stride

        return n_bred, n_mutated

    def _log_generation_stats(
        self,
        generation: int,
        population: Population[T],
        n_bred: int,
        n_mutated: int
    ) -> None:
        """
        Record and log statistics for the current generation.

        Args:
            generation: Current generation number (0 for the initial population)
            population: Current (scored) population
            n_bred: Pairs bred this generation
            n_mutated: Pairs mutated this generation
        """
        if not self.config.log_generation_stats:
            return

        stats = population.statistics()

        history = GenerationHistory(
            generation=generation,
            population_size=stats['size'],
            best_cost=stats['best_cost'],
            worst_cost=stats['worst_cost'],
            avg_cost=stats['avg_cost'],
            n_bred=n_bred,
            n_mutated=n_mutated,
        )

        self.history.append(history)

        message = (
            f"Gen {generation}: "
            f"cost={stats['best_cost']}/{stats['avg_cost']:.1f}/{stats['worst_cost']}, "
            f"bred={n_bred}, mutated={n_mutated}"
        )

        if generation % self.config.log_interval == 0:
            logger.info(message)
        else:
            logger.debug(message)


def genetic_search(
    candidates: Sequence[T],
    cost_function: Callable[[List[T]], int],
    config: Optional[GeneticSearchConfig] = None,
    rng: Optional[np.random.Generator] = None
) -> OptimizationResult[T]:
    """Run a GeneticOptimizer once. See GeneticOptimizer.optimize."""
    return GeneticOptimizer(config).optimize(candidates, cost_function, rng=rng)
