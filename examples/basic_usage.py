#!/usr/bin/env python3
"""
Basic example of using the permopt optimizers.

This script demonstrates how to:
1. Define items and a cost function
2. Run the random benchmark
3. Configure and run the genetic search
4. Inspect per-generation statistics
"""

import logging
from dataclasses import dataclass, replace

import numpy as np

from permopt import GeneticOptimizer, GeneticSearchConfig, random_search
from permopt.data.work_items import WorkItem, work_items_cost
from permopt.utils.result_table import format_result

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@dataclass
class Job:
    """Any object with unique_id and clone() can be ordered."""

    unique_id: int
    duration: int

    def clone(self) -> "Job":
        return replace(self)


def total_completion_time(ordering):
    """Sum of completion times; shortest job first is optimal."""
    elapsed = 0
    total = 0
    for job in ordering:
        elapsed += job.duration
        total += elapsed
    return total


def optimize_jobs():
    """Example: Order plain dataclass items."""

    logger.info("=" * 80)
    logger.info("EXAMPLE 1: Plain items")
    logger.info("=" * 80)

    jobs = [Job(i, d) for i, d in enumerate([7, 3, 9, 1, 4, 6, 2], start=1)]
    rng = np.random.default_rng(7)

    baseline = random_search(jobs, total_completion_time, 25, rng=rng)
    logger.info(f"Random benchmark cost: {baseline.best_cost}")

    optimizer = GeneticOptimizer(GeneticSearchConfig(n_generations=200, log_interval=50))
    result = optimizer.optimize(jobs, total_completion_time, rng=rng)

    logger.info(f"Genetic cost: {result.best_cost}")
    logger.info(f"Order: {[job.unique_id for job in result.best_ordering]}")

    # Print generation statistics
    logger.info("-" * 80)
    for history in optimizer.history[::50]:
        logger.info(
            f"Gen {history.generation}: "
            f"cost={history.best_cost}/{history.avg_cost:.1f}, "
            f"bred={history.n_bred}, mutated={history.n_mutated}"
        )


def optimize_work_items():
    """Example: Order validated work items and print the result table."""

    logger.info("=" * 80)
    logger.info("EXAMPLE 2: Work items")
    logger.info("=" * 80)

    items = [
        WorkItem(unique_id=1, task_name="Write report", time_est_hours=3, value=6, effort=4),
        WorkItem(unique_id=2, task_name="Fix login bug", time_est_hours=1, value=9, effort=2),
        WorkItem(unique_id=3, task_name="Plan sprint", time_est_hours=2, value=5, effort=1),
        WorkItem(unique_id=4, task_name="Migrate database", time_est_hours=8, value=8, effort=9),
    ]

    result = GeneticOptimizer(GeneticSearchConfig(seed=1)).optimize(items, work_items_cost)
    print(format_result("Genetic Result", result))


def main():
    """Main entry point."""
    optimize_jobs()
    optimize_work_items()


if __name__ == "__main__":
    main()
