"""
permopt: random and genetic search over orderings of uniquely identified items.
"""

from .core import InvalidArgumentError, OptimizationItem, OptimizationResult, permutations
from .optimization import (
    GeneticOptimizer,
    GeneticSearchConfig,
    RandomSearchOptimizer,
    genetic_search,
    random_search,
)

__version__ = "0.1.0"

__all__ = [
    "GeneticOptimizer",
    "GeneticSearchConfig",
    "InvalidArgumentError",
    "OptimizationItem",
    "OptimizationResult",
    "RandomSearchOptimizer",
    "genetic_search",
    "permutations",
    "random_search",
]
