"""
Core data structures for permopt.

Item contract, permutation counting, the population used by the genetic
optimizer and the result object returned by every optimizer.
"""

from .errors import InvalidArgumentError
from .item import OptimizationItem, clone_all, unique_ids
from .permutations import factorial, permutations
from .population import Population, ScoredOrdering
from .result import OptimizationResult

__all__ = [
    "InvalidArgumentError",
    "OptimizationItem",
    "clone_all",
    "unique_ids",
    "factorial",
    "permutations",
    "Population",
    "ScoredOrdering",
    "OptimizationResult",
]
