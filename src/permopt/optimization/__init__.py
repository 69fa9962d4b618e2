"""
Optimization module for permopt.

This module contains the two search procedures over candidate orderings:
best-of-k random shuffling and the generational genetic search.
"""

from .config import GeneticSearchConfig, GenerationHistory
from .genetic import GeneticOptimizer, genetic_search
from .random_search import RandomSearchOptimizer, random_search

__all__ = [
    "GeneticOptimizer",
    "GeneticSearchConfig",
    "GenerationHistory",
    "RandomSearchOptimizer",
    "genetic_search",
    "random_search",
]
