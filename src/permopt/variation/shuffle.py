"""
Randomized reordering shared by both optimizers.

The shuffle is a fixed-iteration perturbation: n random pairwise swaps with
indices drawn with replacement. It is not a uniform permutation generator.
"""

from typing import List

import numpy as np

from ..core.errors import InvalidArgumentError
from ..core.item import T


def swap_positions(ordering: List[T], source_index: int, destination_index: int) -> None:
    """
    Exchange two elements of an ordering in place.

    Args:
        ordering: Ordering to modify
        source_index: First position
        destination_index: Second position
    """
    if ordering is None:
        raise InvalidArgumentError("ordering cannot be None")

    if source_index != destination_index:
        ordering[source_index], ordering[destination_index] = (
            ordering[destination_index],
            ordering[source_index],
        )


def shuffle_ordering(ordering: List[T], rng: np.random.Generator) -> List[T]:
    """
    Shuffle an ordering in place by n random swaps.

    Each swap draws both indices independently and uniformly from [0, n);
    swaps whose indices coincide are skipped.

    Args:
        ordering: Ordering to shuffle
        rng: Random generator for the current optimizer run

    Returns:
        The same ordering, for chaining
    """
    n = len(ordering)

    for _ in range(n):
        source_index = int(rng.integers(0, n))
        destination_index = int(rng.integers(0, n))
        swap_positions(ordering, source_index, destination_index)

    return ordering
