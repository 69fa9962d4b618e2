"""
Mutation operator for the genetic optimizer.
"""

from typing import List

import numpy as np

from ..core.errors import InvalidArgumentError
from ..core.item import T
from .shuffle import swap_positions


def mutate(ordering: List[T], rng: np.random.Generator) -> bool:
    """
    Swap two randomly chosen positions of an ordering, in place.

    Both positions are drawn independently and uniformly. Orderings with fewer
    than two elements are left untouched and consume no randomness.

    Args:
        ordering: Ordering to mutate
        rng: Random generator for the current optimizer run

    Returns:
        True if two elements were exchanged
    """
    if ordering is None:
        raise InvalidArgumentError("ordering cannot be None")

    if len(ordering) < 2:
        return False

    source_index = int(rng.integers(0, len(ordering)))
    destination_index = int(rng.integers(0, len(ordering)))

    if source_index == destination_index:
        return False

    swap_positions(ordering, source_index, destination_index)
    return True
