"""
Breeding operator for the genetic optimizer.

Breeding here is single-point repair rather than crossover: the child is
moved one swap closer to the parent at the first position where they
disagree.
"""

import logging
from typing import List, Optional

from ..core.item import T
from .shuffle import swap_positions

logger = logging.getLogger(__name__)


def _index_of(ordering: List[T], unique_id: int) -> Optional[int]:
    """Find the position of the item with the given unique id."""
    for index, item in enumerate(ordering):
        if item.unique_id == unique_id:
            return index
    return None


def breed(parent: List[T], child: List[T]) -> bool:
    """
    Breed the first divergence of parent into child, in place.

    Walks both orderings in lockstep. At the first position whose unique ids
    differ, the child's item at that slot is swapped with the child's item
    carrying the parent's id for that slot. Only one repair is made per call.

    Args:
        parent: Parent ordering (not modified)
        child: Child ordering (modified in place)

    Returns:
        True if a repair swap was made, False if breeding was a no-op
    """
    if parent is None or child is None or len(parent) < 2 or len(child) < 2:
        return False

    for parent_item, child_item in zip(parent, child):
        if parent_item.unique_id != child_item.unique_id:
            source_index = _index_of(child, child_item.unique_id)
            destination_index = _index_of(child, parent_item.unique_id)

            if destination_index is None:
                # Parent carries an id the child does not; nothing to repair toward
                logger.debug(f"Unique id {parent_item.unique_id} missing from child, skipping breed")
                return False

            swap_positions(child, source_index, destination_index)
            return True

    return False
