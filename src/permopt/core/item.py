"""
Capability contract for candidate items.

Anything the optimizers reorder must expose a stable integer identity and be
able to produce an independent copy of itself. Implementations do not need to
inherit from anything; the contract is structural.
"""

from typing import Callable, List, Protocol, Sequence, TypeVar, runtime_checkable


@runtime_checkable
class OptimizationItem(Protocol):
    """
    A schedulable element with a unique identity.

    Attributes:
        unique_id: Integer identity, unique within one candidate set
    """

    unique_id: int

    def clone(self) -> "OptimizationItem":
        """Return an independent copy with identical field values."""
        ...


T = TypeVar("T", bound=OptimizationItem)

Ordering = List[T]
CostFunction = Callable[[List[T]], int]


def clone_all(candidates: Sequence[T]) -> List[T]:
    """Clone every candidate, preserving order."""
    return [item.clone() for item in candidates]


def unique_ids(ordering: Sequence[OptimizationItem]) -> List[int]:
    """Get the unique ids of an ordering, in position order."""
    return [item.unique_id for item in ordering]
