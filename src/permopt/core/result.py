"""
Result value object shared by both optimizers.
"""

from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Dict, Generic, Tuple

from .item import T


@dataclass(frozen=True)
class OptimizationResult(Generic[T]):
    """
    Outcome of one optimizer run.

    Attributes:
        best_ordering: Lowest-cost ordering found, stored as a tuple
        best_cost: Cost of best_ordering
        elapsed_time: Wall-clock duration of the whole call
        permutation_count: Size of the candidate set's permutation space (n!)
    """

    best_ordering: Tuple[T, ...]
    best_cost: int
    elapsed_time: timedelta
    permutation_count: float

    def __post_init__(self):
        # Any sequence is accepted; the stored ordering is immutable
        object.__setattr__(self, "best_ordering", tuple(self.best_ordering))

    @property
    def elapsed_ms(self) -> float:
        """Get the elapsed time in milliseconds."""
        return self.elapsed_time.total_seconds() * 1000.0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization (items reduced to their ids)."""
        return {
            "best_ordering": [item.unique_id for item in self.best_ordering],
            "best_cost": self.best_cost,
            "elapsed_ms": self.elapsed_ms,
            "permutation_count": self.permutation_count,
        }

    def __repr__(self) -> str:
        """String representation of the result."""
        return (
            f"OptimizationResult(cost={self.best_cost}, "
            f"items={len(self.best_ordering)}, "
            f"permutations={self.permutation_count:g}, "
            f"elapsed_ms={self.elapsed_ms:.1f})"
        )
