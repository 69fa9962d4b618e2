"""
Work item model and scheduling cost.

WorkItem is the sample candidate type: a task with a time estimate, value and
effort score. It satisfies the OptimizationItem contract through its
unique_id field and clone() method.
"""

from fractions import Fraction
from typing import Sequence

from pydantic import BaseModel, ConfigDict, Field


class WorkItem(BaseModel):
    """A schedulable task with range-validated estimates."""

    model_config = ConfigDict(populate_by_name=True)

    unique_id: int = Field(..., alias="UniqueId", description="Each task must be identified uniquely")
    task_name: str = Field(..., alias="TaskName", min_length=1, description="Task name")
    time_est_hours: int = Field(..., alias="TimeEstHours", ge=1, le=8, description="Time estimate (hours)")
    value: int = Field(..., alias="Value", ge=1, le=10, description="Task value (points)")
    effort: int = Field(..., alias="Effort", ge=0, le=10, description="Task effort (points)")

    def clone(self) -> "WorkItem":
        """Return an independent copy with identical field values."""
        return self.model_copy(deep=True)


def work_items_cost(ordering: Sequence[WorkItem]) -> int:
    """
    Score a work item schedule; earlier long tasks cost less.

    Each task contributes round((i + 1/n) * 100 * time_est_hours) for its
    zero-based position i in a schedule of n tasks. Rounding is half-to-even
    on the exact value.

    Args:
        ordering: Scheduled work items

    Returns:
        Integer cost
    """
    count = len(ordering)
    score = 0

    for i, item in enumerate(ordering):
        weight = (i + Fraction(1, count)) * 100
        score += round(weight * item.time_est_hours)

    return score


def weighted_position_cost(ordering: Sequence[WorkItem]) -> int:
    """Sum of position index times value; schedules high-value work first."""
    return sum(i * item.value for i, item in enumerate(ordering))


COST_FUNCTIONS = {
    "time": work_items_cost,
    "value": weighted_position_cost,
}
