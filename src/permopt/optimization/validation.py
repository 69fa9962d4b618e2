"""
Argument checks shared by the optimizers.

Every check runs before the optimizer draws any randomness or clones any
candidate.
"""

import numbers
from typing import Any, Optional

from ..core.errors import InvalidArgumentError


def validate_search_arguments(candidates: Any, cost_function: Any) -> None:
    """
    Validate the candidate set and cost function.

    Raises:
        InvalidArgumentError: If candidates is None or empty, or cost_function
            is None or not callable
    """
    if candidates is None or len(candidates) < 1:
        raise InvalidArgumentError("candidates cannot be None or empty.")

    if cost_function is None or not callable(cost_function):
        raise InvalidArgumentError("cost_function must be a callable.")


def validate_iteration_count(iteration_count: Optional[int]) -> None:
    """
    Validate a random-search iteration count.

    Raises:
        InvalidArgumentError: Unless iteration_count is an integer >= 1
    """
    if isinstance(iteration_count, bool) or not isinstance(iteration_count, numbers.Integral):
        raise InvalidArgumentError(
            f"iteration_count must be an integer, got {type(iteration_count).__name__}."
        )

    if iteration_count < 1:
        raise InvalidArgumentError("iteration_count must be greater than zero.")
