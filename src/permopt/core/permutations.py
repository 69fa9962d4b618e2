"""
Permutation-space sizing.

The permutation count is reported alongside every optimization result and
caps the genetic optimizer's population size. It never steers the search
itself.
"""

import logging
import math

from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)


def factorial(number: int) -> int:
    """
    Calculate number! by integer accumulation.

    Args:
        number: Non-negative integer

    Returns:
        The exact factorial
    """
    if number < 0:
        raise InvalidArgumentError(f"factorial is undefined for negative numbers, got {number}")

    result = 1
    for i in range(2, number + 1):
        result *= i
    return result


def permutations(object_count: int, sample_count: int) -> float:
    """
    Calculate p(n, r) = n! / (n - r)!.

    The exact integer count is widened to float for reporting. Counts beyond
    the float range saturate to ``math.inf``.

    Args:
        object_count: Number of objects (n)
        sample_count: Number of objects drawn (r)

    Returns:
        Number of ordered arrangements as a float

    Raises:
        InvalidArgumentError: Unless object_count >= sample_count >= 0
    """
    if not (object_count >= sample_count) or not (sample_count >= 0):
        raise InvalidArgumentError(
            f"Ensure object_count >= sample_count >= 0, got "
            f"object_count={object_count}, sample_count={sample_count}"
        )

    count = factorial(object_count) // factorial(object_count - sample_count)

    try:
        return float(count)
    except OverflowError:
        logger.debug(f"p({object_count}, {sample_count}) exceeds float range, reporting inf")
        return math.inf
