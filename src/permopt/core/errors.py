"""
Exceptions raised by the permopt optimizers.
"""


class InvalidArgumentError(ValueError):
    """
    Raised when an optimizer or helper is called with arguments it cannot use.

    Covers empty or missing candidate sets, a missing cost function,
    non-positive iteration counts and permutation-count arguments that violate
    object_count >= sample_count >= 0. Always raised before any search work
    begins.
    """
