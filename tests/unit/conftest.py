"""
Fixtures for unit tests.
"""

import pytest

from permopt.core.population import Population, ScoredOrdering


@pytest.fixture
def sample_population(task_factory, cost_function):
    """Create a scored, unsorted population of five orderings of ids 1..4."""
    layouts = [
        (4, 3, 2, 1),
        (1, 2, 3, 4),
        (2, 1, 4, 3),
        (1, 2, 3, 4),
        (3, 4, 1, 2),
    ]
    members = [
        ScoredOrdering.score(task_factory(*[(uid, uid) for uid in layout]), cost_function)
        for layout in layouts
    ]
    return Population(members)
