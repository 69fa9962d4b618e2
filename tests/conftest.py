"""
Shared fixtures for permopt tests.
"""

from dataclasses import dataclass, replace
from pathlib import Path

import numpy as np
import pytest

from permopt.data.work_items import WorkItem


@dataclass
class Task:
    """Minimal item satisfying the OptimizationItem contract."""

    unique_id: int
    weight: int = 1

    def clone(self) -> "Task":
        return replace(self)


def weighted_cost(ordering):
    """sum(position_index * item.weight)"""
    return sum(i * item.weight for i, item in enumerate(ordering))


@pytest.fixture
def task_factory():
    """Build a list of Tasks from (unique_id, weight) pairs or plain ids."""
    def make(*specs):
        tasks = []
        for spec in specs:
            if isinstance(spec, tuple):
                tasks.append(Task(*spec))
            else:
                tasks.append(Task(spec))
        return tasks
    return make


@pytest.fixture
def four_tasks():
    """Four tasks with ids 1..4 and distinct weights."""
    return [Task(1, 3), Task(2, 7), Task(3, 1), Task(4, 5)]


@pytest.fixture
def cost_function():
    """The weighted position cost."""
    return weighted_cost


@pytest.fixture
def rng():
    """A seeded generator."""
    return np.random.default_rng(42)


@pytest.fixture
def data_dir():
    """Directory holding JSON fixtures."""
    return Path(__file__).parent / "data"


@pytest.fixture
def sample_work_items():
    """Create sample work items for testing."""
    return [
        WorkItem(unique_id=1, task_name="Write report", time_est_hours=3, value=6, effort=4),
        WorkItem(unique_id=2, task_name="Fix login bug", time_est_hours=1, value=9, effort=2),
        WorkItem(unique_id=3, task_name="Plan sprint", time_est_hours=2, value=5, effort=1),
        WorkItem(unique_id=4, task_name="Migrate database", time_est_hours=8, value=8, effort=9),
        WorkItem(unique_id=5, task_name="Review PRs", time_est_hours=2, value=4, effort=3),
    ]
