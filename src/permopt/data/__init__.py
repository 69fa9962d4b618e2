"""
Sample work item data for permopt.
"""

from .fixture_loader import load_work_item_sets, load_work_items
from .work_items import COST_FUNCTIONS, WorkItem, weighted_position_cost, work_items_cost

__all__ = [
    "COST_FUNCTIONS",
    "WorkItem",
    "load_work_item_sets",
    "load_work_items",
    "weighted_position_cost",
    "work_items_cost",
]
