"""
Fixture loader for work item collections.

Fixtures are JSON files. The candidate collection is either the top-level
value or the value stored under a named property.
"""

import json
import logging
from pathlib import Path
from typing import Any, List, Optional

from pydantic import TypeAdapter

from .work_items import WorkItem

logger = logging.getLogger(__name__)

_WORK_ITEMS = TypeAdapter(List[WorkItem])


def _read_json(path: Path, property_name: Optional[str]) -> Any:
    """Read a JSON file and optionally select one property."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Could not find file at path: {path}")

    with open(path, encoding='utf-8') as f:
        data = json.load(f)

    if property_name:
        if not isinstance(data, dict) or property_name not in data:
            raise ValueError(f"Property '{property_name}' not found in {path}")
        data = data[property_name]

    return data


def load_work_items(path: Path, property_name: Optional[str] = None) -> List[WorkItem]:
    """
    Load and validate one work item collection.

    Args:
        path: Path to the JSON fixture
        property_name: Property holding the collection (top-level value if None)

    Returns:
        Validated work items

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the collection is missing, not a list or empty
        pydantic.ValidationError: If any record fails validation
    """
    data = _read_json(path, property_name)

    if not isinstance(data, list) or not data:
        raise ValueError(f"Expected a non-empty list of work items in {path}")

    items = _WORK_ITEMS.validate_python(data)
    _check_unique_ids(items, path)

    logger.info(f"Loaded {len(items)} work items from {path}")
    return items


def load_work_item_sets(path: Path, property_name: str) -> List[List[WorkItem]]:
    """
    Load several candidate sets stored as a list of collections.

    Args:
        path: Path to the JSON fixture
        property_name: Property holding the list of collections

    Returns:
        One validated list of work items per candidate set
    """
    data = _read_json(path, property_name)

    if not isinstance(data, list) or not data:
        raise ValueError(f"Expected a non-empty list of work item sets in {path}")

    item_sets = []
    for index, record_set in enumerate(data):
        if not isinstance(record_set, list) or not record_set:
            raise ValueError(f"Work item set {index} in {path} must be a non-empty list")
        items = _WORK_ITEMS.validate_python(record_set)
        _check_unique_ids(items, path)
        item_sets.append(items)

    logger.info(f"Loaded {len(item_sets)} work item sets from {path}")
    return item_sets


def _check_unique_ids(items: List[WorkItem], path: Path) -> None:
    """Reject collections that reuse a unique id."""
    seen = set()
    for item in items:
        if item.unique_id in seen:
            raise ValueError(f"Duplicate unique_id {item.unique_id} in {path}")
        seen.add(item.unique_id)
