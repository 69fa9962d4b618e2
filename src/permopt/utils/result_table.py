"""
Plain-text rendering of optimization results.
"""

from numbers import Number
from typing import Any, Dict, List, Optional, Sequence

from ..core.result import OptimizationResult


def _item_to_row(item: Any) -> Dict[str, Any]:
    """Convert a candidate item to a table row."""
    if hasattr(item, "model_dump"):
        return item.model_dump(by_alias=True)
    if hasattr(item, "__dict__"):
        return {k: v for k, v in vars(item).items() if not k.startswith("_")}
    return {"UniqueId": item.unique_id}


def format_table(rows: Sequence[Dict[str, Any]]) -> str:
    """
    Render rows as a bordered text table.

    Numeric cells are right-aligned, everything else left-aligned.

    Args:
        rows: Table rows; the first row's keys are the columns

    Returns:
        The table as a multi-line string ("" for no rows)
    """
    if not rows:
        return ""

    columns = list(rows[0].keys())
    cells = [[row.get(c) for c in columns] for row in rows]
    widths = [
        max(len(str(c)), *(len(str(r[i])) for r in cells))
        for i, c in enumerate(columns)
    ]

    border = "+" + "+".join("-" * (w + 2) for w in widths) + "+"

    def render(values: List[Any], align_numbers: bool) -> str:
        parts = []
        for value, width in zip(values, widths):
            text = str(value)
            if align_numbers and isinstance(value, Number) and not isinstance(value, bool):
                parts.append(f" {text.rjust(width)} ")
            else:
                parts.append(f" {text.ljust(width)} ")
        return "|" + "|".join(parts) + "|"

    lines = [border, render(columns, False), border]
    for values in cells:
        lines.append(render(values, True))
        lines.append(border)

    return "\n".join(lines)


def format_result(name: Optional[str], result: Optional[OptimizationResult]) -> str:
    """
    Render a result summary followed by its best ordering.

    Args:
        name: Display name of the run
        result: Result to render

    Returns:
        Multi-line summary
    """
    if result is None:
        return "A null optimization result was provided."

    lines = [
        f"Name: {name or 'No solution name was provided.'}",
        f"Result Cost: {result.best_cost}",
        f"Permutation Count: {result.permutation_count:g}",
        f"Execution Time (Milliseconds): {result.elapsed_ms:.0f}",
    ]

    if not result.best_ordering:
        lines.append("No schedule was provided.")
    else:
        lines.append(format_table([_item_to_row(item) for item in result.best_ordering]))

    return "\n".join(lines)
