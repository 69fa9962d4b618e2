"""
Utility modules for permopt.

This package provides run logging and result rendering.
"""

from .result_table import format_result, format_table
from .search_logger import SearchLogger

__all__ = [
    "SearchLogger",
    "format_result",
    "format_table",
]
