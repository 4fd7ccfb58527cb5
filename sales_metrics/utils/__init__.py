"""
Utilities package for seller sales metrics.

Exports shared helpers for logging, profiling and money rounding.
Keep this package lightweight and free of domain-specific logic.
"""

from sales_metrics.utils.logging import configure_logging, get_logger
from sales_metrics.utils.numbers import round_money
from sales_metrics.utils.profiler import ProfileStats, profile_block

__all__ = [
    "configure_logging",
    "get_logger",
    "round_money",
    "ProfileStats",
    "profile_block",
]
