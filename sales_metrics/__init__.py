"""
Sales Metrics - per-seller performance reports from flat sales records.

Given sellers, products and purchase records, the package computes for every
seller with at least one sale:

- revenue and profit
- sales count
- top products by quantity sold
- a rank-based bonus

Revenue and bonus calculations are pluggable strategies; the package also
ships a JSON loader, a rich table reporter and a typer CLI.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from sales_metrics.analyzer import AnalysisOptions, analyze_sales_data
from sales_metrics.config import Settings, get_settings
from sales_metrics.domain.models import (
    Item,
    Product,
    PurchaseRecord,
    SalesData,
    Seller,
    SellerReport,
    TopProduct,
)
from sales_metrics.exceptions import InvalidInputError
from sales_metrics.loader import load_sales_data
from sales_metrics.strategies import (
    BonusStrategy,
    RevenueStrategy,
    calculate_bonus_by_profit,
    calculate_simple_revenue,
)
from sales_metrics.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Analysis
    "AnalysisOptions",
    "analyze_sales_data",
    "InvalidInputError",
    "load_sales_data",
    # Models
    "Item",
    "Product",
    "PurchaseRecord",
    "SalesData",
    "Seller",
    "SellerReport",
    "TopProduct",
    # Strategies
    "BonusStrategy",
    "RevenueStrategy",
    "calculate_bonus_by_profit",
    "calculate_simple_revenue",
    # Configuration
    "Settings",
    "get_settings",
    # Logging
    "configure_logging",
    "get_logger",
]
