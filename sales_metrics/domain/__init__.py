"""
Domain package for seller sales metrics.

Exports the input and output models used by the analyzer, loader and CLI.
Keep this package focused on data definitions and validation concerns.
"""

from sales_metrics.domain.accumulator import SellerAccumulator
from sales_metrics.domain.models import (
    Item,
    Product,
    PurchaseRecord,
    SalesData,
    Seller,
    SellerReport,
    TopProduct,
)

__all__ = [
    "Item",
    "Product",
    "PurchaseRecord",
    "SalesData",
    "Seller",
    "SellerAccumulator",
    "SellerReport",
    "TopProduct",
]
