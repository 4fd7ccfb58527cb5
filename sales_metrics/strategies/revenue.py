"""
Built-in revenue strategy: discounted sale price minus cost basis, per unit.
"""

from __future__ import annotations

from sales_metrics.domain.models import Item, Product


def calculate_simple_revenue(item: Item, product: Product) -> float:
    """
    Line profit = (sale_price * (1 - discount / 100) - purchase_price) * quantity.
    """
    discounted_price = item.sale_price * (1 - item.discount / 100)
    return (discounted_price - product.purchase_price) * item.quantity


__all__ = ["calculate_simple_revenue"]
