"""
Domain models for seller sales metrics.

Inputs (sellers, products, purchase records) are validated into frozen
pydantic models so the aggregation pass can rely on types and defaults.
Extra keys found in real datasets (customers, product names, receipt ids)
are ignored rather than rejected.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

_INPUT_CONFIG = ConfigDict(
    frozen=True,
    populate_by_name=True,
    extra="ignore",
    coerce_numbers_to_str=True,
    allow_inf_nan=False,
)


class Product(BaseModel):
    """
    A product card. `sku` is unique within the products list.
    """

    sku: str = Field(..., description="Stock-keeping unit.")
    purchase_price: float = Field(0.0, ge=0, description="Cost basis per unit.")

    model_config = _INPUT_CONFIG


class Seller(BaseModel):
    """
    A seller card. `id` is unique within the sellers list.
    """

    id: str = Field(..., description="Seller identifier.")
    first_name: str = Field("", description="Seller first name.")
    last_name: str = Field("", description="Seller last name.")

    model_config = _INPUT_CONFIG

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class Item(BaseModel):
    """
    A single line of a purchase record.
    """

    sku: str
    sale_price: float
    quantity: int = Field(..., ge=0)
    discount: float = Field(0.0, ge=0, le=100, description="Discount percentage.")

    model_config = _INPUT_CONFIG

    @field_validator("discount", mode="before")
    @classmethod
    def _null_discount_is_zero(cls, value: Optional[float]) -> float:
        return 0.0 if value is None else value


class PurchaseRecord(BaseModel):
    """
    A receipt attributed to one seller.
    """

    seller_id: str
    total_amount: float
    items: List[Item] = Field(default_factory=list)

    model_config = _INPUT_CONFIG


class SalesData(BaseModel):
    """
    Input container for the aggregator.

    Missing collections default to empty lists; emptiness is rejected by the
    analyzer with a dedicated error rather than by schema validation.
    """

    sellers: List[Seller] = Field(default_factory=list)
    products: List[Product] = Field(default_factory=list)
    purchase_records: List[PurchaseRecord] = Field(default_factory=list)

    model_config = _INPUT_CONFIG


class TopProduct(BaseModel):
    sku: str
    quantity: int

    model_config = ConfigDict(frozen=True)


class SellerReport(BaseModel):
    """
    Per-seller summary emitted by the analyzer, in profit-descending order.
    """

    seller_id: str = Field(..., description="Seller identifier.")
    name: str = Field(..., description="'first_name last_name'.")
    revenue: float = Field(..., description="Revenue rounded to 2 decimals.")
    profit: float = Field(..., description="Profit rounded to 2 decimals.")
    sales_count: int = Field(..., description="Number of matched purchase records.")
    top_products: List[TopProduct] = Field(default_factory=list)
    bonus: float = Field(..., description="Bonus amount rounded to 2 decimals.")

    model_config = ConfigDict(frozen=True)


__all__ = [
    "Item",
    "Product",
    "PurchaseRecord",
    "SalesData",
    "Seller",
    "SellerReport",
    "TopProduct",
]
