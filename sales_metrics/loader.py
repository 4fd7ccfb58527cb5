"""
Dataset loading for the CLI.

Reads a UTF-8 JSON document shaped like::

    {
        "sellers": [{"id": "seller_1", "first_name": "...", "last_name": "..."}],
        "products": [{"sku": "SKU_001", "purchase_price": 10.5}],
        "purchase_records": [
            {"seller_id": "seller_1", "total_amount": 120.0,
             "items": [{"sku": "SKU_001", "sale_price": 30, "quantity": 4, "discount": 0}]}
        ]
    }

Any other top-level keys (e.g. "customers") are ignored.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from sales_metrics.domain.models import SalesData
from sales_metrics.exceptions import InvalidInputError
from sales_metrics.utils.logging import get_logger

log = get_logger(__name__)


def load_sales_data(path: Path | str) -> SalesData:
    """
    Parse and validate a dataset file.

    Raises
    ------
    InvalidInputError
        If the file is missing, is not valid JSON, or does not match the schema.
    """
    file_path = Path(path)
    try:
        raw = file_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise InvalidInputError(f"Dataset not found: {file_path}") from exc

    try:
        data = SalesData.model_validate_json(raw)
    except ValidationError as exc:
        raise InvalidInputError(f"Invalid dataset {file_path.name}: {exc}") from exc

    log.info(
        "Dataset loaded",
        extra={
            "path": str(file_path),
            "sellers": len(data.sellers),
            "products": len(data.products),
            "purchase_records": len(data.purchase_records),
        },
    )
    return data


__all__ = ["load_sales_data"]
