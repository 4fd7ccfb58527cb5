"""
Pytest configuration for seller sales metrics.

Provides fixtures for:
- Small hand-computed datasets for the analyzer
- Settings isolation (cached settings are cleared around each test)
- A generated JSON dataset on disk for loader/CLI/integration tests
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Generator

import pytest

from sales_metrics.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings() -> Generator[None, None, None]:
    """
    Clear the cached Settings so monkeypatched env vars take effect.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def single_sale_data() -> Dict[str, Any]:
    """
    One seller, one product, one record: profit (20 - 5) * 5 = 75.
    """
    return {
        "sellers": [{"id": "s1", "first_name": "A", "last_name": "B"}],
        "products": [{"sku": "p1", "purchase_price": 5}],
        "purchase_records": [
            {
                "seller_id": "s1",
                "total_amount": 100,
                "items": [{"sku": "p1", "sale_price": 20, "quantity": 5, "discount": 0}],
            }
        ],
    }


@pytest.fixture
def ranked_data() -> Dict[str, Any]:
    """
    Five sellers with distinct profits plus one seller without sales and one
    record for an unknown seller.

    Profits: s1=10, s2=50, s3=40, s4=30, s5=20 -> rank s2, s3, s4, s5, s1.
    """

    def record(seller_id: str, sku: str, sale_price: float, quantity: int) -> Dict[str, Any]:
        return {
            "seller_id": seller_id,
            "total_amount": sale_price * quantity,
            "items": [{"sku": sku, "sale_price": sale_price, "quantity": quantity}],
        }

    return {
        "sellers": [
            {"id": "s1", "first_name": "Ivan", "last_name": "Petrov"},
            {"id": "s2", "first_name": "Maria", "last_name": "Ivanova"},
            {"id": "s3", "first_name": "Olga", "last_name": "Smirnova"},
            {"id": "s4", "first_name": "Dmitry", "last_name": "Popov"},
            {"id": "s5", "first_name": "Elena", "last_name": "Sokolova"},
            {"id": "s6", "first_name": "Anna", "last_name": "Kuznetsova"},
        ],
        "products": [
            {"sku": "p1", "purchase_price": 10},
            {"sku": "p2", "purchase_price": 5},
            {"sku": "p3", "purchase_price": 1},
        ],
        "purchase_records": [
            record("s1", "p1", 20, 1),
            record("s2", "p1", 60, 1),
            record("s3", "p2", 25, 2),
            record("unknown", "p1", 1_000, 10),
            record("s4", "p3", 31, 1),
            record("s5", "p2", 25, 1),
        ],
    }


@pytest.fixture
def dataset_path(tmp_path: Path) -> Path:
    """
    Generated dataset written to a temporary JSON file.
    """
    from scripts.generate_data import _generate_dataset, _write_dataset

    path = tmp_path / "dataset.json"
    _write_dataset(path, _generate_dataset(sellers=6, products=15, records=200, seed=7))
    return path


@pytest.fixture
def single_sale_path(tmp_path: Path, single_sale_data: Dict[str, Any]) -> Path:
    path = tmp_path / "single.json"
    path.write_text(json.dumps(single_sale_data), encoding="utf-8")
    return path
