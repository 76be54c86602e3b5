"""Shared pytest fixtures for json2dart tests."""

import json

import pytest

from json2dart.core.config import ENV_VARS


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep JSON2DART_* variables from the developer's shell out of tests."""
    for var in ENV_VARS.values():
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def order_sample() -> dict:
    return {
        "order_id": 1001,
        "total": 59.90,
        "paid": True,
        "note": None,
        "customer": {"first_name": "Ada", "loyalty_points": 120},
        "tags": ["express", "gift"],
        "line_items": [{"sku": "A-1", "qty": 2, "unit_price": 9.95}],
        "coupons": [],
    }


@pytest.fixture
def order_text(order_sample) -> str:
    # json.dumps keeps 59.9 / 9.95 with a decimal point and ints without one
    return json.dumps(order_sample, indent=2)


@pytest.fixture
def sample_file(tmp_path, order_text):
    path = tmp_path / "order.json"
    path.write_text(order_text)
    return path
