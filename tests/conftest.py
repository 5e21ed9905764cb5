"""Shared fixtures for the test suite."""

import pytest
from unittest.mock import MagicMock

from database import DatabaseManager
from models import ProductSale


# March sales: ids 1, 2, 3, 4, 7
SAMPLE_PRODUCTS = [
    {"id": 1, "title": "Fjallraven Backpack", "price": 150, "description": "Fits 15 inch laptops",
     "category": "men's clothing", "image": "https://img.test/1.jpg", "sold": True,
     "dateOfSale": "2021-03-15T20:29:54+05:30"},
    {"id": 2, "title": "USB Cable", "price": 50.5, "description": "1m",
     "category": "electronics", "image": "https://img.test/2.jpg", "sold": False,
     "dateOfSale": "2022-03-01T00:00:00Z"},
    {"id": 3, "title": "Monitor", "price": 999, "description": "27 inch",
     "category": "electronics", "image": "https://img.test/3.jpg", "sold": True,
     "dateOfSale": "2021-03-31T23:59:59+05:30"},
    {"id": 4, "title": "Silver Ring", "price": 100, "description": "",
     "category": "jewelery", "image": "https://img.test/4.jpg", "sold": False,
     "dateOfSale": "2022-03-10"},
    {"id": 5, "title": "Hard Drive", "price": 250, "description": "2TB",
     "category": "electronics", "image": "https://img.test/5.jpg", "sold": True,
     "dateOfSale": "2021-07-04T08:00:00+05:30"},
    {"id": 6, "title": "Gold Bracelet", "price": 900, "description": "",
     "category": "jewelery", "image": "https://img.test/6.jpg", "sold": False,
     "dateOfSale": "2022-11-20T12:00:00+05:30"},
    {"id": 7, "title": "Rain Jacket", "price": 100.01, "description": "Windbreaker",
     "category": "women's clothing", "image": "https://img.test/7.jpg", "sold": False,
     "dateOfSale": "2021-03-05T09:15:00+05:30"},
]


@pytest.fixture
def sample_products():
    """Raw seed dataset (list of dicts, as served by the remote URL)."""
    return [dict(p) for p in SAMPLE_PRODUCTS]


@pytest.fixture
def sample_product():
    """Factory fixture: call with overrides to get a ProductSale."""
    def _make(**overrides):
        data = {
            "id": 1,
            "title": "Test Product",
            "price": 150.0,
            "description": "Test description",
            "category": "A",
            "image": "https://img.test/p.jpg",
            "sold": True,
            "dateOfSale": "2023-03-15",
        }
        data.update(overrides)
        return ProductSale(**data)
    return _make


@pytest.fixture
def tmp_db(tmp_path):
    """Fresh DatabaseManager with the products table, in tmp_path."""
    db = DatabaseManager(db_path=str(tmp_path / "test.db"))
    db.ensure_schema()
    yield db
    db.close()


@pytest.fixture
def seeded_db(tmp_db, sample_products):
    tmp_db.insert_products([ProductSale(**p) for p in sample_products])
    return tmp_db


@pytest.fixture
def mock_response():
    """Factory for mock HTTP responses."""
    def _make(status_code=200, json_data=None):
        resp = MagicMock()
        resp.status_code = status_code
        resp.json.return_value = json_data
        return resp
    return _make
