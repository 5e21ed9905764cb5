"""Tests for the ProductSale Pydantic model."""

import pytest

from models import PRODUCT_COLUMNS, ProductSale


class TestProductSale:
    def test_parses_source_field_names(self):
        p = ProductSale(id=7, title="T", price=12.5, category="A", sold=True, dateOfSale="2021-03-05")
        assert p.id == 7
        assert p.price == 12.5
        assert p.date_of_sale == "2021-03-05"

    def test_sold_true_is_one(self):
        p = ProductSale(id=1, sold=True)
        assert p.as_row()[PRODUCT_COLUMNS.index("sold")] == 1

    def test_sold_false_is_zero(self):
        p = ProductSale(id=1, sold=False)
        assert p.as_row()[PRODUCT_COLUMNS.index("sold")] == 0

    def test_missing_sold_is_zero(self):
        p = ProductSale(id=1)
        assert p.as_row()[PRODUCT_COLUMNS.index("sold")] == 0

    def test_null_sold_is_zero(self):
        p = ProductSale(id=1, sold=None)
        assert p.as_row()[PRODUCT_COLUMNS.index("sold")] == 0

    def test_missing_fields_default_none(self):
        p = ProductSale(id=1)
        row = p.as_row()
        assert row[PRODUCT_COLUMNS.index("title")] is None
        assert row[PRODUCT_COLUMNS.index("price")] is None
        assert row[PRODUCT_COLUMNS.index("dateOfSale")] is None

    def test_row_order_matches_columns(self):
        p = ProductSale(
            id=3, title="T", price=1.0, description="D", category="C",
            image="I", sold=True, dateOfSale="2021-01-01",
        )
        assert p.as_row() == (3, "T", 1.0, "D", "C", "I", 1, "2021-01-01")

    def test_unknown_fields_ignored(self):
        p = ProductSale(id=1, rating={"rate": 3.9})
        assert not hasattr(p, "rating")

    def test_malformed_price_passed_through(self):
        p = ProductSale(id=1, price="N/A")
        assert p.as_row()[PRODUCT_COLUMNS.index("price")] == "N/A"

    @pytest.mark.parametrize("sold, stored", [(2, 1), ("yes", 1), (0, 0), ("", 0), ([], 0)])
    def test_sold_converted_by_truthiness(self, sold, stored):
        p = ProductSale(id=1, sold=sold)
        assert p.as_row()[PRODUCT_COLUMNS.index("sold")] == stored
