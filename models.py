"""
Pydantic data models for the product transaction statistics system.

A ProductSale is one element of the remote seed dataset and one row of the
`products` table. Values are passed through unvalidated: missing fields are
stored as NULL and malformed ones reach SQLite as they are.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any


# Column order of the products table
PRODUCT_COLUMNS = (
    "id", "title", "price", "description",
    "category", "image", "sold", "dateOfSale",
)


class ProductSale(BaseModel):
    """
    A single product transaction as published by the seed dataset.
    `sold` is persisted as 0/1 by truthiness.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Any = None
    title: Any = None
    price: Any = None
    description: Any = None
    category: Any = None
    image: Any = None
    sold: Any = False
    date_of_sale: Any = Field(default=None, alias="dateOfSale")

    def as_row(self) -> tuple:
        """Row tuple in PRODUCT_COLUMNS order."""
        return (
            self.id,
            self.title,
            self.price,
            self.description,
            self.category,
            self.image,
            1 if self.sold else 0,
            self.date_of_sale,
        )
