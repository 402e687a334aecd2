"""
This module defines the Pydantic models used for category management.
These models are used for request and response validation and serialization.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, NonNegativeInt

from pos_api.common.schemas import RequestModel, StrictBody
from pos_api.products.schemas import Product


class Category(BaseModel):
    """
    A menu category.

    productCount and products are both optional and independent: listings carry a count,
    menus carry the expanded products. Neither is derived from the other, so serialize with
    ``exclude_unset=True`` to keep fields that were never supplied out of the payload.

    Example:
    {
        "id": 1,
        "name": "Bebidas",
        "productCount": 10
    }
    """
    id: int
    name: str
    productCount: Optional[NonNegativeInt] = None
    products: Optional[List[Product]] = None

    @classmethod
    def with_products(cls, id: int, name: str, products: List[Product]) -> "Category":
        """Build the menu shape: a category with its expanded products and no count."""
        return cls(id=id, name=name, products=list(products))

    @classmethod
    def summary(cls, id: int, name: str, product_count: int) -> "Category":
        """Build the listing shape: a category with a product count and no products."""
        return cls(id=id, name=name, productCount=product_count)

    def product_count_matches(self) -> bool:
        """
        Check that productCount agrees with the expanded products.

        Returns:
            False only when both fields are present and disagree
        """
        if self.productCount is None or self.products is None:
            return True
        return self.productCount == len(self.products)


class CategoryCreate(StrictBody):
    """
    Represents the request data for creating a new category.
    """
    name: str = Field(..., min_length=1, max_length=100, description="Category name")


class CategoryCreateRequest(RequestModel):
    body: CategoryCreate
