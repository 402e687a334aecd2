"""
This module defines the Pydantic models used for product management.
These models are used for request and response validation and serialization.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

from pos_api.common.schemas import PositiveId, RequestModel, StrictBody


class Product(BaseModel):
    """
    A menu product as exposed to API consumers.
    categoryId refers to the owning category; its existence is checked by the catalog store.
    """
    id: int
    name: str
    price: float
    active: bool
    categoryId: int


class ProductIdParams(RequestModel):
    id: PositiveId


class ProductCreate(StrictBody):
    """
    Represents the request data for creating a new product.
    New products are always created active.
    """
    name: str = Field(..., min_length=1, max_length=100)
    price: float = Field(..., gt=0, allow_inf_nan=False)
    categoryId: int = Field(..., gt=0)


class ProductUpdate(StrictBody):
    """
    Represents the request data for updating an existing product.
    All fields are optional as only provided fields will be updated.
    """
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    price: Optional[float] = Field(None, gt=0, allow_inf_nan=False)
    active: Optional[bool] = None
    categoryId: Optional[int] = Field(None, gt=0)

    @field_validator("name", "price", "active", "categoryId")
    @classmethod
    def reject_null(cls, value):
        """Omitting a field leaves it unchanged; sending null is an error."""
        if value is None:
            raise PydanticCustomError("value_error", "Value must not be null")
        return value


class ProductActive(StrictBody):
    active: bool


class ProductIdRequest(RequestModel):
    params: ProductIdParams


class ProductCreateRequest(RequestModel):
    body: ProductCreate


class ProductUpdateRequest(RequestModel):
    params: ProductIdParams
    body: ProductUpdate


class ProductActiveRequest(RequestModel):
    params: ProductIdParams
    body: ProductActive
