"""
This module defines the Pydantic models used to validate supplier invoice requests.
"""

from datetime import datetime
from typing import List, Literal, Optional
from uuid import UUID

from pydantic import Field, field_validator
from pydantic_core import PydanticCustomError

from pos_api.common.schemas import RequestModel, StrictBody

InvoiceCategory = Literal["FOOD", "DRINKS", "SUPPLIES", "RENT", "UTILITIES", "MAINTENANCE", "OTHER"]


class InvoiceItemCreate(StrictBody):
    description: str
    quantity: int = Field(..., gt=0)
    unitPrice: float = Field(..., gt=0, allow_inf_nan=False)

    @field_validator("description")
    @classmethod
    def validate_description(cls, value):
        if not value:
            raise PydanticCustomError("value_error", "Description is required")
        return value


class InvoiceCreate(StrictBody):
    """
    Represents the request data for recording a supplier invoice.
    date is sent as text and parsed into a datetime.
    """
    date: datetime = Field(..., strict=False)
    supplier: str
    reference: Optional[str] = None
    category: InvoiceCategory
    notes: Optional[str] = None
    items: List[InvoiceItemCreate]

    @field_validator("supplier")
    @classmethod
    def validate_supplier(cls, value):
        if not value:
            raise PydanticCustomError("value_error", "Supplier is required")
        return value

    @field_validator("items")
    @classmethod
    def validate_items(cls, value):
        if not value:
            raise PydanticCustomError("value_error", "At least one item is required")
        return value


class InvoiceCreateRequest(RequestModel):
    body: InvoiceCreate


class InvoiceQuery(RequestModel):
    """Filters for listing invoices. 'from' is a keyword in Python, hence the alias."""
    from_: Optional[str] = Field(None, alias="from")
    to: Optional[str] = None
    category: Optional[InvoiceCategory] = None


class InvoiceQueryRequest(RequestModel):
    query: InvoiceQuery


class InvoiceIdParams(RequestModel):
    id: UUID


class InvoiceIdRequest(RequestModel):
    params: InvoiceIdParams
