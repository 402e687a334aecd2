"""
This module defines the Pydantic models used to validate order requests.
"""

import re
from enum import Enum
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_core import PydanticCustomError

from pos_api.common.schemas import PositiveId, RequestModel, StrictBody

PICKUP_TIME_PATTERN = re.compile(r"^(\d{2}):(\d{2})$")

MAX_ITEM_QUANTITY = 20
MAX_PAGE_SIZE = 50


class OrderStatus(str, Enum):
    RECEIVED = "RECEIVED"
    PREPARING = "PREPARING"
    READY = "READY"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


class OrderIdParams(RequestModel):
    id: PositiveId


class OrderIdRequest(RequestModel):
    """
    Path parameters for endpoints addressing a single order, e.g. GET /orders/{id}.
    The id arrives as text and is coerced to a positive integer.
    """
    params: OrderIdParams


class OrderItemCreate(StrictBody):
    name: str = Field(..., min_length=1, max_length=100)
    quantity: int = Field(..., gt=0, le=MAX_ITEM_QUANTITY)


class OrderCreate(StrictBody):
    """
    Represents the request data for placing a new order.
    """
    customerName: str = Field(..., max_length=50)
    customerPhone: Optional[str] = Field(None, min_length=7, max_length=20)
    pickupTime: str
    items: List[OrderItemCreate]

    @field_validator("customerName")
    @classmethod
    def validate_customer_name(cls, value):
        if not value:
            raise PydanticCustomError("value_error", "Customer name is required")
        return value

    @field_validator("pickupTime")
    @classmethod
    def validate_pickup_time(cls, value):
        """Accept HH:MM with hours 00-23 and minutes 00-59."""
        match = PICKUP_TIME_PATTERN.match(value)
        if not match or int(match.group(1)) > 23 or int(match.group(2)) > 59:
            raise PydanticCustomError("value_error", "Invalid pickup time")
        return value

    @field_validator("items")
    @classmethod
    def validate_items(cls, value):
        if not value:
            raise PydanticCustomError("value_error", "Order must contain at least one item")
        return value


class OrderCreateRequest(RequestModel):
    body: OrderCreate


class OrderListQuery(RequestModel):
    page: int = Field(1, gt=0)
    limit: int = Field(10, gt=0, le=MAX_PAGE_SIZE)
    status: Optional[OrderStatus] = None


class OrderListRequest(RequestModel):
    query: OrderListQuery
