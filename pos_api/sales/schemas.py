"""
This module defines the Pydantic models used to validate sales report requests.
"""

from enum import Enum
from typing import Optional

from pos_api.common.schemas import RequestModel


class SalesPeriod(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


class SaleSource(str, Enum):
    ORDER = "ORDER"
    MANUAL = "MANUAL"


class SalesQuery(RequestModel):
    """
    Query string of a sales report request.

    type is required. date is passed through as given, its format is interpreted by the report
    itself. date and source stay unset when absent; use ``model_dump(exclude_unset=True)`` to
    forward only what the caller supplied.
    """
    type: SalesPeriod
    date: Optional[str] = None
    source: Optional[SaleSource] = None


class SalesQueryRequest(RequestModel):
    query: SalesQuery
