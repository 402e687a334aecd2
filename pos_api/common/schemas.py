"""
This module defines common Pydantic models used across multiple API modules.
These models represent shared data structures to ensure consistency throughout the application.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, TypeVar, Generic, Any, Dict, Annotated

from pydantic import BaseModel, ConfigDict, Field


# Integer identifier as it arrives in a path or query string: coerced from text,
# must be a whole number and at least 1.
PositiveId = Annotated[int, Field(gt=0)]


class RequestModel(BaseModel):
    """
    Base model for request fragments.
    Unknown keys are ignored so that extra query parameters never fail a request.
    """
    model_config = ConfigDict(extra="ignore")


class StrictBody(BaseModel):
    """
    Base model for JSON request bodies.
    Values must already carry their JSON type; "12" is not accepted where a number is expected.
    """
    model_config = ConfigDict(extra="ignore", strict=True)


class JSendStatus(str, Enum):
    """
    JSend status options.
    """
    SUCCESS = "success"
    FAIL = "fail"
    ERROR = "error"


T = TypeVar('T')


class JSendResponse(BaseModel, Generic[T]):
    """
    Base JSend response format as per https://github.com/omniti-labs/jsend
    """
    status: JSendStatus
    data: Optional[T] = None
    message: Optional[str] = None
    code: Optional[int] = None  # For error responses

    @classmethod
    def success(cls, data: Any = None) -> 'JSendResponse':
        """Create a success response with data"""
        return cls(status=JSendStatus.SUCCESS, data=data)

    @classmethod
    def fail(cls, data: Dict[str, Any], code: Optional[int] = None) -> 'JSendResponse':
        """Create a fail response with validation errors or other data-related failures"""
        return cls(status=JSendStatus.FAIL, data=data, code=code)

    @classmethod
    def error(cls, message: str, code: Optional[int] = None, data: Any = None) -> 'JSendResponse':
        """Create an error response for system or unexpected errors"""
        return cls(status=JSendStatus.ERROR, message=message, code=code, data=data)
