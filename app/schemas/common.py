# app/schemas/common.py - Response envelopes shared by every endpoint
from pydantic import AfterValidator, BaseModel, Field
from typing import Annotated, Generic, List, Optional, TypeVar

from app.core.errors import utc_timestamp
from app.utils.dates import parse_date_string

T = TypeVar("T")


def _validate_date(v: str) -> str:
    try:
        parse_date_string(v)
    except ValueError:
        raise ValueError("Invalid date format")
    return v.strip()


# Client date string; kept as text and parsed by the services
DateString = Annotated[str, AfterValidator(_validate_date)]


class ApiResponse(BaseModel, Generic[T]):
    success: bool = True
    message: str
    data: Optional[T] = None
    timestamp: str = Field(default_factory=utc_timestamp)


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    error: str
    timestamp: str
    statusCode: Optional[int] = None


class PaginationResult(BaseModel, Generic[T]):
    docs: List[T]
    total: int
    totalAmount: Optional[float] = None
    page: int
    pages: int
    limit: int
    hasNext: bool
    hasPrev: bool


def ok(message: str, data=None) -> dict:
    """Success envelope; ``data`` is omitted when None"""
    body = {"success": True, "message": message, "timestamp": utc_timestamp()}
    if data is not None:
        body["data"] = data
    return body
