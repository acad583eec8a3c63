from typing import Optional
from pydantic import Field

from .base import IEXModel


class StatusResponse(IEXModel):
    status: Optional[str] = None
    version: Optional[str] = None
    time: Optional[int] = None
    current_month_api_calls: Optional[int] = Field(
        default=None, alias="currentMonthAPICalls"
    )


class TopsResponse(IEXModel):
    """Top-of-book quote from the `tops` endpoint."""

    symbol: Optional[str] = None
    sector: Optional[str] = None
    security_type: Optional[str] = None
    bid_price: Optional[float] = None
    bid_size: Optional[int] = None
    ask_price: Optional[float] = None
    ask_size: Optional[int] = None
    last_updated: Optional[int] = None
    last_sale_price: Optional[float] = None
    last_sale_size: Optional[int] = None
    last_sale_time: Optional[int] = None
    volume: Optional[int] = None


class LastResponse(IEXModel):
    symbol: Optional[str] = None
    price: Optional[float] = None
    size: Optional[int] = None
    time: Optional[int] = None
