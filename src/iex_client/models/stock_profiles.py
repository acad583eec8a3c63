from typing import List, Optional
from pydantic import Field

from .base import IEXModel


class CompanyResponse(IEXModel):
    """Company profile returned by `stock/{symbol}/company`."""

    symbol: Optional[str] = None
    company_name: Optional[str] = None
    exchange: Optional[str] = None
    industry: Optional[str] = None
    website: Optional[str] = None
    description: Optional[str] = None
    ceo: Optional[str] = Field(default=None, alias="CEO")
    security_name: Optional[str] = None
    issue_type: Optional[str] = None
    sector: Optional[str] = None
    primary_sic_code: Optional[int] = None
    employees: Optional[int] = None
    tags: List[str] = Field(default_factory=list)
    address: Optional[str] = None
    address2: Optional[str] = None
    state: Optional[str] = None
    city: Optional[str] = None
    zip: Optional[str] = None
    country: Optional[str] = None
    phone: Optional[str] = None


class InsiderRosterResponse(IEXModel):
    entity_name: Optional[str] = None
    position: Optional[int] = None
    report_date: Optional[int] = None


class InsiderSummaryResponse(IEXModel):
    full_name: Optional[str] = None
    net_transacted: Optional[int] = None
    reported_title: Optional[str] = None
    total_bought: Optional[int] = None
    total_sold: Optional[int] = None


class InsiderTransactionResponse(IEXModel):
    """One row of `stock/{symbol}/insider-transactions`."""

    symbol: Optional[str] = None
    full_name: Optional[str] = None
    reported_title: Optional[str] = None
    effective_date: Optional[int] = None
    filing_date: Optional[str] = None
    transaction_date: Optional[str] = None
    transaction_code: Optional[str] = None
    direct_indirect: Optional[str] = None
    tran_price: Optional[float] = None
    tran_shares: Optional[int] = None
    tran_value: Optional[float] = None
    post_shares: Optional[int] = None
    conversion_or_exercise_price: Optional[float] = None


class LogoResponse(IEXModel):
    url: Optional[str] = None
