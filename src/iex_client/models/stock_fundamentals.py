from typing import List, Optional
from pydantic import Field

from .base import IEXModel


class Earning(IEXModel):
    actual_eps: Optional[float] = Field(default=None, alias="actualEPS")
    consensus_eps: Optional[float] = Field(default=None, alias="consensusEPS")
    announce_time: Optional[str] = None
    number_of_estimates: Optional[int] = None
    eps_surprise_dollar: Optional[float] = Field(
        default=None, alias="EPSSurpriseDollar"
    )
    eps_report_date: Optional[str] = Field(default=None, alias="EPSReportDate")
    fiscal_period: Optional[str] = None
    fiscal_end_date: Optional[str] = None
    year_ago: Optional[float] = None
    year_ago_change_percent: Optional[float] = None


class EarningResponse(IEXModel):
    """Payload of `stock/{symbol}/earnings/{last}`."""

    symbol: Optional[str] = None
    earnings: List[Earning] = Field(default_factory=list)
