from .base import IEXModel
from .stock_profiles import (
    CompanyResponse,
    InsiderRosterResponse,
    InsiderSummaryResponse,
    InsiderTransactionResponse,
    LogoResponse,
)
from .stock_fundamentals import Earning, EarningResponse
from .market_data import StatusResponse, TopsResponse, LastResponse

__all__ = [
    "IEXModel",
    "CompanyResponse",
    "InsiderRosterResponse",
    "InsiderSummaryResponse",
    "InsiderTransactionResponse",
    "LogoResponse",
    "Earning",
    "EarningResponse",
    "StatusResponse",
    "TopsResponse",
    "LastResponse",
]
